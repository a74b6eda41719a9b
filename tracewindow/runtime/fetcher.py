"""Page fetching: the single-request leaf of the load pipeline.

Architecture:
    PageFetcher is a Protocol so the engine can run against any
    cursor-paginated source. ODataPageFetcher is the concrete Dataverse Web
    API implementation: the first page is addressed by entity set + query
    options; continuation pages are addressed by the ``@odata.nextLink`` URL
    the server returned, which already encodes the query.

Design Decision:
    Impersonation is an instance attribute rather than process-wide state, so
    two viewers (or two tests) never share a caller id by accident.
"""

from __future__ import annotations

import logging
from typing import Protocol

from ..core.config import ODATA_API_PATH, TRACE_ENTITY_SET
from ..models.page import Page
from ..utils.http import HTTPClient

logger = logging.getLogger(__name__)


class PageFetcher(Protocol):
    """Fetches one remote page.

    Implementations must preserve total order across pages for a fixed query
    and propagate failures as exceptions; the engine does not retry.
    """

    async def fetch_page(self, query: str, page_size: int, cursor: str | None = None) -> Page:
        """Fetch the first page of ``query``, or the page ``cursor`` points at.

        Args:
            query: Encoded query options for the first page
            page_size: Maximum records the server should return
            cursor: Continuation token from a previous page, or None

        Returns:
            Page with records and the next cursor (None at end of sequence)
        """
        ...


class ODataPageFetcher:
    """Dataverse Web API implementation of PageFetcher."""

    def __init__(
        self,
        client_url: str,
        *,
        http: HTTPClient | None = None,
        entity_set: str = TRACE_ENTITY_SET,
        impersonated_user_id: str | None = None,
        access_token: str | None = None,
    ) -> None:
        """Initialize fetcher.

        Args:
            client_url: Organization URL, e.g. ``https://org.crm.dynamics.com``
            http: Shared HTTPClient (a private one is created and owned if None)
            entity_set: Entity set name of the collection
            impersonated_user_id: Caller id sent as ``MSCRMCallerID``
            access_token: Bearer token for the Authorization header
        """
        self._base_url = f"{client_url.rstrip('/')}{ODATA_API_PATH}"
        self._entity_set = entity_set
        self._owns_http = http is None
        self._http = http or HTTPClient()
        self.impersonated_user_id = impersonated_user_id
        self.access_token = access_token

    def build_url(self, query: str, cursor: str | None = None) -> str:
        if cursor:
            return cursor
        if query and not query.startswith("?"):
            query = f"?{query}"
        return f"{self._base_url}/{self._entity_set}{query}"

    def build_headers(self, page_size: int) -> dict[str, str]:
        headers = {
            "OData-MaxVersion": "4.0",
            "OData-Version": "4.0",
            "Accept": "application/json",
            "Content-Type": "application/json; charset=utf-8",
            "Prefer": f"odata.maxpagesize={page_size}",
        }
        if self.impersonated_user_id:
            headers["MSCRMCallerID"] = self.impersonated_user_id
        if self.access_token:
            headers["Authorization"] = f"Bearer {self.access_token}"
        return headers

    async def fetch_page(self, query: str, page_size: int, cursor: str | None = None) -> Page:
        url = self.build_url(query, cursor)
        logger.debug(f"Fetching page: {url} (page_size={page_size})")
        payload = await self._http.get_json(url, headers=self.build_headers(page_size))
        return Page.from_odata(payload)

    async def close(self) -> None:
        """Close the HTTP client if this fetcher created it."""
        if self._owns_http:
            await self._http.close()

    async def __aenter__(self) -> ODataPageFetcher:
        return self

    async def __aexit__(self, exc_type, exc_val, exc_tb) -> None:
        await self.close()
