"""HTTP client helper."""

from __future__ import annotations

import asyncio
import json
import logging
from collections.abc import Callable
from typing import Any

import aiohttp

from ..core.exceptions import TransportError
from .odata import parse_error_message

logger = logging.getLogger(__name__)

ResponseHook = Callable[[aiohttp.ClientResponse], None]


class HTTPClient:
    """Async HTTP client wrapper."""

    def __init__(self, base_url: str | None = None, timeout: float = 30.0) -> None:
        self.base_url = base_url
        self.timeout = aiohttp.ClientTimeout(total=timeout)
        self._session: aiohttp.ClientSession | None = None
        self._response_hooks: list[ResponseHook] = []

    @property
    def session(self) -> aiohttp.ClientSession:
        """Get or create session."""
        if self._session is None or self._session.closed:
            self._session = aiohttp.ClientSession(timeout=self.timeout)
        return self._session

    def add_response_hook(self, hook: ResponseHook) -> None:
        """Register a callable invoked with every response before it is read."""
        self._response_hooks.append(hook)

    def _resolve(self, url: str) -> str:
        # If base_url is set and url is relative, combine them
        if self.base_url and not url.startswith("http"):
            return f"{self.base_url}{url}"
        return url

    async def get_json(
        self,
        url: str,
        params: dict[str, Any] | None = None,
        headers: dict[str, str] | None = None,
    ) -> dict[str, Any]:
        """GET request returning the decoded JSON body.

        An empty body decodes to ``{}``.

        Raises:
            TransportError: On non-2xx status, connection failure, timeout,
                or a body that is not valid JSON
        """
        url = self._resolve(url)
        try:
            async with self.session.get(url, params=params, headers=headers) as response:
                for hook in self._response_hooks:
                    try:
                        hook(response)
                    except Exception as e:
                        logger.warning(f"Response hook failed: {e}")
                text = await response.text()
                if response.status >= 400:
                    message = parse_error_message(text) or f"HTTP {response.status} {response.reason}"
                    raise TransportError(message, status_code=response.status, body=text)
        except aiohttp.ClientError as e:
            raise TransportError(f"Request failed: {e}") from e
        except asyncio.TimeoutError as e:
            raise TransportError(f"Request timed out after {self.timeout.total}s") from e

        if not text:
            return {}
        try:
            payload = json.loads(text)
        except ValueError as e:
            raise TransportError("Response body is not valid JSON", body=text) from e
        if not isinstance(payload, dict):
            raise TransportError("Response body is not a JSON object", body=text)
        return payload

    async def close(self) -> None:
        """Close session."""
        if self._session and not self._session.closed:
            await self._session.close()

    async def __aenter__(self) -> HTTPClient:
        """Context manager entry."""
        return self

    async def __aexit__(self, exc_type, exc_val, exc_tb) -> None:
        """Context manager exit."""
        await self.close()
