"""Batch loading: bounded runs of consecutive remote pages.

This module provides the BatchLoader class that walks a remote cursor for
up to K pages, accumulating records, and hands back the whole batch or
nothing.
"""

from __future__ import annotations

from collections.abc import AsyncIterator
from time import perf_counter
from typing import Any

from ...core.exceptions import BatchLoadError
from ..fetcher import PageFetcher
from .definitions import BatchPolicy, BatchResult
from .telemetry import log_batch_complete, log_batch_error, log_batch_page

_UNSET: Any = object()


class BatchLoader:
    """Assembles batches of pages from a PageFetcher.

    A batch is all-or-nothing: records are accumulated locally and only
    returned once every page of the batch succeeded, so a caller committing
    the result never observes a half-applied batch.
    """

    def __init__(self, fetcher: PageFetcher, policy: BatchPolicy | None = None) -> None:
        """Initialize batch loader.

        Args:
            fetcher: Source of individual pages
            policy: Page size and batch cap (defaults to 250 x 4)
        """
        self._fetcher = fetcher
        self._policy = policy or BatchPolicy()

    @property
    def policy(self) -> BatchPolicy:
        return self._policy

    async def load_batch(
        self,
        query: str,
        start_cursor: str | None = None,
        *,
        max_pages: int | None = _UNSET,
    ) -> BatchResult:
        """Fetch up to ``max_pages`` pages starting at ``start_cursor``.

        Args:
            query: Encoded query options (used when start_cursor is None)
            start_cursor: Cursor to resume from, None for the first page
            max_pages: Page cap for this call; None means no cap. Defaults
                to the policy's cap.

        Returns:
            BatchResult with the accumulated records and the cursor at exit

        Raises:
            BatchLoadError: If any page fails; nothing is returned
        """
        if max_pages is _UNSET:
            max_pages = self._policy.max_pages

        records: list[Any] = []
        cursor = start_cursor
        pages = 0
        batch_start = perf_counter()

        while max_pages is None or pages < max_pages:
            page_start = perf_counter()
            try:
                page = await self._fetcher.fetch_page(query, self._policy.page_size, cursor)
            except Exception as e:
                log_batch_error(
                    page_index=pages,
                    records_discarded=len(records),
                    error_type=type(e).__name__,
                    error_message=str(e),
                )
                raise BatchLoadError(
                    str(e) or type(e).__name__,
                    pages_completed=pages,
                    records_discarded=len(records),
                    status_code=getattr(e, "status_code", None),
                ) from e

            pages += 1
            records.extend(page.records)
            cursor = page.next_cursor
            log_batch_page(
                page_index=pages - 1,
                records=len(page.records),
                has_more=page.has_more,
                latency_ms=(perf_counter() - page_start) * 1000.0,
            )

            if cursor is None:
                break

        result = BatchResult(
            records=records,
            next_cursor=cursor,
            pages_fetched=pages,
            start_cursor=start_cursor,
        )
        log_batch_complete(result=result, latency_ms=(perf_counter() - batch_start) * 1000.0)
        return result

    async def load_remaining(self, query: str, cursor: str | None) -> AsyncIterator[BatchResult]:
        """Yield capped batches until the remote cursor is exhausted.

        Each yielded batch is complete on its own; a failure raises
        BatchLoadError after the batches already yielded.

        Args:
            query: Encoded query options
            cursor: Cursor to resume from; None yields nothing
        """
        while cursor is not None:
            batch = await self.load_batch(query, cursor)
            cursor = batch.next_cursor
            yield batch
