"""Client-side paging over the window cache.

PageController maps a fixed page size onto the WindowCache and decides when
navigation needs more data. It never talks to the remote source itself:
the engine supplies ``extend`` (one more batch) and ``drain`` (everything
left) callbacks, which run under the engine's load serialization.
"""

from __future__ import annotations

import logging
from collections.abc import Awaitable, Callable
from typing import Any

from ..core.config import MAX_PAGE_SIZE, MIN_PAGE_SIZE
from ..core.exceptions import InvalidInputError
from ..core.messages import page_number_out_of_range, page_size_out_of_range
from ..models.state import PaginationState
from .window import WindowCache

logger = logging.getLogger(__name__)

LoadMore = Callable[[], Awaitable[bool]]


def _parse_int(value: Any, field: str, message: str) -> int:
    if isinstance(value, bool):
        raise InvalidInputError(message, field=field, value=value)
    if isinstance(value, int):
        return value
    if isinstance(value, str):
        try:
            return int(value.strip(), 10)
        except ValueError:
            pass
    raise InvalidInputError(message, field=field, value=value)


def parse_page_size(value: Any) -> int:
    """Parse and range-check a page size.

    Raises:
        InvalidInputError: Non-numeric or outside [1, 1000]
    """
    message = page_size_out_of_range(MIN_PAGE_SIZE, MAX_PAGE_SIZE)
    size = _parse_int(value, "page_size", message)
    if not MIN_PAGE_SIZE <= size <= MAX_PAGE_SIZE:
        raise InvalidInputError(message, field="page_size", value=value)
    return size


def parse_page_number(value: Any, total_pages: int) -> int:
    """Parse and range-check a page number against ``total_pages``.

    Raises:
        InvalidInputError: Non-numeric or outside [1, total_pages]
    """
    message = page_number_out_of_range(total_pages)
    page = _parse_int(value, "page", message)
    if not 1 <= page <= total_pages:
        raise InvalidInputError(message, field="page", value=value)
    return page


class PageController:
    """Page navigation over a WindowCache."""

    def __init__(
        self,
        cache: WindowCache,
        state: PaginationState,
        *,
        extend: LoadMore,
        drain: LoadMore,
    ) -> None:
        """Initialize page controller.

        Args:
            cache: Window of records for the current query
            state: Page size and current page (mutated in place)
            extend: Loads one more batch; returns True if the cache changed
            drain: Loads until the cursor is exhausted; True if the cache changed
        """
        self._cache = cache
        self._state = state
        self._extend = extend
        self._drain = drain

    @property
    def state(self) -> PaginationState:
        return self._state

    @property
    def total_pages(self) -> int:
        return self._cache.total_pages(self._state.page_size)

    def current_slice(self) -> tuple[Any, ...]:
        return self._cache.page_slice(self._state.current_page, self._state.page_size)

    def go_to_first_page(self) -> None:
        self._state.current_page = 1

    async def change_page(self, delta: int) -> bool:
        """Move one page back or forward.

        Moving forward onto (or past) the last cached page while the remote
        cursor is live loads one more batch first.

        Args:
            delta: -1 or +1

        Returns:
            True if the current page changed
        """
        if delta not in (-1, 1):
            raise ValueError("delta must be -1 or +1")

        new_page = self._state.current_page + delta

        if delta > 0 and new_page >= self.total_pages and self._cache.has_more:
            await self._extend()
            if new_page <= self.total_pages:
                self._state.current_page = new_page
                return True
            return False

        if new_page < 1 or new_page > self.total_pages:
            return False

        self._state.current_page = new_page
        return True

    def go_to_page(self, value: Any) -> int:
        """Jump to a page already covered by the cache. Never fetches.

        Raises:
            InvalidInputError: Non-numeric or out-of-range input; the current
                page is left unchanged
        """
        page = parse_page_number(value, self.total_pages)
        self._state.current_page = page
        return page

    async def go_to_last_page(self) -> int:
        """Drain the remote cursor if needed, then jump to the last page."""
        if self._cache.has_more:
            await self._drain()
        self._state.current_page = self.total_pages
        return self._state.current_page

    def change_page_size(self, value: Any) -> int:
        """Change the client page size and return to page 1. Never fetches.

        Raises:
            InvalidInputError: Non-numeric or outside [1, 1000]; the page size
                is left unchanged
        """
        size = parse_page_size(value)
        self._state.page_size = size
        self._state.current_page = 1
        logger.debug(f"Page size changed to {size} ({self.total_pages} pages cached)")
        return size
