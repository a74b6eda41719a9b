"""Read-only view model handed to the renderer."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any

from ..core.messages import NO_RECORDS_LABEL


@dataclass(frozen=True)
class ViewSnapshot:
    """Everything a renderer needs to draw the current page.

    Attributes:
        records: Records of the current client page, in remote order
        current_page: One-based current page
        total_pages: Pages computable from cached records (at least 1)
        page_size: Records per client page
        total_records: Records cached for the current query
        has_more: Remote cursor not yet exhausted
        loading: A load for the current query is in flight
        placeholder: The loading placeholder should replace the list
        error: Inline error message of the last failed load, if any
        live_enabled: Live refresh is on
        live_interval_ms: Live refresh period
    """

    records: tuple[Any, ...]
    current_page: int
    total_pages: int
    page_size: int
    total_records: int
    has_more: bool
    loading: bool = False
    placeholder: bool = False
    error: str | None = None
    live_enabled: bool = False
    live_interval_ms: int = 0

    @property
    def first_index(self) -> int:
        """One-based index of the first record on this page (0 when empty)."""
        if not self.total_records:
            return 0
        return (self.current_page - 1) * self.page_size + 1

    @property
    def last_index(self) -> int:
        if not self.total_records:
            return 0
        return min(self.first_index + self.page_size - 1, self.total_records)

    @property
    def range_label(self) -> str:
        """E.g. ``"26-50 of 1000+"``; ``+`` while more data is available."""
        if not self.total_records:
            return NO_RECORDS_LABEL
        total = f"{self.total_records}+" if self.has_more else str(self.total_records)
        return f"{self.first_index}-{self.last_index} of {total}"

    @property
    def page_label(self) -> str:
        pages = f"{self.total_pages}+" if self.has_more else str(self.total_pages)
        return f"of {pages}"

    @property
    def can_go_first(self) -> bool:
        return self.current_page > 1

    @property
    def can_go_previous(self) -> bool:
        return self.current_page > 1

    @property
    def can_go_next(self) -> bool:
        return self.current_page < self.total_pages or self.has_more

    @property
    def can_go_last(self) -> bool:
        return self.current_page < self.total_pages or self.has_more
