"""Batch policy and result structures."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any

from ...core.config import FETCH_PAGE_SIZE, MAX_BATCH_PAGES


@dataclass(frozen=True)
class BatchPolicy:
    """How a batch is assembled from remote pages.

    Attributes:
        page_size: Records requested per remote call
        max_pages: Pages per batch (None = no cap, fetch until exhausted)
    """

    page_size: int = FETCH_PAGE_SIZE
    max_pages: int | None = MAX_BATCH_PAGES

    def __post_init__(self) -> None:
        """Validate batch policy configuration."""
        if self.page_size <= 0:
            raise ValueError("BatchPolicy page_size must be positive")
        if self.max_pages is not None and self.max_pages <= 0:
            raise ValueError("BatchPolicy max_pages must be positive or None")


@dataclass
class BatchResult:
    """Result of one batch.

    Attributes:
        records: Records of all pages in the batch, in remote order
        next_cursor: Cursor to resume from (None = remote exhausted)
        pages_fetched: Number of remote pages fetched
        start_cursor: Cursor the batch started from (None = first page)
    """

    records: list[Any] = field(default_factory=list)
    next_cursor: str | None = None
    pages_fetched: int = 0
    start_cursor: str | None = None

    @property
    def has_more(self) -> bool:
        return self.next_cursor is not None

    @property
    def total_records(self) -> int:
        return len(self.records)
