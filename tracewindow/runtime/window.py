"""Locally accumulated superset of fetched records for the current query."""

from __future__ import annotations

import math
from collections.abc import Sequence
from typing import Any

from .batching import BatchResult


class WindowCache:
    """Append-only record window plus the stored continuation cursor.

    ``has_more`` is derived from ``cursor`` so the two can never disagree.
    The cache is cleared exactly when a new query begins and is only ever
    mutated with complete batches.
    """

    def __init__(self) -> None:
        self._records: list[Any] = []
        self._cursor: str | None = None

    def __len__(self) -> int:
        return len(self._records)

    @property
    def records(self) -> Sequence[Any]:
        return tuple(self._records)

    @property
    def cursor(self) -> str | None:
        return self._cursor

    @property
    def has_more(self) -> bool:
        return self._cursor is not None

    def clear(self) -> None:
        self._records = []
        self._cursor = None

    def replace(self, batch: BatchResult) -> None:
        """Start a new window from a first batch."""
        self._records = list(batch.records)
        self._cursor = batch.next_cursor

    def extend(self, batch: BatchResult) -> None:
        """Append a continuation batch."""
        self._records.extend(batch.records)
        self._cursor = batch.next_cursor

    def total_pages(self, page_size: int) -> int:
        if page_size < 1:
            raise ValueError("page_size must be >= 1")
        return max(1, math.ceil(len(self._records) / page_size))

    def page_slice(self, page: int, page_size: int) -> tuple[Any, ...]:
        """Records of one-based ``page``: ``records[(page-1)*size : page*size]``."""
        start = (page - 1) * page_size
        return tuple(self._records[start : start + page_size])
