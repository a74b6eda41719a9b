"""Mutable pagination and live-refresh state."""

from __future__ import annotations

from dataclasses import dataclass

from ..core.config import DEFAULT_LIVE_INTERVAL_MS, DEFAULT_PAGE_SIZE, MAX_PAGE_SIZE, MIN_PAGE_SIZE


@dataclass
class PaginationState:
    """Client-side page position.

    Attributes:
        page_size: Records per client page, within [1, 1000]
        current_page: One-based page index
    """

    page_size: int = DEFAULT_PAGE_SIZE
    current_page: int = 1

    def __post_init__(self) -> None:
        if not MIN_PAGE_SIZE <= self.page_size <= MAX_PAGE_SIZE:
            raise ValueError(f"page_size must be between {MIN_PAGE_SIZE} and {MAX_PAGE_SIZE}")
        if self.current_page < 1:
            raise ValueError("current_page must be >= 1")

    def reset(self) -> None:
        self.current_page = 1


@dataclass
class LiveConfig:
    """Live-refresh settings. Created disabled."""

    enabled: bool = False
    interval_ms: int = DEFAULT_LIVE_INTERVAL_MS

    def __post_init__(self) -> None:
        if self.interval_ms <= 0:
            raise ValueError("interval_ms must be positive")
