"""Shared engine constants.

This module centralizes page sizes, batch caps, live-refresh presets and the
OData endpoint layout so the engine and the fetcher can stay small and focused.
"""

from __future__ import annotations

from dataclasses import dataclass

# Records requested per individual remote call (sent as odata.maxpagesize)
FETCH_PAGE_SIZE = 250

# Batch cap K: remote pages fetched per load step (4 x 250 = ~1000 records)
MAX_BATCH_PAGES = 4

# Client-side page sizes offered by the page-size selector
PAGE_SIZE_OPTIONS: tuple[int, ...] = (25, 50, 100, 250)
DEFAULT_PAGE_SIZE = 25
MIN_PAGE_SIZE = 1
MAX_PAGE_SIZE = 1000

# Live-refresh interval presets (milliseconds)
LIVE_INTERVAL_OPTIONS_MS: tuple[int, ...] = (5000, 10000, 30000)
DEFAULT_LIVE_INTERVAL_MS = 5000

DEFAULT_FILTER_DEBOUNCE_MS = 300

# Dataverse Web API layout
ODATA_API_PATH = "/api/data/v9.2"
TRACE_ENTITY_SET = "plugintracelogs"
TRACE_SELECT_FIELDS: tuple[str, ...] = (
    "typename",
    "messagename",
    "primaryentity",
    "exceptiondetails",
    "messageblock",
    "performanceexecutionduration",
    "createdon",
    "correlationid",
)
TRACE_ORDER_BY = "createdon desc"
# Fields searched by the free-text content filter (OR-ed together)
TRACE_CONTENT_FIELDS: tuple[str, ...] = ("messageblock", "messagename", "primaryentity")
TRACE_TYPE_FIELD = "typename"
TRACE_DATE_FIELD = "createdon"


@dataclass(frozen=True)
class EngineConfig:
    """Tunables for a TraceWindow instance.

    Attributes:
        fetch_page_size: Records requested per remote call
        max_batch_pages: Remote pages per batch (the cap K)
        default_page_size: Client page size at startup
        filter_debounce_ms: Delay used by apply_filters_debounced
        live_interval_ms: Initial live-refresh period (live starts disabled)
    """

    fetch_page_size: int = FETCH_PAGE_SIZE
    max_batch_pages: int = MAX_BATCH_PAGES
    default_page_size: int = DEFAULT_PAGE_SIZE
    filter_debounce_ms: int = DEFAULT_FILTER_DEBOUNCE_MS
    live_interval_ms: int = DEFAULT_LIVE_INTERVAL_MS

    def __post_init__(self) -> None:
        """Validate configuration."""
        if self.fetch_page_size <= 0:
            raise ValueError("fetch_page_size must be positive")
        if self.max_batch_pages <= 0:
            raise ValueError("max_batch_pages must be positive")
        if not MIN_PAGE_SIZE <= self.default_page_size <= MAX_PAGE_SIZE:
            raise ValueError(
                f"default_page_size must be between {MIN_PAGE_SIZE} and {MAX_PAGE_SIZE}"
            )
        if self.filter_debounce_ms < 0:
            raise ValueError("filter_debounce_ms cannot be negative")
        if self.live_interval_ms <= 0:
            raise ValueError("live_interval_ms must be positive")
