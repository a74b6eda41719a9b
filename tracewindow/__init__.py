"""TraceWindow - incremental windowed viewer over cursor-paginated trace logs."""

from .clients import LoggingNotifier, Notifier, TraceWindow
from .core import (
    DEFAULT_LIVE_INTERVAL_MS,
    DEFAULT_PAGE_SIZE,
    FETCH_PAGE_SIZE,
    LIVE_INTERVAL_OPTIONS_MS,
    MAX_BATCH_PAGES,
    MAX_PAGE_SIZE,
    MIN_PAGE_SIZE,
    PAGE_SIZE_OPTIONS,
    BatchLoadError,
    EngineConfig,
    InvalidInputError,
    LoadKind,
    NotificationLevel,
    TransportError,
    WindowError,
)
from .models import LiveConfig, Page, PaginationState, TraceFilters, ViewSnapshot
from .runtime import (
    BatchLoader,
    BatchPolicy,
    BatchResult,
    FilterController,
    LiveRefreshScheduler,
    ODataPageFetcher,
    PageController,
    PageFetcher,
    WindowCache,
)
from .utils import HTTPClient

__version__ = "0.1.0"

__all__ = [
    # Clients
    "TraceWindow",
    "Notifier",
    "LoggingNotifier",
    # Runtime
    "PageFetcher",
    "ODataPageFetcher",
    "BatchLoader",
    "BatchPolicy",
    "BatchResult",
    "WindowCache",
    "PageController",
    "FilterController",
    "LiveRefreshScheduler",
    "HTTPClient",
    # Models
    "Page",
    "TraceFilters",
    "PaginationState",
    "LiveConfig",
    "ViewSnapshot",
    # Config
    "EngineConfig",
    "FETCH_PAGE_SIZE",
    "MAX_BATCH_PAGES",
    "PAGE_SIZE_OPTIONS",
    "DEFAULT_PAGE_SIZE",
    "MIN_PAGE_SIZE",
    "MAX_PAGE_SIZE",
    "LIVE_INTERVAL_OPTIONS_MS",
    "DEFAULT_LIVE_INTERVAL_MS",
    "LoadKind",
    "NotificationLevel",
    # Exceptions
    "WindowError",
    "TransportError",
    "BatchLoadError",
    "InvalidInputError",
]
