"""Runtime components of the windowed viewer.

Leaves first: PageFetcher -> BatchLoader -> WindowCache -> PageController,
with FilterController owning the query and LiveRefreshScheduler owning the
refresh timer. TraceWindow (clients/) wires them together.
"""

from .batching import BatchLoader, BatchPolicy, BatchResult
from .fetcher import ODataPageFetcher, PageFetcher
from .filtering import FilterController
from .live import LiveRefreshScheduler
from .pagination import PageController, parse_page_number, parse_page_size
from .scheduler import Debouncer, IntervalScheduler
from .window import WindowCache

__all__ = [
    "BatchLoader",
    "BatchPolicy",
    "BatchResult",
    "Debouncer",
    "FilterController",
    "IntervalScheduler",
    "LiveRefreshScheduler",
    "ODataPageFetcher",
    "PageController",
    "PageFetcher",
    "WindowCache",
    "parse_page_number",
    "parse_page_size",
]
