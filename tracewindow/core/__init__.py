"""Core constants, enums and exceptions."""

from .config import (
    DEFAULT_LIVE_INTERVAL_MS,
    DEFAULT_PAGE_SIZE,
    FETCH_PAGE_SIZE,
    LIVE_INTERVAL_OPTIONS_MS,
    MAX_BATCH_PAGES,
    MAX_PAGE_SIZE,
    MIN_PAGE_SIZE,
    PAGE_SIZE_OPTIONS,
    EngineConfig,
)
from .enums import LoadKind, NotificationLevel
from .exceptions import BatchLoadError, InvalidInputError, TransportError, WindowError

__all__ = [
    "DEFAULT_LIVE_INTERVAL_MS",
    "DEFAULT_PAGE_SIZE",
    "FETCH_PAGE_SIZE",
    "LIVE_INTERVAL_OPTIONS_MS",
    "MAX_BATCH_PAGES",
    "MAX_PAGE_SIZE",
    "MIN_PAGE_SIZE",
    "PAGE_SIZE_OPTIONS",
    "EngineConfig",
    "LoadKind",
    "NotificationLevel",
    "WindowError",
    "TransportError",
    "BatchLoadError",
    "InvalidInputError",
]
