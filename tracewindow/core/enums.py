"""Enumerations shared across the engine."""

from __future__ import annotations

from enum import Enum


class LoadKind(str, Enum):
    """Why a load sequence was started."""

    FILTER = "filter"  # new query, cache cleared up front
    REFRESH = "refresh"  # live tick or manual refresh, silent
    EXTEND = "extend"  # next-page auto-load, appends one batch
    DRAIN = "drain"  # go-to-last, appends batches until exhausted


class NotificationLevel(str, Enum):
    """Severity of a user-visible notice."""

    INFO = "info"
    SUCCESS = "success"
    WARNING = "warning"
    ERROR = "error"
