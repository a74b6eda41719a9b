"""Data models for the windowed viewer.

Architecture:
    Remote-facing models (Page, TraceFilters) are immutable Pydantic v2
    models; engine-owned state (PaginationState, LiveConfig) is plain mutable
    dataclasses; ViewSnapshot is the frozen read model given to renderers.
"""

from .filters import TraceFilters
from .page import Page
from .snapshot import ViewSnapshot
from .state import LiveConfig, PaginationState

__all__ = [
    "LiveConfig",
    "Page",
    "PaginationState",
    "TraceFilters",
    "ViewSnapshot",
]
