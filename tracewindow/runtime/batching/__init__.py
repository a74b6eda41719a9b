"""Batch loading layer for cursor-paginated sources.

Architecture:
    The batching layer consists of:
    - definitions.py: Batch metadata structures (BatchPolicy, BatchResult)
    - loader.py: Batch execution (walks the cursor, all-or-nothing)
    - telemetry.py: Structured logging

Usage:
    BatchLoader is the only component that talks to a PageFetcher. The
    engine calls it for initial loads, next-page extension and drains.
"""

from __future__ import annotations

from .definitions import BatchPolicy, BatchResult
from .loader import BatchLoader

__all__ = [
    "BatchLoader",
    "BatchPolicy",
    "BatchResult",
]
