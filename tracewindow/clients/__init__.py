"""High-level clients."""

from .notifier import LoggingNotifier, Notifier
from .trace_window import Renderer, TraceWindow

__all__ = [
    "LoggingNotifier",
    "Notifier",
    "Renderer",
    "TraceWindow",
]
