"""User-visible notices."""

from __future__ import annotations

import logging
from typing import Protocol

from ..core.enums import NotificationLevel

logger = logging.getLogger(__name__)

_LOG_LEVELS = {
    NotificationLevel.INFO: logging.INFO,
    NotificationLevel.SUCCESS: logging.INFO,
    NotificationLevel.WARNING: logging.WARNING,
    NotificationLevel.ERROR: logging.ERROR,
}


class Notifier(Protocol):
    """Protocol for whatever surfaces toast-style notices to the user."""

    def notify(self, message: str, level: NotificationLevel) -> None: ...


class LoggingNotifier:
    """Default notifier: writes notices to the log."""

    def notify(self, message: str, level: NotificationLevel) -> None:
        logger.log(_LOG_LEVELS[level], message)
