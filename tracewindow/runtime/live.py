"""Live refresh: periodic re-execution of the load sequence."""

from __future__ import annotations

import logging

from ..models.state import LiveConfig
from .scheduler import Callback, IntervalScheduler

logger = logging.getLogger(__name__)


class LiveRefreshScheduler:
    """Owns the live-refresh timer and its LiveConfig.

    The tick callback decides whether a refresh actually runs (it is
    skipped while another load is in flight); this class only starts, stops
    and re-times the timer.
    """

    def __init__(self, on_tick: Callback, config: LiveConfig | None = None) -> None:
        # The timer is not started here: starting needs a running loop.
        self._config = config or LiveConfig()
        self._timer = IntervalScheduler(on_tick, self._config.interval_ms)

    @property
    def config(self) -> LiveConfig:
        return self._config

    @property
    def enabled(self) -> bool:
        return self._config.enabled

    @property
    def interval_ms(self) -> int:
        return self._config.interval_ms

    @property
    def running(self) -> bool:
        return self._timer.running

    def set_enabled(self, enabled: bool, interval_ms: int | None = None) -> None:
        """Turn the timer on or off.

        Enabling while already enabled restarts the period.
        """
        if interval_ms is not None:
            self._validate(interval_ms)
            self._config.interval_ms = interval_ms
        self._config.enabled = enabled
        self._timer.stop()
        if enabled:
            self._timer.reset(self._config.interval_ms)
            self._timer.start()
            logger.info(f"Live refresh enabled every {self._config.interval_ms}ms")
        else:
            logger.info("Live refresh disabled")

    def set_interval(self, interval_ms: int) -> None:
        """Change the period; restarts the timer only when enabled."""
        self._validate(interval_ms)
        self._config.interval_ms = interval_ms
        self._timer.reset(interval_ms)
        if self._config.enabled:
            self._timer.start()
            logger.info(f"Live refresh interval changed to {interval_ms}ms")

    async def close(self) -> None:
        self._config.enabled = False
        await self._timer.aclose()

    @staticmethod
    def _validate(interval_ms: int) -> None:
        if isinstance(interval_ms, bool) or not isinstance(interval_ms, int) or interval_ms <= 0:
            raise ValueError("interval_ms must be a positive integer")
