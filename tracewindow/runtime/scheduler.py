"""Cancellable timers for recurring and debounced work.

Both schedulers own their asyncio tasks outright, so stopping them (or
closing the engine that holds them) reliably cancels everything they
started. Callbacks may be plain functions or coroutine functions.
"""

from __future__ import annotations

import asyncio
import contextlib
import inspect
import logging
from collections.abc import Awaitable, Callable
from typing import Any

logger = logging.getLogger(__name__)

Callback = Callable[..., Awaitable[None]] | Callable[..., None]


async def _invoke(callback: Callback, *args: Any) -> None:
    result = callback(*args)
    if inspect.isawaitable(result):
        await result


class IntervalScheduler:
    """Runs a callback every ``interval_ms`` until stopped.

    Each tick spawns the callback as its own task, so a slow callback never
    delays the next tick. Overlap policy is the callback's business.
    """

    def __init__(self, callback: Callback, interval_ms: int) -> None:
        if interval_ms <= 0:
            raise ValueError("interval_ms must be positive")
        self._callback = callback
        self._interval_ms = interval_ms
        self._timer: asyncio.Task[None] | None = None
        self._pending: set[asyncio.Task[None]] = set()

    @property
    def interval_ms(self) -> int:
        return self._interval_ms

    @property
    def running(self) -> bool:
        return self._timer is not None and not self._timer.done()

    def start(self) -> None:
        """Start ticking. No-op if already running."""
        if self.running:
            return
        self._timer = asyncio.create_task(self._run())

    def stop(self) -> None:
        """Stop ticking. Callbacks already spawned keep running."""
        if self._timer is not None and not self._timer.done():
            self._timer.cancel()
        self._timer = None

    def reset(self, interval_ms: int | None = None) -> None:
        """Restart the period from now, optionally with a new interval."""
        if interval_ms is not None:
            if interval_ms <= 0:
                raise ValueError("interval_ms must be positive")
            self._interval_ms = interval_ms
        was_running = self.running
        self.stop()
        if was_running:
            self.start()

    async def aclose(self) -> None:
        """Stop ticking and cancel callbacks still in flight."""
        timer = self._timer
        self.stop()
        tasks = [t for t in self._pending if not t.done()]
        for task in tasks:
            task.cancel()
        for task in [timer, *tasks]:
            if task is None:
                continue
            with contextlib.suppress(asyncio.CancelledError):
                await task

    async def _run(self) -> None:
        while True:
            await asyncio.sleep(self._interval_ms / 1000.0)
            task = asyncio.create_task(self._tick())
            self._pending.add(task)
            task.add_done_callback(self._pending.discard)

    async def _tick(self) -> None:
        try:
            await _invoke(self._callback)
        except Exception:
            logger.exception("Scheduled callback failed")


class Debouncer:
    """Delays a callback until calls stop arriving for ``delay_ms``."""

    def __init__(self, callback: Callback, delay_ms: int) -> None:
        if delay_ms < 0:
            raise ValueError("delay_ms cannot be negative")
        self._callback = callback
        self._delay_ms = delay_ms
        self._task: asyncio.Task[None] | None = None
        self._args: tuple[Any, ...] = ()

    @property
    def pending(self) -> bool:
        return self._task is not None and not self._task.done()

    def call(self, *args: Any) -> None:
        """(Re)start the delay; only the latest arguments are delivered."""
        self.cancel()
        self._args = args
        self._task = asyncio.create_task(self._run(args))

    def cancel(self) -> None:
        if self._task is not None and not self._task.done():
            self._task.cancel()
        self._task = None

    async def flush(self) -> None:
        """Run a pending call immediately."""
        if not self.pending:
            return
        args = self._args
        self.cancel()
        await _invoke(self._callback, *args)

    async def _run(self, args: tuple[Any, ...]) -> None:
        await asyncio.sleep(self._delay_ms / 1000.0)
        # Detach first so the callback may schedule a new call
        self._task = None
        try:
            await _invoke(self._callback, *args)
        except Exception:
            logger.exception("Debounced callback failed")
