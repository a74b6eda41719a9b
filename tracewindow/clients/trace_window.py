"""TraceWindow: windowed pagination and live refresh over a cursor-paginated source.

This wires the runtime components into one engine and exposes the
operations a viewer needs:

- apply/debounce filters (new query: cache cleared, back to page 1)
- first/previous/next/last/go-to page and page-size changes
- live refresh on a cancellable timer, silent (no loading placeholder)
- a read-only ViewSnapshot for rendering

Concurrency:
    Everything runs on one event loop. Every fresh load sequence (filter
    change, live refresh) takes a new integer generation and a new lock.
    A load captures the generation and lock current when it starts; its
    result is applied only if that generation is still current when the
    result arrives, otherwise it is dropped. Loads within one generation
    (initial batch, next-page extension, drain) serialize on that
    generation's lock, so two batches never race on the same cache.
    close() bumps the generation, which logically cancels all
    outstanding work without aborting requests on the wire.
"""

from __future__ import annotations

import asyncio
import contextlib
import inspect
import logging
from collections.abc import Awaitable, Callable
from typing import Any

from ..core.config import EngineConfig
from ..core.enums import LoadKind, NotificationLevel
from ..core.exceptions import InvalidInputError, TransportError
from ..core.messages import load_failed_with_reason
from ..models import LiveConfig, PaginationState, TraceFilters, ViewSnapshot
from ..runtime import (
    BatchLoader,
    BatchPolicy,
    Debouncer,
    FilterController,
    LiveRefreshScheduler,
    PageController,
    PageFetcher,
    WindowCache,
)
from .notifier import LoggingNotifier, Notifier

logger = logging.getLogger(__name__)

Renderer = Callable[[ViewSnapshot], Awaitable[None]] | Callable[[ViewSnapshot], None]


class TraceWindow:
    """Incremental windowed viewer engine."""

    def __init__(
        self,
        fetcher: PageFetcher,
        *,
        config: EngineConfig | None = None,
        filters: TraceFilters | None = None,
        cache: WindowCache | None = None,
        notifier: Notifier | None = None,
        renderer: Renderer | None = None,
    ) -> None:
        """Initialize the engine. No I/O happens until start().

        Args:
            fetcher: Source of remote pages
            config: Page sizes, batch cap and timer settings
            filters: Initial filters (default: no constraints)
            cache: Window cache to own (a fresh one if None)
            notifier: Receives user-visible notices (default: log them)
            renderer: Called with a ViewSnapshot after every state change
        """
        self._config = config or EngineConfig()
        self._loader = BatchLoader(
            fetcher,
            BatchPolicy(
                page_size=self._config.fetch_page_size,
                max_pages=self._config.max_batch_pages,
            ),
        )
        self._cache = cache if cache is not None else WindowCache()
        self._state = PaginationState(page_size=self._config.default_page_size)
        self._filters = FilterController(filters)
        self._pages = PageController(
            self._cache, self._state, extend=self._extend, drain=self._drain
        )
        self._live = LiveRefreshScheduler(
            self._on_live_tick, LiveConfig(interval_ms=self._config.live_interval_ms)
        )
        self._debouncer = Debouncer(self.apply_filters, self._config.filter_debounce_ms)
        self._notifier: Notifier = notifier if notifier is not None else LoggingNotifier()
        self._renderer = renderer

        # Load sequencing
        self._generation = 0
        self._lock = asyncio.Lock()
        self._loading = False
        self._placeholder = False
        self._error: str | None = None
        # True while consecutive refreshes keep failing
        self._refresh_failing = False
        self._closed = False

    # ----------------------
    # Read-only state
    # ----------------------
    @property
    def generation(self) -> int:
        return self._generation

    @property
    def is_loading(self) -> bool:
        return self._loading

    @property
    def filters(self) -> TraceFilters:
        return self._filters.filters

    @property
    def cache(self) -> WindowCache:
        return self._cache

    @property
    def live(self) -> LiveRefreshScheduler:
        return self._live

    @property
    def closed(self) -> bool:
        return self._closed

    def snapshot(self) -> ViewSnapshot:
        """Current page slice plus everything needed to draw the pager."""
        return ViewSnapshot(
            records=self._pages.current_slice(),
            current_page=self._state.current_page,
            total_pages=self._pages.total_pages,
            page_size=self._state.page_size,
            total_records=len(self._cache),
            has_more=self._cache.has_more,
            loading=self._loading,
            placeholder=self._placeholder,
            error=self._error,
            live_enabled=self._live.enabled,
            live_interval_ms=self._live.interval_ms,
        )

    # ----------------------
    # Lifecycle
    # ----------------------
    async def start(self) -> ViewSnapshot:
        """Run the initial load for the current filters."""
        await self._load_fresh(LoadKind.FILTER)
        return self.snapshot()

    async def close(self) -> None:
        """Tear down: stale-out in-flight loads and stop all timers."""
        if self._closed:
            return
        self._closed = True
        self._generation += 1
        self._loading = False
        self._placeholder = False
        self._debouncer.cancel()
        await self._live.close()
        logger.debug(f"TraceWindow closed at generation {self._generation}")

    async def __aenter__(self) -> TraceWindow:
        await self.start()
        return self

    async def __aexit__(self, exc_type, exc_val, exc_tb) -> None:
        await self.close()

    # ----------------------
    # Filters
    # ----------------------
    async def apply_filters(self, filters: TraceFilters | None = None) -> bool:
        """Start a new query: clear the cache, go to page 1, load one batch.

        Args:
            filters: New filters; None reloads the current ones

        Returns:
            True if the first batch of the new query was applied
        """
        if self._closed:
            return False
        self._debouncer.cancel()
        if filters is not None and self._filters.apply(filters):
            logger.info(f"Filters changed: {self._filters.filters.to_odata_filter() or '<none>'}")
        return await self._load_fresh(LoadKind.FILTER)

    def apply_filters_debounced(self, filters: TraceFilters) -> None:
        """Apply filters once input has been quiet for the debounce delay."""
        if self._closed:
            return
        self._debouncer.call(filters)

    # ----------------------
    # Navigation
    # ----------------------
    async def go_to_first_page(self) -> None:
        if self._closed:
            return
        self._pages.go_to_first_page()
        self._error = None
        await self._render()

    async def change_page(self, delta: int) -> bool:
        """Move one page; moving forward at the end of the cache loads more.

        Returns:
            True if the current page changed
        """
        if self._closed:
            return False
        moved = await self._navigate(self._pages.change_page(delta))
        return bool(moved)

    async def go_to_page(self, value: Any) -> bool:
        """Jump to a cached page. Invalid input is rejected with a warning.

        Returns:
            True if the input was accepted
        """
        if self._closed:
            return False
        try:
            self._pages.go_to_page(value)
        except InvalidInputError as e:
            self._warn(e)
            await self._render()
            return False
        self._error = None
        await self._render()
        return True

    async def go_to_last_page(self) -> int:
        """Drain the remote cursor if needed, then jump to the last page.

        Returns:
            The page landed on
        """
        if self._closed:
            return self._state.current_page
        page = await self._navigate(self._pages.go_to_last_page())
        return int(page)

    async def change_page_size(self, value: Any) -> bool:
        """Re-slice the cache with a new page size; back to page 1.

        Returns:
            True if the new size was accepted
        """
        if self._closed:
            return False
        try:
            self._pages.change_page_size(value)
        except InvalidInputError as e:
            self._warn(e)
            await self._render()
            return False
        await self._render()
        return True

    # ----------------------
    # Live refresh
    # ----------------------
    async def set_live_enabled(self, enabled: bool) -> None:
        """Toggle live refresh. Enabling refreshes once immediately."""
        if self._closed:
            return
        self._live.set_enabled(enabled)
        if enabled and await self.refresh():
            return
        await self._render()

    async def set_live_interval(self, interval_ms: int) -> bool:
        """Change the live period; restarts the timer when enabled.

        Returns:
            True if the interval was accepted
        """
        if self._closed:
            return False
        try:
            self._live.set_interval(interval_ms)
        except ValueError as e:
            self._notifier.notify(str(e), NotificationLevel.WARNING)
            return False
        await self._render()
        return True

    async def refresh(self) -> bool:
        """Silently reload the current query unless a load is in flight.

        Returns:
            True if a refresh ran and its result was applied
        """
        if self._closed:
            return False
        if self._loading:
            logger.debug("Refresh skipped: a load is already in flight")
            return False
        return await self._load_fresh(LoadKind.REFRESH)

    async def _on_live_tick(self) -> None:
        if self._closed or not self._live.enabled:
            return
        await self.refresh()

    # ----------------------
    # Load sequences
    # ----------------------
    def _begin_generation(self) -> int:
        self._generation += 1
        self._lock = asyncio.Lock()
        self._loading = False
        self._placeholder = False
        return self._generation

    def _is_current(self, generation: int) -> bool:
        return not self._closed and generation == self._generation

    def _drop_stale(self, kind: LoadKind, generation: int) -> None:
        logger.debug(
            f"Dropping stale {kind.value} result (generation {generation}, "
            f"current {self._generation})"
        )

    async def _load_fresh(self, kind: LoadKind) -> bool:
        """Run a first-batch load as a new generation.

        FILTER clears the cache and shows the placeholder up front. REFRESH
        keeps the old records visible and swaps them only on success. Both
        land on page 1.
        """
        generation = self._begin_generation()
        lock = self._lock
        silent = kind is LoadKind.REFRESH
        query = self._filters.query

        async with lock:
            if not self._is_current(generation):
                self._drop_stale(kind, generation)
                return False
            self._loading = True
            if not silent:
                self._cache.clear()
                self._state.reset()
                self._error = None
                self._placeholder = True
                await self._render()

            try:
                batch = await self._loader.load_batch(query)
            except TransportError as e:
                if not self._is_current(generation):
                    self._drop_stale(kind, generation)
                    return False
                self._finish_load()
                self._report_failure(kind, e)
                await self._render()
                return False

            if not self._is_current(generation):
                self._drop_stale(kind, generation)
                return False

            self._cache.replace(batch)
            self._refresh_failing = False
            # Pagination resets on every fresh load, including silent refreshes
            self._state.reset()
            self._error = None
            self._finish_load()
            await self._render()
            return True

    async def _extend(self) -> bool:
        """Append one capped batch from the stored cursor.

        A caller that waited on the lock while another extension grew the
        cache is satisfied by that batch and does not fetch again.
        """
        generation = self._generation
        seen = len(self._cache)
        async with self._lock:
            if not self._is_current(generation):
                return False
            if len(self._cache) > seen:
                return True
            if not self._cache.has_more:
                return False
            self._loading = True
            try:
                batch = await self._loader.load_batch(self._filters.query, self._cache.cursor)
            except TransportError as e:
                if self._is_current(generation):
                    self._finish_load()
                    self._report_failure(LoadKind.EXTEND, e)
                return False
            if not self._is_current(generation):
                self._drop_stale(LoadKind.EXTEND, generation)
                return False
            self._cache.extend(batch)
            self._error = None
            self._finish_load()
            return True

    async def _drain(self) -> bool:
        """Append batches until the remote cursor is exhausted.

        Each batch is committed as it arrives; a failure keeps what was
        already committed.
        """
        generation = self._generation
        changed = False
        async with self._lock:
            if not self._is_current(generation) or not self._cache.has_more:
                return False
            self._loading = True
            batches = self._loader.load_remaining(self._filters.query, self._cache.cursor)
            try:
                async with contextlib.aclosing(batches):
                    async for batch in batches:
                        if not self._is_current(generation):
                            self._drop_stale(LoadKind.DRAIN, generation)
                            return changed
                        self._cache.extend(batch)
                        changed = True
            except TransportError as e:
                if self._is_current(generation):
                    self._finish_load()
                    self._report_failure(LoadKind.DRAIN, e)
                return changed
            if self._is_current(generation):
                self._error = None
                self._finish_load()
            return changed

    def _finish_load(self) -> None:
        self._loading = False
        self._placeholder = False

    # ----------------------
    # Reporting
    # ----------------------
    async def _navigate(self, operation: Awaitable[Any]) -> Any:
        # A page turn clears a previous load error unless this turn's own
        # load fails.
        previous_error = self._error
        self._error = None
        result = await operation
        if not result and self._error is None:
            self._error = previous_error
        await self._render()
        return result

    def _report_failure(self, kind: LoadKind, error: TransportError) -> None:
        message = str(error)
        self._error = message or load_failed_with_reason("")
        logger.warning(f"{kind.value} load failed: {message}")
        if kind is LoadKind.REFRESH:
            # Only the first failure of a run is announced; the inline error
            # stays visible until a refresh succeeds.
            if self._refresh_failing:
                return
            self._refresh_failing = True
        self._notifier.notify(load_failed_with_reason(message), NotificationLevel.ERROR)

    def _warn(self, error: InvalidInputError) -> None:
        logger.debug(f"Rejected {error.field} input {error.value!r}: {error}")
        self._notifier.notify(str(error), NotificationLevel.WARNING)

    async def _render(self) -> None:
        if self._renderer is None:
            return
        try:
            result = self._renderer(self.snapshot())
            if inspect.isawaitable(result):
                await result
        except Exception:
            logger.exception("Renderer failed")
