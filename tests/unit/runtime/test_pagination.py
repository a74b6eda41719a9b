"""Unit tests for PageController and input parsing."""

from __future__ import annotations

import pytest

from tracewindow.core import InvalidInputError
from tracewindow.models import PaginationState
from tracewindow.runtime import BatchResult, PageController, WindowCache
from tracewindow.runtime.pagination import parse_page_number, parse_page_size


class FakeRemote:
    """Stands in for the engine's extend/drain callbacks."""

    def __init__(self, cache: WindowCache, total: int, batch_size: int = 1000) -> None:
        self.cache = cache
        self.total = total
        self.batch_size = batch_size
        self.extend_calls = 0
        self.drain_calls = 0

    def _next_batch(self) -> BatchResult:
        start = len(self.cache)
        end = min(start + self.batch_size, self.total)
        return BatchResult(
            records=list(range(start, end)),
            next_cursor=str(end) if end < self.total else None,
        )

    async def extend(self) -> bool:
        self.extend_calls += 1
        self.cache.extend(self._next_batch())
        return True

    async def drain(self) -> bool:
        self.drain_calls += 1
        while self.cache.has_more:
            self.cache.extend(self._next_batch())
        return True


def make_controller(total: int, page_size: int = 25) -> tuple[PageController, FakeRemote]:
    cache = WindowCache()
    remote = FakeRemote(cache, total)
    first_end = min(remote.batch_size, total)
    cache.replace(
        BatchResult(
            records=list(range(first_end)),
            next_cursor=str(first_end) if first_end < total else None,
        )
    )
    controller = PageController(
        cache, PaginationState(page_size=page_size), extend=remote.extend, drain=remote.drain
    )
    return controller, remote


class TestParsing:
    """Test page size and page number parsing."""

    @pytest.mark.parametrize(("value", "expected"), [(1, 1), (1000, 1000), ("50", 50), (" 75 ", 75)])
    def test_valid_page_sizes(self, value, expected):
        assert parse_page_size(value) == expected

    @pytest.mark.parametrize("value", [0, 1001, "abc", "", None, 2.5, True])
    def test_invalid_page_sizes(self, value):
        with pytest.raises(InvalidInputError, match="Page size must be between 1 and 1000"):
            parse_page_size(value)

    def test_page_number_in_range(self):
        assert parse_page_number("3", 40) == 3

    @pytest.mark.parametrize("value", [0, 41, "x", -1])
    def test_page_number_out_of_range(self, value):
        with pytest.raises(InvalidInputError, match="between 1 and 40") as exc_info:
            parse_page_number(value, 40)
        assert exc_info.value.field == "page"


class TestChangePage:
    """Test previous/next navigation and automatic extension."""

    @pytest.mark.asyncio
    async def test_next_within_cache_does_not_fetch(self):
        controller, remote = make_controller(1500)
        assert await controller.change_page(1)
        assert controller.state.current_page == 2
        assert remote.extend_calls == 0

    @pytest.mark.asyncio
    async def test_previous_on_first_page_is_noop(self):
        controller, _ = make_controller(1500)
        assert not await controller.change_page(-1)
        assert controller.state.current_page == 1

    @pytest.mark.asyncio
    async def test_reaching_last_cached_page_extends(self):
        """Page 39 -> 40 of a 1000-record window loads the remaining 500."""
        controller, remote = make_controller(1500)
        controller.state.current_page = 39

        assert await controller.change_page(1)

        assert remote.extend_calls == 1
        assert len(remote.cache) == 1500
        assert not remote.cache.has_more
        assert controller.state.current_page == 40
        assert controller.total_pages == 60

    @pytest.mark.asyncio
    async def test_next_on_exhausted_last_page_is_noop(self):
        controller, remote = make_controller(60)
        controller.state.current_page = 3
        assert not await controller.change_page(1)
        assert controller.state.current_page == 3
        assert remote.extend_calls == 0

    @pytest.mark.asyncio
    async def test_invalid_delta(self):
        controller, _ = make_controller(10)
        with pytest.raises(ValueError):
            await controller.change_page(2)


class TestJumps:
    """Test go-to-page, first/last and page-size changes."""

    def test_go_to_page_never_fetches(self):
        controller, remote = make_controller(1500)
        assert controller.go_to_page("12") == 12
        assert controller.state.current_page == 12
        assert remote.extend_calls == 0

    def test_go_to_page_rejects_uncached_page(self):
        controller, _ = make_controller(1500)
        controller.state.current_page = 5
        with pytest.raises(InvalidInputError):
            controller.go_to_page(41)
        assert controller.state.current_page == 5

    def test_go_to_first_page(self):
        controller, _ = make_controller(1500)
        controller.state.current_page = 10
        controller.go_to_first_page()
        assert controller.state.current_page == 1

    @pytest.mark.asyncio
    async def test_go_to_last_page_drains(self):
        controller, remote = make_controller(2600)
        page = await controller.go_to_last_page()
        assert remote.drain_calls == 1
        assert len(remote.cache) == 2600
        assert page == controller.total_pages == 104

    @pytest.mark.asyncio
    async def test_go_to_last_page_without_more_data(self):
        controller, remote = make_controller(60)
        assert await controller.go_to_last_page() == 3
        assert remote.drain_calls == 0

    def test_change_page_size_resets_to_first_page(self):
        controller, remote = make_controller(1500)
        controller.state.current_page = 10
        controller.change_page_size(100)
        assert controller.state.page_size == 100
        assert controller.state.current_page == 1
        assert controller.total_pages == 10
        assert remote.extend_calls == 0

    @pytest.mark.parametrize("value", [0, 1001, "abc"])
    def test_change_page_size_rejects_invalid(self, value):
        controller, _ = make_controller(1500)
        controller.state.current_page = 4
        with pytest.raises(InvalidInputError):
            controller.change_page_size(value)
        assert controller.state.page_size == 25
        assert controller.state.current_page == 4

    def test_current_slice(self):
        controller, _ = make_controller(60)
        controller.state.current_page = 3
        assert controller.current_slice() == tuple(range(50, 60))

