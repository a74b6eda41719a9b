"""Unit tests for pagination and live-refresh state."""

import pytest

from tracewindow.models import LiveConfig, PaginationState


def test_pagination_defaults():
    state = PaginationState()
    assert state.page_size == 25
    assert state.current_page == 1


@pytest.mark.parametrize("page_size", [0, 1001])
def test_pagination_rejects_out_of_range_size(page_size):
    with pytest.raises(ValueError):
        PaginationState(page_size=page_size)


def test_pagination_rejects_page_zero():
    with pytest.raises(ValueError):
        PaginationState(current_page=0)


def test_reset_returns_to_first_page():
    state = PaginationState(page_size=50, current_page=7)
    state.reset()
    assert state.current_page == 1
    assert state.page_size == 50


def test_live_config_starts_disabled():
    config = LiveConfig()
    assert not config.enabled
    assert config.interval_ms == 5000


def test_live_config_rejects_non_positive_interval():
    with pytest.raises(ValueError):
        LiveConfig(interval_ms=0)
