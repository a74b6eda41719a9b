"""Unit tests for LiveRefreshScheduler."""

from __future__ import annotations

import asyncio

import pytest

from tracewindow.models import LiveConfig
from tracewindow.runtime import LiveRefreshScheduler


class TestLiveRefreshScheduler:
    """Test enabling, disabling and re-timing live refresh."""

    def test_created_disabled(self):
        live = LiveRefreshScheduler(lambda: None)
        assert not live.enabled
        assert not live.running
        assert live.interval_ms == 5000

    @pytest.mark.asyncio
    async def test_enable_and_disable(self):
        ticks: list[int] = []
        live = LiveRefreshScheduler(lambda: ticks.append(1), LiveConfig(interval_ms=10))

        live.set_enabled(True)
        assert live.enabled
        assert live.running
        await asyncio.sleep(0.05)
        live.set_enabled(False)
        assert not live.running
        await asyncio.sleep(0.005)

        count = len(ticks)
        assert count >= 1
        await asyncio.sleep(0.04)
        assert len(ticks) == count
        await live.close()

    @pytest.mark.asyncio
    async def test_set_interval_while_enabled_restarts(self):
        live = LiveRefreshScheduler(lambda: None)
        live.set_enabled(True)
        live.set_interval(10000)
        assert live.interval_ms == 10000
        assert live.config.interval_ms == 10000
        assert live.running
        await live.close()

    @pytest.mark.asyncio
    async def test_set_interval_while_disabled_does_not_start(self):
        live = LiveRefreshScheduler(lambda: None)
        live.set_interval(30000)
        assert live.interval_ms == 30000
        assert not live.running

    @pytest.mark.parametrize("value", [0, -5, True, "5000"])
    def test_invalid_interval(self, value):
        live = LiveRefreshScheduler(lambda: None)
        with pytest.raises(ValueError):
            live.set_interval(value)
        assert live.interval_ms == 5000

    @pytest.mark.asyncio
    async def test_close_disables(self):
        live = LiveRefreshScheduler(lambda: None)
        live.set_enabled(True, interval_ms=10)
        await live.close()
        assert not live.enabled
        assert not live.running
