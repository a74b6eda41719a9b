"""Integration tests against a live plug-in trace log endpoint."""

import os

import pytest

from tracewindow import EngineConfig, ODataPageFetcher, TraceFilters, TraceWindow

pytestmark = pytest.mark.skipif(
    os.environ.get("RUN_TRACEWINDOW_NETWORK_TESTS") != "1",
    reason="Requires network access to a Dataverse organization",
)


class TestODataIntegration:
    """Test the fetcher and engine against the real Web API."""

    @pytest.mark.asyncio
    async def test_fetch_first_page(self, org_url, access_token):
        async with ODataPageFetcher(org_url, access_token=access_token) as fetcher:
            page = await fetcher.fetch_page(TraceFilters().to_query_options(), 5)

        assert len(page.records) <= 5
        for record in page.records:
            assert "createdon" in record
            assert "typename" in record

    @pytest.mark.asyncio
    async def test_first_batch_and_navigation(self, org_url, access_token):
        config = EngineConfig(fetch_page_size=10, max_batch_pages=2, default_page_size=5)
        async with ODataPageFetcher(org_url, access_token=access_token) as fetcher:
            async with TraceWindow(fetcher, config=config) as view:
                snapshot = view.snapshot()
                assert snapshot.error is None
                assert snapshot.total_records <= 20
                if snapshot.can_go_next:
                    assert await view.change_page(1)
                    assert view.snapshot().current_page == 2

                created = [r["createdon"] for r in view.cache.records]
                assert created == sorted(created, reverse=True)
