"""Shared fixtures for integration tests."""

import os

import pytest

# Skip all integration tests unless RUN_TRACEWINDOW_NETWORK_TESTS=1
pytestmark = pytest.mark.skipif(
    os.environ.get("RUN_TRACEWINDOW_NETWORK_TESTS") != "1",
    reason="Requires network access. Set RUN_TRACEWINDOW_NETWORK_TESTS=1 to run",
)


@pytest.fixture
def org_url() -> str:
    url = os.environ.get("TRACEWINDOW_ORG_URL")
    if not url:
        pytest.skip("TRACEWINDOW_ORG_URL is not set")
    return url


@pytest.fixture
def access_token() -> str | None:
    return os.environ.get("TRACEWINDOW_ACCESS_TOKEN")
