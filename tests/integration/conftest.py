"""Shared fixtures for integration tests.

Integration tests run only with RUN_MANAGED_RECORDS_NETWORK_TESTS=1.
"""

import os

import pytest


@pytest.fixture
def live_base_url() -> str:
    return os.environ.get("MANAGED_RECORDS_LIVE_URL", "http://localhost:3000/records")
