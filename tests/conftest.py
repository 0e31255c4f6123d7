"""Shared fixtures."""

import pytest

from managed_records.config import get_settings


@pytest.fixture(autouse=True)
def _fresh_settings(monkeypatch):
    """Keep cached settings from leaking between tests."""
    for name in ("BASE_URL", "TIMEOUT", "PROBE_PAGE_ZERO"):
        monkeypatch.delenv(f"MANAGED_RECORDS_{name}", raising=False)
    get_settings.cache_clear()
    yield
    get_settings.cache_clear()
