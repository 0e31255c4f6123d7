"""Process-wide configuration.

Settings are read once from ``MANAGED_RECORDS_*`` environment variables
(or a local ``.env``) and cached for the life of the process.
"""

from __future__ import annotations

from functools import lru_cache

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict

DEFAULT_BASE_URL = "http://localhost:3000/records"


class RecordsSettings(BaseSettings):
    """Records endpoint settings."""

    model_config = SettingsConfigDict(
        env_prefix="MANAGED_RECORDS_",
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
    )

    base_url: str = Field(default=DEFAULT_BASE_URL, min_length=1)
    timeout: float = Field(default=30.0, gt=0)
    # Page 1 has no previous page; the probe is still sent with offset -limit
    probe_page_zero: bool = True


@lru_cache(maxsize=1)
def get_settings() -> RecordsSettings:
    """Return the cached settings instance."""
    return RecordsSettings()
