"""REST runtime abstractions."""

from .fetcher import PageFetcher, parse_records
from .http_client import HTTPClient

__all__ = [
    "HTTPClient",
    "PageFetcher",
    "parse_records",
]
