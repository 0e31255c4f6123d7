"""Managed Records - paginated records retrieval with adjacency hints."""

from .api import RecordsAPI, retrieve, transform
from .config import RecordsSettings, get_settings
from .core import (
    PAGE_LIMIT,
    PRIMARY_COLORS,
    AmbiguousStatus,
    Disposition,
    FetchError,
    MalformedBody,
    NetworkFailure,
    PageRole,
    RecordsError,
    RetrieveStatus,
    ServerError,
)
from .core.resolver import calculate_offset, resolve_page, resolve_query
from .models import (
    AggregateResult,
    PageOutcome,
    PageQuery,
    PageResult,
    Record,
    RetrieveOptions,
)
from .runtime import HTTPClient, PageFetcher, PageOrchestrator, PagePlanner

__version__ = "0.1.0"

__all__ = [
    # Entry points
    "retrieve",
    "RecordsAPI",
    "transform",
    "resolve_query",
    "resolve_page",
    "calculate_offset",
    # Config
    "RecordsSettings",
    "get_settings",
    # Runtime
    "HTTPClient",
    "PageFetcher",
    "PageOrchestrator",
    "PagePlanner",
    # Models
    "AggregateResult",
    "PageOutcome",
    "PageQuery",
    "PageResult",
    "Record",
    "RetrieveOptions",
    # Core
    "PAGE_LIMIT",
    "PRIMARY_COLORS",
    "Disposition",
    "PageRole",
    "RetrieveStatus",
    # Exceptions
    "RecordsError",
    "FetchError",
    "NetworkFailure",
    "ServerError",
    "MalformedBody",
    "AmbiguousStatus",
]
