"""Core components."""

from .constants import (
    COLOR_FILTER_PARAM,
    DEFAULT_PAGE,
    DEFAULT_REQUEST_OPTIONS,
    PAGE_LIMIT,
    PRIMARY_COLORS,
)
from .enums import Disposition, PageRole, RetrieveStatus
from .exceptions import (
    AmbiguousStatus,
    FetchError,
    MalformedBody,
    NetworkFailure,
    RecordsError,
    ServerError,
)

__all__ = [
    "COLOR_FILTER_PARAM",
    "DEFAULT_PAGE",
    "DEFAULT_REQUEST_OPTIONS",
    "PAGE_LIMIT",
    "PRIMARY_COLORS",
    "Disposition",
    "PageRole",
    "RetrieveStatus",
    "RecordsError",
    "FetchError",
    "NetworkFailure",
    "ServerError",
    "MalformedBody",
    "AmbiguousStatus",
]
