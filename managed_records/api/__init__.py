"""High-level API facades."""

from .records_api import RecordsAPI, coerce_options, retrieve
from .transform import transform

__all__ = [
    "RecordsAPI",
    "coerce_options",
    "retrieve",
    "transform",
]
