"""Data models for records retrieval.

Architecture:
    All models are Pydantic v2 and immutable (frozen=True); every stage of a
    retrieve call builds new objects instead of mutating the previous
    stage's output.

Model Categories:
    - Input: RetrieveOptions
    - Request: PageQuery
    - Data: Record
    - Intermediate: PageOutcome, PageResult
    - Output: AggregateResult
"""

from .aggregate import AggregateResult
from .options import RetrieveOptions
from .page import PageOutcome, PageResult
from .query import PageQuery
from .record import Record

__all__ = [
    "AggregateResult",
    "PageOutcome",
    "PageQuery",
    "PageResult",
    "Record",
    "RetrieveOptions",
]
