"""Core enumerations for records retrieval.

Key Types:
    - Disposition: Lifecycle state of a record
    - PageRole: Why a page is fetched (target page or adjacency probe)
    - RetrieveStatus: Outcome attached to every aggregate
"""

from enum import Enum


class Disposition(str, Enum):
    """Record lifecycle states the transformer cares about."""

    OPEN = "open"
    CLOSED = "closed"


class PageRole(str, Enum):
    """Role of a page fetch inside one retrieve call."""

    CURRENT = "current"
    PREVIOUS = "previous"
    NEXT = "next"

    @property
    def is_probe(self) -> bool:
        """True for adjacency probes."""
        return self is not PageRole.CURRENT


class RetrieveStatus(str, Enum):
    """Outcome of a retrieve call.

    Lets callers tell an empty-but-successful page from a failed fetch.
    """

    OK = "ok"
    PARTIAL = "partial"
    FAILED = "failed"
