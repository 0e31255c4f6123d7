"""Response transformation: page result to aggregate view.

Every function here is pure and takes its records explicitly.
"""

from __future__ import annotations

from collections.abc import Iterable

from ..core.enums import RetrieveStatus
from ..models import AggregateResult, PageResult, Record


def derive_primary_flags(records: Iterable[Record]) -> tuple[Record, ...]:
    """Copy each record with ``isPrimary`` set from its color."""
    return tuple(record.with_primary_flag() for record in records)


def resolve_ids(records: Iterable[Record]) -> tuple[int | str | None, ...]:
    return tuple(record.id for record in records)


def resolve_open(records: Iterable[Record]) -> tuple[Record, ...]:
    return tuple(record for record in records if record.is_open)


def resolve_closed_primary_count(records: Iterable[Record]) -> int:
    """Count closed records whose color is primary."""
    return sum(1 for record in records if record.is_closed and record.has_primary_color)


def resolve_status(page: PageResult) -> RetrieveStatus:
    if not page.current_ok:
        return RetrieveStatus.FAILED
    if not page.probes_ok:
        return RetrieveStatus.PARTIAL
    return RetrieveStatus.OK


def transform(page: PageResult) -> AggregateResult:
    """Form the aggregate view of one orchestrated page.

    An empty page (including one whose fetch failed) yields no ids, no
    open records and a zero count; the adjacency hints pass through.
    """
    records = derive_primary_flags(page.records)
    return AggregateResult(
        previous_page=page.previous_page,
        next_page=page.next_page,
        ids=resolve_ids(records),
        open=resolve_open(records),
        closed_primary_count=resolve_closed_primary_count(records),
        status=resolve_status(page),
    )
