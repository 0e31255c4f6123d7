"""Page-level results produced by the fetcher and orchestrator."""

from __future__ import annotations

from dataclasses import dataclass

from pydantic import BaseModel, ConfigDict

from ..core.enums import PageRole
from ..core.exceptions import FetchError
from .query import PageQuery
from .record import Record


@dataclass(frozen=True)
class PageOutcome:
    """Outcome of fetching one page.

    Attributes:
        query: Query that was sent
        role: Why the page was fetched
        records: Records in delivery order, or None when no value was obtained
        error: The absorbed fetch error, if any
    """

    query: PageQuery
    role: PageRole
    records: tuple[Record, ...] | None = None
    error: FetchError | None = None

    @property
    def ok(self) -> bool:
        return self.records is not None

    @property
    def has_records(self) -> bool:
        """True when at least one record was delivered."""
        return bool(self.records)

    @property
    def status_code(self) -> int | None:
        return self.error.status_code if self.error is not None else None


class PageResult(BaseModel):
    """Target page records tagged with adjacency hints.

    ``records`` is empty when the target page could not be fetched;
    ``current_ok`` and ``probes_ok`` record which fetches succeeded.
    """

    page: int
    records: tuple[Record, ...] = ()
    previous_page: int | None = None
    next_page: int | None = None
    current_ok: bool = True
    probes_ok: bool = True

    model_config = ConfigDict(frozen=True)
