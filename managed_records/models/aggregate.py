"""Aggregate view returned by ``retrieve``."""

from __future__ import annotations

from typing import Any

from pydantic import BaseModel, ConfigDict, Field

from ..core.enums import RetrieveStatus
from .record import Record


class AggregateResult(BaseModel):
    """Shaped output of one retrieve call.

    Attributes:
        previous_page: Previous page number, or None if it holds no records
        next_page: Next page number, or None if it holds no records
        ids: Record identifiers in delivery order
        open: Open records carrying the derived ``isPrimary`` flag
        closed_primary_count: Closed records whose color is primary
        status: Whether every fetch succeeded
    """

    previous_page: int | None = Field(default=None, alias="previousPage")
    next_page: int | None = Field(default=None, alias="nextPage")
    ids: tuple[int | str | None, ...] = ()
    open: tuple[Record, ...] = ()
    closed_primary_count: int = Field(default=0, ge=0, alias="closedPrimaryCount")
    status: RetrieveStatus = RetrieveStatus.OK

    model_config = ConfigDict(frozen=True, populate_by_name=True)

    @classmethod
    def failed(
        cls, previous_page: int | None = None, next_page: int | None = None
    ) -> AggregateResult:
        """Best-effort empty aggregate for a call whose target page failed."""
        return cls(
            previous_page=previous_page,
            next_page=next_page,
            status=RetrieveStatus.FAILED,
        )

    def to_dict(self) -> dict[str, Any]:
        """Serialize to the camelCase wire shape."""
        return self.model_dump(mode="json", by_alias=True)
