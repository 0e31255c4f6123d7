"""Record data model."""

from __future__ import annotations

from pydantic import BaseModel, ConfigDict, Field

from ..core.constants import PRIMARY_COLORS
from ..core.enums import Disposition


class Record(BaseModel):
    """One item of the remote records collection.

    Only ``id``, ``color`` and ``disposition`` are interpreted; any other
    field delivered by the endpoint is kept and passed through untouched.
    A missing or null ``color`` / ``disposition`` is kept as None; such a
    record is simply neither primary nor open nor closed.
    ``is_primary`` is unset until the response transformer derives it.
    """

    id: int | str | None = None
    color: str | None = None
    disposition: str | None = None
    is_primary: bool | None = Field(default=None, alias="isPrimary")

    model_config = ConfigDict(frozen=True, extra="allow", populate_by_name=True)

    @property
    def has_primary_color(self) -> bool:
        """Exact, case-sensitive membership in the primary color set."""
        return self.color in PRIMARY_COLORS

    @property
    def is_open(self) -> bool:
        return self.disposition == Disposition.OPEN.value

    @property
    def is_closed(self) -> bool:
        return self.disposition == Disposition.CLOSED.value

    def with_primary_flag(self) -> Record:
        """Return a copy carrying the derived ``isPrimary`` flag."""
        return self.model_copy(update={"is_primary": self.has_primary_color})
