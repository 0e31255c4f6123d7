"""Page plan definitions."""

from __future__ import annotations

from dataclasses import dataclass

from ...core.enums import PageRole
from ...models import PageQuery


@dataclass(frozen=True)
class PagePlan:
    """Plan for a single page fetch.

    Attributes:
        role: Target page or adjacency probe
        query: Query to send for this page
    """

    role: PageRole
    query: PageQuery

    @property
    def page(self) -> int:
        return self.query.page
