"""Query parameters for one page request."""

from __future__ import annotations

from typing import Any

from pydantic import BaseModel, ConfigDict

from ..core.constants import COLOR_FILTER_PARAM, PAGE_LIMIT


class PageQuery(BaseModel):
    """Canonical query for a single page.

    ``offset`` is ``(page - 1) * limit`` and is not bounded below: the
    previous-page probe for page 1 asks for offset ``-limit``.
    """

    page: int
    limit: int = PAGE_LIMIT
    offset: int
    color_filter: tuple[str, ...] = ()

    model_config = ConfigDict(frozen=True)

    def as_mapping(self) -> dict[str, Any]:
        """Query as a mapping; the color key is present even when empty."""
        return {
            "limit": self.limit,
            "offset": self.offset,
            COLOR_FILTER_PARAM: list(self.color_filter),
        }

    def to_params(self) -> list[tuple[str, str]]:
        """Multi-value query list for aiohttp.

        Every color is sent under the bracketed key, one pair per value.
        """
        params = [("limit", str(self.limit)), ("offset", str(self.offset))]
        params.extend((COLOR_FILTER_PARAM, color) for color in self.color_filter)
        return params
