"""Options resolution: caller options to canonical page queries.

Pure functions only; nothing is cached between calls.
"""

from __future__ import annotations

import math
from collections.abc import Iterable
from typing import Any

from ..models.options import RetrieveOptions
from ..models.query import PageQuery
from .constants import DEFAULT_PAGE, PAGE_LIMIT


def calculate_offset(page: int = DEFAULT_PAGE, limit: int = PAGE_LIMIT) -> int:
    """Record offset of a 1-indexed page."""
    return (page - 1) * limit


def resolve_page(page: Any) -> int:
    """Coerce a caller-supplied page to a positive integer.

    Anything that is not a positive whole number (bools, strings, None,
    fractional or non-finite floats, zero, negatives) resolves to page 1.
    """
    if isinstance(page, bool) or not isinstance(page, (int, float)):
        return DEFAULT_PAGE
    if isinstance(page, float):
        if not math.isfinite(page) or not page.is_integer():
            return DEFAULT_PAGE
        page = int(page)
    return page if page >= 1 else DEFAULT_PAGE


def resolve_colors(colors: Iterable[str] | None) -> tuple[str, ...]:
    return tuple(colors) if colors else ()


def query_for_page(page: int, color_filter: Iterable[str] | None = None) -> PageQuery:
    """Build the query for an already-resolved page number.

    ``page`` is used as given so adjacency probes can address page 0.
    """
    return PageQuery(
        page=page,
        limit=PAGE_LIMIT,
        offset=calculate_offset(page, PAGE_LIMIT),
        color_filter=resolve_colors(color_filter),
    )


def resolve_query(options: RetrieveOptions | None = None) -> PageQuery:
    """Resolve retrieve options into the target page query."""
    if options is None:
        options = RetrieveOptions()
    return query_for_page(resolve_page(options.page), options.colors)
