"""Shared constants for the records endpoint.

This module centralizes the request defaults and the primary color set so
the resolver and transformer stay small and focused.
"""

from __future__ import annotations

# Records returned per page. Listed among the request defaults but the
# endpoint contract fixes it; callers cannot override it.
PAGE_LIMIT = 10

DEFAULT_PAGE = 1

DEFAULT_REQUEST_OPTIONS = {
    "page": DEFAULT_PAGE,
    "colors": (),
    "limit": PAGE_LIMIT,
}

PRIMARY_COLORS = frozenset({"red", "blue", "yellow"})

# API answers 400 for single color requests unless the braces are supplied
COLOR_FILTER_PARAM = "color[]"
