"""Test doubles shared by runtime and API tests."""

from __future__ import annotations

from typing import Any
from unittest.mock import AsyncMock, MagicMock

from managed_records.core import PAGE_LIMIT
from managed_records.runtime.rest import HTTPClient


def make_response(status: int = 200, payload: Any = None, json_error: Exception | None = None):
    """Mock aiohttp response usable as an async context manager."""
    response = AsyncMock()
    response.status = status
    response.url = "http://records.test/records"
    if json_error is not None:
        response.json = AsyncMock(side_effect=json_error)
    else:
        response.json = AsyncMock(return_value=payload)
    response.__aenter__ = AsyncMock(return_value=response)
    response.__aexit__ = AsyncMock(return_value=None)
    return response


def make_session(*responses: Any) -> MagicMock:
    """Mock session whose get() yields the given responses (or raises)."""
    session = MagicMock()
    session.closed = False
    if len(responses) == 1:
        side = responses[0]
        if isinstance(side, BaseException):
            session.get = MagicMock(side_effect=side)
        else:
            session.get = MagicMock(return_value=side)
    else:
        session.get = MagicMock(side_effect=list(responses))
    return session


def page_of(params: Any) -> int:
    """Page number addressed by a query parameter list."""
    offset = int(dict(params)["offset"])
    return offset // PAGE_LIMIT + 1


def serving_http(pages: dict[int, Any]) -> MagicMock:
    """Mock HTTPClient answering per page number.

    Values are record lists or exceptions to raise; unknown pages are empty.
    """

    async def get_json_array(url, params=None):
        value = pages.get(page_of(params), [])
        if isinstance(value, BaseException):
            raise value
        return value

    http = MagicMock(spec=HTTPClient)
    http.get_json_array = AsyncMock(side_effect=get_json_array)
    http.close = AsyncMock()
    return http


def records(*ids: int, color: str = "green", disposition: str = "open") -> list[dict[str, Any]]:
    return [{"id": i, "color": color, "disposition": disposition} for i in ids]
