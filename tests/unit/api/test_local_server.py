"""End-to-end tests against a local aiohttp records server."""

from __future__ import annotations

from typing import Any

import pytest
from aiohttp import web
from aiohttp import test_utils

from managed_records import RetrieveStatus, retrieve


def make_app(pages: dict[int, Any], seen: list) -> web.Application:
    """Records endpoint serving fixed pages keyed by page number.

    A page value is a record list, or an int status code to fail with.
    """

    async def records(request: web.Request) -> web.Response:
        seen.append(request.query.copy())
        page = int(request.query["offset"]) // int(request.query["limit"]) + 1
        value = pages.get(page, [])
        if isinstance(value, int):
            return web.Response(status=value, text="upstream failure")
        return web.json_response(value)

    app = web.Application()
    app.router.add_get("/records", records)
    return app


@pytest.mark.asyncio
async def test_retrieve_over_http():
    seen: list = []
    pages = {
        1: [{"id": 10, "color": "blue", "disposition": "closed"}],
        2: [
            {"id": 11, "color": "red", "disposition": "open"},
            {"id": 12, "color": "yellow", "disposition": "closed"},
        ],
    }
    async with test_utils.TestServer(make_app(pages, seen)) as server:
        result = await retrieve(
            {"page": 2, "colors": ["red", "yellow"]},
            base_url=str(server.make_url("/records")),
        )

    assert result.to_dict() == {
        "previousPage": 1,
        "nextPage": None,
        "ids": [11, 12],
        "open": [{"id": 11, "color": "red", "disposition": "open", "isPrimary": True}],
        "closedPrimaryCount": 1,
        "status": "ok",
    }
    assert sorted(int(q["offset"]) for q in seen) == [0, 10, 20]
    assert all(q.getall("color[]") == ["red", "yellow"] for q in seen)


@pytest.mark.asyncio
async def test_server_error_on_target_page():
    pages = {1: 500, 2: [{"id": 1, "color": "red", "disposition": "open"}]}
    async with test_utils.TestServer(make_app(pages, [])) as server:
        result = await retrieve(page=1, base_url=str(server.make_url("/records")))

    assert result.status is RetrieveStatus.FAILED
    assert result.ids == ()
    assert result.previous_page is None
    assert result.next_page == 2


@pytest.mark.asyncio
async def test_malformed_body_counts_as_no_value():
    async def html(request: web.Request) -> web.Response:
        return web.Response(text="<html>not json</html>", content_type="text/html")

    app = web.Application()
    app.router.add_get("/records", html)
    async with test_utils.TestServer(app) as server:
        result = await retrieve(base_url=str(server.make_url("/records")))

    assert result.status is RetrieveStatus.FAILED
    assert result.to_dict()["ids"] == []
