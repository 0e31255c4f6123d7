"""Single-page fetcher for the records endpoint."""

from __future__ import annotations

from time import perf_counter
from typing import Any

from pydantic import ValidationError

from ...core.enums import PageRole
from ...core.exceptions import FetchError, MalformedBody
from ...models import PageOutcome, PageQuery, Record
from ..paging.telemetry import log_page_error, log_page_fetched
from .http_client import HTTPClient


def parse_records(payload: list[Any], url: str | None = None) -> tuple[Record, ...]:
    """Validate a decoded JSON array into records, keeping delivery order.

    Elements missing ``color`` or ``disposition`` are kept as records.

    Raises:
        MalformedBody: If an element is not a JSON object, or a known
            field has the wrong type
    """
    for index, item in enumerate(payload):
        if not isinstance(item, dict):
            raise MalformedBody(
                f"Response array element {index} is {type(item).__name__}, not an object",
                url=url,
            )
    try:
        return tuple(Record.model_validate(item) for item in payload)
    except ValidationError as e:
        raise MalformedBody(
            f"Response array holds an invalid record: {e.error_count()} validation error(s)",
            url=url,
        ) from e


class PageFetcher:
    """Fetches one page and folds every failure into a no-value outcome.

    ``fetch`` never raises a FetchError to its caller; the error is logged
    and attached to the returned PageOutcome instead.
    """

    def __init__(self, http: HTTPClient) -> None:
        self._http = http

    async def fetch(
        self,
        base_url: str,
        query: PageQuery,
        role: PageRole = PageRole.CURRENT,
    ) -> PageOutcome:
        start = perf_counter()
        try:
            payload = await self._http.get_json_array(base_url, params=query.to_params())
            records = parse_records(payload, url=base_url)
        except FetchError as e:
            log_page_error(
                page=query.page,
                role=role,
                error_type=type(e).__name__,
                error_message=str(e),
                status_code=e.status_code,
            )
            return PageOutcome(query=query, role=role, error=e)

        log_page_fetched(
            page=query.page,
            role=role,
            offset=query.offset,
            records=len(records),
            latency_ms=(perf_counter() - start) * 1000.0,
        )
        return PageOutcome(query=query, role=role, records=records)
