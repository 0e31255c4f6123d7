"""Structured logging for paging operations.

This module provides telemetry hooks for page fetches and orchestration,
emitting human-readable messages with structured ``extra`` payloads.
"""

from __future__ import annotations

import logging

from ...core.enums import PageRole

logger = logging.getLogger(__name__)


def log_page_plan(*, page: int, roles: list[PageRole], pages: list[int]) -> None:
    """Log page plan creation.

    Args:
        page: Target page number
        roles: Roles of the planned fetches, in launch order
        pages: Page numbers of the planned fetches, in launch order
    """
    logger.debug(
        "page_plan_created",
        extra={
            "page": page,
            "roles": [role.value for role in roles],
            "pages": pages,
        },
    )


def log_page_fetched(
    *,
    page: int,
    role: PageRole,
    offset: int,
    records: int,
    latency_ms: float | None = None,
) -> None:
    """Log a successful page fetch.

    Args:
        page: Page number fetched
        role: Role of the fetch
        offset: Offset sent to the endpoint
        records: Number of records delivered
        latency_ms: Latency in milliseconds (optional)
    """
    logger.debug(
        "page_fetched",
        extra={
            "page": page,
            "role": role.value,
            "offset": offset,
            "records": records,
            "latency_ms": latency_ms,
        },
    )


def log_page_error(
    *,
    page: int,
    role: PageRole,
    error_type: str,
    error_message: str,
    status_code: int | None = None,
) -> None:
    """Log an absorbed page fetch failure.

    Args:
        page: Page number that failed
        role: Role of the fetch
        error_type: Exception class name (e.g., "ServerError", "NetworkFailure")
        error_message: Error message
        status_code: HTTP status, when one was received
    """
    logger.error(
        "Error fetching %s page %d: %s",
        role.value,
        page,
        error_message,
        extra={
            "page": page,
            "role": role.value,
            "error_type": error_type,
            "error_message": error_message,
            "status_code": status_code,
        },
    )


def log_page_orchestration_complete(
    *,
    page: int,
    previous_page: int | None,
    next_page: int | None,
    total_records: int,
    current_ok: bool,
    probes_ok: bool,
    total_latency_ms: float | None = None,
) -> None:
    """Log completion of one orchestrated retrieve.

    Args:
        page: Target page number
        previous_page: Resolved previous-page hint
        next_page: Resolved next-page hint
        total_records: Records on the target page
        current_ok: Whether the target page was fetched
        probes_ok: Whether both probes were fetched
        total_latency_ms: Wall time of the concurrent join (optional)
    """
    logger.info(
        "page_orchestration_complete",
        extra={
            "page": page,
            "previous_page": previous_page,
            "next_page": next_page,
            "total_records": total_records,
            "current_ok": current_ok,
            "probes_ok": probes_ok,
            "total_latency_ms": total_latency_ms,
        },
    )
