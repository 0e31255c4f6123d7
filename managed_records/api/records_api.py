"""RecordsAPI facade and the ``retrieve`` entry point.

Architecture:
    RecordsAPI composes the pipeline for one call:
    options resolution -> page orchestration -> response transformation.
    It owns the HTTP client it creates and closes it on exit; an injected
    client stays owned by the caller.

Design Decisions:
    - No cross-call state: every retrieve builds fresh queries and results
    - Failures never escape: the boundary logs them and returns a failed
      aggregate, distinguishable from an empty page through ``status``
"""

from __future__ import annotations

import logging
from collections.abc import Mapping
from typing import Any

from ..config import get_settings
from ..models import AggregateResult, RetrieveOptions
from ..runtime.paging import PageOrchestrator, PagePlanner
from ..runtime.rest import HTTPClient, PageFetcher
from .transform import transform

logger = logging.getLogger(__name__)

OptionsInput = RetrieveOptions | Mapping[str, Any] | None


def coerce_options(options: OptionsInput = None, **overrides: Any) -> RetrieveOptions:
    """Build RetrieveOptions from a model, a mapping and/or keyword overrides."""
    if isinstance(options, RetrieveOptions):
        if not overrides:
            return options
        return RetrieveOptions.model_validate({**options.model_dump(), **overrides})
    return RetrieveOptions.model_validate({**dict(options or {}), **overrides})


class RecordsAPI:
    """High-level facade for records retrieval.

    Example:
        >>> async with RecordsAPI(base_url="http://localhost:3000/records") as api:
        ...     result = await api.retrieve(page=2, colors=["red", "brown"])
        ...     print(result.to_dict())
    """

    def __init__(
        self,
        *,
        base_url: str | None = None,
        timeout: float | None = None,
        probe_page_zero: bool | None = None,
        http: HTTPClient | None = None,
    ) -> None:
        """Initialize the RecordsAPI.

        Args:
            base_url: Records endpoint (default: configured base_url)
            timeout: Total request timeout in seconds (default: configured timeout)
            probe_page_zero: Send the previous-page probe for page 1
                (default: configured probe_page_zero)
            http: Optional HTTPClient instance (creates new one if not provided)
        """
        settings = get_settings()
        self._base_url = base_url or settings.base_url
        if probe_page_zero is None:
            probe_page_zero = settings.probe_page_zero
        self._owns_http = http is None
        self._http = http or HTTPClient(timeout=timeout or settings.timeout)
        self._orchestrator = PageOrchestrator(
            PageFetcher(self._http), PagePlanner(probe_page_zero=probe_page_zero)
        )
        self._closed = False

    @property
    def base_url(self) -> str:
        return self._base_url

    async def retrieve(self, options: OptionsInput = None, **overrides: Any) -> AggregateResult:
        """Retrieve one page of records as an aggregate view.

        Args:
            options: RetrieveOptions or a mapping with ``page`` / ``colors``
            **overrides: ``page`` / ``colors`` given as keywords

        Returns:
            AggregateResult; never raises for fetch or transformation failures
        """
        try:
            if self._closed:
                raise RuntimeError("RecordsAPI is closed")
            resolved = coerce_options(options, **overrides)
            page = await self._orchestrator.orchestrate(self._base_url, resolved)
            return transform(page)
        except Exception as e:
            logger.error(f"Error: {e}", exc_info=True)
            return AggregateResult.failed()

    async def close(self) -> None:
        """Close the API and clean up resources."""
        if self._closed:
            return
        self._closed = True
        logger.debug("Closing RecordsAPI")
        if self._owns_http:
            await self._http.close()

    async def __aenter__(self) -> RecordsAPI:
        """Async context manager entry."""
        return self

    async def __aexit__(self, exc_type: Any, exc_val: Any, exc_tb: Any) -> None:
        """Async context manager exit."""
        await self.close()


async def retrieve(
    options: OptionsInput = None,
    *,
    base_url: str | None = None,
    **overrides: Any,
) -> AggregateResult:
    """Take supplied options, request the pages, and shape the response.

    Args:
        options: e.g. ``{"page": 2, "colors": ["red", "brown"]}``
        base_url: Records endpoint (default: configured base_url)
        **overrides: ``page`` / ``colors`` given as keywords

    Returns:
        AggregateResult for the requested page
    """
    async with RecordsAPI(base_url=base_url) as api:
        return await api.retrieve(options, **overrides)
