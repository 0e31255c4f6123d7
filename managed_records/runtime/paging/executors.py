"""Page orchestration: concurrent fetch of the target page and its neighbours.

This module provides the PageOrchestrator class that executes page plans
concurrently, waits for every fetch to settle, and merges the outcomes
into one PageResult carrying adjacency hints.
"""

from __future__ import annotations

import asyncio
from time import perf_counter

from ...core.enums import PageRole
from ...core.exceptions import FetchError
from ...models import PageOutcome, PageResult, RetrieveOptions
from ..rest.fetcher import PageFetcher
from .definitions import PagePlan
from .planners import PagePlanner
from .telemetry import log_page_error, log_page_orchestration_complete


class PageOrchestrator:
    """Fetches a target page and probes the pages around it.

    All planned fetches run concurrently and are joined; nothing is
    cancelled early, so a stalled probe stalls the whole call. A target
    page that yields no value becomes an empty record sequence.
    """

    def __init__(self, fetcher: PageFetcher, planner: PagePlanner | None = None) -> None:
        """Initialize page orchestrator.

        Args:
            fetcher: Page fetcher used for every planned page
            planner: Optional planner (default: probes page 0 for page 1)
        """
        self._fetcher = fetcher
        self._planner = planner or PagePlanner()

    async def orchestrate(
        self, base_url: str, options: RetrieveOptions | None = None
    ) -> PageResult:
        """Fetch the requested page with adjacency hints.

        Args:
            base_url: Records endpoint address
            options: Retrieve options

        Returns:
            PageResult for the target page (possibly empty)
        """
        plans = self._planner.plan(options)
        start = perf_counter()

        settled = await asyncio.gather(
            *(self._fetcher.fetch(base_url, plan.query, plan.role) for plan in plans),
            return_exceptions=True,
        )
        outcomes = {
            plan.role: self._settle(plan, result) for plan, result in zip(plans, settled)
        }

        current = outcomes[PageRole.CURRENT]
        probes = [outcome for role, outcome in outcomes.items() if role.is_probe]
        page = current.query.page

        result = PageResult(
            page=page,
            records=current.records or (),
            previous_page=self._hint(outcomes.get(PageRole.PREVIOUS)),
            next_page=self._hint(outcomes.get(PageRole.NEXT)),
            current_ok=current.ok,
            probes_ok=all(outcome.ok for outcome in probes),
        )

        log_page_orchestration_complete(
            page=page,
            previous_page=result.previous_page,
            next_page=result.next_page,
            total_records=len(result.records),
            current_ok=result.current_ok,
            probes_ok=result.probes_ok,
            total_latency_ms=(perf_counter() - start) * 1000.0,
        )
        return result

    def _settle(self, plan: PagePlan, result: PageOutcome | BaseException) -> PageOutcome:
        """Turn a gathered result into a PageOutcome.

        Exceptions the fetcher did not absorb still count as a failed page
        so every fetch settles into an outcome.
        """
        if isinstance(result, PageOutcome):
            return result
        if not isinstance(result, Exception):
            raise result

        log_page_error(
            page=plan.page,
            role=plan.role,
            error_type=type(result).__name__,
            error_message=str(result),
        )
        error = FetchError(f"Unexpected {type(result).__name__}: {result}")
        error.__cause__ = result
        return PageOutcome(query=plan.query, role=plan.role, error=error)

    @staticmethod
    def _hint(outcome: PageOutcome | None) -> int | None:
        """Adjacent page number if the probe delivered at least one record."""
        if outcome is None or not outcome.has_records:
            return None
        return outcome.query.page
