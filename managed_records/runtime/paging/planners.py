"""Page planning logic.

This module provides the PagePlanner class that expands one retrieve
request into the target page fetch plus its two adjacency probes.
"""

from __future__ import annotations

from ...core.enums import PageRole
from ...core.resolver import query_for_page, resolve_query
from ...models import RetrieveOptions
from .definitions import PagePlan
from .telemetry import log_page_plan


class PagePlanner:
    """Plans the page fetches for a retrieve request.

    The previous-page probe for page 1 addresses page 0, which becomes a
    negative offset. It is forwarded to the endpoint unless
    ``probe_page_zero`` is disabled, in which case it is not planned and
    the previous-page hint resolves to None.
    """

    def __init__(self, probe_page_zero: bool = True) -> None:
        self._probe_page_zero = probe_page_zero

    def plan(self, options: RetrieveOptions | None = None) -> list[PagePlan]:
        """Plan fetches for a request.

        Args:
            options: Retrieve options (defaults to page 1, no color filter)

        Returns:
            Plans in launch order: current, previous (if planned), next
        """
        target = resolve_query(options)
        page = target.page

        plans = [PagePlan(role=PageRole.CURRENT, query=target)]
        if page > 1 or self._probe_page_zero:
            plans.append(
                PagePlan(
                    role=PageRole.PREVIOUS,
                    query=query_for_page(page - 1, target.color_filter),
                )
            )
        plans.append(
            PagePlan(
                role=PageRole.NEXT,
                query=query_for_page(page + 1, target.color_filter),
            )
        )

        log_page_plan(
            page=page,
            roles=[plan.role for plan in plans],
            pages=[plan.page for plan in plans],
        )
        return plans
