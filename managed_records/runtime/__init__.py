"""Runtime components: HTTP transport, page fetching and orchestration."""

from .paging import PageOrchestrator, PagePlan, PagePlanner
from .rest import HTTPClient, PageFetcher

__all__ = [
    "HTTPClient",
    "PageFetcher",
    "PageOrchestrator",
    "PagePlan",
    "PagePlanner",
]
