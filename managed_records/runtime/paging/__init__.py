"""Paging layer for target page retrieval and adjacency probing.

Architecture:
    - definitions.py: Page plan structure (PagePlan)
    - planners.py: Expands a request into target page + probe plans
    - executors.py: Runs plans concurrently and merges outcomes
    - telemetry.py: Structured logging

Usage:
    The orchestrator reads the planner's plans, launches one fetch per plan,
    joins them all, and tags the target page with previous/next hints.
"""

from __future__ import annotations

from .definitions import PagePlan
from .executors import PageOrchestrator
from .planners import PagePlanner

__all__ = [
    "PagePlan",
    "PagePlanner",
    "PageOrchestrator",
]
