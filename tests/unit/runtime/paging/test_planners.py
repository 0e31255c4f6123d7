"""Unit tests for page planning logic."""

from __future__ import annotations

from managed_records.core import PageRole
from managed_records.models import RetrieveOptions
from managed_records.runtime.paging import PagePlanner


class TestPagePlanner:
    """Test PagePlanner functionality."""

    def test_plan_target_and_probes(self):
        plans = PagePlanner().plan(RetrieveOptions(page=3, colors=["red"]))

        assert [p.role for p in plans] == [PageRole.CURRENT, PageRole.PREVIOUS, PageRole.NEXT]
        assert [p.page for p in plans] == [3, 2, 4]
        assert [p.query.offset for p in plans] == [20, 10, 30]
        assert all(p.query.color_filter == ("red",) for p in plans)

    def test_page_one_probes_page_zero(self):
        """Test the page-0 probe is forwarded with a negative offset."""
        plans = PagePlanner().plan(RetrieveOptions(page=1))
        previous = next(p for p in plans if p.role is PageRole.PREVIOUS)
        assert previous.page == 0
        assert previous.query.offset == -10

    def test_page_zero_probe_can_be_skipped(self):
        plans = PagePlanner(probe_page_zero=False).plan(RetrieveOptions(page=1))
        assert [p.role for p in plans] == [PageRole.CURRENT, PageRole.NEXT]

    def test_skip_only_affects_page_one(self):
        plans = PagePlanner(probe_page_zero=False).plan(RetrieveOptions(page=2))
        assert len(plans) == 3

    def test_default_options(self):
        plans = PagePlanner().plan()
        assert plans[0].page == 1
        assert plans[0].query.color_filter == ()

    def test_malformed_page_plans_from_page_one(self):
        plans = PagePlanner().plan(RetrieveOptions(page=-4))
        assert [p.page for p in plans] == [1, 0, 2]
