"""Unit tests for RetrieveOptions and PageQuery."""

import pytest
from pydantic import ValidationError

from managed_records.models import PageQuery, RetrieveOptions


class TestRetrieveOptions:
    """Test option normalization."""

    def test_defaults(self):
        options = RetrieveOptions()
        assert options.page == 1
        assert options.colors == ()

    def test_none_colors(self):
        assert RetrieveOptions(colors=None).colors == ()

    def test_single_string_color(self):
        """Test a bare color string becomes a one-element filter."""
        assert RetrieveOptions(colors="red").colors == ("red",)

    def test_colors_keep_order_and_drop_duplicates(self):
        options = RetrieveOptions(colors=["brown", "red", "brown", "blue"])
        assert options.colors == ("brown", "red", "blue")

    def test_empty_string_means_no_filter(self):
        assert RetrieveOptions(colors="").colors == ()

    def test_empty_strings_dropped_from_list(self):
        assert RetrieveOptions(colors=["", "red", ""]).colors == ("red",)

    def test_set_of_colors_accepted(self):
        assert RetrieveOptions(colors={"red"}).colors == ("red",)

    def test_page_stored_as_given(self):
        """Test page is not validated at construction."""
        assert RetrieveOptions(page="two").page == "two"

    def test_non_iterable_colors_rejected(self):
        with pytest.raises(ValidationError):
            RetrieveOptions(colors=5)


class TestPageQuery:
    """Test query serialization."""

    def test_to_params_repeats_color_key(self):
        query = PageQuery(page=2, offset=10, color_filter=("red", "brown"))
        assert query.to_params() == [
            ("limit", "10"),
            ("offset", "10"),
            ("color[]", "red"),
            ("color[]", "brown"),
        ]

    def test_as_mapping(self):
        query = PageQuery(page=1, offset=0)
        assert query.as_mapping() == {"limit": 10, "offset": 0, "color[]": []}

    def test_negative_offset_allowed(self):
        assert PageQuery(page=0, offset=-10).offset == -10
