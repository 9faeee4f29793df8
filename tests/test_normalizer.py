"""Tests for value normalization."""

from __future__ import annotations

import pytest

from datagrid_filters import Range, build_filter
from datagrid_filters.normalizer import is_blank, normalize_multiple_value


class TestNormalizeMultipleValue:
    def test_string_split_on_default_separator(self):
        assert normalize_multiple_value("a,b,c") == ["a", "b", "c"]

    def test_string_split_on_custom_separator(self):
        assert normalize_multiple_value("a|b", "|") == ["a", "b"]

    def test_range_collapses_to_boundaries(self):
        assert normalize_multiple_value(Range(5, 10)) == [5, 10]

    def test_builtin_range_collapses_to_boundaries(self):
        assert normalize_multiple_value(range(5, 10)) == [5, 10]

    def test_list_kept_in_order(self):
        assert normalize_multiple_value([3, 1, 2]) == [3, 1, 2]

    def test_tuple_listed(self):
        assert normalize_multiple_value((1, 2)) == [1, 2]

    def test_scalar_wrapped(self):
        assert normalize_multiple_value(7) == [7]
        assert normalize_multiple_value({"k": "v"}) == [{"k": "v"}]


@pytest.mark.parametrize(
    ("value", "expected"),
    [
        ("", True),
        ("  ", True),
        ([], True),
        ((), True),
        (set(), True),
        ({}, True),
        ("a", False),
        ([None], False),
        (0, False),
        (False, False),
        (None, False),
    ],
)
def test_is_blank(value, expected):
    assert is_blank(value) is expected


class TestParseValues:
    def test_multiple_integers_from_string(self):
        ident = build_filter("integer", "id", multiple=True)
        assert ident.parse_values("1,2,3") == [1, 2, 3]

    def test_multiple_with_custom_separator(self):
        ident = build_filter("integer", "id", multiple="|")
        assert ident.separator == "|"
        assert ident.parse_values("4|5") == [4, 5]

    def test_multiple_range_keeps_only_boundaries(self):
        ident = build_filter("integer", "id", multiple=True)
        assert ident.parse_values(Range(5, 10)) == [5, 10]

    def test_multiple_scalar_becomes_list(self):
        ident = build_filter("integer", "id", multiple=True)
        assert ident.parse_values(3) == [3]

    def test_multiple_none_stays_none(self):
        ident = build_filter("integer", "id", multiple=True)
        assert ident.parse_values(None) is None

    def test_multiple_drops_unparseable_elements(self):
        ident = build_filter("integer", "id", multiple=True)
        assert ident.parse_values("1,abc,3") == [1, 3]
        assert ident.parse_values([None, "x"]) == [None]

    def test_multiple_all_unparseable_is_noop(self, grid, scope):
        ident = build_filter("integer", "id", multiple=True)
        assert ident.parse_values("abc") == []
        assert ident.apply(grid, scope, "abc") is scope

    def test_single_value_never_a_list(self):
        ident = build_filter("integer", "id")
        assert ident.parse_values("12") == 12
