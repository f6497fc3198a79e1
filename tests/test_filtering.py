# SPDX-License-Identifier: MIT
"""Unit tests for mapping and set filtering."""

from lwc_mobile_common import filter_mapping, filter_set


class TestFilterMapping:
    """Tests for filter_mapping function."""

    def test_keeps_matching_entries(self):
        data = {"a": 1, "b": 2, "c": 3, "d": 4}
        result = filter_mapping(data, lambda k, v: v % 2 == 0)
        assert result == {"b": 2, "d": 4}

    def test_predicate_receives_key_and_value(self):
        data = {"ios": "13.0", "android": "26"}
        result = filter_mapping(data, lambda k, v: k == "ios")
        assert result == {"ios": "13.0"}

    def test_preserves_insertion_order(self):
        data = {"z": 1, "a": 2, "m": 3, "b": 4}
        result = filter_mapping(data, lambda k, v: k != "a")
        assert list(result) == ["z", "m", "b"]

    def test_none_yields_empty(self):
        assert filter_mapping(None, lambda k, v: True) == {}

    def test_returns_new_dict(self):
        data = {"a": 1}
        result = filter_mapping(data, lambda k, v: True)
        assert result == data
        assert result is not data

    def test_only_true_is_accepted(self):
        """Truthy values other than True do not keep an entry."""
        data = {"a": 1, "b": 0}
        result = filter_mapping(data, lambda k, v: v)  # type: ignore[arg-type, return-value]
        assert result == {}


class TestFilterSet:
    """Tests for filter_set function."""

    def test_keeps_matching_elements(self):
        assert filter_set({1, 2, 3, 4}, lambda v: v > 2) == {3, 4}

    def test_none_yields_empty(self):
        assert filter_set(None, lambda v: True) == set()

    def test_returns_new_set(self):
        data = {"ios", "android"}
        result = filter_set(data, lambda v: True)
        assert result == data
        assert result is not data

    def test_nothing_matches(self):
        assert filter_set({"ios", "android"}, lambda v: v == "windows") == set()
