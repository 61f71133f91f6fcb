"""Tests for flatten() and unflatten()."""

from __future__ import annotations

from typing import Any

import pytest

from typedconf.flatten import flatten, unflatten


class TestFlatten:
    def test_flattens_nested_maps_and_lists(self, sample_data: dict[str, Any]) -> None:
        flat = flatten(sample_data)
        assert flat["key_for_map.baz"] == "qux"
        assert flat["key_for_list.3"] == "strings"
        assert flat["a.somewhat.deeply.nested.string"] == "ACTUALLY, A ROPE"
        assert flat["spaces are.actually fine"] == "see?"

    def test_containers_are_expanded_not_included(self, sample_data: dict[str, Any]) -> None:
        flat = flatten(sample_data)
        assert "ports" not in flat
        assert "a.somewhat" not in flat
        assert "key_for_list" not in flat

    def test_empty_containers_are_leaves(self, sample_data: dict[str, Any]) -> None:
        flat = flatten(sample_data)
        assert flat["empty_map"] == {}
        assert flat["empty_list"] == []

    def test_null_is_a_leaf(self, sample_data: dict[str, Any]) -> None:
        flat = flatten(sample_data)
        assert "always_null" in flat
        assert flat["always_null"] is None

    def test_custom_delimiter(self, sample_data: dict[str, Any]) -> None:
        flat = flatten(sample_data, "|-|")
        assert flat["key_for_map|-|baz"] == "qux"
        assert flat["key_for_list|-|3"] == "strings"
        assert flat["a|-|somewhat|-|deeply|-|nested|-|string"] == "ACTUALLY, A ROPE"

    def test_preserves_order(self) -> None:
        flat = flatten({"b": {"y": 1, "x": 2}, "a": 3})
        assert list(flat) == ["b.y", "b.x", "a"]

    def test_empty_delimiter_rejected(self) -> None:
        with pytest.raises(ValueError):
            flatten({"a": 1}, "")

    def test_leaves_are_copies(self) -> None:
        tree: dict[str, Any] = {"a": {"b": []}}
        flatten(tree)["a.b"].append("x")
        assert tree == {"a": {"b": []}}


class TestUnflatten:
    def test_renests_maps(self) -> None:
        assert unflatten({"a.b": 1, "a.c": 2, "d": 3}) == {"a": {"b": 1, "c": 2}, "d": 3}

    def test_index_keys_become_lists(self) -> None:
        assert unflatten({"l.0": "a", "l.1": "b"}) == {"l": ["a", "b"]}

    def test_non_contiguous_indices_stay_map(self) -> None:
        assert unflatten({"l.0": "a", "l.2": "b"}) == {"l": {"0": "a", "2": "b"}}

    def test_empty_container_leaves_kept(self) -> None:
        assert unflatten({"m": {}, "l": []}) == {"m": {}, "l": []}

    def test_custom_delimiter(self) -> None:
        assert unflatten({"a|-|b": 1}, "|-|") == {"a": {"b": 1}}

    def test_leaf_then_branch_conflict(self) -> None:
        with pytest.raises(ValueError, match="conflicts"):
            unflatten({"a": 1, "a.b": 2})

    def test_branch_then_leaf_conflict(self) -> None:
        with pytest.raises(ValueError, match="conflicts"):
            unflatten({"a.b": 2, "a": 1})

    def test_cannot_descend_into_empty_map_leaf(self) -> None:
        with pytest.raises(ValueError):
            unflatten({"a": {}, "a.b": 1})

    def test_round_trip(self) -> None:
        tree = {
            "server": {"host": "localhost", "ports": [80, 443]},
            "debug": False,
            "ratio": 0.5,
            "matrix": [[1, 2], [3, 4]],
            "users": [{"name": "ann"}, {"name": "bob", "admin": True}],
            "nothing": None,
        }
        assert unflatten(flatten(tree)) == tree

    def test_round_trip_with_delimiter(self, sample_data: dict[str, Any]) -> None:
        sample_data.pop("empty_map")
        sample_data.pop("empty_list")
        assert unflatten(flatten(sample_data, "/"), "/") == sample_data
