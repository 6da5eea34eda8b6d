from __future__ import annotations

"""
Unit tests for the Canonical Value Model.

Verifies:
1. Constructor encodings (empty, key_only, key_value, nested).
2. Merge semantics (key union, recursive child merge, identity).
3. Immutability, ordering and structural equality.
"""

import dataclasses

import pytest

from cclq.domain.canonical_models import CCL


def test_constructors_encode_expected_shapes() -> None:
    """TC-01: Scalars are keys whose only child is the value with no children."""
    assert CCL.empty().to_dict() == {}
    assert CCL.key_only("a").to_dict() == {"a": {}}
    assert CCL.key_value("a", "b").to_dict() == {"a": {"b": {}}}
    assert CCL.nested("a", [CCL.key_value("b", "c"), CCL.key_only("d")]).to_dict() == {
        "a": {"b": {"c": {}}, "d": {}}
    }


def test_nested_with_no_children_equals_key_only() -> None:
    assert CCL.nested("a", []) == CCL.key_only("a")


def test_entries_are_kept_sorted() -> None:
    value = CCL({"b": CCL.empty(), "a": CCL.empty(), "": CCL.empty()})
    assert value.keys() == ["", "a", "b"]


def test_structural_equality_ignores_insertion_order() -> None:
    left = CCL({"x": CCL.key_only("1"), "y": CCL.empty()})
    right = CCL({"y": CCL.empty(), "x": CCL.key_only("1")})
    assert left == right
    assert hash(left) == hash(right)


def test_values_are_frozen() -> None:
    with pytest.raises(dataclasses.FrozenInstanceError):
        CCL.empty().entries = {}  # type: ignore[misc]


# -----------------------------------------------------------------------------
# Merge
# -----------------------------------------------------------------------------

def test_merge_unions_disjoint_keys() -> None:
    merged = CCL.key_value("a", "1").merge(CCL.key_value("b", "2"))
    assert merged.to_dict() == {"a": {"1": {}}, "b": {"2": {}}}


def test_merge_combines_shared_keys_recursively() -> None:
    """TC-02: Shared keys merge their children instead of overwriting."""
    left = CCL.nested("a", [CCL.key_value("b", "c")])
    right = CCL.nested("a", [CCL.key_value("b", "d")])
    assert left.merge(right).to_dict() == {"a": {"b": {"c": {}, "d": {}}}}


def test_merge_collapses_identical_values() -> None:
    value = CCL.key_value("k", "v")
    assert value.merge(value) == value


def test_merge_does_not_mutate_operands() -> None:
    left = CCL.key_value("a", "1")
    right = CCL.key_value("a", "2")
    left.merge(right)
    assert left.to_dict() == {"a": {"1": {}}}
    assert right.to_dict() == {"a": {"2": {}}}


def test_empty_is_two_sided_identity() -> None:
    value = CCL.nested("a", [CCL.key_value("b", "c")])
    assert CCL.empty().merge(value) == value
    assert value.merge(CCL.empty()) == value


def test_aggregate_matches_pairwise_fold() -> None:
    items = [CCL.key_value("a", "1"), CCL.key_value("a", "2"), CCL.key_only("b"), CCL.key_value("a", "1")]
    expected = CCL.empty()
    for item in items:
        expected = expected.merge(item)
    assert CCL.aggregate(items) == expected
    assert CCL.aggregate([]) == CCL.empty()


# -----------------------------------------------------------------------------
# Read Access
# -----------------------------------------------------------------------------

def test_read_access_helpers() -> None:
    value = CCL.nested("a", [CCL.key_value("b", "c")])

    assert "a" in value
    assert "z" not in value
    assert len(value) == 1
    assert list(value) == ["a"]
    assert value["a"] == CCL.key_value("b", "c")
    assert value.get("z") is None
    assert value.get("a") == CCL.key_value("b", "c")
    assert value.items() == [("a", CCL.key_value("b", "c"))]
    assert CCL.empty().is_empty()
    assert not value.is_empty()
