from __future__ import annotations

"""
Unit tests for the flat pair models.
"""

from cclq.domain.key_val_models import KeyVal, KeyVals


def test_create_trims_both_sides() -> None:
    assert KeyVal.create("  key ", "\n value \n") == KeyVal("key", "value")


def test_str_quotes_value() -> None:
    """Values are shown quoted so embedded newlines stay visible."""
    assert str(KeyVal("a", "b")) == 'a = "b"'
    assert str(KeyVal("b", "\n  c = d")) == 'b = "\\n  c = d"'


def test_key_vals_merge_concatenates() -> None:
    left = KeyVals.of([KeyVal("a", "1")])
    right = KeyVals.of([KeyVal("a", "2"), KeyVal("b", "3")])
    merged = left.merge(right)

    assert list(merged) == [KeyVal("a", "1"), KeyVal("a", "2"), KeyVal("b", "3")]
    assert len(merged) == 3
    assert merged[0] == KeyVal("a", "1")
    assert merged[1:] == right


def test_key_vals_identity_and_aggregate() -> None:
    seq = KeyVals.of([KeyVal("x", "y")])
    assert KeyVals.empty().merge(seq) == seq
    assert seq.merge(KeyVals.empty()) == seq
    assert KeyVals.aggregate([seq, seq]) == KeyVals.of([KeyVal("x", "y")] * 2)
    assert KeyVals.aggregate([]) == KeyVals.empty()
