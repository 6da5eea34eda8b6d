from __future__ import annotations

"""
Unit tests for key path queries.
"""

import pytest

from cclq.core.canonical.builder import parse_ccl
from cclq.core.query import query, query_many
from cclq.domain.canonical_models import CCL
from cclq.domain.errors import KeyNotFoundError

DOC = "numbers =\n  foo = 1\n  bar = 2\nsomekey = someval\nports =\n  = 80\n"


@pytest.fixture
def doc() -> CCL:
    return parse_ccl(DOC)


def test_single_segment(doc: CCL) -> None:
    assert query(doc, "somekey") == CCL.key_only("someval")


def test_nested_path(doc: CCL) -> None:
    assert query(doc, "numbers=foo") == CCL.key_only("1")


def test_path_can_reach_scalar_value(doc: CCL) -> None:
    assert query(doc, "numbers=foo=1") == CCL.empty()


def test_empty_segment_addresses_empty_key(doc: CCL) -> None:
    """TC-01: Segments are matched verbatim, including the empty key."""
    assert query(doc, "ports=") == CCL.key_only("80")


def test_segments_are_not_trimmed(doc: CCL) -> None:
    with pytest.raises(KeyNotFoundError):
        query(doc, "numbers = foo")


def test_missing_segment_is_reported(doc: CCL) -> None:
    """TC-02: The first unresolved segment is named in the error."""
    with pytest.raises(KeyNotFoundError) as exc_info:
        query(doc, "numbers=missing=deeper")

    assert exc_info.value.segment == "missing"
    assert str(exc_info.value) == "Key 'missing' not found"


def test_query_many_yields_in_order_and_stops_on_failure(doc: CCL) -> None:
    results = query_many(doc, ["somekey", "numbers=bar", "nope", "numbers"])

    assert next(results) == ("somekey", CCL.key_only("someval"))
    assert next(results) == ("numbers=bar", CCL.key_only("2"))
    with pytest.raises(KeyNotFoundError):
        next(results)
