from __future__ import annotations

"""
Integration tests for the Source Loader.

Exercises the full read, parse, group, build and merge chain on real files.
"""

import io
from pathlib import Path

import pytest

from cclq.core.canonical.printer import pretty
from cclq.core.services.loader import load_key_vals, load_source, load_sources, load_text
from cclq.domain.canonical_models import CCL
from cclq.domain.errors import (
    NestingTooDeepError,
    SourceParseError,
    SourceReadError,
    UnterminatedKeyError,
)

MERGED_SAMPLES = (
    "numbers =\n"
    "  bar =\n"
    "    19023135 =\n"
    "  baz =\n"
    "    123 =\n"
    "    12905843 =\n"
    "  foo =\n"
    "    1 =\n"
    "    12341234 =\n"
    "somekey =\n"
    "  someval =\n"
    "this =\n"
    "  bar =\n"
    "    baz =\n"
    "  foo =\n"
    "  that =\n"
)


def test_load_sources_merges_files_in_order(sample1_path: Path, sample2_path: Path) -> None:
    """TC-01: Two samples merge into the union of their keys."""
    merged = load_sources([str(sample1_path), str(sample2_path)])
    assert pretty(merged) == MERGED_SAMPLES


def test_merge_result_does_not_depend_on_file_order(sample1_path: Path, sample2_path: Path) -> None:
    forward = load_sources([str(sample1_path), str(sample2_path)])
    backward = load_sources([str(sample2_path), str(sample1_path)])
    assert forward == backward


def test_load_sources_defaults_to_stdin() -> None:
    merged = load_sources([], stdin=io.StringIO("a = b\n"))
    assert merged == CCL.key_value("a", "b")


def test_load_source_accepts_dash_for_stdin() -> None:
    assert load_source("-", stdin=io.StringIO("k =\n")) == CCL.key_only("k")


def test_parse_failure_names_the_source(tmp_path: Path) -> None:
    """TC-02: Parse errors are wrapped with the offending path."""
    broken = tmp_path / "broken.ccl"
    broken.write_text("valid = yes\ndangling\n", encoding="utf-8")

    with pytest.raises(SourceParseError) as exc_info:
        load_sources([str(broken)])

    assert exc_info.value.path == str(broken)
    assert isinstance(exc_info.value.cause, UnterminatedKeyError)
    assert str(exc_info.value) == f"Failed to parse '{broken}': No value found for key: dangling"


def test_unreadable_source_stops_loading(tmp_path: Path, sample1_path: Path) -> None:
    with pytest.raises(SourceReadError):
        load_sources([str(sample1_path), str(tmp_path / "missing.ccl")])


def test_load_text_applies_depth_bound() -> None:
    with pytest.raises(NestingTooDeepError):
        load_text("a =\n  b =\n    c = d\n", max_depth=1)


def test_load_key_vals_labels_errors() -> None:
    with pytest.raises(SourceParseError) as exc_info:
        load_key_vals("oops", source="inline")
    assert exc_info.value.path == "inline"
