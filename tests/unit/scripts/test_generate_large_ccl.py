from __future__ import annotations

"""
Unit tests for the large document generation script.
"""

import importlib.util
from pathlib import Path
from types import ModuleType

import pytest

from cclq.core.canonical.builder import parse_ccl
from cclq.core.canonical.printer import pretty

SCRIPT = Path(__file__).resolve().parents[3] / "scripts" / "generate_large_ccl.py"


@pytest.fixture
def script() -> ModuleType:
    spec = importlib.util.spec_from_file_location("generate_large_ccl", SCRIPT)
    module = importlib.util.module_from_spec(spec)
    spec.loader.exec_module(module)
    return module


def test_script_writes_canonical_document(script: ModuleType, tmp_path: Path) -> None:
    target = tmp_path / "large.ccl"

    code = script.main(["-o", str(target), "--seed", "3", "--min-pairs", "5", "--max-pairs", "20"])

    assert code == 0
    text = target.read_text(encoding="utf-8")
    assert text
    assert pretty(parse_ccl(text)) == text


def test_script_is_reproducible(script: ModuleType, tmp_path: Path) -> None:
    first, second = tmp_path / "a.ccl", tmp_path / "b.ccl"
    args = ["--seed", "11", "--min-pairs", "3", "--max-pairs", "6"]

    script.main(["-o", str(first)] + args)
    script.main(["-o", str(second)] + args)

    assert first.read_text(encoding="utf-8") == second.read_text(encoding="utf-8")


def test_script_rejects_bad_range(script: ModuleType, tmp_path: Path) -> None:
    assert script.main(["-o", str(tmp_path / "x.ccl"), "--min-pairs", "9", "--max-pairs", "2"]) == 2
