from __future__ import annotations

"""
Global Pytest Configuration and Fixtures.

This module sets up the testing environment, including:
1. Path manipulation to ensure the 'src' directory is importable.
2. Shared fixtures for configuration dictionaries and sample documents.
"""

import os
import sys
from pathlib import Path
from typing import Any, Dict

import pytest

# -----------------------------------------------------------------------------
# Path Configuration
# -----------------------------------------------------------------------------
_SRC_PATH = os.path.abspath(os.path.join(os.path.dirname(__file__), "..", "src"))
if _SRC_PATH not in sys.path:
    sys.path.insert(0, _SRC_PATH)

FIXTURES_DIR = Path(__file__).resolve().parent / "fixtures"


# -----------------------------------------------------------------------------
# Shared Fixtures
# -----------------------------------------------------------------------------
@pytest.fixture
def mock_config_dict() -> Dict[str, Any]:
    """
    Return a valid, complete configuration dictionary for testing.

    Mirrors the structure defined in 'cclq.domain.config'.

    Returns:
        Dict[str, Any]: A sample configuration dictionary.
    """
    return {
        # Sources and Queries
        "files": ["a.ccl", "b.ccl"],
        "queries": ["numbers=foo"],

        # Rendering
        "output_format": "ccl",
        "json_indent": 2,

        # Resource bounds
        "max_depth": None,

        # Diagnostics
        "log_level": "WARNING",
        "log_file": None,
    }


@pytest.fixture
def fixtures_dir() -> Path:
    return FIXTURES_DIR


@pytest.fixture
def sample1_path() -> Path:
    return FIXTURES_DIR / "sample1.ccl"


@pytest.fixture
def sample2_path() -> Path:
    return FIXTURES_DIR / "sample2.ccl"


@pytest.fixture
def stress_text() -> str:
    """The comprehensive sample document (comments, lists, repeated keys)."""
    return (FIXTURES_DIR / "stress.ccl").read_text(encoding="utf-8")
