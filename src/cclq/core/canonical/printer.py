from __future__ import annotations

"""
Canonical Pretty-Printer.

Serializes canonical values back into notation text. The output is the right
inverse of the parse pipeline: parsing, grouping and building the printed text
reproduces the original value.
"""

from typing import List

from cclq.domain.canonical_models import CCL
from cclq.domain.key_val_models import KeyVals

INDENT_STEP = 2

# -----------------------------------------------------------------------------
# PUBLIC API
# -----------------------------------------------------------------------------

def pretty(value: CCL, indent: int = 0) -> str:
    """
    Render a canonical value, one `key =` line per entry.

    Children are rendered below their key, indented by INDENT_STEP more
    spaces. The empty value renders as the empty string, so a leaf key is
    exactly one line.

    Args:
        value: Canonical value to render.
        indent: Number of leading spaces for the top-level keys.

    Returns:
        str: Notation text, newline-terminated unless empty.
    """
    lines: List[str] = []
    _render(value, indent, lines)
    return "".join(lines)


def pretty_key_vals(pairs: KeyVals) -> str:
    """
    Render a flat pair sequence for diagnostics.

    Values are shown JSON-quoted so embedded newlines and indentation
    stay visible. This is not notation text and is not meant to be parsed.
    """
    return "\n".join(str(pair) for pair in pairs)


# -----------------------------------------------------------------------------
# PRIVATE HELPERS
# -----------------------------------------------------------------------------

def _render(value: CCL, indent: int, lines: List[str]) -> None:
    prefix = " " * indent
    for key, child in value.items():
        lines.append(f"{prefix}{key} =\n")
        _render(child, indent + INDENT_STEP, lines)
