from __future__ import annotations

"""
Indentation-Sensitive Line Parser.

Turns raw notation text into an ordered sequence of key/value pairs. Nesting
is not interpreted here: indentation only decides where a pair ends and
whether a line continues the current key or the current value.

The parser is a monoid homomorphism from strings to pair sequences:
parsing `A + "\\n" + B` yields the pairs of A followed by the pairs of B,
provided both fragments parse on their own and share a baseline.
"""

import logging
from typing import List, Optional, Tuple

from cclq.domain.errors import UnterminatedKeyError
from cclq.domain.key_val_models import KeyVal, KeyVals

logger = logging.getLogger(__name__)

SEPARATOR = "="

# -----------------------------------------------------------------------------
# PUBLIC API
# -----------------------------------------------------------------------------

def parse_key_vals(text: str) -> KeyVals:
    """
    Parse notation text into a flat pair sequence.

    Leading blank lines are skipped and the indentation of the first
    remaining line becomes the baseline. Each line is then classified by
    four conditions (blank, key buffer empty, contains the separator,
    indented past the baseline) to decide whether it extends the pending
    key, extends the last value, or starts a new pair.

    Args:
        text: Raw notation text.

    Returns:
        KeyVals: Pairs in source order. Empty for blank input.

    Raises:
        UnterminatedKeyError: If the input ends while a key is still waiting
            for its separator.
    """
    pairs, pending_key = _scan(text)
    if pending_key is not None:
        logger.debug(f"Unterminated key at end of input: {pending_key!r}")
        raise UnterminatedKeyError(pending_key)
    return pairs


def try_parse_key_vals(text: str) -> Optional[KeyVals]:
    """
    Check whether text is itself valid notation.

    Args:
        text: Candidate text, typically a value from an enclosing pair.

    Returns:
        Optional[KeyVals]: The parsed pairs, or None if the text ends with
        an unterminated key.
    """
    pairs, pending_key = _scan(text)
    if pending_key is not None:
        return None
    return pairs


# -----------------------------------------------------------------------------
# SCANNER
# -----------------------------------------------------------------------------

def _scan(text: str) -> Tuple[KeyVals, Optional[str]]:
    """
    Single left-to-right pass over the physical lines.

    Returns:
        Tuple[KeyVals, Optional[str]]: The completed pairs and, when the
        input ended inside a key, the trimmed pending key text.
    """
    lines = _split_lines(text)

    start = 0
    while start < len(lines) and _is_blank(lines[start]):
        start += 1
    lines = lines[start:]

    if not lines:
        return KeyVals.empty(), None

    baseline = _indent_of(lines[0])

    keys: List[str] = []
    values: List[List[str]] = []
    key_buf: List[str] = []

    for line in lines:
        if _is_blank(line):
            if key_buf:
                key_buf.append(line.rstrip())
            else:
                values[-1].append("\n" + line.rstrip())
            continue

        if key_buf:
            if SEPARATOR in line:
                _emit_pair(key_buf, line, keys, values)
                key_buf = []
            else:
                key_buf.append(line.rstrip())
            continue

        if _indent_of(line) > baseline:
            values[-1].append("\n" + line.rstrip())
        elif SEPARATOR in line:
            _emit_pair(key_buf, line, keys, values)
        else:
            key_buf.append(line.rstrip())

    if key_buf:
        return KeyVals.empty(), "\n".join(key_buf).strip()

    pairs = KeyVals.of(
        KeyVal(key, "".join(parts).rstrip()) for key, parts in zip(keys, values)
    )
    return pairs, None


def _emit_pair(
        key_buf: List[str],
        line: str,
        keys: List[str],
        values: List[List[str]],
) -> None:
    """
    Close the pending key on a separator line and open a new value.

    The line is split at the first separator only, so any further
    separators stay in the value.
    """
    left, right = line.split(SEPARATOR, 1)
    first = KeyVal.create("\n".join(key_buf + [left.rstrip()]), right)
    keys.append(first.key)
    values.append([first.value])


# -----------------------------------------------------------------------------
# LINE HELPERS
# -----------------------------------------------------------------------------

def _split_lines(text: str) -> List[str]:
    """Split on LF, dropping one trailing empty line and any CR before LF."""
    lines = text.split("\n")
    if lines and lines[-1] == "":
        lines.pop()
    return [line[:-1] if line.endswith("\r") else line for line in lines]


def _is_blank(line: str) -> bool:
    return not line.strip()


def _indent_of(line: str) -> int:
    return len(line) - len(line.lstrip())
