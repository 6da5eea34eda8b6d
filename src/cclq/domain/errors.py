from __future__ import annotations

"""
Domain Error Hierarchy.

Typed exceptions raised by the parsing pipeline, the query layer and the
source loader. Every exception derives from CclError so interface layers can
trap the whole family with a single handler and map it to an exit status.
"""

from typing import Optional

# -----------------------------------------------------------------------------
# BASE
# -----------------------------------------------------------------------------

class CclError(Exception):
    """
    Base class for every failure surfaced by the cclq package.
    """


# -----------------------------------------------------------------------------
# PARSING
# -----------------------------------------------------------------------------

class UnterminatedKeyError(CclError):
    """
    Input ended while a (possibly multi-line) key was still being buffered.

    Attributes:
        text: The buffered key text, trimmed, kept for diagnostics.
    """

    def __init__(self, text: str) -> None:
        self.text = text
        super().__init__(f"No value found for key: {text}")


class NestingTooDeepError(CclError):
    """
    Recursive grouping exceeded the caller-provided depth bound, or nested
    deeper than the interpreter stack allows.

    Attributes:
        depth: The bound that was exceeded, or None for the stack limit.
    """

    def __init__(self, depth: Optional[int] = None) -> None:
        self.depth = depth
        if depth is None:
            super().__init__("Nesting exceeds the interpreter recursion limit")
        else:
            super().__init__(f"Nesting exceeds maximum depth of {depth}")


# -----------------------------------------------------------------------------
# QUERY
# -----------------------------------------------------------------------------

class KeyNotFoundError(CclError):
    """
    A query path segment is absent from the canonical value.

    Attributes:
        segment: The first segment that could not be resolved.
    """

    def __init__(self, segment: str) -> None:
        self.segment = segment
        super().__init__(f"Key '{segment}' not found")


# -----------------------------------------------------------------------------
# SOURCES
# -----------------------------------------------------------------------------

class SourceReadError(CclError):
    """Raised when a configuration source cannot be read from disk or stdin."""

    def __init__(self, path: str, reason: str) -> None:
        self.path = path
        self.reason = reason
        super().__init__(f"Failed to read '{path}': {reason}")


class SourceParseError(CclError):
    """
    Wraps a parse failure with the source it originated from.

    Attributes:
        path: Source identifier (file path, '-' for stdin, or a label).
        cause: The underlying UnterminatedKeyError.
    """

    def __init__(self, path: str, cause: Optional[CclError] = None) -> None:
        self.path = path
        self.cause = cause
        detail = str(cause) if cause is not None else "unknown parse error"
        super().__init__(f"Failed to parse '{path}': {detail}")
