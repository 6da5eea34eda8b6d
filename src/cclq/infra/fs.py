from __future__ import annotations

"""
FileSystem Infrastructure Layer.

Reads configuration sources from disk or standard input and normalizes the
paths given on the command line. Everything above this layer works on
in-memory text only.
"""

import os
import sys
from typing import Optional, TextIO

from cclq.domain.errors import SourceReadError

# -----------------------------------------------------------------------------
# GLOBAL CONSTANTS
# -----------------------------------------------------------------------------

STDIN_MARKER = "-"
SOURCE_ENCODING = "utf-8"

# -----------------------------------------------------------------------------
# PATH RESOLUTION API
# -----------------------------------------------------------------------------

def normalize_path(path: Optional[str]) -> str:
    """
    Expand user home shortcuts and environment variables in a source path.

    The stdin marker and empty input are returned as the stdin marker.

    Args:
        path: Raw path string from CLI or configuration.

    Returns:
        str: Absolute path, or STDIN_MARKER.
    """
    p = (path or "").strip()
    if not p or p == STDIN_MARKER:
        return STDIN_MARKER
    return os.path.abspath(os.path.expandvars(os.path.expanduser(p)))


def is_stdin(path: str) -> bool:
    return path == STDIN_MARKER

# -----------------------------------------------------------------------------
# SOURCE READING API
# -----------------------------------------------------------------------------

def read_source(path: str, stdin: Optional[TextIO] = None) -> str:
    """
    Read a whole configuration source into memory.

    Args:
        path: File path, or STDIN_MARKER for standard input.
        stdin: Stream override for standard input (used by tests).

    Returns:
        str: Full text content.

    Raises:
        SourceReadError: If the file is missing, unreadable or not UTF-8.
    """
    if is_stdin(path):
        stream = stdin if stdin is not None else sys.stdin
        # Stdin is UTF-8 like file sources, whatever the locale says.
        raw = getattr(stream, "buffer", None)
        try:
            if raw is not None:
                return raw.read().decode(SOURCE_ENCODING)
            return stream.read()
        except (OSError, UnicodeDecodeError) as e:
            raise SourceReadError("<stdin>", str(e)) from e

    try:
        with open(path, "r", encoding=SOURCE_ENCODING) as f:
            return f.read()
    except FileNotFoundError as e:
        raise SourceReadError(path, "file does not exist") from e
    except (OSError, UnicodeDecodeError) as e:
        raise SourceReadError(path, str(e)) from e
