from __future__ import annotations

"""
Source Loading and Aggregation Service.

Parses each configuration source independently through the full pipeline and
folds the resulting canonical values together in the order given. Order
matters: later sources are merged into the result of earlier ones.
"""

import logging
from typing import Iterable, List, Optional, TextIO

from cclq.core.canonical.builder import from_key_vals
from cclq.core.parsing.key_val_parser import parse_key_vals
from cclq.domain.canonical_models import CCL
from cclq.domain.errors import SourceParseError, UnterminatedKeyError
from cclq.domain.key_val_models import KeyVals
from cclq.infra.fs import STDIN_MARKER, normalize_path, read_source

logger = logging.getLogger(__name__)

# -----------------------------------------------------------------------------
# PUBLIC API
# -----------------------------------------------------------------------------

def load_text(
        text: str,
        *,
        source: str = "<string>",
        max_depth: Optional[int] = None,
) -> CCL:
    """
    Canonicalize one in-memory text blob.

    Args:
        text: Notation text.
        source: Label used in error messages.
        max_depth: Optional nesting bound forwarded to the tree grouper.

    Returns:
        CCL: Canonical value of the text.

    Raises:
        SourceParseError: If the text ends with an unterminated key.
        NestingTooDeepError: If max_depth is set and exceeded, or the text
            nests past the interpreter recursion limit.
    """
    pairs = load_key_vals(text, source=source)
    value = from_key_vals(pairs, max_depth=max_depth)
    logger.debug(f"Source '{source}': {len(pairs)} pairs, {len(value)} top-level keys.")
    return value


def load_key_vals(text: str, *, source: str = "<string>") -> KeyVals:
    """
    Parse one text blob into its flat pair sequence.

    Raises:
        SourceParseError: If the text ends with an unterminated key.
    """
    try:
        return parse_key_vals(text)
    except UnterminatedKeyError as e:
        logger.error(f"Parse failure in '{source}': {e}")
        raise SourceParseError(source, e) from e


def load_source(
        path: str,
        *,
        max_depth: Optional[int] = None,
        stdin: Optional[TextIO] = None,
) -> CCL:
    """
    Read and canonicalize a single file (or stdin for '-').

    Raises:
        SourceReadError: If the source cannot be read.
        SourceParseError: If the source does not parse.
    """
    resolved = normalize_path(path)
    logger.info(f"Loading source: {_label(resolved)}")
    text = read_source(resolved, stdin=stdin)
    return load_text(text, source=_label(resolved), max_depth=max_depth)


def load_sources(
        paths: Iterable[str],
        *,
        max_depth: Optional[int] = None,
        stdin: Optional[TextIO] = None,
) -> CCL:
    """
    Load every source and aggregate them left to right.

    An empty path list reads standard input.

    Args:
        paths: Source paths in merge order.
        max_depth: Optional nesting bound forwarded to the tree grouper.
        stdin: Stream override for standard input.

    Returns:
        CCL: The merged canonical value.

    Raises:
        SourceReadError: On the first unreadable source.
        SourceParseError: On the first source that does not parse.
    """
    targets: List[str] = list(paths) or [STDIN_MARKER]
    values = [load_source(p, max_depth=max_depth, stdin=stdin) for p in targets]
    merged = CCL.aggregate(values)
    logger.info(f"Merged {len(values)} source(s) into {len(merged)} top-level keys.")
    return merged


# -----------------------------------------------------------------------------
# PRIVATE HELPERS
# -----------------------------------------------------------------------------

def _label(path: str) -> str:
    return "<stdin>" if path == STDIN_MARKER else path
