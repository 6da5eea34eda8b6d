from __future__ import annotations

"""
Key Path Query.

Resolves `=`-separated key paths against a canonical value, one segment at a
time.
"""

from typing import Iterable, Iterator, Tuple

from cclq.core.parsing.key_val_parser import SEPARATOR
from cclq.domain.canonical_models import CCL
from cclq.domain.errors import KeyNotFoundError


def query(value: CCL, path: str) -> CCL:
    """
    Walk `path` segment by segment and return the child value it names.

    Segments are matched verbatim (no trimming), so `a=` addresses the
    empty-named child of `a`.

    Args:
        value: Canonical value to search.
        path: Key path such as `database=ports`.

    Returns:
        CCL: The value found at the end of the path.

    Raises:
        KeyNotFoundError: On the first segment that is absent.
    """
    current = value
    for segment in path.split(SEPARATOR):
        child = current.get(segment)
        if child is None:
            raise KeyNotFoundError(segment)
        current = child
    return current


def query_many(value: CCL, paths: Iterable[str]) -> Iterator[Tuple[str, CCL]]:
    """Lazily resolve several paths, stopping at the first failing one."""
    for path in paths:
        yield path, query(value, path)
