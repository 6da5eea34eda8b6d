from __future__ import annotations

"""
Large Document Generators.

Seeded generators for long identifier keys and chained values, used to build
stress documents. Every function takes an explicit `random.Random` so that a
given seed always reproduces the same document.
"""

import random
import string
from typing import List

from cclq.core.parsing.key_val_parser import SEPARATOR
from cclq.domain.key_val_models import KeyVal

LONG_ALPHABET = string.ascii_letters + string.digits + "_"

# -----------------------------------------------------------------------------
# PUBLIC API
# -----------------------------------------------------------------------------

def long_string(rng: random.Random, min_len: int = 10, max_len: int = 50) -> str:
    """Identifier-like string, never empty."""
    return "".join(rng.choice(LONG_ALPHABET) for _ in range(rng.randint(min_len, max_len)))


def chained_value(rng: random.Random, max_depth: int = 8) -> str:
    """
    Value of the form `k1 = k2 = ... = leaf` with a random chain length.

    Args:
        rng: Random source.
        max_depth: Longest chain of keys in front of the leaf.

    Returns:
        str: A single-line value string.
    """
    keys = [long_string(rng) for _ in range(rng.randint(0, max_depth))]
    return "".join(f"{key} {SEPARATOR} " for key in keys) + long_string(rng)


def large_document(rng: random.Random, min_pairs: int = 100, max_pairs: int = 5000) -> List[KeyVal]:
    """Pairs with long keys and deeply chained values for stress runs."""
    count = rng.randint(min_pairs, max_pairs)
    return [KeyVal.create(long_string(rng), chained_value(rng)) for _ in range(count)]
