from __future__ import annotations

"""
Unit tests for the large document generators.
"""

import random

from cclq.core.parsing.key_val_parser import SEPARATOR
from cclq.utils.generators import LONG_ALPHABET, chained_value, large_document, long_string


def test_generators_are_deterministic_per_seed() -> None:
    assert large_document(random.Random(7), 5, 20) == large_document(random.Random(7), 5, 20)


def test_long_string_alphabet_and_length() -> None:
    rng = random.Random(1)
    for _ in range(50):
        value = long_string(rng)
        assert 10 <= len(value) <= 50
        assert set(value) <= set(LONG_ALPHABET)


def test_chained_value_is_single_line_chain() -> None:
    rng = random.Random(3)
    for _ in range(50):
        value = chained_value(rng, max_depth=4)
        assert "\n" not in value
        assert value.count(SEPARATOR) <= 4


def test_large_document_uses_long_keys() -> None:
    pairs = large_document(random.Random(0), min_pairs=5, max_pairs=10)
    assert 5 <= len(pairs) <= 10
    assert all(len(pair.key) >= 10 for pair in pairs)
