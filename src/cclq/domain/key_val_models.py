from __future__ import annotations

"""
Flat and Tree Data Models.

Defines the parsed key/value pair, the ordered pair sequence produced by the
line parser, and the Leaf/Subtree tagged union the tree grouper builds from it.
"""

import json
from dataclasses import dataclass, field
from typing import Dict, Iterable, Iterator, List, Tuple, Union, overload

from cclq.domain.monoid import Monoid

# -----------------------------------------------------------------------------
# FLAT MODELS
# -----------------------------------------------------------------------------

@dataclass(frozen=True)
class KeyVal:
    """
    A single parsed (key, value) unit.

    Attributes:
        key: Key text, possibly spanning several physical lines.
        value: Raw value text. Nested values keep their leading newline and
            indentation so they can be re-parsed.
    """
    key: str
    value: str

    @classmethod
    def create(cls, key: str, value: str) -> "KeyVal":
        """Build a pair with both sides trimmed of surrounding whitespace."""
        return cls(key.strip(), value.strip())

    def __str__(self) -> str:
        return f"{self.key} = {json.dumps(self.value, ensure_ascii=False)}"


@dataclass(frozen=True)
class KeyVals(Monoid):
    """
    Ordered, immutable sequence of pairs in source order.

    Forms a monoid under concatenation with the empty sequence as identity.
    """
    items: Tuple[KeyVal, ...] = field(default_factory=tuple)

    @classmethod
    def of(cls, pairs: Iterable[KeyVal]) -> "KeyVals":
        return cls(tuple(pairs))

    @classmethod
    def empty(cls) -> "KeyVals":
        return cls()

    def merge(self, other: "KeyVals") -> "KeyVals":
        return KeyVals(self.items + other.items)

    def __iter__(self) -> Iterator[KeyVal]:
        return iter(self.items)

    def __len__(self) -> int:
        return len(self.items)

    @overload
    def __getitem__(self, index: int) -> KeyVal: ...

    @overload
    def __getitem__(self, index: slice) -> "KeyVals": ...

    def __getitem__(self, index: Union[int, slice]) -> Union[KeyVal, "KeyVals"]:
        if isinstance(index, slice):
            return KeyVals(self.items[index])
        return self.items[index]


# -----------------------------------------------------------------------------
# TREE MODELS
# -----------------------------------------------------------------------------

@dataclass(frozen=True)
class Leaf:
    """
    A value that did not parse as nested notation (or parsed to nothing).

    Attributes:
        value: The original value text, possibly empty.
    """
    value: str


@dataclass(frozen=True)
class Subtree:
    """
    A value that parsed as a non-empty nested pair sequence.

    Attributes:
        children: Grouped nodes of the nested sequence. Never empty.
    """
    children: "NodeMap"


TreeNode = Union[Leaf, Subtree]

# Keys are inserted in lexicographic order; node lists keep occurrence order.
NodeMap = Dict[str, List[TreeNode]]
