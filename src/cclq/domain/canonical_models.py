from __future__ import annotations

"""
Canonical Value Model.

The fixed-point representation of a parsed document: a recursive mapping from
string to canonical value. There is no scalar case. A scalar leaf `key = value`
is encoded as {key: {value: {}}}, so the empty mapping is the only terminal.
Values are immutable, compare structurally and keep their keys sorted so every
traversal is deterministic.
"""

from dataclasses import dataclass, field
from typing import Any, Dict, Iterable, Iterator, List, Optional, Tuple

from cclq.domain.monoid import Monoid


@dataclass(frozen=True)
class CCL(Monoid):
    """
    Canonical configuration value.

    Attributes:
        entries: Child values keyed by name, stored in lexicographic key order.
    """
    entries: Dict[str, "CCL"] = field(default_factory=dict)

    def __post_init__(self) -> None:
        object.__setattr__(self, "entries", dict(sorted(self.entries.items())))

    def __hash__(self) -> int:
        return hash(tuple(self.entries.items()))

    # -------------------------------------------------------------------------
    # CONSTRUCTORS
    # -------------------------------------------------------------------------

    @classmethod
    def empty(cls) -> "CCL":
        return cls()

    @classmethod
    def key_only(cls, key: str) -> "CCL":
        """
        `key =` with nothing under it.

        Returns:
            CCL: {key: {}}
        """
        return cls({key: cls()})

    @classmethod
    def key_value(cls, key: str, value: str) -> "CCL":
        """
        `key = value`.

        Returns:
            CCL: {key: {value: {}}}
        """
        return cls({key: cls.key_only(value)})

    @classmethod
    def nested(cls, key: str, children: Iterable["CCL"]) -> "CCL":
        """
        `key =` followed by the merged children, indented.

        Returns:
            CCL: {key: aggregate(children)}
        """
        return cls({key: cls.aggregate(children)})

    # -------------------------------------------------------------------------
    # MONOID
    # -------------------------------------------------------------------------

    def merge(self, other: "CCL") -> "CCL":
        """
        Union of both key sets, merging the children of shared keys.

        Keys present on one side only keep their child unchanged. The empty
        value is a two-sided identity.
        """
        if not other.entries:
            return self
        if not self.entries:
            return other
        return CCL.aggregate([self, other])

    @classmethod
    def aggregate(cls, items: Iterable["CCL"]) -> "CCL":
        """
        Left fold of merge over items.

        Items are absorbed into one mutable draft and frozen once at the end,
        which gives the same value as folding merge pairwise without
        rebuilding every intermediate result.
        """
        draft: Draft = {}
        for item in items:
            _absorb(draft, item)
        return _freeze(draft)

    @classmethod
    def from_draft(cls, draft: Draft) -> "CCL":
        """
        Freeze a mutable nested dict (str -> dict) into a canonical value.

        Lets builders accumulate merges in place and pay for sorting and
        freezing only once per node.
        """
        return _freeze(draft)

    # -------------------------------------------------------------------------
    # READ ACCESS
    # -------------------------------------------------------------------------

    def get(self, key: str, default: Optional["CCL"] = None) -> Optional["CCL"]:
        return self.entries.get(key, default)

    def keys(self) -> List[str]:
        return list(self.entries)

    def items(self) -> List[Tuple[str, "CCL"]]:
        return list(self.entries.items())

    def is_empty(self) -> bool:
        return not self.entries

    def __getitem__(self, key: str) -> "CCL":
        return self.entries[key]

    def __contains__(self, key: object) -> bool:
        return key in self.entries

    def __iter__(self) -> Iterator[str]:
        return iter(self.entries)

    def __len__(self) -> int:
        return len(self.entries)

    def to_dict(self) -> Dict[str, Any]:
        """Convert into plain nested dictionaries (JSON-serializable)."""
        out: Dict[str, Any] = {}
        for key, child in self.entries.items():
            out[key] = child.to_dict()
        return out


# -----------------------------------------------------------------------------
# PRIVATE HELPERS
# -----------------------------------------------------------------------------

# Mutable counterpart of CCL: nested dicts keyed by name.
Draft = Dict[str, Any]


def _absorb(draft: Draft, value: CCL) -> None:
    """Merge `value` into a mutable draft in place."""
    for key, child in value.entries.items():
        _absorb(draft.setdefault(key, {}), child)


def _freeze(draft: Draft) -> CCL:
    entries: Dict[str, CCL] = {}
    for key, child in draft.items():
        entries[key] = _freeze(child)
    return CCL(entries)
