from __future__ import annotations

"""
Canonical Builder.

Folds a NodeMap into a canonical value. Leaves and subtrees are both written
into one mutable draft keyed by name, so repeated keys end up as a single
child whose keys are the union of every occurrence's contributions. The draft
is frozen once at the end.
"""

from typing import Optional

from cclq.core.parsing.key_val_parser import parse_key_vals
from cclq.core.parsing.tree_grouper import group_to_tree
from cclq.domain.canonical_models import CCL, Draft
from cclq.domain.errors import NestingTooDeepError
from cclq.domain.key_val_models import KeyVals, Leaf, NodeMap

# -----------------------------------------------------------------------------
# PUBLIC API
# -----------------------------------------------------------------------------

def build_canonical(tree: NodeMap) -> CCL:
    """
    Convert a grouped tree into its canonical value.

    A Leaf with a non-empty value becomes {key: {value: {}}}, an empty Leaf
    becomes {key: {}}, and a Subtree becomes {key: <its canonical value>}.
    Note that two identical leaf values under the same key collapse into one
    entry.

    Args:
        tree: Output of the tree grouper.

    Returns:
        CCL: The canonical value.
    """
    draft: Draft = {}
    _fill(draft, tree)
    return CCL.from_draft(draft)


def from_key_vals(pairs: KeyVals, *, max_depth: Optional[int] = None) -> CCL:
    """
    Group and canonicalize an already-parsed pair sequence.

    Raises:
        NestingTooDeepError: If max_depth is exceeded, or if the values nest
            deeper than the interpreter stack can follow.
    """
    try:
        return build_canonical(group_to_tree(pairs, max_depth=max_depth))
    except RecursionError as e:
        raise NestingTooDeepError() from e


def parse_ccl(text: str, *, max_depth: Optional[int] = None) -> CCL:
    """
    Run the full pipeline (parse, group, build) on a text blob.

    Raises:
        UnterminatedKeyError: If the top-level text has an unterminated key.
        NestingTooDeepError: If max_depth is set and exceeded, or the text
            nests past the interpreter recursion limit.
    """
    return from_key_vals(parse_key_vals(text), max_depth=max_depth)


# -----------------------------------------------------------------------------
# PRIVATE HELPERS
# -----------------------------------------------------------------------------

def _fill(draft: Draft, tree: NodeMap) -> None:
    # One frame per nesting level.
    for key, nodes in tree.items():
        slot = draft.setdefault(key, {})
        for node in nodes:
            if isinstance(node, Leaf):
                if node.value:
                    slot.setdefault(node.value, {})
            else:
                _fill(slot, node.children)
