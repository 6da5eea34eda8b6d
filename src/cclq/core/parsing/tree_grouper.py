from __future__ import annotations

"""
Tree Grouper.

Groups a flat pair sequence into a NodeMap. Every value is tried as nested
notation: values that parse into at least one pair become subtrees (grouped
recursively), everything else stays an opaque leaf string.
"""

from typing import Dict, List, Optional

from cclq.core.parsing.key_val_parser import try_parse_key_vals
from cclq.domain.errors import NestingTooDeepError
from cclq.domain.key_val_models import KeyVals, Leaf, NodeMap, Subtree, TreeNode

# -----------------------------------------------------------------------------
# PUBLIC API
# -----------------------------------------------------------------------------

def group_to_tree(pairs: KeyVals, *, max_depth: Optional[int] = None) -> NodeMap:
    """
    Build a NodeMap from a pair sequence.

    A failed or empty sub-parse never propagates; the value is kept as a
    Leaf. Repeated keys accumulate their nodes in occurrence order.

    Args:
        pairs: Flat pairs produced by the line parser.
        max_depth: Optional bound on subtree nesting. None means unbounded.

    Returns:
        NodeMap: Nodes grouped by key, keys in lexicographic order.

    Raises:
        NestingTooDeepError: If max_depth is set and the values nest deeper.
    """
    return _group(pairs, depth=0, max_depth=max_depth)


# -----------------------------------------------------------------------------
# PRIVATE HELPERS
# -----------------------------------------------------------------------------

def _group(pairs: KeyVals, *, depth: int, max_depth: Optional[int]) -> NodeMap:
    grouped: Dict[str, List[TreeNode]] = {}

    for pair in pairs:
        node: TreeNode
        nested = try_parse_key_vals(pair.value)
        if nested:
            if max_depth is not None and depth >= max_depth:
                raise NestingTooDeepError(max_depth)
            node = Subtree(_group(nested, depth=depth + 1, max_depth=max_depth))
        else:
            node = Leaf(pair.value)

        grouped.setdefault(pair.key, []).append(node)

    return {key: grouped[key] for key in sorted(grouped)}
