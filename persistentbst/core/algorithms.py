"""Path-copying algorithms over immutable TreeNodes.

Every function here is pure: it takes a subtree (``None`` for an empty
tree) and returns a new subtree, rebuilding only the nodes on the path from
the subtree root to the affected node. Nodes off that path are reused as-is,
so older versions of a tree remain valid after any operation.

Recursion depth equals tree height. No rebalancing is done, so a long
degenerate chain can exhaust the interpreter's recursion limit.
"""

from typing import Any, Optional, Tuple

from ..config import SpliceRule
from ..errors import DuplicateKeyError, InvalidKeyError
from .node import TreeNode

Entry = Tuple[Any, Any]


def check_key(key: Any) -> None:
    """Raise InvalidKeyError if key is None."""
    if key is None:
        raise InvalidKeyError()


def compare(a: Any, b: Any) -> int:
    """Three-way comparison built on ``<`` only.

    Returns:
        Negative if a < b, zero if equal, positive if a > b
    """
    if a < b:
        return -1
    if b < a:
        return 1
    return 0


def find(key: Any, subtree: Optional[TreeNode]) -> Optional[TreeNode]:
    """Find the node holding key.

    Args:
        key: The key to look for
        subtree: Root of the tree to search

    Returns:
        The node containing key, or None if the key is not present
    """
    node = subtree
    while node is not None:
        comp = compare(key, node.key)
        if comp == 0:
            return node
        node = node.left if comp < 0 else node.right
    return None


def insert(subtree: Optional[TreeNode], key: Any, value: Any) -> TreeNode:
    """Build the tree that results from adding key and value to subtree.

    Raises:
        DuplicateKeyError: If subtree already contains key
    """
    if subtree is None:
        return TreeNode(key, value)

    comp = compare(key, subtree.key)
    if comp == 0:
        raise DuplicateKeyError(key)
    if comp < 0:
        return subtree.with_left(insert(subtree.left, key, value))
    return subtree.with_right(insert(subtree.right, key, value))


def delete_minimum(subtree: Optional[TreeNode]) -> Tuple[Optional[TreeNode], Entry]:
    """Detach the minimum entry of a non-empty subtree.

    Descends the left spine. The minimum node has no left child, so it is
    replaced by its right subtree.

    Returns:
        (rebuilt subtree, (key, value) of the removed minimum)

    Raises:
        ValueError: If subtree is None
    """
    if subtree is None:
        raise ValueError("cannot delete the minimum of an empty tree")

    if subtree.left is None:
        return subtree.right, subtree.entry

    new_left, minimum = delete_minimum(subtree.left)
    return subtree.with_left(new_left), minimum


def delete_maximum(subtree: Optional[TreeNode]) -> Tuple[Optional[TreeNode], Entry]:
    """Detach the maximum entry of a non-empty subtree.

    Mirror image of delete_minimum down the right spine.

    Raises:
        ValueError: If subtree is None
    """
    if subtree is None:
        raise ValueError("cannot delete the maximum of an empty tree")

    if subtree.right is None:
        return subtree.left, subtree.entry

    new_right, maximum = delete_maximum(subtree.right)
    return subtree.with_right(new_right), maximum


def _splice(node: TreeNode, splice_rule: SpliceRule) -> Optional[TreeNode]:
    # Build the subtree that takes the place of a removed node.
    if node.right is not None:
        new_right, (key, value) = delete_minimum(node.right)
        return TreeNode(key, value, node.left, new_right)

    if node.left is not None:
        if splice_rule is SpliceRule.PREDECESSOR:
            new_left, (key, value) = delete_maximum(node.left)
            return TreeNode(key, value, new_left, None)
        return node.left

    return None


def remove(key: Any,
           subtree: Optional[TreeNode],
           splice_rule: SpliceRule = SpliceRule.PROMOTE_LEFT) -> Tuple[Optional[TreeNode], bool]:
    """Build the tree that results from removing key from subtree.

    When key is absent the original subtree object is returned, so a
    missed removal allocates nothing.

    Args:
        key: The key to remove
        subtree: Root of the tree to remove from
        splice_rule: How to replace a removed node that has only a left child

    Returns:
        (rebuilt subtree, whether key was removed)

    Raises:
        InvalidKeyError: If key is None
    """
    check_key(key)
    return _remove(key, subtree, splice_rule)


def _remove(key: Any,
            subtree: Optional[TreeNode],
            splice_rule: SpliceRule) -> Tuple[Optional[TreeNode], bool]:
    if subtree is None:
        return None, False

    comp = compare(key, subtree.key)
    if comp > 0:
        new_right, removed = _remove(key, subtree.right, splice_rule)
        if not removed:
            return subtree, False
        return subtree.with_right(new_right), True
    if comp < 0:
        new_left, removed = _remove(key, subtree.left, splice_rule)
        if not removed:
            return subtree, False
        return subtree.with_left(new_left), True

    return _splice(subtree, splice_rule), True
