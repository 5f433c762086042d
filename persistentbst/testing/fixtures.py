"""Test fixtures for persistentbst consumers.

These helpers give test suites direct checks of tree-level properties
(ordering, contents, structural sharing) without making enumeration part
of the PersistentMap API.
"""

from typing import Any, List, Optional, Set, Tuple

from ..core.node import TreeNode
from ..inspect.adapter import TreeShapeAdapter
from ..inspect.traverser import BreadthFirstTraverser, InOrderTraverser


class TreeInvariantHelper:
    """Public test fixture for verifying one tree version.

    Example:
        m = PersistentMap()
        ...
        helper = TreeInvariantHelper(m.root)
        helper.assert_valid()
        assert helper.keys() == [1, 3, 4, 5, 8]
    """

    def __init__(self, root: Optional[TreeNode]):
        """Initialize with the root of the version to check.

        Args:
            root: Root node (None for an empty tree)
        """
        self.root = root
        self._adapter = TreeShapeAdapter(root)

    def entries(self) -> List[Tuple[Any, Any]]:
        """(key, value) pairs in in-order."""
        traverser = InOrderTraverser(self._adapter)
        return [node.entry for node, _ in traverser.traverse(self.root)]

    def keys(self) -> List[Any]:
        """Keys in in-order."""
        return [key for key, _ in self.entries()]

    def _find_violation(self) -> Optional[Any]:
        # First key (in in-order) that is not strictly greater than its predecessor.
        previous = None
        first = True
        for key in self.keys():
            if not first and not previous < key:
                return key
            previous = key
            first = False
        return None

    def is_valid_bst(self) -> bool:
        """Check that in-order keys are strictly increasing."""
        return self._find_violation() is None

    def assert_valid(self) -> None:
        """Raise AssertionError naming the first out-of-order key."""
        bad_key = self._find_violation()
        if bad_key is not None:
            raise AssertionError(f"BST ordering violated at key {bad_key!r}: {self.keys()!r}")

    def node_ids(self) -> Set[int]:
        """Identities of every physical node in this version."""
        traverser = BreadthFirstTraverser(self._adapter)
        return {id(node) for node, _ in traverser.traverse(self.root)}

    def shared_nodes(self, other_root: Optional[TreeNode]) -> int:
        """Count nodes physically shared with another version.

        Both roots must be alive while this runs, since identities of
        collected objects can be reused.
        """
        other = TreeInvariantHelper(other_root)
        return len(self.node_ids() & other.node_ids())
