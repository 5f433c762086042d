"""TreeShapeAdapter - read-only navigation over one tree version.

Visualisation and debugging tools only need to see the shape of a tree:
each node's entry, its two child slots and whether each slot is empty.
The adapter provides exactly that, and nothing that could write to a node.
"""

from typing import Iterator, List, Optional, Tuple

from ..core.algorithms import compare
from ..core.node import TreeNode


class TreeShapeAdapter:
    """Adapter for navigating an immutable binary search tree.

    Nodes carry no parent links, so the adapter is bound to the root of
    the version being inspected and answers parent and depth queries by
    descending from that root by key.

    Example:
        adapter = TreeShapeAdapter(my_map.root)
        for child in adapter.get_children(adapter.root):
            print(child.key)
    """

    def __init__(self, root: Optional[TreeNode]):
        """Bind the adapter to a tree version.

        Args:
            root: Root node of the version to inspect (None for empty)
        """
        self.root = root

    def get_children(self, node: TreeNode) -> Iterator[TreeNode]:
        """Yield the present children of node, left first."""
        if node.left is not None:
            yield node.left
        if node.right is not None:
            yield node.right

    def get_child_slots(self, node: TreeNode) -> Tuple[Optional[TreeNode], Optional[TreeNode]]:
        """Return (left, right) with None marking an empty slot.

        Drawings need the empty slots to place a lone child on the
        correct side.
        """
        return node.left, node.right

    def _path_to(self, node: TreeNode) -> Optional[List[TreeNode]]:
        # Nodes from the root down to node, or None if node is not in this version.
        path = []
        current = self.root
        while current is not None:
            path.append(current)
            if current is node:
                return path
            comp = compare(node.key, current.key)
            if comp == 0:
                return None
            current = current.left if comp < 0 else current.right
        return None

    def contains_node(self, node: TreeNode) -> bool:
        """Check if node is physically part of the bound version."""
        return self._path_to(node) is not None

    def get_parent(self, node: TreeNode) -> Optional[TreeNode]:
        """Get the parent of node.

        Returns:
            Parent TreeNode or None if node is the root

        Raises:
            ValueError: If node does not belong to the bound version
        """
        path = self._path_to(node)
        if path is None:
            raise ValueError(f"{node!r} is not part of this tree version")
        return path[-2] if len(path) > 1 else None

    def get_depth(self, node: TreeNode) -> int:
        """Depth of node where root = 0.

        Raises:
            ValueError: If node does not belong to the bound version
        """
        path = self._path_to(node)
        if path is None:
            raise ValueError(f"{node!r} is not part of this tree version")
        return len(path) - 1

    def get_siblings(self, node: TreeNode) -> Iterator[TreeNode]:
        """Get siblings of node (at most one in a binary tree)."""
        parent = self.get_parent(node)
        if parent is None:
            return  # Root has no siblings
        for child in self.get_children(parent):
            if child is not node:
                yield child

    # Capability flags

    def supports_modification(self) -> bool:
        """Shape inspection is read-only."""
        return False

    def supports_random_access(self) -> bool:
        return True

    def estimated_size(self, node: TreeNode) -> Optional[int]:
        """Count the nodes in the subtree rooted at node."""
        count = 0
        stack = [node]
        while stack:
            current = stack.pop()
            count += 1
            stack.extend(self.get_children(current))
        return count

    def add_child(self, parent: TreeNode, child: TreeNode) -> None:
        raise NotImplementedError(f"{self.__class__.__name__} does not support modification")

    def remove_child(self, parent: TreeNode, child: TreeNode) -> None:
        raise NotImplementedError(f"{self.__class__.__name__} does not support modification")

    def __repr__(self) -> str:
        root_key = None if self.root is None else self.root.key
        return f"{self.__class__.__name__}(root={root_key!r})"
