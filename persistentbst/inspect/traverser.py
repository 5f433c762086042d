"""Tree traversal strategies for the shape inspector.

Traversers implement different orders for walking one tree version.
They navigate only through a TreeShapeAdapter and never touch a node's
fields for writing.
"""

from abc import ABC, abstractmethod
from collections import deque
from typing import Deque, Iterator, List, Optional, Tuple

from ..config import TraversalStrategy
from ..core.node import TreeNode
from .adapter import TreeShapeAdapter


class TreeTraverser(ABC):
    """Abstract base class for tree traversal strategies.

    Every traverser yields ``(node, depth)`` tuples with depth relative
    to the starting node.
    """

    def __init__(self, adapter: TreeShapeAdapter):
        """Initialize traverser with an adapter.

        Args:
            adapter: TreeShapeAdapter for navigating the tree
        """
        self.adapter = adapter

    @abstractmethod
    def traverse(self,
                 root: Optional[TreeNode],
                 max_depth: Optional[int] = None,
                 min_depth: int = 0) -> Iterator[Tuple[TreeNode, int]]:
        """Traverse the tree starting from root.

        Args:
            root: Starting node for traversal (None yields nothing)
            max_depth: Maximum depth to traverse (None = unlimited)
            min_depth: Minimum depth before yielding nodes

        Yields:
            Tuples of (node, depth) where depth is relative to root
        """
        pass

    def _should_yield(self, depth: int, min_depth: int, max_depth: Optional[int]) -> bool:
        if depth < min_depth:
            return False
        if max_depth is not None and depth > max_depth:
            return False
        return True

    def _should_explore(self, depth: int, max_depth: Optional[int]) -> bool:
        if max_depth is None:
            return True
        return depth < max_depth


class BreadthFirstTraverser(TreeTraverser):
    """Breadth-first traversal strategy.

    Visits all nodes at depth N before visiting nodes at depth N+1,
    left to right within a level.
    """

    def traverse(self,
                 root: Optional[TreeNode],
                 max_depth: Optional[int] = None,
                 min_depth: int = 0) -> Iterator[Tuple[TreeNode, int]]:
        if root is None:
            return

        queue: Deque[Tuple[TreeNode, int]] = deque([(root, 0)])
        while queue:
            node, depth = queue.popleft()

            if self._should_yield(depth, min_depth, max_depth):
                yield (node, depth)

            if self._should_explore(depth, max_depth):
                for child in self.adapter.get_children(node):
                    queue.append((child, depth + 1))


class DepthFirstPreOrderTraverser(TreeTraverser):
    """Depth-first pre-order traversal strategy.

    Visits parent before children. Replaying the yielded keys into an
    empty map rebuilds the same shape.
    """

    def traverse(self,
                 root: Optional[TreeNode],
                 max_depth: Optional[int] = None,
                 min_depth: int = 0) -> Iterator[Tuple[TreeNode, int]]:
        if root is None:
            return

        # Explicit stack; right pushed first so left pops first
        stack: List[Tuple[TreeNode, int]] = [(root, 0)]
        while stack:
            node, depth = stack.pop()

            if self._should_yield(depth, min_depth, max_depth):
                yield (node, depth)

            if self._should_explore(depth, max_depth):
                for child in reversed(list(self.adapter.get_children(node))):
                    stack.append((child, depth + 1))


class InOrderTraverser(TreeTraverser):
    """In-order traversal strategy.

    Visits left subtree, node, right subtree, so nodes come out in
    strictly increasing key order for any valid tree.
    """

    def traverse(self,
                 root: Optional[TreeNode],
                 max_depth: Optional[int] = None,
                 min_depth: int = 0) -> Iterator[Tuple[TreeNode, int]]:
        stack: List[Tuple[TreeNode, int]] = []
        node = root
        depth = 0
        while stack or node is not None:
            # Walk down the left spine as far as the depth window allows
            while node is not None:
                stack.append((node, depth))
                if not self._should_explore(depth, max_depth):
                    node = None
                    break
                left, _ = self.adapter.get_child_slots(node)
                node, depth = left, depth + 1

            node, depth = stack.pop()
            if self._should_yield(depth, min_depth, max_depth):
                yield (node, depth)

            if self._should_explore(depth, max_depth):
                _, right = self.adapter.get_child_slots(node)
                node, depth = right, depth + 1
            else:
                node = None


class DepthFirstPostOrderTraverser(TreeTraverser):
    """Depth-first post-order traversal strategy.

    Visits children before parent. Good for computing subtree
    aggregates such as heights.
    """

    def traverse(self,
                 root: Optional[TreeNode],
                 max_depth: Optional[int] = None,
                 min_depth: int = 0) -> Iterator[Tuple[TreeNode, int]]:
        if root is None:
            return

        stack: List[Tuple[TreeNode, int, bool]] = [(root, 0, False)]
        while stack:
            node, depth, expanded = stack.pop()

            if expanded:
                if self._should_yield(depth, min_depth, max_depth):
                    yield (node, depth)
                continue

            stack.append((node, depth, True))
            if self._should_explore(depth, max_depth):
                for child in reversed(list(self.adapter.get_children(node))):
                    stack.append((child, depth + 1, False))


class LevelOrderTraverser(TreeTraverser):
    """Level-order traversal with level grouping.

    Similar to breadth-first but completes each level before building
    the next one.
    """

    def traverse(self,
                 root: Optional[TreeNode],
                 max_depth: Optional[int] = None,
                 min_depth: int = 0) -> Iterator[Tuple[TreeNode, int]]:
        current_level: List[TreeNode] = [] if root is None else [root]
        current_depth = 0

        while current_level and (max_depth is None or current_depth <= max_depth):
            next_level: List[TreeNode] = []

            for node in current_level:
                if self._should_yield(current_depth, min_depth, max_depth):
                    yield (node, current_depth)

                if self._should_explore(current_depth, max_depth):
                    next_level.extend(self.adapter.get_children(node))

            current_level = next_level
            current_depth += 1


_STRATEGIES = {
    'bfs': BreadthFirstTraverser,
    'breadth_first': BreadthFirstTraverser,
    'dfs_pre': DepthFirstPreOrderTraverser,
    'depth_first_pre': DepthFirstPreOrderTraverser,
    'in_order': InOrderTraverser,
    'inorder': InOrderTraverser,
    'dfs_post': DepthFirstPostOrderTraverser,
    'depth_first_post': DepthFirstPostOrderTraverser,
    'level': LevelOrderTraverser,
    'level_order': LevelOrderTraverser,
}


def create_traverser(strategy, adapter: TreeShapeAdapter) -> TreeTraverser:
    """Create a traverser instance by strategy name or enum.

    Args:
        strategy: TraversalStrategy or its name (bfs, dfs_pre, in_order, dfs_post, level)
        adapter: TreeShapeAdapter for the tree

    Returns:
        TreeTraverser instance

    Raises:
        ValueError: If strategy name is not recognized
    """
    if isinstance(strategy, TraversalStrategy):
        strategy = strategy.value

    strategy_lower = str(strategy).lower()
    if strategy_lower not in _STRATEGIES:
        raise ValueError(
            f"Unknown traversal strategy: {strategy}. "
            f"Choose from: {', '.join(_STRATEGIES.keys())}"
        )

    return _STRATEGIES[strategy_lower](adapter)
