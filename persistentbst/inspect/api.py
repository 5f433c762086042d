"""High-level inspection API for persistentbst.

Simple functional interfaces over the adapter / traverser / collector
classes. Every function accepts either a root node (a captured version)
or a PersistentMap, whose current root is then inspected.
"""

from typing import Any, Callable, Dict, Iterator, List, Optional, Tuple, Union

from ..config import TraversalStrategy
from ..core.map import PersistentMap
from ..core.node import TreeNode
from .adapter import TreeShapeAdapter
from .collector import create_collector
from .traverser import DepthFirstPostOrderTraverser, InOrderTraverser, create_traverser

TreeSource = Union[Optional[TreeNode], PersistentMap]


def _resolve_root(source: TreeSource) -> Optional[TreeNode]:
    if isinstance(source, PersistentMap):
        return source.root
    return source


def traverse_tree(
    source: TreeSource,
    strategy: Union[TraversalStrategy, str] = TraversalStrategy.BREADTH_FIRST,
    max_depth: Optional[int] = None,
    min_depth: int = 0,
    include_filter: Optional[Callable[[TreeNode], bool]] = None,
) -> Iterator[TreeNode]:
    """Walk one tree version and yield its nodes.

    Args:
        source: Root node or PersistentMap
        strategy: Traversal strategy (bfs, dfs_pre, in_order, dfs_post, level)
        max_depth: Maximum depth to traverse
        min_depth: Minimum depth before yielding nodes
        include_filter: Only yield nodes for which this returns True

    Yields:
        TreeNode instances in traversal order

    Example:
        >>> for node in traverse_tree(my_map, strategy="in_order"):
        ...     print(node.key)
    """
    root = _resolve_root(source)
    traverser = create_traverser(strategy, TreeShapeAdapter(root))
    for node, _ in traverser.traverse(root, max_depth=max_depth, min_depth=min_depth):
        if include_filter is None or include_filter(node):
            yield node


def collect_tree_data(
    source: TreeSource,
    collector: str = "shape",
    strategy: Union[TraversalStrategy, str] = TraversalStrategy.BREADTH_FIRST,
    max_depth: Optional[int] = None,
    collect_func: Optional[Callable[[TreeNode, int], Any]] = None,
) -> Iterator[Tuple[TreeNode, Any]]:
    """Traverse a tree version and collect data from each node.

    Args:
        source: Root node or PersistentMap
        collector: Collector name (key, entry, metadata, shape, custom)
        strategy: Traversal strategy
        max_depth: Maximum depth to traverse
        collect_func: Function for the custom collector

    Yields:
        Tuples of (node, collected_data)
    """
    root = _resolve_root(source)
    adapter = TreeShapeAdapter(root)
    traverser = create_traverser(strategy, adapter)
    data_collector = create_collector(collector, adapter, collect_func)
    for node, depth in traverser.traverse(root, max_depth=max_depth):
        yield node, data_collector.collect(node, depth)


def count_nodes(source: TreeSource) -> int:
    """Count the nodes (entries) in a tree version."""
    root = _resolve_root(source)
    if root is None:
        return 0
    return TreeShapeAdapter(root).estimated_size(root)


def tree_height(source: TreeSource) -> int:
    """Height of a tree version: -1 when empty, 0 for a single node."""
    root = _resolve_root(source)
    if root is None:
        return -1

    heights: Dict[int, int] = {}
    traverser = DepthFirstPostOrderTraverser(TreeShapeAdapter(root))
    for node, _ in traverser.traverse(root):
        child_heights = [heights.pop(id(child)) for child in (node.left, node.right)
                         if child is not None]
        heights[id(node)] = 1 + max(child_heights, default=-1)
    return heights[id(root)]


def in_order_keys(source: TreeSource) -> List[Any]:
    """Keys of a tree version in in-order (sorted for a valid tree)."""
    root = _resolve_root(source)
    traverser = InOrderTraverser(TreeShapeAdapter(root))
    return [node.key for node, _ in traverser.traverse(root)]


def get_leaf_nodes(source: TreeSource) -> List[TreeNode]:
    """Get all leaf nodes of a tree version, left to right."""
    return list(traverse_tree(source, strategy=TraversalStrategy.IN_ORDER,
                              include_filter=lambda node: node.is_leaf()))


def get_tree_stats(source: TreeSource) -> Dict[str, Any]:
    """Get statistics about a tree version.

    Returns:
        Dictionary with node_count, leaf_count, height, min_key and max_key
        (the keys are None for an empty tree)
    """
    root = _resolve_root(source)
    stats: Dict[str, Any] = {
        'node_count': 0,
        'leaf_count': 0,
        'height': tree_height(root),
        'min_key': None,
        'max_key': None,
    }

    keys = []
    for node in traverse_tree(root, strategy=TraversalStrategy.IN_ORDER):
        stats['node_count'] += 1
        if node.is_leaf():
            stats['leaf_count'] += 1
        keys.append(node.key)

    if keys:
        stats['min_key'] = keys[0]
        stats['max_key'] = keys[-1]

    return stats
