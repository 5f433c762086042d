"""Read-only shape inspection for persistentbst trees.

This package is the collaborator interface for visualisation and
debugging tools. It exposes each node's entry and child slots and walks
a tree version in several orders, without any write access to nodes.
"""

from .adapter import TreeShapeAdapter
from .traverser import (
    TreeTraverser,
    BreadthFirstTraverser,
    DepthFirstPreOrderTraverser,
    InOrderTraverser,
    DepthFirstPostOrderTraverser,
    LevelOrderTraverser,
    create_traverser,
)
from .collector import (
    DataCollector,
    KeyCollector,
    EntryCollector,
    MetadataCollector,
    ShapeCollector,
    CustomCollector,
    create_collector,
)
from .api import (
    traverse_tree,
    collect_tree_data,
    count_nodes,
    tree_height,
    in_order_keys,
    get_leaf_nodes,
    get_tree_stats,
)

__all__ = [
    # Adapter
    'TreeShapeAdapter',
    # Traversers
    'TreeTraverser',
    'BreadthFirstTraverser',
    'DepthFirstPreOrderTraverser',
    'InOrderTraverser',
    'DepthFirstPostOrderTraverser',
    'LevelOrderTraverser',
    'create_traverser',
    # Collectors
    'DataCollector',
    'KeyCollector',
    'EntryCollector',
    'MetadataCollector',
    'ShapeCollector',
    'CustomCollector',
    'create_collector',
    # API
    'traverse_tree',
    'collect_tree_data',
    'count_nodes',
    'tree_height',
    'in_order_keys',
    'get_leaf_nodes',
    'get_tree_stats',
]
