"""Data collection strategies for the shape inspector.

DataCollectors define what information to extract from nodes during a
traversal, so the same walk can feed a key listing, a debugging dump or
a drawing.
"""

from abc import ABC, abstractmethod
from typing import Any, Callable, Dict, Optional, Tuple

from ..core.node import TreeNode
from .adapter import TreeShapeAdapter


class DataCollector(ABC):
    """Abstract base class for data collection strategies."""

    def __init__(self, adapter: TreeShapeAdapter):
        """Initialize collector with an adapter.

        Args:
            adapter: TreeShapeAdapter for additional node operations
        """
        self.adapter = adapter

    @abstractmethod
    def collect(self, node: TreeNode, depth: int) -> Any:
        """Collect data from a node.

        Args:
            node: The node to collect data from
            depth: Current depth in traversal

        Returns:
            Collected data (type depends on collector)
        """
        pass


class KeyCollector(DataCollector):
    """Collects only node keys."""

    def collect(self, node: TreeNode, depth: int) -> Any:
        return node.key


class EntryCollector(DataCollector):
    """Collects (key, value) entries."""

    def collect(self, node: TreeNode, depth: int) -> Tuple[Any, Any]:
        return node.entry


class MetadataCollector(DataCollector):
    """Collects the metadata dictionary of each node."""

    def collect(self, node: TreeNode, depth: int) -> Dict[str, Any]:
        return node.metadata()


class ShapeCollector(DataCollector):
    """Collects what a drawing needs to place a node.

    Child slots are reported by key with None marking an empty slot,
    so a renderer can put a lone child on the correct side.
    """

    def collect(self, node: TreeNode, depth: int) -> Dict[str, Any]:
        left, right = self.adapter.get_child_slots(node)
        return {
            'key': node.key,
            'value': node.value,
            'depth': depth,
            'left': None if left is None else left.key,
            'right': None if right is None else right.key,
        }


class CustomCollector(DataCollector):
    """Collector that delegates to a user-supplied function.

    Example:
        collector = CustomCollector(adapter, lambda node, depth: len(str(node.value)))
    """

    def __init__(self,
                 adapter: TreeShapeAdapter,
                 collect_func: Callable[[TreeNode, int], Any]):
        super().__init__(adapter)
        self.collect_func = collect_func

    def collect(self, node: TreeNode, depth: int) -> Any:
        return self.collect_func(node, depth)


_COLLECTORS = {
    'key': KeyCollector,
    'entry': EntryCollector,
    'metadata': MetadataCollector,
    'shape': ShapeCollector,
}


def create_collector(name: str,
                     adapter: TreeShapeAdapter,
                     collect_func: Optional[Callable[[TreeNode, int], Any]] = None) -> DataCollector:
    """Create a collector instance by name.

    Args:
        name: One of key, entry, metadata, shape or custom
        adapter: TreeShapeAdapter for the tree
        collect_func: Required when name is custom

    Raises:
        ValueError: If name is not recognized or custom lacks collect_func
    """
    name_lower = name.lower()
    if name_lower == 'custom':
        if collect_func is None:
            raise ValueError("collect_func required for the custom collector")
        return CustomCollector(adapter, collect_func)

    if name_lower not in _COLLECTORS:
        raise ValueError(
            f"Unknown collector: {name}. "
            f"Choose from: {', '.join(list(_COLLECTORS.keys()) + ['custom'])}"
        )
    return _COLLECTORS[name_lower](adapter)
