"""PersistentMap - the mutable container over immutable trees.

The map holds a single reference to the current root node. Every add or
remove computes a new root with the path-copying algorithms and then
replaces the reference in one assignment. A root captured earlier (through
``root`` or ``snapshot()``) keeps describing exactly the entries it held.
"""

import logging
from typing import Any, Optional, Tuple

from ..config import MapConfig, default_config
from ..errors import DuplicateKeyError
from ..logging import get_logger
from . import algorithms
from .node import TreeNode


class PersistentMap:
    """Ordered key-value map backed by a persistent binary search tree.

    Keys must be totally ordered with ``<`` and must not be None. The tree
    is not balanced, so operations are O(height) and sorted insertion
    produces a chain.

    Thread safety: none. A single map must not be mutated from several
    threads at once. Snapshots and captured roots are immutable and may be
    read from any thread.

    Example:
        >>> m = PersistentMap()
        >>> m.add(5, "a")
        >>> before = m.snapshot()
        >>> m.remove(5)
        True
        >>> before.try_get(5)
        (True, 'a')
    """

    def __init__(self, config: Optional[MapConfig] = None):
        """Create an empty map.

        Args:
            config: Map configuration (defaults to the environment-derived one)

        Raises:
            ValueError: If the configuration is invalid
        """
        self.config = config if config is not None else default_config()
        errors = self.config.validate()
        if errors:
            raise ValueError(f"Invalid MapConfig: {'; '.join(errors)}")
        self._root: Optional[TreeNode] = None
        self._logger = get_logger("map", self.config)
        self._log_level = logging.getLevelName(self.config.log_level)

    def _debug(self, msg: str, *args: Any) -> None:
        # The logger is shared by all maps; filter against this map's own level.
        if self._log_level <= logging.DEBUG:
            self._logger.debug(msg, *args)

    @classmethod
    def _from_root(cls, root: Optional[TreeNode], config: MapConfig) -> 'PersistentMap':
        instance = cls(config)
        instance._root = root
        return instance

    @property
    def root(self) -> Optional[TreeNode]:
        """The current root node, or None when the map is empty.

        The returned node is immutable, so holding on to it pins the
        current version of the map for read-only inspection.
        """
        return self._root

    def snapshot(self) -> 'PersistentMap':
        """Return an independent map sharing the current tree.

        O(1): no nodes are copied. Mutating either map afterwards never
        affects the other.
        """
        return self._from_root(self._root, self.config)

    def is_empty(self) -> bool:
        return self._root is None

    def try_get(self, key: Any) -> Tuple[bool, Any]:
        """Look up the value associated with key.

        Returns:
            (True, value) if key is present, otherwise (False, None)

        Raises:
            InvalidKeyError: If key is None
        """
        algorithms.check_key(key)
        node = algorithms.find(key, self._root)
        if node is None:
            return False, None
        return True, node.value

    def get(self, key: Any, default: Any = None) -> Any:
        """Return the value for key, or default if key is not present."""
        found, value = self.try_get(key)
        return value if found else default

    def contains(self, key: Any) -> bool:
        found, _ = self.try_get(key)
        return found

    def __contains__(self, key: Any) -> bool:
        return self.contains(key)

    def add(self, key: Any, value: Any) -> None:
        """Add key with the given associated value.

        Raises:
            InvalidKeyError: If key is None
            DuplicateKeyError: If key is already present; the map is unchanged
        """
        algorithms.check_key(key)
        try:
            new_root = algorithms.insert(self._root, key, value)
        except DuplicateKeyError:
            self._debug("Rejected duplicate key %r", key)
            raise
        self._root = new_root
        self._debug("Added key %r", key)

    def remove(self, key: Any) -> bool:
        """Remove key and its value.

        Returns:
            True if key was present and removed, False otherwise

        Raises:
            InvalidKeyError: If key is None
        """
        new_root, removed = algorithms.remove(key, self._root, self.config.splice_rule)
        self._root = new_root
        if removed:
            self._debug("Removed key %r", key)
        return removed

    def __repr__(self) -> str:
        root_key = None if self._root is None else self._root.key
        return (f"{self.__class__.__name__}(root={root_key!r}, "
                f"splice_rule={self.config.splice_rule.value})")
