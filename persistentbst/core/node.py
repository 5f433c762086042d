"""TreeNode for persistentbst.

The TreeNode is intentionally kept simple - it's an immutable data container
holding one entry and two child links. All tree-building logic lives in
``persistentbst.core.algorithms``, which only ever constructs fresh nodes.
Because a node never changes after construction, a subtree can be shared by
any number of map versions.
"""

from typing import Any, Dict, Optional, Tuple


class TreeNode:
    """Immutable binary search tree node.

    ``None`` is the absence marker for both children. Equality and hashing
    are by identity, so two versions of a map share a subtree exactly when
    they hold the same node objects.
    """

    __slots__ = ("_key", "_value", "_left", "_right")

    def __init__(self,
                 key: Any,
                 value: Any,
                 left: Optional['TreeNode'] = None,
                 right: Optional['TreeNode'] = None):
        """Create a node.

        Args:
            key: The entry key
            value: The entry value
            left: Subtree holding strictly smaller keys, or None
            right: Subtree holding strictly greater keys, or None
        """
        object.__setattr__(self, "_key", key)
        object.__setattr__(self, "_value", value)
        object.__setattr__(self, "_left", left)
        object.__setattr__(self, "_right", right)

    def __setattr__(self, name: str, value: Any) -> None:
        raise AttributeError(f"{self.__class__.__name__} is immutable")

    def __delattr__(self, name: str) -> None:
        raise AttributeError(f"{self.__class__.__name__} is immutable")

    @property
    def key(self) -> Any:
        return self._key

    @property
    def value(self) -> Any:
        return self._value

    @property
    def left(self) -> Optional['TreeNode']:
        return self._left

    @property
    def right(self) -> Optional['TreeNode']:
        return self._right

    @property
    def entry(self) -> Tuple[Any, Any]:
        """The (key, value) pair stored in this node."""
        return (self._key, self._value)

    # Path-copying primitives

    def with_left(self, left: Optional['TreeNode']) -> 'TreeNode':
        """Return a new node equal to this one but with a different left child."""
        return TreeNode(self._key, self._value, left, self._right)

    def with_right(self, right: Optional['TreeNode']) -> 'TreeNode':
        """Return a new node equal to this one but with a different right child."""
        return TreeNode(self._key, self._value, self._left, right)

    # Read-only inspection

    def identifier(self) -> str:
        """Return an identifier unique within one tree version.

        Keys are unique within a map, so the key's repr is enough.
        """
        return repr(self._key)

    def has_left(self) -> bool:
        return self._left is not None

    def has_right(self) -> bool:
        return self._right is not None

    def is_leaf(self) -> bool:
        """Check if this node has no children."""
        return self._left is None and self._right is None

    def metadata(self) -> Dict[str, Any]:
        """Return basic metadata about this node.

        Returns:
            Dict with key, value, has_left and has_right
        """
        return {
            'key': self._key,
            'value': self._value,
            'has_left': self.has_left(),
            'has_right': self.has_right(),
        }

    def __str__(self) -> str:
        return self.identifier()

    def __repr__(self) -> str:
        return f"{self.__class__.__name__}(key={self._key!r}, value={self._value!r})"
