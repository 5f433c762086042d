"""Core persistent tree for persistentbst.

This package contains the immutable node type, the path-copying
algorithms and the PersistentMap container built on them.
"""

from .node import TreeNode
from .algorithms import (
    check_key,
    compare,
    find,
    insert,
    delete_minimum,
    delete_maximum,
    remove,
)
from .map import PersistentMap

__all__ = [
    "TreeNode",
    "PersistentMap",
    "check_key",
    "compare",
    "find",
    "insert",
    "delete_minimum",
    "delete_maximum",
    "remove",
]
