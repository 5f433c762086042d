"""persistentbst - Persistent ordered map on an immutable binary search tree.

Every add or remove builds a new tree version by copying only the path
from the root to the changed node; all other subtrees are shared. Versions
captured earlier stay valid and unchanged forever.

Typical use:
━━━━━━━━━━━━━━━━━━━━━━━━━━
    from persistentbst import PersistentMap

    m = PersistentMap()
    m.add(5, "a")
    before = m.snapshot()
    m.remove(5)
    before.try_get(5)   # (True, "a")
━━━━━━━━━━━━━━━━━━━━━━━━━━

Read-only shape inspection for drawings and debugging lives in
``persistentbst.inspect``.
"""

__version__ = "0.1.0"

from .config import MapConfig, SpliceRule, TraversalStrategy
from .errors import PersistentMapError, InvalidKeyError, DuplicateKeyError
from .core import TreeNode, PersistentMap
from . import inspect

__all__ = [
    "__version__",
    "MapConfig",
    "SpliceRule",
    "TraversalStrategy",
    "PersistentMapError",
    "InvalidKeyError",
    "DuplicateKeyError",
    "TreeNode",
    "PersistentMap",
    "inspect",
]
