"""Error taxonomy for persistentbst.

Lookups and removals of missing keys are not errors; they are reported
through return values. Only malformed input and duplicate inserts raise.
"""

from typing import Any


class PersistentMapError(Exception):
    """Base class for all errors raised by persistentbst."""
    pass


class InvalidKeyError(PersistentMapError, ValueError):
    """Raised when a key is None.

    Raised before any tree traversal, so the map is never touched.
    """

    def __init__(self, message: str = "key must not be None"):
        super().__init__(message)


class DuplicateKeyError(PersistentMapError, KeyError):
    """Raised when adding a key that is already present in the map."""

    def __init__(self, key: Any):
        self.key = key
        super().__init__(key)

    def __str__(self) -> str:
        return f"key already present: {self.key!r}"
