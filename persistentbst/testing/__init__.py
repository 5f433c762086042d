"""Testing utilities for persistentbst consumers."""

from .fixtures import TreeInvariantHelper

__all__ = ['TreeInvariantHelper']
