"""Configuration system for persistentbst.

This module defines how users choose the behaviour of a PersistentMap
(the splice rule used when removing a node that only has a left child)
and how the shape inspector walks a tree.
"""

import logging
import os
from dataclasses import dataclass
from enum import Enum
from functools import lru_cache
from typing import List, Optional

_SUPPORTED_LOG_LEVELS = {"CRITICAL", "ERROR", "WARNING", "INFO", "DEBUG"}


class SpliceRule(Enum):
    """How to splice out a removed node that has a left child only.

    Both rules leave a valid BST holding the same entries; they differ
    in the resulting shape.
    """
    PROMOTE_LEFT = "promote_left"   # Left subtree replaces the node as-is
    PREDECESSOR = "predecessor"     # Hoist the in-order predecessor


class TraversalStrategy(Enum):
    """How the shape inspector walks a tree."""
    BREADTH_FIRST = "bfs"           # Level by level
    DEPTH_FIRST_PRE = "dfs_pre"     # Parent before children
    IN_ORDER = "in_order"           # Left, parent, right (sorted by key)
    DEPTH_FIRST_POST = "dfs_post"   # Children before parent
    LEVEL_ORDER = "level"           # Grouped by level


def _parse_splice_rule(raw: Optional[str]) -> SpliceRule:
    if raw is None or raw.strip() == "":
        return SpliceRule.PROMOTE_LEFT
    value = raw.strip().lower()
    try:
        return SpliceRule(value)
    except ValueError as exc:
        choices = ", ".join(rule.value for rule in SpliceRule)
        raise ValueError(
            f"Unsupported splice rule '{raw}'. Expected one of: {choices}"
        ) from exc


def _parse_log_level(raw: Optional[str]) -> str:
    if raw is None or raw.strip() == "":
        return "WARNING"
    value = raw.strip().upper()
    if value not in _SUPPORTED_LOG_LEVELS:
        raise ValueError(
            f"Unsupported log level '{raw}'. Expected one of {sorted(_SUPPORTED_LOG_LEVELS)}."
        )
    return value


@dataclass(frozen=True)
class MapConfig:
    """Complete configuration for a PersistentMap.

    Frozen so that a configuration shared between a map and its
    snapshots can never drift.
    """

    # Removal behaviour
    splice_rule: SpliceRule = SpliceRule.PROMOTE_LEFT

    # Logging
    log_level: str = "WARNING"

    @classmethod
    def from_env(cls) -> 'MapConfig':
        """Build a configuration from ``PERSISTENTBST_*`` environment variables.

        Recognised variables:
        - PERSISTENTBST_SPLICE_RULE: ``promote_left`` or ``predecessor``
        - PERSISTENTBST_LOG_LEVEL: standard logging level name

        Raises:
            ValueError: If a variable holds an unsupported value
        """
        return cls(
            splice_rule=_parse_splice_rule(os.getenv("PERSISTENTBST_SPLICE_RULE")),
            log_level=_parse_log_level(os.getenv("PERSISTENTBST_LOG_LEVEL")),
        )

    def validate(self) -> List[str]:
        """Validate configuration for consistency.

        Returns:
            List of validation errors (empty if valid)
        """
        errors = []

        if not isinstance(self.splice_rule, SpliceRule):
            errors.append(f"splice_rule must be a SpliceRule, got {self.splice_rule!r}")

        if self.log_level not in _SUPPORTED_LOG_LEVELS:
            errors.append(f"log_level must be one of {sorted(_SUPPORTED_LOG_LEVELS)}")

        return errors


def _configure_logging(level: str) -> None:
    logger = logging.getLogger("persistentbst")
    logger.setLevel(level)
    if not logger.handlers:
        handler = logging.StreamHandler()
        handler.setLevel(level)
        formatter = logging.Formatter("%(levelname)s %(name)s: %(message)s")
        handler.setFormatter(formatter)
        logger.addHandler(handler)


@lru_cache(maxsize=None)
def default_config() -> MapConfig:
    """Return the process-wide configuration derived from the environment."""
    config = MapConfig.from_env()
    _configure_logging(config.log_level)
    return config


def reset_default_config_cache() -> None:
    default_config.cache_clear()
