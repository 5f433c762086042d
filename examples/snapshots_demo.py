#!/usr/bin/env python3
"""
Snapshot and structural sharing demo for persistentbst.

This example demonstrates:
- Adding and removing entries
- Keeping an old version alive with snapshot()
- Inspecting how many nodes two versions share
"""

import sys
from pathlib import Path

# Add parent directory to path for development
sys.path.insert(0, str(Path(__file__).parent.parent))

from persistentbst import MapConfig, PersistentMap
from persistentbst.inspect import collect_tree_data, get_tree_stats
from persistentbst.testing import TreeInvariantHelper


def print_shape(label: str, m: PersistentMap) -> None:
    """Print one line per node, indented by depth."""
    print(f"\n{label}")
    for _, shape in collect_tree_data(m, collector="shape", strategy="dfs_pre"):
        indent = "  " * shape['depth']
        print(f"{indent}{shape['key']}: {shape['value']}")


def main():
    m = PersistentMap(MapConfig())
    for key, value in [(5, "a"), (3, "b"), (8, "c"), (1, "d"), (4, "e")]:
        m.add(key, value)

    before = m.snapshot()
    m.remove(3)
    m.add(9, "f")

    print_shape("Before:", before)
    print_shape("After:", m)

    shared = TreeInvariantHelper(before.root).shared_nodes(m.root)
    print(f"\nNodes shared between versions: {shared}")
    print(f"Stats after: {get_tree_stats(m)}")
    print(f"Old version still sees 3: {before.try_get(3)}")


if __name__ == "__main__":
    main()
