"""Tests for the read-only shape inspector."""

import pytest

from persistentbst import PersistentMap, MapConfig, TraversalStrategy, TreeNode
from persistentbst.inspect import (
    BreadthFirstTraverser,
    CustomCollector,
    DepthFirstPostOrderTraverser,
    DepthFirstPreOrderTraverser,
    EntryCollector,
    InOrderTraverser,
    KeyCollector,
    LevelOrderTraverser,
    MetadataCollector,
    ShapeCollector,
    TreeShapeAdapter,
    collect_tree_data,
    count_nodes,
    create_collector,
    create_traverser,
    get_leaf_nodes,
    get_tree_stats,
    in_order_keys,
    traverse_tree,
    tree_height,
)


def keys_of(pairs):
    return [node.key for node, _ in pairs]


class TestTreeShapeAdapter:

    def test_children_and_slots(self, example_map):
        adapter = TreeShapeAdapter(example_map.root)
        root = adapter.root
        assert [c.key for c in adapter.get_children(root)] == [3, 8]
        assert adapter.get_child_slots(root.right) == (None, None)
        left, right = adapter.get_child_slots(root.left)
        assert (left.key, right.key) == (1, 4)

    def test_lone_child_slot(self, map_factory):
        m = map_factory([(5, "a"), (7, "b")])
        adapter = TreeShapeAdapter(m.root)
        left, right = adapter.get_child_slots(m.root)
        assert left is None
        assert right.key == 7

    def test_parent_and_depth(self, example_map):
        adapter = TreeShapeAdapter(example_map.root)
        root = example_map.root
        four = root.left.right
        assert adapter.get_parent(root) is None
        assert adapter.get_parent(four) is root.left
        assert adapter.get_depth(root) == 0
        assert adapter.get_depth(four) == 2

    def test_siblings(self, example_map):
        adapter = TreeShapeAdapter(example_map.root)
        root = example_map.root
        assert list(adapter.get_siblings(root)) == []
        assert list(adapter.get_siblings(root.left)) == [root.right]

    def test_foreign_node_rejected(self, example_map):
        adapter = TreeShapeAdapter(example_map.root)
        stranger = TreeNode(4, "e")
        assert not adapter.contains_node(stranger)
        with pytest.raises(ValueError):
            adapter.get_parent(stranger)
        with pytest.raises(ValueError):
            adapter.get_depth(stranger)

    def test_old_version_nodes_not_in_new_version(self, example_map):
        old_three = example_map.root.left
        example_map.remove(4)
        adapter = TreeShapeAdapter(example_map.root)
        assert not adapter.contains_node(old_three)
        assert adapter.contains_node(example_map.root.right)

    def test_read_only(self, example_map):
        adapter = TreeShapeAdapter(example_map.root)
        assert adapter.supports_modification() is False
        assert adapter.supports_random_access() is True
        with pytest.raises(NotImplementedError):
            adapter.add_child(example_map.root, TreeNode(9, "x"))
        with pytest.raises(NotImplementedError):
            adapter.remove_child(example_map.root, example_map.root.left)

    def test_estimated_size(self, example_map):
        adapter = TreeShapeAdapter(example_map.root)
        assert adapter.estimated_size(example_map.root) == 5
        assert adapter.estimated_size(example_map.root.left) == 3

    def test_repr(self, example_map):
        assert repr(TreeShapeAdapter(example_map.root)) == "TreeShapeAdapter(root=5)"


class TestTraversers:

    @pytest.mark.parametrize("traverser_class,expected", [
        (BreadthFirstTraverser, [5, 3, 8, 1, 4]),
        (DepthFirstPreOrderTraverser, [5, 3, 1, 4, 8]),
        (InOrderTraverser, [1, 3, 4, 5, 8]),
        (DepthFirstPostOrderTraverser, [1, 4, 3, 8, 5]),
        (LevelOrderTraverser, [5, 3, 8, 1, 4]),
    ])
    def test_orders(self, example_map, traverser_class, expected):
        traverser = traverser_class(TreeShapeAdapter(example_map.root))
        assert keys_of(traverser.traverse(example_map.root)) == expected

    @pytest.mark.parametrize("traverser_class", [
        BreadthFirstTraverser,
        DepthFirstPreOrderTraverser,
        InOrderTraverser,
        DepthFirstPostOrderTraverser,
        LevelOrderTraverser,
    ])
    def test_empty_tree(self, traverser_class):
        traverser = traverser_class(TreeShapeAdapter(None))
        assert list(traverser.traverse(None)) == []

    def test_in_order_depths(self, example_map):
        traverser = InOrderTraverser(TreeShapeAdapter(example_map.root))
        pairs = [(node.key, depth) for node, depth in traverser.traverse(example_map.root)]
        assert pairs == [(1, 2), (3, 1), (4, 2), (5, 0), (8, 1)]

    @pytest.mark.parametrize("traverser_class,expected", [
        (BreadthFirstTraverser, [5, 3, 8]),
        (DepthFirstPreOrderTraverser, [5, 3, 8]),
        (InOrderTraverser, [3, 5, 8]),
        (DepthFirstPostOrderTraverser, [3, 8, 5]),
        (LevelOrderTraverser, [5, 3, 8]),
    ])
    def test_max_depth(self, example_map, traverser_class, expected):
        traverser = traverser_class(TreeShapeAdapter(example_map.root))
        assert keys_of(traverser.traverse(example_map.root, max_depth=1)) == expected

    def test_min_depth(self, example_map):
        traverser = InOrderTraverser(TreeShapeAdapter(example_map.root))
        assert keys_of(traverser.traverse(example_map.root, min_depth=2)) == [1, 4]

    def test_subtree_start(self, example_map):
        traverser = BreadthFirstTraverser(TreeShapeAdapter(example_map.root))
        pairs = list(traverser.traverse(example_map.root.left))
        assert [(n.key, d) for n, d in pairs] == [(3, 0), (1, 1), (4, 1)]

    def test_factory(self):
        adapter = TreeShapeAdapter(None)
        assert isinstance(create_traverser("bfs", adapter), BreadthFirstTraverser)
        assert isinstance(create_traverser("IN_ORDER", adapter), InOrderTraverser)
        assert isinstance(create_traverser(TraversalStrategy.DEPTH_FIRST_POST, adapter),
                          DepthFirstPostOrderTraverser)
        with pytest.raises(ValueError, match="Unknown traversal strategy"):
            create_traverser("zigzag", adapter)


class TestCollectors:

    def test_basic_collectors(self, example_map):
        adapter = TreeShapeAdapter(example_map.root)
        root = example_map.root
        assert KeyCollector(adapter).collect(root, 0) == 5
        assert EntryCollector(adapter).collect(root, 0) == (5, "a")
        assert MetadataCollector(adapter).collect(root, 0)['has_left'] is True

    def test_shape_collector(self, example_map):
        adapter = TreeShapeAdapter(example_map.root)
        collector = ShapeCollector(adapter)
        assert collector.collect(example_map.root, 0) == {
            'key': 5, 'value': "a", 'depth': 0, 'left': 3, 'right': 8,
        }
        assert collector.collect(example_map.root.right, 1) == {
            'key': 8, 'value': "c", 'depth': 1, 'left': None, 'right': None,
        }

    def test_custom_collector(self, example_map):
        collector = CustomCollector(TreeShapeAdapter(example_map.root),
                                    lambda node, depth: (node.value, depth))
        assert collector.collect(example_map.root.left, 1) == ("b", 1)

    def test_factory(self):
        adapter = TreeShapeAdapter(None)
        assert isinstance(create_collector("shape", adapter), ShapeCollector)
        assert isinstance(create_collector("custom", adapter, lambda n, d: 1), CustomCollector)
        with pytest.raises(ValueError):
            create_collector("custom", adapter)
        with pytest.raises(ValueError, match="Unknown collector"):
            create_collector("colour", adapter)


class TestApi:

    def test_traverse_tree_accepts_map_or_root(self, example_map):
        from_map = [n.key for n in traverse_tree(example_map, strategy="in_order")]
        from_root = [n.key for n in traverse_tree(example_map.root, strategy="in_order")]
        assert from_map == from_root == [1, 3, 4, 5, 8]

    def test_traverse_tree_filter(self, example_map):
        odd = [n.key for n in traverse_tree(example_map, include_filter=lambda n: n.key % 2)]
        assert odd == [5, 3, 1]

    def test_collect_tree_data(self, example_map):
        data = [d for _, d in collect_tree_data(example_map, collector="entry",
                                                strategy=TraversalStrategy.IN_ORDER)]
        assert data == [(1, "d"), (3, "b"), (4, "e"), (5, "a"), (8, "c")]

    def test_collect_tree_data_custom(self, example_map):
        data = [d for _, d in collect_tree_data(example_map, collector="custom", max_depth=0,
                                                collect_func=lambda n, depth: n.value.upper())]
        assert data == ["A"]

    def test_counts_and_height(self, example_map):
        assert count_nodes(example_map) == 5
        assert tree_height(example_map) == 2
        assert in_order_keys(example_map) == [1, 3, 4, 5, 8]
        assert [n.key for n in get_leaf_nodes(example_map)] == [1, 4, 8]

    def test_empty(self):
        m = PersistentMap(MapConfig())
        assert count_nodes(m) == 0
        assert tree_height(m) == -1
        assert in_order_keys(m) == []
        assert get_leaf_nodes(None) == []

    def test_stats(self, example_map):
        assert get_tree_stats(example_map) == {
            'node_count': 5,
            'leaf_count': 3,
            'height': 2,
            'min_key': 1,
            'max_key': 8,
        }

    def test_empty_stats(self):
        assert get_tree_stats(None) == {
            'node_count': 0,
            'leaf_count': 0,
            'height': -1,
            'min_key': None,
            'max_key': None,
        }

    def test_inspection_never_changes_map(self, example_map):
        root = example_map.root
        list(collect_tree_data(example_map, collector="shape"))
        get_tree_stats(example_map)
        assert example_map.root is root
