"""Property tests over generated trees.

Each generated tree is checked against straightforward recursive/queue
reference traversals, so the stateful iterators must agree with them on
order, parents and depth for every shape.
"""

import random
from collections import deque

import pytest

from treewalker import TreeWalker


def generate_tree(seed, max_depth=5, max_children=4):
    """Build a random tree with string ids and occasional single children."""
    rng = random.Random(seed)
    counter = iter(range(10_000))

    def build(depth):
        node = {'id': f"n{next(counter)}", 'weight': rng.randint(0, 9)}
        if depth < max_depth:
            width = rng.randint(0, max_children)
            if width:
                node['children'] = [build(depth + 1) for _ in range(width)]
            if rng.random() < 0.3:
                node['extra'] = build(depth + 1)
        return node

    return build(0)


def reference_children(node):
    kids = list(node.get('children') or [])
    if node.get('extra'):
        kids.append(node['extra'])
    return kids


def reference_pre_order(node, parent=None, depth=0):
    yield node, parent, depth
    for kid in reference_children(node):
        yield from reference_pre_order(kid, node, depth + 1)


def reference_level_order(root):
    queue = deque([(root, None, 0)])
    while queue:
        node, parent, depth = queue.popleft()
        yield node, parent, depth
        for kid in reference_children(node):
            queue.append((kid, node, depth + 1))


SEEDS = list(range(12))


@pytest.fixture
def walker():
    return TreeWalker(['children', 'extra'])


def as_ids(triples):
    return [(node['id'], parent and parent['id'], depth) for node, parent, depth in triples]


@pytest.mark.parametrize("seed", SEEDS)
def test_depth_iterator_matches_pre_order(walker, seed):
    tree = generate_tree(seed)
    assert as_ids(walker.depth_iterator(tree)) == as_ids(reference_pre_order(tree))


@pytest.mark.parametrize("seed", SEEDS)
def test_breadth_iterator_matches_level_order(walker, seed):
    tree = generate_tree(seed)
    records = list(walker.breadth_iterator(tree))
    assert as_ids(records) == as_ids(reference_level_order(tree))
    depths = [record.depth for record in records]
    assert depths == sorted(depths)


@pytest.mark.parametrize("seed", SEEDS)
def test_every_node_visited_once(walker, seed):
    tree = generate_tree(seed)
    depth_ids = [record.value['id'] for record in walker.depth_iterator(tree)]
    breadth_ids = [record.value['id'] for record in walker.breadth_iterator(tree)]
    assert len(depth_ids) == len(set(depth_ids))
    assert sorted(depth_ids) == sorted(breadth_ids)
    assert walker.depth_reduce(tree, lambda total, node: total + 1, 0) == len(depth_ids)
    assert walker.breadth_reduce(tree, lambda total, node: total + 1, 0) == len(breadth_ids)


@pytest.mark.parametrize("seed", SEEDS[:6])
def test_parent_matches_iteration(walker, seed):
    tree = generate_tree(seed)
    for record in walker.breadth_iterator(tree):
        assert walker.depth_parent(tree, record.value) is record.parent
        assert walker.breadth_parent(tree, record.value) is record.parent


@pytest.mark.parametrize("seed", SEEDS[:6])
def test_siblings_rebuild_group(walker, seed):
    tree = generate_tree(seed)
    for node, parent, _ in reference_pre_order(tree):
        result = walker.depth_siblings(tree, node)
        if parent is None or parent.get('extra') is node:
            assert result is None
        else:
            assert result.left + [node] + result.right == parent['children']


@pytest.mark.parametrize("seed", SEEDS)
def test_identity_map_and_filter_preserve_tree(walker, seed):
    tree = generate_tree(seed)
    assert walker.map(tree, lambda node: node) == tree
    assert walker.filter(tree, lambda node: True) == tree
    assert walker.filter(tree, lambda node: False) is None
    assert walker.where(tree, {}) == tree


@pytest.mark.slow
def test_iterators_handle_depth_beyond_recursion_limit(walker):
    depth = 20_000
    tree = leaf = {'id': 'n0'}
    for index in range(1, depth):
        child = {'id': f"n{index}"}
        leaf['children'] = [child]
        leaf = child

    assert sum(1 for _ in walker.depth_iterator(tree)) == depth
    last = None
    for last in walker.breadth_iterator(tree):
        pass
    assert last.value is leaf
    assert last.depth == depth - 1


@pytest.mark.slow
def test_wide_tree_counts(walker):
    tree = {'id': 'root', 'children': [{'id': f"c{i}", 'children': [{'id': f"g{i}"}]}
                                       for i in range(5_000)]}
    assert walker.count_nodes(tree) == 10_001
    assert walker.breadth_reduce(tree, lambda total, node: total + 1, 0) == 10_001
