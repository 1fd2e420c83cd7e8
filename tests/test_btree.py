import random

import pytest

from dstructs.btree import BTree


def _check_structure(tree):
    """Return leaf depths after asserting node-size and ordering invariants."""
    depths = set()
    root = tree._root
    if root is None:
        return depths

    def visit(node, depth, is_root):
        assert len(node.keys) <= 2 * tree.t - 1
        if not is_root:
            assert len(node.keys) >= tree.t - 1
        assert node.keys == sorted(node.keys)
        if node.leaf:
            assert node.children == []
            depths.add(depth)
        else:
            assert len(node.children) == len(node.keys) + 1
            for child in node.children:
                visit(child, depth + 1, False)

    visit(root, 0, True)
    return depths


def test_empty_tree():
    tree = BTree(3)
    assert tree.traverse() == []
    assert tree.search(5) is False
    assert 5 not in tree


def test_invalid_degree():
    with pytest.raises(ValueError):
        BTree(1)


@pytest.mark.parametrize("t", [2, 3, 5])
def test_insert_keeps_sorted_and_balanced(t):
    rng = random.Random(t)
    keys = list(range(300))
    rng.shuffle(keys)
    tree = BTree(t)
    for key in keys:
        tree.insert(key)
    assert tree.traverse() == sorted(keys)
    assert len(_check_structure(tree)) == 1
    assert all(key in tree for key in keys)
    assert 300 not in tree
    assert -1 not in tree


def test_duplicates_are_kept():
    tree = BTree(2)
    for key in [5, 3, 5, 1, 5, 3]:
        tree.insert(key)
    assert tree.traverse() == sorted([5, 3, 5, 1, 5, 3])


def test_iter_matches_traverse():
    tree = BTree(2)
    for key in [10, 20, 5, 6, 12, 30, 7, 17]:
        tree.insert(key)
    assert list(tree) == tree.traverse()
    assert list(tree) == sorted([10, 20, 5, 6, 12, 30, 7, 17])


@pytest.mark.parametrize("t", [2, 3, 4])
def test_remove_random(t):
    rng = random.Random(100 + t)
    keys = list(range(250))
    rng.shuffle(keys)
    tree = BTree(t)
    for key in keys:
        tree.insert(key)
    remaining = set(keys)
    to_remove = keys[:]
    rng.shuffle(to_remove)
    for key in to_remove[:180]:
        tree.remove(key)
        remaining.discard(key)
        assert key not in tree
        assert len(_check_structure(tree)) <= 1
    assert tree.traverse() == sorted(remaining)


def test_remove_everything_empties_tree():
    tree = BTree(2)
    keys = list(range(40))
    for key in keys:
        tree.insert(key)
    for key in reversed(keys):
        tree.remove(key)
    assert tree.traverse() == []
    assert tree._root is None


def test_remove_missing_key_is_ignored():
    tree = BTree(2)
    for key in [1, 2, 3, 4, 5, 6, 7]:
        tree.insert(key)
    tree.remove(42)
    assert tree.traverse() == [1, 2, 3, 4, 5, 6, 7]


def test_remove_on_empty_tree():
    tree = BTree(2)
    tree.remove(1)
    assert tree.traverse() == []


def test_contains_with_incomparable_type():
    tree = BTree(2)
    tree.insert(1)
    assert "a" not in tree