import random

import pytest

from hephaistos.compares import cmp_int, cmp_string
from hephaistos.rbtree import Color, RBNode, RedBlackTree


def _black_height(node, parent=None):
    """Check structural invariants below ``node`` and return its black height."""
    if node is None:
        return 1
    assert node.parent is parent
    if node.color is Color.RED:
        assert node.left is None or node.left.color is Color.BLACK
        assert node.right is None or node.right.color is Color.BLACK
    left = _black_height(node.left, node)
    right = _black_height(node.right, node)
    assert left == right
    return left + (1 if node.color is Color.BLACK else 0)


def _no_red_red(node):
    if node is None:
        return True
    if node.color is Color.RED:
        for child in (node.left, node.right):
            if child is not None and child.color is Color.RED:
                return False
    return _no_red_red(node.left) and _no_red_red(node.right)


def _parents_ok(node, parent=None):
    if node is None:
        return True
    return node.parent is parent and _parents_ok(node.left, node) and _parents_ok(node.right, node)


def _build(values):
    tree = RedBlackTree(cmp_int)
    for value in values:
        tree.insert(value)
    return tree


def test_empty_tree():
    tree = RedBlackTree(cmp_int)
    assert list(tree) == []
    assert tree.root is None
    with pytest.raises(KeyError):
        tree.search(1)


def test_three_ascending_inserts_rotate():
    tree = _build([1, 2, 3])
    assert tree.root.data == 2
    assert tree.root.color is Color.BLACK
    assert tree.root.left.data == 1 and tree.root.left.color is Color.RED
    assert tree.root.right.data == 3 and tree.root.right.color is Color.RED


def test_first_insert_is_black_root():
    tree = _build([5])
    assert tree.root.data == 5
    assert tree.root.color is Color.BLACK


def test_iteration_is_sorted():
    values = [41, 38, 31, 12, 19, 8, 50, 2, 77]
    tree = _build(values)
    assert list(tree) == sorted(values)


def test_duplicates_are_ignored():
    tree = _build([3, 1, 3, 2, 1])
    assert list(tree) == [1, 2, 3]


def test_search_returns_node():
    tree = _build([10, 20, 30])
    node = tree.search(20)
    assert isinstance(node, RBNode)
    assert node.data == 20


def test_search_missing_raises():
    tree = _build([10, 20, 30])
    with pytest.raises(KeyError):
        tree.search(25)


@pytest.mark.parametrize("seed", [0, 1, 2, 3])
def test_invariants_after_inserts(seed):
    rng = random.Random(seed)
    values = rng.sample(range(1000), 200)
    tree = _build(values)
    assert tree.root.color is Color.BLACK
    _black_height(tree.root)
    assert list(tree) == sorted(values)


def test_ascending_inserts_stay_balanced():
    tree = _build(range(256))
    height = _black_height(tree.root)
    assert height <= 10
    assert list(tree) == list(range(256))


def test_delete_missing_is_ignored():
    tree = _build([1, 2, 3])
    tree.delete(99)
    assert list(tree) == [1, 2, 3]


def test_delete_leaf_and_root():
    tree = _build([1, 2, 3])
    tree.delete(2)
    assert list(tree) == [1, 3]
    with pytest.raises(KeyError):
        tree.search(2)
    tree.delete(1)
    tree.delete(3)
    assert list(tree) == []
    assert tree.root is None


@pytest.mark.parametrize("seed", [5, 6, 7])
def test_delete_keeps_order_and_links(seed):
    rng = random.Random(seed)
    values = rng.sample(range(500), 120)
    tree = _build(values)
    removed = rng.sample(values, 60)
    for value in removed:
        tree.delete(value)
        assert _parents_ok(tree.root)
        assert _no_red_red(tree.root)
    remaining = sorted(set(values) - set(removed))
    assert list(tree) == remaining
    assert tree.root.color is Color.BLACK
    for value in removed:
        with pytest.raises(KeyError):
            tree.search(value)
    for value in remaining:
        assert tree.search(value).data == value


def test_delete_all_empties_tree():
    values = list(range(50))
    tree = _build(values)
    for value in reversed(values):
        tree.delete(value)
    assert tree.root is None
    assert list(tree) == []


def test_reinsert_after_delete():
    tree = _build([4, 2, 6])
    tree.delete(4)
    tree.insert(4)
    assert list(tree) == [2, 4, 6]
    _black_height(tree.root)


def test_string_comparator():
    tree = RedBlackTree(cmp_string)
    for word in ["pear", "apple", "fig", "kiwi"]:
        tree.insert(word)
    assert list(tree) == ["apple", "fig", "kiwi", "pear"]
    assert tree.search("fig").data == "fig"


def test_node_repr_does_not_recurse():
    tree = _build([1, 2, 3])
    text = repr(tree.root)
    assert "data=2" in text
    assert repr(tree) == "RedBlackTree([1, 2, 3])"