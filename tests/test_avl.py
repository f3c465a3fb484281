import random

import pytest

from dsakit.avl import AVLNode, AVLTree


def _check(node):
    """Return the height of ``node`` after checking AVL and BST invariants."""
    if node is None:
        return 0
    left = _check(node.left)
    right = _check(node.right)
    assert abs(left - right) <= 1
    assert node.height == 1 + max(left, right)
    if node.left is not None:
        assert node.left.key < node.key
    if node.right is not None:
        assert node.right.key > node.key
    return 1 + max(left, right)


def test_insert_worked_example():
    tree = AVLTree([10, 20, 30, 40, 50, 25])
    assert tree.preorder() == [30, 20, 10, 25, 40, 50]
    _check(tree.root)


def test_left_left_rotation():
    tree = AVLTree([3, 2, 1])
    assert tree.preorder() == [2, 1, 3]


def test_delete_worked_example():
    tree = AVLTree([9, 5, 10, 1, 6, 11])
    assert tree.preorder() == [9, 5, 1, 6, 10, 11]
    tree.delete(10)
    assert tree.preorder() == [9, 5, 1, 6, 11]
    assert 10 not in tree
    _check(tree.root)


def test_duplicates_are_ignored():
    tree = AVLTree([5, 5, 5, 3])
    assert len(tree) == 2
    assert list(tree) == [3, 5]


def test_delete_missing_key_is_ignored():
    tree = AVLTree([1, 2, 3])
    before = tree.preorder()
    tree.delete(42)
    assert tree.preorder() == before
    assert len(tree) == 3


def test_delete_until_empty():
    keys = [4, 2, 6, 1, 3, 5, 7]
    tree = AVLTree(keys)
    for key in keys:
        tree.delete(key)
        _check(tree.root)
    assert len(tree) == 0
    assert tree.root is None
    assert tree.preorder() == []


def test_empty_tree():
    tree = AVLTree()
    assert list(tree) == []
    assert 0 not in tree


def test_new_node_is_leaf():
    node = AVLNode(7)
    assert (node.left, node.right, node.height) == (None, None, 1)


@pytest.mark.parametrize("seed", range(5))
def test_random_operations_keep_invariants(seed):
    rng = random.Random(seed)
    tree = AVLTree()
    reference = set()
    for _ in range(300):
        key = rng.randrange(100)
        if rng.random() < 0.6:
            tree.insert(key)
            reference.add(key)
        else:
            tree.delete(key)
            reference.discard(key)
        _check(tree.root)
    assert list(tree) == sorted(reference)
    assert len(tree) == len(reference)
    assert all(key in tree for key in reference)


def test_preorder_is_permutation_of_keys():
    keys = list(range(50))
    tree = AVLTree(keys)
    assert sorted(tree.preorder()) == keys
    assert tree.preorder()[0] == tree.root.key