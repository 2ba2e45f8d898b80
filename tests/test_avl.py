import math
import random

import pytest

from dsakit.avl import AVLTree


def _height_bound(count):
    return 1.4405 * math.log2(count + 2)


def test_worked_example_inorder_and_height():
    tree = AVLTree()
    keys = [10, 20, 30, 40, 50, 25]
    for key in keys:
        tree.insert(key)
    assert tree.inorder() == sorted(keys)
    assert tree.height() == 3


def test_empty_tree():
    tree = AVLTree()
    assert tree.inorder() == []
    assert tree.height() == 0
    assert len(tree) == 0


def test_duplicates_are_ignored():
    tree = AVLTree()
    for key in [5, 3, 5, 8, 3, 5]:
        tree.insert(key)
    assert tree.inorder() == [3, 5, 8]
    assert len(tree) == 3


@pytest.mark.parametrize("count", [1, 2, 7, 31, 100, 500])
def test_sequential_insert_stays_balanced(count):
    tree = AVLTree(range(count))
    assert tree.inorder() == list(range(count))
    assert tree.height() <= _height_bound(count)


def test_descending_insert_stays_balanced():
    tree = AVLTree(range(200, 0, -1))
    assert tree.inorder() == list(range(1, 201))
    assert tree.height() <= _height_bound(200)


def test_delete_leaf_inner_and_root():
    keys = [50, 30, 70, 20, 40, 60, 80, 35]
    tree = AVLTree(keys)
    for key in (35, 30, 50):
        tree.delete(key)
        keys.remove(key)
        assert tree.inorder() == sorted(keys)
        assert key not in tree


def test_delete_missing_key_is_noop():
    tree = AVLTree([1, 2, 3])
    tree.delete(99)
    assert tree.inorder() == [1, 2, 3]
    assert len(tree) == 3


def test_delete_everything():
    tree = AVLTree(range(20))
    for key in range(20):
        tree.delete(key)
    assert tree.inorder() == []
    assert tree.height() == 0


def test_random_operations_keep_order_and_balance():
    rng = random.Random(1234)
    tree = AVLTree()
    reference = set()
    for _ in range(2000):
        key = rng.randrange(300)
        if rng.random() < 0.6:
            tree.insert(key)
            reference.add(key)
        else:
            tree.delete(key)
            reference.discard(key)
        assert len(tree) == len(reference)
    assert tree.inorder() == sorted(reference)
    assert tree.height() <= _height_bound(len(reference))


def test_iteration_and_membership():
    tree = AVLTree([4, 1, 9])
    assert list(tree) == [1, 4, 9]
    assert 9 in tree
    assert 5 not in tree