import math

import pytest
from hypothesis import given
from hypothesis import strategies as st

from dsalgo.avl_tree import AVLTree


def _max_height(n):
    return 1.45 * math.log2(n + 2)


def test_empty_tree():
    tree = AVLTree()
    assert len(tree) == 0
    assert tree.height() == 0
    assert list(tree) == []
    assert not tree.find(1)
    assert tree.remove(1) is False


def test_insert_duplicate_returns_false():
    tree = AVLTree()
    assert tree.insert(5) is True
    assert tree.insert(5) is False
    assert len(tree) == 1


def test_perfect_tree_height():
    tree = AVLTree(range(1, 8))
    assert tree.height() == 3
    assert list(tree) == list(range(1, 8))


def test_sorted_insertions_stay_balanced():
    tree = AVLTree(range(1000))
    assert len(tree) == 1000
    assert tree.height() <= _max_height(1000)


def test_at_returns_order_statistics():
    values = [9, -3, 4, 17, 0, 8]
    tree = AVLTree(values)
    assert [tree.at(i) for i in range(len(values))] == sorted(values)


@pytest.mark.parametrize("k", [-1, 3, 10])
def test_at_out_of_range(k):
    tree = AVLTree([1, 2, 3])
    with pytest.raises(IndexError):
        tree.at(k)


def test_at_on_empty_tree():
    with pytest.raises(IndexError):
        AVLTree().at(0)


def test_remove_missing_key():
    tree = AVLTree([1, 2, 3])
    assert tree.remove(4) is False
    assert list(tree) == [1, 2, 3]


def test_remove_node_with_two_children():
    tree = AVLTree(range(1, 8))
    assert tree.remove(4) is True
    assert 4 not in tree
    assert list(tree) == [1, 2, 3, 5, 6, 7]


def test_strings_are_ordered():
    tree = AVLTree(["pear", "apple", "fig"])
    assert list(tree) == sorted(["pear", "apple", "fig"])
    assert "fig" in tree


@given(st.lists(st.integers(-1000, 1000)), st.lists(st.integers(-1000, 1000)))
def test_matches_set_model(inserts, removals):
    tree = AVLTree()
    model = set()
    insert_results = []
    expected_inserts = []
    for x in inserts:
        expected_inserts.append(x not in model)
        insert_results.append(tree.insert(x))
        model.add(x)
    assert insert_results == expected_inserts
    remove_results = []
    expected_removals = []
    for x in removals:
        expected_removals.append(x in model)
        remove_results.append(tree.remove(x))
        model.discard(x)
    assert remove_results == expected_removals
    ordered = sorted(model)
    assert list(tree) == ordered
    assert len(tree) == len(model)
    assert tree.height() <= _max_height(len(model))
    assert [tree.at(i) for i in range(len(ordered))] == ordered
    assert [tree.find(x) for x in inserts] == [x in model for x in inserts]