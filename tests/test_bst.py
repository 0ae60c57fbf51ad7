import pytest

from algokit.bst import BinarySearchTree


def _tree(keys):
    tree = BinarySearchTree()
    for key in keys:
        tree.insert(key, str(key))
    return tree


def test_empty_tree():
    tree = BinarySearchTree()
    assert tree.is_empty()
    assert len(tree) == 0
    assert list(tree.in_order()) == []
    assert list(tree.level_order()) == []


def test_insert_and_search():
    tree = _tree([5, 3, 8])
    assert len(tree) == 3
    assert tree.search(3) == "3"
    assert tree.search(7) is None
    assert tree.contains(8)
    assert not tree.contains(4)


def test_insert_existing_key_updates_value():
    tree = _tree([5, 3])
    tree.insert(3, "three")
    assert len(tree) == 2
    assert tree.search(3) == "three"


def test_traversal_orders():
    tree = _tree([5, 3, 8, 1, 4])
    assert list(tree.pre_order()) == [5, 3, 1, 4, 8]
    assert list(tree.post_order()) == [1, 4, 3, 8, 5]
    assert list(tree.level_order()) == [5, 3, 8, 1, 4]


def test_in_order_is_sorted():
    keys = [50, 20, 70, 10, 30, 60, 80, 25, 35, 65]
    tree = _tree(keys)
    assert list(tree.in_order()) == sorted(keys)


def test_minimum_and_maximum():
    keys = [50, 20, 70, 10, 30, 60, 80]
    tree = _tree(keys)
    assert tree.minimum() == min(keys)
    assert tree.maximum() == max(keys)


def test_minimum_of_empty_raises():
    with pytest.raises(ValueError):
        BinarySearchTree().minimum()
    with pytest.raises(ValueError):
        BinarySearchTree().maximum()


def test_remove_min_and_max():
    keys = [50, 20, 70, 10, 30, 60, 80]
    tree = _tree(keys)
    tree.remove_min()
    tree.remove_max()
    assert len(tree) == len(keys) - 2
    assert list(tree.in_order()) == sorted(keys)[1:-1]


def test_remove_min_on_empty_is_noop():
    tree = BinarySearchTree()
    tree.remove_min()
    tree.remove_max()
    assert len(tree) == 0


@pytest.mark.parametrize("victim", [50, 20, 70, 10, 30, 60, 80, 25])
def test_remove_keeps_order(victim):
    keys = [50, 20, 70, 10, 30, 60, 80, 25]
    tree = _tree(keys)
    tree.remove(victim)
    assert not tree.contains(victim)
    assert len(tree) == len(keys) - 1
    assert list(tree.in_order()) == sorted(k for k in keys if k != victim)
    for key in keys:
        if key != victim:
            assert tree.search(key) == str(key)


def test_remove_absent_key_is_noop():
    tree = _tree([2, 1, 3])
    tree.remove(9)
    assert len(tree) == 3
    assert list(tree.in_order()) == [1, 2, 3]


def test_remove_everything():
    keys = [4, 2, 6, 1, 3, 5, 7]
    tree = _tree(keys)
    for key in keys:
        tree.remove(key)
    assert tree.is_empty()
    assert list(tree.pre_order()) == []


def test_sorted_insertion_builds_deep_tree():
    keys = list(range(5000))
    tree = _tree(keys)
    assert list(tree.in_order()) == keys
    assert tree.maximum() == keys[-1]
    tree.remove(keys[-1])
    assert tree.maximum() == keys[-2]