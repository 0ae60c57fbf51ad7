import random

import pytest

from algokit.inversions import InversionMethod, inversions

METHODS = list(InversionMethod)


@pytest.mark.parametrize("method", METHODS)
def test_small_example(method):
    assert inversions([3, 1, 2], method) == 2


@pytest.mark.parametrize("method", METHODS)
def test_sorted_has_none(method):
    assert inversions(list(range(50)), method) == 0


@pytest.mark.parametrize("method", METHODS)
def test_reversed_has_all_pairs(method):
    n = 40
    assert inversions(list(range(n, 0, -1)), method) == n * (n - 1) // 2


@pytest.mark.parametrize("method", METHODS)
def test_equal_items_are_not_inversions(method):
    assert inversions([5, 5, 5, 5], method) == 0


@pytest.mark.parametrize("method", METHODS)
def test_empty_and_single(method):
    assert inversions([], method) == 0
    assert inversions([7], method) == 0


@pytest.mark.parametrize("method", METHODS)
def test_one_adjacent_swap_adds_one(method):
    items = list(range(30))
    items[10], items[11] = items[11], items[10]
    assert inversions(items, method) == 1


def test_methods_agree_on_random_data():
    rng = random.Random(7)
    for _ in range(20):
        items = [rng.randint(0, 20) for _ in range(rng.randint(0, 120))]
        results = {inversions(items, m) for m in METHODS}
        assert len(results) == 1


@pytest.mark.parametrize("method", METHODS)
def test_input_is_untouched(method):
    items = [4, 3, 2, 1, 9, 0]
    snapshot = list(items)
    inversions(items, method)
    assert items == snapshot


def test_reversing_complements_count():
    rng = random.Random(3)
    items = rng.sample(range(200), 60)
    n = len(items)
    assert inversions(items) + inversions(items[::-1]) == n * (n - 1) // 2


def test_plain_int_method_is_accepted():
    assert inversions([2, 1], 0) == inversions([2, 1], InversionMethod.MERGE)


def test_unknown_method_raises():
    with pytest.raises(ValueError):
        inversions([2, 1], 5)