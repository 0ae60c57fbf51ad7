import random

import pytest

from algokit import sorting


def _cases():
    rng = random.Random(2024)
    cases = [
        [],
        [1],
        [2, 1],
        [1, 2],
        [5] * 20,
        list(range(50, 0, -1)),
        list(range(40)),
        [rng.randint(0, 10) for _ in range(200)],
        [rng.randint(-1000, 1000) for _ in range(300)],
        ["pear", "apple", "fig", "banana", "cherry", "apple", "date"],
        [random.Random(99).uniform(-5.0, 5.0) for _ in range(120)],
    ]
    for size in (15, 16, 17, 31, 32, 33, 64, 65, 100):
        cases.append([rng.randint(0, size) for _ in range(size)])
    return cases


CASES = _cases()
CASE_IDS = [f"case{i}" for i in range(len(CASES))]


@pytest.mark.parametrize("data", CASES, ids=CASE_IDS)
def test_bubble_sorts(data):
    expected = sorted(data)

    items = list(data)
    sorting.bubble_sort(items)
    assert items == expected

    items = list(data)
    sorting.bubble_sort_early_exit(items)
    assert items == expected

    items = list(data)
    sorting.bubble_sort_last_swap(items)
    assert items == expected

    items = list(data)
    sorting.cocktail_sort(items)
    assert items == expected

    items = list(data)
    sorting.cocktail_sort_last_swap(items)
    assert items == expected


@pytest.mark.parametrize("data", CASES, ids=CASE_IDS)
def test_selection_sorts(data):
    expected = sorted(data)

    items = list(data)
    sorting.selection_sort(items)
    assert items == expected

    items = list(data)
    sorting.selection_sort_min_max(items)
    assert items == expected


@pytest.mark.parametrize("data", CASES, ids=CASE_IDS)
def test_insertion_and_shell_sorts(data):
    expected = sorted(data)

    items = list(data)
    sorting.insertion_sort_swap(items)
    assert items == expected

    items = list(data)
    sorting.insertion_sort(items)
    assert items == expected

    items = list(data)
    sorting.shell_sort(items)
    assert items == expected


@pytest.mark.parametrize("data", CASES, ids=CASE_IDS)
def test_merge_sorts(data):
    expected = sorted(data)

    items = list(data)
    sorting.merge_sort(items)
    assert items == expected

    items = list(data)
    sorting.merge_sort_shared_buffer(items)
    assert items == expected

    items = list(data)
    sorting.merge_sort_bottom_up(items)
    assert items == expected

    items = list(data)
    sorting.merge_sort_bottom_up_shared_buffer(items)
    assert items == expected


@pytest.mark.parametrize("data", CASES, ids=CASE_IDS)
def test_quick_sorts(data):
    expected = sorted(data)

    items = list(data)
    sorting.quick_sort(items, random.Random(7))
    assert items == expected

    items = list(data)
    sorting.quick_sort_two_ways(items, random.Random(7))
    assert items == expected

    items = list(data)
    sorting.quick_sort_three_ways(items, random.Random(7))
    assert items == expected


@pytest.mark.parametrize("data", CASES, ids=CASE_IDS)
def test_heap_sort(data):
    items = list(data)
    sorting.heap_sort(items)
    assert items == sorted(data)


def test_sort_returns_none_and_mutates():
    items = [3, 1, 2]
    assert sorting.bubble_sort(items) is None
    assert items == [1, 2, 3]

    items = [3, 1, 2]
    assert sorting.merge_sort(items) is None
    assert items == [1, 2, 3]

    items = [3, 1, 2]
    assert sorting.quick_sort_three_ways(items, random.Random(1)) is None
    assert items == [1, 2, 3]

    items = [3, 1, 2]
    assert sorting.heap_sort(items) is None
    assert items == [1, 2, 3]


def test_quick_sorts_without_rng():
    rng = random.Random(5)
    data = [rng.randint(0, 3) for _ in range(500)]
    expected = sorted(data)

    items = list(data)
    sorting.quick_sort(items)
    assert items == expected

    items = list(data)
    sorting.quick_sort_two_ways(items)
    assert items == expected

    items = list(data)
    sorting.quick_sort_three_ways(items)
    assert items == expected


def test_merge_sorts_large_nearly_ordered():
    data = list(range(2000))
    data[10], data[1500] = data[1500], data[10]
    expected = list(range(2000))

    items = list(data)
    sorting.merge_sort(items)
    assert items == expected

    items = list(data)
    sorting.merge_sort_shared_buffer(items)
    assert items == expected

    items = list(data)
    sorting.merge_sort_bottom_up(items)
    assert items == expected

    items = list(data)
    sorting.merge_sort_bottom_up_shared_buffer(items)
    assert items == expected