import random

import pytest

from algokit.heap import (
    IndexMaxHeap,
    MaxHeap,
    heap_sort_using_index_max_heap,
    heap_sort_using_max_heap,
    main,
)


def _random_list(seed, n=200, hi=50):
    rng = random.Random(seed)
    return [rng.randint(0, hi) for _ in range(n)]


def test_max_heap_insert_extract_descending():
    values = _random_list(1)
    heap = MaxHeap(len(values))
    for v in values:
        heap.insert(v)
    assert len(heap) == len(values)
    out = [heap.extract_max() for _ in range(len(values))]
    assert out == sorted(values, reverse=True)
    assert heap.is_empty()


def test_max_heap_from_iterable():
    values = _random_list(2)
    heap = MaxHeap.from_iterable(values)
    assert heap.peek_max() == max(values)
    out = [heap.extract_max() for _ in range(len(values))]
    assert out == sorted(values, reverse=True)


def test_max_heap_full_raises():
    heap = MaxHeap(2)
    heap.insert(1)
    heap.insert(2)
    with pytest.raises(OverflowError):
        heap.insert(3)


def test_max_heap_empty_raises():
    heap = MaxHeap(3)
    with pytest.raises(IndexError):
        heap.extract_max()
    with pytest.raises(IndexError):
        heap.peek_max()


def test_max_heap_negative_capacity():
    with pytest.raises(ValueError):
        MaxHeap(-1)


def test_max_heap_render():
    heap = MaxHeap.from_iterable([3, 9, 4])
    assert heap.render().split("\n")[0] == "Heap Size: 3"
    assert MaxHeap(4).render() == "Heap is empty."


def test_index_heap_extracts_in_order():
    values = _random_list(3)
    heap = IndexMaxHeap(len(values))
    for i, v in enumerate(values):
        heap.insert(i, v)
    out = [heap.extract_max() for _ in range(len(values))]
    assert out == sorted(values, reverse=True)


def test_index_heap_max_index():
    values = [4, 17, 8, 2]
    heap = IndexMaxHeap(4)
    for i, v in enumerate(values):
        heap.insert(i, v)
    assert heap.peek_max_index() == values.index(max(values))
    assert heap.peek_max() == max(values)
    assert heap.extract_max_index() == values.index(max(values))
    assert not heap.contains(values.index(max(values)))
    assert len(heap) == 3


def test_index_heap_contains_and_get_item():
    heap = IndexMaxHeap(5)
    heap.insert(3, "x")
    assert heap.contains(3)
    assert not heap.contains(0)
    assert heap.get_item(3) == "x"
    with pytest.raises(KeyError):
        heap.get_item(0)
    with pytest.raises(IndexError):
        heap.contains(5)


def test_index_heap_change_reorders():
    heap = IndexMaxHeap(4)
    for i, v in enumerate([10, 20, 30, 40]):
        heap.insert(i, v)
    heap.change(0, 100)
    assert heap.peek_max_index() == 0
    heap.change(0, 1)
    assert heap.peek_max_index() == 3
    assert heap.get_item(0) == 1
    out = [heap.extract_max() for _ in range(4)]
    assert out == [40, 30, 20, 1]


def test_index_heap_errors():
    heap = IndexMaxHeap(2)
    heap.insert(0, 1)
    with pytest.raises(ValueError):
        heap.insert(0, 2)
    with pytest.raises(IndexError):
        heap.insert(2, 2)
    heap.insert(1, 5)
    with pytest.raises(OverflowError):
        heap.insert(1, 7)
    with pytest.raises(KeyError):
        IndexMaxHeap(2).change(1, 3)
    with pytest.raises(IndexError):
        IndexMaxHeap(2).extract_max()


def test_index_heap_empties_completely():
    heap = IndexMaxHeap(1)
    heap.insert(0, 9)
    assert heap.extract_max() == 9
    assert not heap.contains(0)
    assert heap.is_empty()


@pytest.mark.parametrize("sort", [heap_sort_using_max_heap, heap_sort_using_index_max_heap])
@pytest.mark.parametrize("seed", [0, 1, 2])
def test_heap_sorts(sort, seed):
    values = _random_list(seed, n=300, hi=20)
    items = list(values)
    sort(items)
    assert items == sorted(values)


@pytest.mark.parametrize("sort", [heap_sort_using_max_heap, heap_sort_using_index_max_heap])
def test_heap_sorts_empty(sort):
    items = []
    sort(items)
    assert items == []


def test_main(capsys):
    assert main(["--size", "500", "--seed", "7"]) == 0
    out = capsys.readouterr().out
    assert "Test for random array, size = 500, random range [0, 500]" in out
    assert "Sort by MaxHeap : " in out
    assert "Heap Sort Using Index-Max-Heap : " in out