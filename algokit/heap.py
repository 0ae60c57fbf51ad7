"""Array-backed max heaps and heap sorts built on them."""

from __future__ import annotations

import argparse
import random
import sys
from collections.abc import Iterable, MutableSequence, Sequence
from typing import Any, Generic, Optional, TypeVar

from algokit.heapview import render_heap
from algokit.sorthelper import generate_random_array, time_sort

T = TypeVar("T")


class MaxHeap(Generic[T]):
    """A bounded binary max heap."""

    def __init__(self, capacity: int) -> None:
        if capacity < 0:
            raise ValueError(f"capacity must be non-negative, got {capacity}")
        self._capacity = capacity
        self._data: list[T] = []

    @classmethod
    def from_iterable(cls, items: Iterable[T]) -> "MaxHeap[T]":
        """Build a full heap from items in linear time."""
        data = list(items)
        heap = cls(len(data))
        heap._data = data
        for k in range(len(data) // 2 - 1, -1, -1):
            heap._shift_down(k)
        return heap

    def __len__(self) -> int:
        return len(self._data)

    def is_empty(self) -> bool:
        return not self._data

    def _shift_up(self, k: int) -> None:
        data = self._data
        while k > 0:
            p = (k - 1) // 2
            if data[p] >= data[k]:
                break
            data[p], data[k] = data[k], data[p]
            k = p

    def _shift_down(self, k: int) -> None:
        data = self._data
        count = len(data)
        current = data[k]
        while True:
            j = 2 * k + 1
            if j >= count:
                break
            if j + 1 < count and data[j] < data[j + 1]:
                j += 1
            if current >= data[j]:
                break
            data[k] = data[j]
            k = j
        data[k] = current

    def insert(self, item: T) -> None:
        if len(self._data) >= self._capacity:
            raise OverflowError("heap is full")
        self._data.append(item)
        self._shift_up(len(self._data) - 1)

    def extract_max(self) -> T:
        """Remove and return the largest item."""
        if not self._data:
            raise IndexError("extract from an empty heap")
        top = self._data[0]
        last = self._data.pop()
        if self._data:
            self._data[0] = last
            self._shift_down(0)
        return top

    def peek_max(self) -> T:
        if not self._data:
            raise IndexError("peek into an empty heap")
        return self._data[0]

    def render(self) -> str:
        """Return a text drawing of the heap."""
        return render_heap(self._data)


class IndexMaxHeap(Generic[T]):
    """A max heap over items addressed by index in [0, capacity)."""

    def __init__(self, capacity: int) -> None:
        if capacity < 0:
            raise ValueError(f"capacity must be non-negative, got {capacity}")
        self._capacity = capacity
        self._data: list[Any] = [None] * capacity
        self._indexes: list[int] = []
        self._reverse: list[int] = [-1] * capacity

    def __len__(self) -> int:
        return len(self._indexes)

    def is_empty(self) -> bool:
        return not self._indexes

    def _check_index(self, index: int) -> None:
        if not 0 <= index < self._capacity:
            raise IndexError(f"index {index} out of range [0, {self._capacity})")

    def _swap(self, a: int, b: int) -> None:
        idx = self._indexes
        idx[a], idx[b] = idx[b], idx[a]
        self._reverse[idx[a]] = a
        self._reverse[idx[b]] = b

    def _shift_up(self, k: int) -> None:
        data, idx = self._data, self._indexes
        while k > 0:
            p = (k - 1) // 2
            if data[idx[p]] >= data[idx[k]]:
                break
            self._swap(p, k)
            k = p

    def _shift_down(self, k: int) -> None:
        data, idx = self._data, self._indexes
        count = len(idx)
        while True:
            j = 2 * k + 1
            if j >= count:
                break
            if j + 1 < count and data[idx[j + 1]] > data[idx[j]]:
                j += 1
            if data[idx[k]] >= data[idx[j]]:
                break
            self._swap(k, j)
            k = j

    def insert(self, index: int, item: T) -> None:
        if len(self._indexes) >= self._capacity:
            raise OverflowError("heap is full")
        self._check_index(index)
        if self.contains(index):
            raise ValueError(f"index {index} is already in the heap")
        self._data[index] = item
        self._indexes.append(index)
        k = len(self._indexes) - 1
        self._reverse[index] = k
        self._shift_up(k)

    def extract_max_index(self) -> int:
        """Remove the largest item and return its index."""
        if not self._indexes:
            raise IndexError("extract from an empty heap")
        top = self._indexes[0]
        self._reverse[top] = -1
        last = self._indexes.pop()
        if self._indexes:
            self._indexes[0] = last
            self._reverse[last] = 0
            self._shift_down(0)
        return top

    def extract_max(self) -> T:
        """Remove and return the largest item."""
        return self._data[self.extract_max_index()]

    def peek_max(self) -> T:
        return self._data[self.peek_max_index()]

    def peek_max_index(self) -> int:
        if not self._indexes:
            raise IndexError("peek into an empty heap")
        return self._indexes[0]

    def contains(self, index: int) -> bool:
        self._check_index(index)
        return self._reverse[index] != -1

    def get_item(self, index: int) -> T:
        if not self.contains(index):
            raise KeyError(index)
        return self._data[index]

    def change(self, index: int, item: T) -> None:
        """Replace the item at index and restore heap order."""
        if not self.contains(index):
            raise KeyError(index)
        self._data[index] = item
        self._shift_up(self._reverse[index])
        self._shift_down(self._reverse[index])


def heap_sort_using_max_heap(items: MutableSequence[Any]) -> None:
    """Sort items in place by pushing them through a MaxHeap."""
    heap: MaxHeap[Any] = MaxHeap(len(items))
    for item in items:
        heap.insert(item)
    for i in range(len(items) - 1, -1, -1):
        items[i] = heap.extract_max()


def heap_sort_using_index_max_heap(items: MutableSequence[Any]) -> None:
    """Sort items in place by pushing them through an IndexMaxHeap."""
    heap: IndexMaxHeap[Any] = IndexMaxHeap(len(items))
    for i, item in enumerate(items):
        heap.insert(i, item)
    for i in range(len(items) - 1, -1, -1):
        items[i] = heap.extract_max()


def main(argv: Optional[Sequence[str]] = None) -> int:
    parser = argparse.ArgumentParser(description="Time heap sorts on a random array.")
    parser.add_argument("--size", type=int, default=1_000_000, help="array size")
    parser.add_argument("--seed", type=int, default=None, help="random seed")
    args = parser.parse_args(argv)

    n = args.size
    print(f"Test for random array, size = {n}, random range [0, {n}]")
    first = generate_random_array(n, 0, n, random.Random(args.seed))
    second = list(first)

    seconds = time_sort(heap_sort_using_max_heap, first)
    print(f"Sort by MaxHeap : {seconds} s")
    seconds = time_sort(heap_sort_using_index_max_heap, second)
    print(f"Heap Sort Using Index-Max-Heap : {seconds} s")

    if first != second:
        print("The two heap sorts disagree", file=sys.stderr)
        return 1
    return 0


if __name__ == "__main__":
    raise SystemExit(main())