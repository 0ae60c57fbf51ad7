"""In-place comparison sorts over mutable sequences.

Every function sorts its argument in place, in ascending order, and returns None.
"""

from __future__ import annotations

import random
from collections.abc import MutableSequence
from typing import Any, Optional

_SMALL_RANGE = 16


def _swap(items: MutableSequence[Any], a: int, b: int) -> None:
    items[a], items[b] = items[b], items[a]


def _insertion_sort_range(items: MutableSequence[Any], lo: int, hi: int) -> None:
    """Sort items[lo:hi] by shifting larger elements right, then inserting."""
    for i in range(lo + 1, hi):
        current = items[i]
        j = i
        while j > lo and items[j - 1] > current:
            items[j] = items[j - 1]
            j -= 1
        items[j] = current


# ---------------------------------------------------------------- bubble family


def bubble_sort(items: MutableSequence[Any]) -> None:
    """Plain bubble sort: n - 1 passes, each moving the largest item to the end."""
    n = len(items)
    for i in range(n - 1):
        for j in range(n - i - 1):
            if items[j] > items[j + 1]:
                _swap(items, j, j + 1)


def bubble_sort_early_exit(items: MutableSequence[Any]) -> None:
    """Bubble sort that stops as soon as a pass makes no swap."""
    n = len(items)
    for i in range(n - 1):
        swapped = False
        for j in range(n - i - 1):
            if items[j] > items[j + 1]:
                _swap(items, j, j + 1)
                swapped = True
        if not swapped:
            break


def bubble_sort_last_swap(items: MutableSequence[Any]) -> None:
    """Bubble sort whose next pass ends where the last swap happened."""
    last_swap = len(items) - 1
    while True:
        bound = last_swap
        last_swap = 0
        for j in range(bound):
            if items[j] > items[j + 1]:
                _swap(items, j, j + 1)
                last_swap = j
        if last_swap <= 0:
            break


def cocktail_sort(items: MutableSequence[Any]) -> None:
    """Bidirectional bubble sort."""
    left, right = 0, len(items) - 1
    while left < right:
        for i in range(left, right):
            if items[i] > items[i + 1]:
                _swap(items, i, i + 1)
        right -= 1
        for j in range(right, left, -1):
            if items[j] < items[j - 1]:
                _swap(items, j, j - 1)
        left += 1


def cocktail_sort_last_swap(items: MutableSequence[Any]) -> None:
    """Bidirectional bubble sort that narrows both ends to the last swaps."""
    left, right = 0, len(items) - 1
    swap_pos = left
    while left < right:
        for i in range(left, right):
            if items[i] > items[i + 1]:
                _swap(items, i, i + 1)
                swap_pos = i
        right = swap_pos
        for j in range(right, left, -1):
            if items[j] < items[j - 1]:
                _swap(items, j, j - 1)
                swap_pos = j
        left = swap_pos


# ------------------------------------------------------------- selection family


def selection_sort(items: MutableSequence[Any]) -> None:
    """Selection sort: place the minimum of the unsorted tail at its front."""
    n = len(items)
    for i in range(n - 1):
        min_index = i
        for j in range(i + 1, n):
            if items[j] < items[min_index]:
                min_index = j
        _swap(items, i, min_index)


def selection_sort_min_max(items: MutableSequence[Any]) -> None:
    """Selection sort placing both the minimum and the maximum on each pass."""
    left, right = 0, len(items) - 1
    while left < right:
        min_index, max_index = left, right
        if items[min_index] > items[max_index]:
            _swap(items, min_index, max_index)
        for i in range(left + 1, right):
            if items[i] < items[min_index]:
                min_index = i
            elif items[i] > items[max_index]:
                max_index = i
        _swap(items, left, min_index)
        _swap(items, right, max_index)
        left += 1
        right -= 1


# ------------------------------------------------------------- insertion family


def insertion_sort_swap(items: MutableSequence[Any]) -> None:
    """Insertion sort by swapping adjacent items."""
    for i in range(1, len(items)):
        j = i
        while j > 0 and items[j - 1] > items[j]:
            _swap(items, j, j - 1)
            j -= 1


def insertion_sort(items: MutableSequence[Any]) -> None:
    """Insertion sort by shifting and a single final write."""
    _insertion_sort_range(items, 0, len(items))


def shell_sort(items: MutableSequence[Any]) -> None:
    """Shell sort with the 3h + 1 gap sequence."""
    n = len(items)
    gap = 1
    while gap < n // 3:
        gap = 3 * gap + 1
    while gap >= 1:
        for i in range(gap, n):
            current = items[i]
            j = i
            while j >= gap and current < items[j - gap]:
                items[j] = items[j - gap]
                j -= gap
            items[j] = current
        gap //= 3


# ------------------------------------------------------------------- merge sort


def _merge(
    items: MutableSequence[Any], lo: int, mid: int, hi: int, aux: list[Any], base: int
) -> None:
    """Merge sorted items[lo:mid] and items[mid:hi]; aux[k - base] holds a copy of items[k]."""
    i, j = lo, mid
    for k in range(lo, hi):
        if i >= mid:
            # The rest of the right half is already in place.
            break
        if j >= hi:
            items[k] = aux[i - base]
            i += 1
        elif aux[i - base] < aux[j - base]:
            items[k] = aux[i - base]
            i += 1
        else:
            items[k] = aux[j - base]
            j += 1


def _merge_fresh(items: MutableSequence[Any], lo: int, mid: int, hi: int) -> None:
    _merge(items, lo, mid, hi, list(items[lo:hi]), lo)


def _merge_shared(
    items: MutableSequence[Any], lo: int, mid: int, hi: int, aux: list[Any]
) -> None:
    aux[lo:hi] = items[lo:hi]
    _merge(items, lo, mid, hi, aux, 0)


def _merge_sort_range(
    items: MutableSequence[Any], lo: int, hi: int, aux: Optional[list[Any]]
) -> None:
    if hi - lo < _SMALL_RANGE:
        _insertion_sort_range(items, lo, hi)
        return
    mid = (lo + hi) // 2
    _merge_sort_range(items, lo, mid, aux)
    _merge_sort_range(items, mid, hi, aux)
    if items[mid - 1] > items[mid]:
        if aux is None:
            _merge_fresh(items, lo, mid, hi)
        else:
            _merge_shared(items, lo, mid, hi, aux)


def merge_sort(items: MutableSequence[Any]) -> None:
    """Top-down merge sort, allocating a buffer per merge."""
    _merge_sort_range(items, 0, len(items), None)


def merge_sort_shared_buffer(items: MutableSequence[Any]) -> None:
    """Top-down merge sort using a single buffer for all merges."""
    _merge_sort_range(items, 0, len(items), [None] * len(items))


def _merge_sort_bottom_up(items: MutableSequence[Any], aux: Optional[list[Any]]) -> None:
    n = len(items)
    for start in range(0, n, _SMALL_RANGE):
        _insertion_sort_range(items, start, min(start + _SMALL_RANGE, n))
    gap = _SMALL_RANGE
    while gap <= n:
        for i in range(0, n - gap, 2 * gap):
            if items[i + gap - 1] > items[i + gap]:
                hi = min(i + 2 * gap, n)
                if aux is None:
                    _merge_fresh(items, i, i + gap, hi)
                else:
                    _merge_shared(items, i, i + gap, hi, aux)
        gap *= 2


def merge_sort_bottom_up(items: MutableSequence[Any]) -> None:
    """Iterative bottom-up merge sort, allocating a buffer per merge."""
    _merge_sort_bottom_up(items, None)


def merge_sort_bottom_up_shared_buffer(items: MutableSequence[Any]) -> None:
    """Iterative bottom-up merge sort using a single buffer."""
    _merge_sort_bottom_up(items, [None] * len(items))


# ------------------------------------------------------------------- quick sort


def _partition(items: MutableSequence[Any], lo: int, hi: int, rng: random.Random) -> int:
    _swap(items, lo, rng.randrange(lo, hi))
    pivot = items[lo]
    p = lo
    for i in range(lo + 1, hi):
        if items[i] < pivot:
            p += 1
            _swap(items, p, i)
    _swap(items, lo, p)
    return p


def _quick_sort_range(items: MutableSequence[Any], lo: int, hi: int, rng: random.Random) -> None:
    if hi - lo < _SMALL_RANGE:
        _insertion_sort_range(items, lo, hi)
        return
    p = _partition(items, lo, hi, rng)
    _quick_sort_range(items, lo, p, rng)
    _quick_sort_range(items, p + 1, hi, rng)


def quick_sort(items: MutableSequence[Any], rng: Optional[random.Random] = None) -> None:
    """Quick sort with a random pivot and one-sided partitioning."""
    _quick_sort_range(items, 0, len(items), rng if rng is not None else random.Random())


def _partition_two_ways(
    items: MutableSequence[Any], lo: int, hi: int, rng: random.Random
) -> int:
    _swap(items, lo, rng.randrange(lo, hi))
    pivot = items[lo]
    i, j = lo + 1, hi - 1
    while True:
        while i < hi and items[i] < pivot:
            i += 1
        while j > lo and items[j] > pivot:
            j -= 1
        if i >= j:
            break
        _swap(items, i, j)
        i += 1
        j -= 1
    _swap(items, lo, j)
    return j


def _quick_sort_two_ways_range(
    items: MutableSequence[Any], lo: int, hi: int, rng: random.Random
) -> None:
    if hi - lo < _SMALL_RANGE:
        _insertion_sort_range(items, lo, hi)
        return
    p = _partition_two_ways(items, lo, hi, rng)
    _quick_sort_two_ways_range(items, lo, p, rng)
    _quick_sort_two_ways_range(items, p + 1, hi, rng)


def quick_sort_two_ways(items: MutableSequence[Any], rng: Optional[random.Random] = None) -> None:
    """Quick sort whose partition splits equal keys across both sides."""
    _quick_sort_two_ways_range(
        items, 0, len(items), rng if rng is not None else random.Random()
    )


def _quick_sort_three_ways_range(
    items: MutableSequence[Any], lo: int, hi: int, rng: random.Random
) -> None:
    if hi - lo < _SMALL_RANGE:
        _insertion_sort_range(items, lo, hi)
        return
    _swap(items, lo, rng.randrange(lo, hi))
    pivot = items[lo]
    lt = lo  # items[lo+1 .. lt] < pivot
    gt = hi  # items[gt .. hi) > pivot
    i = lo + 1  # items[lt+1 .. i) == pivot
    while i < gt:
        if items[i] < pivot:
            lt += 1
            _swap(items, i, lt)
            i += 1
        elif items[i] > pivot:
            gt -= 1
            _swap(items, i, gt)
        else:
            i += 1
    _swap(items, lo, lt)
    _quick_sort_three_ways_range(items, lo, lt, rng)
    _quick_sort_three_ways_range(items, gt, hi, rng)


def quick_sort_three_ways(
    items: MutableSequence[Any], rng: Optional[random.Random] = None
) -> None:
    """Quick sort with a less / equal / greater partition."""
    _quick_sort_three_ways_range(
        items, 0, len(items), rng if rng is not None else random.Random()
    )


# -------------------------------------------------------------------- heap sort


def _shift_down(items: MutableSequence[Any], n: int, k: int) -> None:
    current = items[k]
    j = 2 * k + 1
    while j < n:
        if j + 1 < n and items[j] < items[j + 1]:
            j += 1
        if current >= items[j]:
            break
        items[k] = items[j]
        k = j
        j = 2 * k + 1
    items[k] = current


def heap_sort(items: MutableSequence[Any]) -> None:
    """In-place heap sort: heapify, then move the maximum to the end repeatedly."""
    n = len(items)
    for i in range(n // 2 - 1, -1, -1):
        _shift_down(items, n, i)
    for end in range(n - 1, 0, -1):
        _swap(items, 0, end)
        _shift_down(items, end, 0)