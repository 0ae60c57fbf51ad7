"""Locating the largest elements and order statistics of a sequence."""

from __future__ import annotations

import random
from collections.abc import Sequence
from typing import Any, Optional

from algokit.sorting import insertion_sort

_SMALL_RANGE = 15


def _bounds(items: Sequence[Any], lo: int, hi: Optional[int]) -> tuple[int, int]:
    hi = len(items) if hi is None else hi
    if not 0 <= lo <= hi <= len(items):
        raise IndexError(f"range [{lo}, {hi}) out of bounds for length {len(items)}")
    if hi - lo < 2:
        raise ValueError("at least two elements are needed")
    return lo, hi


def find_second(items: Sequence[Any], lo: int = 0, hi: Optional[int] = None) -> tuple[int, int]:
    """Return positions of the largest and second largest in items[lo:hi] by two scans."""
    lo, hi = _bounds(items, lo, hi)
    first = -1
    for i in range(lo, hi):
        if first == -1 or items[i] > items[first]:
            first = i
    second = -1
    for i in range(lo, hi):
        if i == first:
            continue
        if second == -1 or items[i] > items[second]:
            second = i
    return first, second


def find_second_linear(
    items: Sequence[Any], lo: int = 0, hi: Optional[int] = None
) -> tuple[int, int]:
    """Return positions of the largest and second largest in one scan."""
    lo, hi = _bounds(items, lo, hi)
    first, second = lo, lo + 1
    if items[first] < items[second]:
        first, second = second, first
    for i in range(lo + 2, hi):
        if items[second] < items[i]:
            second = i
            if items[first] < items[second]:
                first, second = second, first
    return first, second


def _divide(items: Sequence[Any], lo: int, hi: int) -> tuple[int, int]:
    if hi - lo == 2:
        first, second = lo, lo + 1
        if items[first] < items[second]:
            first, second = second, first
        return first, second
    if hi - lo == 3:
        if items[lo] > items[lo + 1]:
            first = lo
            second = lo + 1 if items[lo + 1] > items[lo + 2] else lo + 2
        else:
            first = lo + 1
            second = lo if items[lo] > items[lo + 2] else lo + 2
        if items[first] < items[second]:
            first, second = second, first
        return first, second
    mid = (lo + hi) >> 1
    first_l, second_l = _divide(items, lo, mid)
    first_r, second_r = _divide(items, mid, hi)
    if items[first_l] > items[first_r]:
        return first_l, (second_l if items[second_l] > items[first_r] else first_r)
    return first_r, (first_l if items[first_l] > items[second_r] else second_r)


def find_second_divide(
    items: Sequence[Any], lo: int = 0, hi: Optional[int] = None
) -> tuple[int, int]:
    """Return positions of the largest and second largest by divide and conquer."""
    lo, hi = _bounds(items, lo, hi)
    return _divide(items, lo, hi)


def _partition(items: list[Any], lo: int, hi: int, rng: random.Random) -> int:
    pivot_at = rng.randrange(lo, hi)
    items[lo], items[pivot_at] = items[pivot_at], items[lo]
    pivot = items[lo]
    p = lo
    for i in range(lo + 1, hi):
        if items[i] < pivot:
            p += 1
            items[p], items[i] = items[i], items[p]
    items[lo], items[p] = items[p], items[lo]
    return p


def number_of_order(
    items: Sequence[Any], order: int, rng: Optional[random.Random] = None
) -> Any:
    """Return the element that would stand at position order after sorting."""
    if not 0 <= order < len(items):
        raise IndexError(f"order {order} out of range for length {len(items)}")
    rng = rng if rng is not None else random.Random()
    work = list(items)
    lo, hi = 0, len(work)
    while True:
        if hi - lo < _SMALL_RANGE:
            segment = work[lo:hi]
            insertion_sort(segment)
            return segment[order - lo]
        p = _partition(work, lo, hi, rng)
        if p < order:
            lo = p + 1
        elif p > order:
            hi = p
        else:
            return work[p]