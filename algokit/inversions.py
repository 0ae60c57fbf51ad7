"""Counting inversions with three merge-based strategies."""

from __future__ import annotations

import enum
from collections.abc import Sequence
from typing import Any


class InversionMethod(enum.IntEnum):
    """How the two halves are combined while counting."""

    SORTED_COPIES = 0
    INSERTION = 1
    MERGE = 2


def _count_sorted_copies(items: list[Any], lo: int, mid: int, hi: int) -> int:
    left = sorted(items[lo:mid])
    right = sorted(items[mid:hi])
    if left[0] > right[-1]:
        return len(left) * len(right)
    if left[-1] <= right[0]:
        return 0
    count = 0
    i = j = 0
    while i < len(left) and j < len(right):
        if left[i] > right[j]:
            count += len(left) - i
            j += 1
        else:
            i += 1
    return count


def _swap_halves(items: list[Any], lo: int, mid: int, hi: int) -> None:
    items[lo:hi] = items[mid:hi] + items[lo:mid]


def _count_insertion(items: list[Any], lo: int, mid: int, hi: int) -> int:
    if items[mid - 1] <= items[mid]:
        return 0
    if items[lo] > items[hi - 1]:
        _swap_halves(items, lo, mid, hi)
        return (mid - lo) * (hi - mid)
    count = 0
    for i in range(mid, hi):
        current = items[i]
        j = i
        while j > lo and items[j - 1] > current:
            items[j] = items[j - 1]
            count += 1
            j -= 1
        items[j] = current
    return count


def _count_merge(items: list[Any], lo: int, mid: int, hi: int) -> int:
    if items[mid - 1] <= items[mid]:
        return 0
    if items[lo] > items[hi - 1]:
        _swap_halves(items, lo, mid, hi)
        return (mid - lo) * (hi - mid)
    left = items[lo:mid]
    right = items[mid:hi]
    count = 0
    i = j = 0
    for k in range(lo, hi):
        if i >= len(left):
            # The rest of the right half is already in place.
            break
        if j >= len(right):
            items[k:k + len(left) - i] = left[i:]
            break
        if left[i] > right[j]:
            items[k] = right[j]
            count += len(left) - i
            j += 1
        else:
            items[k] = left[i]
            i += 1
    return count


_COMBINERS = {
    InversionMethod.SORTED_COPIES: _count_sorted_copies,
    InversionMethod.INSERTION: _count_insertion,
    InversionMethod.MERGE: _count_merge,
}


def _count(items: list[Any], lo: int, hi: int, combine) -> int:
    if hi - lo <= 1:
        return 0
    mid = (lo + hi) // 2
    left = _count(items, lo, mid, combine)
    right = _count(items, mid, hi, combine)
    return left + right + combine(items, lo, mid, hi)


def inversions(
    items: Sequence[Any], method: InversionMethod | int = InversionMethod.MERGE
) -> int:
    """Return the number of pairs i < j with items[i] > items[j]; items is not changed."""
    combine = _COMBINERS[InversionMethod(method)]
    return _count(list(items), 0, len(items), combine)