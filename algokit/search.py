"""Searches over sequences, returning the found position or -1."""

from __future__ import annotations

import argparse
import time
from collections.abc import Callable, Sequence
from typing import Any, Optional


def order_search(items: Sequence[Any], target: Any) -> int:
    """Return the first position of target, scanning from the start, or -1."""
    for i, item in enumerate(items):
        if item == target:
            return i
    return -1


def binary_search(items: Sequence[Any], target: Any) -> int:
    """Return a position of target in ascending items, or -1."""
    low, high = 0, len(items) - 1
    while low <= high:
        mid = low + (high - low) // 2
        if items[mid] < target:
            low = mid + 1
        elif items[mid] > target:
            high = mid - 1
        else:
            return mid
    return -1


def binary_search_recursive(items: Sequence[Any], target: Any) -> int:
    """Recursive binary search over ascending items; -1 if absent."""

    def search(low: int, high: int) -> int:
        if low > high:
            return -1
        mid = low + (high - low) // 2
        if items[mid] < target:
            return search(mid + 1, high)
        if items[mid] > target:
            return search(low, mid - 1)
        return mid

    return search(0, len(items) - 1)


def insertion_search(items: Sequence[Any], target: Any) -> int:
    """Interpolation search over ascending numbers; -1 if absent."""
    low, high = 0, len(items) - 1
    while low <= high:
        if target < items[low] or target > items[high]:
            return -1
        span = items[high] - items[low]
        if span == 0:
            pos = low
        else:
            factor = (target - items[low]) / span
            pos = low + int((high - low) * factor)
        if items[pos] < target:
            low = pos + 1
        elif items[pos] > target:
            high = pos - 1
        else:
            return pos
    return -1


def _timed(search: Callable[[Sequence[Any], Any], int], items: Sequence[Any], target: Any) -> tuple[int, float]:
    start = time.perf_counter()
    index = search(items, target)
    return index, time.perf_counter() - start


def main(argv: Optional[Sequence[str]] = None) -> int:
    parser = argparse.ArgumentParser(description="Time several searches on 3..100002.")
    parser.add_argument("target", type=int, nargs="?", help="value to look for")
    args = parser.parse_args(argv)

    target = args.target if args.target is not None else int(input().strip())
    items = [i + 3 for i in range(100_000)]

    for name, search in (
        ("Order Search", order_search),
        ("Insertion Search", insertion_search),
        ("Binary Search", binary_search_recursive),
    ):
        index, seconds = _timed(search, items, target)
        print(f"{name} : {seconds} s, index={index}")
    return 0


if __name__ == "__main__":
    raise SystemExit(main())