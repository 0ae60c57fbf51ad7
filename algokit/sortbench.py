"""Compare the running time of several sorts on generated arrays."""

from __future__ import annotations

import argparse
import random
import time
from collections.abc import Sequence
from typing import Any, Optional

from algokit.sorthelper import (
    generate_nearly_ordered_array,
    generate_random_array,
    time_sort,
)
from algokit.sorting import heap_sort, merge_sort_bottom_up_shared_buffer, quick_sort_three_ways, shell_sort

_CONTENDERS = (
    ("Shell Sort", shell_sort),
    ("Merge Sort", merge_sort_bottom_up_shared_buffer),
    ("Quick Sort", quick_sort_three_ways),
    ("Heap Sort", heap_sort),
)


def run_benchmark(items: Sequence[Any]) -> list[tuple[str, float]]:
    """Time the built-in sort and each contender on copies of items.

    Returns (name, seconds) pairs, the built-in sort first. Every contender's
    result is checked against the built-in one; the input is left untouched.
    """
    start = time.perf_counter()
    expected = sorted(items)
    results = [("sorted", time.perf_counter() - start)]
    for name, sort in _CONTENDERS:
        results.append((name, time_sort(sort, list(items), expected)))
    return results


def _report(results: list[tuple[str, float]]) -> None:
    for name, seconds in results:
        print(f"{name} : {seconds} s")


def main(argv: Optional[Sequence[str]] = None) -> int:
    parser = argparse.ArgumentParser(description="Time several sorts on generated arrays.")
    parser.add_argument("--size", type=int, default=1_000_000, help="array size")
    parser.add_argument(
        "--swap-times", type=int, default=100, help="swaps for the nearly ordered array"
    )
    parser.add_argument("--seed", type=int, default=None, help="random seed")
    args = parser.parse_args(argv)

    rng = random.Random(args.seed)
    n = args.size

    print(f"Test for Random Array, size = {n}, random range [0, {n}]")
    _report(run_benchmark(generate_random_array(n, 0, n, rng)))
    print()

    print(
        f"Test for Random Nearly Ordered Array, size = {n}, swap time = {args.swap_times}"
    )
    _report(run_benchmark(generate_nearly_ordered_array(n, args.swap_times, rng)))
    print()

    print(f"Test for Random Array, size = {n}, random range [0,10]")
    _report(run_benchmark(generate_random_array(n, 0, 10, rng)))
    return 0


if __name__ == "__main__":
    raise SystemExit(main())