"""Array generators and checks used to exercise sorting routines."""

from __future__ import annotations

import random
import time
from collections.abc import Callable, Iterable, MutableSequence, Sequence
from typing import Any, Optional


def generate_random_array(
    n: int, range_l: int, range_r: int, rng: Optional[random.Random] = None
) -> list[int]:
    """Return n random integers, each in the closed range [range_l, range_r]."""
    if range_l > range_r:
        raise ValueError(f"range_l ({range_l}) must not exceed range_r ({range_r})")
    if n < 0:
        raise ValueError(f"n must be non-negative, got {n}")
    rng = rng if rng is not None else random.Random()
    return [rng.randint(range_l, range_r) for _ in range(n)]


def generate_nearly_ordered_array(
    n: int, swap_times: int, rng: Optional[random.Random] = None
) -> list[int]:
    """Return 0..n-1 in order, then apply swap_times random pair swaps."""
    if n < 0:
        raise ValueError(f"n must be non-negative, got {n}")
    if n == 0 and swap_times > 0:
        raise ValueError("cannot swap elements of an empty array")
    rng = rng if rng is not None else random.Random()
    items = list(range(n))
    for _ in range(swap_times):
        x = rng.randrange(n)
        y = rng.randrange(n)
        items[x], items[y] = items[y], items[x]
    return items


def is_sorted(items: Iterable[Any]) -> bool:
    """Return True if no item is greater than the one after it."""
    values = list(items)
    return all(not (a > b) for a, b in zip(values, values[1:]))


def format_array(items: Iterable[Any]) -> str:
    """Return the items separated by single spaces."""
    return " ".join(str(item) for item in items)


def time_sort(
    sort: Callable[[MutableSequence[Any]], Any],
    items: MutableSequence[Any],
    expected: Optional[Sequence[Any]] = None,
) -> float:
    """Run sort on items in place and return the elapsed seconds.

    The result must equal expected when given, and be in order otherwise;
    ValueError is raised if it is not.
    """
    start = time.perf_counter()
    sort(items)
    elapsed = time.perf_counter() - start
    if expected is None:
        ok = is_sorted(items)
    else:
        ok = list(items) == list(expected)
    if not ok:
        name = getattr(sort, "__name__", repr(sort))
        raise ValueError(f"{name} produced a wrongly sorted result")
    return elapsed