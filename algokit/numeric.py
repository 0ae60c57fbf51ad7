"""Small numeric exercises: Fibonacci, hailstone, Hanoi and integration."""

from __future__ import annotations

import argparse
import math
from collections.abc import Callable, Iterator, Sequence
from typing import Optional

PI = 3.14159265


def fibonacci(n: int) -> int:
    """Return the n-th term of 1, 1, 2, 3, 5, ... by plain recursion."""
    if n < 0:
        raise ValueError(f"n must be non-negative, got {n}")
    if n in (0, 1):
        return 1
    return fibonacci(n - 1) + fibonacci(n - 2)


def fibonacci_iterative(n: int) -> int:
    """Return the n-th term of 1, 1, 2, 3, 5, ... in linear time."""
    if n < 0:
        raise ValueError(f"n must be non-negative, got {n}")
    current, previous = 1, 0
    for _ in range(n):
        current, previous = current + previous, current
    return current


def hailstone(n: int, limit: int = 100) -> list[int]:
    """Return the hailstone sequence from n, stopping at 1 or after limit terms."""
    if limit < 1:
        raise ValueError(f"limit must be at least 1, got {limit}")
    sequence = [n]
    while len(sequence) < limit and sequence[-1] != 1:
        prev = sequence[-1]
        sequence.append(prev // 2 if prev % 2 == 0 else prev * 3 + 1)
    return sequence


def hanoi_moves(
    n: int, source: str = "A", spare: str = "B", target: str = "C"
) -> Iterator[tuple[int, str, str]]:
    """Yield (disk, from_peg, to_peg) moves that shift n disks from source to target."""
    if n < 0:
        raise ValueError(f"n must be non-negative, got {n}")
    if n == 0:
        return
    yield from hanoi_moves(n - 1, source, target, spare)
    yield n, source, target
    yield from hanoi_moves(n - 1, spare, source, target)


def integral(a: float, b: float, func: Callable[[float], float], n: int = 1000) -> float:
    """Approximate the integral of func over [a, b] by the composite trapezoid rule."""
    if n < 1:
        raise ValueError(f"n must be at least 1, got {n}")
    h = (b - a) / n
    total = (func(a) + func(b)) / 2
    total += sum(func(a + i * h) for i in range(1, n))
    return total * h


def _read_n(value: Optional[int]) -> int:
    return value if value is not None else int(input().strip())


def main(argv: Optional[Sequence[str]] = None) -> int:
    parser = argparse.ArgumentParser(description="Run one of the numeric exercises.")
    parser.add_argument(
        "task",
        nargs="?",
        default="hailstone",
        choices=("hailstone", "hanoi", "fibonacci", "integral"),
    )
    parser.add_argument("n", type=int, nargs="?", help="input number; read from stdin if absent")
    args = parser.parse_args(argv)

    if args.task == "hailstone":
        print(" ".join(str(x) for x in hailstone(_read_n(args.n))))
    elif args.task == "hanoi":
        count = 0
        for disk, src, dst in hanoi_moves(_read_n(args.n)):
            print(f"Move disk-{disk} : {src} to {dst}")
            count += 1
        print(count)
    elif args.task == "fibonacci":
        n = _read_n(args.n)
        print(" ".join(str(fibonacci(i)) for i in range(n)))
        print(" ".join(str(fibonacci_iterative(i)) for i in range(n)))
    else:
        print(integral(0, PI, math.sin, 1000))
        print(integral(0, PI, lambda x: math.exp(-x * x), 1000))
        print(integral(0, PI, lambda x: 2 * x / (1 + x * x), 1000))
    return 0


if __name__ == "__main__":
    raise SystemExit(main())