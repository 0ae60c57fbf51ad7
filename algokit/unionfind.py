"""Six union-find variants, from quick-find to ranked union with path compression."""

from __future__ import annotations

import argparse
import random
import time
from collections.abc import Callable, Sequence
from typing import Optional, Protocol


class _UnionFind(Protocol):
    def find(self, p: int) -> int: ...

    def is_connected(self, p: int, q: int) -> bool: ...

    def union(self, p: int, q: int) -> None: ...


def _check_count(count: int) -> None:
    if count < 0:
        raise ValueError(f"count must be non-negative, got {count}")


def _check_element(p: int, count: int) -> None:
    if not 0 <= p < count:
        raise IndexError(f"element {p} out of range [0, {count})")


class QuickFind:
    """Each element stores its set id directly; union relabels a whole set."""

    def __init__(self, count: int) -> None:
        _check_count(count)
        self._id = list(range(count))

    def find(self, p: int) -> int:
        _check_element(p, len(self._id))
        return self._id[p]

    def is_connected(self, p: int, q: int) -> bool:
        return self.find(p) == self.find(q)

    def union(self, p: int, q: int) -> None:
        p_id = self.find(p)
        q_id = self.find(q)
        if p_id == q_id:
            return
        self._id = [q_id if set_id == p_id else set_id for set_id in self._id]


class QuickUnion:
    """A forest of parent links; union hangs p's root under q's root."""

    def __init__(self, count: int) -> None:
        _check_count(count)
        self._parent = list(range(count))

    def find(self, p: int) -> int:
        _check_element(p, len(self._parent))
        parent = self._parent
        while p != parent[p]:
            p = parent[p]
        return p

    def is_connected(self, p: int, q: int) -> bool:
        return self.find(p) == self.find(q)

    def union(self, p: int, q: int) -> None:
        p_root = self.find(p)
        q_root = self.find(q)
        if p_root != q_root:
            self._parent[p_root] = q_root


class SizedUnionFind:
    """Union by set size: the smaller tree goes under the larger one."""

    def __init__(self, count: int) -> None:
        _check_count(count)
        self._parent = list(range(count))
        self._size = [1] * count

    def find(self, p: int) -> int:
        _check_element(p, len(self._parent))
        parent = self._parent
        while p != parent[p]:
            p = parent[p]
        return p

    def is_connected(self, p: int, q: int) -> bool:
        return self.find(p) == self.find(q)

    def union(self, p: int, q: int) -> None:
        p_root = self.find(p)
        q_root = self.find(q)
        if p_root == q_root:
            return
        if self._size[p_root] < self._size[q_root]:
            self._parent[p_root] = q_root
            self._size[q_root] += self._size[p_root]
        else:
            self._parent[q_root] = p_root
            self._size[p_root] += self._size[q_root]


class _RankedBase:
    def __init__(self, count: int) -> None:
        _check_count(count)
        self._parent = list(range(count))
        self._rank = [1] * count

    def find(self, p: int) -> int:
        raise NotImplementedError

    def is_connected(self, p: int, q: int) -> bool:
        return self.find(p) == self.find(q)

    def union(self, p: int, q: int) -> None:
        p_root = self.find(p)
        q_root = self.find(q)
        if p_root == q_root:
            return
        if self._rank[p_root] < self._rank[q_root]:
            self._parent[p_root] = q_root
        elif self._rank[p_root] > self._rank[q_root]:
            self._parent[q_root] = p_root
        else:
            self._parent[p_root] = q_root
            self._rank[q_root] += 1


class RankedUnionFind(_RankedBase):
    """Union by rank, without path compression."""

    def __init__(self, count: int) -> None:
        super().__init__(count)

    def find(self, p: int) -> int:
        _check_element(p, len(self._parent))
        parent = self._parent
        while p != parent[p]:
            p = parent[p]
        return p

    def is_connected(self, p: int, q: int) -> bool:
        return super().is_connected(p, q)

    def union(self, p: int, q: int) -> None:
        super().union(p, q)


class PathHalvingUnionFind(_RankedBase):
    """Union by rank; find points every visited node at its grandparent."""

    def __init__(self, count: int) -> None:
        super().__init__(count)

    def find(self, p: int) -> int:
        _check_element(p, len(self._parent))
        parent = self._parent
        while p != parent[p]:
            parent[p] = parent[parent[p]]
            p = parent[p]
        return p

    def is_connected(self, p: int, q: int) -> bool:
        return super().is_connected(p, q)

    def union(self, p: int, q: int) -> None:
        super().union(p, q)


class PathCompressionUnionFind(_RankedBase):
    """Union by rank; find points every node on the path straight at the root."""

    def __init__(self, count: int) -> None:
        super().__init__(count)

    def find(self, p: int) -> int:
        _check_element(p, len(self._parent))
        parent = self._parent
        root = p
        while root != parent[root]:
            root = parent[root]
        while p != root:
            parent[p], p = root, parent[p]
        return root

    def is_connected(self, p: int, q: int) -> bool:
        return super().is_connected(p, q)

    def union(self, p: int, q: int) -> None:
        super().union(p, q)


def benchmark_union_find(
    factory: Callable[[int], _UnionFind], n: int, rng: Optional[random.Random] = None
) -> float:
    """Do n random unions and n random connectivity queries; return elapsed seconds."""
    if n <= 0:
        raise ValueError(f"n must be positive, got {n}")
    rng = rng if rng is not None else random.Random()
    uf = factory(n)
    start = time.perf_counter()
    for _ in range(n):
        uf.union(rng.randrange(n), rng.randrange(n))
    for _ in range(n):
        uf.is_connected(rng.randrange(n), rng.randrange(n))
    return time.perf_counter() - start


_VARIANTS = (
    ("UF1", QuickFind),
    ("UF2", QuickUnion),
    ("UF3", SizedUnionFind),
    ("UF4", RankedUnionFind),
    ("UF5", PathHalvingUnionFind),
    ("UF6", PathCompressionUnionFind),
)


def main(argv: Optional[Sequence[str]] = None) -> int:
    parser = argparse.ArgumentParser(description="Time the union-find variants.")
    parser.add_argument("--size", type=int, default=100_000, help="number of elements")
    parser.add_argument("--seed", type=int, default=None, help="random seed")
    args = parser.parse_args(argv)

    for label, factory in _VARIANTS:
        rng = random.Random(args.seed)
        print(f"{label} {benchmark_union_find(factory, args.size, rng)} s")
    return 0


if __name__ == "__main__":
    raise SystemExit(main())