"""Weighted graphs stored as an adjacency matrix or adjacency lists."""

from __future__ import annotations

import argparse
import os
from collections.abc import Callable, Iterator, Sequence
from typing import Any, Optional, Protocol

from algokit.edge import Edge, format_weight


def _check_size(n: int) -> None:
    if n < 0:
        raise ValueError(f"vertex count must be non-negative, got {n}")


def _check_vertex(v: int, n: int) -> None:
    if not 0 <= v < n:
        raise IndexError(f"vertex {v} out of range [0, {n})")


class DenseGraph:
    """Adjacency-matrix graph; adding an existing edge replaces it."""

    def __init__(self, n: int, directed: bool) -> None:
        _check_size(n)
        self._n = n
        self._m = 0
        self._directed = directed
        self._g: list[list[Optional[Edge]]] = [[None] * n for _ in range(n)]

    def vertex_count(self) -> int:
        return self._n

    def edge_count(self) -> int:
        return self._m

    def add_edge(self, v: int, w: int, weight: Any) -> None:
        _check_vertex(v, self._n)
        _check_vertex(w, self._n)
        if self.has_edge(v, w):
            self._m -= 1
        self._g[v][w] = Edge(v, w, weight)
        if v != w and not self._directed:
            self._g[w][v] = Edge(w, v, weight)
        self._m += 1

    def has_edge(self, v: int, w: int) -> bool:
        _check_vertex(v, self._n)
        _check_vertex(w, self._n)
        return self._g[v][w] is not None

    def adjacent(self, v: int) -> Iterator[Edge]:
        """Yield the edges leaving v, by increasing target vertex."""
        _check_vertex(v, self._n)
        return (edge for edge in self._g[v] if edge is not None)

    def show(self) -> None:
        """Print the matrix of weights, NULL where there is no edge."""
        for row in self._g:
            print("".join(
                ("NULL" if edge is None else format_weight(edge.weight)) + "\t"
                for edge in row
            ))


class SparseGraph:
    """Adjacency-list graph; parallel edges are kept."""

    def __init__(self, n: int, directed: bool) -> None:
        _check_size(n)
        self._n = n
        self._m = 0
        self._directed = directed
        self._g: list[list[Edge]] = [[] for _ in range(n)]

    def vertex_count(self) -> int:
        return self._n

    def edge_count(self) -> int:
        return self._m

    def add_edge(self, v: int, w: int, weight: Any) -> None:
        _check_vertex(v, self._n)
        _check_vertex(w, self._n)
        self._g[v].append(Edge(v, w, weight))
        if v != w and not self._directed:
            self._g[w].append(Edge(w, v, weight))
        self._m += 1

    def has_edge(self, v: int, w: int) -> bool:
        _check_vertex(v, self._n)
        _check_vertex(w, self._n)
        return any(edge.other(v) == w for edge in self._g[v])

    def adjacent(self, v: int) -> Iterator[Edge]:
        """Yield the edges leaving v, in insertion order."""
        _check_vertex(v, self._n)
        return iter(self._g[v])

    def show(self) -> None:
        """Print each vertex with the targets and weights of its edges."""
        for i, edges in enumerate(self._g):
            print(f"vertex {i}:\t" + "".join(
                f"( to:{edge.w},wt:{format_weight(edge.weight)})\t" for edge in edges
            ))


class _Graph(Protocol):
    def vertex_count(self) -> int: ...

    def add_edge(self, v: int, w: int, weight: Any) -> None: ...


def read_graph(
    graph: _Graph,
    filename: str | os.PathLike[str],
    weight_type: Callable[[str], Any] = float,
) -> _Graph:
    """Add the edges listed in filename to graph and return it.

    The first line holds the vertex and edge counts, each further line
    "a b weight". ValueError is raised for a mismatch or a bad line.
    """
    with open(filename, encoding="utf-8") as handle:
        header = handle.readline().split()
        if len(header) < 2:
            raise ValueError(f"{filename}: missing vertex and edge counts")
        vertices, edges = int(header[0]), int(header[1])
        if vertices != graph.vertex_count():
            raise ValueError(
                f"{filename}: file has {vertices} vertices, graph has {graph.vertex_count()}"
            )
        for _ in range(edges):
            fields = handle.readline().split()
            if len(fields) < 3:
                raise ValueError(f"{filename}: malformed edge line")
            a, b = int(fields[0]), int(fields[1])
            if not (0 <= a < vertices and 0 <= b < vertices):
                raise ValueError(f"{filename}: edge {a}-{b} out of range")
            graph.add_edge(a, b, weight_type(fields[2]))
    return graph


def main(argv: Optional[Sequence[str]] = None) -> int:
    parser = argparse.ArgumentParser(description="Load a graph file both ways and show it.")
    parser.add_argument("filename", nargs="?", default="testG1.txt", help="graph file")
    parser.add_argument("--vertices", type=int, default=8, help="number of vertices")
    args = parser.parse_args(argv)

    dense = read_graph(DenseGraph(args.vertices, False), args.filename)
    dense.show()
    print()
    sparse = read_graph(SparseGraph(args.vertices, False), args.filename)
    sparse.show()
    return 0


if __name__ == "__main__":
    raise SystemExit(main())