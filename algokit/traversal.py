"""Connected components, depth-first paths and breadth-first shortest paths."""

from __future__ import annotations

from collections import deque
from collections.abc import Iterator
from typing import Protocol

from algokit.edge import Edge


class _Graph(Protocol):
    def vertex_count(self) -> int: ...

    def adjacent(self, v: int) -> Iterator[Edge]: ...


def _check_vertex(v: int, n: int) -> None:
    if not 0 <= v < n:
        raise IndexError(f"vertex {v} out of range [0, {n})")


def _depth_first(graph: _Graph, start: int, visited: list[bool]) -> Iterator[tuple[int, int]]:
    """Visit vertices reachable from start depth first; yield (vertex, parent) on entry."""
    visited[start] = True
    yield start, -1
    stack = [(start, graph.adjacent(start))]
    while stack:
        v, edges = stack[-1]
        for edge in edges:
            u = edge.other(v)
            if not visited[u]:
                visited[u] = True
                yield u, v
                stack.append((u, graph.adjacent(u)))
                break
        else:
            stack.pop()


def _trace(parents: list[int], w: int) -> list[int]:
    route = []
    while w != -1:
        route.append(w)
        w = parents[w]
    route.reverse()
    return route


class Component:
    """Connected components of an undirected graph."""

    def __init__(self, graph: _Graph) -> None:
        self._n = graph.vertex_count()
        visited = [False] * self._n
        self._id = [-1] * self._n
        self._count = 0
        for v in range(self._n):
            if not visited[v]:
                for u, _ in _depth_first(graph, v, visited):
                    self._id[u] = self._count
                self._count += 1

    def count(self) -> int:
        return self._count

    def is_connected(self, v: int, w: int) -> bool:
        _check_vertex(v, self._n)
        _check_vertex(w, self._n)
        return self._id[v] == self._id[w]


class Path:
    """Paths from a source vertex found by depth-first search."""

    def __init__(self, graph: _Graph, source: int) -> None:
        self._n = graph.vertex_count()
        _check_vertex(source, self._n)
        self._source = source
        self._visited = [False] * self._n
        self._from = [-1] * self._n
        for u, parent in _depth_first(graph, source, self._visited):
            self._from[u] = parent

    def has_path(self, w: int) -> bool:
        _check_vertex(w, self._n)
        return self._visited[w]

    def path(self, w: int) -> list[int]:
        """Return the vertices from the source to w; ValueError if w is unreachable."""
        if not self.has_path(w):
            raise ValueError(f"no path from {self._source} to {w}")
        return _trace(self._from, w)

    def format_path(self, w: int) -> str:
        return " -> ".join(str(v) for v in self.path(w))


class ShortestPath:
    """Fewest-edge paths from a source vertex found by breadth-first search."""

    def __init__(self, graph: _Graph, source: int) -> None:
        self._n = graph.vertex_count()
        _check_vertex(source, self._n)
        self._source = source
        self._visited = [False] * self._n
        self._from = [-1] * self._n
        self._order = [-1] * self._n

        self._visited[source] = True
        self._order[source] = 0
        queue = deque([source])
        while queue:
            v = queue.popleft()
            for edge in graph.adjacent(v):
                u = edge.other(v)
                if not self._visited[u]:
                    self._visited[u] = True
                    self._from[u] = v
                    self._order[u] = self._order[v] + 1
                    queue.append(u)

    def has_path(self, w: int) -> bool:
        _check_vertex(w, self._n)
        return self._visited[w]

    def path(self, w: int) -> list[int]:
        """Return the vertices from the source to w; just [w] if w is unreachable."""
        _check_vertex(w, self._n)
        return _trace(self._from, w)

    def format_path(self, w: int) -> str:
        if not self.has_path(w):
            raise ValueError(f"no path from {self._source} to {w}")
        return " -> ".join(str(v) for v in self.path(w))

    def length(self, w: int) -> int:
        """Return the number of edges on the shortest path to w, or -1 if unreachable."""
        _check_vertex(w, self._n)
        return self._order[w]