"""A weighted edge between two vertices, ordered by weight."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any


def format_weight(weight: Any) -> str:
    """Format a weight the way a default stream prints numbers."""
    if isinstance(weight, float):
        return format(weight, "g")
    return str(weight)


@dataclass(frozen=True, eq=False)
class Edge:
    """Edge from vertex v to vertex w carrying weight; comparisons use weight only."""

    v: int
    w: int
    weight: Any

    def other(self, x: int) -> int:
        """Given one endpoint, return the other one."""
        if x != self.v and x != self.w:
            raise ValueError(f"vertex {x} is not an endpoint of {self}")
        return self.w if x == self.v else self.v

    def __str__(self) -> str:
        return f"{self.v}-{self.w}: {format_weight(self.weight)}"

    def __lt__(self, other: "Edge") -> bool:
        return self.weight < other.weight

    def __le__(self, other: "Edge") -> bool:
        return self.weight <= other.weight

    def __gt__(self, other: "Edge") -> bool:
        return self.weight > other.weight

    def __ge__(self, other: "Edge") -> bool:
        return self.weight >= other.weight

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Edge):
            return NotImplemented
        return self.weight == other.weight

    __hash__ = None  # type: ignore[assignment]