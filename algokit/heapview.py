"""Text rendering of an array-backed binary heap as a tree."""

from __future__ import annotations

from collections.abc import Sequence
from typing import Any

MAX_LEVEL = 6


def tree_depth(count: int) -> int:
    """Return the number of levels a complete binary tree of count nodes has."""
    depth = 0
    nodes = 0
    while nodes < count:
        depth += 1
        nodes += 1 << (depth - 1)
    return depth


def _format_node(text: str, width: int) -> str:
    padding = (width - len(text)) // 2
    return (" " * padding + text + " " * padding).rjust(width)


def _branch_line(level: int, total_width: int, node_width: int) -> str:
    nodes = 1 << level
    next_nodes = nodes << 1
    spacing = (total_width - node_width * nodes) // (nodes + 1)
    next_spacing = (total_width - node_width * next_nodes) // (next_nodes + 1)

    line = [" "] * total_width
    for i in range(nodes):
        node_center = spacing + i * (node_width + spacing) + node_width // 2
        left_center = next_spacing + 2 * i * (node_width + next_spacing) + node_width // 2
        right_center = (
            next_spacing + (2 * i + 1) * (node_width + next_spacing) + node_width // 2
        )
        if left_center < total_width:
            pos = (node_center + left_center) // 2
            if 0 <= pos < total_width:
                line[pos] = "/"
        if right_center < total_width:
            pos = (node_center + right_center) // 2
            if 0 <= pos < total_width:
                line[pos] = "\\"
    return "".join(line)


def _tree_lines(items: Sequence[Any]) -> list[str]:
    count = len(items)
    max_level = tree_depth(count)
    if max_level > MAX_LEVEL:
        return [f"Tree too deep to print (max allowed depth: {MAX_LEVEL})"]

    texts = [str(item) for item in items]
    node_width = max(len(text) for text in texts) + 2
    total_width = (1 << (max_level - 1)) * node_width

    lines = []
    for level in range(max_level):
        nodes = 1 << level
        spacing = (total_width - node_width * nodes) // (nodes + 1)
        first = nodes - 1
        row = "".join(
            " " * spacing + _format_node(text, node_width)
            for text in texts[first:min(first + nodes, count)]
        )
        lines.append(row)
        if level < max_level - 1:
            lines.append(_branch_line(level, total_width, node_width))
    return lines


def render_heap(items: Sequence[Any]) -> str:
    """Return a drawing of the heap stored level by level in items."""
    if not items:
        return "Heap is empty."
    return "\n".join([f"Heap Size: {len(items)}", *_tree_lines(items)])