"""An unbalanced binary search tree mapping keys to values."""

from __future__ import annotations

from collections import deque
from collections.abc import Iterator
from typing import Any, Generic, Optional, TypeVar

K = TypeVar("K")
V = TypeVar("V")


class _Node(Generic[K, V]):
    __slots__ = ("key", "value", "left", "right")

    def __init__(self, key: K, value: V) -> None:
        self.key = key
        self.value = value
        self.left: Optional[_Node[K, V]] = None
        self.right: Optional[_Node[K, V]] = None


def _detach_min(node: _Node[K, V]) -> tuple[_Node[K, V], Optional[_Node[K, V]]]:
    """Unlink the smallest node under node; return it and the new subtree root."""
    if node.left is None:
        return node, node.right
    parent, child = node, node.left
    while child.left is not None:
        parent, child = child, child.left
    parent.left = child.right
    return child, node


def _detach_max(node: _Node[K, V]) -> tuple[_Node[K, V], Optional[_Node[K, V]]]:
    """Unlink the largest node under node; return it and the new subtree root."""
    if node.right is None:
        return node, node.left
    parent, child = node, node.right
    while child.right is not None:
        parent, child = child, child.right
    parent.right = child.left
    return child, node


class BinarySearchTree(Generic[K, V]):
    """Key/value map kept as a binary search tree; no rebalancing is done."""

    def __init__(self) -> None:
        self._root: Optional[_Node[K, V]] = None
        self._count = 0

    def __len__(self) -> int:
        return self._count

    def is_empty(self) -> bool:
        return self._count == 0

    def _find(self, key: K) -> Optional[_Node[K, V]]:
        node = self._root
        while node is not None:
            if key == node.key:
                return node
            node = node.left if key < node.key else node.right
        return None

    def insert(self, key: K, value: V) -> None:
        """Set the value for key, adding a node if key is new."""
        if self._root is None:
            self._root = _Node(key, value)
            self._count += 1
            return
        node = self._root
        while True:
            if key == node.key:
                node.value = value
                return
            if key < node.key:
                if node.left is None:
                    node.left = _Node(key, value)
                    break
                node = node.left
            else:
                if node.right is None:
                    node.right = _Node(key, value)
                    break
                node = node.right
        self._count += 1

    def contains(self, key: K) -> bool:
        return self._find(key) is not None

    def search(self, key: K) -> Optional[V]:
        """Return the value stored for key, or None if it is absent."""
        node = self._find(key)
        return node.value if node is not None else None

    def pre_order(self) -> Iterator[K]:
        """Yield keys node first, then left subtree, then right subtree."""
        stack = [self._root] if self._root is not None else []
        while stack:
            node = stack.pop()
            yield node.key
            if node.right is not None:
                stack.append(node.right)
            if node.left is not None:
                stack.append(node.left)

    def in_order(self) -> Iterator[K]:
        """Yield keys in ascending order."""
        stack: list[_Node[K, V]] = []
        node = self._root
        while stack or node is not None:
            while node is not None:
                stack.append(node)
                node = node.left
            node = stack.pop()
            yield node.key
            node = node.right

    def post_order(self) -> Iterator[K]:
        """Yield keys left subtree first, then right subtree, then node."""
        stack = [self._root] if self._root is not None else []
        reversed_keys: list[K] = []
        while stack:
            node = stack.pop()
            reversed_keys.append(node.key)
            if node.left is not None:
                stack.append(node.left)
            if node.right is not None:
                stack.append(node.right)
        yield from reversed(reversed_keys)

    def level_order(self) -> Iterator[K]:
        """Yield keys level by level, left to right."""
        queue = deque([self._root] if self._root is not None else [])
        while queue:
            node = queue.popleft()
            yield node.key
            if node.left is not None:
                queue.append(node.left)
            if node.right is not None:
                queue.append(node.right)

    def minimum(self) -> K:
        if self._root is None:
            raise ValueError("minimum of an empty tree")
        node = self._root
        while node.left is not None:
            node = node.left
        return node.key

    def maximum(self) -> K:
        if self._root is None:
            raise ValueError("maximum of an empty tree")
        node = self._root
        while node.right is not None:
            node = node.right
        return node.key

    def remove_min(self) -> None:
        """Delete the node with the smallest key; an empty tree is left alone."""
        if self._root is None:
            return
        _, self._root = _detach_min(self._root)
        self._count -= 1

    def remove_max(self) -> None:
        """Delete the node with the largest key; an empty tree is left alone."""
        if self._root is None:
            return
        _, self._root = _detach_max(self._root)
        self._count -= 1

    def remove(self, key: Any) -> None:
        """Delete key if present; an absent key is ignored."""
        parent: Optional[_Node[K, V]] = None
        node = self._root
        while node is not None and not (key == node.key):
            parent = node
            node = node.left if key < node.key else node.right
        if node is None:
            return

        if node.left is None:
            replacement = node.right
        elif node.right is None:
            replacement = node.left
        else:
            successor, rest = _detach_min(node.right)
            successor.right = rest
            successor.left = node.left
            replacement = successor

        if parent is None:
            self._root = replacement
        elif parent.left is node:
            parent.left = replacement
        else:
            parent.right = replacement
        self._count -= 1