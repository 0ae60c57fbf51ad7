"""A symbol table kept as a singly linked list, newest key first."""

from __future__ import annotations

from collections.abc import Iterator
from dataclasses import dataclass
from typing import Any, Generic, Optional, TypeVar

K = TypeVar("K")
V = TypeVar("V")


@dataclass
class _Node(Generic[K, V]):
    key: K
    value: V
    next: Optional["_Node[K, V]"] = None


class SequenceTable(Generic[K, V]):
    """Key/value table searched sequentially from the most recent insertion."""

    def __init__(self) -> None:
        self._head: Optional[_Node[K, V]] = None
        self._count = 0

    def __len__(self) -> int:
        return self._count

    def __iter__(self) -> Iterator[tuple[K, V]]:
        node = self._head
        while node is not None:
            yield node.key, node.value
            node = node.next

    def is_empty(self) -> bool:
        return self._count == 0

    def _find(self, key: K) -> Optional[_Node[K, V]]:
        node = self._head
        while node is not None:
            if node.key == key:
                return node
            node = node.next
        return None

    def insert(self, key: K, value: V) -> None:
        """Set the value for key; a new key is placed at the front."""
        node = self._find(key)
        if node is not None:
            node.value = value
            return
        self._head = _Node(key, value, self._head)
        self._count += 1

    def contains(self, key: K) -> bool:
        return self._find(key) is not None

    def search(self, key: K) -> Optional[V]:
        """Return the value stored for key, or None if it is absent."""
        node = self._find(key)
        return node.value if node is not None else None

    def remove(self, key: Any) -> None:
        """Delete key if present; an absent key is ignored."""
        if self._head is None:
            return
        if self._head.key == key:
            self._head = self._head.next
            self._count -= 1
            return
        node = self._head
        while node.next is not None and node.next.key != key:
            node = node.next
        if node.next is not None:
            node.next = node.next.next
            self._count -= 1