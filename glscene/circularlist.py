"""A circular doubly linked list."""

from __future__ import annotations

from collections.abc import Iterator
from typing import Any


class CircularNode:
    """A node of a circular doubly linked list."""

    __slots__ = ("data", "next", "prev")

    def __init__(self, data: Any) -> None:
        self.data = data
        self.next: CircularNode = self
        self.prev: CircularNode = self


class CircularDoubleLinkedList:
    """A ring of nodes; the last node links back to the first."""

    def __init__(self) -> None:
        self._first: CircularNode | None = None

    def is_empty(self) -> bool:
        return self._first is None

    def append(self, item: Any) -> CircularNode:
        """Add ``item`` at the end of the ring and return its node."""
        node = CircularNode(item)
        first = self._first
        if first is None:
            self._first = node
        else:
            last = first.prev
            node.prev = last
            last.next = node
            node.next = first
            first.prev = node
        return node

    def first_node(self) -> CircularNode | None:
        return self._first

    def last_node(self) -> CircularNode | None:
        return None if self._first is None else self._first.prev

    def nodes(self) -> Iterator[CircularNode]:
        """Yield each node once, starting at the first."""
        first = self._first
        if first is None:
            return
        node = first
        while True:
            yield node
            node = node.next
            if node is first:
                break

    def __iter__(self) -> Iterator[Any]:
        return (node.data for node in self.nodes())

    def __len__(self) -> int:
        return sum(1 for _ in self.nodes())