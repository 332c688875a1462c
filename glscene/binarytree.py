"""A binary search tree that discards duplicates."""

from __future__ import annotations

from collections.abc import Iterator
from typing import Any


class BinaryTreeNode:
    """A tree node holding one value and optional left/right children."""

    __slots__ = ("value", "left", "right")

    def __init__(self, value: Any) -> None:
        self.value = value
        self.left: BinaryTreeNode | None = None
        self.right: BinaryTreeNode | None = None

    def insert(self, value: Any) -> bool:
        """Insert ``value`` below this node; return False for a duplicate.

        Values are ordered with their ``<`` and ``>`` operators; a value
        that is neither less nor greater than a stored one is discarded.
        """
        node = self
        while True:
            if value < node.value:
                if node.left is None:
                    node.left = BinaryTreeNode(value)
                    return True
                node = node.left
            elif value > node.value:
                if node.right is None:
                    node.right = BinaryTreeNode(value)
                    return True
                node = node.right
            else:
                return False

    def in_order(self) -> Iterator[Any]:
        """Yield values: left subtree, this node, right subtree."""
        if self.left is not None:
            yield from self.left.in_order()
        yield self.value
        if self.right is not None:
            yield from self.right.in_order()

    def pre_order(self) -> Iterator[Any]:
        """Yield values: this node, left subtree, right subtree."""
        yield self.value
        if self.left is not None:
            yield from self.left.pre_order()
        if self.right is not None:
            yield from self.right.pre_order()

    def post_order(self) -> Iterator[Any]:
        """Yield values: left subtree, right subtree, this node."""
        if self.left is not None:
            yield from self.left.post_order()
        if self.right is not None:
            yield from self.right.post_order()
        yield self.value


class BinaryTree:
    """A binary search tree of comparable values."""

    def __init__(self) -> None:
        self._root: BinaryTreeNode | None = None

    def insert(self, value: Any) -> bool:
        """Insert ``value``; return False if an equal value is already stored."""
        if self._root is None:
            self._root = BinaryTreeNode(value)
            return True
        return self._root.insert(value)

    def clear(self) -> None:
        """Remove every value from the tree."""
        self._root = None

    def in_order(self) -> Iterator[Any]:
        if self._root is not None:
            yield from self._root.in_order()

    def pre_order(self) -> Iterator[Any]:
        if self._root is not None:
            yield from self._root.pre_order()

    def post_order(self) -> Iterator[Any]:
        if self._root is not None:
            yield from self._root.post_order()

    def __iter__(self) -> Iterator[Any]:
        return self.in_order()