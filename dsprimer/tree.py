"""Linked binary trees."""

from __future__ import annotations

from collections.abc import Iterator
from dataclasses import dataclass
from typing import Generic, Optional, TypeVar

T = TypeVar("T")


@dataclass
class BinaryNode(Generic[T]):
    """A binary tree node holding ``data`` and optional children."""

    data: T
    left: Optional["BinaryNode[T]"] = None
    right: Optional["BinaryNode[T]"] = None

    def set_left(self, data: T) -> BinaryNode[T]:
        """Replace the left child with a new leaf holding ``data``; return self."""
        self.left = BinaryNode(data)
        return self

    def set_right(self, data: T) -> BinaryNode[T]:
        """Replace the right child with a new leaf holding ``data``; return self."""
        self.right = BinaryNode(data)
        return self

    def __iter__(self) -> Iterator[T]:
        stack: list[BinaryNode[T]] = []
        node: Optional[BinaryNode[T]] = self
        while stack or node is not None:
            while node is not None:
                stack.append(node)
                node = node.left
            node = stack.pop()
            yield node.data
            node = node.right

    def in_order_traverse(self) -> list[T]:
        """Return the data of the subtree in in-order sequence."""
        return list(self)


@dataclass
class BinaryTree(Generic[T]):
    """A binary tree, possibly empty."""

    root: Optional[BinaryNode[T]] = None

    def set_root(self, root: BinaryNode[T]) -> None:
        """Make ``root`` the root of the tree."""
        self.root = root

    @classmethod
    def with_root(cls, data: T) -> BinaryTree[T]:
        """Create a tree whose root is a leaf holding ``data``."""
        return cls(BinaryNode(data))

    def is_empty(self) -> bool:
        """Return True if the tree has no root."""
        return self.root is None

    def __iter__(self) -> Iterator[T]:
        if self.root is not None:
            yield from self.root

    def in_order_traverse(self) -> list[T]:
        """Return the data of the tree in in-order sequence."""
        return list(self)