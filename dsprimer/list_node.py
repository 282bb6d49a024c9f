"""Singly linked lists built from nodes headed by a sentinel."""

from __future__ import annotations

from collections.abc import Iterator
from dataclasses import dataclass
from typing import Any, Generic, Optional, TypeVar

from dsprimer.errors import IndexErr

T = TypeVar("T")


@dataclass(eq=False)
class ListNode(Generic[T]):
    """A node of a singly linked list.

    A node created without data acts as the sentinel head of a list; the
    nodes reachable through ``next`` hold the elements.
    """

    data: Optional[T] = None
    next: Optional["ListNode[T]"] = None

    def __iter__(self) -> Iterator[T]:
        node = self.next
        while node is not None:
            yield node.data  # type: ignore[misc]
            node = node.next

    def get(self, index: int) -> Optional[ListNode[T]]:
        """Return the node ``index`` steps from this one, or None past the end."""
        if index < 0:
            raise IndexErr(f"index {index} is negative")
        node: Optional[ListNode[T]] = self
        for _ in range(index):
            if node is None:
                return None
            node = node.next
        return node

    def get_mut(self, index: int) -> Optional[ListNode[T]]:
        """Return the node at ``index`` for modification, or None past the end."""
        return self.get(index)

    def pop_tail(self) -> Optional[T]:
        """Remove the last node and return its data; do nothing on an empty list."""
        if self.next is None:
            return None
        node = self
        while node.next.next is not None:  # type: ignore[union-attr]
            node = node.next  # type: ignore[assignment]
        tail = node.next
        node.next = None
        return tail.data  # type: ignore[union-attr]

    def push(self, data: T) -> None:
        """Append a node holding ``data`` at the end of the list."""
        node = self
        while node.next is not None:
            node = node.next
        node.next = ListNode(data)

    def insert(self, index: int, data: T) -> None:
        """Insert a node holding ``data`` so that it sits at ``index``."""
        if index < 1:
            raise IndexErr(f"cannot insert at index {index}")
        previous = self.get(index - 1)
        if previous is None:
            raise IndexErr(f"index {index} out of range")
        previous.next = ListNode(data, previous.next)

    def remove(self, index: int) -> Optional[T]:
        """Remove the node at ``index`` and return its data."""
        if index < 1:
            raise IndexErr(f"cannot remove index {index}")
        previous = self.get(index - 1)
        if previous is None or previous.next is None:
            raise IndexErr(f"index {index} out of range")
        removed = previous.next
        previous.next = removed.next
        return removed.data

    def length(self) -> int:
        """Return the number of nodes after this one."""
        return sum(1 for _ in self)


@dataclass(eq=False)
class LNode:
    """A node of an integer singly linked list with a head node."""

    data: int = 0
    next: Optional["LNode"] = None


def init_list() -> LNode:
    """Create and return the head node of an empty list."""
    return LNode(data=0, next=None)


def list_insert(head: LNode, i: int, e: int) -> None:
    """Insert ``e`` so that it becomes the ``i``-th node (1-based) after ``head``."""
    if i < 1:
        raise IndexErr(f"cannot insert at position {i}")
    node: Any = head
    for _ in range(i - 1):
        node = node.next
        if node is None:
            raise IndexErr(f"position {i} out of range")
    node.next = LNode(data=e, next=node.next)


def delete(head: LNode, i: int) -> LNode:
    """Delete the ``i``-th node (1-based) after ``head`` and return a node with its data.

    The data of the target is swapped with its successor, which is then
    unlinked; the last node therefore cannot be deleted.
    """
    if i < 0:
        raise IndexErr(f"position {i} is negative")
    node: Optional[LNode] = head
    for _ in range(i):
        if node is None:
            raise IndexErr("index out of bounds")
        node = node.next
    if node is None or node.next is None:
        raise IndexErr("invalid node to delete (null or last node)")
    removed = node.next
    node.data, removed.data = removed.data, node.data
    node.next = removed.next
    removed.next = None
    return removed