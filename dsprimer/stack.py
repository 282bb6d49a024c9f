"""Bounded sequential stack."""

from __future__ import annotations

from typing import Generic, Optional, TypeVar

from dsprimer.errors import FullErr, IndexErr

T = TypeVar("T")


class SequentialStack(Generic[T]):
    """Stack holding at most ``capacity`` elements."""

    def __init__(self, capacity: int) -> None:
        if capacity < 0:
            raise ValueError("capacity must not be negative")
        self.capacity = capacity
        self._items: list[T] = []

    def __len__(self) -> int:
        return len(self._items)

    def __repr__(self) -> str:
        return f"SequentialStack(capacity={self.capacity}, items={self._items!r})"

    def is_empty(self) -> bool:
        """Return True if the stack holds no elements."""
        return not self._items

    def is_full(self) -> bool:
        """Return True if the stack has reached its capacity."""
        return len(self._items) >= self.capacity

    def push(self, item: T) -> None:
        """Push ``item`` onto the stack."""
        if self.is_full():
            raise FullErr("stack is full")
        self._items.append(item)

    def pop(self) -> T:
        """Remove and return the top element."""
        if self.is_empty():
            raise IndexErr("stack is empty")
        return self._items.pop()

    def peek(self) -> Optional[T]:
        """Return the top element, or None if the stack is empty."""
        if self.is_empty():
            return None
        return self._items[-1]

    def replace_top(self, item: T) -> None:
        """Replace the top element with ``item``."""
        if self.is_empty():
            raise IndexErr("stack is empty")
        self._items[-1] = item