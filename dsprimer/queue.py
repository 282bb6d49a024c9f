"""Bounded circular FIFO queue."""

from __future__ import annotations

from collections import deque
from typing import Generic, Optional, TypeVar

from dsprimer.errors import FullErr

T = TypeVar("T")


class Queue(Generic[T]):
    """Circular queue over ``size`` slots, of which ``size - 1`` can be used."""

    def __init__(self, size: int) -> None:
        if size < 1:
            raise ValueError("size must be at least 1")
        self._size = size
        self._items: deque[T] = deque()

    def __len__(self) -> int:
        return len(self._items)

    def __repr__(self) -> str:
        return f"Queue(size={self._size}, items={list(self._items)!r})"

    def is_empty(self) -> bool:
        """Return True if the queue holds no elements."""
        return not self._items

    def is_full(self) -> bool:
        """Return True if no further element can be pushed."""
        return len(self._items) >= self.capacity()

    def capacity(self) -> int:
        """Return the number of elements the queue can hold."""
        return self._size - 1

    def push(self, data: T) -> None:
        """Append ``data`` at the rear of the queue."""
        if self.is_full():
            raise FullErr("queue is full")
        self._items.append(data)

    def pop(self) -> Optional[T]:
        """Remove and return the front element, or None if the queue is empty."""
        if not self._items:
            return None
        return self._items.popleft()