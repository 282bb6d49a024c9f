"""Sequential (array-backed) linear lists with 1-based positions."""

from __future__ import annotations

from abc import ABC, abstractmethod
from collections.abc import Iterator
from typing import Any, Generic, TypeVar

from dsprimer.errors import FullErr, IndexErr

T = TypeVar("T")

MAXSIZE = 100


class List(ABC, Generic[T]):
    """Abstract linear list.

    All positions taken or returned are 1-based; a returned position of 0
    means the element was not found.
    """

    @abstractmethod
    def clear_list(self) -> None:
        """Remove every element."""

    @abstractmethod
    def list_empty(self) -> bool:
        """Return True if the list holds no elements."""

    @abstractmethod
    def list_length(self) -> int:
        """Return the number of elements."""

    @abstractmethod
    def get_elem(self, i: int) -> T | None:
        """Return the element at position ``i`` or None if out of range."""

    @abstractmethod
    def locate_elem(self, e: T) -> int:
        """Return the position of the first element equal to ``e``, or 0."""

    @abstractmethod
    def prior_elem(self, cur_e: T) -> T | None:
        """Return the element before the first occurrence of ``cur_e``."""

    @abstractmethod
    def next_elem(self, cur_e: T) -> T | None:
        """Return the element after the first occurrence of ``cur_e``."""

    @abstractmethod
    def list_insert(self, i: int, e: T) -> None:
        """Insert ``e`` so that it ends up at position ``i``."""

    @abstractmethod
    def list_delete(self, i: int) -> None:
        """Remove the element at position ``i``."""

    @abstractmethod
    def traverse_list(self) -> None:
        """Print every element, one per line."""


class SqList(List[T]):
    """Static sequential list holding at most ``MAXSIZE`` elements."""

    def __init__(self) -> None:
        self._items: list[T] = []

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, SqList):
            return NotImplemented
        return self._items == other._items

    def __iter__(self) -> Iterator[T]:
        return iter(self._items)

    def __len__(self) -> int:
        return len(self._items)

    def __repr__(self) -> str:
        return f"SqList({self._items!r})"

    def clear_list(self) -> None:
        self._items.clear()

    def list_empty(self) -> bool:
        return not self._items

    def list_length(self) -> int:
        return len(self._items)

    def get_elem(self, i: int) -> T | None:
        if i < 1 or i > len(self._items):
            return None
        return self._items[i - 1]

    def locate_elem(self, e: T) -> int:
        for position, value in enumerate(self._items, start=1):
            if value == e:
                return position
        return 0

    def prior_elem(self, cur_e: T) -> T | None:
        previous: Any = None
        for value in self._items:
            if value == cur_e:
                return previous
            previous = value
        return None

    def next_elem(self, cur_e: T) -> T | None:
        for value, following in zip(self._items, self._items[1:]):
            if value == cur_e:
                return following
        return None

    def list_insert(self, i: int, e: T) -> None:
        if i < 1 or i > len(self._items) + 1:
            raise IndexErr(f"position {i} out of range")
        if len(self._items) >= MAXSIZE:
            raise FullErr("list is full")
        self._items.insert(i - 1, e)

    def list_delete(self, i: int) -> None:
        if i < 1 or i > len(self._items):
            raise IndexErr(f"position {i} out of range")
        del self._items[i - 1]

    def traverse_list(self) -> None:
        for value in self._items:
            print(repr(value))


class ArrayList(Generic[T]):
    """Fixed-capacity array list with 1-based positions that raises on failure."""

    def __init__(self) -> None:
        self._items: list[T] = []

    def __iter__(self) -> Iterator[T]:
        return iter(self._items)

    def __len__(self) -> int:
        return len(self._items)

    def __repr__(self) -> str:
        return f"ArrayList({self._items!r})"

    def get_element(self, index: int) -> T:
        """Return the element at 1-based ``index``."""
        if index < 1 or index > len(self._items):
            raise IndexErr("array index out of bounds")
        return self._items[index - 1]

    def insert(self, position: int, element: T) -> None:
        """Insert ``element`` at 1-based ``position``."""
        if position < 1 or position > len(self._items) + 1:
            raise IndexErr("array index out of bounds")
        if len(self._items) >= MAXSIZE:
            raise FullErr("array is full")
        self._items.insert(position - 1, element)

    def locate_index(self, element: T) -> int:
        """Return the 1-based position of the first ``element``."""
        for position, value in enumerate(self._items, start=1):
            if value == element:
                return position
        raise ValueError("element not found")

    def delete(self, index: int) -> None:
        """Remove the element at 1-based ``index``."""
        if index < 1 or index > len(self._items):
            raise IndexErr("array operation out of bounds")
        del self._items[index - 1]

    def clear(self) -> None:
        """Remove every element."""
        self._items.clear()

    def length(self) -> int:
        """Return the number of elements."""
        return len(self._items)

    def empty(self) -> bool:
        """Return True if the list is not empty."""
        return len(self._items) != 0

    def prior_element(self, cur_e: T) -> T:
        """Return the element preceding the first occurrence of ``cur_e``."""
        if not self._items:
            raise IndexErr("array is empty")
        if self._items[0] == cur_e:
            raise ValueError("element is the first one and has no predecessor")
        for previous, value in zip(self._items, self._items[1:]):
            if value == cur_e:
                return previous
        raise ValueError("element not found")

    def next_element(self, cur_e: T) -> T:
        """Return the element following the first occurrence of ``cur_e``."""
        if not self._items:
            raise IndexErr("array is empty")
        if self._items[-1] == cur_e:
            raise ValueError("element is the last one and has no successor")
        for value, following in zip(self._items, self._items[1:]):
            if value == cur_e:
                return following
        raise ValueError("element not found")

    def traverse(self) -> None:
        """Print every element, one per line."""
        for value in self._items:
            print(repr(value))