"""Character strings with brute-force and KMP pattern matching."""

from __future__ import annotations

from collections.abc import Sequence
from dataclasses import dataclass, field
from typing import Hashable, Optional, TypeVar

T = TypeVar("T", bound=Hashable)


@dataclass(frozen=True)
class CharString:
    """An immutable sequence of characters."""

    chars: tuple[str, ...] = field(default_factory=tuple)

    def __init__(self, chars: Sequence[str] = ()) -> None:
        object.__setattr__(self, "chars", tuple(chars))

    def __len__(self) -> int:
        return len(self.chars)

    def __str__(self) -> str:
        return "".join(self.chars)

    def index_bf(self, other: CharString, pos: int) -> int:
        """Find ``other`` starting at ``pos`` by brute force.

        Returns the index of the match, or 0 when there is none.
        """
        if pos < 0:
            raise ValueError("pos must not be negative")
        text, pattern = self.chars, other.chars
        i, j = pos, 0
        while i < len(text) and j < len(pattern):
            if text[i] == pattern[j]:
                i += 1
                j += 1
            else:
                i = i - j + 1
                j = 0
        if j == len(pattern):
            return i - j
        return 0


def _next_table(pattern: Sequence[T]) -> list[int]:
    table = [0] * len(pattern)
    if not pattern:
        return table
    i, j = 1, 0
    while i < len(pattern):
        if pattern[i] == pattern[j]:
            j += 1
            table[i] = j
            i += 1
        elif j == 0:
            table[i] = 0
            i += 1
        else:
            j = table[j - 1]
    return table


def index_kmp(main: Sequence[T], pattern: Sequence[T]) -> Optional[int]:
    """Find ``pattern`` in ``main`` with the KMP algorithm.

    Returns the index of the match, or None when there is none. An empty
    pattern matches at 0.
    """
    if not pattern:
        return 0
    table = _next_table(pattern)
    i = j = 0
    while i < len(main) and j < len(pattern):
        if j == 0 or main[i] == pattern[j]:
            i += 1
            j += 1
        else:
            j = table[j - 1]
    if j == len(pattern):
        return i - j
    return None