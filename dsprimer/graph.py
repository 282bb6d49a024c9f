"""Graphs stored as adjacency matrices."""

from __future__ import annotations

import re
import sys
from collections.abc import Callable
from dataclasses import dataclass
from typing import Generic, Optional, TextIO, TypeVar

T = TypeVar("T")

_UNSIGNED = re.compile(r"\+?[0-9]+")


def _parse_unsigned(text: str) -> int:
    if not _UNSIGNED.fullmatch(text):
        raise ValueError(f"invalid unsigned integer: {text!r}")
    return int(text)


@dataclass
class AMGraph(Generic[T]):
    """A weighted directed graph: vertex values plus an adjacency matrix."""

    vexs: list[T]
    arcs: list[list[int]]
    arc_num: int

    def __post_init__(self) -> None:
        size = len(self.vexs)
        if len(self.arcs) != size or any(len(row) != size for row in self.arcs):
            raise ValueError("adjacency matrix must be square and match the vertex count")

    @property
    def size(self) -> int:
        """Number of vertices."""
        return len(self.vexs)

    @classmethod
    def from_user_input(
        cls,
        size: int,
        convert: Callable[[str], T] = int,  # type: ignore[assignment]
        stdin: Optional[TextIO] = None,
        stdout: Optional[TextIO] = None,
    ) -> AMGraph[T]:
        """Build a graph of ``size`` vertices by prompting on ``stdout``.

        Vertex values are read one per line and parsed with ``convert``; then
        the number of edges (at most ``size * size``), then one edge per line as
        ``start end weight``. Invalid lines are reported and asked for again.
        Raises EOFError if input runs out.
        """
        if size < 0:
            raise ValueError("size must not be negative")
        source = sys.stdin if stdin is None else stdin
        sink = sys.stdout if stdout is None else stdout

        def say(message: str) -> None:
            print(message, file=sink)

        def read() -> str:
            line = source.readline()
            if not line:
                raise EOFError("input ended before the graph was complete")
            return line.strip()

        vexs: list[T] = []
        say(f"Enter the values of {size} vertices:")
        for number in range(1, size + 1):
            while True:
                say(f"Value of vertex {number}:")
                try:
                    vexs.append(convert(read()))
                    break
                except ValueError as exc:
                    say(f"Invalid input: {exc}; please try again")

        limit = size * size
        while True:
            say(f"Number of edges (at most {limit}):")
            try:
                arc_num = _parse_unsigned(read())
            except ValueError as exc:
                say(f"Invalid input: {exc}; please try again")
                continue
            if arc_num <= limit:
                break
            say(f"The number of edges cannot exceed {limit}; please try again")

        arcs = [[0] * size for _ in range(size)]
        say("Enter each edge as: start end weight")
        for number in range(1, arc_num + 1):
            while True:
                say(f"Edge {number} ({arc_num - number + 1} remaining):")
                parts = read().split()
                if len(parts) != 3:
                    say("Three values are needed (start end weight); please try again")
                    continue
                try:
                    start = _parse_unsigned(parts[0])
                except ValueError:
                    say(f"The start must be an integer from 0 to {size - 1}; please try again")
                    continue
                try:
                    end = _parse_unsigned(parts[1])
                except ValueError:
                    say(f"The end must be an integer from 0 to {size - 1}; please try again")
                    continue
                try:
                    weight = _parse_unsigned(parts[2])
                except ValueError:
                    weight = None
                if weight is None or start >= size or end >= size:
                    say(
                        "Indices must be below the vertex count and the weight "
                        "a non-negative integer; please try again"
                    )
                    continue
                arcs[start][end] = weight
                break

        return cls(vexs, arcs, arc_num)