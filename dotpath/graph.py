"""Directed graph of dots on a plane, with straight-line edge lengths."""

from __future__ import annotations

import math
from dataclasses import dataclass
from typing import Iterator

MAX_DOTS = 15
DOT_RADIUS = 10
INF = 9999999


class GraphFullError(Exception):
    """Raised when a dot is added to a graph that already holds its maximum."""


@dataclass(frozen=True)
class Dot:
    """A dot on the plane; ``idx`` is the order in which it was placed."""

    x: int
    y: int
    idx: int


@dataclass(frozen=True)
class PathResult:
    """Shortest distances and predecessor links from one start dot."""

    start: int
    distances: tuple[int, ...]
    parents: tuple[int, ...]

    def distance(self, end: int) -> int:
        """Length of the shortest path to ``end``, or ``INF`` when unreachable."""
        return self.distances[end]

    def route(self, end: int) -> list[int]:
        """Dot indices from the start to ``end``; empty when unreachable."""
        chain = [end]
        current = end
        while self.parents[current] != current:
            current = self.parents[current]
            chain.append(current)
        if current != self.start:
            return []
        chain.reverse()
        return chain


class Graph:
    """Dots joined by directed lines whose lengths are their truncated distances."""

    def __init__(self, max_dots: int = MAX_DOTS) -> None:
        self.max_dots = max_dots
        self.dots: list[Dot] = []
        self._lengths: dict[tuple[int, int], int] = {}

    def __len__(self) -> int:
        return len(self.dots)

    def _check(self, idx: int) -> None:
        if not 0 <= idx < len(self.dots):
            raise IndexError(f"no dot with index {idx}")

    def add_dot(self, x: int, y: int) -> Dot:
        """Place a new dot and return it."""
        if len(self.dots) >= self.max_dots:
            raise GraphFullError("점 개수가 최대입니다.")
        dot = Dot(x, y, len(self.dots))
        self.dots.append(dot)
        return dot

    def dot_at(self, x: int, y: int) -> Dot | None:
        """The first dot whose circle contains the point, if any."""
        return next(
            (
                dot
                for dot in self.dots
                if (x - dot.x) ** 2 + (y - dot.y) ** 2 < DOT_RADIUS * DOT_RADIUS
            ),
            None,
        )

    def add_line(self, start: int, end: int) -> int | None:
        """Add a directed line and return its length; a dot to itself adds nothing."""
        self._check(start)
        self._check(end)
        if start == end:
            return None
        a, b = self.dots[start], self.dots[end]
        length = int(math.sqrt((a.x - b.x) ** 2 + (a.y - b.y) ** 2))
        self._lengths[(start, end)] = length
        return length

    def length(self, start: int, end: int) -> int:
        """Length of the line from ``start`` to ``end``: 0 to itself, ``INF`` if absent."""
        self._check(start)
        self._check(end)
        if start == end:
            return 0
        return self._lengths.get((start, end), INF)

    def lines(self) -> Iterator[tuple[Dot, Dot, int]]:
        """Visible lines as (start, end, length), ordered by start then end."""
        for (start, end), length in sorted(self._lengths.items()):
            if 0 < length < INF:
                yield self.dots[start], self.dots[end], length

    def shortest_paths(self, start: int) -> PathResult:
        """Dijkstra's algorithm from ``start`` over the directed lines."""
        self._check(start)
        count = len(self.dots)
        distances = [self.length(start, i) for i in range(count)]
        parents = [start if d < INF else i for i, d in enumerate(distances)]
        found = [False] * count
        found[start] = True

        for _ in range(count - 2):
            candidates = [
                i for i, d in enumerate(distances) if d < INF and not found[i]
            ]
            if not candidates:
                break
            current = min(candidates, key=distances.__getitem__)
            found[current] = True
            for j in range(count):
                if found[j]:
                    continue
                through = distances[current] + self.length(current, j)
                if through < distances[j]:
                    distances[j] = through
                    parents[j] = current

        return PathResult(start, tuple(distances), tuple(parents))