"""Minimum electric-car range needed to reach every city of a road network."""

from __future__ import annotations

import sys
from collections.abc import Iterable
from dataclasses import dataclass
from operator import attrgetter


@dataclass(frozen=True)
class Edge:
    """A two-way road between cities ``u`` and ``v`` of the given length."""

    u: int
    v: int
    length: int


class DisjointSet:
    """Union-find over the integers ``0 .. size-1`` with rank and path compression."""

    def __init__(self, size: int) -> None:
        self._parent = list(range(size))
        self._rank = [0] * size

    def find(self, x: int) -> int:
        """Return the representative of the set containing ``x``."""
        root = x
        while self._parent[root] != root:
            root = self._parent[root]
        while self._parent[x] != root:
            self._parent[x], x = root, self._parent[x]
        return root

    def union(self, x: int, y: int) -> bool:
        """Merge the sets of ``x`` and ``y``; return False if already joined."""
        xr, yr = self.find(x), self.find(y)
        if xr == yr:
            return False
        if self._rank[xr] < self._rank[yr]:
            self._parent[xr] = yr
        else:
            self._parent[yr] = xr
            if self._rank[xr] == self._rank[yr]:
                self._rank[xr] += 1
        return True


def _as_edge(edge: Edge | tuple[int, int, int]) -> Edge:
    return edge if isinstance(edge, Edge) else Edge(*edge)


def minimum_range(n: int, edges: Iterable[Edge | tuple[int, int, int]]) -> int:
    """Return the longest road in a minimum spanning tree of the network.

    Roads may be given as :class:`Edge` objects or ``(u, v, length)`` tuples.
    """
    roads = [_as_edge(edge) for edge in edges]
    for road in roads:
        if not (0 <= road.u < n and 0 <= road.v < n):
            raise ValueError(f"city number out of range in road {road}")

    cities = DisjointSet(n)
    longest = 0
    used = 0
    for road in sorted(roads, key=attrgetter("length")):
        if cities.union(road.u, road.v):
            longest = max(longest, road.length)
            used += 1
            if used == n - 1:
                break
    return longest


def main(argv: list[str] | None = None) -> int:
    """Read test cases from standard input and print one range per case."""
    tokens = iter(sys.stdin.read().split())
    cases = int(next(tokens))
    for _ in range(cases):
        n, m = int(next(tokens)), int(next(tokens))
        roads = [Edge(int(next(tokens)), int(next(tokens)), int(next(tokens))) for _ in range(m)]
        print(minimum_range(n, roads))
    return 0


if __name__ == "__main__":
    sys.exit(main())