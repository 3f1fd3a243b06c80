"""Best profit from buying one potion and transmuting it along one-way rules."""

from __future__ import annotations

import sys
from collections import deque
from collections.abc import Iterable, Sequence

MAX_POTIONS = 100
MAX_TRANSMUTATIONS = MAX_POTIONS * (MAX_POTIONS - 1) // 2
MAX_TESTS = 100


class CycleError(ValueError):
    """Raised when the transmutations contain a cycle."""


def _adjacency(count: int, edges: Iterable[tuple[int, int]]) -> list[list[int]]:
    graph: list[list[int]] = [[] for _ in range(count)]
    for u, v in edges:
        if not (0 <= u < count and 0 <= v < count):
            raise ValueError(f"transmutation ({u}, {v}) out of range")
        graph[u].append(v)
    return graph


def _kahn(graph: list[list[int]]) -> list[int]:
    indegree = [0] * len(graph)
    for targets in graph:
        for v in targets:
            indegree[v] += 1
    queue = deque(node for node, degree in enumerate(indegree) if degree == 0)
    order = []
    while queue:
        u = queue.popleft()
        order.append(u)
        for v in graph[u]:
            indegree[v] -= 1
            if indegree[v] == 0:
                queue.append(v)
    if len(order) != len(graph):
        raise CycleError("transmutation graph has a cycle")
    return order


def topological_order(count: int, edges: Iterable[tuple[int, int]]) -> list[int]:
    """Return a topological order of ``count`` nodes given 0-based edges."""
    return _kahn(_adjacency(count, edges))


def max_profit(prices: Sequence[int], transmutations: Iterable[tuple[int, int]]) -> int:
    """Return the largest profit over transmutation chains (0-based pairs)."""
    graph = _adjacency(len(prices), transmutations)
    lowest: list[int | None] = [None] * len(prices)
    best = 0
    for node in _kahn(graph):
        if lowest[node] is None:
            lowest[node] = prices[node]
        for target in graph[node]:
            current = lowest[target]
            lowest[target] = lowest[node] if current is None else min(current, lowest[node])
            best = max(best, prices[target] - lowest[target])
    return best


def main(argv: list[str] | None = None) -> int:
    """Read test cases from standard input and print the best profit of each."""
    tokens = iter(sys.stdin.read().split())
    tests = int(next(tokens))
    if not 1 <= tests <= MAX_TESTS:
        print("Error: number of tests out of range.", file=sys.stderr)
        return 1
    for _ in range(tests):
        n, m = int(next(tokens)), int(next(tokens))
        if not (1 <= n <= MAX_POTIONS and 0 <= m <= MAX_TRANSMUTATIONS):
            print("Error: invalid values of N or M.", file=sys.stderr)
            return 1
        prices = [int(next(tokens)) for _ in range(n)]
        pairs = [(int(next(tokens)), int(next(tokens))) for _ in range(m)]
        if any(not (1 <= u <= n and 1 <= v <= n) for u, v in pairs):
            print("Error: invalid edge indices.", file=sys.stderr)
            return 1
        try:
            profit = max_profit(prices, [(u - 1, v - 1) for u, v in pairs])
        except CycleError:
            print("Error: cycle in graph, no topological order.", file=sys.stderr)
            return 1
        print(profit)
    return 0


if __name__ == "__main__":
    sys.exit(main())