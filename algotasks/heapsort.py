"""Heap sort that records the heap after each sift-down."""

from __future__ import annotations

import sys
from collections.abc import Iterable


def _sift_down(heap: list[int], size: int, root: int) -> None:
    while True:
        largest = root
        left = 2 * root + 1
        right = left + 1
        if left < size and heap[left] > heap[largest]:
            largest = left
        if right < size and heap[right] > heap[largest]:
            largest = right
        if largest == root:
            return
        heap[root], heap[largest] = heap[largest], heap[root]
        root = largest


def heap_sort_steps(values: Iterable[int]) -> list[list[int]]:
    """Return the initial heap, each shrunk heap down to two elements' step, and the sorted list."""
    heap = list(values)
    size = len(heap)
    for root in range(size // 2 - 1, -1, -1):
        _sift_down(heap, size, root)
    steps = [heap.copy()]
    for end in range(size - 1, 0, -1):
        heap[0], heap[end] = heap[end], heap[0]
        _sift_down(heap, end, 0)
        steps.append(heap[:end])
    steps.append(heap)
    return steps


def format_block(values: Iterable[int]) -> str:
    """Return the printed block for one test case, ending with a blank line."""
    lines = ("".join(f"{value} " for value in step) + "\n" for step in heap_sort_steps(values))
    return "".join(lines) + "\n"


def main(argv: list[str] | None = None) -> int:
    """Read test cases from standard input and print their sorting blocks."""
    tokens = iter(sys.stdin.read().split())
    cases = int(next(tokens))
    for _ in range(cases):
        count = int(next(tokens))
        values = [int(next(tokens)) for _ in range(count)]
        sys.stdout.write(format_block(values))
    return 0


if __name__ == "__main__":
    sys.exit(main())