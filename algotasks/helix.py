"""Maximum sum walking along two sorted sequences, switching at shared values."""

from __future__ import annotations

import sys
from collections.abc import Sequence


def max_path_sum(first: Sequence[int], second: Sequence[int]) -> int:
    """Return the largest sum reachable by switching between the sequences at common values."""
    longer, shorter = (first, second) if len(first) >= len(second) else (second, first)
    if not shorter:
        return sum(longer)

    total = 0
    run_long = run_short = 0
    position = 0
    for value in longer:
        while position + 1 < len(shorter) and shorter[position + 1] <= value:
            run_short += shorter[position]
            position += 1
        if value == shorter[position]:
            total += max(run_long, run_short)
            run_long = run_short = 0
        run_long += value
    return total + run_long


def main(argv: list[str] | None = None) -> int:
    """Read pairs of sequences from standard input until a zero length."""
    tokens = iter(sys.stdin.read().split())
    for token in tokens:
        size = int(token)
        if size == 0:
            break
        first = [int(next(tokens)) for _ in range(size)]
        second = [int(next(tokens)) for _ in range(int(next(tokens)))]
        print(max_path_sum(first, second))
    return 0


if __name__ == "__main__":
    sys.exit(main())