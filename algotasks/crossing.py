"""Largest set of non-crossing port connections (longest increasing subsequence)."""

from __future__ import annotations

import sys
from bisect import bisect_left
from collections.abc import Iterable

MAX_PORTS = 100000


def longest_increasing_subsequence(sequence: Iterable[int]) -> int:
    """Return the length of the longest strictly increasing subsequence."""
    tails: list[int] = []
    for value in sequence:
        position = bisect_left(tails, value)
        if position < len(tails):
            tails[position] = value
        else:
            tails.append(value)
    return len(tails)


class _TokenReader:
    """Integer reader that stays failed once a read fails."""

    def __init__(self, text: str) -> None:
        self._tokens = iter(text.split())
        self._failed = False

    def next_int(self) -> int | None:
        if self._failed:
            return None
        try:
            return int(next(self._tokens))
        except (StopIteration, ValueError):
            self._failed = True
            return None


def main(argv: list[str] | None = None) -> int:
    """Read test cases from standard input and print one answer per case."""
    reader = _TokenReader(sys.stdin.read())
    cases = reader.next_int()
    if cases is None or cases <= 0:
        print("Error: Invalid number of test cases", file=sys.stderr)
        return 1

    for _ in range(cases):
        ports = reader.next_int()
        if ports is None or ports <= 0 or ports >= MAX_PORTS:
            print("Error: Invalid number of ports", file=sys.stderr)
            continue
        sequence = []
        for _ in range(ports):
            value = reader.next_int()
            if value is None or not 1 <= value <= ports:
                print("Error: Invalid port mapping", file=sys.stderr)
                break
            sequence.append(value)
        else:
            print(longest_increasing_subsequence(sequence))
    return 0


if __name__ == "__main__":
    sys.exit(main())