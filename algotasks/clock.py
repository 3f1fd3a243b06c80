"""Area of the dial sector swept between the hour hands of two clocks."""

from __future__ import annotations

import math
import sys
from dataclasses import dataclass

FULL_TURN = 12 * 60 * 60 * 100


@dataclass(frozen=True)
class ClockTime:
    """A dial reading as hours, minutes, seconds and hundredths of a second."""

    hours: int
    minutes: int
    seconds: int
    centiseconds: int

    def hundredths(self) -> int:
        """Return the reading in hundredths of a second since 0:0:0.00."""
        return ((self.hours * 60 + self.minutes) * 60 + self.seconds) * 100 + self.centiseconds


def sector_area(first: ClockTime, second: ClockTime, radius: float) -> float:
    """Return the signed area of the sector from ``first`` to ``second``."""
    fraction = second.hundredths() / FULL_TURN - first.hundredths() / FULL_TURN
    return fraction * math.pi * radius * radius


def solve(text: str) -> str:
    """Solve every test in ``text`` and return the formatted output."""
    tokens = iter(text.split())
    count = int(next(tokens))
    lines = []
    for number in range(1, count + 1):
        first = ClockTime(*(int(next(tokens)) for _ in range(4)))
        second = ClockTime(*(int(next(tokens)) for _ in range(4)))
        radius = float(next(tokens))
        lines.append(f"{number}. {sector_area(first, second, radius):.3f}\n")
    return "".join(lines)


def main(argv: list[str] | None = None) -> int:
    """Read ``clock.in`` (or the first argument) and write ``clock.out``."""
    args = sys.argv[1:] if argv is None else argv
    source = args[0] if args else "clock.in"
    target = args[1] if len(args) > 1 else "clock.out"
    try:
        with open(source, encoding="utf-8") as infile:
            text = infile.read()
        with open(target, "w", encoding="utf-8") as outfile:
            outfile.write(solve(text))
    except OSError:
        print("Error opening files!", file=sys.stderr)
        return 1
    return 0


if __name__ == "__main__":
    sys.exit(main())