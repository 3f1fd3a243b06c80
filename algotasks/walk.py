"""Number of steps needed to walk 3000 units, capped at 15."""

from __future__ import annotations

import math
import sys

DISTANCE = 3000.0
MAX_STEPS = 15


def steps_needed(step: float) -> int:
    """Return ``ceil(3000 / step)`` capped at 15; ``step`` must lie in [1, 3000]."""
    if step < 1 or step > DISTANCE:
        raise ValueError(f"step {step} out of range")
    return min(math.ceil(DISTANCE / step), MAX_STEPS)


def main(argv: list[str] | None = None) -> int:
    """Read step lengths from standard input and print the step counts."""
    tokens = iter(sys.stdin.read().split())
    cases = int(next(tokens))
    for _ in range(cases):
        try:
            print(steps_needed(float(next(tokens))))
        except ValueError:
            print("error")
            return -1
    return 0


if __name__ == "__main__":
    sys.exit(main())