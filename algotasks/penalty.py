"""Number of matches in a tournament with groups and a knockout stage."""

from __future__ import annotations

import sys
from dataclasses import dataclass

SENTINEL = (-1, -1, -1, -1)


@dataclass(frozen=True)
class Tournament:
    """``groups`` groups of ``teams``; ``advancing`` go on from each; ``direct`` skip the groups."""

    groups: int
    teams: int
    advancing: int
    direct: int

    def _knockout_teams(self) -> int:
        return self.groups * self.advancing + self.direct

    def _bracket_size(self) -> int:
        size = 1
        while size < self._knockout_teams():
            size *= 2
        return size

    def total_games(self) -> int:
        """Return group-stage plus knockout-stage matches."""
        group_games = self.groups * (self.teams * (self.teams - 1) // 2)
        return group_games + self._bracket_size() - 1

    def extra_teams(self) -> int:
        """Return how many byes fill the bracket to a power of two."""
        return self._bracket_size() - self._knockout_teams()

    def summary(self) -> str:
        """Return the output line ``G*A/T+D=games+extra``."""
        return (
            f"{self.groups}*{self.advancing}/{self.teams}+{self.direct}"
            f"={self.total_games()}+{self.extra_teams()}"
        )


def solve(text: str) -> str:
    """Return one summary line per input quadruple, up to ``-1 -1 -1 -1``."""
    numbers = [int(token) for token in text.split()]
    lines = []
    for start in range(0, len(numbers) - 3, 4):
        quad = tuple(numbers[start:start + 4])
        if quad == SENTINEL:
            break
        lines.append(Tournament(*quad).summary() + "\n")
    return "".join(lines)


def main(argv: list[str] | None = None) -> int:
    """Read ``wakawaka.in`` (or the first argument) and write ``wakawaka.out``."""
    args = sys.argv[1:] if argv is None else argv
    source = args[0] if args else "wakawaka.in"
    target = args[1] if len(args) > 1 else "wakawaka.out"
    try:
        with open(source, encoding="utf-8") as infile:
            text = infile.read()
        with open(target, "w", encoding="utf-8") as outfile:
            outfile.write(solve(text))
    except OSError:
        print("Error opening files!")
        return 1
    return 0


if __name__ == "__main__":
    sys.exit(main())