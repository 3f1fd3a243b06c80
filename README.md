# algotasks

A small collection of solutions to classic programming-contest exercises.
Each exercise is a module with a plain Python API and a console command.
The package has no dependencies outside the standard library.

## Installation

```
pip install .
```

To run the test suite:

```
pip install ".[test]"
pytest
```

## Commands

| Command              | Exercise                                                                 |
|----------------------|--------------------------------------------------------------------------|
| `algotasks-cars`     | Minimal electric-car range: longest edge of a minimum spanning tree      |
| `algotasks-clock`    | Area of the dial sector swept between the hour hands of two clocks       |
| `algotasks-crossing` | Length of the longest increasing subsequence of a port mapping           |
| `algotasks-heapsort` | Heap sort, printing the heap after building it and after each extraction |
| `algotasks-helix`    | Maximum sum walk over two sorted sequences switching at shared values    |
| `algotasks-mixtures` | Best profit from a chain of one-way potion transmutations                |
| `algotasks-penalty`  | Number of matches played in a group + knockout tournament                |
| `algotasks-walk`     | Number of steps needed to cover 3000 units, capped at 15                 |

Most commands read test cases from standard input and write answers to
standard output, for example:

```
printf '1\n3 3\n0 1 4\n1 2 2\n0 2 7\n' | algotasks-cars
```

`algotasks-clock` reads `clock.in` and writes `clock.out`, and
`algotasks-penalty` reads `wakawaka.in` and writes `wakawaka.out`, in the
current directory. Both accept an input path and an output path as optional
arguments instead:

```
algotasks-clock my-clocks.txt answers.txt
```

`algotasks-penalty` stops at the line `-1 -1 -1 -1` and writes one line per
tournament in the form `G*A/T+D=games+byes`.

## Library use

```python
from algotasks.cars import Edge, minimum_range
from algotasks.crossing import longest_increasing_subsequence
from algotasks.helix import max_path_sum
from algotasks.mixtures import max_profit
from algotasks.walk import steps_needed

minimum_range(3, [Edge(0, 1, 4), Edge(1, 2, 2), Edge(0, 2, 7)])   # 4
longest_increasing_subsequence([4, 2, 6, 3, 1, 5])                 # 3
steps_needed(250)                                                  # 12
```

Other entry points:

- `algotasks.cars.DisjointSet` – union-find with path compression and union by
  rank (`find`, `union`). `minimum_range` also accepts `(u, v, length)` tuples
  and raises `ValueError` for a city number outside `0 .. n-1`.
- `algotasks.clock.ClockTime` (with `hundredths()`), `sector_area(first, second, radius)`
  and `solve(text)`, which formats the answers as `1. 476.286` lines.
- `algotasks.heapsort.heap_sort_steps(values)` and `format_block(values)`.
- `algotasks.helix.max_path_sum(first, second)`.
- `algotasks.mixtures.topological_order(count, edges)` and
  `max_profit(prices, transmutations)`, both with 0-based edges, raising
  `CycleError` when the transmutation graph has a cycle and `ValueError` for
  an edge out of range.
- `algotasks.penalty.Tournament` with `total_games()`, `extra_teams()` and
  `summary()`, and `solve(text)`.
- `algotasks.walk.steps_needed(step)` raises `ValueError` when `step` is
  outside `[1, 3000]`.