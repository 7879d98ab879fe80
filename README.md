# mckp

This package has two exhaustive solvers for the multiple-choice knapsack
problem (MCKP). The problem is to choose at most one item from each class.
The total weight must stay within a limit, and the total value should be as
large as possible.

- `mckp.brute_force.BruteForceKnapsack` goes through the classes in
  ascending class id. For each class it either skips the class or takes one
  of its items. It drops any branch that would go over the weight limit.
- `mckp.pure_brute_force.PureBruteForce` enumerates all 2^n subsets of the
  items. It rejects any subset that holds two items of the same class or
  that goes over the weight limit.

Both solvers find the same best value. They differ in how many combinations
they examine, so the number of combinations checked differs too.

## Installation

```
pip install .
```

To install the test dependencies as well:

```
pip install ".[test]"
```

## Command line

```
mckp [--classes N] [--seed S]
```

The command builds a random table with `N` classes and three items per
class. `N` is 9 by default. The weight limit is `N * 20`. The command runs
`BruteForceKnapsack` on this table and then runs `PureBruteForce` on the
same table. For each solver it prints:

- the item listing,
- the execution time in milliseconds,
- the number of combinations checked,
- the best combination found, with its total value and total weight.

The pure solver also prints how many of those combinations were valid.
`--seed` makes the random table reproducible. A negative `--classes` is
rejected.

## Library use

```python
from mckp.item import Item
from mckp.table import Table
from mckp.brute_force import BruteForceKnapsack
from mckp.pure_brute_force import PureBruteForce

table = Table([
    Item("tent", 30.0, 12.0, 1),   # name, price, weight, class_id
    Item("tarp", 10.0, 3.0, 1),
    Item("stove", 25.0, 4.0, 2),
])

solution = BruteForceKnapsack(10.0).solve(table)
print(solution.value, solution.total_weight())   # 35.0 7.0

PureBruteForce(10.0).run(table)   # writes a full report to stdout
```

### Solvers

- `solve(table=None)` returns a `mckp.report.Solution`. The solution has
  these attributes:
  - `items`: the chosen items, as a tuple,
  - `value`,
  - `combinations_checked`,
  - `valid_combinations`: set only by `PureBruteForce`,
  - `total_weight()`: a method that returns the weight of the chosen items.
- `run(table=None, out=None)` lists the items, solves, and writes a timed
  report to `out`, which is stdout by default. It then returns the solution.
- If you pass no table, the solver uses its own table. If that table is
  empty, the solver first fills it with `generate_items(int(max_weight))`.
- An empty combination is reported as "No valid combination found."

### Tables

`Table(items=None, rng=None)` holds items in order. It supports `len()` and
iteration, and it exposes `items` as a tuple. `display_items(out=None)`
writes a numbered listing.

`generate_items(class_amount=None)` replaces the contents with random
items, three per class. Weights and prices are drawn uniformly from 1 to
50, using the table's `random.Random` instance.

- With `class_amount`, there are `class_amount // 20` classes.
- Without it, there are ten classes.

`mckp.report.print_solution(solution, title, elapsed_ms, out=None)` writes
the result block that both solvers use.

## Limits

- Both solvers are exhaustive, and their running time grows exponentially
  with the number of items.
- `PureBruteForce` enumerates 2^n subsets and is only practical for small
  tables.
- The package reads no input files and stores nothing. Items come only from
  code or from random generation.

## Tests

```
pytest
```