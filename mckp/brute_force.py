"""Exhaustive search that takes at most one item from each class."""

from __future__ import annotations

import sys
import time
from collections import defaultdict
from collections.abc import Sequence
from typing import TextIO

from mckp.item import Item
from mckp.report import Solution, print_solution
from mckp.table import Table

TITLE = "Brute Force MCKP Results"


def _group_by_class(items: Sequence[Item]) -> list[list[Item]]:
    """Items grouped by class id, groups ordered by ascending class id."""
    groups: dict[int, list[Item]] = defaultdict(list)
    for item in items:
        groups[item.class_id].append(item)
    return [groups[class_id] for class_id in sorted(groups)]


class BruteForceKnapsack:
    """Enumerates every choice of zero or one item per class within the weight limit."""

    def __init__(self, max_weight: float, table: Table | None = None) -> None:
        self.max_weight = float(max_weight)
        self.table = table if table is not None else Table()

    def _resolve_table(self, table: Table | None) -> Table:
        if table is not None:
            return table
        if not len(self.table):
            self.table.generate_items(int(self.max_weight))
        return self.table

    def solve(self, table: Table | None = None) -> Solution:
        """Find the most valuable combination; the solver's own table is used if none is given."""
        groups = _group_by_class(self._resolve_table(table).items)
        best_items: tuple[Item, ...] = ()
        best_value = 0.0
        checked = 0
        chosen: list[Item] = []

        def explore(group_index: int, weight: float, value: float) -> None:
            nonlocal best_items, best_value, checked
            if group_index >= len(groups):
                checked += 1
                if value > best_value:
                    best_value = value
                    best_items = tuple(chosen)
                return

            explore(group_index + 1, weight, value)
            for item in groups[group_index]:
                if weight + item.weight <= self.max_weight:
                    chosen.append(item)
                    explore(group_index + 1, weight + item.weight, value + item.price)
                    chosen.pop()

        explore(0, 0.0, 0.0)
        return Solution(best_items, best_value, checked)

    def run(self, table: Table | None = None, out: TextIO | None = None) -> Solution:
        """List the items, solve, and write the timed report."""
        out = out if out is not None else sys.stdout
        table = self._resolve_table(table)
        out.write(f"Generated {len(table)} items for MCKP problem.\n\n")
        table.display_items(out)

        start = time.perf_counter()
        solution = self.solve(table)
        elapsed_ms = int((time.perf_counter() - start) * 1000)

        print_solution(solution, TITLE, elapsed_ms, out)
        return solution