"""Exhaustive search over every subset of the items."""

from __future__ import annotations

import sys
import time
from typing import TextIO

from mckp.item import Item
from mckp.report import Solution, print_solution
from mckp.table import Table

TITLE = "Pure Brute Force MCKP Results"
MAX_MASK_BITS = 64


class PureBruteForce:
    """Tries all 2**n subsets, rejecting repeated classes and overweight ones."""

    def __init__(self, max_weight: float, table: Table | None = None) -> None:
        self.max_weight = float(max_weight)
        self.table = table if table is not None else Table()

    def _resolve_table(self, table: Table | None) -> Table:
        if table is not None:
            return table
        if not len(self.table):
            self.table.generate_items(int(self.max_weight))
        return self.table

    def _evaluate(self, mask: int, items: tuple[Item, ...]) -> tuple[list[Item], float] | None:
        """Chosen items and value for a subset, or None if the subset is invalid."""
        weight = 0.0
        value = 0.0
        classes: set[int] = set()
        chosen: list[Item] = []
        for index, item in enumerate(items):
            if not (mask >> index) & 1:
                continue
            if item.class_id in classes:
                return None
            weight += item.weight
            if weight > self.max_weight:
                return None
            classes.add(item.class_id)
            value += item.price
            chosen.append(item)
        return chosen, value

    def solve(self, table: Table | None = None) -> Solution:
        """Find the most valuable valid subset; the solver's own table is used if none is given."""
        items = self._resolve_table(table).items
        considered = items[:MAX_MASK_BITS]
        total = 1 << len(items)

        best_items: tuple[Item, ...] = ()
        best_value = 0.0
        valid = 0
        for mask in range(total):
            result = self._evaluate(mask, considered)
            if result is None:
                continue
            valid += 1
            chosen, value = result
            if value > best_value:
                best_value = value
                best_items = tuple(chosen)

        return Solution(best_items, best_value, total, valid)

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