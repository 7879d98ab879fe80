"""Solutions to the knapsack problem and their printed report."""

from __future__ import annotations

import sys
from dataclasses import dataclass
from typing import TextIO

from mckp.item import Item


@dataclass(frozen=True)
class Solution:
    """The best combination found by a solver, with search statistics."""

    items: tuple[Item, ...]
    value: float
    combinations_checked: int
    valid_combinations: int | None = None

    def total_weight(self) -> float:
        """Sum of the weights of the chosen items."""
        return sum((item.weight for item in self.items), 0.0)


def print_solution(
    solution: Solution,
    title: str,
    elapsed_ms: int,
    out: TextIO | None = None,
) -> None:
    """Write the result block for a solver run."""
    out = out if out is not None else sys.stdout
    out.write(f"\n=== {title} ===\n")
    out.write(f"Execution time: {elapsed_ms} milliseconds\n")
    out.write(f"Total combinations checked: {solution.combinations_checked}\n")
    if solution.valid_combinations is not None:
        out.write(f"Valid combinations checked: {solution.valid_combinations}\n")

    if not solution.items:
        out.write("No valid combination found.\n")
        return

    out.write("\nBest combination found:\n")
    for item in solution.items:
        out.write(
            f"- {item.name} (Weight: {item.weight:g} kg, Value: {item.price:g} CZK, "
            f"Class: {item.class_id})\n"
        )
    out.write(f"\nTotal value: {solution.value:g} CZK\n")
    out.write(f"Total weight: {solution.total_weight():g} kg\n")