import io
import random

import pytest

from mckp.brute_force import BruteForceKnapsack
from mckp.item import Item
from mckp.table import Table

A = Item("A", 10.0, 5.0, 1)
B = Item("B", 20.0, 50.0, 1)
C = Item("C", 15.0, 10.0, 2)


def _sample_table() -> Table:
    return Table([A, B, C])


def test_picks_best_item_per_class():
    solution = BruteForceKnapsack(30).solve(_sample_table())
    assert [item.name for item in solution.items] == ["A", "C"]
    assert solution.value == A.price + C.price


def test_counts_every_complete_combination():
    solution = BruteForceKnapsack(30).solve(_sample_table())
    assert solution.combinations_checked == 4
    assert solution.valid_combinations is None


def test_tie_keeps_first_found_in_search_order():
    x = Item("X", 10.0, 1.0, 1)
    y = Item("Y", 10.0, 1.0, 2)
    solution = BruteForceKnapsack(1.5).solve(Table([x, y]))
    assert [item.name for item in solution.items] == ["Y"]


def test_nothing_fits():
    heavy = Table([Item("H", 5.0, 100.0, 1), Item("G", 7.0, 90.0, 2)])
    out = io.StringIO()
    solution = BruteForceKnapsack(10).run(heavy, out)
    assert solution.items == ()
    assert solution.value == 0.0
    assert "No valid combination found.\n" in out.getvalue()


@pytest.mark.parametrize("seed", [1, 2, 3, 4])
def test_solution_respects_constraints(seed):
    table = Table(rng=random.Random(seed))
    table.generate_items(80)
    solver = BruteForceKnapsack(80)
    solution = solver.solve(table)
    assert solution.total_weight() <= 80
    class_ids = [item.class_id for item in solution.items]
    assert len(class_ids) == len(set(class_ids))
    assert solution.value == pytest.approx(sum(item.price for item in solution.items))


def test_run_generates_own_table_when_empty():
    solver = BruteForceKnapsack(60, Table(rng=random.Random(7)))
    out = io.StringIO()
    solver.run(out=out)
    assert len(solver.table) == 9
    assert out.getvalue().startswith("Generated 9 items for MCKP problem.\n\n")


def test_run_reports_best_combination():
    out = io.StringIO()
    BruteForceKnapsack(30).run(_sample_table(), out)
    text = out.getvalue()
    assert "=== Brute Force MCKP Results ===" in text
    assert "- A (Weight: 5 kg, Value: 10 CZK, Class: 1)\n" in text
    assert "- C (Weight: 10 kg, Value: 15 CZK, Class: 2)\n" in text
    assert "Valid combinations checked" not in text