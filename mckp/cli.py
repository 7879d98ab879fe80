"""Command line entry point comparing both exhaustive solvers."""

from __future__ import annotations

import argparse
import random
from collections.abc import Sequence

from mckp.brute_force import BruteForceKnapsack
from mckp.pure_brute_force import PureBruteForce
from mckp.table import WEIGHT_PER_CLASS, Table

DEFAULT_CLASSES = 9


def _parse_args(argv: Sequence[str] | None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(
        prog="mckp",
        description="Solve a random multiple-choice knapsack problem two ways.",
    )
    parser.add_argument(
        "--classes",
        type=int,
        default=DEFAULT_CLASSES,
        help="number of item classes (default: %(default)s)",
    )
    parser.add_argument("--seed", type=int, default=None, help="random seed")
    return parser.parse_args(argv)


def main(argv: Sequence[str] | None = None) -> int:
    """Generate items, then run the grouped and the pure brute-force solvers."""
    args = _parse_args(argv)
    if args.classes < 0:
        raise SystemExit("mckp: --classes must not be negative")

    capacity = args.classes * WEIGHT_PER_CLASS
    table = Table(rng=random.Random(args.seed))
    table.generate_items(capacity)

    BruteForceKnapsack(capacity).run(table)
    PureBruteForce(capacity).run(table)
    return 0


if __name__ == "__main__":
    raise SystemExit(main())