"""A table of knapsack items, optionally filled with random data."""

from __future__ import annotations

import random
import sys
from collections.abc import Iterable, Iterator
from typing import TextIO

from mckp.item import Item

MIN_RANDOM_VALUE = 1.0
MAX_RANDOM_VALUE = 50.0
ITEMS_PER_CLASS = 3
DEFAULT_CLASS_COUNT = 10
WEIGHT_PER_CLASS = 20


class Table:
    """An ordered collection of items."""

    def __init__(
        self,
        items: Iterable[Item] | None = None,
        rng: random.Random | None = None,
    ) -> None:
        self._items: list[Item] = list(items) if items is not None else []
        self._rng = rng if rng is not None else random.Random()

    @property
    def items(self) -> tuple[Item, ...]:
        """The items in table order."""
        return tuple(self._items)

    def _random_weight(self) -> float:
        return self._rng.uniform(MIN_RANDOM_VALUE, MAX_RANDOM_VALUE)

    def _random_price(self) -> float:
        return self._rng.uniform(MIN_RANDOM_VALUE, MAX_RANDOM_VALUE)

    def generate_items(self, class_amount: int | None = None) -> None:
        """Replace the contents with random items, three per class.

        Without an argument ten classes are made and items are named
        ``Item<class>_cls<n>``. With ``class_amount`` the number of classes is
        ``class_amount // 20`` and items are named ``Item<n>_cls<class>``.
        """
        self._items.clear()
        if class_amount is None:
            for cls in range(DEFAULT_CLASS_COUNT):
                for n in range(ITEMS_PER_CLASS):
                    weight = self._random_weight()
                    price = self._random_price()
                    self._items.append(Item(f"Item{cls}_cls{n}", price, weight, cls + 1))
            return

        for cls in range(int(class_amount) // WEIGHT_PER_CLASS):
            for n in range(ITEMS_PER_CLASS):
                weight = self._random_weight()
                price = self._random_price()
                self._items.append(Item(f"Item{n}_cls{cls}", price, weight, cls + 1))

    def display_items(self, out: TextIO | None = None) -> None:
        """Write a numbered listing of the items."""
        out = out if out is not None else sys.stdout
        if not self._items:
            out.write("Table is empty.\n")
            return
        out.write(f"There are {len(self._items)} items:\n")
        for number, item in enumerate(self._items, start=1):
            out.write(
                f"{number}. {item.name}(weight: {item.weight:g} kg, "
                f"price: {item.price:g} CZK\n"
            )

    def __len__(self) -> int:
        return len(self._items)

    def __iter__(self) -> Iterator[Item]:
        return iter(self._items)