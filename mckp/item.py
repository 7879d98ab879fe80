"""Items that can be packed into the knapsack."""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class Item:
    """A named item with a price, a weight and the class it belongs to."""

    name: str
    price: float
    weight: float
    class_id: int