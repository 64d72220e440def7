"""Sale records.

A Sale is a historical fact: revenue and cost are priced once, when the
sale is recorded, and never recomputed from the catalogue again.
"""

from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime
from decimal import Decimal

from gng.domain.model.value_objects import Money


@dataclass(frozen=True)
class SaleItem:
    """One line of a sale: which product and how many units."""

    product_id: str
    quantity: int


@dataclass(frozen=True)
class Sale:
    id: str
    recorded_at: datetime
    items: tuple[SaleItem, ...]
    revenue: Money
    cost: Money  # priced with the effective unit cost at sale time

    @property
    def profit(self) -> Decimal:
        return self.revenue.difference(self.cost)

    @property
    def units(self) -> int:
        return sum(item.quantity for item in self.items)
