"""Product entity.

Products are the sellable catalogue entries. Their inventory moves only
through restocking and sales; everything else about them is replaced
wholesale by an upsert.
"""

from __future__ import annotations

from dataclasses import dataclass, replace
from decimal import Decimal

from gng.domain.exceptions import InsufficientStockError, ValidationError
from gng.domain.model.value_objects import Money

DEFAULT_STOCK_CAPACITY = 200


@dataclass(frozen=True)
class Product:
    """A candle in the catalogue.

    Frozen: every change produces a new ``Product`` so that a snapshot
    holding the old one never sees it move.
    """

    id: str
    name: str
    inventory: int
    unit_price: Money
    unit_cost: Money
    sku: str | None = None
    wax_cost_per_unit: Money | None = None
    perfume_cost_per_unit: Money | None = None
    stock_capacity: int | None = None

    def __post_init__(self) -> None:
        if not self.id or not self.id.strip():
            raise ValidationError("Product id is required")
        if not self.name or not self.name.strip():
            raise ValidationError("Product name is required")
        if not isinstance(self.inventory, int) or isinstance(self.inventory, bool):
            raise ValidationError(
                f"Inventory must be an integer, got {type(self.inventory).__name__}"
            )
        if self.inventory < 0:
            raise ValidationError(f"Inventory for {self.name} cannot be negative")

    @property
    def capacity(self) -> int:
        if self.stock_capacity is None:
            return DEFAULT_STOCK_CAPACITY
        return self.stock_capacity

    @property
    def effective_unit_cost(self) -> Money:
        """Raw-material cost used when a unit is sold.

        The wax + perfume breakdown wins when it adds up to something;
        otherwise the flat ``unit_cost`` applies.
        """
        breakdown = Decimal("0")
        for part in (self.wax_cost_per_unit, self.perfume_cost_per_unit):
            if part is not None:
                breakdown += part.amount
        if breakdown > 0:
            return Money(breakdown, self.unit_cost.currency)
        return self.unit_cost

    def adjust_inventory(self, delta: int) -> Product:
        """Return a copy with ``delta`` units added, floored at zero."""
        return replace(self, inventory=max(0, self.inventory + delta))

    def withdraw(self, quantity: int) -> Product:
        """Return a copy with ``quantity`` units taken out of stock."""
        if quantity > self.inventory:
            raise InsufficientStockError(self.name, quantity, self.inventory)
        return replace(self, inventory=self.inventory - quantity)
