"""Application service: Add Product use case.

Turns the raw fields of the "new product" form into a catalogue entry.
The id is derived from the name, so adding a product whose name slugs
to an existing id replaces that entry in place.
"""

from __future__ import annotations

import math
import re
from decimal import Decimal

from gng.application.store import InventoryStore
from gng.domain.exceptions import ValidationError
from gng.domain.model.product import DEFAULT_STOCK_CAPACITY, Product
from gng.domain.model.value_objects import Money, to_decimal

Number = int | float | str | Decimal


def product_id_for(name: str) -> str:
    return re.sub(r"\s+", "-", name.strip().lower())


class AddProductHandler:

    def __init__(self, store: InventoryStore) -> None:
        self._store = store

    def handle(
        self,
        name: str,
        unit_price: Number,
        wax_cost: Number = 0,
        perfume_cost: Number = 0,
        sku: str | None = None,
        capacity: Number = DEFAULT_STOCK_CAPACITY,
        starting_inventory: Number = 0,
    ) -> Product:
        """Add (or replace) a product built from form input.

        Amounts are clamped at zero, unit cost is wax + perfume, capacity
        is at least 1 and the starting inventory is floored to whole units.
        """
        if not name or not name.strip():
            raise ValidationError("Product name is required")

        wax = Money.clamped(wax_cost)
        perfume = Money.clamped(perfume_cost)
        product = Product(
            id=product_id_for(name),
            name=name.strip(),
            sku=sku.strip() if sku and sku.strip() else None,
            inventory=max(0, math.floor(to_decimal(starting_inventory))),
            unit_price=Money.clamped(unit_price),
            wax_cost_per_unit=wax,
            perfume_cost_per_unit=perfume,
            unit_cost=wax + perfume,
            stock_capacity=max(1, math.floor(to_decimal(capacity))),
        )
        self._store.upsert_product(product)
        return product
