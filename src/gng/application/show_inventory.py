"""Application service: Show Inventory use case (query)."""

from __future__ import annotations

from gng.application.dto import InventoryLineDTO
from gng.application.store import InventoryStore


class ShowInventoryHandler:

    def __init__(self, store: InventoryStore) -> None:
        self._store = store

    def handle(self) -> list[InventoryLineDTO]:
        return [
            InventoryLineDTO(
                product_id=p.id,
                product_name=p.name,
                sku=p.sku or "-",
                inventory=p.inventory,
                unit_price=str(p.unit_price),
                unit_cost=str(p.effective_unit_cost),
                capacity=p.capacity,
            )
            for p in self._store.snapshot.products
        ]
