"""Application service: Restock use case.

Adds units to a product's inventory. A negative quantity writes stock
off; the store floors the result at zero.
"""

from __future__ import annotations

from gng.application.resolve import resolve_product
from gng.application.store import InventoryStore
from gng.domain.model.product import Product


class RestockHandler:

    def __init__(self, store: InventoryStore) -> None:
        self._store = store

    def handle(self, product: str, quantity: int) -> Product:
        """Adjust stock for the product named (or identified) by ``product``."""
        target = resolve_product(self._store, product)
        self._store.add_inventory(target.id, quantity)
        return self._store.get_product_by_id(target.id)  # type: ignore[return-value]
