"""Application service: Record Sale use case.

Resolves the products named on each line, then lets the store validate
stock and apply the sale as one atomic step.
"""

from __future__ import annotations

from gng.application.dto import SaleDTO, SaleLineSpec
from gng.application.resolve import resolve_product
from gng.application.show_sales import to_sale_dto
from gng.application.store import InventoryStore
from gng.domain.model.sale import SaleItem


def to_sale_items(store: InventoryStore, specs: list[SaleLineSpec]) -> list[SaleItem]:
    return [
        SaleItem(product_id=resolve_product(store, spec.product).id, quantity=spec.quantity)
        for spec in specs
    ]


class RecordSaleHandler:

    def __init__(self, store: InventoryStore) -> None:
        self._store = store

    def handle(self, line_specs: list[SaleLineSpec]) -> SaleDTO:
        """Record a sale.

        Steps:
        1. Resolve each product name or id (fail if not found).
        2. Let the store check quantities and stock, price the sale and
           decrement inventory.
        3. Return a DTO of the frozen sale.
        """
        sale = self._store.record_sale(to_sale_items(self._store, line_specs))
        return to_sale_dto(sale, self._store.snapshot)
