"""Application service: Quote Sale use case (query).

Prices a draft sale the way it would be recorded, without touching
stock. Used to preview revenue, cost and profit before saving.
"""

from __future__ import annotations

from gng.application.dto import SaleLineSpec, SaleQuoteDTO
from gng.application.record_sale import to_sale_items
from gng.application.store import InventoryStore
from gng.domain.model.value_objects import format_amount


class QuoteSaleHandler:

    def __init__(self, store: InventoryStore) -> None:
        self._store = store

    def handle(self, line_specs: list[SaleLineSpec]) -> SaleQuoteDTO:
        items = to_sale_items(self._store, line_specs)
        revenue, cost = self._store.snapshot.price_sale(items)
        return SaleQuoteDTO(
            revenue=str(revenue),
            cost=str(cost),
            profit=format_amount(revenue.difference(cost)),
        )
