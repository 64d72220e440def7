"""Application service: Show Sales use case (query).

Backs the "recent orders" list and the sales trend chart.
"""

from __future__ import annotations

from gng.application.dto import DailyTrendDTO, SaleDTO, SaleLineDTO
from gng.application.store import InventoryStore
from gng.domain.model.sale import Sale
from gng.domain.model.snapshot import StoreSnapshot
from gng.domain.model.value_objects import format_amount
from gng.domain.service.reporting import RECENT_SALES_LIMIT, daily_trend, recent_sales


def to_sale_dto(sale: Sale, snapshot: StoreSnapshot) -> SaleDTO:
    """Map a Sale for display, naming lines after the current catalogue."""
    lines = []
    for item in sale.items:
        product = snapshot.get_product(item.product_id)
        name = product.name if product is not None else item.product_id
        lines.append(SaleLineDTO(product_name=name, quantity=item.quantity))
    return SaleDTO(
        id=sale.id,
        recorded_at=sale.recorded_at.strftime("%Y-%m-%d %H:%M UTC"),
        items=lines,
        revenue=str(sale.revenue),
        cost=str(sale.cost),
        profit=format_amount(sale.profit),
    )


class ShowSalesHandler:

    def __init__(self, store: InventoryStore) -> None:
        self._store = store

    def handle(self, limit: int = RECENT_SALES_LIMIT) -> list[SaleDTO]:
        snapshot = self._store.snapshot
        return [to_sale_dto(sale, snapshot) for sale in recent_sales(snapshot, limit)]

    def trend(self) -> list[DailyTrendDTO]:
        return [
            DailyTrendDTO(
                day=totals.day.isoformat(),
                revenue=str(totals.revenue),
                cost=str(totals.cost),
                profit=format_amount(totals.profit),
            )
            for totals in daily_trend(self._store.snapshot)
        ]
