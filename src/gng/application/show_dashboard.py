"""Application service: Show Dashboard use case (query).

Collects the KPI block (income, expenses, profit, target remaining),
stock levels, the raw-material split and the most recent orders.
"""

from __future__ import annotations

from gng.application.dto import DashboardDTO, StockLevelDTO
from gng.application.show_sales import to_sale_dto
from gng.application.store import InventoryStore
from gng.domain.model.value_objects import format_amount
from gng.domain.service.reporting import (
    raw_material_breakdown,
    recent_sales,
    stock_level,
)


class ShowDashboardHandler:

    def __init__(self, store: InventoryStore) -> None:
        self._store = store

    def handle(self) -> DashboardDTO:
        snapshot = self._store.snapshot
        metrics = self._store.metrics
        materials = raw_material_breakdown(snapshot)

        levels = []
        for product in snapshot.products:
            level = stock_level(product)
            levels.append(
                StockLevelDTO(
                    product_name=level.product_name,
                    in_stock=level.in_stock,
                    capacity=level.capacity,
                    percent_available=round(level.available_ratio * 100),
                )
            )

        return DashboardDTO(
            income=str(metrics.income),
            expenses=str(metrics.expenses),
            profit=format_amount(metrics.profit),
            target=str(snapshot.target),
            target_remaining=str(metrics.target_remaining),
            wax_spend=format_amount(materials.wax),
            perfume_spend=format_amount(materials.perfume),
            stock_levels=levels,
            recent_sales=[to_sale_dto(s, snapshot) for s in recent_sales(snapshot)],
        )
