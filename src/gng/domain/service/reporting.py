"""Domain service: read models behind the dashboard panels.

Recent orders, the daily sales trend, the wax/perfume spend split and
per-product stock levels. All are read-only views over a snapshot.
"""

from __future__ import annotations

from dataclasses import dataclass
from datetime import date, timezone
from decimal import Decimal

from gng.domain.model.product import Product
from gng.domain.model.sale import Sale
from gng.domain.model.snapshot import StoreSnapshot
from gng.domain.model.value_objects import Money

RECENT_SALES_LIMIT = 5

# Split of unit_cost used when a product has no cost breakdown.
WAX_SHARE = Decimal("0.7")
PERFUME_SHARE = Decimal("0.3")


@dataclass(frozen=True)
class DailyTotals:
    day: date
    revenue: Money
    cost: Money

    @property
    def profit(self) -> Decimal:
        return self.revenue.difference(self.cost)


@dataclass(frozen=True)
class RawMaterialSpend:
    wax: Decimal
    perfume: Decimal

    @property
    def total(self) -> Decimal:
        return self.wax + self.perfume


@dataclass(frozen=True)
class StockLevel:
    product_id: str
    product_name: str
    in_stock: int
    sold_through: int
    capacity: int

    @property
    def available_ratio(self) -> float:
        return self.in_stock / max(1, self.in_stock + self.sold_through)


def recent_sales(snapshot: StoreSnapshot, limit: int = RECENT_SALES_LIMIT) -> list[Sale]:
    return list(snapshot.sales[:limit])


def daily_trend(snapshot: StoreSnapshot) -> list[DailyTotals]:
    """Revenue and cost per UTC calendar day, oldest day first."""
    by_day: dict[date, tuple[Money, Money]] = {}
    for sale in snapshot.sales:
        day = sale.recorded_at.astimezone(timezone.utc).date()
        revenue, cost = by_day.get(day, (Money.zero(), Money.zero()))
        by_day[day] = (revenue + sale.revenue, cost + sale.cost)
    return [
        DailyTotals(day=day, revenue=revenue, cost=cost)
        for day, (revenue, cost) in sorted(by_day.items())
    ]


def raw_material_breakdown(snapshot: StoreSnapshot) -> RawMaterialSpend:
    """Wax vs perfume spend across all sales, priced from the current catalogue.

    Lines whose product has since disappeared are skipped.
    """
    wax = Decimal("0")
    perfume = Decimal("0")
    for sale in snapshot.sales:
        for item in sale.items:
            product = snapshot.get_product(item.product_id)
            if product is None:
                continue
            wax_unit, perfume_unit = _material_unit_costs(product)
            wax += wax_unit * item.quantity
            perfume += perfume_unit * item.quantity
    return RawMaterialSpend(wax=wax, perfume=perfume)


def stock_level(product: Product) -> StockLevel:
    capacity = product.capacity
    in_stock = max(0, min(product.inventory, capacity))
    return StockLevel(
        product_id=product.id,
        product_name=product.name,
        in_stock=in_stock,
        sold_through=max(0, capacity - in_stock),
        capacity=capacity,
    )


def _material_unit_costs(product: Product) -> tuple[Decimal, Decimal]:
    if product.wax_cost_per_unit is not None:
        wax = product.wax_cost_per_unit.amount
    else:
        wax = product.unit_cost.amount * WAX_SHARE
    if product.perfume_cost_per_unit is not None:
        perfume = product.perfume_cost_per_unit.amount
    else:
        perfume = product.unit_cost.amount * PERFUME_SHARE
    return wax, perfume
