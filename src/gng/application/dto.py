"""Data Transfer Objects — plain containers that cross layer boundaries.

DTOs carry data between the CLI and application layers without
exposing domain internals. Amounts are pre-formatted strings.
"""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class SaleLineSpec:
    """Input: a product (by name or id) and how many units were sold."""

    product: str
    quantity: int


@dataclass(frozen=True)
class SaleLineDTO:
    product_name: str
    quantity: int


@dataclass(frozen=True)
class SaleDTO:
    """Output: a recorded sale as displayed to the user."""

    id: str
    recorded_at: str
    items: list[SaleLineDTO]
    revenue: str  # formatted, e.g. "₹75.00"
    cost: str
    profit: str

    @property
    def summary(self) -> str:
        return ", ".join(f"{i.product_name} x{i.quantity}" for i in self.items)


@dataclass(frozen=True)
class SaleQuoteDTO:
    revenue: str
    cost: str
    profit: str


@dataclass(frozen=True)
class InventoryLineDTO:
    product_id: str
    product_name: str
    sku: str
    inventory: int
    unit_price: str
    unit_cost: str
    capacity: int


@dataclass(frozen=True)
class StockLevelDTO:
    product_name: str
    in_stock: int
    capacity: int
    percent_available: int


@dataclass(frozen=True)
class DailyTrendDTO:
    day: str
    revenue: str
    cost: str
    profit: str


@dataclass(frozen=True)
class DashboardDTO:
    """Output: the KPI block plus the side panels of the dashboard."""

    income: str
    expenses: str
    profit: str
    target: str
    target_remaining: str
    wax_spend: str
    perfume_spend: str
    stock_levels: list[StockLevelDTO]
    recent_sales: list[SaleDTO]
