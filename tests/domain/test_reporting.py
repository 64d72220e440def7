"""Unit tests for the dashboard read models."""

from dataclasses import replace
from datetime import date, datetime, timedelta, timezone
from decimal import Decimal

from gng.domain.model.product import Product
from gng.domain.model.sale import SaleItem
from gng.domain.model.snapshot import StoreSnapshot
from gng.domain.model.value_objects import Money
from gng.domain.service.reporting import (
    daily_trend,
    raw_material_breakdown,
    recent_sales,
    stock_level,
)

DAY_ONE = datetime(2026, 3, 1, 9, 30, tzinfo=timezone.utc)
DAY_TWO = DAY_ONE + timedelta(days=1)


def _snapshot_with_sales() -> StoreSnapshot:
    snap = StoreSnapshot.default()
    snap, _ = snap.record_sale([SaleItem("laddoo", 2)], DAY_ONE)
    snap, _ = snap.record_sale([SaleItem("modak", 1)], DAY_TWO)
    snap, _ = snap.record_sale([SaleItem("laddoo", 1)], DAY_ONE + timedelta(hours=3))
    return snap


class TestRecentSales:

    def test_limits_and_keeps_order(self):
        snap = StoreSnapshot.default()
        for _ in range(7):
            snap, _ = snap.record_sale([SaleItem("laddoo", 1)], DAY_ONE)
        recent = recent_sales(snap)
        assert len(recent) == 5
        assert recent == list(snap.sales[:5])


class TestDailyTrend:

    def test_groups_by_day_oldest_first(self):
        days = daily_trend(_snapshot_with_sales())
        assert [d.day for d in days] == [date(2026, 3, 1), date(2026, 3, 2)]
        assert days[0].revenue == Money.of(45)
        assert days[0].cost == Money.of(18)
        assert days[0].profit == Decimal("27")
        assert days[1].revenue == Money.of(18)

    def test_empty_history(self):
        assert daily_trend(StoreSnapshot.default()) == []


class TestRawMaterialBreakdown:

    def test_uses_cost_components(self):
        spend = raw_material_breakdown(_snapshot_with_sales())
        assert spend.wax == Decimal("4.2") * 3 + Decimal("4.9")
        assert spend.perfume == Decimal("1.8") * 3 + Decimal("2.1")

    def test_falls_back_to_seventy_thirty_split(self):
        plain = Product(
            id="plain", name="Plain", inventory=5,
            unit_price=Money.of(10), unit_cost=Money.of(10),
        )
        snap = StoreSnapshot.default().upsert_product(plain)
        snap, _ = snap.record_sale([SaleItem("plain", 1)], DAY_ONE)
        spend = raw_material_breakdown(snap)
        assert spend.wax == Decimal("7")
        assert spend.perfume == Decimal("3")
        assert spend.total == Decimal("10")


class TestStockLevel:

    def test_within_capacity(self):
        level = stock_level(StoreSnapshot.default().get_product("laddoo"))
        assert level.in_stock == 17
        assert level.sold_through == 3
        assert level.capacity == 20
        assert level.available_ratio == 17 / 20

    def test_clamped_to_capacity(self):
        over = replace(StoreSnapshot.default().get_product("laddoo"), inventory=50)
        level = stock_level(over)
        assert level.in_stock == 20
        assert level.sold_through == 0

    def test_default_capacity(self):
        p = Product(
            id="x", name="X", inventory=50,
            unit_price=Money.of(1), unit_cost=Money.of(1),
        )
        assert stock_level(p).capacity == 200
