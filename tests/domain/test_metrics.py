"""Unit tests for the derived metrics service."""

from dataclasses import replace
from datetime import datetime, timezone
from decimal import Decimal

from gng.domain.model.sale import SaleItem
from gng.domain.model.snapshot import StoreSnapshot
from gng.domain.model.value_objects import Money
from gng.domain.service.metrics import compute_metrics

NOW = datetime(2026, 3, 1, 12, 0, tzinfo=timezone.utc)


class TestComputeMetrics:

    def test_empty_history(self):
        metrics = compute_metrics(StoreSnapshot.default())
        assert metrics.income == Money.zero()
        assert metrics.expenses == Money.zero()
        assert metrics.profit == Decimal("0")
        assert metrics.target_remaining == Money.of(5000)

    def test_sums_all_sales(self):
        snap, _ = StoreSnapshot.default().record_sale([SaleItem("laddoo", 5)], NOW)
        snap, _ = snap.record_sale([SaleItem("modak", 2)], NOW)
        metrics = compute_metrics(snap)
        assert metrics.income == Money.of(111)
        assert metrics.expenses == Money.of(44)
        assert metrics.profit == metrics.income.difference(metrics.expenses)
        assert metrics.target_remaining == Money.of(4889)

    def test_target_remaining_floors_at_zero(self):
        snap, _ = StoreSnapshot.default().record_sale([SaleItem("laddoo", 5)], NOW)
        metrics = compute_metrics(snap.with_target(50))
        assert metrics.target_remaining == Money.zero()

    def test_profit_can_be_negative(self):
        snap = StoreSnapshot.default()
        cheap = replace(snap.get_product("laddoo"), unit_price=Money.of(1))
        snap, _ = snap.upsert_product(cheap).record_sale([SaleItem("laddoo", 2)], NOW)
        assert compute_metrics(snap).profit == Decimal("-10")
