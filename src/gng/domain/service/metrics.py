"""Domain service: derived financial metrics.

Pure functions of a snapshot. Nothing here is stored; callers recompute
on every read so the numbers can never drift from the sales history.
"""

from __future__ import annotations

from dataclasses import dataclass
from decimal import Decimal

from gng.domain.model.snapshot import StoreSnapshot
from gng.domain.model.value_objects import Money


@dataclass(frozen=True)
class StoreMetrics:
    income: Money
    expenses: Money
    profit: Decimal  # income - expenses, can be negative
    target_remaining: Money


def compute_metrics(snapshot: StoreSnapshot) -> StoreMetrics:
    income = Money.zero()
    expenses = Money.zero()
    for sale in snapshot.sales:
        income = income + sale.revenue
        expenses = expenses + sale.cost
    return StoreMetrics(
        income=income,
        expenses=expenses,
        profit=income.difference(expenses),
        target_remaining=Money(max(Decimal("0"), snapshot.target.difference(income))),
    )
