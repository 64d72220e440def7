"""StoreSnapshot aggregate — the whole business state at one point in time.

The snapshot owns every Product and Sale. It is immutable: each
operation below validates against the current state and returns a new
snapshot, so a failed operation leaves the caller's snapshot untouched.
"""

from __future__ import annotations

from dataclasses import dataclass, replace
from datetime import datetime
from decimal import Decimal
from typing import Iterable, Iterator

from gng.domain.exceptions import (
    EntityNotFoundError,
    InsufficientStockError,
    ValidationError,
)
from gng.domain.model.product import Product
from gng.domain.model.sale import Sale, SaleItem
from gng.domain.model.value_objects import Money, Quantity

DEFAULT_TARGET = Money(Decimal("5000"))


@dataclass(frozen=True)
class StoreSnapshot:
    products: tuple[Product, ...]
    sales: tuple[Sale, ...]  # most recent first
    target: Money

    @staticmethod
    def default() -> StoreSnapshot:
        """The seed catalogue used when nothing has been stored yet."""
        return StoreSnapshot(
            products=(
                Product(
                    id="laddoo",
                    name="Laddoo Candle",
                    sku="LAD-001",
                    inventory=17,
                    unit_price=Money.of(15),
                    unit_cost=Money.of(6),
                    wax_cost_per_unit=Money.of("4.2"),
                    perfume_cost_per_unit=Money.of("1.8"),
                    stock_capacity=20,
                ),
                Product(
                    id="modak",
                    name="Modak Candle",
                    sku="MOD-001",
                    inventory=17,
                    unit_price=Money.of(18),
                    unit_cost=Money.of(7),
                    wax_cost_per_unit=Money.of("4.9"),
                    perfume_cost_per_unit=Money.of("2.1"),
                    stock_capacity=20,
                ),
            ),
            sales=(),
            target=DEFAULT_TARGET,
        )

    # --- Lookups --------------------------------------------------------------

    def get_product(self, product_id: str) -> Product | None:
        for product in self.products:
            if product.id == product_id:
                return product
        return None

    def find_product_by_name(self, name: str) -> Product | None:
        """Case-insensitive exact name match."""
        wanted = name.lower()
        for product in self.products:
            if product.name.lower() == wanted:
                return product
        return None

    # --- Operations -----------------------------------------------------------

    def upsert_product(self, product: Product) -> StoreSnapshot:
        """Replace the product with the same id in place, or append it."""
        products = list(self.products)
        for i, existing in enumerate(products):
            if existing.id == product.id:
                products[i] = product
                break
        else:
            products.append(product)
        return replace(self, products=tuple(products))

    def adjust_inventory(self, product_id: str, quantity: int) -> StoreSnapshot:
        """Add (or, when negative, write off) units of stock.

        Stock never drops below zero: an oversized write-off clamps.
        """
        if not isinstance(quantity, int) or isinstance(quantity, bool):
            raise ValidationError(
                f"Inventory adjustment must be an integer, got {quantity!r}"
            )
        self._require_product(product_id)
        products = tuple(
            p.adjust_inventory(quantity) if p.id == product_id else p
            for p in self.products
        )
        return replace(self, products=products)

    def with_target(self, value: int | float | str | Decimal) -> StoreSnapshot:
        """Set the revenue target; negative values clamp to zero."""
        return replace(self, target=Money.clamped(value))

    def price_sale(self, items: Iterable[SaleItem]) -> tuple[Money, Money]:
        """Revenue and cost of a draft sale, without checking stock."""
        revenue = Money.zero()
        cost = Money.zero()
        for product, quantity in self._validated_lines(items):
            revenue = revenue + product.unit_price * quantity
            cost = cost + product.effective_unit_cost * quantity
        return revenue, cost

    def record_sale(
        self, items: Iterable[SaleItem], recorded_at: datetime
    ) -> tuple[StoreSnapshot, Sale]:
        """Validate and apply a sale, returning the next snapshot and the Sale.

        Each line is checked in order for reference, quantity and then
        stock. Stock is compared with the total requested for that product
        so far, so repeating a product on several lines cannot oversell.
        """
        items = tuple(items)
        requested: dict[str, int] = {}
        for product, quantity in self._validated_lines(items):
            total = requested.get(product.id, 0) + quantity
            if total > product.inventory:
                raise InsufficientStockError(product.name, total, product.inventory)
            requested[product.id] = total

        revenue, cost = self.price_sale(items)
        products = tuple(
            p.withdraw(requested[p.id]) if p.id in requested else p
            for p in self.products
        )
        sale = Sale(
            id=self.next_sale_id(recorded_at),
            recorded_at=recorded_at,
            items=items,
            revenue=revenue,
            cost=cost,
        )
        return replace(self, products=products, sales=(sale,) + self.sales), sale

    def next_sale_id(self, recorded_at: datetime) -> str:
        """Time-based id, suffixed when another sale shares the millisecond."""
        base = f"sale_{int(recorded_at.timestamp() * 1000)}"
        taken = {sale.id for sale in self.sales}
        candidate = base
        n = 1
        while candidate in taken:
            candidate = f"{base}_{n}"
            n += 1
        return candidate

    # --- Internal helpers -----------------------------------------------------

    def _require_product(self, product_id: str) -> Product:
        product = self.get_product(product_id)
        if product is None:
            raise EntityNotFoundError(f"Product not found: '{product_id}'")
        return product

    def _validated_lines(
        self, items: Iterable[SaleItem]
    ) -> Iterator[tuple[Product, int]]:
        """Yield each line once its reference and quantity check out.

        Lines are produced one at a time so callers can run their own
        checks on a line before the next one is looked at.
        """
        empty = True
        for item in items:
            product = self._require_product(item.product_id)
            yield product, Quantity(item.quantity).value
            empty = False
        if empty:
            raise ValidationError("Sale must contain at least one item")
