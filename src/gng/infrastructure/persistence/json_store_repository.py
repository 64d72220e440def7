"""JSON-file-backed implementation of StoreRepository.

The file is a small key-value document; the whole snapshot lives under a
single key. Other keys in the file are left alone on write.
"""

from __future__ import annotations

import json
import logging
from datetime import datetime, timezone
from decimal import Decimal
from pathlib import Path

from gng.domain.exceptions import DomainException, PersistenceError
from gng.domain.model.product import Product
from gng.domain.model.sale import Sale, SaleItem
from gng.domain.model.snapshot import StoreSnapshot
from gng.domain.model.value_objects import Money, Quantity
from gng.domain.repository.store_repository import StoreRepository

logger = logging.getLogger(__name__)

STORAGE_KEY = "gng-store-v1"


class JsonStoreRepository(StoreRepository):

    def __init__(self, file_path: Path, key: str = STORAGE_KEY) -> None:
        self._file_path = file_path
        self._key = key

    # --- StoreRepository interface --------------------------------------------

    def load(self) -> StoreSnapshot | None:
        if not self._file_path.exists():
            return None
        try:
            record = self._load_raw().get(self._key)
            if record is None:
                return None
            return self._to_domain(record)
        except (OSError, ValueError, KeyError, TypeError, AttributeError, DomainException) as exc:
            logger.warning(
                "Ignoring unreadable store record %r in %s: %s",
                self._key, self._file_path, exc,
            )
            return None

    def save(self, snapshot: StoreSnapshot) -> None:
        try:
            try:
                document = self._load_raw() if self._file_path.exists() else {}
            except (ValueError, TypeError):
                document = {}
            document[self._key] = self._to_raw(snapshot)
            self._persist_raw(document)
        except OSError as exc:
            raise PersistenceError(f"Could not write {self._file_path}: {exc}") from exc

    # --- Serialization --------------------------------------------------------

    @staticmethod
    def _to_raw(snapshot: StoreSnapshot) -> dict:
        return {
            "products": [_product_to_raw(p) for p in snapshot.products],
            "sales": [_sale_to_raw(s) for s in snapshot.sales],
            "target": _number(snapshot.target),
        }

    @staticmethod
    def _to_domain(raw: dict) -> StoreSnapshot:
        products = raw["products"]
        sales = raw["sales"]
        if not isinstance(products, list) or not isinstance(sales, list):
            raise TypeError("'products' and 'sales' must be lists")
        return StoreSnapshot(
            products=tuple(_product_from_raw(p) for p in products),
            sales=tuple(_sale_from_raw(s) for s in sales),
            target=_money(raw["target"]),
        )

    # --- File helpers ---------------------------------------------------------

    def _load_raw(self) -> dict:
        document = json.loads(self._file_path.read_text(encoding="utf-8"))
        if not isinstance(document, dict):
            raise TypeError("store file must hold a JSON object")
        return document

    def _persist_raw(self, document: dict) -> None:
        self._file_path.parent.mkdir(parents=True, exist_ok=True)
        self._file_path.write_text(
            json.dumps(document, indent=2, ensure_ascii=False) + "\n", encoding="utf-8"
        )


def _number(money: Money) -> int | float | str:
    """JSON form of an amount: a number when that is exact, else a string."""
    amount = money.amount
    if amount == amount.to_integral_value():
        return int(amount)
    as_float = float(amount)
    if Decimal(repr(as_float)) == amount:
        return as_float
    return str(amount)


def _money(value: object) -> Money:
    if isinstance(value, str):
        # Only the exact-decimal strings written by _number are accepted.
        money = Money.of(value)
        if _number(money) != value:
            raise TypeError(f"expected a number, got {value!r}")
        return money
    if isinstance(value, bool) or not isinstance(value, (int, float)):
        raise TypeError(f"expected a number, got {value!r}")
    return Money.of(value)


def _optional_money(raw: dict, field: str) -> Money | None:
    value = raw.get(field)
    return None if value is None else _money(value)


def _optional_str(raw: dict, field: str) -> str | None:
    value = raw.get(field)
    if value is not None and not isinstance(value, str):
        raise TypeError(f"{field} must be a string, got {value!r}")
    return value


def _optional_int(raw: dict, field: str) -> int | None:
    value = raw.get(field)
    if value is not None and (isinstance(value, bool) or not isinstance(value, int)):
        raise TypeError(f"{field} must be an integer, got {value!r}")
    return value


def _product_to_raw(product: Product) -> dict:
    raw: dict = {
        "id": product.id,
        "name": product.name,
        "inventory": product.inventory,
        "unitPrice": _number(product.unit_price),
        "unitCost": _number(product.unit_cost),
    }
    if product.sku is not None:
        raw["sku"] = product.sku
    if product.wax_cost_per_unit is not None:
        raw["waxCostPerUnit"] = _number(product.wax_cost_per_unit)
    if product.perfume_cost_per_unit is not None:
        raw["perfumeCostPerUnit"] = _number(product.perfume_cost_per_unit)
    if product.stock_capacity is not None:
        raw["stockCapacity"] = product.stock_capacity
    return raw


def _product_from_raw(raw: dict) -> Product:
    return Product(
        id=raw["id"],
        name=raw["name"],
        sku=_optional_str(raw, "sku"),
        inventory=raw["inventory"],
        unit_price=_money(raw["unitPrice"]),
        unit_cost=_money(raw["unitCost"]),
        wax_cost_per_unit=_optional_money(raw, "waxCostPerUnit"),
        perfume_cost_per_unit=_optional_money(raw, "perfumeCostPerUnit"),
        stock_capacity=_optional_int(raw, "stockCapacity"),
    )


def _sale_to_raw(sale: Sale) -> dict:
    recorded_at = sale.recorded_at.astimezone(timezone.utc)
    return {
        "id": sale.id,
        "date": recorded_at.isoformat(timespec="milliseconds").replace("+00:00", "Z"),
        "items": [
            {"productId": item.product_id, "quantity": item.quantity}
            for item in sale.items
        ],
        "revenue": _number(sale.revenue),
        "cost": _number(sale.cost),
    }


def _sale_from_raw(raw: dict) -> Sale:
    date = raw["date"]
    if date.endswith("Z"):
        date = date[:-1] + "+00:00"
    recorded_at = datetime.fromisoformat(date)
    if recorded_at.tzinfo is None:
        recorded_at = recorded_at.replace(tzinfo=timezone.utc)
    return Sale(
        id=raw["id"],
        recorded_at=recorded_at,
        items=tuple(
            SaleItem(product_id=i["productId"], quantity=Quantity(i["quantity"]).value)
            for i in raw["items"]
        ),
        revenue=_money(raw["revenue"]),
        cost=_money(raw["cost"]),
    )
