"""Shared lookup for handlers that accept a product name or id."""

from __future__ import annotations

from gng.application.store import InventoryStore
from gng.domain.exceptions import EntityNotFoundError
from gng.domain.model.product import Product


def resolve_product(store: InventoryStore, reference: str) -> Product:
    """Find a product by case-insensitive name, falling back to its id."""
    product = store.get_product_by_name(reference.strip())
    if product is None:
        product = store.get_product_by_id(reference.strip())
    if product is None:
        raise EntityNotFoundError(f"Product not found: '{reference}'")
    return product
