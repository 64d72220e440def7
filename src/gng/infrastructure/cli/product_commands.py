"""CLI commands for the product catalogue."""

from __future__ import annotations

import click

from gng.application.add_product import AddProductHandler
from gng.application.show_inventory import ShowInventoryHandler
from gng.application.store import InventoryStore
from gng.domain.exceptions import DomainException


@click.command("add")
@click.option("--name", required=True, help="Product name, e.g. 'Rose Candle'.")
@click.option("--price", required=True, help="Unit price (e.g. 15).")
@click.option("--wax-cost", default="3", show_default=True, help="Wax cost per unit.")
@click.option("--perfume-cost", default="2", show_default=True, help="Perfume cost per unit.")
@click.option("--sku", default=None, help="Optional catalogue code.")
@click.option("--capacity", default="200", show_default=True, help="Stock capacity.")
@click.option("--stock", default="0", show_default=True, help="Starting inventory.")
@click.pass_obj
def product_add(
    store: InventoryStore,
    name: str,
    price: str,
    wax_cost: str,
    perfume_cost: str,
    sku: str | None,
    capacity: str,
    stock: str,
) -> None:
    """Add a product to the catalogue (replaces one with the same id)."""
    handler = AddProductHandler(store)

    try:
        product = handler.handle(
            name=name,
            unit_price=price,
            wax_cost=wax_cost,
            perfume_cost=perfume_cost,
            sku=sku,
            capacity=capacity,
            starting_inventory=stock,
        )
    except DomainException as exc:
        raise click.ClickException(str(exc))

    click.echo(
        f"Product '{product.name}' saved as '{product.id}' at {product.unit_price} "
        f"(cost {product.effective_unit_cost}, stock {product.inventory})"
    )


@click.command("list")
@click.pass_obj
def product_list(store: InventoryStore) -> None:
    """List all products in the catalogue."""
    lines = ShowInventoryHandler(store).handle()

    if not lines:
        click.echo("No products found.")
        return

    click.echo(f"{'ID':<16} {'Name':<20} {'Price':>10} {'Cost':>10}")
    click.echo("-" * 59)
    for line in lines:
        click.echo(
            f"{line.product_id:<16} {line.product_name:<20} "
            f"{line.unit_price:>10} {line.unit_cost:>10}"
        )
