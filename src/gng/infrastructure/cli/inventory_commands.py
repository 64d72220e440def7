"""CLI commands for stock management."""

from __future__ import annotations

import click

from gng.application.restock import RestockHandler
from gng.application.show_inventory import ShowInventoryHandler
from gng.application.store import InventoryStore
from gng.domain.exceptions import DomainException


@click.command("add")
@click.option("--product", required=True, help="Product name or id.")
@click.option(
    "--quantity", required=True, type=int,
    help="Units to add; negative writes stock off.",
)
@click.pass_obj
def inventory_add(store: InventoryStore, product: str, quantity: int) -> None:
    """Add (or write off) stock for a product."""
    handler = RestockHandler(store)

    try:
        updated = handler.handle(product=product, quantity=quantity)
    except DomainException as exc:
        raise click.ClickException(str(exc))

    click.echo(f"Inventory for '{updated.name}' is now {updated.inventory}")


@click.command("show")
@click.pass_obj
def inventory_show(store: InventoryStore) -> None:
    """Show current stock levels."""
    lines = ShowInventoryHandler(store).handle()

    if not lines:
        click.echo("No products found.")
        return

    click.echo(f"{'Product':<20} {'SKU':<10} {'Stock':>6} {'Capacity':>9}")
    click.echo("-" * 48)
    for line in lines:
        click.echo(
            f"{line.product_name:<20} {line.sku:<10} {line.inventory:>6} {line.capacity:>9}"
        )
