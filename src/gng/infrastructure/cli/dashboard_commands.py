"""CLI commands for the dashboard overview and the revenue target."""

from __future__ import annotations

import click

from gng.application.set_target import SetTargetHandler
from gng.application.show_dashboard import ShowDashboardHandler
from gng.application.store import InventoryStore
from gng.domain.exceptions import DomainException


@click.command("set")
@click.argument("value")
@click.pass_obj
def target_set(store: InventoryStore, value: str) -> None:
    """Set the revenue target (negative values become zero)."""
    try:
        stored = SetTargetHandler(store).handle(value)
    except DomainException as exc:
        raise click.ClickException(str(exc))

    click.echo(f"Revenue target set to {stored}")


@click.command("dashboard")
@click.pass_obj
def dashboard(store: InventoryStore) -> None:
    """Show income, expenses, profit, target progress and stock."""
    dto = ShowDashboardHandler(store).handle()

    click.echo(f"  {'Income':<18} {dto.income:>14}")
    click.echo(f"  {'Expenses':<18} {dto.expenses:>14}")
    click.echo(f"  {'Profit':<18} {dto.profit:>14}")
    click.echo(f"  {'Target remaining':<18} {dto.target_remaining:>14}  (of {dto.target})")
    click.echo()
    click.echo(f"  Raw materials: wax {dto.wax_spend}, perfume {dto.perfume_spend}")
    click.echo()
    for level in dto.stock_levels:
        click.echo(
            f"  {level.product_name:<20} {level.in_stock:>4} left of {level.capacity:<5}"
            f" ({level.percent_available}%)"
        )
    click.echo()
    if not dto.recent_sales:
        click.echo("  No orders yet.")
    for sale in dto.recent_sales:
        click.echo(f"  {sale.recorded_at}  {sale.summary}  +{sale.revenue}")
