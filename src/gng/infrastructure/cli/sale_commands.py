"""CLI commands for sales."""

from __future__ import annotations

import click

from gng.application.dto import SaleDTO, SaleLineSpec
from gng.application.quote_sale import QuoteSaleHandler
from gng.application.record_sale import RecordSaleHandler
from gng.application.show_sales import ShowSalesHandler
from gng.application.store import InventoryStore
from gng.domain.exceptions import DomainException


def _parse_items(raw: str) -> list[SaleLineSpec]:
    """Parse 'Laddoo Candle:3,modak:5' into SaleLineSpec list."""
    specs: list[SaleLineSpec] = []
    for pair in raw.split(","):
        pair = pair.strip()
        if ":" not in pair:
            raise click.BadParameter(
                f"Invalid item format '{pair}'. Expected 'Product:Quantity'."
            )
        name, qty_str = pair.rsplit(":", 1)
        try:
            qty = int(qty_str)
        except ValueError:
            raise click.BadParameter(
                f"Invalid quantity '{qty_str}' for product '{name}'."
            )
        specs.append(SaleLineSpec(product=name.strip(), quantity=qty))
    return specs


def _display_sale(dto: SaleDTO) -> None:
    click.echo(f"{dto.id}  {dto.recorded_at}")
    click.echo(f"  {dto.summary}")
    click.echo(f"  Revenue {dto.revenue}  Cost {dto.cost}  Profit {dto.profit}")


@click.command("record")
@click.option("--items", required=True, help="Items as 'Product:Qty,Product:Qty'.")
@click.pass_obj
def sale_record(store: InventoryStore, items: str) -> None:
    """Record a sale and take the units out of stock."""
    specs = _parse_items(items)

    try:
        dto = RecordSaleHandler(store).handle(specs)
    except DomainException as exc:
        raise click.ClickException(str(exc))

    click.echo("Sale recorded.")
    _display_sale(dto)


@click.command("quote")
@click.option("--items", required=True, help="Items as 'Product:Qty,Product:Qty'.")
@click.pass_obj
def sale_quote(store: InventoryStore, items: str) -> None:
    """Preview revenue, cost and profit of a sale without recording it."""
    specs = _parse_items(items)

    try:
        quote = QuoteSaleHandler(store).handle(specs)
    except DomainException as exc:
        raise click.ClickException(str(exc))

    click.echo(f"Revenue: {quote.revenue}  Cost: {quote.cost}  Profit: {quote.profit}")


@click.command("list")
@click.option("--limit", default=5, show_default=True, type=click.IntRange(min=1))
@click.pass_obj
def sale_list(store: InventoryStore, limit: int) -> None:
    """Show the most recent sales."""
    sales = ShowSalesHandler(store).handle(limit)

    if not sales:
        click.echo("No orders yet.")
        return

    for dto in sales:
        _display_sale(dto)


@click.command("trend")
@click.pass_obj
def sale_trend(store: InventoryStore) -> None:
    """Show revenue, cost and profit per day."""
    days = ShowSalesHandler(store).trend()

    if not days:
        click.echo("No orders yet.")
        return

    click.echo(f"{'Day':<12} {'Revenue':>12} {'Cost':>12} {'Profit':>12}")
    click.echo("-" * 51)
    for day in days:
        click.echo(f"{day.day:<12} {day.revenue:>12} {day.cost:>12} {day.profit:>12}")
