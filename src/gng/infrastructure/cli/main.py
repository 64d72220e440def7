from pathlib import Path

import click

from gng.infrastructure.bootstrap import DATA_FILE_ENV, configure_logging, inventory_store
from gng.infrastructure.cli.dashboard_commands import dashboard, target_set
from gng.infrastructure.cli.inventory_commands import inventory_add, inventory_show
from gng.infrastructure.cli.product_commands import product_add, product_list
from gng.infrastructure.cli.sale_commands import (
    sale_list,
    sale_quote,
    sale_record,
    sale_trend,
)


@click.group()
@click.option(
    "--data-file",
    type=click.Path(dir_okay=False, path_type=Path),
    envvar=DATA_FILE_ENV,
    default=None,
    help=f"Store file (default: data/store.json, or ${DATA_FILE_ENV}).",
)
@click.option("-v", "--verbose", is_flag=True, default=False, help="Debug logging.")
@click.pass_context
def cli(ctx: click.Context, data_file: Path | None, verbose: bool) -> None:
    """GNG — Gifts N Glimmers inventory and sales tracker"""
    configure_logging(verbose)
    ctx.obj = inventory_store(data_file)


@cli.group()
def product() -> None:
    """Manage the product catalogue."""


@cli.group()
def inventory() -> None:
    """Manage stock levels."""


@cli.group()
def sale() -> None:
    """Record and review sales."""


@cli.group()
def target() -> None:
    """Manage the revenue target."""


# Register subcommands
product.add_command(product_add)
product.add_command(product_list)
inventory.add_command(inventory_add)
inventory.add_command(inventory_show)
sale.add_command(sale_list)
sale.add_command(sale_quote)
sale.add_command(sale_record)
sale.add_command(sale_trend)
target.add_command(target_set)
cli.add_command(dashboard)
