import logging

import click

from stockkeeper.infrastructure.bootstrap import BACKENDS
from stockkeeper.infrastructure.cli.product_commands import (
    product_add,
    product_delete,
    product_list,
    product_update,
)


@click.group()
@click.option(
    "--backend",
    type=click.Choice(BACKENDS),
    default="excel",
    show_default=True,
    help="Storage backend to use.",
)
@click.option(
    "--source",
    default=None,
    help="Data source for the backend (workbook path for excel).",
)
@click.option("-v", "--verbose", is_flag=True, help="Log backend activity.")
@click.pass_context
def cli(ctx: click.Context, backend: str, source: str | None, verbose: bool) -> None:
    """stockkeeper: product inventory over swappable storage backends"""
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.WARNING,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )
    ctx.obj = {"backend": backend, "source": source}


@cli.group()
def product() -> None:
    """Manage products."""


# Register subcommands
product.add_command(product_add)
product.add_command(product_delete)
product.add_command(product_list)
product.add_command(product_update)
