"""CLI commands for products.

Every mutating command prints what it did and then re-lists the whole
catalog from the active backend.
"""

from __future__ import annotations

import click

from stockkeeper.application.add_product import AddProductHandler
from stockkeeper.application.delete_product import DeleteProductHandler
from stockkeeper.application.update_product import UpdateProductHandler
from stockkeeper.domain.exceptions import DomainException
from stockkeeper.domain.repository.product_dao import ProductDao
from stockkeeper.infrastructure.bootstrap import product_dao


def _active_dao(ctx: click.Context) -> ProductDao:
    """Open the backend selected on the command line (once per invocation)."""
    settings = ctx.find_root().obj
    if "dao" not in settings:
        try:
            dao = product_dao(settings["backend"], settings["source"])
        except DomainException as exc:
            raise click.ClickException(str(exc))
        ctx.find_root().call_on_close(dao.close)
        settings["dao"] = dao
    return settings["dao"]


def _echo_products(dao: ProductDao) -> None:
    try:
        products = dao.list_all()
    except DomainException as exc:
        raise click.ClickException(str(exc))

    if not products:
        click.echo("No products found.")
        return

    click.echo(f"{'ID':<6} {'Name':<20} {'Quantity':>10} {'Tag':<15}")
    click.echo("-" * 54)
    for p in products:
        click.echo(f"{p.id:<6} {p.name:<20} {p.quantity:>10} {p.tag or '':<15}")


@click.command("add")
@click.option("--name", required=True, help="Product name.")
@click.option("--quantity", required=True, help="Quantity in stock.")
@click.option("--tag", default=None, help="Category label.")
@click.pass_context
def product_add(ctx: click.Context, name: str, quantity: str, tag: str | None) -> None:
    """Add a new product."""
    dao = _active_dao(ctx)
    handler = AddProductHandler(product_dao=dao)

    try:
        product = handler.handle(name=name, quantity=quantity, tag=tag)
    except DomainException as exc:
        raise click.ClickException(str(exc))

    click.echo(f"Product #{product.id} '{product.name}' added")
    _echo_products(dao)


@click.command("list")
@click.pass_context
def product_list(ctx: click.Context) -> None:
    """List all products."""
    _echo_products(_active_dao(ctx))


@click.command("update")
@click.option("--id", "product_id", required=True, type=int, help="Product ID.")
@click.option("--name", required=True, help="New product name.")
@click.option("--quantity", required=True, help="New quantity.")
@click.option("--tag", default=None, help="New category label.")
@click.pass_context
def product_update(
    ctx: click.Context, product_id: int, name: str, quantity: str, tag: str | None
) -> None:
    """Overwrite an existing product."""
    dao = _active_dao(ctx)
    handler = UpdateProductHandler(product_dao=dao)

    try:
        handler.handle(product_id=product_id, name=name, quantity=quantity, tag=tag)
    except DomainException as exc:
        raise click.ClickException(str(exc))

    click.echo(f"Product #{product_id} updated")
    _echo_products(dao)


@click.command("delete")
@click.option("--id", "product_id", required=True, type=int, help="Product ID.")
@click.pass_context
def product_delete(ctx: click.Context, product_id: int) -> None:
    """Delete a product."""
    dao = _active_dao(ctx)
    handler = DeleteProductHandler(product_dao=dao)

    try:
        handler.handle(product_id=product_id)
    except DomainException as exc:
        raise click.ClickException(str(exc))

    click.echo(f"Product #{product_id} deleted")
    _echo_products(dao)
