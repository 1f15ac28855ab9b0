"""CLI commands for stock levels."""

from __future__ import annotations

import click

from backoffice.domain.exceptions import DomainException
from backoffice.infrastructure.bootstrap import Container
from backoffice.infrastructure.cli.common import describe


@click.command("show")
@click.option("--warehouse", "warehouse_id", type=int, default=None, help="Filter by warehouse ID.")
@click.option("--product", "product_id", type=int, default=None, help="Filter by product ID.")
@click.pass_obj
def stock_show(container: Container, warehouse_id: int | None, product_id: int | None) -> None:
    """Show current stock levels."""
    records = container.show_stock.handle(warehouse_id=warehouse_id, product_id=product_id)

    if not records:
        click.echo("No stock records found.")
        return

    click.echo(f"{'Warehouse':<10} {'Product':<10} {'Qty':>8}")
    click.echo("-" * 30)
    for r in sorted(records, key=lambda r: (r.warehouse_id, r.product_id)):
        click.echo(f"{r.warehouse_id:<10} {r.product_id:<10} {r.qty:>8}")


@click.command("adjust")
@click.option("--warehouse", "warehouse_id", required=True, type=int, help="Warehouse ID.")
@click.option("--product", "product_id", required=True, type=int, help="Product ID.")
@click.option("--delta", required=True, type=int, help="Signed quantity change.")
@click.pass_obj
def stock_adjust(container: Container, warehouse_id: int, product_id: int, delta: int) -> None:
    """Add (positive delta) or remove (negative delta) stock."""
    try:
        record = container.adjust_stock.handle(warehouse_id, product_id, delta)
    except DomainException as exc:
        raise click.ClickException(describe(exc))

    click.echo(
        f"Stock for product #{record.product_id} in warehouse #{record.warehouse_id} "
        f"is now {record.qty}"
    )


@click.command("move")
@click.option("--from", "from_warehouse_id", required=True, type=int, help="Origin warehouse ID.")
@click.option("--to", "to_warehouse_id", required=True, type=int, help="Destination warehouse ID.")
@click.option("--product", "product_id", required=True, type=int, help="Product ID.")
@click.option("--qty", required=True, type=int, help="Quantity to move.")
@click.pass_obj
def stock_move(
    container: Container,
    from_warehouse_id: int,
    to_warehouse_id: int,
    product_id: int,
    qty: int,
) -> None:
    """Move stock between two warehouses."""
    try:
        move = container.move_stock.handle(from_warehouse_id, to_warehouse_id, product_id, qty)
    except DomainException as exc:
        raise click.ClickException(describe(exc))

    click.echo(
        f"Moved {qty} of product #{product_id}: warehouse #{move.source.warehouse_id} "
        f"now {move.source.qty}, warehouse #{move.destination.warehouse_id} now "
        f"{move.destination.qty}"
    )
