"""CLI commands for the Order aggregate."""

from __future__ import annotations

import click

from backoffice.application.show_order import INCLUDE_PRODUCTS
from backoffice.domain.exceptions import DomainException
from backoffice.infrastructure.bootstrap import Container
from backoffice.infrastructure.cli.common import (
    describe,
    display_order,
    echo_page_footer,
    money,
    parse_items,
)


@click.command("create")
@click.option("--customer", "customer_id", required=True, type=int, help="Customer ID.")
@click.option("--warehouse", "warehouse_id", required=True, type=int, help="Warehouse ID.")
@click.option("--items", required=True, help="Items as 'ProductId:Qty,ProductId:Qty'.")
@click.pass_obj
def order_create(container: Container, customer_id: int, warehouse_id: int, items: str) -> None:
    """Create an order and reserve its stock."""
    specs = parse_items(items)

    try:
        dto = container.create_order.handle(
            customer_id=customer_id, warehouse_id=warehouse_id, item_specs=specs
        )
    except DomainException as exc:
        raise click.ClickException(describe(exc))

    click.echo(f"Order #{dto.id} created  (status={dto.status}, total={money(dto.total_cents)})")


@click.command("show")
@click.option("--id", "order_id", required=True, type=int, help="Order ID to display.")
@click.pass_obj
def order_show(container: Container, order_id: int) -> None:
    """Show details of an existing order."""
    try:
        dto = container.show_order.handle(order_id, include=[INCLUDE_PRODUCTS])
    except DomainException as exc:
        raise click.ClickException(describe(exc))

    display_order(dto)


@click.command("list")
@click.option("--status", default=None, help="Filter by status.")
@click.option("--customer", "customer_id", type=int, default=None, help="Filter by customer ID.")
@click.option("--page", type=int, default=1, show_default=True)
@click.option("--limit", type=int, default=None)
@click.pass_obj
def order_list(
    container: Container,
    status: str | None,
    customer_id: int | None,
    page: int,
    limit: int | None,
) -> None:
    """List orders, newest first."""
    try:
        result = container.list_orders.handle(
            page=page, limit=limit, status=status, customer_id=customer_id
        )
    except DomainException as exc:
        raise click.ClickException(describe(exc))

    if not result.items:
        click.echo("No orders found.")
        return

    click.echo(f"{'ID':<6} {'Customer':<9} {'Warehouse':<10} {'Status':<10} {'Total':>12}")
    click.echo("-" * 51)
    for o in result.items:
        click.echo(
            f"{o.id:<6} {o.customer_id:<9} {o.warehouse_id:<10} {o.status:<10} "
            f"{money(o.total_cents):>12}"
        )
    echo_page_footer(result)


@click.command("update")
@click.option("--id", "order_id", required=True, type=int, help="Order ID.")
@click.option("--items", required=True, help="New items as 'ProductId:Qty,ProductId:Qty'.")
@click.pass_obj
def order_update(container: Container, order_id: int, items: str) -> None:
    """Replace an allocated order's items (stock is re-reserved by delta)."""
    specs = parse_items(items)

    try:
        dto = container.update_order.handle(order_id, specs)
    except DomainException as exc:
        raise click.ClickException(describe(exc))

    click.echo(f"Order #{dto.id} updated  (total={money(dto.total_cents)})")


@click.command("cancel")
@click.option("--id", "order_id", required=True, type=int, help="Order ID to cancel.")
@click.pass_obj
def order_cancel(container: Container, order_id: int) -> None:
    """Cancel an allocated order (releases its reserved stock)."""
    try:
        container.cancel_order.handle(order_id)
    except DomainException as exc:
        raise click.ClickException(describe(exc))

    click.echo(f"Order #{order_id} cancelled.")
