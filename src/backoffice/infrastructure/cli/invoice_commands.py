"""CLI commands for invoices."""

from __future__ import annotations

import click

from backoffice.domain.exceptions import DomainException
from backoffice.infrastructure.bootstrap import Container
from backoffice.infrastructure.cli.common import describe, echo_page_footer, money


@click.command("create")
@click.option("--order", "order_id", required=True, type=int, help="Delivered order ID.")
@click.pass_obj
def invoice_create(container: Container, order_id: int) -> None:
    """Issue the invoice for a delivered order."""
    try:
        dto = container.create_invoice.handle(order_id)
    except DomainException as exc:
        raise click.ClickException(describe(exc))

    click.echo(f"Invoice #{dto.id} issued for order #{dto.order_id}: {money(dto.amount_cents)}")


@click.command("show")
@click.option("--id", "invoice_id", required=True, type=int, help="Invoice ID.")
@click.pass_obj
def invoice_show(container: Container, invoice_id: int) -> None:
    """Show an invoice."""
    try:
        dto = container.show_invoice.handle(invoice_id)
    except DomainException as exc:
        raise click.ClickException(describe(exc))

    click.echo(f"Invoice #{dto.id}  (status={dto.status})")
    click.echo(f"Order:    #{dto.order_id}")
    click.echo(f"Customer: #{dto.customer_id}")
    click.echo(f"Amount:   {money(dto.amount_cents)}")


@click.command("list")
@click.option("--status", default=None, help="Filter by status.")
@click.option("--order", "order_id", type=int, default=None, help="Filter by order ID.")
@click.option("--page", type=int, default=1, show_default=True)
@click.option("--limit", type=int, default=None)
@click.pass_obj
def invoice_list(
    container: Container,
    status: str | None,
    order_id: int | None,
    page: int,
    limit: int | None,
) -> None:
    """List invoices, newest first."""
    try:
        result = container.list_invoices.handle(
            page=page, limit=limit, status=status, order_id=order_id
        )
    except DomainException as exc:
        raise click.ClickException(describe(exc))

    if not result.items:
        click.echo("No invoices found.")
        return

    click.echo(f"{'ID':<6} {'Order':<7} {'Status':<8} {'Amount':>12}")
    click.echo("-" * 36)
    for i in result.items:
        click.echo(f"{i.id:<6} {i.order_id:<7} {i.status:<8} {money(i.amount_cents):>12}")
    echo_page_footer(result)


@click.command("status")
@click.option("--id", "invoice_id", required=True, type=int, help="Invoice ID.")
@click.option("--status", required=True, help="Next status (paid or void).")
@click.pass_obj
def invoice_status(container: Container, invoice_id: int, status: str) -> None:
    """Mark an invoice paid or void."""
    try:
        dto = container.update_invoice_status.handle(invoice_id, status)
    except DomainException as exc:
        raise click.ClickException(describe(exc))

    click.echo(f"Invoice #{dto.id} is now {dto.status}")
