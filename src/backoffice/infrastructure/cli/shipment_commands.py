"""CLI commands for shipments."""

from __future__ import annotations

import click

from backoffice.application.dto import DestinationSpec, ShipmentDTO
from backoffice.domain.exceptions import DomainException
from backoffice.infrastructure.bootstrap import Container
from backoffice.infrastructure.cli.common import describe, echo_page_footer


def _display_shipment(dto: ShipmentDTO) -> None:
    click.echo(f"Shipment #{dto.id}  (status={dto.status})")
    click.echo(f"Order:  #{dto.order_id}")
    click.echo(f"From:   warehouse #{dto.origin_warehouse_id}")
    click.echo(f"To:     {dto.destination.address}")
    click.echo()
    for entry in dto.tracking:
        note = f"  {entry.note}" if entry.note else ""
        click.echo(f"  {entry.ts}  {entry.status}{note}")


@click.command("create")
@click.option("--order", "order_id", required=True, type=int, help="Order ID to ship.")
@click.option("--address", required=True, help="Destination address.")
@click.option("--lat", type=float, default=None)
@click.option("--lng", type=float, default=None)
@click.pass_obj
def shipment_create(
    container: Container,
    order_id: int,
    address: str,
    lat: float | None,
    lng: float | None,
) -> None:
    """Create a shipment for an allocated order."""
    try:
        dto = container.create_shipment.handle(
            order_id, DestinationSpec(address=address, lat=lat, lng=lng)
        )
    except DomainException as exc:
        raise click.ClickException(describe(exc))

    click.echo(f"Shipment #{dto.id} created for order #{dto.order_id}")


@click.command("show")
@click.option("--id", "shipment_id", required=True, type=int, help="Shipment ID.")
@click.pass_obj
def shipment_show(container: Container, shipment_id: int) -> None:
    """Show a shipment and its tracking history."""
    try:
        dto = container.show_shipment.handle(shipment_id)
    except DomainException as exc:
        raise click.ClickException(describe(exc))

    _display_shipment(dto)


@click.command("list")
@click.option("--status", default=None, help="Filter by status.")
@click.option("--order", "order_id", type=int, default=None, help="Filter by order ID.")
@click.option("--page", type=int, default=1, show_default=True)
@click.option("--limit", type=int, default=None)
@click.pass_obj
def shipment_list(
    container: Container,
    status: str | None,
    order_id: int | None,
    page: int,
    limit: int | None,
) -> None:
    """List shipments, newest first."""
    try:
        result = container.list_shipments.handle(
            page=page, limit=limit, status=status, order_id=order_id
        )
    except DomainException as exc:
        raise click.ClickException(describe(exc))

    if not result.items:
        click.echo("No shipments found.")
        return

    click.echo(f"{'ID':<6} {'Order':<7} {'Status':<18} {'Destination'}")
    click.echo("-" * 60)
    for s in result.items:
        click.echo(f"{s.id:<6} {s.order_id:<7} {s.status:<18} {s.destination.address}")
    echo_page_footer(result)


@click.command("status")
@click.option("--id", "shipment_id", required=True, type=int, help="Shipment ID.")
@click.option("--status", required=True, help="Next status.")
@click.option("--note", default=None, help="Optional tracking note.")
@click.pass_obj
def shipment_status(
    container: Container, shipment_id: int, status: str, note: str | None
) -> None:
    """Advance a shipment to its next status."""
    try:
        dto = container.update_shipment_status.handle(shipment_id, status, note)
    except DomainException as exc:
        raise click.ClickException(describe(exc))

    click.echo(f"Shipment #{dto.id} is now {dto.status}")


@click.command("cancel")
@click.option("--id", "shipment_id", required=True, type=int, help="Shipment ID.")
@click.pass_obj
def shipment_cancel(container: Container, shipment_id: int) -> None:
    """Cancel a shipment (the order goes back to allocated)."""
    try:
        container.cancel_shipment.handle(shipment_id)
    except DomainException as exc:
        raise click.ClickException(describe(exc))

    click.echo(f"Shipment #{shipment_id} cancelled.")
