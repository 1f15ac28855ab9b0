"""Helpers shared by the CLI command modules."""

from __future__ import annotations

import click

from backoffice.application.dto import OrderDTO, OrderItemSpec, PageDTO
from backoffice.domain.exceptions import DomainException, ValidationError
from backoffice.domain.model.value_objects import Money


def describe(exc: DomainException) -> str:
    """One-line message for a domain error, including validation details."""
    if isinstance(exc, ValidationError) and exc.details != [exc.message]:
        return f"{exc.message}: " + "; ".join(exc.details)
    return exc.message


def parse_items(raw: str) -> list[OrderItemSpec]:
    """Parse '1:3,2:5' (productId:qty pairs) into an OrderItemSpec list."""
    specs: list[OrderItemSpec] = []
    for pair in raw.split(","):
        pair = pair.strip()
        if ":" not in pair:
            raise click.BadParameter(
                f"Invalid item format '{pair}'. Expected 'ProductId:Quantity'."
            )
        product_str, qty_str = pair.rsplit(":", 1)
        try:
            product_id = int(product_str)
            qty = int(qty_str)
        except ValueError:
            raise click.BadParameter(f"Invalid item '{pair}': both parts must be integers.")
        specs.append(OrderItemSpec(product_id=product_id, quantity=qty))
    return specs


def money(cents: int) -> str:
    return str(Money(cents))


def display_order(dto: OrderDTO) -> None:
    click.echo(f"Order #{dto.id}  (status={dto.status})")
    click.echo(f"Customer:  #{dto.customer_id}")
    click.echo(f"Warehouse: #{dto.warehouse_id}")
    click.echo(f"Created:   {dto.created_at}")
    click.echo()
    click.echo(f"  {'Product':<10} {'Name':<20} {'Qty':>5}")
    click.echo(f"  {'-'*37}")
    for item in dto.items:
        name = item.product.name if item.product else ""
        click.echo(f"  {item.product_id:<10} {name:<20} {item.qty:>5}")
    click.echo(f"  {'-'*37}")
    click.echo(f"  {'Order Total':<20} {money(dto.total_cents):>16}")


def echo_page_footer(page: PageDTO) -> None:
    click.echo(f"-- page {page.page}, {len(page.items)} of {page.total} --")
