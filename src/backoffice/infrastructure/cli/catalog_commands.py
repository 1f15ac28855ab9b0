"""CLI commands for the catalog: customers, products and warehouses."""

from __future__ import annotations

import click

from backoffice.domain.exceptions import DomainException
from backoffice.infrastructure.bootstrap import Container
from backoffice.infrastructure.cli.common import describe, money

# --- Customers ---------------------------------------------------------------


@click.command("add")
@click.option("--name", required=True, help="Customer name.")
@click.option("--email", required=True, help="Contact e-mail.")
@click.option(
    "--status",
    type=click.Choice(["active", "inactive"]),
    default="active",
    show_default=True,
)
@click.pass_obj
def customer_add(container: Container, name: str, email: str, status: str) -> None:
    """Register a new customer."""
    try:
        customer = container.add_customer.handle(name=name, email=email, status=status)
    except DomainException as exc:
        raise click.ClickException(describe(exc))

    click.echo(f"Customer #{customer.id} '{customer.name}' added ({customer.status})")


@click.command("list")
@click.pass_obj
def customer_list(container: Container) -> None:
    """List all customers."""
    customers = [c for c in container.repos.customers.list_all() if c.deleted_at is None]
    if not customers:
        click.echo("No customers found.")
        return

    click.echo(f"{'ID':<6} {'Name':<20} {'Email':<28} {'Status':<8}")
    click.echo("-" * 64)
    for c in customers:
        click.echo(f"{c.id:<6} {c.name:<20} {c.email:<28} {c.status.value:<8}")


@click.command("delete")
@click.option("--id", "customer_id", required=True, type=int, help="Customer ID.")
@click.pass_obj
def customer_delete(container: Container, customer_id: int) -> None:
    """Soft-delete a customer."""
    try:
        container.delete_customer.handle(customer_id)
    except DomainException as exc:
        raise click.ClickException(describe(exc))

    click.echo(f"Customer #{customer_id} deleted.")


# --- Products ----------------------------------------------------------------


@click.command("add")
@click.option("--sku", required=True, help="Stock keeping unit, unique.")
@click.option("--name", required=True, help="Product name.")
@click.option("--price-cents", required=True, type=int, help="Unit price in cents.")
@click.option("--inactive", is_flag=True, default=False, help="Create the product inactive.")
@click.pass_obj
def product_add(
    container: Container, sku: str, name: str, price_cents: int, inactive: bool
) -> None:
    """Add a new product to the catalog."""
    try:
        product = container.add_product.handle(
            sku=sku, name=name, price_cents=price_cents, active=not inactive
        )
    except DomainException as exc:
        raise click.ClickException(describe(exc))

    click.echo(
        f"Product #{product.id} '{product.name}' ({product.sku}) added at "
        f"{money(product.price_cents)}"
    )


@click.command("list")
@click.pass_obj
def product_list(container: Container) -> None:
    """List all products in the catalog."""
    products = [p for p in container.repos.products.list_all() if p.deleted_at is None]

    if not products:
        click.echo("No products found.")
        return

    click.echo(f"{'ID':<6} {'SKU':<12} {'Name':<20} {'Price':>10} {'Active':>7}")
    click.echo("-" * 59)
    for p in products:
        active = "yes" if p.active else "no"
        click.echo(f"{p.id:<6} {p.sku:<12} {p.name:<20} {str(p.price):>10} {active:>7}")


@click.command("update")
@click.option("--id", "product_id", required=True, type=int, help="Product ID.")
@click.option("--price-cents", type=int, default=None, help="New price in cents.")
@click.option("--active/--inactive", default=None, help="Toggle the active flag.")
@click.pass_obj
def product_update(
    container: Container, product_id: int, price_cents: int | None, active: bool | None
) -> None:
    """Update a product's price or active flag."""
    if price_cents is None and active is None:
        raise click.UsageError("Nothing to update: pass --price-cents and/or --active/--inactive.")

    try:
        product = container.update_product.handle(
            product_id=product_id, price_cents=price_cents, active=active
        )
    except DomainException as exc:
        raise click.ClickException(describe(exc))

    state = "active" if product.active else "inactive"
    click.echo(f"Product #{product.id} now {money(product.price_cents)} ({state})")


@click.command("delete")
@click.option("--id", "product_id", required=True, type=int, help="Product ID.")
@click.pass_obj
def product_delete(container: Container, product_id: int) -> None:
    """Soft-delete a product."""
    try:
        container.delete_product.handle(product_id)
    except DomainException as exc:
        raise click.ClickException(describe(exc))

    click.echo(f"Product #{product_id} deleted.")


# --- Warehouses --------------------------------------------------------------


@click.command("add")
@click.option("--name", required=True, help="Warehouse name.")
@click.option("--city", required=True, help="City.")
@click.pass_obj
def warehouse_add(container: Container, name: str, city: str) -> None:
    """Register a new warehouse."""
    try:
        warehouse = container.add_warehouse.handle(name=name, city=city)
    except DomainException as exc:
        raise click.ClickException(describe(exc))

    click.echo(f"Warehouse #{warehouse.id} '{warehouse.name}' added in {warehouse.city}")


@click.command("list")
@click.pass_obj
def warehouse_list(container: Container) -> None:
    """List all warehouses."""
    warehouses = [w for w in container.repos.warehouses.list_all() if w.deleted_at is None]
    if not warehouses:
        click.echo("No warehouses found.")
        return

    click.echo(f"{'ID':<6} {'Name':<20} {'City':<20}")
    click.echo("-" * 46)
    for w in warehouses:
        click.echo(f"{w.id:<6} {w.name:<20} {w.city:<20}")


@click.command("delete")
@click.option("--id", "warehouse_id", required=True, type=int, help="Warehouse ID.")
@click.pass_obj
def warehouse_delete(container: Container, warehouse_id: int) -> None:
    """Soft-delete a warehouse."""
    try:
        container.delete_warehouse.handle(warehouse_id)
    except DomainException as exc:
        raise click.ClickException(describe(exc))

    click.echo(f"Warehouse #{warehouse_id} deleted.")
