import click

from backoffice.infrastructure.bootstrap import build_container
from backoffice.infrastructure.cli.invoice_commands import (
    invoice_create,
    invoice_list,
    invoice_show,
    invoice_status,
)
from backoffice.infrastructure.cli.order_commands import (
    order_cancel,
    order_create,
    order_list,
    order_show,
    order_update,
)
from backoffice.infrastructure.cli.catalog_commands import (
    customer_add,
    customer_delete,
    customer_list,
    product_add,
    product_delete,
    product_list,
    product_update,
    warehouse_add,
    warehouse_delete,
    warehouse_list,
)
from backoffice.infrastructure.cli.shipment_commands import (
    shipment_cancel,
    shipment_create,
    shipment_list,
    shipment_show,
    shipment_status,
)
from backoffice.infrastructure.cli.stock_commands import stock_adjust, stock_move, stock_show
from backoffice.infrastructure.logging_config import configure_logging


@click.group()
@click.pass_context
def cli(ctx: click.Context) -> None:
    """Logistics back-office: orders, stock, shipments and invoices"""
    if ctx.obj is None:
        ctx.obj = build_container()
        configure_logging(
            log_level=ctx.obj.settings.log_level,
            json_format=ctx.obj.settings.log_json,
        )


@cli.group()
def customer() -> None:
    """Manage customers."""


@cli.group()
def product() -> None:
    """Manage products."""


@cli.group()
def warehouse() -> None:
    """Manage warehouses."""


@cli.group()
def stock() -> None:
    """Manage stock levels."""


@cli.group()
def order() -> None:
    """Manage orders."""


@cli.group()
def shipment() -> None:
    """Manage shipments."""


@cli.group()
def invoice() -> None:
    """Manage invoices."""


@cli.command()
@click.option("--host", default="127.0.0.1", show_default=True)
@click.option("--port", default=8000, type=int, show_default=True)
@click.pass_obj
def serve(container, host: str, port: int) -> None:
    """Run the REST API."""
    import uvicorn

    from backoffice.infrastructure.api.app import create_app

    uvicorn.run(create_app(container), host=host, port=port)


# Register subcommands
customer.add_command(customer_add)
customer.add_command(customer_list)
customer.add_command(customer_delete)
product.add_command(product_add)
product.add_command(product_list)
product.add_command(product_update)
product.add_command(product_delete)
warehouse.add_command(warehouse_add)
warehouse.add_command(warehouse_list)
warehouse.add_command(warehouse_delete)
stock.add_command(stock_show)
stock.add_command(stock_adjust)
stock.add_command(stock_move)
order.add_command(order_create)
order.add_command(order_show)
order.add_command(order_list)
order.add_command(order_update)
order.add_command(order_cancel)
shipment.add_command(shipment_create)
shipment.add_command(shipment_show)
shipment.add_command(shipment_list)
shipment.add_command(shipment_status)
shipment.add_command(shipment_cancel)
invoice.add_command(invoice_create)
invoice.add_command(invoice_show)
invoice.add_command(invoice_list)
invoice.add_command(invoice_status)
