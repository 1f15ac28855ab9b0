"""Composition root — wires concrete implementations to domain interfaces.

This is the only place in the codebase that knows about *all* layers.
Every other module depends only on abstractions.
"""

from __future__ import annotations

from dataclasses import dataclass

import structlog

from backoffice.application.add_customer import AddCustomerHandler
from backoffice.application.add_product import AddProductHandler
from backoffice.application.add_warehouse import AddWarehouseHandler
from backoffice.application.adjust_stock import AdjustStockHandler
from backoffice.application.cancel_order import CancelOrderHandler
from backoffice.application.cancel_shipment import CancelShipmentHandler
from backoffice.application.create_invoice import CreateInvoiceHandler
from backoffice.application.create_order import CreateOrderHandler
from backoffice.application.create_shipment import CreateShipmentHandler
from backoffice.application.delete_catalog_entry import (
    DeleteCustomerHandler,
    DeleteProductHandler,
    DeleteWarehouseHandler,
)
from backoffice.application.move_stock import MoveStockHandler
from backoffice.application.show_invoice import ListInvoicesHandler, ShowInvoiceHandler
from backoffice.application.show_order import ListOrdersHandler, ShowOrderHandler
from backoffice.application.show_shipment import ListShipmentsHandler, ShowShipmentHandler
from backoffice.application.show_stock import ShowStockHandler
from backoffice.application.update_invoice_status import UpdateInvoiceStatusHandler
from backoffice.application.update_order import UpdateOrderHandler
from backoffice.application.update_product import UpdateProductHandler
from backoffice.application.update_shipment_status import UpdateShipmentStatusHandler
from backoffice.domain.repository.customer_repository import CustomerRepository
from backoffice.domain.repository.invoice_repository import InvoiceRepository
from backoffice.domain.repository.order_repository import OrderRepository
from backoffice.domain.repository.product_repository import ProductRepository
from backoffice.domain.repository.shipment_repository import ShipmentRepository
from backoffice.domain.repository.stock_repository import StockRepository
from backoffice.domain.repository.warehouse_repository import WarehouseRepository
from backoffice.domain.service.inventory_reservation_service import (
    InventoryReservationService,
)
from backoffice.domain.service.order_lifecycle_service import OrderLifecycleService
from backoffice.domain.service.stock_ledger import StockLedger
from backoffice.infrastructure.config import Settings
from backoffice.infrastructure.persistence.json_customer_repository import (
    JsonCustomerRepository,
)
from backoffice.infrastructure.persistence.json_database import JsonDatabase
from backoffice.infrastructure.persistence.json_invoice_repository import (
    JsonInvoiceRepository,
)
from backoffice.infrastructure.persistence.json_order_repository import (
    JsonOrderRepository,
)
from backoffice.infrastructure.persistence.json_product_repository import (
    JsonProductRepository,
)
from backoffice.infrastructure.persistence.json_shipment_repository import (
    JsonShipmentRepository,
)
from backoffice.infrastructure.persistence.json_stock_repository import (
    JsonStockRepository,
)
from backoffice.infrastructure.persistence.json_warehouse_repository import (
    JsonWarehouseRepository,
)

logger = structlog.get_logger(__name__)


@dataclass(frozen=True)
class Repositories:
    customers: CustomerRepository
    products: ProductRepository
    warehouses: WarehouseRepository
    stock: StockRepository
    orders: OrderRepository
    shipments: ShipmentRepository
    invoices: InvoiceRepository


@dataclass(frozen=True)
class Container:
    """Every use case handler, built once per process (or per test)."""

    settings: Settings
    repos: Repositories
    ledger: StockLedger
    # Orders
    create_order: CreateOrderHandler
    update_order: UpdateOrderHandler
    cancel_order: CancelOrderHandler
    show_order: ShowOrderHandler
    list_orders: ListOrdersHandler
    # Shipments
    create_shipment: CreateShipmentHandler
    update_shipment_status: UpdateShipmentStatusHandler
    cancel_shipment: CancelShipmentHandler
    show_shipment: ShowShipmentHandler
    list_shipments: ListShipmentsHandler
    # Invoices
    create_invoice: CreateInvoiceHandler
    update_invoice_status: UpdateInvoiceStatusHandler
    show_invoice: ShowInvoiceHandler
    list_invoices: ListInvoicesHandler
    # Stock
    adjust_stock: AdjustStockHandler
    move_stock: MoveStockHandler
    show_stock: ShowStockHandler
    # Catalog
    add_customer: AddCustomerHandler
    delete_customer: DeleteCustomerHandler
    add_product: AddProductHandler
    update_product: UpdateProductHandler
    delete_product: DeleteProductHandler
    add_warehouse: AddWarehouseHandler
    delete_warehouse: DeleteWarehouseHandler


def open_database(settings: Settings) -> JsonDatabase:
    if settings.backend == "memory":
        return JsonDatabase()
    return JsonDatabase(settings.data_file)


def json_repositories(db: JsonDatabase) -> Repositories:
    return Repositories(
        customers=JsonCustomerRepository(db),
        products=JsonProductRepository(db),
        warehouses=JsonWarehouseRepository(db),
        stock=JsonStockRepository(db),
        orders=JsonOrderRepository(db),
        shipments=JsonShipmentRepository(db),
        invoices=JsonInvoiceRepository(db),
    )


def wire(settings: Settings, repos: Repositories) -> Container:
    """Build every handler on top of an existing set of repositories."""
    ledger = StockLedger(repos.stock)
    reservations = InventoryReservationService(ledger)
    lifecycle = OrderLifecycleService(repos.orders)
    limit = settings.default_page_limit

    return Container(
        settings=settings,
        repos=repos,
        ledger=ledger,
        create_order=CreateOrderHandler(
            order_repo=repos.orders,
            customer_repo=repos.customers,
            warehouse_repo=repos.warehouses,
            product_repo=repos.products,
            reservations=reservations,
        ),
        update_order=UpdateOrderHandler(repos.orders, repos.products, reservations),
        cancel_order=CancelOrderHandler(repos.orders, reservations),
        show_order=ShowOrderHandler(repos.orders, repos.customers, repos.products),
        list_orders=ListOrdersHandler(
            repos.orders, repos.customers, repos.products, default_limit=limit
        ),
        create_shipment=CreateShipmentHandler(repos.shipments, lifecycle),
        update_shipment_status=UpdateShipmentStatusHandler(repos.shipments, lifecycle),
        cancel_shipment=CancelShipmentHandler(repos.shipments, lifecycle),
        show_shipment=ShowShipmentHandler(repos.shipments),
        list_shipments=ListShipmentsHandler(repos.shipments, default_limit=limit),
        create_invoice=CreateInvoiceHandler(repos.invoices, repos.orders),
        update_invoice_status=UpdateInvoiceStatusHandler(repos.invoices),
        show_invoice=ShowInvoiceHandler(repos.invoices),
        list_invoices=ListInvoicesHandler(repos.invoices, default_limit=limit),
        adjust_stock=AdjustStockHandler(ledger, repos.warehouses, repos.products),
        move_stock=MoveStockHandler(ledger, repos.warehouses, repos.products),
        show_stock=ShowStockHandler(ledger),
        add_customer=AddCustomerHandler(repos.customers),
        delete_customer=DeleteCustomerHandler(repos.customers),
        add_product=AddProductHandler(repos.products),
        update_product=UpdateProductHandler(repos.products),
        delete_product=DeleteProductHandler(repos.products),
        add_warehouse=AddWarehouseHandler(repos.warehouses),
        delete_warehouse=DeleteWarehouseHandler(repos.warehouses),
    )


def build_container(settings: Settings | None = None) -> Container:
    settings = settings or Settings.from_env()
    db = open_database(settings)
    logger.debug(
        "container_built",
        backend=settings.backend,
        data_file=str(db.file_path) if db.file_path else None,
    )
    return wire(settings, json_repositories(db))
