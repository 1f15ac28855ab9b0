"""Data Transfer Objects — plain containers that cross layer boundaries.

DTOs carry data between the CLI / HTTP layers and the application layer
without exposing domain internals to the outside world.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Generic, TypeVar

from backoffice.domain.model.customer import Customer
from backoffice.domain.model.invoice import Invoice
from backoffice.domain.model.order import Order
from backoffice.domain.model.product import Product
from backoffice.domain.model.shipment import Shipment
from backoffice.domain.model.stock import StockRecord
from backoffice.domain.model.warehouse import Warehouse

T = TypeVar("T")


# --- Inputs ---------------------------------------------------------------------


@dataclass(frozen=True)
class OrderItemSpec:
    """Input: one requested line (product id + quantity), not yet validated."""

    product_id: object
    quantity: object


@dataclass(frozen=True)
class DestinationSpec:
    """Input: shipment destination, not yet validated."""

    address: object
    lat: object = None
    lng: object = None


# --- Outputs --------------------------------------------------------------------


@dataclass(frozen=True)
class CustomerDTO:
    id: int
    name: str
    email: str
    status: str
    deleted_at: str | None

    @staticmethod
    def from_domain(customer: Customer) -> CustomerDTO:
        return CustomerDTO(
            id=customer.id,  # type: ignore[arg-type]
            name=customer.name,
            email=customer.email,
            status=customer.status.value,
            deleted_at=customer.deleted_at.isoformat() if customer.deleted_at else None,
        )


@dataclass(frozen=True)
class ProductDTO:
    id: int
    sku: str
    name: str
    price_cents: int
    active: bool
    deleted_at: str | None

    @staticmethod
    def from_domain(product: Product) -> ProductDTO:
        return ProductDTO(
            id=product.id,  # type: ignore[arg-type]
            sku=product.sku,
            name=product.name,
            price_cents=product.price.cents,
            active=product.active,
            deleted_at=product.deleted_at.isoformat() if product.deleted_at else None,
        )


@dataclass(frozen=True)
class WarehouseDTO:
    id: int
    name: str
    city: str
    deleted_at: str | None

    @staticmethod
    def from_domain(warehouse: Warehouse) -> WarehouseDTO:
        return WarehouseDTO(
            id=warehouse.id,  # type: ignore[arg-type]
            name=warehouse.name,
            city=warehouse.city,
            deleted_at=warehouse.deleted_at.isoformat() if warehouse.deleted_at else None,
        )


@dataclass(frozen=True)
class StockRecordDTO:
    id: int
    warehouse_id: int
    product_id: int
    qty: int

    @staticmethod
    def from_domain(record: StockRecord) -> StockRecordDTO:
        return StockRecordDTO(
            id=record.id,  # type: ignore[arg-type]
            warehouse_id=record.warehouse_id,
            product_id=record.product_id,
            qty=record.qty,
        )


@dataclass(frozen=True)
class StockMoveDTO:
    source: StockRecordDTO
    destination: StockRecordDTO


@dataclass(frozen=True)
class OrderLineItemDTO:
    """Output: a single line item, optionally with its product embedded."""

    product_id: int
    qty: int
    product: ProductDTO | None = None


@dataclass(frozen=True)
class OrderDTO:
    """Output: a complete order as displayed to the user."""

    id: int
    customer_id: int
    warehouse_id: int
    status: str
    items: list[OrderLineItemDTO]
    total_cents: int
    created_at: str
    updated_at: str
    customer: CustomerDTO | None = None

    @staticmethod
    def from_domain(
        order: Order,
        customer: Customer | None = None,
        products: dict[int, Product] | None = None,
    ) -> OrderDTO:
        items = []
        for item in order.items:
            product = None
            if products is not None and item.product_id in products:
                product = ProductDTO.from_domain(products[item.product_id])
            items.append(
                OrderLineItemDTO(product_id=item.product_id, qty=item.qty, product=product)
            )
        return OrderDTO(
            id=order.id,  # type: ignore[arg-type]
            customer_id=order.customer_id,
            warehouse_id=order.warehouse_id,
            status=order.status.value,
            items=items,
            total_cents=order.total.cents,
            created_at=order.created_at.isoformat(),
            updated_at=order.updated_at.isoformat(),
            customer=CustomerDTO.from_domain(customer) if customer else None,
        )


@dataclass(frozen=True)
class StatusDTO:
    """Output: the id/status pair returned by cancellations."""

    id: int
    status: str


@dataclass(frozen=True)
class DestinationDTO:
    address: str
    lat: float | None
    lng: float | None


@dataclass(frozen=True)
class TrackingEntryDTO:
    ts: str
    status: str
    note: str | None


@dataclass(frozen=True)
class ShipmentDTO:
    id: int
    order_id: int
    status: str
    origin_warehouse_id: int
    destination: DestinationDTO
    tracking: list[TrackingEntryDTO]
    created_at: str
    updated_at: str

    @staticmethod
    def from_domain(shipment: Shipment) -> ShipmentDTO:
        return ShipmentDTO(
            id=shipment.id,  # type: ignore[arg-type]
            order_id=shipment.order_id,
            status=shipment.status.value,
            origin_warehouse_id=shipment.origin_warehouse_id,
            destination=DestinationDTO(
                address=shipment.destination.address,
                lat=shipment.destination.lat,
                lng=shipment.destination.lng,
            ),
            tracking=[
                TrackingEntryDTO(ts=e.ts.isoformat(), status=e.status.value, note=e.note)
                for e in shipment.tracking
            ],
            created_at=shipment.created_at.isoformat(),
            updated_at=shipment.updated_at.isoformat(),
        )


@dataclass(frozen=True)
class InvoiceDTO:
    id: int
    order_id: int
    customer_id: int
    amount_cents: int
    status: str
    created_at: str
    updated_at: str

    @staticmethod
    def from_domain(invoice: Invoice) -> InvoiceDTO:
        return InvoiceDTO(
            id=invoice.id,  # type: ignore[arg-type]
            order_id=invoice.order_id,
            customer_id=invoice.customer_id,
            amount_cents=invoice.amount.cents,
            status=invoice.status.value,
            created_at=invoice.created_at.isoformat(),
            updated_at=invoice.updated_at.isoformat(),
        )


@dataclass(frozen=True)
class PageDTO(Generic[T]):
    """Output: one page of a list query plus pagination metadata."""

    items: list[T] = field(default_factory=list)
    total: int = 0
    page: int = 1
    limit: int = 20
