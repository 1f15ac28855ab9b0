"""Pydantic request/response schemas for the REST surface.

Field names are snake_case in Python and camelCase on the wire.  Request
bodies keep every field optional so that missing values reach the use
cases, which report them together in one ``details`` list.
"""

from __future__ import annotations

from typing import Optional

from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel


class ApiModel(BaseModel):
    model_config = ConfigDict(
        alias_generator=to_camel,
        populate_by_name=True,
        from_attributes=True,
    )


# --- Requests ---


class OrderItemIn(ApiModel):
    product_id: Optional[int] = None
    qty: Optional[int] = None


class OrderCreateRequest(ApiModel):
    customer_id: Optional[int] = None
    warehouse_id: Optional[int] = None
    items: Optional[list[OrderItemIn]] = None


class OrderUpdateRequest(ApiModel):
    items: Optional[list[OrderItemIn]] = None


class DestinationIn(ApiModel):
    address: Optional[str] = None
    lat: Optional[float] = None
    lng: Optional[float] = None


class ShipmentCreateRequest(ApiModel):
    order_id: Optional[int] = None
    destination: Optional[DestinationIn] = None


class ShipmentStatusRequest(ApiModel):
    status: Optional[str] = None
    note: Optional[str] = None


class InvoiceCreateRequest(ApiModel):
    order_id: Optional[int] = None


class InvoiceStatusRequest(ApiModel):
    status: Optional[str] = None


class StockAdjustRequest(ApiModel):
    warehouse_id: Optional[int] = None
    product_id: Optional[int] = None
    delta: Optional[int] = None


class StockMoveRequest(ApiModel):
    from_warehouse_id: Optional[int] = None
    to_warehouse_id: Optional[int] = None
    product_id: Optional[int] = None
    qty: Optional[int] = None


# --- Responses ---


class CustomerOut(ApiModel):
    id: int
    name: str
    email: str
    status: str
    deleted_at: Optional[str] = None


class ProductOut(ApiModel):
    id: int
    sku: str
    name: str
    price_cents: int
    active: bool
    deleted_at: Optional[str] = None


class OrderItemOut(ApiModel):
    product_id: int
    qty: int
    product: Optional[ProductOut] = None


class OrderOut(ApiModel):
    id: int
    customer_id: int
    warehouse_id: int
    status: str
    items: list[OrderItemOut]
    total_cents: int
    created_at: str
    updated_at: str
    customer: Optional[CustomerOut] = None


class StatusOut(ApiModel):
    id: int
    status: str


class DestinationOut(ApiModel):
    address: str
    lat: Optional[float] = None
    lng: Optional[float] = None


class TrackingEntryOut(ApiModel):
    ts: str
    status: str
    note: Optional[str] = None


class ShipmentOut(ApiModel):
    id: int
    order_id: int
    status: str
    origin_warehouse_id: int
    destination: DestinationOut
    tracking: list[TrackingEntryOut]
    created_at: str
    updated_at: str


class InvoiceOut(ApiModel):
    id: int
    order_id: int
    customer_id: int
    amount_cents: int
    status: str
    created_at: str
    updated_at: str


class StockRecordOut(ApiModel):
    id: int
    warehouse_id: int
    product_id: int
    qty: int


class StockMoveOut(ApiModel):
    source: StockRecordOut = Field(alias="from")
    destination: StockRecordOut = Field(alias="to")


class ErrorResponse(BaseModel):
    message: str
    code: str
    details: Optional[list[str]] = None


ERROR_RESPONSES: dict = {
    status: {"model": ErrorResponse} for status in (400, 404, 409, 500)
}
