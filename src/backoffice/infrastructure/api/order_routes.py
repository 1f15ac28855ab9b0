"""REST endpoints for orders."""

from __future__ import annotations

from typing import Optional

from fastapi import APIRouter, Depends, Query, Response

from backoffice.application.dto import OrderItemSpec
from backoffice.infrastructure.api.dependencies import (
    get_container,
    lenient_int,
    parse_include,
    set_page_headers,
)
from backoffice.infrastructure.api.schemas import (
    ERROR_RESPONSES,
    OrderCreateRequest,
    OrderItemIn,
    OrderOut,
    OrderUpdateRequest,
    StatusOut,
)
from backoffice.infrastructure.bootstrap import Container

router = APIRouter(prefix="/orders", tags=["orders"], responses=ERROR_RESPONSES)


def _item_specs(items: Optional[list[OrderItemIn]]) -> Optional[list[OrderItemSpec]]:
    if items is None:
        return None
    return [OrderItemSpec(product_id=i.product_id, quantity=i.qty) for i in items]


@router.post("", response_model=OrderOut, status_code=201)
def create_order(request: OrderCreateRequest, container: Container = Depends(get_container)):
    dto = container.create_order.handle(
        customer_id=request.customer_id,
        warehouse_id=request.warehouse_id,
        item_specs=_item_specs(request.items),
    )
    return OrderOut.model_validate(dto)


@router.get("", response_model=list[OrderOut])
def list_orders(
    response: Response,
    page: Optional[str] = Query(default=None),
    limit: Optional[str] = Query(default=None),
    status: Optional[str] = Query(default=None),
    customer_id: Optional[int] = Query(default=None, alias="customerId"),
    include: Optional[str] = Query(default=None),
    container: Container = Depends(get_container),
):
    result = container.list_orders.handle(
        page=lenient_int(page),
        limit=lenient_int(limit),
        status=status,
        customer_id=customer_id,
        include=parse_include(include),
    )
    set_page_headers(response, result)
    return [OrderOut.model_validate(o) for o in result.items]


@router.get("/{order_id}", response_model=OrderOut)
def get_order(
    order_id: int,
    include: Optional[str] = Query(default=None),
    container: Container = Depends(get_container),
):
    dto = container.show_order.handle(order_id, include=parse_include(include))
    return OrderOut.model_validate(dto)


@router.patch("/{order_id}", response_model=OrderOut)
def update_order(
    order_id: int,
    request: OrderUpdateRequest,
    container: Container = Depends(get_container),
):
    dto = container.update_order.handle(order_id, _item_specs(request.items))
    return OrderOut.model_validate(dto)


@router.delete("/{order_id}", response_model=StatusOut)
def cancel_order(order_id: int, container: Container = Depends(get_container)):
    return StatusOut.model_validate(container.cancel_order.handle(order_id))
