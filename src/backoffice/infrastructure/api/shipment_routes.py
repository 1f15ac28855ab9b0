"""REST endpoints for shipments."""

from __future__ import annotations

from typing import Optional

from fastapi import APIRouter, Depends, Query, Response

from backoffice.application.dto import DestinationSpec
from backoffice.infrastructure.api.dependencies import get_container, lenient_int, set_page_headers
from backoffice.infrastructure.api.schemas import (
    ERROR_RESPONSES,
    ShipmentCreateRequest,
    ShipmentOut,
    ShipmentStatusRequest,
    StatusOut,
)
from backoffice.infrastructure.bootstrap import Container

router = APIRouter(prefix="/shipments", tags=["shipments"], responses=ERROR_RESPONSES)


@router.post("", response_model=ShipmentOut, status_code=201)
def create_shipment(request: ShipmentCreateRequest, container: Container = Depends(get_container)):
    destination = None
    if request.destination is not None:
        destination = DestinationSpec(
            address=request.destination.address,
            lat=request.destination.lat,
            lng=request.destination.lng,
        )
    dto = container.create_shipment.handle(request.order_id, destination)
    return ShipmentOut.model_validate(dto)


@router.get("", response_model=list[ShipmentOut])
def list_shipments(
    response: Response,
    page: Optional[str] = Query(default=None),
    limit: Optional[str] = Query(default=None),
    status: Optional[str] = Query(default=None),
    order_id: Optional[int] = Query(default=None, alias="orderId"),
    container: Container = Depends(get_container),
):
    result = container.list_shipments.handle(
        page=lenient_int(page), limit=lenient_int(limit), status=status, order_id=order_id
    )
    set_page_headers(response, result)
    return [ShipmentOut.model_validate(s) for s in result.items]


@router.get("/{shipment_id}", response_model=ShipmentOut)
def get_shipment(shipment_id: int, container: Container = Depends(get_container)):
    return ShipmentOut.model_validate(container.show_shipment.handle(shipment_id))


@router.patch("/{shipment_id}/status", response_model=ShipmentOut)
def update_shipment_status(
    shipment_id: int,
    request: ShipmentStatusRequest,
    container: Container = Depends(get_container),
):
    dto = container.update_shipment_status.handle(shipment_id, request.status, request.note)
    return ShipmentOut.model_validate(dto)


@router.delete("/{shipment_id}", response_model=StatusOut)
def cancel_shipment(shipment_id: int, container: Container = Depends(get_container)):
    return StatusOut.model_validate(container.cancel_shipment.handle(shipment_id))
