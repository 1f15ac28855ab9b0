"""REST endpoints for invoices."""

from __future__ import annotations

from typing import Optional

from fastapi import APIRouter, Depends, Query, Response

from backoffice.infrastructure.api.dependencies import get_container, lenient_int, set_page_headers
from backoffice.infrastructure.api.schemas import (
    ERROR_RESPONSES,
    InvoiceCreateRequest,
    InvoiceOut,
    InvoiceStatusRequest,
)
from backoffice.infrastructure.bootstrap import Container

router = APIRouter(prefix="/invoices", tags=["invoices"], responses=ERROR_RESPONSES)


@router.post("", response_model=InvoiceOut, status_code=201)
def create_invoice(request: InvoiceCreateRequest, container: Container = Depends(get_container)):
    return InvoiceOut.model_validate(container.create_invoice.handle(request.order_id))


@router.get("", response_model=list[InvoiceOut])
def list_invoices(
    response: Response,
    page: Optional[str] = Query(default=None),
    limit: Optional[str] = Query(default=None),
    status: Optional[str] = Query(default=None),
    order_id: Optional[int] = Query(default=None, alias="orderId"),
    container: Container = Depends(get_container),
):
    result = container.list_invoices.handle(
        page=lenient_int(page), limit=lenient_int(limit), status=status, order_id=order_id
    )
    set_page_headers(response, result)
    return [InvoiceOut.model_validate(i) for i in result.items]


@router.get("/{invoice_id}", response_model=InvoiceOut)
def get_invoice(invoice_id: int, container: Container = Depends(get_container)):
    return InvoiceOut.model_validate(container.show_invoice.handle(invoice_id))


@router.patch("/{invoice_id}/status", response_model=InvoiceOut)
def update_invoice_status(
    invoice_id: int,
    request: InvoiceStatusRequest,
    container: Container = Depends(get_container),
):
    dto = container.update_invoice_status.handle(invoice_id, request.status)
    return InvoiceOut.model_validate(dto)
