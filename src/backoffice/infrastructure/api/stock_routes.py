"""REST endpoints for stock levels."""

from __future__ import annotations

from typing import Optional

from fastapi import APIRouter, Depends, Query

from backoffice.infrastructure.api.dependencies import get_container
from backoffice.infrastructure.api.schemas import (
    ERROR_RESPONSES,
    StockAdjustRequest,
    StockMoveOut,
    StockMoveRequest,
    StockRecordOut,
)
from backoffice.infrastructure.bootstrap import Container

router = APIRouter(prefix="/stock", tags=["stock"], responses=ERROR_RESPONSES)


@router.get("", response_model=list[StockRecordOut])
def list_stock(
    warehouse_id: Optional[int] = Query(default=None, alias="warehouseId"),
    product_id: Optional[int] = Query(default=None, alias="productId"),
    container: Container = Depends(get_container),
):
    records = container.show_stock.handle(warehouse_id=warehouse_id, product_id=product_id)
    return [StockRecordOut.model_validate(r) for r in records]


@router.post("/adjust", response_model=StockRecordOut)
def adjust_stock(request: StockAdjustRequest, container: Container = Depends(get_container)):
    dto = container.adjust_stock.handle(request.warehouse_id, request.product_id, request.delta)
    return StockRecordOut.model_validate(dto)


@router.post("/move", response_model=StockMoveOut)
def move_stock(request: StockMoveRequest, container: Container = Depends(get_container)):
    dto = container.move_stock.handle(
        request.from_warehouse_id,
        request.to_warehouse_id,
        request.product_id,
        request.qty,
    )
    return StockMoveOut.model_validate(dto)
