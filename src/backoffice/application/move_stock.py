"""Application service: Move Stock use case (warehouse to warehouse)."""

from __future__ import annotations

from backoffice.application.dto import StockMoveDTO, StockRecordDTO
from backoffice.application.validation import is_positive_int
from backoffice.domain.exceptions import ProductNotFound, ValidationError, WarehouseNotFound
from backoffice.domain.repository.product_repository import ProductRepository
from backoffice.domain.repository.warehouse_repository import WarehouseRepository
from backoffice.domain.service.stock_ledger import StockLedger


class MoveStockHandler:

    def __init__(
        self,
        ledger: StockLedger,
        warehouse_repo: WarehouseRepository,
        product_repo: ProductRepository,
    ) -> None:
        self._ledger = ledger
        self._warehouse_repo = warehouse_repo
        self._product_repo = product_repo

    def handle(
        self,
        from_warehouse_id: object,
        to_warehouse_id: object,
        product_id: object,
        qty: object,
    ) -> StockMoveDTO:
        errors: list[str] = []
        if not is_positive_int(from_warehouse_id):
            errors.append("fromWarehouseId must be an integer > 0")
        if not is_positive_int(to_warehouse_id):
            errors.append("toWarehouseId must be an integer > 0")
        if not is_positive_int(product_id):
            errors.append("productId must be an integer > 0")
        if not is_positive_int(qty):
            errors.append("qty must be an integer > 0")
        if errors:
            raise ValidationError("VALIDATION_ERROR", errors)

        if self._warehouse_repo.find_active(from_warehouse_id) is None:  # type: ignore[arg-type]
            raise WarehouseNotFound(f"Origin warehouse #{from_warehouse_id} not found")
        if self._warehouse_repo.find_active(to_warehouse_id) is None:  # type: ignore[arg-type]
            raise WarehouseNotFound(f"Destination warehouse #{to_warehouse_id} not found")
        product = self._product_repo.get_by_id(product_id)  # type: ignore[arg-type]
        if product is None or product.deleted_at is not None:
            raise ProductNotFound(f"Product #{product_id} not found")

        move = self._ledger.move(from_warehouse_id, to_warehouse_id, product_id, qty)  # type: ignore[arg-type]
        return StockMoveDTO(
            source=StockRecordDTO.from_domain(move.source),
            destination=StockRecordDTO.from_domain(move.destination),
        )
