"""Application service: Adjust Stock use case.

Manual stock correction for one (warehouse, product) pair.  The warehouse
and product must exist and not be soft-deleted; inactive products can
still be stocked.
"""

from __future__ import annotations

from backoffice.application.dto import StockRecordDTO
from backoffice.application.validation import is_positive_int
from backoffice.domain.exceptions import ProductNotFound, ValidationError, WarehouseNotFound
from backoffice.domain.repository.product_repository import ProductRepository
from backoffice.domain.repository.warehouse_repository import WarehouseRepository
from backoffice.domain.service.stock_ledger import StockLedger


class AdjustStockHandler:

    def __init__(
        self,
        ledger: StockLedger,
        warehouse_repo: WarehouseRepository,
        product_repo: ProductRepository,
    ) -> None:
        self._ledger = ledger
        self._warehouse_repo = warehouse_repo
        self._product_repo = product_repo

    def handle(self, warehouse_id: object, product_id: object, delta: object) -> StockRecordDTO:
        errors: list[str] = []
        if not is_positive_int(warehouse_id):
            errors.append("warehouseId must be an integer > 0")
        if not is_positive_int(product_id):
            errors.append("productId must be an integer > 0")
        if not isinstance(delta, int) or isinstance(delta, bool):
            errors.append("delta must be an integer")
        if errors:
            raise ValidationError("VALIDATION_ERROR", errors)

        if self._warehouse_repo.find_active(warehouse_id) is None:  # type: ignore[arg-type]
            raise WarehouseNotFound(f"Warehouse #{warehouse_id} not found")
        product = self._product_repo.get_by_id(product_id)  # type: ignore[arg-type]
        if product is None or product.deleted_at is not None:
            raise ProductNotFound(f"Product #{product_id} not found")

        record = self._ledger.adjust(warehouse_id, product_id, delta)  # type: ignore[arg-type]
        return StockRecordDTO.from_domain(record)
