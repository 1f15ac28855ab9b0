"""Application service: Show Stock use case (query)."""

from __future__ import annotations

from backoffice.application.dto import StockRecordDTO
from backoffice.domain.service.stock_ledger import StockLedger


class ShowStockHandler:

    def __init__(self, ledger: StockLedger) -> None:
        self._ledger = ledger

    def handle(
        self, warehouse_id: int | None = None, product_id: int | None = None
    ) -> list[StockRecordDTO]:
        records = self._ledger.list(warehouse_id=warehouse_id, product_id=product_id)
        return [StockRecordDTO.from_domain(r) for r in records]
