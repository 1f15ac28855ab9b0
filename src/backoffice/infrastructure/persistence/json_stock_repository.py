"""JSON-backed implementation of StockRepository.

``insert`` and ``increment`` each run under the database lock, so the
uniqueness check and the conditional update are single atomic steps.
"""

from __future__ import annotations

from backoffice.domain.exceptions import DuplicateRecordError
from backoffice.domain.model.stock import StockRecord
from backoffice.domain.repository.stock_repository import StockRepository
from backoffice.infrastructure.persistence.json_database import JsonDatabase

_TABLE = "stock"


class JsonStockRepository(StockRepository):

    def __init__(self, db: JsonDatabase) -> None:
        self._db = db

    # --- StockRepository interface --------------------------------------------

    def find(self, warehouse_id: int, product_id: int) -> StockRecord | None:
        for raw in self._db.snapshot(_TABLE):
            if raw["warehouseId"] == warehouse_id and raw["productId"] == product_id:
                return self._to_domain(raw)
        return None

    def insert(self, record: StockRecord) -> StockRecord:
        with self._db.transaction():
            records = self._db.records(_TABLE)
            if self._locate(records, record.warehouse_id, record.product_id) is not None:
                raise DuplicateRecordError(
                    f"Stock record for warehouse #{record.warehouse_id} / product "
                    f"#{record.product_id} already exists"
                )
            record.id = self._db.next_id(_TABLE)
            records.append(self._to_raw(record))
        return StockRecord(record.id, record.warehouse_id, record.product_id, record.qty)

    def increment(self, warehouse_id: int, product_id: int, delta: int) -> StockRecord | None:
        with self._db.transaction():
            raw = self._locate(self._db.records(_TABLE), warehouse_id, product_id)
            if raw is None:
                return None
            if delta < 0 and raw["qty"] < -delta:
                return None
            raw["qty"] += delta
            return self._to_domain(raw)

    def list(
        self, warehouse_id: int | None = None, product_id: int | None = None
    ) -> list[StockRecord]:
        return [
            self._to_domain(raw)
            for raw in self._db.snapshot(_TABLE)
            if (warehouse_id is None or raw["warehouseId"] == warehouse_id)
            and (product_id is None or raw["productId"] == product_id)
        ]

    # --- Helpers --------------------------------------------------------------

    @staticmethod
    def _locate(records: list[dict], warehouse_id: int, product_id: int) -> dict | None:
        for raw in records:
            if raw["warehouseId"] == warehouse_id and raw["productId"] == product_id:
                return raw
        return None

    @staticmethod
    def _to_raw(record: StockRecord) -> dict:
        return {
            "id": record.id,
            "warehouseId": record.warehouse_id,
            "productId": record.product_id,
            "qty": record.qty,
        }

    @staticmethod
    def _to_domain(raw: dict) -> StockRecord:
        return StockRecord(
            id=raw["id"],
            warehouse_id=raw["warehouseId"],
            product_id=raw["productId"],
            qty=raw["qty"],
        )
