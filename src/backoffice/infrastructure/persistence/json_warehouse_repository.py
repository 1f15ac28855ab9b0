"""JSON-backed implementation of WarehouseRepository."""

from __future__ import annotations

from backoffice.domain.model.warehouse import Warehouse
from backoffice.domain.repository.warehouse_repository import WarehouseRepository
from backoffice.infrastructure.persistence.json_database import JsonDatabase
from backoffice.infrastructure.persistence.json_repository import (
    JsonTable,
    dump_dt,
    load_dt,
    load_ts,
)


class JsonWarehouseRepository(WarehouseRepository):

    def __init__(self, db: JsonDatabase) -> None:
        self._table = JsonTable(db, "warehouses", self._to_raw, self._to_domain)

    def get_by_id(self, warehouse_id: int) -> Warehouse | None:
        return self._table.get(warehouse_id)

    def list_all(self) -> list[Warehouse]:
        return self._table.find_all()

    def save(self, warehouse: Warehouse) -> None:
        self._table.upsert(warehouse)

    @staticmethod
    def _to_raw(warehouse: Warehouse) -> dict:
        return {
            "id": warehouse.id,
            "name": warehouse.name,
            "city": warehouse.city,
            "deletedAt": dump_dt(warehouse.deleted_at),
            "createdAt": dump_dt(warehouse.created_at),
        }

    @staticmethod
    def _to_domain(raw: dict) -> Warehouse:
        return Warehouse(
            id=raw["id"],
            name=raw["name"],
            city=raw.get("city", ""),
            deleted_at=load_dt(raw.get("deletedAt")),
            created_at=load_ts(raw.get("createdAt")),
        )
