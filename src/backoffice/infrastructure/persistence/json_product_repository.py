"""JSON-backed implementation of ProductRepository."""

from __future__ import annotations

from backoffice.domain.model.product import Product
from backoffice.domain.model.value_objects import Money
from backoffice.domain.repository.product_repository import ProductRepository
from backoffice.infrastructure.persistence.json_database import JsonDatabase
from backoffice.infrastructure.persistence.json_repository import (
    JsonTable,
    dump_dt,
    load_dt,
    load_ts,
)


class JsonProductRepository(ProductRepository):

    def __init__(self, db: JsonDatabase) -> None:
        self._table = JsonTable(db, "products", self._to_raw, self._to_domain)

    # --- ProductRepository interface ------------------------------------------

    def get_by_id(self, product_id: int) -> Product | None:
        return self._table.get(product_id)

    def get_by_sku(self, sku: str) -> Product | None:
        return self._table.find_first(
            lambda raw: raw["sku"] == sku and raw.get("deletedAt") is None
        )

    def find_by_ids(self, product_ids: list[int]) -> list[Product]:
        wanted = set(product_ids)
        return self._table.find_all(lambda raw: raw["id"] in wanted)

    def list_all(self) -> list[Product]:
        return self._table.find_all()

    def save(self, product: Product) -> None:
        self._table.upsert(product)

    # --- Serialization --------------------------------------------------------

    @staticmethod
    def _to_raw(product: Product) -> dict:
        return {
            "id": product.id,
            "sku": product.sku,
            "name": product.name,
            "priceCents": product.price.cents,
            "active": product.active,
            "deletedAt": dump_dt(product.deleted_at),
            "createdAt": dump_dt(product.created_at),
        }

    @staticmethod
    def _to_domain(raw: dict) -> Product:
        return Product(
            id=raw["id"],
            sku=raw["sku"],
            name=raw["name"],
            price=Money(int(raw["priceCents"])),
            active=raw.get("active", True),
            deleted_at=load_dt(raw.get("deletedAt")),
            created_at=load_ts(raw.get("createdAt")),
        )
