"""JSON-backed implementation of CustomerRepository."""

from __future__ import annotations

from backoffice.domain.model.customer import Customer, CustomerStatus
from backoffice.domain.repository.customer_repository import CustomerRepository
from backoffice.infrastructure.persistence.json_database import JsonDatabase
from backoffice.infrastructure.persistence.json_repository import (
    JsonTable,
    dump_dt,
    load_dt,
    load_ts,
)


class JsonCustomerRepository(CustomerRepository):

    def __init__(self, db: JsonDatabase) -> None:
        self._table = JsonTable(db, "customers", self._to_raw, self._to_domain)

    # --- CustomerRepository interface -----------------------------------------

    def get_by_id(self, customer_id: int) -> Customer | None:
        return self._table.get(customer_id)

    def list_all(self) -> list[Customer]:
        return self._table.find_all()

    def save(self, customer: Customer) -> None:
        self._table.upsert(customer)

    # --- Serialization --------------------------------------------------------

    @staticmethod
    def _to_raw(customer: Customer) -> dict:
        return {
            "id": customer.id,
            "name": customer.name,
            "email": customer.email,
            "status": customer.status.value,
            "deletedAt": dump_dt(customer.deleted_at),
            "createdAt": dump_dt(customer.created_at),
        }

    @staticmethod
    def _to_domain(raw: dict) -> Customer:
        return Customer(
            id=raw["id"],
            name=raw["name"],
            email=raw.get("email", ""),
            status=CustomerStatus(raw.get("status", "active")),
            deleted_at=load_dt(raw.get("deletedAt")),
            created_at=load_ts(raw.get("createdAt")),
        )
