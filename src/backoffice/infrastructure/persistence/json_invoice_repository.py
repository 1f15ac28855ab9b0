"""JSON-backed implementation of InvoiceRepository."""

from __future__ import annotations

from backoffice.domain.exceptions import DuplicateRecordError
from backoffice.domain.model.invoice import Invoice, InvoiceStatus
from backoffice.domain.model.value_objects import Money
from backoffice.domain.repository.invoice_repository import InvoiceRepository
from backoffice.domain.repository.page import Page
from backoffice.infrastructure.persistence.json_database import JsonDatabase
from backoffice.infrastructure.persistence.json_repository import JsonTable, dump_dt, load_ts


class JsonInvoiceRepository(InvoiceRepository):

    def __init__(self, db: JsonDatabase) -> None:
        self._db = db
        self._table = JsonTable(db, "invoices", self._to_raw, self._to_domain)

    def get_by_id(self, invoice_id: int) -> Invoice | None:
        return self._table.get(invoice_id)

    def get_by_order_id(self, order_id: int) -> Invoice | None:
        return self._table.find_first(lambda raw: raw["orderId"] == order_id)

    def save(self, invoice: Invoice) -> None:
        # The uniqueness check and the insert share one lock hold.
        is_new = invoice.id is None
        try:
            with self._db.transaction():
                if is_new:
                    for raw in self._db.records("invoices"):
                        if raw["orderId"] == invoice.order_id:
                            raise DuplicateRecordError(
                                f"Invoice for order #{invoice.order_id} already exists"
                            )
                self._table.upsert(invoice)
        except Exception:
            if is_new:
                invoice.id = None
            raise

    def list(
        self,
        status: InvoiceStatus | None = None,
        order_id: int | None = None,
        skip: int = 0,
        limit: int = 20,
    ) -> Page[Invoice]:
        filters = {"status": status.value if status else None, "orderId": order_id}
        return self._table.page(filters, skip, limit)

    @staticmethod
    def _to_raw(invoice: Invoice) -> dict:
        return {
            "id": invoice.id,
            "orderId": invoice.order_id,
            "customerId": invoice.customer_id,
            "amountCents": invoice.amount.cents,
            "status": invoice.status.value,
            "createdAt": dump_dt(invoice.created_at),
            "updatedAt": dump_dt(invoice.updated_at),
        }

    @staticmethod
    def _to_domain(raw: dict) -> Invoice:
        return Invoice(
            id=raw["id"],
            order_id=raw["orderId"],
            customer_id=raw["customerId"],
            amount=Money(raw["amountCents"]),
            status=InvoiceStatus(raw["status"]),
            created_at=load_ts(raw.get("createdAt")),
            updated_at=load_ts(raw.get("updatedAt")),
        )
