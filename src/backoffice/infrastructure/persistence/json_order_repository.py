"""JSON-backed implementation of OrderRepository."""

from __future__ import annotations

from backoffice.domain.model.order import Order, OrderLineItem, OrderStatus
from backoffice.domain.model.value_objects import Money, Quantity
from backoffice.domain.repository.order_repository import OrderRepository
from backoffice.domain.repository.page import Page
from backoffice.infrastructure.persistence.json_database import JsonDatabase
from backoffice.infrastructure.persistence.json_repository import JsonTable, dump_dt, load_ts


class JsonOrderRepository(OrderRepository):

    def __init__(self, db: JsonDatabase) -> None:
        self._table = JsonTable(db, "orders", self._to_raw, self._to_domain)

    # --- OrderRepository interface --------------------------------------------

    def get_by_id(self, order_id: int) -> Order | None:
        return self._table.get(order_id)

    def save(self, order: Order) -> None:
        self._table.upsert(order)

    def list(
        self,
        status: OrderStatus | None = None,
        customer_id: int | None = None,
        skip: int = 0,
        limit: int = 20,
    ) -> Page[Order]:
        filters = {
            "status": status.value if status else None,
            "customerId": customer_id,
        }
        return self._table.page(filters, skip, limit)

    # --- Serialization --------------------------------------------------------

    @staticmethod
    def _to_raw(order: Order) -> dict:
        return {
            "id": order.id,
            "customerId": order.customer_id,
            "warehouseId": order.warehouse_id,
            "items": [
                {"productId": item.product_id, "qty": item.qty} for item in order.items
            ],
            "status": order.status.value,
            "totalCents": order.total.cents,
            "createdAt": dump_dt(order.created_at),
            "updatedAt": dump_dt(order.updated_at),
        }

    @staticmethod
    def _to_domain(raw: dict) -> Order:
        return Order(
            id=raw["id"],
            customer_id=raw["customerId"],
            warehouse_id=raw["warehouseId"],
            items=[
                OrderLineItem(product_id=i["productId"], quantity=Quantity(i["qty"]))
                for i in raw["items"]
            ],
            total=Money(raw.get("totalCents", 0)),
            status=OrderStatus(raw["status"]),
            created_at=load_ts(raw.get("createdAt")),
            updated_at=load_ts(raw.get("updatedAt")),
        )
