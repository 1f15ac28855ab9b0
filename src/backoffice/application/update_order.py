"""Application service: Update Order use case.

Replaces the items of an ALLOCATED order.  Only the per-product
difference between the old and new quantities touches stock: a positive
difference reserves more, a negative one releases stock back.
"""

from __future__ import annotations

import structlog

from backoffice.application.dto import OrderDTO, OrderItemSpec
from backoffice.application.pricing import price_items
from backoffice.application.validation import to_line_items
from backoffice.domain.exceptions import OrderNotFound, ProductNotFound
from backoffice.domain.model.order import quantities_by_product
from backoffice.domain.repository.order_repository import OrderRepository
from backoffice.domain.repository.product_repository import ProductRepository
from backoffice.domain.service.inventory_reservation_service import (
    InventoryReservationService,
)

logger = structlog.get_logger(__name__)


class UpdateOrderHandler:

    def __init__(
        self,
        order_repo: OrderRepository,
        product_repo: ProductRepository,
        reservations: InventoryReservationService,
    ) -> None:
        self._order_repo = order_repo
        self._product_repo = product_repo
        self._reservations = reservations

    def handle(self, order_id: int, item_specs: list[OrderItemSpec] | None) -> OrderDTO:
        order = self._order_repo.get_by_id(order_id)
        if order is None:
            raise OrderNotFound(f"Order #{order_id} not found")
        order.ensure_modifiable()

        items = to_line_items(item_specs)

        current = order.quantities
        requested = quantities_by_product(items)
        product_ids = list(current) + [pid for pid in requested if pid not in current]
        deltas = {
            pid: requested.get(pid, 0) - current.get(pid, 0) for pid in product_ids
        }
        increases = {pid: delta for pid, delta in deltas.items() if delta > 0}

        for pid in increases:
            if self._product_repo.find_active(pid) is None:
                raise ProductNotFound(f"Product #{pid} not found or inactive")
        self._reservations.check_available(order.warehouse_id, increases)

        # Stock moves opposite to the order: more ordered means less on hand.
        self._reservations.apply(
            order.warehouse_id, {pid: -delta for pid, delta in deltas.items()}
        )

        order.replace_items(items, price_items(self._product_repo, items))
        self._order_repo.save(order)

        logger.info(
            "order_updated",
            order_id=order.id,
            deltas={pid: d for pid, d in deltas.items() if d},
            total_cents=order.total.cents,
        )
        return OrderDTO.from_domain(order)
