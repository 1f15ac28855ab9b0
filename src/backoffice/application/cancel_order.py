"""Application service: Cancel Order use case.

Only ALLOCATED orders can be cancelled.  The full reservation is credited
back to the order's warehouse before the status changes.
"""

from __future__ import annotations

import structlog

from backoffice.application.dto import StatusDTO
from backoffice.domain.exceptions import OrderNotFound
from backoffice.domain.repository.order_repository import OrderRepository
from backoffice.domain.service.inventory_reservation_service import (
    InventoryReservationService,
)

logger = structlog.get_logger(__name__)


class CancelOrderHandler:

    def __init__(
        self,
        order_repo: OrderRepository,
        reservations: InventoryReservationService,
    ) -> None:
        self._order_repo = order_repo
        self._reservations = reservations

    def handle(self, order_id: int) -> StatusDTO:
        order = self._order_repo.get_by_id(order_id)
        if order is None:
            raise OrderNotFound(f"Order #{order_id} not found")
        order.ensure_cancelable()

        self._reservations.release(order.warehouse_id, order.quantities)

        order.cancel()
        self._order_repo.save(order)

        logger.info("order_cancelled", order_id=order.id)
        return StatusDTO(id=order.id, status=order.status.value)  # type: ignore[arg-type]
