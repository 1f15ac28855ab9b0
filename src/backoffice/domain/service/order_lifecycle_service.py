"""Domain service: Order Lifecycle.

The single writer of order status changes caused by shipment events.
Shipment use cases call back into this service instead of touching the
order themselves.
"""

from __future__ import annotations

import structlog

from backoffice.domain.exceptions import OrderInvalidStatus, OrderNotFound
from backoffice.domain.model.order import Order, OrderStatus
from backoffice.domain.repository.order_repository import OrderRepository

logger = structlog.get_logger(__name__)


class OrderLifecycleService:

    def __init__(self, order_repo: OrderRepository) -> None:
        self._order_repo = order_repo

    def require(self, order_id: int) -> Order:
        order = self._order_repo.get_by_id(order_id)
        if order is None:
            raise OrderNotFound(f"Order #{order_id} not found")
        return order

    def require_status(self, order_id: int, status: OrderStatus) -> Order:
        """Load an order and insist it is currently in ``status``."""
        order = self.require(order_id)
        if order.status != status:
            raise OrderInvalidStatus(
                f"Order #{order_id} is {order.status.value}, expected {status.value}"
            )
        return order

    def mark_shipped(self, order: Order) -> Order:
        """ALLOCATED -> SHIPPED, when a shipment is created."""
        if order.status != OrderStatus.ALLOCATED:
            raise OrderInvalidStatus(
                f"Order #{order.id} is {order.status.value}, expected allocated"
            )
        return self._move(order, OrderStatus.SHIPPED)

    def mark_delivered(self, order_id: int) -> Order | None:
        """SHIPPED -> DELIVERED, when the order's shipment is delivered."""
        order = self._order_repo.get_by_id(order_id)
        if order is None:
            logger.warning("order_missing_for_shipment", order_id=order_id)
            return None
        if order.status != OrderStatus.SHIPPED:
            logger.warning(
                "order_not_shipped_on_delivery",
                order_id=order_id,
                status=order.status.value,
            )
            return order
        return self._move(order, OrderStatus.DELIVERED)

    def revert_to_allocated(self, order_id: int) -> Order | None:
        """SHIPPED -> ALLOCATED, when the order's shipment is cancelled.

        Orders in any other status are left alone.  Stock is not touched:
        the reservation taken at creation was never released by shipping.
        """
        order = self._order_repo.get_by_id(order_id)
        if order is None or order.status != OrderStatus.SHIPPED:
            return order
        return self._move(order, OrderStatus.ALLOCATED)

    def _move(self, order: Order, status: OrderStatus) -> Order:
        previous = order.status
        order.transition_to(status)
        self._order_repo.save(order)
        logger.info(
            "order_status_changed",
            order_id=order.id,
            previous=previous.value,
            status=status.value,
        )
        return order
