"""Order aggregate — the core of the domain.

The Order owns its line items and its status.  Items and total are
mutable only while the order is ALLOCATED; every other status freezes
them.  Stock reservation is coordinated outside the aggregate (see the
inventory reservation service) because it spans several stock records.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from datetime import datetime, timezone
from enum import Enum

from backoffice.domain.exceptions import (
    OrderNotCancelable,
    OrderNotModifiable,
    TransitionNotAllowed,
    ValidationError,
)
from backoffice.domain.model.value_objects import Money, Quantity


class OrderStatus(Enum):
    ALLOCATED = "allocated"
    SHIPPED = "shipped"
    DELIVERED = "delivered"
    CANCELLED = "cancelled"


# Direct transitions owned by the order engine.  SHIPPED -> ALLOCATED only
# happens through shipment cancellation.
ORDER_TRANSITIONS: dict[OrderStatus, frozenset[OrderStatus]] = {
    OrderStatus.ALLOCATED: frozenset({OrderStatus.SHIPPED, OrderStatus.CANCELLED}),
    OrderStatus.SHIPPED: frozenset({OrderStatus.DELIVERED, OrderStatus.ALLOCATED}),
    OrderStatus.DELIVERED: frozenset(),
    OrderStatus.CANCELLED: frozenset(),
}


@dataclass(frozen=True)
class OrderLineItem:
    """One requested product and quantity.  Prices are not captured here."""

    product_id: int
    quantity: Quantity

    @property
    def qty(self) -> int:
        return self.quantity.value


def compute_total(items: list[OrderLineItem], prices: dict[int, Money]) -> Money:
    """Sum of qty x current price.  Unknown products contribute nothing."""
    total = Money.zero()
    for item in items:
        price = prices.get(item.product_id)
        if price is not None:
            total = total + price * item.qty
    return total


def quantities_by_product(items: list[OrderLineItem]) -> dict[int, int]:
    """Collapse line items into ``{product_id: qty}`` (duplicates are summed)."""
    result: dict[int, int] = {}
    for item in items:
        result[item.product_id] = result.get(item.product_id, 0) + item.qty
    return result


def _now() -> datetime:
    return datetime.now(timezone.utc)


@dataclass
class Order:
    """Aggregate root for customer orders.

    Use ``Order.create()`` for new orders.  The ``__init__`` is kept simple
    so repositories can reconstitute persisted orders without re-validating.
    """

    id: int | None
    customer_id: int
    warehouse_id: int
    items: list[OrderLineItem]
    total: Money = field(default_factory=Money.zero)
    status: OrderStatus = OrderStatus.ALLOCATED
    created_at: datetime = field(default_factory=_now)
    updated_at: datetime = field(default_factory=_now)

    # --- Factory (used for NEW orders only) -----------------------------------

    @staticmethod
    def create(
        customer_id: int,
        warehouse_id: int,
        items: list[OrderLineItem],
        total: Money,
    ) -> Order:
        if not items:
            raise ValidationError("Order must contain at least one item")
        return Order(
            id=None,
            customer_id=customer_id,
            warehouse_id=warehouse_id,
            items=list(items),
            total=total,
        )

    # --- Guards ---------------------------------------------------------------

    @property
    def is_allocated(self) -> bool:
        return self.status == OrderStatus.ALLOCATED

    def ensure_modifiable(self) -> None:
        if not self.is_allocated:
            raise OrderNotModifiable(
                f"Order #{self.id} is {self.status.value}; only allocated orders can be modified"
            )

    def ensure_cancelable(self) -> None:
        if not self.is_allocated:
            raise OrderNotCancelable(
                f"Order #{self.id} is {self.status.value}; only allocated orders can be cancelled"
            )

    # --- Mutations ------------------------------------------------------------

    def replace_items(self, items: list[OrderLineItem], total: Money) -> None:
        """Swap the item list and cached total (ALLOCATED only)."""
        self.ensure_modifiable()
        if not items:
            raise ValidationError("Order must contain at least one item")
        self.items = list(items)
        self.total = total
        self.updated_at = _now()

    def cancel(self) -> None:
        """ALLOCATED -> CANCELLED.  The reservation must be released first."""
        self.ensure_cancelable()
        self.status = OrderStatus.CANCELLED
        self.updated_at = _now()

    def transition_to(self, next_status: OrderStatus) -> None:
        if next_status not in ORDER_TRANSITIONS[self.status]:
            raise TransitionNotAllowed(self.status.value, next_status.value)
        self.status = next_status
        self.updated_at = _now()

    # --- Computed properties --------------------------------------------------

    @property
    def quantities(self) -> dict[int, int]:
        return quantities_by_product(self.items)

    @property
    def product_ids(self) -> list[int]:
        seen: list[int] = []
        for item in self.items:
            if item.product_id not in seen:
                seen.append(item.product_id)
        return seen
