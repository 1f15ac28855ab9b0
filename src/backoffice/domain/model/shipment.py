"""Shipment aggregate and its status machine.

A shipment is created for an allocated order and walks the transition
table below.  Every status change appends to the tracking log, which is
append-only.  Reflecting shipment events onto the linked order is the
order lifecycle service's job, not the shipment's.
"""

from __future__ import annotations

import math
from dataclasses import dataclass, field
from datetime import datetime, timezone
from enum import Enum

from backoffice.domain.exceptions import (
    ShipmentDelivered,
    TransitionNotAllowed,
    ValidationError,
)


class ShipmentStatus(Enum):
    CREATED = "created"
    OUT_FOR_DELIVERY = "out_for_delivery"
    DELIVERED = "delivered"
    FAILED = "failed"
    CANCELLED = "cancelled"


SHIPMENT_TRANSITIONS: dict[ShipmentStatus, frozenset[ShipmentStatus]] = {
    ShipmentStatus.CREATED: frozenset(
        {ShipmentStatus.OUT_FOR_DELIVERY, ShipmentStatus.CANCELLED}
    ),
    ShipmentStatus.OUT_FOR_DELIVERY: frozenset(
        {ShipmentStatus.DELIVERED, ShipmentStatus.FAILED, ShipmentStatus.CANCELLED}
    ),
    ShipmentStatus.DELIVERED: frozenset(),
    ShipmentStatus.FAILED: frozenset(),
    ShipmentStatus.CANCELLED: frozenset(),
}


def _now() -> datetime:
    return datetime.now(timezone.utc)


@dataclass(frozen=True)
class Destination:
    address: str
    lat: float | None = None
    lng: float | None = None

    def __post_init__(self) -> None:
        errors: list[str] = []
        if not isinstance(self.address, str) or not self.address.strip():
            errors.append("destination.address is required")
        for name in ("lat", "lng"):
            value = getattr(self, name)
            if value is None:
                continue
            if (
                isinstance(value, bool)
                or not isinstance(value, (int, float))
                or not math.isfinite(value)
            ):
                errors.append(f"destination.{name} must be numeric")
        if errors:
            raise ValidationError("VALIDATION_ERROR", errors)


@dataclass(frozen=True)
class TrackingEntry:
    ts: datetime
    status: ShipmentStatus
    note: str | None = None


@dataclass
class Shipment:
    """Aggregate root for shipments.

    Use ``Shipment.create()`` for new shipments; it seeds the tracking log
    with the initial ``created`` entry.
    """

    id: int | None
    order_id: int
    origin_warehouse_id: int
    destination: Destination
    status: ShipmentStatus = ShipmentStatus.CREATED
    tracking: list[TrackingEntry] = field(default_factory=list)
    created_at: datetime = field(default_factory=_now)
    updated_at: datetime = field(default_factory=_now)

    @staticmethod
    def create(order_id: int, origin_warehouse_id: int, destination: Destination) -> Shipment:
        now = _now()
        return Shipment(
            id=None,
            order_id=order_id,
            origin_warehouse_id=origin_warehouse_id,
            destination=destination,
            tracking=[TrackingEntry(ts=now, status=ShipmentStatus.CREATED)],
            created_at=now,
            updated_at=now,
        )

    def can_transition_to(self, next_status: ShipmentStatus) -> bool:
        return next_status in SHIPMENT_TRANSITIONS[self.status]

    def advance(self, next_status: ShipmentStatus, note: str | None = None) -> None:
        """Move along the transition table and record a tracking entry."""
        if not self.can_transition_to(next_status):
            raise TransitionNotAllowed(self.status.value, next_status.value)
        self._record(next_status, note)

    def cancel(self) -> None:
        """Cancel unless already delivered.

        Cancellation of an already failed or cancelled shipment is accepted
        and only appends another tracking entry.
        """
        if self.status == ShipmentStatus.DELIVERED:
            raise ShipmentDelivered(f"Shipment #{self.id} has already been delivered")
        self._record(ShipmentStatus.CANCELLED, None)

    def _record(self, status: ShipmentStatus, note: str | None) -> None:
        now = _now()
        self.status = status
        self.tracking.append(TrackingEntry(ts=now, status=status, note=note or None))
        self.updated_at = now
