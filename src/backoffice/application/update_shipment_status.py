"""Application service: Update Shipment Status use case."""

from __future__ import annotations

import structlog

from backoffice.application.dto import ShipmentDTO
from backoffice.application.validation import require_status
from backoffice.domain.exceptions import ShipmentNotFound
from backoffice.domain.model.shipment import ShipmentStatus
from backoffice.domain.repository.shipment_repository import ShipmentRepository
from backoffice.domain.service.order_lifecycle_service import OrderLifecycleService

logger = structlog.get_logger(__name__)


class UpdateShipmentStatusHandler:

    def __init__(
        self,
        shipment_repo: ShipmentRepository,
        lifecycle: OrderLifecycleService,
    ) -> None:
        self._shipment_repo = shipment_repo
        self._lifecycle = lifecycle

    def handle(self, shipment_id: int, status: object, note: str | None = None) -> ShipmentDTO:
        """Advance the shipment along its transition table.

        Reaching DELIVERED also marks the linked order delivered.
        """
        shipment = self._shipment_repo.get_by_id(shipment_id)
        if shipment is None:
            raise ShipmentNotFound(f"Shipment #{shipment_id} not found")

        next_status = require_status(ShipmentStatus, status, shipment.status)
        previous = shipment.status
        shipment.advance(next_status, note)
        self._shipment_repo.save(shipment)

        logger.info(
            "shipment_status_changed",
            shipment_id=shipment.id,
            previous=previous.value,
            status=next_status.value,
        )

        if next_status == ShipmentStatus.DELIVERED:
            self._lifecycle.mark_delivered(shipment.order_id)

        return ShipmentDTO.from_domain(shipment)
