"""Application service: Cancel Shipment use case.

Cancelling a shipment that has not been delivered returns a SHIPPED order
to ALLOCATED.  Stock is untouched: the order still holds its reservation.
"""

from __future__ import annotations

import structlog

from backoffice.application.dto import StatusDTO
from backoffice.domain.exceptions import ShipmentNotFound
from backoffice.domain.repository.shipment_repository import ShipmentRepository
from backoffice.domain.service.order_lifecycle_service import OrderLifecycleService

logger = structlog.get_logger(__name__)


class CancelShipmentHandler:

    def __init__(
        self,
        shipment_repo: ShipmentRepository,
        lifecycle: OrderLifecycleService,
    ) -> None:
        self._shipment_repo = shipment_repo
        self._lifecycle = lifecycle

    def handle(self, shipment_id: int) -> StatusDTO:
        shipment = self._shipment_repo.get_by_id(shipment_id)
        if shipment is None:
            raise ShipmentNotFound(f"Shipment #{shipment_id} not found")

        shipment.cancel()
        self._shipment_repo.save(shipment)
        self._lifecycle.revert_to_allocated(shipment.order_id)

        logger.info("shipment_cancelled", shipment_id=shipment.id, order_id=shipment.order_id)
        return StatusDTO(id=shipment.id, status=shipment.status.value)  # type: ignore[arg-type]
