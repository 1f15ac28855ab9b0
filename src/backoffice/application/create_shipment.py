"""Application service: Create Shipment use case.

A shipment can only be created for an ALLOCATED order.  Creating it
flips the order to SHIPPED through the order lifecycle service.
"""

from __future__ import annotations

import structlog

from backoffice.application.dto import DestinationSpec, ShipmentDTO
from backoffice.application.validation import is_positive_int, to_destination
from backoffice.domain.exceptions import ValidationError
from backoffice.domain.model.order import OrderStatus
from backoffice.domain.model.shipment import Shipment
from backoffice.domain.repository.shipment_repository import ShipmentRepository
from backoffice.domain.service.order_lifecycle_service import OrderLifecycleService

logger = structlog.get_logger(__name__)


class CreateShipmentHandler:

    def __init__(
        self,
        shipment_repo: ShipmentRepository,
        lifecycle: OrderLifecycleService,
    ) -> None:
        self._shipment_repo = shipment_repo
        self._lifecycle = lifecycle

    def handle(self, order_id: object, destination: DestinationSpec | None) -> ShipmentDTO:
        errors: list[str] = []
        if not is_positive_int(order_id):
            errors.append("orderId must be an integer > 0")
        try:
            dest = to_destination(destination)
        except ValidationError as exc:
            errors.extend(exc.details)
        if errors:
            raise ValidationError("VALIDATION_ERROR", errors)

        order = self._lifecycle.require_status(order_id, OrderStatus.ALLOCATED)  # type: ignore[arg-type]

        shipment = Shipment.create(
            order_id=order.id,  # type: ignore[arg-type]
            origin_warehouse_id=order.warehouse_id,
            destination=dest,
        )
        self._shipment_repo.save(shipment)
        self._lifecycle.mark_shipped(order)

        logger.info("shipment_created", shipment_id=shipment.id, order_id=order.id)
        return ShipmentDTO.from_domain(shipment)
