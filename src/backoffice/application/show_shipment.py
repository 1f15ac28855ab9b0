"""Application service: Show / List Shipments use cases (queries)."""

from __future__ import annotations

from backoffice.application.dto import PageDTO, ShipmentDTO
from backoffice.application.validation import (
    DEFAULT_PAGE_LIMIT,
    normalize_page,
    parse_status,
)
from backoffice.domain.exceptions import ShipmentNotFound
from backoffice.domain.model.shipment import ShipmentStatus
from backoffice.domain.repository.shipment_repository import ShipmentRepository


class ShowShipmentHandler:

    def __init__(self, shipment_repo: ShipmentRepository) -> None:
        self._shipment_repo = shipment_repo

    def handle(self, shipment_id: int) -> ShipmentDTO:
        shipment = self._shipment_repo.get_by_id(shipment_id)
        if shipment is None:
            raise ShipmentNotFound(f"Shipment #{shipment_id} not found")
        return ShipmentDTO.from_domain(shipment)


class ListShipmentsHandler:

    def __init__(
        self, shipment_repo: ShipmentRepository, default_limit: int = DEFAULT_PAGE_LIMIT
    ) -> None:
        self._shipment_repo = shipment_repo
        self._default_limit = default_limit

    def handle(
        self,
        page: int | None = 1,
        limit: int | None = None,
        status: str | None = None,
        order_id: int | None = None,
    ) -> PageDTO[ShipmentDTO]:
        page, limit = normalize_page(page, limit, self._default_limit)
        result = self._shipment_repo.list(
            status=parse_status(ShipmentStatus, status),
            order_id=order_id,
            skip=(page - 1) * limit,
            limit=limit,
        )
        return PageDTO(
            items=[ShipmentDTO.from_domain(s) for s in result.items],
            total=result.total,
            page=page,
            limit=limit,
        )
