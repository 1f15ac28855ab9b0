"""Abstract repository for Shipment aggregate."""

from __future__ import annotations

from abc import ABC, abstractmethod

from backoffice.domain.model.shipment import Shipment, ShipmentStatus
from backoffice.domain.repository.page import Page


class ShipmentRepository(ABC):

    @abstractmethod
    def get_by_id(self, shipment_id: int) -> Shipment | None:
        """Return a shipment by its ID, or None if not found."""

    @abstractmethod
    def save(self, shipment: Shipment) -> None:
        """Persist a new or updated shipment, assigning an ID to new ones."""

    @abstractmethod
    def list(
        self,
        status: ShipmentStatus | None = None,
        order_id: int | None = None,
        skip: int = 0,
        limit: int = 20,
    ) -> Page[Shipment]:
        """Filtered scan, newest first."""
