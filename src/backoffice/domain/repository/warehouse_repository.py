"""Abstract repository for Warehouse entities."""

from __future__ import annotations

from abc import ABC, abstractmethod

from backoffice.domain.model.warehouse import Warehouse


class WarehouseRepository(ABC):

    @abstractmethod
    def get_by_id(self, warehouse_id: int) -> Warehouse | None:
        """Return a warehouse by its ID (deleted or not), or None."""

    @abstractmethod
    def list_all(self) -> list[Warehouse]:
        """Return every warehouse."""

    @abstractmethod
    def save(self, warehouse: Warehouse) -> None:
        """Persist a new or updated warehouse, assigning an ID to new ones."""

    def find_active(self, warehouse_id: int) -> Warehouse | None:
        warehouse = self.get_by_id(warehouse_id)
        if warehouse is not None and warehouse.is_active:
            return warehouse
        return None
