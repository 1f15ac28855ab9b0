"""Application service: Add Warehouse use case."""

from __future__ import annotations

from backoffice.application.dto import WarehouseDTO
from backoffice.domain.exceptions import ValidationError
from backoffice.domain.model.warehouse import Warehouse
from backoffice.domain.repository.warehouse_repository import WarehouseRepository


class AddWarehouseHandler:

    def __init__(self, warehouse_repo: WarehouseRepository) -> None:
        self._warehouse_repo = warehouse_repo

    def handle(self, name: str, city: str) -> WarehouseDTO:
        errors: list[str] = []
        if not name or not name.strip():
            errors.append("name is required")
        if not city or not city.strip():
            errors.append("city is required")
        if errors:
            raise ValidationError("VALIDATION_ERROR", errors)

        warehouse = Warehouse(id=None, name=name.strip(), city=city.strip())
        self._warehouse_repo.save(warehouse)
        return WarehouseDTO.from_domain(warehouse)
