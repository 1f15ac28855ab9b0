"""JSON-backed implementation of ShipmentRepository."""

from __future__ import annotations

from backoffice.domain.model.shipment import (
    Destination,
    Shipment,
    ShipmentStatus,
    TrackingEntry,
)
from backoffice.domain.repository.page import Page
from backoffice.domain.repository.shipment_repository import ShipmentRepository
from backoffice.infrastructure.persistence.json_database import JsonDatabase
from backoffice.infrastructure.persistence.json_repository import JsonTable, dump_dt, load_ts


class JsonShipmentRepository(ShipmentRepository):

    def __init__(self, db: JsonDatabase) -> None:
        self._table = JsonTable(db, "shipments", self._to_raw, self._to_domain)

    def get_by_id(self, shipment_id: int) -> Shipment | None:
        return self._table.get(shipment_id)

    def save(self, shipment: Shipment) -> None:
        self._table.upsert(shipment)

    def list(
        self,
        status: ShipmentStatus | None = None,
        order_id: int | None = None,
        skip: int = 0,
        limit: int = 20,
    ) -> Page[Shipment]:
        filters = {"status": status.value if status else None, "orderId": order_id}
        return self._table.page(filters, skip, limit)

    # --- Serialization --------------------------------------------------------

    @staticmethod
    def _to_raw(shipment: Shipment) -> dict:
        destination: dict = {"address": shipment.destination.address}
        if shipment.destination.lat is not None:
            destination["lat"] = shipment.destination.lat
        if shipment.destination.lng is not None:
            destination["lng"] = shipment.destination.lng

        tracking = []
        for entry in shipment.tracking:
            raw_entry = {"ts": dump_dt(entry.ts), "status": entry.status.value}
            if entry.note:
                raw_entry["note"] = entry.note
            tracking.append(raw_entry)

        return {
            "id": shipment.id,
            "orderId": shipment.order_id,
            "status": shipment.status.value,
            "origin": {"warehouseId": shipment.origin_warehouse_id},
            "destination": destination,
            "tracking": tracking,
            "createdAt": dump_dt(shipment.created_at),
            "updatedAt": dump_dt(shipment.updated_at),
        }

    @staticmethod
    def _to_domain(raw: dict) -> Shipment:
        dest = raw["destination"]
        return Shipment(
            id=raw["id"],
            order_id=raw["orderId"],
            origin_warehouse_id=raw["origin"]["warehouseId"],
            destination=Destination(
                address=dest["address"], lat=dest.get("lat"), lng=dest.get("lng")
            ),
            status=ShipmentStatus(raw["status"]),
            tracking=[
                TrackingEntry(
                    ts=load_ts(t.get("ts")),
                    status=ShipmentStatus(t["status"]),
                    note=t.get("note"),
                )
                for t in raw.get("tracking", [])
            ],
            created_at=load_ts(raw.get("createdAt")),
            updated_at=load_ts(raw.get("updatedAt")),
        )
