"""Unit tests for the Shipment aggregate and its status machine."""

import pytest

from backoffice.domain.exceptions import ShipmentDelivered, TransitionNotAllowed, ValidationError
from backoffice.domain.model.shipment import Destination, Shipment, ShipmentStatus


def _shipment() -> Shipment:
    shipment = Shipment.create(
        order_id=7, origin_warehouse_id=2, destination=Destination("1 Main St")
    )
    shipment.id = 1
    return shipment


class TestDestination:

    def test_address_required(self):
        with pytest.raises(ValidationError) as exc_info:
            Destination("  ")
        assert exc_info.value.details == ["destination.address is required"]

    def test_coordinates_optional(self):
        dest = Destination("1 Main St", lat=-34.6, lng=-58.4)
        assert (dest.lat, dest.lng) == (-34.6, -58.4)

    def test_non_numeric_coordinates_rejected(self):
        with pytest.raises(ValidationError) as exc_info:
            Destination("1 Main St", lat="north", lng=float("nan"))
        assert exc_info.value.details == [
            "destination.lat must be numeric",
            "destination.lng must be numeric",
        ]


class TestShipmentCreation:

    def test_created_with_single_tracking_entry(self):
        shipment = _shipment()
        assert shipment.status == ShipmentStatus.CREATED
        assert [e.status for e in shipment.tracking] == [ShipmentStatus.CREATED]
        assert shipment.origin_warehouse_id == 2


class TestShipmentTransitions:

    def test_created_to_delivered_rejected(self):
        shipment = _shipment()
        with pytest.raises(TransitionNotAllowed):
            shipment.advance(ShipmentStatus.DELIVERED)
        assert shipment.status == ShipmentStatus.CREATED
        assert len(shipment.tracking) == 1

    def test_full_delivery_path_appends_tracking(self):
        shipment = _shipment()
        shipment.advance(ShipmentStatus.OUT_FOR_DELIVERY, note="left depot")
        shipment.advance(ShipmentStatus.DELIVERED)
        assert shipment.status == ShipmentStatus.DELIVERED
        assert [e.status for e in shipment.tracking] == [
            ShipmentStatus.CREATED,
            ShipmentStatus.OUT_FOR_DELIVERY,
            ShipmentStatus.DELIVERED,
        ]
        assert shipment.tracking[1].note == "left depot"

    def test_out_for_delivery_can_fail(self):
        shipment = _shipment()
        shipment.advance(ShipmentStatus.OUT_FOR_DELIVERY)
        shipment.advance(ShipmentStatus.FAILED)
        assert shipment.status == ShipmentStatus.FAILED

    @pytest.mark.parametrize(
        "terminal", [ShipmentStatus.DELIVERED, ShipmentStatus.FAILED, ShipmentStatus.CANCELLED]
    )
    def test_terminal_states_accept_nothing(self, terminal):
        shipment = _shipment()
        shipment.status = terminal
        for status in ShipmentStatus:
            assert not shipment.can_transition_to(status)


class TestShipmentCancel:

    def test_cancel_appends_tracking(self):
        shipment = _shipment()
        shipment.cancel()
        assert shipment.status == ShipmentStatus.CANCELLED
        assert shipment.tracking[-1].status == ShipmentStatus.CANCELLED

    def test_cancel_delivered_rejected(self):
        shipment = _shipment()
        shipment.advance(ShipmentStatus.OUT_FOR_DELIVERY)
        shipment.advance(ShipmentStatus.DELIVERED)
        with pytest.raises(ShipmentDelivered):
            shipment.cancel()
        assert shipment.status == ShipmentStatus.DELIVERED
