"""Integration tests for the stock use cases (adjust, move, show)."""

import pytest

from backoffice.domain.exceptions import (
    ProductNotFound,
    StockInsufficient,
    ValidationError,
    WarehouseNotFound,
)
from tests.fakes import CENTRAL, CLOSED, DELETED, GADGET, NORTH, RETIRED, WIDGET, seeded_container


class TestAdjustStock:

    def test_adds_stock(self):
        container = seeded_container()
        record = container.adjust_stock.handle(CENTRAL, WIDGET, 5)
        assert record.qty == 15

    def test_creates_record_on_first_reference(self):
        container = seeded_container()
        record = container.adjust_stock.handle(NORTH, GADGET, 3)
        assert record.qty == 3
        assert record.warehouse_id == NORTH

    def test_inactive_product_can_be_stocked(self):
        container = seeded_container()
        assert container.adjust_stock.handle(CENTRAL, RETIRED, 1).qty == 1

    def test_insufficient_negative_delta(self):
        container = seeded_container()
        with pytest.raises(StockInsufficient):
            container.adjust_stock.handle(CENTRAL, GADGET, -6)
        assert container.repos.stock.qty(CENTRAL, GADGET) == 5

    def test_deleted_warehouse_rejected(self):
        container = seeded_container()
        with pytest.raises(WarehouseNotFound):
            container.adjust_stock.handle(CLOSED, WIDGET, 1)

    def test_deleted_product_rejected(self):
        container = seeded_container()
        with pytest.raises(ProductNotFound):
            container.adjust_stock.handle(CENTRAL, DELETED, 1)

    def test_shape_errors(self):
        container = seeded_container()
        with pytest.raises(ValidationError) as exc_info:
            container.adjust_stock.handle(None, "1", 1.5)
        assert exc_info.value.details == [
            "warehouseId must be an integer > 0",
            "productId must be an integer > 0",
            "delta must be an integer",
        ]


class TestMoveStock:

    def test_moves_between_warehouses(self):
        container = seeded_container()
        move = container.move_stock.handle(CENTRAL, NORTH, WIDGET, 4)
        assert move.source.qty == 6
        assert move.destination.qty == 4

    def test_insufficient_origin(self):
        container = seeded_container()
        with pytest.raises(StockInsufficient):
            container.move_stock.handle(NORTH, CENTRAL, WIDGET, 1)
        assert container.repos.stock.qty(CENTRAL, WIDGET) == 10

    def test_destination_must_exist(self):
        container = seeded_container()
        with pytest.raises(WarehouseNotFound, match="Destination"):
            container.move_stock.handle(CENTRAL, CLOSED, WIDGET, 1)
        assert container.repos.stock.qty(CENTRAL, WIDGET) == 10

    def test_qty_must_be_positive(self):
        container = seeded_container()
        with pytest.raises(ValidationError):
            container.move_stock.handle(CENTRAL, NORTH, WIDGET, 0)


class TestShowStock:

    def test_filters_by_warehouse(self):
        container = seeded_container()
        container.adjust_stock.handle(NORTH, WIDGET, 2)
        records = container.show_stock.handle(warehouse_id=NORTH)
        assert [(r.product_id, r.qty) for r in records] == [(WIDGET, 2)]

    def test_filters_by_product(self):
        container = seeded_container()
        container.adjust_stock.handle(NORTH, WIDGET, 2)
        records = container.show_stock.handle(product_id=WIDGET)
        assert sorted(r.warehouse_id for r in records) == [CENTRAL, NORTH]
