"""Integration tests for the UpdateOrder use case."""

import pytest

from backoffice.application.dto import OrderItemSpec
from backoffice.domain.exceptions import (
    OrderNotFound,
    OrderNotModifiable,
    ProductNotFound,
    StockInsufficient,
    ValidationError,
)
from backoffice.domain.model.order import OrderStatus
from tests.fakes import ALICE, CENTRAL, GADGET, RETIRED, WIDGET, seeded_container


def _setup(items=None, stock_levels=None):
    container = seeded_container(stock_levels=stock_levels)
    dto = container.create_order.handle(ALICE, CENTRAL, items or [OrderItemSpec(WIDGET, 2)])
    return container.update_order, container.repos, dto.id


class TestUpdateOrderDeltas:

    def test_grow_and_add_product(self):
        handler, repos, order_id = _setup()
        dto = handler.handle(order_id, [OrderItemSpec(WIDGET, 3), OrderItemSpec(GADGET, 1)])
        # 2 widgets were already reserved; only the delta moves.
        assert repos.stock.qty(CENTRAL, WIDGET) == 7
        assert repos.stock.qty(CENTRAL, GADGET) == 4
        assert dto.total_cents == 3 * 1500 + 2500

    def test_shrink_and_drop_product_releases_stock(self):
        handler, repos, order_id = _setup(
            items=[OrderItemSpec(WIDGET, 4), OrderItemSpec(GADGET, 2)]
        )
        handler.handle(order_id, [OrderItemSpec(WIDGET, 1)])
        assert repos.stock.qty(CENTRAL, WIDGET) == 9
        assert repos.stock.qty(CENTRAL, GADGET) == 5
        assert repos.orders.get_by_id(order_id).quantities == {WIDGET: 1}

    def test_same_items_move_nothing(self):
        handler, repos, order_id = _setup()
        handler.handle(order_id, [OrderItemSpec(WIDGET, 2)])
        assert repos.stock.qty(CENTRAL, WIDGET) == 8

    def test_insufficient_delta_leaves_everything_unchanged(self):
        handler, repos, order_id = _setup()
        with pytest.raises(StockInsufficient):
            handler.handle(order_id, [OrderItemSpec(WIDGET, 3), OrderItemSpec(GADGET, 6)])
        assert repos.stock.qty(CENTRAL, WIDGET) == 8
        assert repos.stock.qty(CENTRAL, GADGET) == 5
        order = repos.orders.get_by_id(order_id)
        assert order.quantities == {WIDGET: 2}
        assert order.total.cents == 3000

    def test_delta_may_use_stock_held_by_this_order(self):
        # All 10 widgets: 2 already held plus 8 on hand.
        handler, repos, order_id = _setup()
        handler.handle(order_id, [OrderItemSpec(WIDGET, 10)])
        assert repos.stock.qty(CENTRAL, WIDGET) == 0

    def test_added_product_must_be_active(self):
        handler, _, order_id = _setup()
        with pytest.raises(ProductNotFound):
            handler.handle(order_id, [OrderItemSpec(RETIRED, 1)])


class TestUpdateOrderGuards:

    def test_missing_order(self):
        handler, _, _ = _setup()
        with pytest.raises(OrderNotFound):
            handler.handle(99, [OrderItemSpec(WIDGET, 1)])

    @pytest.mark.parametrize(
        "status", [OrderStatus.SHIPPED, OrderStatus.DELIVERED, OrderStatus.CANCELLED]
    )
    def test_only_allocated_orders(self, status):
        handler, repos, order_id = _setup()
        repos.orders.get_by_id(order_id).status = status
        with pytest.raises(OrderNotModifiable):
            handler.handle(order_id, [OrderItemSpec(WIDGET, 1)])
        assert repos.stock.qty(CENTRAL, WIDGET) == 8

    def test_invalid_items(self):
        handler, _, order_id = _setup()
        with pytest.raises(ValidationError) as exc_info:
            handler.handle(order_id, [OrderItemSpec(WIDGET, "two")])
        assert exc_info.value.details == ["items[0].qty must be an integer > 0"]
