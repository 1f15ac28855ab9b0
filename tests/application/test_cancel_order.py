"""Integration tests for the CancelOrder use case."""

import pytest

from backoffice.application.dto import OrderItemSpec
from backoffice.domain.exceptions import OrderNotCancelable, OrderNotFound
from backoffice.domain.model.order import OrderStatus
from tests.fakes import ALICE, CENTRAL, GADGET, WIDGET, seeded_container


def _setup():
    container = seeded_container()
    dto = container.create_order.handle(
        ALICE, CENTRAL, [OrderItemSpec(WIDGET, 3), OrderItemSpec(GADGET, 2)]
    )
    return container.cancel_order, container.repos, dto.id


class TestCancelOrder:

    def test_restores_reserved_stock(self):
        handler, repos, order_id = _setup()
        result = handler.handle(order_id)
        assert result.status == "cancelled"
        assert repos.stock.qty(CENTRAL, WIDGET) == 10
        assert repos.stock.qty(CENTRAL, GADGET) == 5
        assert repos.orders.get_by_id(order_id).status == OrderStatus.CANCELLED

    def test_cancel_twice_rejected_without_double_release(self):
        handler, repos, order_id = _setup()
        handler.handle(order_id)
        with pytest.raises(OrderNotCancelable):
            handler.handle(order_id)
        assert repos.stock.qty(CENTRAL, WIDGET) == 10

    @pytest.mark.parametrize("status", [OrderStatus.SHIPPED, OrderStatus.DELIVERED])
    def test_shipped_or_delivered_rejected(self, status):
        handler, repos, order_id = _setup()
        repos.orders.get_by_id(order_id).status = status
        with pytest.raises(OrderNotCancelable):
            handler.handle(order_id)
        assert repos.stock.qty(CENTRAL, WIDGET) == 7

    def test_missing_order(self):
        handler, _, _ = _setup()
        with pytest.raises(OrderNotFound):
            handler.handle(42)
