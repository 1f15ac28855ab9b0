"""Unit tests for the OrderLifecycleService domain service."""

import pytest

from backoffice.domain.exceptions import OrderInvalidStatus, OrderNotFound
from backoffice.domain.model.order import Order, OrderLineItem, OrderStatus
from backoffice.domain.model.value_objects import Money, Quantity
from backoffice.domain.service.order_lifecycle_service import OrderLifecycleService
from tests.fakes import FakeOrderRepository


def _setup(status: OrderStatus = OrderStatus.ALLOCATED):
    order = Order(
        id=None,
        customer_id=1,
        warehouse_id=1,
        items=[OrderLineItem(product_id=1, quantity=Quantity(1))],
        total=Money(100),
        status=status,
    )
    repo = FakeOrderRepository([order])
    return OrderLifecycleService(repo), repo, order.id


class TestRequire:

    def test_missing_order(self):
        svc, _, _ = _setup()
        with pytest.raises(OrderNotFound):
            svc.require(99)

    def test_wrong_status(self):
        svc, _, order_id = _setup(OrderStatus.SHIPPED)
        with pytest.raises(OrderInvalidStatus):
            svc.require_status(order_id, OrderStatus.ALLOCATED)


class TestShipmentCallbacks:

    def test_mark_shipped(self):
        svc, repo, order_id = _setup()
        svc.mark_shipped(repo.get_by_id(order_id))
        assert repo.get_by_id(order_id).status == OrderStatus.SHIPPED

    def test_mark_shipped_requires_allocated(self):
        svc, repo, order_id = _setup(OrderStatus.CANCELLED)
        with pytest.raises(OrderInvalidStatus):
            svc.mark_shipped(repo.get_by_id(order_id))

    def test_mark_delivered_from_shipped(self):
        svc, repo, order_id = _setup(OrderStatus.SHIPPED)
        svc.mark_delivered(order_id)
        assert repo.get_by_id(order_id).status == OrderStatus.DELIVERED

    def test_mark_delivered_ignores_other_statuses(self):
        svc, repo, order_id = _setup(OrderStatus.ALLOCATED)
        svc.mark_delivered(order_id)
        assert repo.get_by_id(order_id).status == OrderStatus.ALLOCATED

    def test_mark_delivered_missing_order_is_noop(self):
        svc, _, _ = _setup()
        assert svc.mark_delivered(99) is None

    def test_revert_only_from_shipped(self):
        svc, repo, order_id = _setup(OrderStatus.SHIPPED)
        svc.revert_to_allocated(order_id)
        assert repo.get_by_id(order_id).status == OrderStatus.ALLOCATED

    def test_revert_leaves_delivered_alone(self):
        svc, repo, order_id = _setup(OrderStatus.DELIVERED)
        svc.revert_to_allocated(order_id)
        assert repo.get_by_id(order_id).status == OrderStatus.DELIVERED
