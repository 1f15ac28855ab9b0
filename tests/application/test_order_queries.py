"""Integration tests for the Show / List Orders queries."""

import pytest

from backoffice.application.dto import OrderItemSpec
from backoffice.application.show_order import INCLUDE_CUSTOMER, INCLUDE_PRODUCTS
from backoffice.domain.exceptions import OrderNotFound, ValidationError
from tests.fakes import ALICE, CENTRAL, GADGET, WIDGET, seeded_container


def _setup(count: int = 3):
    container = seeded_container()
    ids = [
        container.create_order.handle(ALICE, CENTRAL, [OrderItemSpec(WIDGET, 1)]).id
        for _ in range(count)
    ]
    return container, ids


class TestShowOrder:

    def test_plain(self):
        container, ids = _setup(1)
        dto = container.show_order.handle(ids[0])
        assert dto.customer is None
        assert dto.items[0].product is None

    def test_include_customer_and_products(self):
        container, _ = _setup(0)
        order = container.create_order.handle(
            ALICE, CENTRAL, [OrderItemSpec(WIDGET, 1), OrderItemSpec(GADGET, 1)]
        )
        dto = container.show_order.handle(order.id, include=[INCLUDE_CUSTOMER, INCLUDE_PRODUCTS])
        assert dto.customer.name == "Alice"
        assert [i.product.sku for i in dto.items] == ["WID-1", "GAD-1"]

    def test_missing(self):
        container, _ = _setup(0)
        with pytest.raises(OrderNotFound):
            container.show_order.handle(1)


class TestListOrders:

    def test_newest_first_with_pagination(self):
        container, ids = _setup(3)
        page = container.list_orders.handle(page=1, limit=2)
        assert page.total == 3
        assert [o.id for o in page.items] == [ids[2], ids[1]]
        page2 = container.list_orders.handle(page=2, limit=2)
        assert [o.id for o in page2.items] == [ids[0]]

    def test_invalid_paging_falls_back_to_defaults(self):
        container, _ = _setup(1)
        page = container.list_orders.handle(page=0, limit=-3)
        assert (page.page, page.limit) == (1, 20)

    def test_status_filter(self):
        container, ids = _setup(2)
        container.cancel_order.handle(ids[0])
        page = container.list_orders.handle(status="cancelled")
        assert [o.id for o in page.items] == [ids[0]]

    def test_unknown_status_filter_rejected(self):
        container, _ = _setup(0)
        with pytest.raises(ValidationError, match="VALIDATION_ERROR") as exc_info:
            container.list_orders.handle(status="lost")
        assert exc_info.value.details[0].startswith("status must be one of")
