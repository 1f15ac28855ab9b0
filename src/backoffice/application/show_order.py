"""Application service: Show / List Orders use cases (queries)."""

from __future__ import annotations

from backoffice.application.dto import OrderDTO, PageDTO
from backoffice.application.validation import (
    DEFAULT_PAGE_LIMIT,
    normalize_page,
    parse_status,
)
from backoffice.domain.exceptions import OrderNotFound
from backoffice.domain.model.order import Order, OrderStatus
from backoffice.domain.repository.customer_repository import CustomerRepository
from backoffice.domain.repository.order_repository import OrderRepository
from backoffice.domain.repository.product_repository import ProductRepository

INCLUDE_CUSTOMER = "customer"
INCLUDE_PRODUCTS = "items.product"


class _OrderQuery:

    def __init__(
        self,
        order_repo: OrderRepository,
        customer_repo: CustomerRepository,
        product_repo: ProductRepository,
        default_limit: int = DEFAULT_PAGE_LIMIT,
    ) -> None:
        self._order_repo = order_repo
        self._customer_repo = customer_repo
        self._product_repo = product_repo
        self._default_limit = default_limit

    def _to_dto(self, order: Order, include: list[str]) -> OrderDTO:
        """Map to a DTO, embedding related records named in ``include``."""
        customer = None
        if INCLUDE_CUSTOMER in include:
            customer = self._customer_repo.get_by_id(order.customer_id)
        products = None
        if INCLUDE_PRODUCTS in include:
            products = {
                p.id: p for p in self._product_repo.find_by_ids(order.product_ids)
            }
        return OrderDTO.from_domain(order, customer=customer, products=products)  # type: ignore[arg-type]


class ShowOrderHandler(_OrderQuery):

    def handle(self, order_id: int, include: list[str] | None = None) -> OrderDTO:
        order = self._order_repo.get_by_id(order_id)
        if order is None:
            raise OrderNotFound(f"Order #{order_id} not found")
        return self._to_dto(order, include or [])


class ListOrdersHandler(_OrderQuery):

    def handle(
        self,
        page: int | None = 1,
        limit: int | None = None,
        status: str | None = None,
        customer_id: int | None = None,
        include: list[str] | None = None,
    ) -> PageDTO[OrderDTO]:
        page, limit = normalize_page(page, limit, self._default_limit)
        result = self._order_repo.list(
            status=parse_status(OrderStatus, status),
            customer_id=customer_id,
            skip=(page - 1) * limit,
            limit=limit,
        )
        return PageDTO(
            items=[self._to_dto(o, include or []) for o in result.items],
            total=result.total,
            page=page,
            limit=limit,
        )
