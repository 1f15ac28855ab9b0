"""Application service: Create Order use case.

Validates the request against the catalog and live stock, reserves the
stock in the order's warehouse, prices the items and persists the order
in ALLOCATED status.
"""

from __future__ import annotations

import structlog

from backoffice.application.dto import OrderDTO, OrderItemSpec
from backoffice.application.pricing import price_items
from backoffice.application.validation import is_positive_int, to_line_items
from backoffice.domain.exceptions import (
    CustomerNotFound,
    ProductNotFound,
    ValidationError,
    WarehouseNotFound,
)
from backoffice.domain.model.order import Order, quantities_by_product
from backoffice.domain.repository.customer_repository import CustomerRepository
from backoffice.domain.repository.order_repository import OrderRepository
from backoffice.domain.repository.product_repository import ProductRepository
from backoffice.domain.repository.warehouse_repository import WarehouseRepository
from backoffice.domain.service.inventory_reservation_service import (
    InventoryReservationService,
)

logger = structlog.get_logger(__name__)


class CreateOrderHandler:

    def __init__(
        self,
        order_repo: OrderRepository,
        customer_repo: CustomerRepository,
        warehouse_repo: WarehouseRepository,
        product_repo: ProductRepository,
        reservations: InventoryReservationService,
    ) -> None:
        self._order_repo = order_repo
        self._customer_repo = customer_repo
        self._warehouse_repo = warehouse_repo
        self._product_repo = product_repo
        self._reservations = reservations

    def handle(
        self,
        customer_id: object,
        warehouse_id: object,
        item_specs: list[OrderItemSpec] | None,
    ) -> OrderDTO:
        """Create a new order.

        Steps:
        1. Validate input shape, then resolve customer, warehouse and every
           product (must be active).
        2. Pre-check stock for every product (fails with StockInsufficient).
        3. Reserve stock; a mid-sequence failure is compensated and
           surfaced as InternalError.
        4. Price the items at current catalog prices.
        5. Persist the order as ALLOCATED.
        """
        errors: list[str] = []
        if not is_positive_int(customer_id):
            errors.append("customerId must be an integer > 0")
        if not is_positive_int(warehouse_id):
            errors.append("warehouseId must be an integer > 0")
        try:
            items = to_line_items(item_specs)
        except ValidationError as exc:
            errors.extend(exc.details)
        if errors:
            raise ValidationError("VALIDATION_ERROR", errors)

        if self._customer_repo.find_active(customer_id) is None:  # type: ignore[arg-type]
            raise CustomerNotFound(f"Customer #{customer_id} not found or inactive")
        if self._warehouse_repo.find_active(warehouse_id) is None:  # type: ignore[arg-type]
            raise WarehouseNotFound(f"Warehouse #{warehouse_id} not found")
        for item in items:
            if self._product_repo.find_active(item.product_id) is None:
                raise ProductNotFound(f"Product #{item.product_id} not found or inactive")

        quantities = quantities_by_product(items)
        self._reservations.check_available(warehouse_id, quantities)  # type: ignore[arg-type]
        self._reservations.reserve(warehouse_id, quantities)  # type: ignore[arg-type]

        order = Order.create(
            customer_id=customer_id,  # type: ignore[arg-type]
            warehouse_id=warehouse_id,  # type: ignore[arg-type]
            items=items,
            total=price_items(self._product_repo, items),
        )
        self._order_repo.save(order)

        logger.info(
            "order_created",
            order_id=order.id,
            customer_id=order.customer_id,
            warehouse_id=order.warehouse_id,
            total_cents=order.total.cents,
        )
        return OrderDTO.from_domain(order)
