"""Application service: Create Invoice use case.

One invoice per order, and only once the order has been delivered.
"""

from __future__ import annotations

import structlog

from backoffice.application.dto import InvoiceDTO
from backoffice.application.validation import require_positive_id
from backoffice.domain.exceptions import (
    DuplicateRecordError,
    OrderAlreadyInvoiced,
    OrderInvalidStatus,
    OrderNotFound,
)
from backoffice.domain.model.invoice import Invoice
from backoffice.domain.model.order import OrderStatus
from backoffice.domain.repository.invoice_repository import InvoiceRepository
from backoffice.domain.repository.order_repository import OrderRepository

logger = structlog.get_logger(__name__)


class CreateInvoiceHandler:

    def __init__(
        self,
        invoice_repo: InvoiceRepository,
        order_repo: OrderRepository,
    ) -> None:
        self._invoice_repo = invoice_repo
        self._order_repo = order_repo

    def handle(self, order_id: object) -> InvoiceDTO:
        order_id = require_positive_id(order_id, "orderId")

        order = self._order_repo.get_by_id(order_id)
        if order is None:
            raise OrderNotFound(f"Order #{order_id} not found")
        if order.status != OrderStatus.DELIVERED:
            raise OrderInvalidStatus(
                f"Order #{order_id} is {order.status.value}, expected delivered"
            )
        if self._invoice_repo.get_by_order_id(order_id) is not None:
            raise OrderAlreadyInvoiced(f"Order #{order_id} already has an invoice")

        invoice = Invoice.for_order(
            order_id=order_id,
            customer_id=order.customer_id,
            order_total=order.total,
        )
        try:
            self._invoice_repo.save(invoice)
        except DuplicateRecordError:
            raise OrderAlreadyInvoiced(f"Order #{order_id} already has an invoice") from None

        logger.info(
            "invoice_issued",
            invoice_id=invoice.id,
            order_id=order_id,
            amount_cents=invoice.amount.cents,
        )
        return InvoiceDTO.from_domain(invoice)
