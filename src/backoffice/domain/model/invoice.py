"""Invoice aggregate.

Issued once per delivered order.  The amount is the order total plus a
shipping fee of a flat 20.00 plus ten percent of the order total.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from datetime import datetime, timezone
from decimal import Decimal
from enum import Enum

from backoffice.domain.exceptions import TransitionNotAllowed
from backoffice.domain.model.value_objects import Money

SHIPPING_BASE_FEE = Money(2000)
SHIPPING_RATE = Decimal("0.10")


class InvoiceStatus(Enum):
    ISSUED = "issued"
    PAID = "paid"
    VOID = "void"


INVOICE_TRANSITIONS: dict[InvoiceStatus, frozenset[InvoiceStatus]] = {
    InvoiceStatus.ISSUED: frozenset({InvoiceStatus.PAID, InvoiceStatus.VOID}),
    InvoiceStatus.PAID: frozenset(),
    InvoiceStatus.VOID: frozenset(),
}


def shipping_fee(order_total: Money) -> Money:
    return SHIPPING_BASE_FEE + order_total.percent(SHIPPING_RATE)


def invoice_amount(order_total: Money) -> Money:
    return order_total + shipping_fee(order_total)


def _now() -> datetime:
    return datetime.now(timezone.utc)


@dataclass
class Invoice:

    id: int | None
    order_id: int
    customer_id: int
    amount: Money
    status: InvoiceStatus = InvoiceStatus.ISSUED
    created_at: datetime = field(default_factory=_now)
    updated_at: datetime = field(default_factory=_now)

    @staticmethod
    def for_order(order_id: int, customer_id: int, order_total: Money) -> Invoice:
        return Invoice(
            id=None,
            order_id=order_id,
            customer_id=customer_id,
            amount=invoice_amount(order_total),
        )

    def transition_to(self, next_status: InvoiceStatus) -> None:
        if next_status not in INVOICE_TRANSITIONS[self.status]:
            raise TransitionNotAllowed(self.status.value, next_status.value)
        self.status = next_status
        self.updated_at = _now()
