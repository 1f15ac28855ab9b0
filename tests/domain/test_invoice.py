"""Unit tests for the Invoice aggregate."""

import pytest

from backoffice.domain.exceptions import TransitionNotAllowed
from backoffice.domain.model.invoice import (
    Invoice,
    InvoiceStatus,
    invoice_amount,
    shipping_fee,
)
from backoffice.domain.model.value_objects import Money


class TestShippingFee:

    def test_flat_fee_plus_ten_percent(self):
        assert shipping_fee(Money(10000)) == Money(3000)

    def test_amount_for_ten_thousand_cents(self):
        assert invoice_amount(Money(10000)) == Money(13000)

    def test_ten_percent_rounds_half_up(self):
        # 10% of 1005 is 100.5 -> 101
        assert shipping_fee(Money(1005)) == Money(2101)

    def test_zero_total_still_pays_flat_fee(self):
        assert invoice_amount(Money(0)) == Money(2000)


class TestInvoiceStatus:

    def _invoice(self) -> Invoice:
        return Invoice.for_order(order_id=1, customer_id=2, order_total=Money(10000))

    def test_issued_on_creation(self):
        invoice = self._invoice()
        assert invoice.status == InvoiceStatus.ISSUED
        assert invoice.amount == Money(13000)

    @pytest.mark.parametrize("status", [InvoiceStatus.PAID, InvoiceStatus.VOID])
    def test_issued_to_paid_or_void(self, status):
        invoice = self._invoice()
        invoice.transition_to(status)
        assert invoice.status == status

    def test_paid_is_terminal(self):
        invoice = self._invoice()
        invoice.transition_to(InvoiceStatus.PAID)
        with pytest.raises(TransitionNotAllowed):
            invoice.transition_to(InvoiceStatus.VOID)
