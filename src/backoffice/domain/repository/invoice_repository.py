"""Abstract repository for Invoice aggregate."""

from __future__ import annotations

from abc import ABC, abstractmethod

from backoffice.domain.model.invoice import Invoice, InvoiceStatus
from backoffice.domain.repository.page import Page


class InvoiceRepository(ABC):

    @abstractmethod
    def get_by_id(self, invoice_id: int) -> Invoice | None:
        """Return an invoice by its ID, or None if not found."""

    @abstractmethod
    def get_by_order_id(self, order_id: int) -> Invoice | None:
        """Return the invoice issued for an order, or None."""

    @abstractmethod
    def save(self, invoice: Invoice) -> None:
        """Persist a new or updated invoice, assigning an ID to new ones.

        Raises DuplicateRecordError when inserting a second invoice for
        the same order.
        """

    @abstractmethod
    def list(
        self,
        status: InvoiceStatus | None = None,
        order_id: int | None = None,
        skip: int = 0,
        limit: int = 20,
    ) -> Page[Invoice]:
        """Filtered scan, newest first."""
