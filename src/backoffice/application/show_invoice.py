"""Application service: Show / List Invoices use cases (queries)."""

from __future__ import annotations

from backoffice.application.dto import InvoiceDTO, PageDTO
from backoffice.application.validation import (
    DEFAULT_PAGE_LIMIT,
    normalize_page,
    parse_status,
)
from backoffice.domain.exceptions import InvoiceNotFound
from backoffice.domain.model.invoice import InvoiceStatus
from backoffice.domain.repository.invoice_repository import InvoiceRepository


class ShowInvoiceHandler:

    def __init__(self, invoice_repo: InvoiceRepository) -> None:
        self._invoice_repo = invoice_repo

    def handle(self, invoice_id: int) -> InvoiceDTO:
        invoice = self._invoice_repo.get_by_id(invoice_id)
        if invoice is None:
            raise InvoiceNotFound(f"Invoice #{invoice_id} not found")
        return InvoiceDTO.from_domain(invoice)


class ListInvoicesHandler:

    def __init__(
        self, invoice_repo: InvoiceRepository, default_limit: int = DEFAULT_PAGE_LIMIT
    ) -> None:
        self._invoice_repo = invoice_repo
        self._default_limit = default_limit

    def handle(
        self,
        page: int | None = 1,
        limit: int | None = None,
        status: str | None = None,
        order_id: int | None = None,
    ) -> PageDTO[InvoiceDTO]:
        page, limit = normalize_page(page, limit, self._default_limit)
        result = self._invoice_repo.list(
            status=parse_status(InvoiceStatus, status),
            order_id=order_id,
            skip=(page - 1) * limit,
            limit=limit,
        )
        return PageDTO(
            items=[InvoiceDTO.from_domain(i) for i in result.items],
            total=result.total,
            page=page,
            limit=limit,
        )
