"""Application service: Update Invoice Status use case."""

from __future__ import annotations

import structlog

from backoffice.application.dto import InvoiceDTO
from backoffice.application.validation import require_status
from backoffice.domain.exceptions import InvoiceNotFound
from backoffice.domain.model.invoice import InvoiceStatus
from backoffice.domain.repository.invoice_repository import InvoiceRepository

logger = structlog.get_logger(__name__)


class UpdateInvoiceStatusHandler:

    def __init__(self, invoice_repo: InvoiceRepository) -> None:
        self._invoice_repo = invoice_repo

    def handle(self, invoice_id: int, status: object) -> InvoiceDTO:
        invoice = self._invoice_repo.get_by_id(invoice_id)
        if invoice is None:
            raise InvoiceNotFound(f"Invoice #{invoice_id} not found")

        next_status = require_status(InvoiceStatus, status, invoice.status)
        previous = invoice.status
        invoice.transition_to(next_status)
        self._invoice_repo.save(invoice)

        logger.info(
            "invoice_status_changed",
            invoice_id=invoice.id,
            previous=previous.value,
            status=next_status.value,
        )
        return InvoiceDTO.from_domain(invoice)
