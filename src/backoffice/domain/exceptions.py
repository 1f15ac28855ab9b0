"""Domain-level exceptions.

All business rule violations are expressed as subclasses of DomainException
so the CLI and HTTP layers can catch them uniformly.  Each class carries a
machine-readable ``code`` and the ``http_status`` the REST surface maps it to.
"""

from __future__ import annotations


class DomainException(Exception):
    """Base class for all domain errors."""

    code = "DOMAIN_ERROR"
    http_status = 500

    def __init__(self, message: str | None = None) -> None:
        super().__init__(message or self.code)
        self.message = message or self.code


class ValidationError(DomainException):
    """Malformed or missing input fields."""

    code = "VALIDATION_ERROR"
    http_status = 400

    def __init__(self, message: str, details: list[str] | None = None) -> None:
        super().__init__(message)
        self.details = list(details) if details else [message]


class TransitionNotAllowed(DomainException):
    """A status change is not present in the transition table.

    Surfaced as 400, unlike the other business-rule conflicts.
    """

    code = "TRANSITION_NOT_ALLOWED"
    http_status = 400

    def __init__(self, current: str, requested: str) -> None:
        super().__init__(f"Transition {current} -> {requested} is not allowed")
        self.current = current
        self.requested = requested


# --- Not found -----------------------------------------------------------------


class EntityNotFoundError(DomainException):
    """A requested entity does not exist (or is soft-deleted / inactive)."""

    code = "NOT_FOUND"
    http_status = 404


class CustomerNotFound(EntityNotFoundError):
    code = "CUSTOMER_NOT_FOUND"


class ProductNotFound(EntityNotFoundError):
    code = "PRODUCT_NOT_FOUND"


class WarehouseNotFound(EntityNotFoundError):
    code = "WAREHOUSE_NOT_FOUND"


class OrderNotFound(EntityNotFoundError):
    code = "ORDER_NOT_FOUND"


class ShipmentNotFound(EntityNotFoundError):
    code = "SHIPMENT_NOT_FOUND"


class InvoiceNotFound(EntityNotFoundError):
    code = "INVOICE_NOT_FOUND"


# --- Conflicts -----------------------------------------------------------------


class ConflictError(DomainException):
    """A business rule forbids the operation in the current state."""

    code = "CONFLICT"
    http_status = 409


class StockInsufficient(ConflictError):
    code = "STOCK_INSUFFICIENT"

    def __init__(
        self, warehouse_id: int, product_id: int, requested: int, available: int
    ) -> None:
        super().__init__(
            f"Insufficient stock for product #{product_id} in warehouse "
            f"#{warehouse_id} (need {requested}, have {available})"
        )
        self.warehouse_id = warehouse_id
        self.product_id = product_id
        self.requested = requested
        self.available = available


class OrderNotModifiable(ConflictError):
    code = "ORDER_NOT_MODIFIABLE"


class OrderNotCancelable(ConflictError):
    code = "ORDER_NOT_CANCELABLE"


class OrderInvalidStatus(ConflictError):
    code = "ORDER_INVALID_STATUS"


class ShipmentDelivered(ConflictError):
    code = "SHIPMENT_DELIVERED"


class OrderAlreadyInvoiced(ConflictError):
    code = "ORDER_ALREADY_INVOICED"


# --- Failures ------------------------------------------------------------------


class InternalError(DomainException):
    """Unexpected failure while applying a multi-step stock mutation."""

    code = "INTERNAL_ERROR"
    http_status = 500


class DuplicateRecordError(DomainException):
    """A uniqueness constraint was violated by an insert.

    Raised by repositories; the stock ledger treats it as "already exists".
    """

    code = "DUPLICATE_RECORD"
    http_status = 409
