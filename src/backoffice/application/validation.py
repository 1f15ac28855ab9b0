"""Input shape checks shared by the use cases.

Each helper collects every problem it finds and raises one ValidationError
whose ``details`` list names the offending fields.
"""

from __future__ import annotations

from enum import Enum
from typing import TypeVar

from backoffice.application.dto import DestinationSpec, OrderItemSpec
from backoffice.domain.exceptions import TransitionNotAllowed, ValidationError
from backoffice.domain.model.order import OrderLineItem
from backoffice.domain.model.shipment import Destination
from backoffice.domain.model.value_objects import Quantity

DEFAULT_PAGE_LIMIT = 20

E = TypeVar("E", bound=Enum)


def is_positive_int(value: object) -> bool:
    return isinstance(value, int) and not isinstance(value, bool) and value > 0


def require_positive_id(value: object, field_name: str) -> int:
    if not is_positive_int(value):
        raise ValidationError("VALIDATION_ERROR", [f"{field_name} must be an integer > 0"])
    return value  # type: ignore[return-value]


def to_line_items(specs: list[OrderItemSpec] | None) -> list[OrderLineItem]:
    """Validate requested items and turn them into domain line items."""
    errors: list[str] = []
    if not specs:
        errors.append("items must be a list with at least 1 element")
    for idx, spec in enumerate(specs or []):
        if not is_positive_int(spec.product_id):
            errors.append(f"items[{idx}].productId must be an integer > 0")
        if not is_positive_int(spec.quantity):
            errors.append(f"items[{idx}].qty must be an integer > 0")
    if errors:
        raise ValidationError("VALIDATION_ERROR", errors)

    return [
        OrderLineItem(product_id=spec.product_id, quantity=Quantity(spec.quantity))  # type: ignore[arg-type]
        for spec in specs  # type: ignore[union-attr]
    ]


def to_destination(spec: DestinationSpec | None) -> Destination:
    if spec is None:
        raise ValidationError("VALIDATION_ERROR", ["destination.address is required"])
    return Destination(address=spec.address, lat=spec.lat, lng=spec.lng)  # type: ignore[arg-type]


def normalize_page(
    page: int | None, limit: int | None, default_limit: int = DEFAULT_PAGE_LIMIT
) -> tuple[int, int]:
    """Clamp pagination input: page >= 1, limit >= 1 (falling back to defaults)."""
    page = page if isinstance(page, int) and page >= 1 else 1
    limit = limit if isinstance(limit, int) and limit >= 1 else default_limit
    return page, limit


def parse_status(enum_cls: type[E], value: str | None) -> E | None:
    """Map a status filter string onto ``enum_cls``; blank means no filter."""
    if value is None or not value.strip():
        return None
    try:
        return enum_cls(value.strip())
    except ValueError:
        allowed = ", ".join(member.value for member in enum_cls)
        raise ValidationError(
            "VALIDATION_ERROR", [f"status must be one of: {allowed}"]
        ) from None


def require_status(enum_cls: type[E], value: object, current: Enum) -> E:
    """Parse a requested next status.

    Empty input is a ValidationError; a value that names no status at all
    cannot be a legal transition from ``current`` either.
    """
    if not isinstance(value, str) or not value.strip():
        raise ValidationError("VALIDATION_ERROR", ["status is required"])
    try:
        return enum_cls(value.strip())
    except ValueError:
        raise TransitionNotAllowed(current.value, value.strip()) from None
