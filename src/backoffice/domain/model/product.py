"""Product aggregate.

Products live independently of orders.  Their current price is read by
the order engine whenever an order total is (re)computed; orders do not
keep a per-line price snapshot.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from datetime import datetime, timezone

from backoffice.domain.exceptions import ValidationError
from backoffice.domain.model.value_objects import Money


@dataclass
class Product:
    """A product in the catalog."""

    id: int | None
    sku: str
    name: str
    price: Money
    active: bool = True
    deleted_at: datetime | None = None
    created_at: datetime = field(default_factory=lambda: datetime.now(timezone.utc))

    @property
    def is_orderable(self) -> bool:
        """Non-deleted and flagged active."""
        return self.deleted_at is None and self.active

    def update_price(self, new_price: Money) -> None:
        if new_price.cents <= 0:
            raise ValidationError("Product price must be greater than zero")
        self.price = new_price

    def soft_delete(self) -> None:
        if self.deleted_at is None:
            self.deleted_at = datetime.now(timezone.utc)
