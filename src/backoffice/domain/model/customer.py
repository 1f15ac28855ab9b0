"""Customer entity (catalog glue, read by the order engine)."""

from __future__ import annotations

from dataclasses import dataclass, field
from datetime import datetime, timezone
from enum import Enum


class CustomerStatus(Enum):
    ACTIVE = "active"
    INACTIVE = "inactive"


@dataclass
class Customer:

    id: int | None
    name: str
    email: str
    status: CustomerStatus = CustomerStatus.ACTIVE
    deleted_at: datetime | None = None
    created_at: datetime = field(default_factory=lambda: datetime.now(timezone.utc))

    @property
    def is_active(self) -> bool:
        return self.deleted_at is None and self.status == CustomerStatus.ACTIVE

    def soft_delete(self) -> None:
        if self.deleted_at is None:
            self.deleted_at = datetime.now(timezone.utc)
