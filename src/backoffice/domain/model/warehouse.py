"""Warehouse entity."""

from __future__ import annotations

from dataclasses import dataclass, field
from datetime import datetime, timezone


@dataclass
class Warehouse:

    id: int | None
    name: str
    city: str
    deleted_at: datetime | None = None
    created_at: datetime = field(default_factory=lambda: datetime.now(timezone.utc))

    @property
    def is_active(self) -> bool:
        return self.deleted_at is None

    def soft_delete(self) -> None:
        if self.deleted_at is None:
            self.deleted_at = datetime.now(timezone.utc)
