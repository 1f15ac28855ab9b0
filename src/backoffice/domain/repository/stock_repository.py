"""Abstract repository for StockRecord.

Implementations must make ``insert`` and ``increment`` atomic with respect
to the single record they touch.  Nothing here spans more than one record.
"""

from __future__ import annotations

from abc import ABC, abstractmethod

from backoffice.domain.model.stock import StockRecord


class StockRepository(ABC):

    @abstractmethod
    def find(self, warehouse_id: int, product_id: int) -> StockRecord | None:
        """Return the record for the pair, or None."""

    @abstractmethod
    def insert(self, record: StockRecord) -> StockRecord:
        """Insert a new record, assigning its ID.

        Raises DuplicateRecordError if a record already exists for the
        same (warehouse_id, product_id) pair.
        """

    @abstractmethod
    def increment(self, warehouse_id: int, product_id: int, delta: int) -> StockRecord | None:
        """Atomically apply ``qty += delta`` to the pair's record.

        For a negative ``delta`` the update is conditional on
        ``qty >= -delta``; when the condition does not hold nothing is
        written and None is returned.  None is also returned when no
        record exists for the pair.
        """

    @abstractmethod
    def list(
        self, warehouse_id: int | None = None, product_id: int | None = None
    ) -> list[StockRecord]:
        """Unordered filtered scan."""
