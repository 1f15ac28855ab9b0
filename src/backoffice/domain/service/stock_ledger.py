"""Domain service: Stock Ledger.

Owns the ``(warehouse_id, product_id) -> qty`` mapping.  Every operation
touches stock one record at a time through the repository's atomic
conditional increment; nothing here is a multi-record transaction.

``move`` is the one multi-record operation and compensates on partial
failure: if the credit leg fails after the debit committed, the origin
is re-credited before the error propagates.
"""

from __future__ import annotations

from dataclasses import dataclass

import structlog

from backoffice.domain.exceptions import (
    DuplicateRecordError,
    InternalError,
    StockInsufficient,
    ValidationError,
)
from backoffice.domain.model.stock import StockRecord
from backoffice.domain.repository.stock_repository import StockRepository

logger = structlog.get_logger(__name__)


@dataclass(frozen=True)
class StockMove:
    """Both records after a successful move."""

    source: StockRecord
    destination: StockRecord


class StockLedger:

    def __init__(self, stock_repo: StockRepository) -> None:
        self._stock_repo = stock_repo

    def get_or_create(self, warehouse_id: int, product_id: int) -> StockRecord:
        """Return the pair's record, lazily inserting one with ``qty=0``.

        A concurrent insert of the same pair surfaces as DuplicateRecordError
        from the repository; that means the record now exists, so it is
        re-fetched instead of failing.
        """
        existing = self._stock_repo.find(warehouse_id, product_id)
        if existing is not None:
            return existing

        try:
            return self._stock_repo.insert(
                StockRecord(id=None, warehouse_id=warehouse_id, product_id=product_id, qty=0)
            )
        except DuplicateRecordError:
            logger.debug(
                "stock_record_insert_race",
                warehouse_id=warehouse_id,
                product_id=product_id,
            )
            record = self._stock_repo.find(warehouse_id, product_id)
            if record is None:
                raise InternalError(
                    f"Stock record for warehouse #{warehouse_id} / product "
                    f"#{product_id} vanished after a duplicate insert"
                )
            return record

    def adjust(self, warehouse_id: int, product_id: int, delta: int) -> StockRecord:
        """Apply ``qty += delta`` to a single record.

        Raises StockInsufficient when a negative delta would drive qty below
        zero; qty is left unchanged in that case.  The check and the write
        happen in one conditional update inside the repository.
        """
        if not isinstance(delta, int) or isinstance(delta, bool):
            raise ValidationError("delta must be an integer")

        self.get_or_create(warehouse_id, product_id)
        updated = self._stock_repo.increment(warehouse_id, product_id, delta)
        if updated is None:
            if delta >= 0:
                raise InternalError(
                    f"Stock record for warehouse #{warehouse_id} / product "
                    f"#{product_id} could not be credited"
                )
            current = self._stock_repo.find(warehouse_id, product_id)
            raise StockInsufficient(
                warehouse_id=warehouse_id,
                product_id=product_id,
                requested=-delta,
                available=current.qty if current is not None else 0,
            )

        logger.info(
            "stock_adjusted",
            warehouse_id=warehouse_id,
            product_id=product_id,
            delta=delta,
            qty=updated.qty,
        )
        return updated

    def move(
        self,
        from_warehouse_id: int,
        to_warehouse_id: int,
        product_id: int,
        qty: int,
    ) -> StockMove:
        """Debit the origin, then credit the destination.

        A failed credit is compensated by re-crediting the origin, so a
        failed move leaves total stock unchanged.
        """
        if not isinstance(qty, int) or isinstance(qty, bool) or qty <= 0:
            raise ValidationError("qty must be a positive integer")

        source = self.adjust(from_warehouse_id, product_id, -qty)
        try:
            destination = self.adjust(to_warehouse_id, product_id, qty)
        except Exception:
            logger.warning(
                "stock_move_compensating",
                from_warehouse_id=from_warehouse_id,
                to_warehouse_id=to_warehouse_id,
                product_id=product_id,
                qty=qty,
            )
            try:
                self.adjust(from_warehouse_id, product_id, qty)
            except Exception as exc:
                logger.error(
                    "compensation_failed",
                    warehouse_id=from_warehouse_id,
                    product_id=product_id,
                    delta=qty,
                    error=str(exc),
                )
            raise

        # Same-warehouse moves credit the record just debited.
        source = self._stock_repo.find(from_warehouse_id, product_id) or source
        logger.info(
            "stock_moved",
            from_warehouse_id=from_warehouse_id,
            to_warehouse_id=to_warehouse_id,
            product_id=product_id,
            qty=qty,
        )
        return StockMove(source=source, destination=destination)

    def available(self, warehouse_id: int, product_id: int) -> int:
        """Current qty for the pair (creating the record if needed)."""
        return self.get_or_create(warehouse_id, product_id).qty

    def list(
        self, warehouse_id: int | None = None, product_id: int | None = None
    ) -> list[StockRecord]:
        return self._stock_repo.list(warehouse_id=warehouse_id, product_id=product_id)
