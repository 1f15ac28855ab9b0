"""Domain service: Inventory Reservation.

Coordinates the cross-record work of reserving or releasing stock for an
order.  Orders hold their reservation as stock already debited from the
order's warehouse, one stock record per product.

Two phases:
  Phase 1 - pre-check: read current stock and fail fast with
            StockInsufficient before anything is written.  Advisory only;
            the conditional update inside ``StockLedger.adjust`` is the
            real guard.
  Phase 2 - apply: one ``adjust`` per product.  Each committed step is
            recorded in a compensation log; if a later step fails, the
            log is replayed in reverse with inverse deltas and the failure
            is surfaced as InternalError.
"""

from __future__ import annotations

from dataclasses import dataclass

import structlog

from backoffice.domain.exceptions import InternalError, StockInsufficient
from backoffice.domain.service.stock_ledger import StockLedger

logger = structlog.get_logger(__name__)


@dataclass(frozen=True)
class _AppliedAdjustment:
    product_id: int
    delta: int


class InventoryReservationService:

    def __init__(self, ledger: StockLedger) -> None:
        self._ledger = ledger

    # --- Phase 1 --------------------------------------------------------------

    def check_available(self, warehouse_id: int, quantities: dict[int, int]) -> None:
        """Raise StockInsufficient if any product lacks the requested qty."""
        for product_id, qty in quantities.items():
            if qty <= 0:
                continue
            available = self._ledger.available(warehouse_id, product_id)
            if available < qty:
                raise StockInsufficient(
                    warehouse_id=warehouse_id,
                    product_id=product_id,
                    requested=qty,
                    available=available,
                )

    # --- Phase 2 --------------------------------------------------------------

    def reserve(self, warehouse_id: int, quantities: dict[int, int]) -> None:
        """Debit ``qty`` for every product."""
        self.apply(warehouse_id, {pid: -qty for pid, qty in quantities.items()})

    def release(self, warehouse_id: int, quantities: dict[int, int]) -> None:
        """Credit ``qty`` back for every product."""
        self.apply(warehouse_id, {pid: qty for pid, qty in quantities.items()})

    def apply(self, warehouse_id: int, deltas: dict[int, int]) -> None:
        """Apply stock deltas product by product, all or nothing (best effort).

        ``deltas`` are in stock direction: negative reserves, positive
        releases.  Zero deltas are skipped.
        """
        applied: list[_AppliedAdjustment] = []
        for product_id, delta in deltas.items():
            if delta == 0:
                continue
            try:
                self._ledger.adjust(warehouse_id, product_id, delta)
            except Exception as exc:
                logger.error(
                    "reservation_step_failed",
                    warehouse_id=warehouse_id,
                    product_id=product_id,
                    delta=delta,
                    applied=len(applied),
                    error=str(exc),
                )
                self._compensate(warehouse_id, applied)
                raise InternalError(
                    f"Stock adjustment failed for product #{product_id} in "
                    f"warehouse #{warehouse_id}"
                ) from exc
            applied.append(_AppliedAdjustment(product_id=product_id, delta=delta))

    def _compensate(self, warehouse_id: int, applied: list[_AppliedAdjustment]) -> None:
        for step in reversed(applied):
            try:
                self._ledger.adjust(warehouse_id, step.product_id, -step.delta)
            except Exception as exc:
                # Keep going: the remaining steps can still be undone.
                logger.error(
                    "compensation_failed",
                    warehouse_id=warehouse_id,
                    product_id=step.product_id,
                    delta=-step.delta,
                    error=str(exc),
                )
            else:
                logger.warning(
                    "reservation_compensated",
                    warehouse_id=warehouse_id,
                    product_id=step.product_id,
                    delta=-step.delta,
                )
