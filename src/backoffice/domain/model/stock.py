"""StockRecord — quantity on hand for one (warehouse, product) pair.

Records are created lazily with ``qty=0`` on first reference and are
unique per pair.  The non-negative invariant is enforced by the
repository's conditional increment, not by a separate validation pass.
"""

from __future__ import annotations

from dataclasses import dataclass


@dataclass
class StockRecord:

    id: int | None
    warehouse_id: int
    product_id: int
    qty: int = 0

    @property
    def key(self) -> tuple[int, int]:
        return (self.warehouse_id, self.product_id)
