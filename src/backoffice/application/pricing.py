"""Order totals at current catalog prices."""

from __future__ import annotations

from backoffice.domain.model.order import OrderLineItem, compute_total
from backoffice.domain.model.value_objects import Money
from backoffice.domain.repository.product_repository import ProductRepository


def price_items(product_repo: ProductRepository, items: list[OrderLineItem]) -> Money:
    """Sum of qty x price, with prices read from the catalog right now."""
    product_ids = list({item.product_id for item in items})
    prices = {p.id: p.price for p in product_repo.find_by_ids(product_ids)}
    return compute_total(items, prices)  # type: ignore[arg-type]
