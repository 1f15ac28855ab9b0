"""Abstract repository for Product aggregate.

Defined in the domain layer so the domain never depends on
infrastructure. Concrete implementations (JSON file, in-memory)
live in the infrastructure layer.
"""

from __future__ import annotations

from abc import ABC, abstractmethod

from backoffice.domain.model.product import Product


class ProductRepository(ABC):

    @abstractmethod
    def get_by_id(self, product_id: int) -> Product | None:
        """Return a product by its ID (deleted or not), or None."""

    @abstractmethod
    def get_by_sku(self, sku: str) -> Product | None:
        """Return the non-deleted product with this SKU, or None."""

    @abstractmethod
    def find_by_ids(self, product_ids: list[int]) -> list[Product]:
        """Return every product whose ID is in ``product_ids``."""

    @abstractmethod
    def list_all(self) -> list[Product]:
        """Return every product in the catalog."""

    @abstractmethod
    def save(self, product: Product) -> None:
        """Persist a new or updated product, assigning an ID to new ones."""

    def find_active(self, product_id: int) -> Product | None:
        """Return the product only if it is non-deleted and active."""
        product = self.get_by_id(product_id)
        if product is not None and product.is_orderable:
            return product
        return None
