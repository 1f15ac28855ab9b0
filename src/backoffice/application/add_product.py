"""Application service: Add Product use case."""

from __future__ import annotations

from backoffice.application.dto import ProductDTO
from backoffice.application.validation import is_positive_int
from backoffice.domain.exceptions import ValidationError
from backoffice.domain.model.product import Product
from backoffice.domain.model.value_objects import Money
from backoffice.domain.repository.product_repository import ProductRepository


class AddProductHandler:

    def __init__(self, product_repo: ProductRepository) -> None:
        self._product_repo = product_repo

    def handle(self, sku: str, name: str, price_cents: object, active: bool = True) -> ProductDTO:
        """Add a new product to the catalog.  SKUs are unique among non-deleted products."""
        errors: list[str] = []
        if not sku or not sku.strip():
            errors.append("sku is required")
        if not name or not name.strip():
            errors.append("name is required")
        if not is_positive_int(price_cents):
            errors.append("priceCents must be an integer > 0")
        if errors:
            raise ValidationError("VALIDATION_ERROR", errors)

        if self._product_repo.get_by_sku(sku.strip()) is not None:
            raise ValidationError(f"Product with SKU '{sku.strip()}' already exists")

        product = Product(
            id=None,
            sku=sku.strip(),
            name=name.strip(),
            price=Money(price_cents),  # type: ignore[arg-type]
            active=active,
        )
        self._product_repo.save(product)
        return ProductDTO.from_domain(product)
