"""Application service: Update Product use case."""

from __future__ import annotations

from backoffice.application.dto import ProductDTO
from backoffice.application.validation import is_positive_int
from backoffice.domain.exceptions import ProductNotFound, ValidationError
from backoffice.domain.model.value_objects import Money
from backoffice.domain.repository.product_repository import ProductRepository


class UpdateProductHandler:

    def __init__(self, product_repo: ProductRepository) -> None:
        self._product_repo = product_repo

    def handle(
        self,
        product_id: int,
        price_cents: object = None,
        active: bool | None = None,
    ) -> ProductDTO:
        """Change a product's price and/or active flag.

        Orders do not snapshot prices: the new price applies the next time
        an allocated order is created or updated.
        """
        product = self._product_repo.get_by_id(product_id)
        if product is None or product.deleted_at is not None:
            raise ProductNotFound(f"Product #{product_id} not found")

        if price_cents is not None:
            if not is_positive_int(price_cents):
                raise ValidationError("VALIDATION_ERROR", ["priceCents must be an integer > 0"])
            product.update_price(Money(price_cents))  # type: ignore[arg-type]
        if active is not None:
            product.active = active

        self._product_repo.save(product)
        return ProductDTO.from_domain(product)
