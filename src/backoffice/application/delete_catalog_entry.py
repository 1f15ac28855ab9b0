"""Application service: soft delete for catalog entries.

Soft-deleted customers, products and warehouses stay in storage but are
excluded from every active lookup, so existing orders keep their ids.
"""

from __future__ import annotations

from backoffice.application.dto import CustomerDTO, ProductDTO, WarehouseDTO
from backoffice.domain.exceptions import CustomerNotFound, ProductNotFound, WarehouseNotFound
from backoffice.domain.repository.customer_repository import CustomerRepository
from backoffice.domain.repository.product_repository import ProductRepository
from backoffice.domain.repository.warehouse_repository import WarehouseRepository


class DeleteCustomerHandler:

    def __init__(self, customer_repo: CustomerRepository) -> None:
        self._customer_repo = customer_repo

    def handle(self, customer_id: int) -> CustomerDTO:
        customer = self._customer_repo.get_by_id(customer_id)
        if customer is None or customer.deleted_at is not None:
            raise CustomerNotFound(f"Customer #{customer_id} not found")
        customer.soft_delete()
        self._customer_repo.save(customer)
        return CustomerDTO.from_domain(customer)


class DeleteProductHandler:

    def __init__(self, product_repo: ProductRepository) -> None:
        self._product_repo = product_repo

    def handle(self, product_id: int) -> ProductDTO:
        product = self._product_repo.get_by_id(product_id)
        if product is None or product.deleted_at is not None:
            raise ProductNotFound(f"Product #{product_id} not found")
        product.soft_delete()
        self._product_repo.save(product)
        return ProductDTO.from_domain(product)


class DeleteWarehouseHandler:

    def __init__(self, warehouse_repo: WarehouseRepository) -> None:
        self._warehouse_repo = warehouse_repo

    def handle(self, warehouse_id: int) -> WarehouseDTO:
        warehouse = self._warehouse_repo.get_by_id(warehouse_id)
        if warehouse is None or warehouse.deleted_at is not None:
            raise WarehouseNotFound(f"Warehouse #{warehouse_id} not found")
        warehouse.soft_delete()
        self._warehouse_repo.save(warehouse)
        return WarehouseDTO.from_domain(warehouse)
