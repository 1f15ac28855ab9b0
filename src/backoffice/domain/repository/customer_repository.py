"""Abstract repository for Customer entities."""

from __future__ import annotations

from abc import ABC, abstractmethod

from backoffice.domain.model.customer import Customer


class CustomerRepository(ABC):

    @abstractmethod
    def get_by_id(self, customer_id: int) -> Customer | None:
        """Return a customer by its ID (deleted or not), or None."""

    @abstractmethod
    def list_all(self) -> list[Customer]:
        """Return every customer."""

    @abstractmethod
    def save(self, customer: Customer) -> None:
        """Persist a new or updated customer, assigning an ID to new ones."""

    def find_active(self, customer_id: int) -> Customer | None:
        """Return the customer only if non-deleted with status ``active``."""
        customer = self.get_by_id(customer_id)
        if customer is not None and customer.is_active:
            return customer
        return None
