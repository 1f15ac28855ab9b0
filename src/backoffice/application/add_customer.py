"""Application service: Add Customer use case."""

from __future__ import annotations

from backoffice.application.dto import CustomerDTO
from backoffice.domain.exceptions import ValidationError
from backoffice.domain.model.customer import Customer, CustomerStatus
from backoffice.domain.repository.customer_repository import CustomerRepository


class AddCustomerHandler:

    def __init__(self, customer_repo: CustomerRepository) -> None:
        self._customer_repo = customer_repo

    def handle(self, name: str, email: str, status: str = "active") -> CustomerDTO:
        errors: list[str] = []
        if not name or not name.strip():
            errors.append("name is required")
        if not email or not email.strip():
            errors.append("email is required")
        try:
            customer_status = CustomerStatus(status)
        except ValueError:
            errors.append("status must be 'active' or 'inactive'")
        if errors:
            raise ValidationError("VALIDATION_ERROR", errors)

        customer = Customer(
            id=None,
            name=name.strip(),
            email=email.strip(),
            status=customer_status,
        )
        self._customer_repo.save(customer)
        return CustomerDTO.from_domain(customer)
