"""Abstract repository for Order aggregate."""

from __future__ import annotations

from abc import ABC, abstractmethod

from backoffice.domain.model.order import Order, OrderStatus
from backoffice.domain.repository.page import Page


class OrderRepository(ABC):

    @abstractmethod
    def get_by_id(self, order_id: int) -> Order | None:
        """Return an order by its ID, or None if not found."""

    @abstractmethod
    def save(self, order: Order) -> None:
        """Persist a new or updated order, assigning an ID to new ones."""

    @abstractmethod
    def list(
        self,
        status: OrderStatus | None = None,
        customer_id: int | None = None,
        skip: int = 0,
        limit: int = 20,
    ) -> Page[Order]:
        """Filtered scan, newest first."""
