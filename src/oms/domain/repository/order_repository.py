"""Abstract repository for Order aggregate.

Saving an order writes the order and all of its lines together.
"""

from __future__ import annotations

from abc import ABC, abstractmethod

from oms.domain.model.order import Order, OrderStatus


class OrderRepository(ABC):

    @abstractmethod
    def get_by_id(self, order_id: int) -> Order | None:
        """Return an order by its ID, or None if not found."""

    @abstractmethod
    def list_all(self) -> list[Order]:
        """Return every order, ordered by ID."""

    @abstractmethod
    def save(self, order: Order) -> None:
        """Persist a new or updated order with its lines.

        Assigns IDs to a new order and to any line that has none.
        """

    def find_by_owner(self, owner_id: int) -> list[Order]:
        return [o for o in self.list_all() if o.owner_id == owner_id]

    def find_by_status(self, status: OrderStatus) -> list[Order]:
        return [o for o in self.list_all() if o.status is status]

    def find_by_owner_and_status(
        self, owner_id: int, status: OrderStatus
    ) -> list[Order]:
        return [o for o in self.find_by_owner(owner_id) if o.status is status]
