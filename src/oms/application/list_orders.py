"""Application service: List Orders use cases (queries).

No pagination: a client's orders are few, and the administrative
listings scan the whole store.
"""

from __future__ import annotations

from oms.application.dto import OrderDTO, order_to_dto
from oms.domain.exceptions import UnknownPrincipal
from oms.domain.model.order import Order, OrderStatus
from oms.domain.model.user import Principal
from oms.domain.repository.unit_of_work import UnitOfWork


class ListOrdersHandler:

    def __init__(self, uow: UnitOfWork) -> None:
        self._uow = uow

    def for_principal(
        self, principal: Principal, status: OrderStatus | None = None
    ) -> list[OrderDTO]:
        """Orders owned by the calling principal."""
        return self.for_client(principal.email, status)

    def for_client(
        self, email: str, status: OrderStatus | None = None
    ) -> list[OrderDTO]:
        """Orders owned by the user registered under ``email``."""
        with self._uow as uow:
            owner = uow.users.get_by_email(email)
            if owner is None:
                raise UnknownPrincipal(email)
            if status is None:
                orders = uow.orders.find_by_owner(owner.id)  # type: ignore[arg-type]
            else:
                orders = uow.orders.find_by_owner_and_status(owner.id, status)  # type: ignore[arg-type]
            return self._to_dtos(orders, uow)

    def all(self, status: OrderStatus | None = None) -> list[OrderDTO]:
        """Every order in the system. Authorization is the caller's job."""
        with self._uow as uow:
            if status is None:
                orders = uow.orders.list_all()
            else:
                orders = uow.orders.find_by_status(status)
            return self._to_dtos(orders, uow)

    @staticmethod
    def _to_dtos(orders: list[Order], uow: UnitOfWork) -> list[OrderDTO]:
        return [order_to_dto(o, uow) for o in orders]
