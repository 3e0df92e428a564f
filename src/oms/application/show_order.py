"""Application service: Show Order use case (query)."""

from __future__ import annotations

from oms.application.dto import OrderDTO, order_to_dto
from oms.domain.exceptions import NotOwner, OrderNotFound
from oms.domain.model.user import Principal
from oms.domain.repository.unit_of_work import UnitOfWork


class ShowOrderHandler:

    def __init__(self, uow: UnitOfWork) -> None:
        self._uow = uow

    def handle(self, principal: Principal, order_id: int) -> OrderDTO:
        """Return one order. Admins may read any order, clients only their own."""
        with self._uow as uow:
            order = uow.orders.get_by_id(order_id)
            if order is None:
                raise OrderNotFound(order_id)

            if not principal.is_admin:
                owner = uow.users.get_by_email(principal.email)
                if owner is None or not order.is_owned_by(owner.id):
                    raise NotOwner(order_id, principal.email)

            return order_to_dto(order, uow)
