"""Application service: Cancel Order use case.

Only the owner of a PENDING order may cancel it.  Stock drawn down when
the order was created is not restored.
"""

from __future__ import annotations

import structlog

from oms.application.dto import OrderDTO, order_to_dto
from oms.domain.exceptions import DomainException, NotOwner, OrderNotFound
from oms.domain.repository.unit_of_work import UnitOfWork

logger = structlog.get_logger(__name__)


class CancelOrderHandler:

    def __init__(self, uow: UnitOfWork) -> None:
        self._uow = uow

    def handle(self, order_id: int, requesting_email: str) -> OrderDTO:
        try:
            with self._uow as uow:
                order = uow.orders.get_by_id(order_id)
                if order is None:
                    raise OrderNotFound(order_id)

                owner = uow.users.get_by_id(order.owner_id)
                if owner is None or owner.email.lower() != requesting_email.lower():
                    raise NotOwner(order_id, requesting_email)

                order.cancel()
                uow.orders.save(order)
                dto = order_to_dto(order, uow)
                uow.commit()
        except DomainException as exc:
            logger.warning("Cancellation rejected", order_id=order_id, error=str(exc))
            raise

        logger.info("Order cancelled", order_id=order_id, owner=requesting_email)
        return dto
