"""Application service: Create Order use case.

Orchestrates the flow between repositories, the reservation domain
service and the Order aggregate.  Everything happens inside one unit of
work: if any step fails, neither the stock decrements nor the order
become visible.
"""

from __future__ import annotations

import structlog

from oms.application.dto import OrderDTO, OrderItemSpec, order_to_dto
from oms.domain.exceptions import UnknownPrincipal, ValidationError
from oms.domain.model.order import MAX_LINE_ITEMS, Order, OrderLine
from oms.domain.model.user import Principal
from oms.domain.model.value_objects import Quantity
from oms.domain.repository.unit_of_work import UnitOfWork
from oms.domain.service.inventory_reservation_service import (
    InventoryReservationService,
    LineRequest,
)

logger = structlog.get_logger(__name__)


class CreateOrderHandler:

    def __init__(self, uow: UnitOfWork) -> None:
        self._uow = uow

    def handle(self, principal: Principal, item_specs: list[OrderItemSpec]) -> OrderDTO:
        """Create a new PENDING order for ``principal``.

        Steps:
        1. Validate the raw line items (never touches storage).
        2. Resolve the principal to its User.
        3. Reserve stock for every line (all or nothing).
        4. Build lines from the reservation snapshots, persist the
           order with its lines, commit.
        """
        requests = self._to_requests(item_specs)

        with self._uow as uow:
            owner = uow.users.get_by_email(principal.email)
            if owner is None:
                raise UnknownPrincipal(principal.email)

            reserved = InventoryReservationService(uow.products).reserve(requests)

            lines = [
                OrderLine(
                    product_id=r.product_id,
                    product_name=r.product_name,
                    quantity=r.quantity,
                    unit_price=r.unit_price,
                )
                for r in reserved
            ]
            order = Order.create(owner_id=owner.id, lines=lines)  # type: ignore[arg-type]
            uow.orders.save(order)
            dto = order_to_dto(order, uow)
            uow.commit()

        logger.info(
            "Order created",
            order_id=order.id,
            owner=owner.email,
            total=dto.total,
            line_count=order.line_count,
        )
        return dto

    @staticmethod
    def _to_requests(item_specs: list[OrderItemSpec]) -> list[LineRequest]:
        if not item_specs:
            raise ValidationError("Order must contain at least one item")
        if len(item_specs) > MAX_LINE_ITEMS:
            raise ValidationError(f"Maximum {MAX_LINE_ITEMS} items per order")
        return [
            LineRequest(product_id=spec.product_id, quantity=Quantity(spec.quantity))
            for spec in item_specs
        ]
