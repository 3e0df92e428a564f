"""Domain service: Inventory Reservation.

This service coordinates the cross-aggregate operation of checking and
drawing down product stock for a whole order.  It lives in the domain
layer because the logic is a core business rule, not just orchestration.

The two-phase approach (validate-then-mutate) ensures we never leave
stock in a partially-decremented state if one line fails validation.
It must run inside a unit of work: the unit of work's lock serializes
concurrent reservations, and its commit is what publishes the new
stock levels.
"""

from __future__ import annotations

from dataclasses import dataclass

import structlog

from oms.domain.exceptions import InsufficientStock, ProductNotFound, ValidationError
from oms.domain.model.product import Product
from oms.domain.model.value_objects import Money, Quantity
from oms.domain.repository.product_repository import ProductRepository

logger = structlog.get_logger(__name__)


@dataclass(frozen=True)
class LineRequest:
    """A requested (product, quantity) pair."""

    product_id: int
    quantity: Quantity


@dataclass(frozen=True)
class ReservedLine:
    """Snapshot of a product taken when its stock was reserved."""

    product_id: int
    product_name: str
    unit_price: Money
    quantity: Quantity


class InventoryReservationService:

    def __init__(self, product_repo: ProductRepository) -> None:
        self._product_repo = product_repo

    def reserve(self, requests: list[LineRequest]) -> list[ReservedLine]:
        """Reserve stock for every requested line, or for none of them.

        Uses a two-phase approach:
          Phase 1 — load and validate: walk the requests in order,
                    tracking what earlier lines already claimed from
                    each product.  Fails fast before any mutation.
          Phase 2 — mutate and persist: one decrement per distinct
                    product, then save.

        Returns one snapshot per request, in request order.
        """
        if not requests:
            raise ValidationError("Order must contain at least one item")

        # Phase 1: load all products and validate
        products: dict[int, Product] = {}
        remaining: dict[int, int] = {}
        claimed: dict[int, int] = {}
        reserved: list[ReservedLine] = []

        for req in requests:
            product = products.get(req.product_id)
            if product is None:
                product = self._product_repo.get_by_id(req.product_id)
                if product is None:
                    logger.warning("Reservation rejected", product_id=req.product_id, reason="not_found")
                    raise ProductNotFound(req.product_id)
                products[req.product_id] = product
                remaining[req.product_id] = product.stock

            qty = req.quantity.value
            available = remaining[req.product_id]
            if qty > available:
                logger.warning(
                    "Reservation rejected",
                    product_id=req.product_id,
                    requested=qty,
                    available=available,
                )
                raise InsufficientStock(
                    product_id=req.product_id,
                    product_name=product.name,
                    requested=qty,
                    available=available,
                )
            remaining[req.product_id] = available - qty
            claimed[req.product_id] = claimed.get(req.product_id, 0) + qty
            reserved.append(
                ReservedLine(
                    product_id=req.product_id,
                    product_name=product.name,
                    unit_price=product.price,  # <-- price snapshot
                    quantity=req.quantity,
                )
            )

        # Phase 2: mutate and persist
        for product_id, qty in claimed.items():
            product = products[product_id]
            product.decrement_stock(qty)
            self._product_repo.save(product)

        return reserved
