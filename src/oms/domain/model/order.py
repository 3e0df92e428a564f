"""Order aggregate — the core of the domain.

The Order is an aggregate root that owns its lines.  It is created in
one piece from a successful inventory reservation and afterwards only
moves through its (very small) state machine:

    PENDING --cancel()--> CANCELLED

CANCELLED is terminal.  The total is fixed at creation time and is not
touched by cancellation.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from datetime import datetime, timezone
from enum import Enum

from oms.domain.exceptions import InvalidStateTransition, ValidationError
from oms.domain.model.value_objects import Money, Quantity


class OrderStatus(Enum):
    PENDING = "PENDING"
    CANCELLED = "CANCELLED"


@dataclass
class OrderLine:
    """One product-and-quantity entry of an order.

    Captures the product name and unit price at reservation time so the
    line stays meaningful if the product is later changed or deleted.
    Never mutated after creation.
    """

    product_id: int
    product_name: str
    quantity: Quantity
    unit_price: Money  # locked at reservation time
    id: int | None = None

    @property
    def subtotal(self) -> Money:
        return self.unit_price * self.quantity.value


# ---------------------------------------------------------------------------
# Constants for business rules
# ---------------------------------------------------------------------------
MAX_LINE_ITEMS = 50


def _now() -> datetime:
    return datetime.now(timezone.utc).replace(microsecond=0)


@dataclass
class Order:
    """Aggregate root for purchase orders.

    Use the ``Order.create()`` factory for new orders — it enforces all
    business rules.  The ``__init__`` is intentionally simple so the
    repository can reconstitute persisted orders without re-validating.
    """

    id: int | None
    owner_id: int
    lines: list[OrderLine]
    total: Money
    status: OrderStatus = OrderStatus.PENDING
    created_at: datetime = field(default_factory=_now)

    # --- Factory (used for NEW orders only) -----------------------------------

    @staticmethod
    def create(owner_id: int, lines: list[OrderLine]) -> Order:
        """Build a PENDING order whose total is the sum of its line subtotals."""
        if not lines:
            raise ValidationError("Order must contain at least one item")

        if len(lines) > MAX_LINE_ITEMS:
            raise ValidationError(f"Maximum {MAX_LINE_ITEMS} items per order")

        total = Money.zero()
        for line in lines:
            total = total + line.subtotal

        return Order(
            id=None,
            owner_id=owner_id,
            lines=list(lines),
            total=total,
            status=OrderStatus.PENDING,
            created_at=_now(),
        )

    # --- State transitions ----------------------------------------------------

    def cancel(self) -> None:
        """Transition PENDING -> CANCELLED.

        Stock drawn down at creation is not restored.
        """
        if self.status is not OrderStatus.PENDING:
            raise InvalidStateTransition(
                order_id=self.id,
                current=self.status.value,
                target=OrderStatus.CANCELLED.value,
            )
        self.status = OrderStatus.CANCELLED

    # --- Queries --------------------------------------------------------------

    def is_owned_by(self, user_id: int | None) -> bool:
        return user_id is not None and self.owner_id == user_id

    @property
    def line_count(self) -> int:
        return len(self.lines)
