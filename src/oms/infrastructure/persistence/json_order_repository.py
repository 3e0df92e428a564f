"""JSON-document-backed implementation of OrderRepository.

An order is stored as one record with its lines nested inside, so the
order and its lines are always written together.
"""

from __future__ import annotations

from datetime import datetime
from decimal import Decimal

from oms.domain.model.order import Order, OrderLine, OrderStatus
from oms.domain.model.value_objects import Money, Quantity
from oms.domain.repository.order_repository import OrderRepository
from oms.infrastructure.persistence.records import next_id, upsert


class JsonOrderRepository(OrderRepository):

    def __init__(self, records: list[dict], sequences: dict[str, int]) -> None:
        self._records = records
        self._sequences = sequences

    # --- OrderRepository interface --------------------------------------------

    def get_by_id(self, order_id: int) -> Order | None:
        for raw in self._records:
            if raw["id"] == order_id:
                return self._to_domain(raw)
        return None

    def list_all(self) -> list[Order]:
        return [
            self._to_domain(raw)
            for raw in sorted(self._records, key=lambda r: r["id"])
        ]

    def save(self, order: Order) -> None:
        if order.id is None:
            order.id = next_id(self._records, self._sequences, "orders")

        line_id = self._next_line_id()
        for line in order.lines:
            if line.id is None:
                line.id = line_id
                line_id += 1

        upsert(self._records, self._to_raw(order))

    def _next_line_id(self) -> int:
        return max(
            (line["id"] for raw in self._records for line in raw["lines"]),
            default=0,
        ) + 1

    # --- Serialization --------------------------------------------------------

    @staticmethod
    def _to_raw(order: Order) -> dict:
        return {
            "id": order.id,
            "owner_id": order.owner_id,
            "status": order.status.value,
            "created_at": order.created_at.isoformat(),
            "total": str(order.total.amount),
            "lines": [
                {
                    "id": line.id,
                    "product_id": line.product_id,
                    "product_name": line.product_name,
                    "quantity": line.quantity.value,
                    "unit_price": str(line.unit_price.amount),
                    "subtotal": str(line.subtotal.amount),
                }
                for line in order.lines
            ],
        }

    @staticmethod
    def _to_domain(raw: dict) -> Order:
        lines = [
            OrderLine(
                id=i["id"],
                product_id=i["product_id"],
                product_name=i["product_name"],
                quantity=Quantity(i["quantity"]),
                unit_price=Money(Decimal(i["unit_price"])),
            )
            for i in raw["lines"]
        ]
        return Order(
            id=raw["id"],
            owner_id=raw["owner_id"],
            lines=lines,
            total=Money(Decimal(raw["total"])),
            status=OrderStatus(raw["status"]),
            created_at=datetime.fromisoformat(raw["created_at"]),
        )
