"""Data Transfer Objects — plain containers that cross layer boundaries.

DTOs carry data between the CLI and application layers without
exposing domain internals to the outside world.  ``to_dict()`` gives
the JSON wire shape.
"""

from __future__ import annotations

import math
from dataclasses import dataclass
from datetime import datetime, timezone

from oms.domain.exceptions import DomainException
from oms.domain.model.order import Order
from oms.domain.model.product import Product
from oms.domain.model.user import User
from oms.domain.repository.unit_of_work import UnitOfWork


@dataclass(frozen=True)
class OrderItemSpec:
    """Input: what the customer asked for (product ID + quantity)."""

    product_id: int
    quantity: int


@dataclass(frozen=True)
class UserDTO:
    id: int
    name: str
    email: str
    role: str

    @staticmethod
    def from_user(user: User) -> UserDTO:
        return UserDTO(
            id=user.id,  # type: ignore[arg-type]
            name=user.name,
            email=user.email,
            role=user.role.value,
        )

    def to_dict(self) -> dict:
        return {"id": self.id, "name": self.name, "email": self.email, "role": self.role}


@dataclass(frozen=True)
class ProductDTO:
    id: int
    name: str
    description: str
    price: str  # plain decimal, e.g. "15.00"
    stock: int
    category: str

    @staticmethod
    def from_product(product: Product) -> ProductDTO:
        return ProductDTO(
            id=product.id,  # type: ignore[arg-type]
            name=product.name,
            description=product.description,
            price=product.price.to_plain(),
            stock=product.stock,
            category=product.category,
        )

    def to_dict(self) -> dict:
        return {
            "id": self.id,
            "name": self.name,
            "description": self.description,
            "price": self.price,
            "stock": self.stock,
            "category": self.category,
        }


@dataclass(frozen=True)
class ProductPageDTO:
    items: list[ProductDTO]
    page: int
    size: int
    total_items: int

    @property
    def total_pages(self) -> int:
        return math.ceil(self.total_items / self.size) if self.size else 0

    def to_dict(self) -> dict:
        return {
            "items": [p.to_dict() for p in self.items],
            "page": self.page,
            "size": self.size,
            "total_items": self.total_items,
            "total_pages": self.total_pages,
        }


@dataclass(frozen=True)
class OrderLineDTO:
    """Output: a single order line.

    ``product`` holds the live catalog entry, or None once the product
    has been deleted; ``product_name`` and ``unit_price`` are the
    reservation-time snapshot.
    """

    id: int
    product_id: int
    product_name: str
    quantity: int
    unit_price: str
    subtotal: str
    product: ProductDTO | None

    def to_dict(self) -> dict:
        return {
            "id": self.id,
            "quantity": self.quantity,
            "subtotal": self.subtotal,
            "product": self.product.to_dict() if self.product else None,
        }


@dataclass(frozen=True)
class OrderDTO:
    """Output: a complete order."""

    id: int
    created_at: str  # ISO-8601, second precision
    total: str
    client: UserDTO | None
    details: list[OrderLineDTO]
    status: str

    def to_dict(self) -> dict:
        return {
            "id": self.id,
            "createdAt": self.created_at,
            "total": self.total,
            "client": self.client.to_dict() if self.client else None,
            "details": [d.to_dict() for d in self.details],
            "status": self.status,
        }


# --- Mapping -------------------------------------------------------------------


def order_to_dto(order: Order, uow: UnitOfWork) -> OrderDTO:
    """Map an order to its DTO, reading owner and live products from ``uow``."""
    owner = uow.users.get_by_id(order.owner_id)
    details = []
    for line in order.lines:
        product = uow.products.get_by_id(line.product_id)
        details.append(
            OrderLineDTO(
                id=line.id,  # type: ignore[arg-type]
                product_id=line.product_id,
                product_name=line.product_name,
                quantity=line.quantity.value,
                unit_price=line.unit_price.to_plain(),
                subtotal=line.subtotal.to_plain(),
                product=ProductDTO.from_product(product) if product else None,
            )
        )
    return OrderDTO(
        id=order.id,  # type: ignore[arg-type]
        created_at=order.created_at.isoformat(timespec="seconds"),
        total=order.total.to_plain(),
        client=UserDTO.from_user(owner) if owner else None,
        details=details,
        status=order.status.value,
    )


def error_payload(exc: DomainException) -> dict:
    """Wire shape of a failed request."""
    return {
        "message": str(exc),
        "status": exc.status_code,
        "timestamp": datetime.now(timezone.utc).isoformat(timespec="seconds"),
    }
