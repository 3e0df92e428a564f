"""Builders for the records most tests start from."""

from __future__ import annotations

from oms.domain.model.product import Product
from oms.domain.model.user import Principal, Role, User
from oms.domain.model.value_objects import Money
from tests.fakes import FakeStore

ALICE = Principal(email="alice@example.com", role=Role.CLIENT)
BOB = Principal(email="bob@example.com", role=Role.CLIENT)
ADMIN = Principal(email="admin@example.com", role=Role.ADMIN)


def make_product(
    product_id: int | None = 1,
    name: str = "Widget",
    price: str = "15.00",
    stock: int = 100,
    category: str = "Tools",
) -> Product:
    return Product(
        id=product_id,
        name=name,
        price=Money.of(price),
        stock=stock,
        description=f"A {name.lower()}",
        category=category,
    )


def make_users() -> list[User]:
    return [
        User(id=1, name="Alice", email=ALICE.email, password_hash="hashed:secret1", role=Role.CLIENT),
        User(id=2, name="Bob", email=BOB.email, password_hash="hashed:secret2", role=Role.CLIENT),
        User(id=3, name="Admin", email=ADMIN.email, password_hash="hashed:secret3", role=Role.ADMIN),
    ]


def make_store(products: list[Product] | None = None) -> FakeStore:
    """Store with Alice, Bob and an admin, plus the given (or default) products."""
    if products is None:
        products = [
            make_product(1, "Widget", "15.00", 100),
            make_product(2, "Gadget", "25.00", 50, category="Gizmos"),
            make_product(3, "P", "5.00", 10),
        ]
    return FakeStore(products=products, users=make_users())
