"""In-memory fakes for testing.

These implement the same abstract interfaces as the JSON store but keep
everything in dicts. No file I/O, no side effects.  ``FakeStore`` holds
the committed state; each ``FakeUnitOfWork`` works on a private copy of
it under the store's lock, so commit/rollback behave like the real
thing.
"""

from __future__ import annotations

import copy
import threading

from oms.application.password_hasher import PasswordHasher
from oms.domain.model.order import Order
from oms.domain.model.product import Product
from oms.domain.model.user import User
from oms.domain.repository.order_repository import OrderRepository
from oms.domain.repository.product_repository import ProductRepository
from oms.domain.repository.unit_of_work import UnitOfWork
from oms.domain.repository.user_repository import UserRepository


class FakeProductRepository(ProductRepository):

    def __init__(
        self, items: dict[int, Product] | None = None, last_id: int = 0
    ) -> None:
        self.items: dict[int, Product] = items if items is not None else {}
        self.last_id = last_id

    def get_by_id(self, product_id: int) -> Product | None:
        return self.items.get(product_id)

    def list_all(self) -> list[Product]:
        return [self.items[k] for k in sorted(self.items)]

    def save(self, product: Product) -> None:
        if product.id is None:
            self.last_id = max(self.last_id, max(self.items, default=0)) + 1
            product.id = self.last_id
        self.items[product.id] = product

    def delete(self, product_id: int) -> None:
        self.items.pop(product_id, None)


class FakeUserRepository(UserRepository):

    def __init__(self, items: dict[int, User] | None = None) -> None:
        self.items: dict[int, User] = items if items is not None else {}

    def get_by_id(self, user_id: int) -> User | None:
        return self.items.get(user_id)

    def get_by_email(self, email: str) -> User | None:
        for u in self.items.values():
            if u.email.lower() == email.lower():
                return u
        return None

    def save(self, user: User) -> None:
        if user.id is None:
            user.id = max(self.items, default=0) + 1
        self.items[user.id] = user


class FakeOrderRepository(OrderRepository):

    def __init__(self, items: dict[int, Order] | None = None) -> None:
        self.items: dict[int, Order] = items if items is not None else {}

    def get_by_id(self, order_id: int) -> Order | None:
        return self.items.get(order_id)

    def list_all(self) -> list[Order]:
        return [self.items[k] for k in sorted(self.items)]

    def save(self, order: Order) -> None:
        if order.id is None:
            order.id = max(self.items, default=0) + 1
        line_id = max(
            (line.id or 0 for o in self.items.values() for line in o.lines),
            default=0,
        ) + 1
        for line in order.lines:
            if line.id is None:
                line.id = line_id
                line_id += 1
        self.items[order.id] = order


class FakeStore:
    """Committed state shared by every FakeUnitOfWork built on it."""

    def __init__(
        self,
        products: list[Product] | None = None,
        users: list[User] | None = None,
    ) -> None:
        self.products: dict[int, Product] = {p.id: p for p in products or []}
        self.users: dict[int, User] = {u.id: u for u in users or []}
        self.orders: dict[int, Order] = {}
        # Product IDs are never reused, even after a delete
        self.last_product_id = max(self.products, default=0)
        self.lock = threading.Lock()
        self.commits = 0


class FakeUnitOfWork(UnitOfWork):

    def __init__(self, store: FakeStore | None = None) -> None:
        self.store = store if store is not None else FakeStore()

    def commit(self) -> None:
        self.store.products = copy.deepcopy(self.products.items)
        self.store.last_product_id = self.products.last_id
        self.store.users = copy.deepcopy(self.users.items)
        self.store.orders = copy.deepcopy(self.orders.items)
        self.store.commits += 1

    def rollback(self) -> None:
        self._load()

    def _begin(self) -> None:
        self.store.lock.acquire()
        self._load()

    def _end(self) -> None:
        self.store.lock.release()

    def _load(self) -> None:
        self.products = FakeProductRepository(
            copy.deepcopy(self.store.products), self.store.last_product_id
        )
        self.users = FakeUserRepository(copy.deepcopy(self.store.users))
        self.orders = FakeOrderRepository(copy.deepcopy(self.store.orders))


class FakePasswordHasher(PasswordHasher):

    def hash(self, password: str) -> str:
        return f"hashed:{password}"

    def verify(self, password: str, password_hash: str) -> bool:
        return password_hash == f"hashed:{password}"
