"""Abstract Unit of Work — the storage transaction boundary.

A unit of work groups every read and write of one use case.  Entering
it begins a transaction and takes the store's exclusive lock, so the
stock a reservation validates against is the latest committed value and
no other writer can interleave.  Nothing becomes visible to other units
of work until ``commit()``; leaving the block without committing rolls
everything back.

Usage::

    with uow:
        product = uow.products.get_by_id(1)
        ...
        uow.commit()
"""

from __future__ import annotations

from abc import ABC, abstractmethod

from oms.domain.repository.order_repository import OrderRepository
from oms.domain.repository.product_repository import ProductRepository
from oms.domain.repository.user_repository import UserRepository


class UnitOfWork(ABC):

    products: ProductRepository
    users: UserRepository
    orders: OrderRepository

    def __enter__(self) -> UnitOfWork:
        self._begin()
        return self

    def __exit__(self, *exc_info) -> None:
        try:
            self.rollback()
        finally:
            self._end()

    @abstractmethod
    def commit(self) -> None:
        """Make every staged write visible at once."""

    @abstractmethod
    def rollback(self) -> None:
        """Discard staged writes. A no-op after ``commit()``."""

    @abstractmethod
    def _begin(self) -> None:
        """Acquire the store lock and load repositories."""

    @abstractmethod
    def _end(self) -> None:
        """Release the store lock."""
