"""Abstract repository for Product aggregate.

Defined in the domain layer so the domain never depends on
infrastructure. Concrete implementations (JSON, in-memory) live in the
infrastructure layer and the test fakes.
"""

from __future__ import annotations

from abc import ABC, abstractmethod

from oms.domain.model.product import Product


class ProductRepository(ABC):

    @abstractmethod
    def get_by_id(self, product_id: int) -> Product | None:
        """Return a product by its ID, or None if not found."""

    @abstractmethod
    def list_all(self) -> list[Product]:
        """Return every product in the catalog, ordered by ID."""

    @abstractmethod
    def save(self, product: Product) -> None:
        """Persist a new or updated product, assigning an ID if needed."""

    @abstractmethod
    def delete(self, product_id: int) -> None:
        """Remove a product. Removing an absent product is a no-op."""

    def search(self, term: str | None = None) -> list[Product]:
        """Return products whose name contains ``term``, ignoring case."""
        products = self.list_all()
        if not term:
            return products
        needle = term.lower()
        return [p for p in products if needle in p.name.lower()]
