"""JSON-document-backed implementation of ProductRepository."""

from __future__ import annotations

from decimal import Decimal

from oms.domain.model.product import Product
from oms.domain.model.value_objects import Money
from oms.domain.repository.product_repository import ProductRepository
from oms.infrastructure.persistence.records import next_id, upsert


class JsonProductRepository(ProductRepository):

    def __init__(self, records: list[dict], sequences: dict[str, int]) -> None:
        self._records = records
        self._sequences = sequences

    # --- ProductRepository interface ------------------------------------------

    def get_by_id(self, product_id: int) -> Product | None:
        for raw in self._records:
            if raw["id"] == product_id:
                return self._to_domain(raw)
        return None

    def list_all(self) -> list[Product]:
        return [
            self._to_domain(raw)
            for raw in sorted(self._records, key=lambda r: r["id"])
        ]

    def save(self, product: Product) -> None:
        if product.id is None:
            product.id = next_id(self._records, self._sequences, "products")
        upsert(self._records, self._to_raw(product))

    def delete(self, product_id: int) -> None:
        self._records[:] = [r for r in self._records if r["id"] != product_id]

    # --- Serialization --------------------------------------------------------

    @staticmethod
    def _to_raw(product: Product) -> dict:
        return {
            "id": product.id,
            "name": product.name,
            "description": product.description,
            "price": str(product.price.amount),
            "stock": product.stock,
            "category": product.category,
        }

    @staticmethod
    def _to_domain(raw: dict) -> Product:
        return Product(
            id=raw["id"],
            name=raw["name"],
            description=raw.get("description", ""),
            price=Money(Decimal(raw["price"])),
            stock=raw["stock"],
            category=raw.get("category", ""),
        )
