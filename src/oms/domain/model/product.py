"""Product aggregate.

Products live independently of orders. They have their own lifecycle:
prices change, products are added and removed from the catalog, and
stock is drawn down by order reservations.
"""

from __future__ import annotations

from dataclasses import dataclass

from oms.domain.exceptions import InsufficientStock, ValidationError
from oms.domain.model.value_objects import Money


@dataclass
class Product:
    """A product in the catalog.

    Invariant: ``stock`` is never negative.
    """

    id: int | None
    name: str
    price: Money
    stock: int
    description: str = ""
    category: str = ""

    @staticmethod
    def create(
        name: str,
        price: Money,
        stock: int,
        description: str = "",
        category: str = "",
    ) -> Product:
        """Create a new catalog entry, enforcing all invariants."""
        product = Product(id=None, name="", price=price, stock=0)
        product.update_details(
            name=name,
            description=description,
            price=price,
            stock=stock,
            category=category,
        )
        return product

    def update_details(
        self,
        name: str,
        description: str,
        price: Money,
        stock: int,
        category: str,
    ) -> None:
        """Replace the editable fields of the product.

        This does NOT affect any existing orders because order lines
        capture a price snapshot at reservation time.
        """
        if not name or not name.strip():
            raise ValidationError("Product name is required")
        if isinstance(stock, bool) or not isinstance(stock, int) or stock < 0:
            raise ValidationError("Product stock must be a non-negative integer")
        self.name = name.strip()
        self.description = (description or "").strip()
        self.price = price
        self.stock = stock
        self.category = (category or "").strip()

    def has_stock_for(self, quantity: int) -> bool:
        return quantity <= self.stock

    def decrement_stock(self, quantity: int) -> None:
        """Draw ``quantity`` units out of stock."""
        if quantity <= 0:
            raise ValidationError("Decrement quantity must be positive")
        if not self.has_stock_for(quantity):
            raise InsufficientStock(
                product_id=self.id,  # type: ignore[arg-type]
                product_name=self.name,
                requested=quantity,
                available=self.stock,
            )
        self.stock -= quantity
