"""Application service: Update Product use case.

Runs under the same unit of work lock as order reservations, so an
admin stock update and an order decrement can never overwrite each
other.
"""

from __future__ import annotations

import structlog

from oms.application.dto import ProductDTO
from oms.domain.exceptions import ProductNotFound
from oms.domain.model.value_objects import Money
from oms.domain.repository.unit_of_work import UnitOfWork

logger = structlog.get_logger(__name__)


class UpdateProductHandler:

    def __init__(self, uow: UnitOfWork) -> None:
        self._uow = uow

    def handle(
        self,
        product_id: int,
        name: str | None = None,
        price: str | None = None,
        stock: int | None = None,
        description: str | None = None,
        category: str | None = None,
    ) -> ProductDTO:
        """Update a product's editable fields; ``None`` keeps the current value.

        This does NOT affect any existing orders — their lines captured
        a price snapshot at reservation time.
        """
        new_price = Money.of(price) if price is not None else None

        with self._uow as uow:
            product = uow.products.get_by_id(product_id)
            if product is None:
                raise ProductNotFound(product_id)

            product.update_details(
                name=product.name if name is None else name,
                description=product.description if description is None else description,
                price=product.price if new_price is None else new_price,
                stock=product.stock if stock is None else stock,
                category=product.category if category is None else category,
            )
            uow.products.save(product)
            uow.commit()

        logger.info(
            "Product updated",
            product_id=product_id,
            price=product.price.to_plain(),
            stock=product.stock,
        )
        return ProductDTO.from_product(product)
