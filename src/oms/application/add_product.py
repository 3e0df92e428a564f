"""Application service: Add Product use case."""

from __future__ import annotations

import structlog

from oms.application.dto import ProductDTO
from oms.domain.model.product import Product
from oms.domain.model.value_objects import Money
from oms.domain.repository.unit_of_work import UnitOfWork

logger = structlog.get_logger(__name__)


class AddProductHandler:

    def __init__(self, uow: UnitOfWork) -> None:
        self._uow = uow

    def handle(
        self,
        name: str,
        price: str,
        stock: int,
        description: str = "",
        category: str = "",
    ) -> ProductDTO:
        """Add a new product to the catalog."""
        product = Product.create(
            name=name,
            price=Money.of(price),
            stock=stock,
            description=description,
            category=category,
        )

        with self._uow as uow:
            uow.products.save(product)
            uow.commit()

        logger.info("Product added", product_id=product.id, name=product.name, stock=product.stock)
        return ProductDTO.from_product(product)
