"""Application service: Show Product use case (query)."""

from __future__ import annotations

from oms.application.dto import ProductDTO
from oms.domain.exceptions import ProductNotFound
from oms.domain.repository.unit_of_work import UnitOfWork


class ShowProductHandler:

    def __init__(self, uow: UnitOfWork) -> None:
        self._uow = uow

    def handle(self, product_id: int) -> ProductDTO:
        with self._uow as uow:
            product = uow.products.get_by_id(product_id)
        if product is None:
            raise ProductNotFound(product_id)
        return ProductDTO.from_product(product)
