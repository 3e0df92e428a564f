"""Application service: Search Products use case (paginated query)."""

from __future__ import annotations

from oms.application.dto import ProductDTO, ProductPageDTO
from oms.domain.exceptions import ValidationError
from oms.domain.repository.unit_of_work import UnitOfWork

DEFAULT_PAGE_SIZE = 10


class SearchProductsHandler:

    def __init__(self, uow: UnitOfWork) -> None:
        self._uow = uow

    def handle(
        self,
        search: str | None = None,
        page: int = 0,
        size: int = DEFAULT_PAGE_SIZE,
    ) -> ProductPageDTO:
        """Return one page of products whose name contains ``search``.

        Pages are 0-based.  Without a search term every product matches.
        """
        if page < 0:
            raise ValidationError("Page must be zero or greater")
        if size <= 0:
            raise ValidationError("Page size must be positive")

        with self._uow as uow:
            matches = uow.products.search(search)

        start = page * size
        return ProductPageDTO(
            items=[ProductDTO.from_product(p) for p in matches[start:start + size]],
            page=page,
            size=size,
            total_items=len(matches),
        )
