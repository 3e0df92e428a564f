"""Application service: Delete Product use case.

Order lines only hold a weak reference to their product, so deleting a
product leaves existing orders intact.
"""

from __future__ import annotations

import structlog

from oms.domain.repository.unit_of_work import UnitOfWork

logger = structlog.get_logger(__name__)


class DeleteProductHandler:

    def __init__(self, uow: UnitOfWork) -> None:
        self._uow = uow

    def handle(self, product_id: int) -> None:
        with self._uow as uow:
            uow.products.delete(product_id)
            uow.commit()
        logger.info("Product deleted", product_id=product_id)
