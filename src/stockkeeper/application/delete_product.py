"""Application service: Delete Product use case."""

from __future__ import annotations

from stockkeeper.domain.exceptions import EntityNotFoundError
from stockkeeper.domain.repository.product_dao import ProductDao


class DeleteProductHandler:

    def __init__(self, product_dao: ProductDao) -> None:
        self._product_dao = product_dao

    def handle(self, product_id: int) -> None:
        if not self._product_dao.delete(product_id):
            raise EntityNotFoundError(f"Product with ID {product_id} not found")
