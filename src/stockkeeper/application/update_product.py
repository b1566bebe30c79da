"""Application service: Update Product use case."""

from __future__ import annotations

from stockkeeper.application.add_product import parse_quantity
from stockkeeper.domain.exceptions import EntityNotFoundError
from stockkeeper.domain.model.product import Product
from stockkeeper.domain.repository.product_dao import ProductDao


class UpdateProductHandler:

    def __init__(self, product_dao: ProductDao) -> None:
        self._product_dao = product_dao

    def handle(
        self,
        product_id: int,
        name: str,
        quantity: str | int,
        tag: str | None = None,
    ) -> Product:
        """Overwrite every field of an existing product.

        The DAO treats an unknown ID as a no-op; here it is an error so
        the user learns that nothing was changed.
        """
        product = Product(
            id=product_id, name=name, quantity=parse_quantity(quantity), tag=tag
        )
        if not self._product_dao.update(product):
            raise EntityNotFoundError(f"Product with ID {product_id} not found")
        return product
