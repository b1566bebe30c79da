"""Application service: Add Product use case."""

from __future__ import annotations

from stockkeeper.domain.exceptions import ValidationError
from stockkeeper.domain.model.product import Product
from stockkeeper.domain.repository.product_dao import ProductDao


def parse_quantity(raw: str | int) -> int:
    """Turn user input into a quantity; negative values are accepted."""
    if isinstance(raw, int):
        return raw
    try:
        return int(raw.strip())
    except (AttributeError, ValueError):
        raise ValidationError(
            f"Quantity must be a whole number, got {raw!r}"
        ) from None


class AddProductHandler:

    def __init__(self, product_dao: ProductDao) -> None:
        self._product_dao = product_dao

    def handle(self, name: str, quantity: str | int, tag: str | None = None) -> Product:
        """Store a new product and return it with its assigned ID."""
        product = Product.new(name=name, quantity=parse_quantity(quantity), tag=tag)
        return self._product_dao.add(product)
