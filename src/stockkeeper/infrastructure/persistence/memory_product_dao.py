"""In-memory implementation of ProductDao.

Data lives only as long as the instance. IDs come from a counter that
is never rewound, so an ID is not reused after a delete.
"""

from __future__ import annotations

from stockkeeper.domain.model.product import Product
from stockkeeper.domain.repository.product_dao import ProductDao


class InMemoryProductDao(ProductDao):

    def __init__(self) -> None:
        self._products: list[Product] = []
        self._next_id = 1

    # --- ProductDao interface -------------------------------------------------

    def add(self, product: Product) -> Product:
        stored = product.with_id(self._next_id)
        self._next_id += 1
        self._products.append(stored)
        return stored

    def update(self, product: Product) -> bool:
        for i, existing in enumerate(self._products):
            if existing.id == product.id:
                self._products[i] = product
                return True
        return False

    def delete(self, product_id: int) -> bool:
        remaining = [p for p in self._products if p.id != product_id]
        removed = len(remaining) != len(self._products)
        self._products = remaining
        return removed

    def list_all(self) -> list[Product]:
        return list(self._products)
