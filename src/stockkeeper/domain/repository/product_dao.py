"""Abstract persistence contract for products.

Defined in the domain layer so the domain never depends on
infrastructure. Concrete backends (in-memory, Excel, PostgreSQL)
live in the infrastructure layer and are interchangeable at runtime.
"""

from __future__ import annotations

from abc import ABC, abstractmethod

from stockkeeper.domain.model.product import Product


class ProductDao(ABC):

    @abstractmethod
    def add(self, product: Product) -> Product:
        """Persist a new product and return it with its assigned ID.

        Any ID already set on ``product`` is ignored.
        """

    @abstractmethod
    def update(self, product: Product) -> bool:
        """Overwrite the stored product that has the same ID.

        An unknown ID is not an error: nothing changes and False is
        returned.
        """

    @abstractmethod
    def delete(self, product_id: int) -> bool:
        """Remove a product by ID. Returns False if nothing was removed."""

    @abstractmethod
    def list_all(self) -> list[Product]:
        """Return a snapshot of every stored product."""

    def configure(self, source: str) -> None:
        """Point the backend at a data source (file path, DSN, ...).

        Backends without an external source ignore it.
        """

    def close(self) -> None:
        """Release whatever the backend holds open. No-op by default."""
