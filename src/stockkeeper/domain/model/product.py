"""Product entity.

A plain value record. Backends assign the id; until then it is ``None``.
No invariants are enforced here: quantity may be negative, name may be
empty and tag may be missing.
"""

from __future__ import annotations

from dataclasses import dataclass, replace


@dataclass(frozen=True)
class Product:
    """A product tracked by one of the storage backends.

    Frozen, so "assigning" an id means building a new instance (see
    ``with_id``). Backends return the stored copy from ``ProductDao.add``.
    """

    id: int | None
    name: str
    quantity: int
    tag: str | None = None

    @classmethod
    def new(cls, name: str, quantity: int, tag: str | None = None) -> Product:
        """Build a product that has not been stored yet."""
        return cls(id=None, name=name, quantity=quantity, tag=tag)

    def with_id(self, product_id: int) -> Product:
        return replace(self, id=product_id)
