"""Composition root: wires concrete backends to the ProductDao contract.

This is the only place in the codebase that knows about every backend.
Each call builds a fresh instance, so switching backend swaps the whole
object and never carries data across.
"""

from __future__ import annotations

from pathlib import Path

from stockkeeper.domain.exceptions import ValidationError
from stockkeeper.domain.repository.product_dao import ProductDao
from stockkeeper.infrastructure.persistence.excel_product_dao import ExcelProductDao
from stockkeeper.infrastructure.persistence.memory_product_dao import (
    InMemoryProductDao,
)
from stockkeeper.infrastructure.persistence.postgres_product_dao import (
    PostgresProductDao,
)

# Resolve data directory relative to the project root.
# When installed in editable mode the project root is the repo root.
_DATA_DIR = Path(__file__).resolve().parents[3] / "data"
DEFAULT_WORKBOOK = _DATA_DIR / "products.xlsx"

BACKENDS = ("memory", "excel", "postgres")


def product_dao(backend: str = "memory", source: str | None = None) -> ProductDao:
    """Build the backend called ``backend``.

    ``source`` is handed to ``ProductDao.configure``; the Excel backend
    falls back to the workbook under ``data/``.
    """
    if backend == "memory":
        dao: ProductDao = InMemoryProductDao()
    elif backend == "excel":
        dao = ExcelProductDao()
        source = source or str(DEFAULT_WORKBOOK)
    elif backend == "postgres":
        dao = PostgresProductDao()
    else:
        raise ValidationError(
            f"Unknown backend '{backend}' (choose from {', '.join(BACKENDS)})"
        )

    if source is not None:
        dao.configure(source)
    return dao
