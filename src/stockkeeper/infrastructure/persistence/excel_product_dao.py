"""Excel-workbook-backed implementation of ProductDao.

The first sheet holds a header row (ID, Name, Quantity, Tag) followed by
one product per row. Every operation loads the whole workbook and every
mutation rewrites it from scratch, so the cost is linear in the number
of products and a crash mid-write can leave a truncated file.
"""

from __future__ import annotations

import logging
import zipfile
from pathlib import Path

from openpyxl import Workbook, load_workbook
from openpyxl.utils.exceptions import InvalidFileException

from stockkeeper.domain.exceptions import StorageError
from stockkeeper.domain.model.product import Product
from stockkeeper.domain.repository.product_dao import ProductDao

logger = logging.getLogger(__name__)

DEFAULT_FILE = Path("products.xlsx")
SHEET_TITLE = "Products"
HEADER = ("ID", "Name", "Quantity", "Tag")


class ExcelProductDao(ProductDao):

    def __init__(self, file_path: Path | str = DEFAULT_FILE) -> None:
        self._file_path = Path(file_path)

    @property
    def file_path(self) -> Path:
        return self._file_path

    # --- ProductDao interface -------------------------------------------------

    def configure(self, source: str) -> None:
        self._file_path = Path(source)

    def add(self, product: Product) -> Product:
        products = self.list_all()
        next_id = max((p.id for p in products), default=0) + 1
        stored = product.with_id(next_id)
        products.append(stored)
        self._persist(products)
        return stored

    def update(self, product: Product) -> bool:
        products = self.list_all()
        for i, existing in enumerate(products):
            if existing.id == product.id:
                products[i] = product
                self._persist(products)
                return True
        return False

    def delete(self, product_id: int) -> bool:
        products = self.list_all()
        remaining = [p for p in products if p.id != product_id]
        if len(remaining) == len(products):
            return False
        self._persist(remaining)
        return True

    def list_all(self) -> list[Product]:
        if not self._file_path.exists():
            return []
        return [
            self._to_domain(row)
            for row in self._read_rows()
            if any(cell is not None for cell in row)
        ]

    # --- Serialization --------------------------------------------------------

    def _read_rows(self) -> list[tuple]:
        # A file object bypasses openpyxl's check on the file extension.
        try:
            with self._file_path.open("rb") as fh:
                workbook = load_workbook(fh, read_only=True)
                try:
                    sheet = workbook.worksheets[0]
                    return list(sheet.iter_rows(min_row=2, values_only=True))
                finally:
                    workbook.close()
        except (OSError, InvalidFileException, zipfile.BadZipFile) as exc:
            raise StorageError(f"Cannot read workbook {self._file_path}: {exc}") from exc

    def _to_domain(self, row: tuple) -> Product:
        # Short rows come back when trailing cells were never written.
        cells = (tuple(row) + (None,) * len(HEADER))[: len(HEADER)]
        product_id, name, quantity, tag = cells
        try:
            return Product(
                id=_whole_number(product_id),
                name="" if name is None else str(name),
                quantity=_whole_number(quantity),
                tag=None if tag is None else str(tag),
            )
        except (TypeError, ValueError) as exc:
            raise StorageError(
                f"Malformed product row in {self._file_path}: {row!r}"
            ) from exc

    def _persist(self, products: list[Product]) -> None:
        workbook = Workbook()
        sheet = workbook.active
        sheet.title = SHEET_TITLE
        sheet.append(HEADER)
        for p in products:
            sheet.append([p.id, p.name, p.quantity, p.tag])

        try:
            self._file_path.parent.mkdir(parents=True, exist_ok=True)
            workbook.save(self._file_path)
        except OSError as exc:
            raise StorageError(f"Cannot write workbook {self._file_path}: {exc}") from exc

        logger.info("Wrote %d products to %s", len(products), self._file_path)


def _whole_number(value: object) -> int:
    """Numeric cells may come back as floats; fractional ones are rejected."""
    if isinstance(value, float) and not value.is_integer():
        raise ValueError(f"{value!r} is not a whole number")
    return int(value)
