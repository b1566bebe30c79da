"""PostgreSQL-backed implementation of ProductDao.

Holds a single connection for the lifetime of the instance; there is no
pooling and no reconnection. The table is created on first use.

Failure policy:
- connecting (or creating the table) fails -> BackendUnavailableError,
  the backend cannot be used at all.
- any later statement fails -> the error is logged with its traceback
  and re-raised as StorageError.
"""

from __future__ import annotations

import logging
from typing import Any, Callable

import psycopg2

from stockkeeper.domain.exceptions import BackendUnavailableError, StorageError
from stockkeeper.domain.model.product import Product
from stockkeeper.domain.repository.product_dao import ProductDao

logger = logging.getLogger(__name__)

# Fixed endpoint; not user configuration.
DB_HOST = "localhost"
DB_PORT = 7777
DB_NAME = "dao"
DB_USER = "postgres"
DB_PASS = "postgres"

CREATE_TABLE_SQL = """
CREATE TABLE IF NOT EXISTS products (
    id SERIAL PRIMARY KEY,
    name VARCHAR(255) NOT NULL,
    quantity INTEGER NOT NULL,
    tag VARCHAR(255)
)
"""
INSERT_SQL = "INSERT INTO products (name, quantity, tag) VALUES (%s, %s, %s) RETURNING id"
UPDATE_SQL = "UPDATE products SET name = %s, quantity = %s, tag = %s WHERE id = %s"
DELETE_SQL = "DELETE FROM products WHERE id = %s"
SELECT_ALL_SQL = "SELECT id, name, quantity, tag FROM products ORDER BY id"


def default_connection() -> Any:
    return psycopg2.connect(
        host=DB_HOST,
        port=DB_PORT,
        dbname=DB_NAME,
        user=DB_USER,
        password=DB_PASS,
    )


class PostgresProductDao(ProductDao):

    def __init__(self, connect: Callable[[], Any] = default_connection) -> None:
        try:
            connection = connect()
        except psycopg2.Error as exc:
            raise self._unavailable(exc) from exc

        try:
            connection.autocommit = True
            with connection.cursor() as cursor:
                cursor.execute(CREATE_TABLE_SQL)
        except psycopg2.Error as exc:
            connection.close()
            raise self._unavailable(exc) from exc

        self._connection = connection
        logger.info("Connected to PostgreSQL, table 'products' ready")

    # --- ProductDao interface -------------------------------------------------

    def add(self, product: Product) -> Product:
        row = self._execute(
            INSERT_SQL, (product.name, product.quantity, product.tag), fetch="one"
        )
        return product.with_id(row[0])

    def update(self, product: Product) -> bool:
        affected = self._execute(
            UPDATE_SQL, (product.name, product.quantity, product.tag, product.id)
        )
        return affected > 0

    def delete(self, product_id: int) -> bool:
        return self._execute(DELETE_SQL, (product_id,)) > 0

    def list_all(self) -> list[Product]:
        rows = self._execute(SELECT_ALL_SQL, fetch="all")
        return [
            Product(id=row[0], name=row[1], quantity=row[2], tag=row[3])
            for row in rows
        ]

    # --- Connection lifecycle -------------------------------------------------

    def close(self) -> None:
        if not self._connection.closed:
            self._connection.close()
            logger.info("PostgreSQL connection closed")

    def __enter__(self) -> PostgresProductDao:
        return self

    def __exit__(self, *exc_info: object) -> None:
        self.close()

    # --- Helpers --------------------------------------------------------------

    @staticmethod
    def _unavailable(exc: psycopg2.Error) -> BackendUnavailableError:
        logger.error("Failed to connect to PostgreSQL: %s", exc)
        return BackendUnavailableError(f"Failed to connect to PostgreSQL: {exc}")

    def _execute(self, sql: str, params: tuple = (), fetch: str | None = None) -> Any:
        """Run one statement.

        Returns the fetched row(s) when ``fetch`` is "one" or "all",
        otherwise the number of affected rows.
        """
        logger.debug("Executing %s with %r", sql, params)
        try:
            with self._connection.cursor() as cursor:
                cursor.execute(sql, params)
                if fetch == "one":
                    return cursor.fetchone()
                if fetch == "all":
                    return cursor.fetchall()
                return cursor.rowcount
        except psycopg2.Error as exc:
            logger.exception("PostgreSQL statement failed: %s", sql)
            raise StorageError(f"Database operation failed: {exc}") from exc
