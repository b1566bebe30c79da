"""Tests for the UpdateProduct and DeleteProduct use cases."""

import pytest

from stockkeeper.application.delete_product import DeleteProductHandler
from stockkeeper.application.update_product import UpdateProductHandler
from stockkeeper.domain.exceptions import EntityNotFoundError, ValidationError
from stockkeeper.domain.model.product import Product
from stockkeeper.infrastructure.persistence.memory_product_dao import (
    InMemoryProductDao,
)


def _dao_with_products() -> InMemoryProductDao:
    dao = InMemoryProductDao()
    dao.add(Product.new("Bolt", 10, "hardware"))
    dao.add(Product.new("Glue", 3, "supplies"))
    return dao


class TestUpdateProduct:

    def test_overwrites_all_fields(self):
        dao = _dao_with_products()
        updated = UpdateProductHandler(dao).handle(1, "Big Bolt", "25", None)
        assert updated == Product(1, "Big Bolt", 25, None)
        assert dao.list_all()[0] == updated

    def test_unknown_id_raises(self):
        dao = _dao_with_products()
        before = dao.list_all()
        with pytest.raises(EntityNotFoundError, match="ID 9"):
            UpdateProductHandler(dao).handle(9, "X", "1")
        assert dao.list_all() == before

    def test_bad_quantity_rejected_before_write(self):
        dao = _dao_with_products()
        before = dao.list_all()
        with pytest.raises(ValidationError):
            UpdateProductHandler(dao).handle(1, "Bolt", "lots")
        assert dao.list_all() == before


class TestDeleteProduct:

    def test_removes_product(self):
        dao = _dao_with_products()
        DeleteProductHandler(dao).handle(1)
        assert [p.name for p in dao.list_all()] == ["Glue"]

    def test_unknown_id_raises(self):
        dao = _dao_with_products()
        with pytest.raises(EntityNotFoundError):
            DeleteProductHandler(dao).handle(42)
        assert len(dao.list_all()) == 2
