"""Tests for the in-memory backend."""

from stockkeeper.domain.model.product import Product
from stockkeeper.infrastructure.persistence.memory_product_dao import (
    InMemoryProductDao,
)


class TestInMemoryAdd:

    def test_first_product_gets_id_one(self):
        dao = InMemoryProductDao()
        stored = dao.add(Product.new("Bolt", 10, "hardware"))
        assert stored == Product(id=1, name="Bolt", quantity=10, tag="hardware")
        assert dao.list_all() == [stored]

    def test_caller_supplied_id_is_ignored(self):
        dao = InMemoryProductDao()
        stored = dao.add(Product(id=99, name="Bolt", quantity=1))
        assert stored.id == 1

    def test_ids_not_reused_after_delete(self):
        dao = InMemoryProductDao()
        dao.add(Product.new("A", 1))
        second = dao.add(Product.new("B", 1))
        dao.delete(second.id)
        third = dao.add(Product.new("C", 1))
        assert third.id == 3


class TestInMemoryUpdate:

    def test_replaces_in_place(self):
        dao = InMemoryProductDao()
        a = dao.add(Product.new("A", 1))
        b = dao.add(Product.new("B", 2))
        assert dao.update(Product(id=a.id, name="A2", quantity=5, tag="t"))
        assert dao.list_all() == [Product(a.id, "A2", 5, "t"), b]

    def test_unknown_id_is_noop(self):
        dao = InMemoryProductDao()
        a = dao.add(Product.new("A", 1))
        assert dao.update(Product(id=42, name="X", quantity=0)) is False
        assert dao.list_all() == [a]


class TestInMemoryListAll:

    def test_returns_copy(self):
        dao = InMemoryProductDao()
        dao.add(Product.new("A", 1))
        snapshot = dao.list_all()
        snapshot.clear()
        assert len(dao.list_all()) == 1

    def test_configure_is_ignored(self):
        dao = InMemoryProductDao()
        dao.configure("whatever.xlsx")
        assert dao.list_all() == []

    def test_close_is_a_noop(self):
        dao = InMemoryProductDao()
        dao.add(Product.new("A", 1))
        dao.close()
        assert len(dao.list_all()) == 1
