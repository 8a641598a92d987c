"""Tests for the AddProduct use case."""

import pytest

from orderflow.application.add_product import AddProductHandler
from orderflow.domain.exceptions import ValidationError
from orderflow.domain.model.value_objects import Money
from orderflow.infrastructure.persistence.in_memory_catalog_store import (
    InMemoryCatalogStore,
)


def _setup():
    catalog = InMemoryCatalogStore()
    return AddProductHandler(catalog), catalog


class TestAddProductHappyPath:

    def test_adds_product(self):
        handler, catalog = _setup()
        product = handler.handle("Mouse", "19.99", "50", "MS-001", "Accessories")

        assert catalog.list_all() == [product]
        assert product.price == Money.of("19.99")
        assert product.stock == 50

    def test_strips_whitespace(self):
        handler, _ = _setup()
        product = handler.handle("  Mouse ", "1", 1, " MS-001 ", " Accessories ")
        assert product.name == "Mouse"
        assert product.sku == "MS-001"
        assert product.category == "Accessories"

    def test_negative_zero_price_stored_as_zero(self):
        handler, _ = _setup()
        product = handler.handle("Freebie", "-0", "1", "FR-001", "Promo")
        assert str(product.price) == "$0.00"

    def test_zero_price_and_stock_allowed(self):
        handler, _ = _setup()
        product = handler.handle("Freebie", "0", "0", "FR-001", "Promo")
        assert product.price == Money.zero()
        assert product.stock == 0


class TestAddProductValidation:

    @pytest.mark.parametrize("field", ["name", "price", "stock", "sku", "category"])
    def test_every_field_required(self, field):
        handler, catalog = _setup()
        values = {"name": "Mouse", "price": "1", "stock": "1", "sku": "MS", "category": "C"}
        values[field] = " "
        with pytest.raises(ValidationError, match="fill in all fields"):
            handler.handle(**values)
        assert catalog.list_all() == []

    def test_negative_price_rejected(self):
        handler, _ = _setup()
        with pytest.raises(ValidationError, match="price cannot be negative"):
            handler.handle("Mouse", "-1", "1", "MS", "C")

    def test_invalid_price_rejected(self):
        handler, _ = _setup()
        with pytest.raises(ValidationError, match="Invalid money amount"):
            handler.handle("Mouse", "cheap", "1", "MS", "C")

    def test_negative_stock_rejected(self):
        handler, _ = _setup()
        with pytest.raises(ValidationError, match="Stock cannot be negative"):
            handler.handle("Mouse", "1", "-2", "MS", "C")

    def test_non_integer_stock_rejected(self):
        handler, _ = _setup()
        with pytest.raises(ValidationError, match="Invalid stock quantity"):
            handler.handle("Mouse", "1", "2.5", "MS", "C")
