"""Builders for test catalogs and carts.

The in-memory stores are the real implementations, so tests use them
directly instead of fakes.
"""

from __future__ import annotations

from orderflow.domain.model.order import OrderItem
from orderflow.domain.model.product import NewProduct, Product
from orderflow.domain.model.value_objects import Money
from orderflow.infrastructure.persistence.in_memory_catalog_store import (
    InMemoryCatalogStore,
)


def new_product(
    name: str,
    price: str = "10.00",
    stock: int = 10,
    sku: str | None = None,
    category: str = "General",
) -> NewProduct:
    return NewProduct(
        name=name,
        price=Money.of(price),
        stock=stock,
        sku=sku or name.upper()[:3] + "-001",
        category=category,
    )


def make_catalog(*products: NewProduct) -> tuple[InMemoryCatalogStore, list[Product]]:
    """Return a catalog holding *products* plus the added products, in order."""
    catalog = InMemoryCatalogStore()
    added = [catalog.add_product(p) for p in products]
    return catalog, added


def item(product: Product, quantity: int) -> OrderItem:
    """An order line with the product's current price frozen in."""
    return OrderItem(product_id=product.id, quantity=quantity, price=product.price)
