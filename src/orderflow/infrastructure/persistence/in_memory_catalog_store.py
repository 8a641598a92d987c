"""In-memory implementation of CatalogStore.

The product list is owned exclusively by the store. Readers only ever
get copies, so the only way to change a product is through
``add_product`` and ``decrement_stock``.
"""

from __future__ import annotations

import logging
import uuid
from dataclasses import replace

from orderflow.domain.model.product import NewProduct, Product, find_product
from orderflow.domain.repository.catalog_store import CatalogStore

logger = logging.getLogger(__name__)


class InMemoryCatalogStore(CatalogStore):

    def __init__(self) -> None:
        self._products: list[Product] = []

    # --- CatalogStore interface -----------------------------------------------

    def add_product(self, new_product: NewProduct) -> Product:
        product = Product(
            id=str(uuid.uuid4()),
            name=new_product.name,
            price=new_product.price,
            stock=new_product.stock,
            sku=new_product.sku,
            category=new_product.category,
        )
        self._products.append(product)
        logger.info("Added product %s (%s) with id %s", product.name, product.sku, product.id)
        return replace(product)

    def decrement_stock(self, product_id: str, quantity: int) -> None:
        product = find_product(self._products, product_id)
        if product is None:
            logger.warning("Stock decrement skipped, unknown product id %s", product_id)
            return
        product.decrement_stock(quantity)

    def get_by_id(self, product_id: str) -> Product | None:
        product = find_product(self._products, product_id)
        return replace(product) if product is not None else None

    def list_all(self) -> list[Product]:
        return [replace(p) for p in self._products]

    def __len__(self) -> int:
        return len(self._products)
