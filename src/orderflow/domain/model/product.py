"""Product aggregate.

Products live independently of orders. They are added to the catalog
and, once there, only their stock changes (when orders are placed).
Products are never removed.
"""

from __future__ import annotations

from collections.abc import Iterable
from dataclasses import dataclass

from orderflow.domain.model.value_objects import Money

LOW_STOCK_THRESHOLD = 10


@dataclass(frozen=True)
class NewProduct:
    """Everything the catalog needs to create a Product, except the id."""

    name: str
    price: Money
    stock: int
    sku: str
    category: str


@dataclass
class Product:
    """A product in the catalog.

    Kept as a mutable dataclass because stock decrements are a
    legitimate mutation on the aggregate. The ``sku`` is supplied by
    the caller and is not guaranteed unique.
    """

    id: str
    name: str
    price: Money
    stock: int
    sku: str
    category: str

    @property
    def is_low_stock(self) -> bool:
        return self.stock <= LOW_STOCK_THRESHOLD

    def decrement_stock(self, quantity: int) -> None:
        """Remove *quantity* units from stock.

        No clamping: callers validate availability first, so stock only
        goes negative if they didn't.
        """
        self.stock -= quantity


def find_product(products: Iterable[Product], product_id: str) -> Product | None:
    """Return the product with *product_id*, or None when it is absent.

    Every lookup in the domain goes through here, and every caller
    decides explicitly what "absent" means for it.
    """
    for product in products:
        if product.id == product_id:
            return product
    return None
