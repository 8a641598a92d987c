"""Domain service: order pricing."""

from __future__ import annotations

from collections.abc import Iterable, Sequence

from orderflow.domain.model.order import OrderItem
from orderflow.domain.model.product import Product, find_product
from orderflow.domain.model.value_objects import Money


def calculate_total(items: Iterable[OrderItem], products: Sequence[Product]) -> Money:
    """Sum ``price * quantity`` using each product's current catalog price.

    Items whose product is missing contribute nothing.
    """
    total = Money.zero()
    for item in items:
        product = find_product(products, item.product_id)
        if product is None:
            continue
        total = total + product.price * item.quantity
    return total
