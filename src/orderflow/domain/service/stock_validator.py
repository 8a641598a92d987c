"""Domain service: Stock Validation.

Decides whether a proposed set of order lines can be satisfied by the
current catalog. Pure: neither the items nor the products are touched,
so repeated calls on an unchanged catalog give identical answers.
"""

from __future__ import annotations

from collections.abc import Iterable, Sequence
from dataclasses import dataclass

from orderflow.domain.model.order import OrderItem
from orderflow.domain.model.product import Product, find_product

PRODUCT_NOT_FOUND = "Product not found"


@dataclass(frozen=True)
class StockCheck:
    """Outcome of a stock validation: one message per offending item."""

    errors: tuple[str, ...] = ()

    @property
    def valid(self) -> bool:
        return not self.errors


@dataclass(frozen=True)
class StockValidationFailed:
    """Returned (not raised) when an order is rejected for lack of stock.

    Failing to place an order is a normal business outcome, so callers
    get this value back instead of an exception.
    """

    errors: tuple[str, ...]


def validate_stock(items: Iterable[OrderItem], products: Sequence[Product]) -> StockCheck:
    """Check every item against the stock of the product it references.

    Items are checked independently, in the order given. A missing
    product yields a generic message that does not name the id.
    """
    errors: list[str] = []

    for item in items:
        product = find_product(products, item.product_id)
        if product is None:
            errors.append(PRODUCT_NOT_FOUND)
        elif product.stock < item.quantity:
            errors.append(
                f"{product.name}: Only {product.stock} in stock, "
                f"requested {item.quantity}"
            )

    return StockCheck(errors=tuple(errors))
