"""Data Transfer Objects: plain containers that cross layer boundaries.

DTOs carry data between the CLI and application layers without
exposing domain internals to the outside world.
"""

from __future__ import annotations

from dataclasses import dataclass
from decimal import Decimal


@dataclass(frozen=True)
class OrderItemSpec:
    """Input: what the customer asked for.

    ``product_ref`` is a product id or, when unambiguous, a SKU.
    """

    product_ref: str
    quantity: int


@dataclass(frozen=True)
class ProductDTO:
    """Output: a catalog entry as displayed to the user."""

    id: str
    name: str
    sku: str
    category: str
    price: str  # formatted, e.g. "$79.99"
    stock: int
    low_stock: bool


@dataclass(frozen=True)
class OrderLineDTO:
    """Output: a single order line as displayed to the user."""

    product_name: str
    quantity: int
    unit_price: str
    line_total: str


@dataclass(frozen=True)
class OrderDTO:
    """Output: a complete order as displayed to the user."""

    id: str
    customer_name: str
    status: str
    items: list[OrderLineDTO]
    total: str
    created_at: str


@dataclass(frozen=True)
class OrderPreviewDTO:
    """Output: live validation and total for a cart that is not placed yet."""

    valid: bool
    errors: list[str]
    total: str
    total_amount: Decimal


@dataclass(frozen=True)
class StatsDTO:
    total_products: int
    total_orders: int
    total_revenue: str
    low_stock_items: int
