"""Application service: Create Order use case.

This is the only place that mutates the catalog and the order list
together: validate, price, decrement stock, record the order.
"""

from __future__ import annotations

import logging

from orderflow.domain.model.order import Order, OrderItem
from orderflow.domain.repository.catalog_store import CatalogStore
from orderflow.domain.repository.order_store import OrderStore
from orderflow.domain.service.pricing import calculate_total
from orderflow.domain.service.stock_validator import (
    StockValidationFailed,
    validate_stock,
)

logger = logging.getLogger(__name__)


class CreateOrderHandler:
    """Places orders against a catalog.

    Assumes exactly one caller at a time. Validation runs against the
    same catalog state the decrements are applied to, so the decrement
    loop cannot fail halfway and there is no rollback. Serving
    concurrent callers would require running ``handle`` under a lock.

    Callers must ensure ``customer_name`` and ``items`` are non-empty;
    this handler does not check either.
    """

    def __init__(self, catalog: CatalogStore, orders: OrderStore) -> None:
        self._catalog = catalog
        self._orders = orders

    def handle(
        self, customer_name: str, items: list[OrderItem]
    ) -> Order | StockValidationFailed:
        """Create a new order.

        Steps:
        1. Validate stock against the current catalog.
        2. On failure, return ``StockValidationFailed``; nothing changes.
        3. Price the order from the pre-mutation catalog.
        4. Build the order with the items exactly as supplied.
        5. Decrement stock for every item, in item order.
        6. Append the order and return it.
        """
        products = self._catalog.list_all()

        check = validate_stock(items, products)
        if not check.valid:
            logger.warning("Stock validation failed: %s", "; ".join(check.errors))
            return StockValidationFailed(errors=check.errors)

        total = calculate_total(items, products)
        order = Order.create(customer_name=customer_name, items=items, total=total)

        for item in items:
            self._catalog.decrement_stock(item.product_id, item.quantity)

        self._orders.append(order)
        logger.info(
            "Created order %s for %s: %d line(s), total %s",
            order.id, order.customer_name, len(order.items), order.total,
        )
        return order
