"""Application service: Preview Order use case (query).

What the order form shows while a cart is being edited: whether the
catalog can satisfy it, and what it would cost right now.
"""

from __future__ import annotations

from orderflow.application.dto import OrderPreviewDTO
from orderflow.domain.model.order import OrderItem
from orderflow.domain.repository.catalog_store import CatalogStore
from orderflow.domain.service.pricing import calculate_total
from orderflow.domain.service.stock_validator import validate_stock


class PreviewOrderHandler:

    def __init__(self, catalog: CatalogStore) -> None:
        self._catalog = catalog

    def handle(self, items: list[OrderItem]) -> OrderPreviewDTO:
        products = self._catalog.list_all()
        check = validate_stock(items, products)
        total = calculate_total(items, products)
        return OrderPreviewDTO(
            valid=check.valid,
            errors=list(check.errors),
            total=str(total),
            total_amount=total.amount,
        )
