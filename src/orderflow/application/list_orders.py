"""Application service: List Orders use case (query).

Product names are looked up in the *current* catalog for display.
Line prices and the order total come from the order itself, so they
reflect the prices at the time the order was placed.
"""

from __future__ import annotations

from orderflow.application.dto import OrderDTO, OrderLineDTO
from orderflow.domain.model.order import Order
from orderflow.domain.model.product import Product, find_product
from orderflow.domain.repository.catalog_store import CatalogStore
from orderflow.domain.repository.order_store import OrderStore

UNKNOWN_PRODUCT = "Unknown"


class ListOrdersHandler:

    def __init__(self, orders: OrderStore, catalog: CatalogStore) -> None:
        self._orders = orders
        self._catalog = catalog

    def handle(self) -> list[OrderDTO]:
        """Return every order, most recent first."""
        products = self._catalog.list_all()
        return [self._to_dto(order, products) for order in reversed(self._orders.list_all())]

    # --- Mapping --------------------------------------------------------------

    @staticmethod
    def _to_dto(order: Order, products: list[Product]) -> OrderDTO:
        lines = []
        for item in order.items:
            product = find_product(products, item.product_id)
            lines.append(
                OrderLineDTO(
                    product_name=product.name if product is not None else UNKNOWN_PRODUCT,
                    quantity=item.quantity,
                    unit_price=str(item.price),
                    line_total=str(item.line_total),
                )
            )
        return OrderDTO(
            id=order.id,
            customer_name=order.customer_name,
            status=order.status.value,
            items=lines,
            total=str(order.total),
            created_at=order.created_at.strftime("%Y-%m-%d %H:%M UTC"),
        )
