"""Application service: Show Stats use case (query).

Dashboard figures: catalog size, order count, revenue from stored
order totals and the number of products running low.
"""

from __future__ import annotations

from orderflow.application.dto import StatsDTO
from orderflow.domain.model.value_objects import Money
from orderflow.domain.repository.catalog_store import CatalogStore
from orderflow.domain.repository.order_store import OrderStore


class ShowStatsHandler:

    def __init__(self, catalog: CatalogStore, orders: OrderStore) -> None:
        self._catalog = catalog
        self._orders = orders

    def handle(self) -> StatsDTO:
        products = self._catalog.list_all()
        orders = self._orders.list_all()

        revenue = Money.zero()
        for order in orders:
            revenue = revenue + order.total

        return StatsDTO(
            total_products=len(products),
            total_orders=len(orders),
            total_revenue=str(revenue),
            low_stock_items=sum(1 for p in products if p.is_low_stock),
        )
