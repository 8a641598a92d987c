"""In-memory implementation of OrderStore."""

from __future__ import annotations

from orderflow.domain.model.order import Order
from orderflow.domain.repository.order_store import OrderStore


class InMemoryOrderStore(OrderStore):

    def __init__(self) -> None:
        self._orders: list[Order] = []

    def append(self, order: Order) -> None:
        self._orders.append(order)

    def list_all(self) -> list[Order]:
        # Orders are frozen, so a shallow copy of the list is a safe snapshot.
        return list(self._orders)

    def __len__(self) -> int:
        return len(self._orders)
