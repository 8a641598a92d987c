"""Abstract store for Order aggregates. Append-only."""

from __future__ import annotations

from abc import ABC, abstractmethod

from orderflow.domain.model.order import Order


class OrderStore(ABC):

    @abstractmethod
    def append(self, order: Order) -> None:
        """Add a fully-constructed order after all existing ones."""

    @abstractmethod
    def list_all(self) -> list[Order]:
        """Return every order, oldest first."""
