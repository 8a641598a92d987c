"""Abstract store for the product catalog.

Defined in the domain layer so the domain never depends on
infrastructure. The in-memory implementation lives in the
infrastructure layer.
"""

from __future__ import annotations

from abc import ABC, abstractmethod

from orderflow.domain.model.product import NewProduct, Product


class CatalogStore(ABC):

    @abstractmethod
    def add_product(self, new_product: NewProduct) -> Product:
        """Create a product with a freshly generated id and append it."""

    @abstractmethod
    def decrement_stock(self, product_id: str, quantity: int) -> None:
        """Reduce a product's stock; a no-op for an unknown id."""

    @abstractmethod
    def get_by_id(self, product_id: str) -> Product | None:
        """Return a snapshot of a product, or None if not found."""

    @abstractmethod
    def list_all(self) -> list[Product]:
        """Return a snapshot of every product, in insertion order."""
