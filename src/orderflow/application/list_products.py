"""Application service: List Products use case (query)."""

from __future__ import annotations

from orderflow.application.dto import ProductDTO
from orderflow.domain.repository.catalog_store import CatalogStore


class ListProductsHandler:

    def __init__(self, catalog: CatalogStore) -> None:
        self._catalog = catalog

    def handle(self) -> list[ProductDTO]:
        return [
            ProductDTO(
                id=p.id,
                name=p.name,
                sku=p.sku,
                category=p.category,
                price=str(p.price),
                stock=p.stock,
                low_stock=p.is_low_stock,
            )
            for p in self._catalog.list_all()
        ]
