"""Application service: Add Product use case.

The catalog store accepts whatever it is given, so the checks the
add-product form performs live here, before the store is called.
"""

from __future__ import annotations

from orderflow.domain.exceptions import ValidationError
from orderflow.domain.model.product import NewProduct, Product
from orderflow.domain.model.value_objects import Money
from orderflow.domain.repository.catalog_store import CatalogStore


class AddProductHandler:

    def __init__(self, catalog: CatalogStore) -> None:
        self._catalog = catalog

    def handle(
        self,
        name: str,
        price: str,
        stock: str | int,
        sku: str,
        category: str,
    ) -> Product:
        """Add a new product to the catalog."""
        fields = {"name": name, "price": price, "stock": stock, "sku": sku, "category": category}
        missing = [key for key, value in fields.items() if not str(value).strip()]
        if missing:
            raise ValidationError(f"Please fill in all fields (missing: {', '.join(missing)})")

        money = Money.of(price)
        if money.is_negative:
            raise ValidationError("Product price cannot be negative")

        units = self._parse_stock(stock)

        return self._catalog.add_product(
            NewProduct(
                name=name.strip(),
                price=money,
                stock=units,
                sku=sku.strip(),
                category=category.strip(),
            )
        )

    @staticmethod
    def _parse_stock(raw: str | int) -> int:
        try:
            units = int(raw)
        except ValueError as exc:
            raise ValidationError(f"Invalid stock quantity: {raw!r}") from exc
        if units < 0:
            raise ValidationError("Stock cannot be negative")
        return units
