"""Cart assembly: turns what the customer asked for into order items.

This is where a line's unit price gets frozen. The order service takes
the resulting items as they are and never re-derives their prices.
"""

from __future__ import annotations

from orderflow.application.dto import OrderItemSpec
from orderflow.domain.exceptions import EntityNotFoundError, ValidationError
from orderflow.domain.model.order import OrderItem
from orderflow.domain.model.product import Product, find_product
from orderflow.domain.repository.catalog_store import CatalogStore


def build_cart(specs: list[OrderItemSpec], catalog: CatalogStore) -> list[OrderItem]:
    """Resolve product references and build one OrderItem per distinct product.

    Asking for the same product twice adds to the existing line, and
    lines whose quantity ends up at zero or below are dropped. The unit
    price is the product's price at the moment the line is first added.
    """
    products = catalog.list_all()
    lines: dict[str, tuple[Product, int]] = {}

    for spec in specs:
        product = _resolve(products, spec.product_ref)

        if product.id in lines:
            first, qty = lines[product.id]
            lines[product.id] = (first, qty + spec.quantity)
        else:
            lines[product.id] = (product, spec.quantity)

    return [
        OrderItem(product_id=product.id, quantity=qty, price=product.price)
        for product, qty in lines.values()
        if qty > 0
    ]


def _resolve(products: list[Product], ref: str) -> Product:
    """Find a product by exact id, falling back to its SKU.

    SKUs are not guaranteed unique, so a SKU shared by several products
    is rejected rather than guessed at.
    """
    ref = ref.strip()
    product = find_product(products, ref)
    if product is not None:
        return product

    matches = [p for p in products if p.sku.lower() == ref.lower()]
    if not matches:
        raise EntityNotFoundError(f"Product not found: '{ref}'")
    if len(matches) > 1:
        ids = ", ".join(p.id for p in matches)
        raise ValidationError(
            f"SKU '{ref}' matches {len(matches)} products ({ids}); order by product id instead"
        )
    return matches[0]
