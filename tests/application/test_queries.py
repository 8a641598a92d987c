"""Tests for the read-side use cases: preview, listings and stats."""

from decimal import Decimal

from orderflow.application.create_order import CreateOrderHandler
from orderflow.application.list_orders import ListOrdersHandler
from orderflow.application.list_products import ListProductsHandler
from orderflow.application.preview_order import PreviewOrderHandler
from orderflow.application.show_stats import ShowStatsHandler
from orderflow.domain.model.order import Order, OrderItem
from orderflow.domain.model.value_objects import Money
from orderflow.infrastructure.persistence.in_memory_order_store import (
    InMemoryOrderStore,
)
from tests.factories import item, make_catalog, new_product


def _setup():
    catalog, products = make_catalog(
        new_product("Widget", price="15.00", stock=100, sku="WG-001"),
        new_product("Gadget", price="25.00", stock=3, sku="GD-001"),
    )
    orders = InMemoryOrderStore()
    return catalog, orders, products


class TestPreviewOrder:

    def test_valid_cart(self):
        catalog, _, (widget, gadget) = _setup()
        dto = PreviewOrderHandler(catalog).handle([item(widget, 2), item(gadget, 1)])
        assert dto.valid
        assert dto.errors == []
        assert dto.total == "$55.00"
        assert dto.total_amount == Decimal("55.00")

    def test_invalid_cart_still_priced(self):
        catalog, _, (_, gadget) = _setup()
        dto = PreviewOrderHandler(catalog).handle([item(gadget, 4)])
        assert not dto.valid
        assert dto.errors == ["Gadget: Only 3 in stock, requested 4"]
        assert dto.total == "$100.00"
        assert dto.total_amount == Decimal("100.00")

    def test_preview_does_not_mutate(self):
        catalog, _, (widget, _) = _setup()
        before = catalog.list_all()
        PreviewOrderHandler(catalog).handle([item(widget, 5)])
        assert catalog.list_all() == before


class TestListProducts:

    def test_lists_with_low_stock_flag(self):
        catalog, _, _ = _setup()
        dtos = ListProductsHandler(catalog).handle()
        assert [(d.name, d.price, d.low_stock) for d in dtos] == [
            ("Widget", "$15.00", False),
            ("Gadget", "$25.00", True),
        ]


class TestListOrders:

    def test_newest_first(self):
        catalog, orders, (widget, _) = _setup()
        create = CreateOrderHandler(catalog, orders)
        create.handle("Alice", [item(widget, 1)])
        create.handle("Bob", [item(widget, 1)])

        dtos = ListOrdersHandler(orders, catalog).handle()
        assert [d.customer_name for d in dtos] == ["Bob", "Alice"]

    def test_lines_use_frozen_price(self):
        catalog, orders, (widget, _) = _setup()
        line = OrderItem(product_id=widget.id, quantity=2, price=Money.of("12.00"))
        CreateOrderHandler(catalog, orders).handle("Alice", [line])

        (dto,) = ListOrdersHandler(orders, catalog).handle()
        (line_dto,) = dto.items
        assert line_dto.product_name == "Widget"
        assert line_dto.unit_price == "$12.00"
        assert line_dto.line_total == "$24.00"
        assert dto.total == "$30.00"
        assert dto.status == "pending"

    def test_dangling_product_shown_as_unknown(self):
        catalog, orders, _ = _setup()
        ghost = OrderItem(product_id="gone", quantity=1, price=Money.of("5"))
        orders.append(Order.create("Alice", [ghost], Money.of("5")))

        (dto,) = ListOrdersHandler(orders, catalog).handle()
        assert dto.items[0].product_name == "Unknown"


class TestShowStats:

    def test_empty(self):
        catalog, orders, _ = _setup()
        stats = ShowStatsHandler(catalog, orders).handle()
        assert stats.total_products == 2
        assert stats.total_orders == 0
        assert stats.total_revenue == "$0.00"
        assert stats.low_stock_items == 1

    def test_counts_revenue_and_low_stock(self):
        catalog, orders, (widget, gadget) = _setup()
        create = CreateOrderHandler(catalog, orders)
        create.handle("Alice", [item(widget, 95)])
        create.handle("Bob", [item(gadget, 1)])

        stats = ShowStatsHandler(catalog, orders).handle()
        assert stats.total_orders == 2
        assert stats.total_revenue == "$1450.00"
        assert stats.low_stock_items == 2
