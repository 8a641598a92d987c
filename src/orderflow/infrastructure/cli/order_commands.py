"""CLI commands for orders."""

from __future__ import annotations

import click

from orderflow.application.cart import build_cart
from orderflow.application.create_order import CreateOrderHandler
from orderflow.application.dto import OrderDTO, OrderItemSpec
from orderflow.application.list_orders import ListOrdersHandler
from orderflow.application.preview_order import PreviewOrderHandler
from orderflow.domain.exceptions import DomainException
from orderflow.domain.model.order import OrderItem
from orderflow.domain.service.stock_validator import StockValidationFailed
from orderflow.infrastructure.bootstrap import Session


def _parse_items(raw: str) -> list[OrderItemSpec]:
    """Parse 'WH-001:3,<product-id>:1' into OrderItemSpec list."""
    specs: list[OrderItemSpec] = []
    for pair in raw.split(","):
        pair = pair.strip()
        if ":" not in pair:
            raise click.BadParameter(
                f"Invalid item format '{pair}'. Expected 'Product:Quantity'."
            )
        ref, qty_str = pair.rsplit(":", 1)
        try:
            qty = int(qty_str)
        except ValueError:
            raise click.BadParameter(
                f"Invalid quantity '{qty_str}' for product '{ref}'."
            )
        specs.append(OrderItemSpec(product_ref=ref.strip(), quantity=qty))
    return specs


def _cart(session: Session, raw: str) -> list[OrderItem]:
    try:
        return build_cart(_parse_items(raw), session.catalog)
    except DomainException as exc:
        raise click.ClickException(str(exc))


@click.command("order-preview")
@click.option("--items", required=True, help="Items as 'Product:Qty,...' (product id or SKU).")
@click.pass_obj
def order_preview(session: Session, items: str) -> None:
    """Check stock and price a cart without placing it."""
    cart = _cart(session, items)
    dto = PreviewOrderHandler(catalog=session.catalog).handle(cart)

    click.echo(f"Total: {dto.total}")
    if dto.valid:
        click.echo("Stock: OK")
    else:
        for error in dto.errors:
            click.echo(f"  ! {error}")


@click.command("order-create")
@click.option("--customer", required=True, help="Customer name.")
@click.option("--items", required=True, help="Items as 'Product:Qty,...' (product id or SKU).")
@click.pass_obj
def order_create(session: Session, customer: str, items: str) -> None:
    """Place a new order (decrements stock)."""
    if not customer.strip():
        raise click.ClickException("Please enter customer name")

    cart = _cart(session, items)
    if not cart:
        raise click.ClickException("Please add at least one item")

    handler = CreateOrderHandler(catalog=session.catalog, orders=session.orders)
    result = handler.handle(customer_name=customer, items=cart)

    if isinstance(result, StockValidationFailed):
        for error in result.errors:
            click.echo(f"  ! {error}", err=True)
        raise click.ClickException("Stock validation failed")

    click.echo(f"Order {result.id} created  (status={result.status.value})")
    click.echo(f"Customer: {result.customer_name}")
    click.echo(f"Total:    {result.total}")


def _display_order(dto: OrderDTO) -> None:
    click.echo(f"Order {dto.id}  (status={dto.status})")
    click.echo(f"Customer: {dto.customer_name}")
    click.echo(f"Created:  {dto.created_at}")
    click.echo(f"  {'Product':<22} {'Qty':>5} {'Price':>10} {'Total':>10}")
    click.echo(f"  {'-'*49}")
    for item in dto.items:
        click.echo(
            f"  {item.product_name:<22} {item.quantity:>5} {item.unit_price:>10} {item.line_total:>10}"
        )
    click.echo(f"  {'-'*49}")
    click.echo(f"  {'Order Total':<29} {dto.total:>20}")


@click.command("order-list")
@click.pass_obj
def order_list(session: Session) -> None:
    """Show recent orders, newest first."""
    orders = ListOrdersHandler(orders=session.orders, catalog=session.catalog).handle()

    if not orders:
        click.echo("No orders yet.")
        return

    for i, dto in enumerate(orders):
        if i:
            click.echo()
        _display_order(dto)
