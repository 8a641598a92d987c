"""CLI commands for the product catalog."""

from __future__ import annotations

import click

from orderflow.application.add_product import AddProductHandler
from orderflow.application.list_products import ListProductsHandler
from orderflow.domain.exceptions import DomainException
from orderflow.infrastructure.bootstrap import Session


@click.command("product-add")
@click.option("--name", required=True, help="Product name.")
@click.option("--price", required=True, help="Price (e.g. 19.99).")
@click.option("--stock", required=True, help="Units in stock.")
@click.option("--sku", required=True, help="SKU (e.g. MS-001).")
@click.option("--category", required=True, help="Category (e.g. Accessories).")
@click.pass_obj
def product_add(
    session: Session, name: str, price: str, stock: str, sku: str, category: str
) -> None:
    """Add a new product to the catalog."""
    handler = AddProductHandler(catalog=session.catalog)

    try:
        product = handler.handle(
            name=name, price=price, stock=stock, sku=sku, category=category
        )
    except DomainException as exc:
        raise click.ClickException(str(exc))

    click.echo(
        f"Product '{product.name}' ({product.sku}) added at {product.price}, id {product.id}"
    )


@click.command("product-list")
@click.pass_obj
def product_list(session: Session) -> None:
    """List all products in the catalog."""
    products = ListProductsHandler(catalog=session.catalog).handle()

    if not products:
        click.echo("No products yet.")
        return

    click.echo(f"{'ID':<36} {'SKU':<10} {'Name':<22} {'Category':<14} {'Price':>10} {'Stock':>7}")
    click.echo("-" * 104)
    for p in products:
        flag = "  low" if p.low_stock else ""
        click.echo(
            f"{p.id:<36} {p.sku:<10} {p.name:<22} {p.category:<14} {p.price:>10} {p.stock:>7}{flag}"
        )
