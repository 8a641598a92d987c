"""CLI command for the dashboard figures."""

from __future__ import annotations

import click

from orderflow.application.show_stats import ShowStatsHandler
from orderflow.infrastructure.bootstrap import Session


@click.command("stats")
@click.pass_obj
def stats(session: Session) -> None:
    """Show catalog and order totals."""
    dto = ShowStatsHandler(catalog=session.catalog, orders=session.orders).handle()

    click.echo(f"{'Total Products':<18} {dto.total_products:>12}")
    click.echo(f"{'Total Orders':<18} {dto.total_orders:>12}")
    click.echo(f"{'Total Revenue':<18} {dto.total_revenue:>12}")
    click.echo(f"{'Low Stock Items':<18} {dto.low_stock_items:>12}")
