import logging

import click

from orderflow.infrastructure.bootstrap import build_session
from orderflow.infrastructure.cli.order_commands import (
    order_create,
    order_list,
    order_preview,
)
from orderflow.infrastructure.cli.product_commands import product_add, product_list
from orderflow.infrastructure.cli.stats_commands import stats

LOG_LEVELS = ["DEBUG", "INFO", "WARNING", "ERROR"]


@click.group(chain=True, context_settings={"auto_envvar_prefix": "ORDERFLOW"})
@click.option("--no-seed", is_flag=True, default=False, help="Start with an empty catalog.")
@click.option(
    "--log-level",
    type=click.Choice(LOG_LEVELS, case_sensitive=False),
    default="WARNING",
    show_default=True,
    help="Logging verbosity.",
)
@click.pass_context
def cli(ctx: click.Context, no_seed: bool, log_level: str) -> None:
    """OrderFlow: order management system.

    Commands can be chained; they all share one in-memory session that
    lives for this invocation only.
    """
    logging.basicConfig(
        level=log_level.upper(),
        format="%(levelname)s %(name)s: %(message)s",
    )
    ctx.obj = build_session(seed=not no_seed)


# Register subcommands
cli.add_command(product_add)
cli.add_command(product_list)
cli.add_command(order_preview)
cli.add_command(order_create)
cli.add_command(order_list)
cli.add_command(stats)
