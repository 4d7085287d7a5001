import locale
import logging

import click

from upvote.infrastructure.cli.account_commands import account_show
from upvote.infrastructure.cli.order_commands import orders_history
from upvote.infrastructure.config import get_settings
from upvote.infrastructure.logging_setup import configure_logging

logger = logging.getLogger(__name__)


def configure_locale() -> None:
    """Use the environment's locale for dates; keep C when it is unavailable."""
    try:
        locale.setlocale(locale.LC_TIME, "")
    except locale.Error as exc:
        logger.debug("Keeping the C locale for dates: %s", exc)


@click.group()
@click.option(
    "--log-level",
    default=None,
    type=click.Choice(["DEBUG", "INFO", "WARNING", "ERROR"], case_sensitive=False),
    help="Override UPVOTE_LOG_LEVEL.",
)
def cli(log_level: str | None) -> None:
    """Upvote dashboard: order history and account balance"""
    configure_logging(log_level or get_settings().log_level)
    configure_locale()


@cli.group()
def orders() -> None:
    """Browse your upvote orders."""


@cli.group()
def account() -> None:
    """Inspect your account."""


# Register subcommands
orders.add_command(orders_history)
account.add_command(account_show)
