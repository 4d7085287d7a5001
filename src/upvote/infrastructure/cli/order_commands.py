"""CLI commands for upvote orders."""

from __future__ import annotations

import asyncio

import click

from upvote.application.dto import OrderRowDTO, SessionHeaderDTO, to_row
from upvote.application.session import DashboardSession
from upvote.application.sign_in import SignInHandler
from upvote.application.view_pipeline import (
    OrderPage,
    SortKey,
    StatusFilter,
    TypeFilter,
)
from upvote.domain.exceptions import DomainException
from upvote.infrastructure.bootstrap import account_repository, order_history_view
from upvote.infrastructure.cli.account_commands import display_header
from upvote.infrastructure.cli.notifier import ClickNotifier
from upvote.infrastructure.config import get_settings

URL_WIDTH = 40


async def _load_history(
    search: str,
    status: StatusFilter,
    order_type: TypeFilter,
    sort_by: SortKey,
    page: int,
) -> tuple[SessionHeaderDTO, OrderPage]:
    settings = get_settings()
    session = DashboardSession()
    view = order_history_view(settings, ClickNotifier())
    try:
        header = await SignInHandler(account_repository(settings), session).handle()
        await view.load()

        view.set_search_term(search)
        view.set_status_filter(status)
        view.set_type_filter(order_type)
        view.set_sort_by(sort_by)

        # Never go past the last page the pager would offer.
        last = max(view.current_page().total_pages, 1)
        view.set_page(min(page, last))
        return header, view.current_page()
    finally:
        view.close()
        session.end()


def _truncate(text: str, width: int) -> str:
    return text if len(text) <= width else text[: width - 1] + "…"


def _display_rows(rows: list[OrderRowDTO]) -> None:
    click.echo(
        f"  {'Order ID':<12} {'Type':<10} {'Reddit Post':<{URL_WIDTH}} "
        f"{'Upvotes':>7} {'Status':<12} {'Created':<26} {'Completed':<26} {'Cost':>14}"
    )
    click.echo(f"  {'-' * (URL_WIDTH + 115)}")
    for row in rows:
        status = click.style(f"{row.status.label:<12}", fg=row.status.style)
        click.echo(
            f"  {row.id:<12} {row.type:<10} {_truncate(row.target_url, URL_WIDTH):<{URL_WIDTH}} "
            f"{row.upvotes:>7} {status} {row.created_at:<26} {row.completed_at:<26} {row.cost:>14}"
        )


def _display_pager(page: OrderPage) -> None:
    if page.total_pages <= 1:
        return
    numbers = " ".join(
        f"[{n}]" if n == page.page else str(n) for n in page.page_numbers
    )
    click.echo()
    click.echo(f"  Page {page.page} of {page.total_pages}:  {numbers}")


@click.command("history")
@click.option("--search", default="", help="Match against order ID or Reddit URL.")
@click.option(
    "--status",
    type=click.Choice(StatusFilter.choices()),
    default=StatusFilter.ALL.value,
    show_default=True,
    help="Filter by order status.",
)
@click.option(
    "--type",
    "order_type",
    type=click.Choice(TypeFilter.choices()),
    default=TypeFilter.ALL.value,
    show_default=True,
    help="Filter by order type.",
)
@click.option(
    "--sort",
    "sort_by",
    type=click.Choice(SortKey.choices()),
    default=SortKey.NEWEST.value,
    show_default=True,
    help="Sort order.",
)
@click.option("--page", type=click.IntRange(min=1), default=1, show_default=True)
def orders_history(
    search: str, status: str, order_type: str, sort_by: str, page: int
) -> None:
    """Show your order history, one page of orders at a time."""
    try:
        header, result = asyncio.run(
            _load_history(
                search,
                StatusFilter.parse(status),
                TypeFilter.parse(order_type),
                SortKey.parse(sort_by),
                page,
            )
        )
    except DomainException as exc:
        raise click.ClickException(str(exc))

    display_header(header)
    click.echo()
    click.echo(result.range_label())

    if not result.rows:
        click.echo("No orders found matching your filters.")
        return

    _display_rows([to_row(order) for order in result.rows])
    _display_pager(result)
