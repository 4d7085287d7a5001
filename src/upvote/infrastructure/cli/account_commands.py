"""CLI commands for the signed-in account."""

from __future__ import annotations

import asyncio

import click

from upvote.application.dto import SessionHeaderDTO
from upvote.application.session import DashboardSession
from upvote.application.sign_in import SignInHandler
from upvote.domain.exceptions import DomainException
from upvote.infrastructure.bootstrap import account_repository
from upvote.infrastructure.config import get_settings


def display_header(header: SessionHeaderDTO) -> None:
    """Shared formatting for the user block printed above each page."""
    click.echo(f"{header.username}  ({header.credits})")


async def _show_account() -> SessionHeaderDTO:
    session = DashboardSession()
    try:
        return await SignInHandler(account_repository(get_settings()), session).handle()
    finally:
        session.end()


@click.command("show")
def account_show() -> None:
    """Show the signed-in user and credit balance."""
    try:
        header = asyncio.run(_show_account())
    except DomainException as exc:
        raise click.ClickException(str(exc))

    click.echo(f"User:     {header.username}")
    click.echo(f"Balance:  {header.credits}")
    if header.profile_image:
        click.echo(f"Avatar:   {header.profile_image}")
