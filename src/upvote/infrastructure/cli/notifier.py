"""Notifier that prints to the terminal."""

from __future__ import annotations

import click

from upvote.application.notifier import Notification, NotificationLevel, Notifier


class ClickNotifier(Notifier):

    def notify(self, notification: Notification) -> None:
        color = "red" if notification.level is NotificationLevel.ERROR else None
        click.secho(
            f"{notification.title}: {notification.message}", fg=color, err=True
        )
