"""User-facing notifications raised by application services.

The presentation layer supplies the concrete Notifier (toast, terminal
message, ...).  Notifications are fire-and-forget and never block.
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from dataclasses import dataclass
from enum import Enum


class NotificationLevel(Enum):
    INFO = "info"
    ERROR = "error"


@dataclass(frozen=True)
class Notification:
    title: str
    message: str
    level: NotificationLevel = NotificationLevel.INFO


class Notifier(ABC):

    @abstractmethod
    def notify(self, notification: Notification) -> None:
        """Show *notification* to the user."""
