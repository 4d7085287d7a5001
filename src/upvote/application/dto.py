"""Data Transfer Objects: plain containers that cross layer boundaries.

DTOs carry display-ready data from the application layer to the
presentation layer without exposing domain internals.
"""

from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime

from upvote.domain.model.order import Order, OrderStatus

PLACEHOLDER = "—"


@dataclass(frozen=True)
class StatusBadge:
    label: str
    style: str
    icon: str | None = None


_BADGES: dict[OrderStatus, StatusBadge] = {
    OrderStatus.COMPLETED: StatusBadge("Completed", "green", "check"),
    OrderStatus.IN_PROGRESS: StatusBadge("In-progress", "blue", "clock"),
    # Terminal palettes have no purple; magenta is the nearest click colour.
    OrderStatus.SCHEDULED: StatusBadge("Scheduled", "magenta", "clock"),
    OrderStatus.CANCELLED: StatusBadge("Cancelled", "red", "alert"),
}
_NEUTRAL_BADGE = StatusBadge("Unknown", "bright_black")


@dataclass(frozen=True)
class OrderRowDTO:
    """Output: a single row of the order history table."""

    id: str
    type: str
    target_url: str
    upvotes: int
    status: StatusBadge
    created_at: str
    completed_at: str
    next_run_at: str
    frequency: str
    cost: str  # formatted, e.g. "5.00 credits"


@dataclass(frozen=True)
class SessionHeaderDTO:
    """Output: the signed-in user block shown above every page."""

    username: str
    credits: str
    profile_image: str | None


def badge_for(status: OrderStatus) -> StatusBadge:
    return _BADGES.get(status, _NEUTRAL_BADGE)


def format_timestamp(value: datetime | None) -> str:
    """Local, locale-aware long form; missing values use the placeholder."""
    if value is None:
        return PLACEHOLDER
    try:
        return value.astimezone().strftime("%c")
    except (ValueError, OverflowError, OSError):
        return PLACEHOLDER


def to_row(order: Order) -> OrderRowDTO:
    return OrderRowDTO(
        id=order.id,
        type=order.type.value,
        target_url=order.target_url,
        upvotes=order.quantity.value,
        status=badge_for(order.status),
        created_at=format_timestamp(order.created_at),
        completed_at=format_timestamp(order.completed_at),
        next_run_at=format_timestamp(order.next_run_at),
        frequency=order.frequency.value if order.frequency else PLACEHOLDER,
        cost=str(order.cost),
    )
