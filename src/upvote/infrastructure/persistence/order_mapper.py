"""Mapping between backend JSON records and domain objects.

Shared by the HTTP and JSON-file repositories.  Records are camelCase as
served by the dashboard API.  A payload that is not a list, or a record
that cannot be identified, makes the whole payload malformed (FetchError).
A record with an unusable vote count or cost is skipped with a warning.
Problems confined to a display field are repaired or tolerated and logged.
"""

from __future__ import annotations

import logging
from datetime import datetime, timezone
from typing import Any

from upvote.domain.exceptions import FetchError, ValidationError
from upvote.domain.model.account import UserProfile
from upvote.domain.model.order import Frequency, Order, OrderStatus, OrderType
from upvote.domain.model.value_objects import Credits, VoteCount

logger = logging.getLogger(__name__)


def parse_timestamp(value: Any) -> datetime | None:
    """ISO-8601 string -> aware datetime; anything unparseable -> None."""
    if value is None or value == "":
        return None
    if not isinstance(value, str):
        return None
    text = value.strip()
    if text.endswith(("Z", "z")):
        text = text[:-1] + "+00:00"
    try:
        parsed = datetime.fromisoformat(text)
    except ValueError:
        return None
    if parsed.tzinfo is None:
        parsed = parsed.replace(tzinfo=timezone.utc)
    return parsed


def orders_from_payload(payload: Any) -> list[Order]:
    if not isinstance(payload, list):
        raise FetchError(
            f"Malformed orders payload: expected a list, got {type(payload).__name__}"
        )
    orders: list[Order] = []
    for raw in payload:
        try:
            orders.append(order_from_raw(raw))
        except ValidationError as exc:
            logger.warning("Skipping order record: %s", exc)
    return orders


def order_from_raw(raw: Any) -> Order:
    """Map one record.

    Raises FetchError when the record cannot be identified and
    ValidationError when its vote count or cost is unusable.
    """
    if not isinstance(raw, dict):
        raise FetchError(f"Malformed order record: {raw!r}")

    order_id = raw.get("id")
    if order_id is None or str(order_id).strip() == "":
        raise FetchError("Malformed order record: missing id")
    order_id = str(order_id).strip()

    try:
        quantity = VoteCount(raw.get("upvotes", raw.get("quantity")))
        cost = Credits.of(raw.get("cost"))
    except ValidationError as exc:
        raise ValidationError(f"Order {order_id}: {exc}") from exc

    order_type = OrderType(raw.get("type"))
    status = OrderStatus(raw.get("status"))
    target_url = raw.get("redditUrl", raw.get("targetUrl")) or ""

    created_at = _timestamp(order_id, raw, "createdAt")
    completed_at = _timestamp(order_id, raw, "completedAt")
    next_run_at = _timestamp(order_id, raw, "nextRunAt")
    frequency = Frequency(raw["frequency"]) if raw.get("frequency") else None

    if completed_at is not None and status != OrderStatus.COMPLETED:
        logger.warning(
            "Order %s: dropping completedAt on a %s order", order_id, status.value
        )
        completed_at = None

    if order_type != OrderType.RECURRING:
        if frequency is not None or next_run_at is not None:
            logger.warning(
                "Order %s: dropping schedule fields on a %s order",
                order_id,
                order_type.value,
            )
        frequency = None
        next_run_at = None
    elif next_run_at is not None and not status.is_active:
        logger.warning(
            "Order %s: dropping nextRunAt on a %s order", order_id, status.value
        )
        next_run_at = None

    order = Order(
        id=order_id,
        type=order_type,
        target_url=str(target_url),
        quantity=quantity,
        status=status,
        created_at=created_at,
        cost=cost,
        completed_at=completed_at,
        next_run_at=next_run_at,
        frequency=frequency,
    )

    for problem in order.invariant_violations():
        logger.warning("Order %s: %s", order_id, problem)
    if status == OrderStatus.UNKNOWN:
        logger.warning("Order %s: unrecognised status %r", order_id, raw.get("status"))
    return order


def profile_from_raw(raw: Any) -> UserProfile:
    if not isinstance(raw, dict):
        raise FetchError(f"Malformed profile payload: {raw!r}")
    try:
        return UserProfile(
            username=str(raw.get("username") or ""),
            credits=Credits.of(raw.get("credits")),
            profile_image=raw.get("profileImage"),
        )
    except ValidationError as exc:
        raise FetchError(f"Malformed profile payload: {exc}") from exc


def _timestamp(order_id: str, raw: dict, key: str) -> datetime | None:
    value = raw.get(key)
    parsed = parse_timestamp(value)
    if parsed is None and value not in (None, ""):
        logger.warning("Order %s: unparseable %s %r", order_id, key, value)
    return parsed
