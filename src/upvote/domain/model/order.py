"""Upvote order record, the core of the domain.

Orders are owned by the backend.  The dashboard only observes them: an
Order is a frozen snapshot of the server-side record, and status changes
are seen by fetching again, never by mutating a local copy.
"""

from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime
from enum import Enum

from upvote.domain.exceptions import ValidationError
from upvote.domain.model.value_objects import Credits, VoteCount


class OrderStatus(Enum):
    SCHEDULED = "scheduled"
    IN_PROGRESS = "in-progress"
    COMPLETED = "completed"
    CANCELLED = "cancelled"
    UNKNOWN = "unknown"

    @classmethod
    def _missing_(cls, value: object) -> OrderStatus:
        # Backend values this client does not know yet.
        return cls.UNKNOWN

    @property
    def is_terminal(self) -> bool:
        return self in (OrderStatus.COMPLETED, OrderStatus.CANCELLED)

    @property
    def is_active(self) -> bool:
        return self in (OrderStatus.SCHEDULED, OrderStatus.IN_PROGRESS)

    def can_transition_to(self, target: OrderStatus) -> bool:
        """Whether the backend may move an order from this status to *target*."""
        return target in _TRANSITIONS[self]


_TRANSITIONS: dict[OrderStatus, frozenset[OrderStatus]] = {
    OrderStatus.SCHEDULED: frozenset(
        {OrderStatus.IN_PROGRESS, OrderStatus.CANCELLED}
    ),
    OrderStatus.IN_PROGRESS: frozenset(
        {OrderStatus.COMPLETED, OrderStatus.CANCELLED}
    ),
    OrderStatus.COMPLETED: frozenset(),
    OrderStatus.CANCELLED: frozenset(),
    OrderStatus.UNKNOWN: frozenset(),
}


class OrderType(Enum):
    ONE_TIME = "one-time"
    RECURRING = "recurring"
    UNKNOWN = "unknown"

    @classmethod
    def _missing_(cls, value: object) -> OrderType:
        return cls.UNKNOWN


class Frequency(Enum):
    DAILY = "daily"
    WEEKLY = "weekly"
    MONTHLY = "monthly"
    UNKNOWN = "unknown"

    @classmethod
    def _missing_(cls, value: object) -> Frequency:
        return cls.UNKNOWN


@dataclass(frozen=True)
class Order:
    """A purchase of upvotes against a target URL.

    Use ``Order.create()`` to build an order that is guaranteed to satisfy
    every invariant.  The plain constructor is kept permissive so the wire
    mapper can reconstitute slightly inconsistent backend records and still
    display them; ``invariant_violations()`` reports what is wrong with such
    a record.
    """

    id: str
    type: OrderType
    target_url: str
    quantity: VoteCount
    status: OrderStatus
    created_at: datetime | None
    cost: Credits
    completed_at: datetime | None = None
    next_run_at: datetime | None = None
    frequency: Frequency | None = None

    # --- Factory --------------------------------------------------------------

    @staticmethod
    def create(
        id: str,
        type: OrderType,
        target_url: str,
        quantity: VoteCount,
        status: OrderStatus,
        created_at: datetime,
        cost: Credits,
        completed_at: datetime | None = None,
        next_run_at: datetime | None = None,
        frequency: Frequency | None = None,
    ) -> Order:
        """Build an order, enforcing all invariants."""
        if not id or not id.strip():
            raise ValidationError("Order id is required")
        if not target_url or not target_url.strip():
            raise ValidationError("Target URL is required")

        order = Order(
            id=id.strip(),
            type=type,
            target_url=target_url.strip(),
            quantity=quantity,
            status=status,
            created_at=created_at,
            cost=cost,
            completed_at=completed_at,
            next_run_at=next_run_at,
            frequency=frequency,
        )

        violations = order.invariant_violations()
        if violations:
            raise ValidationError(f"Order {order.id}: {violations[0]}")
        return order

    # --- Classification -------------------------------------------------------

    @property
    def is_recurring(self) -> bool:
        return self.type == OrderType.RECURRING

    @property
    def is_active(self) -> bool:
        return self.status.is_active

    def invariant_violations(self) -> list[str]:
        """Describe every invariant this record breaks (empty when valid)."""
        problems: list[str] = []

        if self.created_at is None:
            problems.append("created_at is missing")

        completed = self.status == OrderStatus.COMPLETED
        if completed and self.completed_at is None:
            problems.append("completed order has no completed_at")
        if not completed and self.completed_at is not None:
            problems.append(
                f"completed_at set on an order in {self.status.value} status"
            )

        if self.is_recurring and self.frequency is None:
            problems.append("recurring order has no frequency")
        if not self.is_recurring and self.frequency is not None:
            problems.append("frequency set on a non-recurring order")

        if self.next_run_at is not None:
            if not self.is_recurring:
                problems.append("next_run_at set on a non-recurring order")
            elif not self.is_active:
                problems.append(
                    f"next_run_at set on an order in {self.status.value} status"
                )

        return problems
