"""Order history view pipeline: snapshot -> filter -> sort -> page.

Every function here is pure.  The snapshot is never mutated; each stage
returns a new list.  Recomputing the whole chain on every intent is fine
for a single user's order history.  Larger snapshots would want indices
by status and type instead of a linear scan.
"""

from __future__ import annotations

import math
from collections.abc import Sequence
from dataclasses import dataclass
from enum import Enum

from upvote.domain.exceptions import ValidationError
from upvote.domain.model.order import Order, OrderStatus, OrderType

PAGE_SIZE = 10


class _Choice(Enum):
    """An option of a filter/sort selector, parsed from its wire string."""

    @classmethod
    def parse(cls, value: str):
        try:
            return cls(value.strip().lower())
        except ValueError:
            choices = ", ".join(member.value for member in cls)
            raise ValidationError(
                f"Invalid {cls.__name__} '{value}'. Expected one of: {choices}"
            ) from None

    @classmethod
    def choices(cls) -> list[str]:
        return [member.value for member in cls]


class StatusFilter(_Choice):
    ALL = "all"
    SCHEDULED = "scheduled"
    IN_PROGRESS = "in-progress"
    COMPLETED = "completed"
    CANCELLED = "cancelled"

    def matches(self, status: OrderStatus) -> bool:
        return self is StatusFilter.ALL or self.value == status.value


class TypeFilter(_Choice):
    ALL = "all"
    ONE_TIME = "one-time"
    RECURRING = "recurring"

    def matches(self, order_type: OrderType) -> bool:
        return self is TypeFilter.ALL or self.value == order_type.value


class SortKey(_Choice):
    NEWEST = "newest"
    OLDEST = "oldest"
    HIGHEST_COST = "highest-cost"
    LOWEST_COST = "lowest-cost"


@dataclass(frozen=True)
class ViewCriteria:
    search_term: str = ""
    status_filter: StatusFilter = StatusFilter.ALL
    type_filter: TypeFilter = TypeFilter.ALL
    sort_by: SortKey = SortKey.NEWEST


@dataclass(frozen=True)
class OrderPage:
    """One page of the derived view plus the totals the pager needs."""

    rows: list[Order]
    total_filtered: int
    total_pages: int
    page: int
    page_size: int = PAGE_SIZE

    @property
    def first_index(self) -> int:
        """1-based position of the first visible row (0 when nothing shows)."""
        if not self.rows:
            return 0
        return (self.page - 1) * self.page_size + 1

    @property
    def last_index(self) -> int:
        if not self.rows:
            return 0
        return self.first_index + len(self.rows) - 1

    @property
    def page_numbers(self) -> list[int]:
        """Pages a pager may offer; an empty result still has page 1."""
        return list(range(1, max(self.total_pages, 1) + 1))

    def range_label(self) -> str:
        return (
            f"Showing {self.first_index}-{self.last_index} "
            f"of {self.total_filtered} orders"
        )


# ---------------------------------------------------------------------------
# Stages
# ---------------------------------------------------------------------------


def matches_search(order: Order, search_term: str) -> bool:
    if not search_term:
        return True
    needle = search_term.lower()
    return needle in order.id.lower() or needle in order.target_url.lower()


def filter_orders(orders: Sequence[Order], criteria: ViewCriteria) -> list[Order]:
    return [
        order
        for order in orders
        if matches_search(order, criteria.search_term)
        and criteria.status_filter.matches(order.status)
        and criteria.type_filter.matches(order.type)
    ]


def sort_orders(orders: Sequence[Order], sort_by: SortKey) -> list[Order]:
    """Stable sort; equal keys keep their incoming relative order."""
    if sort_by in (SortKey.HIGHEST_COST, SortKey.LOWEST_COST):
        return sorted(
            orders,
            key=lambda o: o.cost.amount,
            reverse=sort_by is SortKey.HIGHEST_COST,
        )

    # Undated records go last in both date orderings.
    dated = [o for o in orders if o.created_at is not None]
    undated = [o for o in orders if o.created_at is None]
    dated.sort(key=lambda o: o.created_at, reverse=sort_by is SortKey.NEWEST)
    return dated + undated


def total_pages(count: int, page_size: int = PAGE_SIZE) -> int:
    return math.ceil(count / page_size)


def paginate(
    orders: Sequence[Order], page: int, page_size: int = PAGE_SIZE
) -> list[Order]:
    """Rows of 1-based *page*; pages outside the range yield no rows."""
    if page < 1:
        return []
    start = (page - 1) * page_size
    return list(orders[start : start + page_size])


def build_page(
    orders: Sequence[Order],
    criteria: ViewCriteria,
    page: int,
    page_size: int = PAGE_SIZE,
) -> OrderPage:
    if page_size <= 0:
        raise ValidationError("Page size must be positive")
    ordered = sort_orders(filter_orders(orders, criteria), criteria.sort_by)
    return OrderPage(
        rows=paginate(ordered, page, page_size),
        total_filtered=len(ordered),
        total_pages=total_pages(len(ordered), page_size),
        page=page,
        page_size=page_size,
    )
