"""Application service: Order History view.

Holds the last fetched snapshot together with the user's filter, sort and
page selection, and derives the visible page on demand.  Loading is the
only asynchronous step; everything else runs the pure view pipeline.
"""

from __future__ import annotations

import logging
from dataclasses import replace
from enum import Enum

from upvote.application.notifier import Notification, NotificationLevel, Notifier
from upvote.application.view_pipeline import (
    PAGE_SIZE,
    OrderPage,
    SortKey,
    StatusFilter,
    TypeFilter,
    ViewCriteria,
    build_page,
)
from upvote.domain.exceptions import FetchError, ValidationError
from upvote.domain.model.order import Order
from upvote.domain.repository.order_repository import OrderRepository

logger = logging.getLogger(__name__)

LOAD_FAILED = Notification(
    title="Error",
    message="Failed to load orders history.",
    level=NotificationLevel.ERROR,
)


class PageResetPolicy(Enum):
    """What a filter or sort change does to the current page index."""

    KEEP = "keep"  # the page index survives, even past the new last page
    RESET = "reset"  # jump back to page 1


class OrderHistoryView:

    def __init__(
        self,
        order_repo: OrderRepository,
        notifier: Notifier,
        page_size: int = PAGE_SIZE,
        page_reset_policy: PageResetPolicy = PageResetPolicy.KEEP,
    ) -> None:
        if page_size <= 0:
            raise ValidationError("Page size must be positive")
        self._order_repo = order_repo
        self._notifier = notifier
        self._page_size = page_size
        self._page_reset_policy = page_reset_policy

        self._orders: tuple[Order, ...] = ()
        self._criteria = ViewCriteria()
        self._page = 1
        self._loading = False
        self._closed = False

    # --- State ----------------------------------------------------------------

    @property
    def orders(self) -> tuple[Order, ...]:
        """The snapshot from the last successful load."""
        return self._orders

    @property
    def criteria(self) -> ViewCriteria:
        return self._criteria

    @property
    def page(self) -> int:
        return self._page

    @property
    def loading(self) -> bool:
        return self._loading

    @property
    def closed(self) -> bool:
        return self._closed

    # --- Loading --------------------------------------------------------------

    async def load(self) -> None:
        """Fetch a fresh snapshot.

        On failure the previous snapshot stays in place and the user gets a
        single error notification.  A result arriving after ``close()`` is
        dropped.
        """
        if self._closed:
            return

        self._loading = True
        try:
            orders = await self._order_repo.fetch_orders()
        except FetchError:
            if self._closed:
                logger.debug("Discarding failed fetch for a closed view")
                return
            logger.exception("Failed to fetch orders")
            self._notifier.notify(LOAD_FAILED)
            return
        finally:
            self._loading = False

        if self._closed:
            logger.debug("Discarding %d orders fetched for a closed view", len(orders))
            return
        self._orders = tuple(orders)
        logger.info("Loaded %d orders", len(self._orders))

    def close(self) -> None:
        self._closed = True

    # --- Intents --------------------------------------------------------------

    def set_search_term(self, term: str) -> None:
        self._update_criteria(search_term=term)

    def set_status_filter(self, status_filter: StatusFilter) -> None:
        self._update_criteria(status_filter=status_filter)

    def set_type_filter(self, type_filter: TypeFilter) -> None:
        self._update_criteria(type_filter=type_filter)

    def set_sort_by(self, sort_by: SortKey) -> None:
        self._update_criteria(sort_by=sort_by)

    def set_page(self, page: int) -> None:
        if isinstance(page, bool) or not isinstance(page, int) or page < 1:
            raise ValidationError(f"Page must be a positive integer, got {page!r}")
        self._page = page

    def next_page(self) -> None:
        last = max(self.current_page().total_pages, 1)
        self._page = min(self._page + 1, last)

    def previous_page(self) -> None:
        self._page = max(self._page - 1, 1)

    # --- Derived view ---------------------------------------------------------

    def current_page(self) -> OrderPage:
        return build_page(self._orders, self._criteria, self._page, self._page_size)

    # --- Internal helpers -----------------------------------------------------

    def _update_criteria(self, **changes) -> None:
        self._criteria = replace(self._criteria, **changes)
        if self._page_reset_policy is PageResetPolicy.RESET:
            self._page = 1
