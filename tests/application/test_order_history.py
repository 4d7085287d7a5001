"""Integration tests for the OrderHistoryView use case."""

import asyncio

import pytest

from upvote.application.notifier import NotificationLevel
from upvote.application.order_history import OrderHistoryView, PageResetPolicy
from upvote.application.view_pipeline import SortKey, StatusFilter, TypeFilter
from upvote.domain.exceptions import FetchError, ValidationError
from upvote.domain.model.order import OrderStatus
from tests.fakes import (
    FakeOrderRepository,
    GatedOrderRepository,
    RecordingNotifier,
    make_order,
    numbered_orders,
)


def _setup(orders=None, error=None, **kwargs):
    repo = FakeOrderRepository(orders, error)
    notifier = RecordingNotifier()
    view = OrderHistoryView(repo, notifier, **kwargs)
    return view, repo, notifier


class TestLoad:

    @pytest.mark.asyncio
    async def test_load_replaces_snapshot(self):
        view, repo, notifier = _setup(numbered_orders(3))

        await view.load()

        assert len(view.orders) == 3
        assert view.loading is False
        assert notifier.notifications == []
        assert repo.calls == 1

    @pytest.mark.asyncio
    async def test_failure_keeps_previous_snapshot(self):
        view, repo, notifier = _setup(numbered_orders(3))
        await view.load()
        before = view.orders

        repo.error = FetchError("connection refused")
        await view.load()

        assert view.orders == before
        assert view.loading is False
        assert len(notifier.notifications) == 1
        note = notifier.notifications[0]
        assert note.title == "Error"
        assert note.message == "Failed to load orders history."
        assert note.level is NotificationLevel.ERROR

    @pytest.mark.asyncio
    async def test_failure_on_first_load_leaves_empty_view(self):
        view, _, notifier = _setup(error=FetchError("boom"))

        await view.load()

        assert view.orders == ()
        assert view.loading is False
        assert len(notifier.notifications) == 1
        assert view.current_page().rows == []

    @pytest.mark.asyncio
    async def test_loading_flag_is_set_while_fetching(self):
        repo = GatedOrderRepository(numbered_orders(2))
        view = OrderHistoryView(repo, RecordingNotifier())

        task = asyncio.create_task(view.load())
        await asyncio.sleep(0)
        assert view.loading is True

        repo.release.set()
        await task
        assert view.loading is False
        assert len(view.orders) == 2

    @pytest.mark.asyncio
    async def test_result_arriving_after_close_is_discarded(self):
        repo = GatedOrderRepository(numbered_orders(2))
        notifier = RecordingNotifier()
        view = OrderHistoryView(repo, notifier)

        task = asyncio.create_task(view.load())
        await asyncio.sleep(0)
        view.close()
        repo.release.set()
        await task

        assert view.orders == ()
        assert view.loading is False

    @pytest.mark.asyncio
    async def test_failure_after_close_is_not_notified(self):
        repo = GatedOrderRepository(error=FetchError("late"))
        notifier = RecordingNotifier()
        view = OrderHistoryView(repo, notifier)

        task = asyncio.create_task(view.load())
        await asyncio.sleep(0)
        view.close()
        repo.release.set()
        await task

        assert notifier.notifications == []

    @pytest.mark.asyncio
    async def test_closed_view_does_not_fetch(self):
        view, repo, _ = _setup(numbered_orders(1))
        view.close()

        await view.load()

        assert repo.calls == 0


class TestIntents:

    @pytest.mark.asyncio
    async def test_filters_and_sort_drive_the_page(self):
        orders = [
            make_order(id="A1", status=OrderStatus.COMPLETED, cost="5"),
            make_order(id="A2", status=OrderStatus.SCHEDULED, cost="3"),
            make_order(id="B1", status=OrderStatus.COMPLETED, cost="9"),
        ]
        view, _, _ = _setup(orders)
        await view.load()

        view.set_status_filter(StatusFilter.COMPLETED)
        view.set_sort_by(SortKey.HIGHEST_COST)
        assert [o.id for o in view.current_page().rows] == ["B1", "A1"]

        view.set_search_term("a")
        assert [o.id for o in view.current_page().rows] == ["A1"]

        view.set_type_filter(TypeFilter.RECURRING)
        assert view.current_page().total_filtered == 0

    @pytest.mark.asyncio
    async def test_page_beyond_last_returns_empty_rows(self):
        view, _, _ = _setup(numbered_orders(25))
        await view.load()

        view.set_page(4)
        page = view.current_page()

        assert page.rows == []
        assert page.total_pages == 3

    @pytest.mark.parametrize("bad", [0, -1, "2", True])
    def test_set_page_rejects_non_positive_integers(self, bad):
        view, _, _ = _setup()
        with pytest.raises(ValidationError, match="positive integer"):
            view.set_page(bad)

    @pytest.mark.asyncio
    async def test_next_and_previous_are_clamped(self):
        view, _, _ = _setup(numbered_orders(25))
        await view.load()

        view.previous_page()
        assert view.page == 1
        for _ in range(5):
            view.next_page()
        assert view.page == 3

    def test_next_page_on_empty_view_stays_on_first(self):
        view, _, _ = _setup()
        view.next_page()
        assert view.page == 1


class TestPageResetPolicy:

    @pytest.mark.asyncio
    async def test_keep_leaves_page_untouched(self):
        view, _, _ = _setup(numbered_orders(25))
        await view.load()
        view.set_page(3)

        view.set_search_term("ORD-00")

        assert view.page == 3
        assert view.current_page().rows == []

    @pytest.mark.asyncio
    async def test_reset_returns_to_first_page(self):
        view, _, _ = _setup(
            numbered_orders(25), page_reset_policy=PageResetPolicy.RESET
        )
        await view.load()
        view.set_page(3)

        view.set_sort_by(SortKey.OLDEST)

        assert view.page == 1
        assert len(view.current_page().rows) == 10

    def test_invalid_page_size_rejected(self):
        with pytest.raises(ValidationError, match="Page size"):
            _setup(page_size=0)
