"""Composition root: wires concrete implementations to domain interfaces.

This is the only place in the codebase that knows about *all* layers.
Every other module depends only on abstractions.
"""

from __future__ import annotations

from upvote.application.notifier import Notifier
from upvote.application.order_history import OrderHistoryView
from upvote.domain.repository.account_repository import AccountRepository
from upvote.domain.repository.order_repository import OrderRepository
from upvote.infrastructure.config import Settings
from upvote.infrastructure.http.api_client import DashboardApiClient
from upvote.infrastructure.http.http_account_repository import HttpAccountRepository
from upvote.infrastructure.http.http_order_repository import HttpOrderRepository
from upvote.infrastructure.persistence.json_account_repository import (
    JsonAccountRepository,
)
from upvote.infrastructure.persistence.json_order_repository import (
    JsonOrderRepository,
)


def _api_client(settings: Settings) -> DashboardApiClient | None:
    if not settings.api_base_url:
        return None
    return DashboardApiClient(
        base_url=settings.api_base_url,
        token=settings.api_token,
        timeout=settings.request_timeout,
    )


def order_repository(settings: Settings) -> OrderRepository:
    api = _api_client(settings)
    if api is not None:
        return HttpOrderRepository(api)
    return JsonOrderRepository(settings.data_dir / "orders.json")


def account_repository(settings: Settings) -> AccountRepository:
    api = _api_client(settings)
    if api is not None:
        return HttpAccountRepository(api)
    return JsonAccountRepository(settings.data_dir / "account.json")


def order_history_view(settings: Settings, notifier: Notifier) -> OrderHistoryView:
    return OrderHistoryView(
        order_repo=order_repository(settings),
        notifier=notifier,
        page_size=settings.page_size,
        page_reset_policy=settings.page_reset_policy,
    )
