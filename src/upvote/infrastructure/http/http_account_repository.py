"""AccountRepository backed by the dashboard API (``GET /me``)."""

from __future__ import annotations

from upvote.domain.model.account import UserProfile
from upvote.domain.repository.account_repository import AccountRepository
from upvote.infrastructure.http.api_client import DashboardApiClient
from upvote.infrastructure.persistence.order_mapper import profile_from_raw


class HttpAccountRepository(AccountRepository):

    def __init__(self, api: DashboardApiClient) -> None:
        self._api = api

    async def fetch_profile(self) -> UserProfile:
        return profile_from_raw(await self._api.get_json("/me"))
