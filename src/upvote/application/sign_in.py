"""Application service: Sign In use case.

Asks the authentication backend for the current user's profile and starts
the dashboard session with it.  Fetch failures propagate to the caller.
"""

from __future__ import annotations

from upvote.application.dto import SessionHeaderDTO
from upvote.application.session import DashboardSession
from upvote.domain.repository.account_repository import AccountRepository


class SignInHandler:

    def __init__(
        self,
        account_repo: AccountRepository,
        session: DashboardSession,
    ) -> None:
        self._account_repo = account_repo
        self._session = session

    async def handle(self) -> SessionHeaderDTO:
        profile = await self._account_repo.fetch_profile()
        self._session.start(profile)
        return self._session.header()
