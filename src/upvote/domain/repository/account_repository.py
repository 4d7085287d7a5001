"""Abstract repository for the signed-in user's profile."""

from __future__ import annotations

from abc import ABC, abstractmethod

from upvote.domain.model.account import UserProfile


class AccountRepository(ABC):

    @abstractmethod
    async def fetch_profile(self) -> UserProfile:
        """Return the profile of the authenticated user."""
