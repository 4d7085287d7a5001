"""Abstract repository for upvote orders."""

from __future__ import annotations

from abc import ABC, abstractmethod

from upvote.domain.model.order import Order


class OrderRepository(ABC):

    @abstractmethod
    async def fetch_orders(self) -> list[Order]:
        """Return a snapshot of every order of the current user.

        Raises FetchError when the backend cannot be reached or its payload
        is malformed.
        """
