"""Thin async client for the dashboard REST API."""

from __future__ import annotations

import logging
from typing import Any

import httpx

from upvote.domain.exceptions import FetchError

logger = logging.getLogger(__name__)


class DashboardApiClient:
    """GETs JSON documents from the dashboard API.

    Every transport problem, error status or undecodable body surfaces as
    FetchError.  A caller-supplied ``httpx.AsyncClient`` is used as-is and
    left open; otherwise a short-lived client is created per request.
    """

    def __init__(
        self,
        base_url: str,
        token: str | None = None,
        timeout: float = 10.0,
        client: httpx.AsyncClient | None = None,
    ) -> None:
        self._base_url = base_url.rstrip("/")
        self._timeout = timeout
        self._client = client
        self._headers = {"Accept": "application/json"}
        if token:
            self._headers["Authorization"] = f"Bearer {token}"

    async def get_json(self, path: str) -> Any:
        url = f"{self._base_url}/{path.lstrip('/')}"
        try:
            if self._client is not None:
                response = await self._client.get(url, headers=self._headers)
            else:
                async with httpx.AsyncClient(timeout=self._timeout) as client:
                    response = await client.get(url, headers=self._headers)
            response.raise_for_status()
        except httpx.HTTPError as exc:
            logger.debug("GET %s failed: %s", url, exc)
            raise FetchError(f"Request to {url} failed: {exc}") from exc

        try:
            return response.json()
        except ValueError as exc:
            raise FetchError(f"Response from {url} is not valid JSON") from exc
