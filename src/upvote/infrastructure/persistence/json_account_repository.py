"""JSON-file-backed implementation of AccountRepository."""

from __future__ import annotations

import asyncio
from pathlib import Path

from upvote.domain.model.account import UserProfile
from upvote.domain.repository.account_repository import AccountRepository
from upvote.infrastructure.persistence.json_file import read_json
from upvote.infrastructure.persistence.order_mapper import profile_from_raw


class JsonAccountRepository(AccountRepository):

    def __init__(self, file_path: Path) -> None:
        self._file_path = file_path

    async def fetch_profile(self) -> UserProfile:
        payload = await asyncio.to_thread(read_json, self._file_path)
        return profile_from_raw(payload)
