"""JSON-file-backed implementation of OrderRepository.

Serves a snapshot exported from the dashboard API, which makes the CLI
usable offline.  The file holds a JSON array of order records.
"""

from __future__ import annotations

import asyncio
import logging
from pathlib import Path

from upvote.domain.model.order import Order
from upvote.domain.repository.order_repository import OrderRepository
from upvote.infrastructure.persistence.json_file import read_json
from upvote.infrastructure.persistence.order_mapper import orders_from_payload

logger = logging.getLogger(__name__)


class JsonOrderRepository(OrderRepository):

    def __init__(self, file_path: Path) -> None:
        self._file_path = file_path

    async def fetch_orders(self) -> list[Order]:
        payload = await asyncio.to_thread(read_json, self._file_path)
        orders = orders_from_payload(payload)
        logger.debug("Read %d orders from %s", len(orders), self._file_path)
        return orders
