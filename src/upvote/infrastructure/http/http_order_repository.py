"""OrderRepository backed by the dashboard API (``GET /orders``)."""

from __future__ import annotations

import logging

from upvote.domain.model.order import Order
from upvote.domain.repository.order_repository import OrderRepository
from upvote.infrastructure.http.api_client import DashboardApiClient
from upvote.infrastructure.persistence.order_mapper import orders_from_payload

logger = logging.getLogger(__name__)


class HttpOrderRepository(OrderRepository):

    def __init__(self, api: DashboardApiClient) -> None:
        self._api = api

    async def fetch_orders(self) -> list[Order]:
        payload = await self._api.get_json("/orders")
        orders = orders_from_payload(payload)
        logger.debug("Fetched %d orders", len(orders))
        return orders
