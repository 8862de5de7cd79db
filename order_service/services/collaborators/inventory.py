"""Inventory service client."""
import logging
from typing import Sequence

from order_service.services.collaborators.base import InventoryUpdater
from order_service.services.collaborators.http import HttpServiceClient
from order_service.services.ordering.models import LineItem

logger = logging.getLogger(__name__)


class HttpInventoryUpdater(HttpServiceClient, InventoryUpdater):
    """Decrements stock through the inventory service REST API."""

    async def decrement(self, items: Sequence[LineItem]) -> None:
        payload = [{"sku": item.sku, "quantity": item.quantity} for item in items]
        async with self._client() as client:
            response = await client.put("/api/v1/inventory/decrement", json=payload)
            response.raise_for_status()
        logger.info(f"[INVENTORY] Decremented stock for {len(payload)} items")
