"""Shipment request producer."""
import logging

from redis.asyncio import Redis

from order_service.services.collaborators.base import ShipmentNotifier
from order_service.services.ordering.models import Account, ShipmentOrderRequest

logger = logging.getLogger(__name__)

CONTENT_TYPE = "application/json"


def build_shipment_request(order_id: str, account: Account) -> ShipmentOrderRequest:
    """Build the shipment event payload for an order."""
    customer = account.customer
    return ShipmentOrderRequest(
        order_id=order_id,
        shipping_receiver_name=f"{customer.last_name}, {customer.first_name}",
        receipt_email=customer.email,
        shipping_address=account.shipping_address,
    )


class RedisShipmentNotifier(ShipmentNotifier):
    """Publishes shipment requests to a Redis stream."""

    def __init__(self, redis: Redis, queue: str = "INBOUND_SHIPMENT_ORDER"):
        self.redis = redis
        self.queue = queue

    async def publish(self, order_id: str, account: Account) -> None:
        """
        Publish a shipment request.

        The message body is the JSON document; its content type travels
        as a separate stream field.
        """
        shipment_request = build_shipment_request(order_id, account)
        body = shipment_request.model_dump_json(by_alias=True)

        await self.redis.xadd(
            self.queue,
            {"content_type": CONTENT_TYPE, "body": body},
        )
        logger.debug(f"[SHIPMENT] Sent to {self.queue}: {body}")
