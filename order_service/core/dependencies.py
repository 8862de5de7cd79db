"""FastAPI dependencies."""
from functools import lru_cache

from fastapi import Depends
from redis.asyncio import Redis
from sqlalchemy.ext.asyncio import AsyncSession

from order_service.core.config import settings
from order_service.db.database import get_db
from order_service.services.collaborators.customers import HttpAccountResolver
from order_service.services.collaborators.inventory import HttpInventoryUpdater
from order_service.services.collaborators.payments import HttpPaymentAuthorizer
from order_service.services.ordering.orchestrator import OrderService
from order_service.services.persistence.orders import OrderPersistenceService
from order_service.services.shipping.producer import RedisShipmentNotifier


@lru_cache
def get_redis() -> Redis:
    """Get the shared Redis client."""
    return Redis.from_url(settings.redis_url, decode_responses=True)


def get_order_service(
    db: AsyncSession = Depends(get_db),
    redis: Redis = Depends(get_redis),
) -> OrderService:
    """Get an order service wired to the configured collaborators."""
    timeout = settings.http_timeout_seconds
    return OrderService(
        account_resolver=HttpAccountResolver(settings.customer_service_url, timeout),
        payment_authorizer=HttpPaymentAuthorizer(settings.payment_service_url, timeout),
        order_store=OrderPersistenceService(db),
        inventory_updater=HttpInventoryUpdater(settings.inventory_service_url, timeout),
        shipment_notifier=RedisShipmentNotifier(redis, queue=settings.shipment_queue),
        tax_rate=settings.tax_rate,
    )
