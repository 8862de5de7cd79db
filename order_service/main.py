"""Main FastAPI application."""
from fastapi import FastAPI
from contextlib import asynccontextmanager

from order_service.core.dependencies import get_redis
from order_service.core.logging import setup_logging
from order_service.db.database import engine, init_db
from order_service.api import health, orders
from order_service.services.ordering.exceptions import OrderServiceError


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Application lifespan events."""
    # Startup
    setup_logging()
    await init_db()
    yield
    # Shutdown
    await get_redis().aclose()
    await engine.dispose()


app = FastAPI(
    title="Order Service",
    description="Order creation workflow: payment, persistence, inventory and shipment requests",
    version="0.1.0",
    lifespan=lifespan,
)

app.include_router(health.router, tags=["health"])
app.include_router(orders.router, tags=["orders"])
app.add_exception_handler(OrderServiceError, orders.order_error_handler)
