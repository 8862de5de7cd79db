"""Shared test fixtures and configuration."""
import os
import uuid
from decimal import Decimal
from unittest.mock import AsyncMock

import pytest
from fastapi.testclient import TestClient
from sqlalchemy.ext.asyncio import create_async_engine, AsyncSession, async_sessionmaker
from sqlalchemy.pool import StaticPool

# Set test environment variables before importing app
os.environ.setdefault("DATABASE_URL", "sqlite+aiosqlite:///:memory:")
os.environ.setdefault("REDIS_URL", "redis://localhost:6379/15")

from order_service.main import app
from order_service.core.dependencies import get_order_service
from order_service.db.database import get_db
from order_service.db.models import Base
from order_service.services.collaborators.base import (
    AccountResolver,
    InventoryUpdater,
    OrderStore,
    PaymentAuthorizer,
    ShipmentNotifier,
)
from order_service.services.ordering.models import (
    Account,
    LineItem,
    OrderRequest,
    PaymentResult,
    PaymentStatus,
)
from order_service.services.ordering.orchestrator import OrderService


# Test database URL (in-memory SQLite)
TEST_DATABASE_URL = "sqlite+aiosqlite:///:memory:"

ACCOUNT_ID = "12345678"


def make_account(account_id: str = ACCOUNT_ID) -> Account:
    """Build a complete account as returned by the customer service."""
    return Account.model_validate(
        {
            "id": account_id,
            "customer": {
                "firstName": "Ada",
                "lastName": "Lovelace",
                "email": "ada@example.com",
            },
            "shippingAddress": {
                "street": "12 St James's Square",
                "city": "London",
                "state": "LDN",
                "country": "UK",
                "zipCode": "SW1Y 4JH",
            },
            "paymentInstrument": {
                "nameOnCard": "Ada Lovelace",
                "number": "4111111111111111",
                "expirationMonth": "12",
                "expirationYear": "2030",
                "ccv": "123",
            },
            "status": "ACTIVE",
        }
    )


def make_order_request(account_id: str = ACCOUNT_ID) -> OrderRequest:
    """Two line items totaling 1005.00 before tax."""
    return OrderRequest(
        account_id=account_id,
        items=[
            LineItem(sku="SHIRT-BLK-M", quantity=2, unit_price=Decimal("400.00")),
            LineItem(sku="MUG-WHT", quantity=1, unit_price=Decimal("205.00")),
        ],
    )


@pytest.fixture
def account():
    return make_account()


@pytest.fixture
def order_request():
    return make_order_request()


@pytest.fixture
def call_log():
    """Names of collaborator calls in the order they happened."""
    return []


@pytest.fixture
def account_resolver(call_log, account):
    """Account resolver that finds the test account."""
    resolver = AsyncMock(spec=AccountResolver)

    async def _find_account(account_id):
        call_log.append("find_account")
        return account

    resolver.find_account.side_effect = _find_account
    return resolver


@pytest.fixture
def payment_authorizer(call_log):
    """Payment authorizer approving every charge."""
    authorizer = AsyncMock(spec=PaymentAuthorizer)

    async def _authorize(acct, amount):
        call_log.append("authorize")
        return PaymentResult(status=PaymentStatus.APPROVED, account_id=acct.id)

    authorizer.authorize.side_effect = _authorize
    return authorizer


@pytest.fixture
def order_store(call_log):
    """Order store that assigns fresh identifiers on save."""
    store = AsyncMock(spec=OrderStore)
    counter = {"next_id": 1}

    async def _save(order):
        call_log.append("save")
        saved = order.model_copy(
            update={"id": counter["next_id"], "order_id": str(uuid.uuid4())}
        )
        counter["next_id"] += 1
        return saved

    store.save.side_effect = _save
    store.get_by_order_id.return_value = None
    store.list_all.return_value = []
    store.list_by_account.return_value = []
    return store


@pytest.fixture
def inventory_updater(call_log):
    updater = AsyncMock(spec=InventoryUpdater)

    async def _decrement(items):
        call_log.append("decrement")

    updater.decrement.side_effect = _decrement
    return updater


@pytest.fixture
def shipment_notifier(call_log):
    notifier = AsyncMock(spec=ShipmentNotifier)

    async def _publish(order_id, acct):
        call_log.append("publish")

    notifier.publish.side_effect = _publish
    return notifier


@pytest.fixture
def order_service(
    account_resolver,
    payment_authorizer,
    order_store,
    inventory_updater,
    shipment_notifier,
):
    """Order service wired to collaborator doubles."""
    return OrderService(
        account_resolver=account_resolver,
        payment_authorizer=payment_authorizer,
        order_store=order_store,
        inventory_updater=inventory_updater,
        shipment_notifier=shipment_notifier,
        tax_rate=Decimal("0.16"),
    )


@pytest.fixture
async def test_db_engine():
    """Create test database engine."""
    engine = create_async_engine(
        TEST_DATABASE_URL,
        connect_args={"check_same_thread": False},
        poolclass=StaticPool,
    )

    # Create all tables
    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.create_all)

    yield engine

    # Drop all tables
    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.drop_all)

    await engine.dispose()


@pytest.fixture
async def test_db(test_db_engine):
    """Create test database session."""
    async_session = async_sessionmaker(
        test_db_engine,
        class_=AsyncSession,
        expire_on_commit=False,
    )

    async with async_session() as session:
        yield session


@pytest.fixture
def stub_db():
    """Session double for endpoints that only ping the database."""
    session = AsyncMock(spec=AsyncSession)
    session.execute.return_value = None
    return session


@pytest.fixture
def test_client(order_service, stub_db):
    """Create FastAPI test client with overrides."""

    async def _override_get_db():
        yield stub_db

    app.dependency_overrides[get_order_service] = lambda: order_service
    app.dependency_overrides[get_db] = _override_get_db

    client = TestClient(app)

    yield client

    # Clear overrides
    app.dependency_overrides.clear()
