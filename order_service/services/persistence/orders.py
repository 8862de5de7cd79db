"""Order persistence service."""
import uuid
from datetime import datetime, timezone
from typing import List, Optional

from sqlalchemy import desc, select
from sqlalchemy.ext.asyncio import AsyncSession
from sqlalchemy.orm import selectinload

from order_service.db import models
from order_service.services.collaborators.base import OrderStore
from order_service.services.ordering.models import Order, OrderDetail


def _as_utc(value: Optional[datetime]) -> Optional[datetime]:
    """SQLite drops tzinfo; stored values are always UTC."""
    if value is None or value.tzinfo is not None:
        return value
    return value.replace(tzinfo=timezone.utc)


def _to_domain(row: models.Order) -> Order:
    return Order(
        id=row.id,
        order_id=row.order_id,
        account_id=row.account_id,
        details=[
            OrderDetail(sku=detail.sku, quantity=detail.quantity, unit_price=detail.unit_price)
            for detail in row.details
        ],
        total_amount=row.total_amount,
        total_tax=row.total_tax,
        total_amount_tax=row.total_amount_tax,
        status=row.status,
        payment_status=row.payment_status,
        transaction_date=_as_utc(row.transaction_date),
        created_at=_as_utc(row.created_at),
    )


class OrderPersistenceService(OrderStore):
    """Service for persisting order data."""

    def __init__(self, db: AsyncSession):
        self.db = db

    async def save(self, order: Order) -> Order:
        """Insert a new order with its details. A fresh order id is always generated."""
        row = models.Order(
            order_id=str(uuid.uuid4()),
            account_id=order.account_id,
            total_amount=order.total_amount,
            total_tax=order.total_tax,
            total_amount_tax=order.total_amount_tax,
            status=order.status.value if order.status else None,
            payment_status=order.payment_status.value if order.payment_status else None,
            transaction_date=order.transaction_date,
            details=[
                models.OrderDetail(
                    sku=detail.sku,
                    quantity=detail.quantity,
                    unit_price=detail.unit_price,
                )
                for detail in order.details
            ],
        )
        self.db.add(row)
        await self.db.commit()

        saved = await self._get_row(row.order_id)
        return _to_domain(saved)

    async def get_by_order_id(self, order_id: str) -> Optional[Order]:
        """Get order by order id with details."""
        row = await self._get_row(order_id)
        return _to_domain(row) if row else None

    async def list_all(self) -> List[Order]:
        result = await self.db.execute(
            select(models.Order)
            .options(selectinload(models.Order.details))
            .order_by(desc(models.Order.created_at), desc(models.Order.id))
        )
        return [_to_domain(row) for row in result.scalars().all()]

    async def list_by_account(self, account_id: str) -> List[Order]:
        result = await self.db.execute(
            select(models.Order)
            .where(models.Order.account_id == account_id)
            .options(selectinload(models.Order.details))
            .order_by(desc(models.Order.created_at), desc(models.Order.id))
        )
        return [_to_domain(row) for row in result.scalars().all()]

    async def _get_row(self, order_id: str) -> Optional[models.Order]:
        result = await self.db.execute(
            select(models.Order)
            .where(models.Order.order_id == order_id)
            .options(selectinload(models.Order.details))
            .execution_options(populate_existing=True)
        )
        return result.scalar_one_or_none()
