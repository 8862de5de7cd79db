"""Per-request order draft carried through the workflow stages."""
import logging
from datetime import datetime
from decimal import Decimal
from typing import List, Optional

from pydantic import BaseModel

from order_service.services.ordering.models import (
    Account,
    LineItem,
    Order,
    OrderDetail,
    OrderStatus,
    PaymentStatus,
)
from order_service.services.ordering.pricing import OrderTotals
from order_service.services.ordering.stages import WorkflowStage, can_transition

logger = logging.getLogger(__name__)


class InvalidStageTransition(RuntimeError):
    """Raised when the workflow tries to skip or revisit a stage."""


class OrderDraft(BaseModel):
    """Order under construction for a single create request."""

    account_id: str
    stage: WorkflowStage = WorkflowStage.RECEIVED
    items: List[LineItem] = []
    account: Optional[Account] = None
    total_amount: Optional[Decimal] = None
    total_tax: Optional[Decimal] = None
    total_amount_tax: Optional[Decimal] = None
    status: Optional[OrderStatus] = None
    payment_status: Optional[PaymentStatus] = None
    transaction_date: Optional[datetime] = None

    def advance(self, target: WorkflowStage) -> None:
        """Move to ``target`` or raise if the transition is not allowed."""
        if not can_transition(self.stage, target):
            raise InvalidStageTransition(
                f"Cannot move order draft from {self.stage} to {target}"
            )
        logger.debug(
            f"[STAGE TRANSITION] account={self.account_id}: {self.stage} -> {target}"
        )
        self.stage = target

    def reject(self) -> None:
        """Mark the draft as rejected unless it already reached a terminal stage."""
        if not self.stage.is_terminal:
            self.advance(WorkflowStage.REJECTED)

    def apply_totals(self, totals: OrderTotals) -> None:
        self.total_amount = totals.total_amount
        self.total_tax = totals.total_tax
        self.total_amount_tax = totals.total_amount_tax

    def record_payment(self, payment_status: PaymentStatus, decided_at: datetime) -> None:
        """Copy the payment decision and derive the order status from it."""
        self.payment_status = payment_status
        if payment_status == PaymentStatus.APPROVED:
            self.status = OrderStatus.PENDING
            self.transaction_date = decided_at
        else:
            self.status = OrderStatus.DENIED

    def to_order(self) -> Order:
        """Build the order value handed to the order store."""
        return Order(
            account_id=self.account_id,
            details=[
                OrderDetail(sku=item.sku, quantity=item.quantity, unit_price=item.unit_price)
                for item in self.items
            ],
            total_amount=self.total_amount,
            total_tax=self.total_tax,
            total_amount_tax=self.total_amount_tax,
            status=self.status,
            payment_status=self.payment_status,
            transaction_date=self.transaction_date,
        )
