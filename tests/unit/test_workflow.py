"""Unit tests for workflow stages and the order draft."""
import pytest
from datetime import datetime, timezone
from decimal import Decimal

from order_service.services.ordering.models import LineItem, OrderStatus, PaymentStatus
from order_service.services.ordering.pricing import OrderTotals
from order_service.services.ordering.stages import WorkflowStage, can_transition
from order_service.services.ordering.workflow import InvalidStageTransition, OrderDraft

FORWARD_PATH = [
    WorkflowStage.VALIDATED,
    WorkflowStage.ACCOUNT_RESOLVED,
    WorkflowStage.PRICED,
    WorkflowStage.PAYMENT_DECIDED,
    WorkflowStage.PERSISTED,
    WorkflowStage.FULFILLED,
]


class TestStageTransitions:
    """Test the allowed stage transitions."""

    def test_forward_path(self):
        draft = OrderDraft(account_id="acc")
        for stage in FORWARD_PATH:
            draft.advance(stage)
        assert draft.stage == WorkflowStage.FULFILLED

    def test_cannot_skip_stage(self):
        draft = OrderDraft(account_id="acc")
        draft.advance(WorkflowStage.VALIDATED)

        with pytest.raises(InvalidStageTransition):
            draft.advance(WorkflowStage.PAYMENT_DECIDED)

    @pytest.mark.parametrize("stage", [WorkflowStage.RECEIVED] + FORWARD_PATH[:-1])
    def test_reject_from_any_open_stage(self, stage):
        assert can_transition(stage, WorkflowStage.REJECTED)

    def test_terminal_stages_are_final(self):
        assert not can_transition(WorkflowStage.FULFILLED, WorkflowStage.REJECTED)
        assert not can_transition(WorkflowStage.REJECTED, WorkflowStage.VALIDATED)

    def test_reject_after_fulfilled_is_noop(self):
        draft = OrderDraft(account_id="acc")
        for stage in FORWARD_PATH:
            draft.advance(stage)

        draft.reject()

        assert draft.stage == WorkflowStage.FULFILLED


class TestOrderDraft:
    """Test values accumulated on the draft."""

    def test_approved_payment_sets_pending(self):
        draft = OrderDraft(account_id="acc")
        now = datetime(2026, 1, 1, tzinfo=timezone.utc)

        draft.record_payment(PaymentStatus.APPROVED, now)

        assert draft.status == OrderStatus.PENDING
        assert draft.payment_status == PaymentStatus.APPROVED
        assert draft.transaction_date == now

    def test_denied_payment_never_pending(self):
        draft = OrderDraft(account_id="acc")

        draft.record_payment(PaymentStatus.DENIED, datetime.now(timezone.utc))

        assert draft.status == OrderStatus.DENIED
        assert draft.payment_status == PaymentStatus.DENIED
        assert draft.transaction_date is None

    def test_to_order_snapshots_items(self):
        draft = OrderDraft(
            account_id="acc",
            items=[LineItem(sku="A", quantity=2, unit_price=Decimal("1.50"))],
        )
        draft.apply_totals(OrderTotals(Decimal("3.00"), Decimal("0.48"), Decimal("3.48")))

        order = draft.to_order()

        assert order.account_id == "acc"
        assert [(d.sku, d.quantity, d.unit_price) for d in order.details] == [
            ("A", 2, Decimal("1.50"))
        ]
        assert order.total_amount_tax == Decimal("3.48")
        assert order.id is None
        assert order.order_id is None
