"""Order creation workflow."""
import logging
from datetime import datetime, timezone
from decimal import Decimal
from typing import Callable, List, Optional

from order_service.services.collaborators.base import (
    AccountResolver,
    InventoryUpdater,
    OrderStore,
    PaymentAuthorizer,
    ShipmentNotifier,
)
from order_service.services.ordering.exceptions import (
    AccountNotFound,
    IncorrectRequest,
    OrderNotFound,
    OrderServiceError,
    PaymentNotAccepted,
)
from order_service.services.ordering.models import Order, OrderRequest, PaymentStatus
from order_service.services.ordering.pricing import calculate_totals
from order_service.services.ordering.stages import WorkflowStage
from order_service.services.ordering.workflow import OrderDraft

logger = logging.getLogger(__name__)


def _utcnow() -> datetime:
    return datetime.now(timezone.utc)


class OrderService:
    """Creates orders by driving the account, payment, storage, inventory and shipping collaborators."""

    def __init__(
        self,
        account_resolver: AccountResolver,
        payment_authorizer: PaymentAuthorizer,
        order_store: OrderStore,
        inventory_updater: InventoryUpdater,
        shipment_notifier: ShipmentNotifier,
        tax_rate: Optional[Decimal] = None,
        clock: Callable[[], datetime] = _utcnow,
    ):
        self.account_resolver = account_resolver
        self.payment_authorizer = payment_authorizer
        self.order_store = order_store
        self.inventory_updater = inventory_updater
        self.shipment_notifier = shipment_notifier
        self.tax_rate = tax_rate
        self.clock = clock

    async def create_order(self, request: OrderRequest) -> Order:
        """
        Create an order for an account.

        The steps run strictly in order: validate, resolve account, price,
        authorize payment, persist, then update inventory and request
        shipment for approved payments only. The order is persisted once
        whatever the payment outcome.

        Args:
            request: Account id and requested line items

        Returns:
            The persisted order with status PENDING

        Raises:
            IncorrectRequest: The request has no line items
            AccountNotFound: The account does not exist
            PaymentNotAccepted: Payment was denied, after the order was stored
        """
        draft = OrderDraft(account_id=request.account_id)
        logger.info(f"[ORDER CREATE] Request received - account: {request.account_id}")

        try:
            if not request.items:
                raise IncorrectRequest()
            draft.items = list(request.items)
            draft.advance(WorkflowStage.VALIDATED)

            account = await self.account_resolver.find_account(request.account_id)
            if account is None:
                raise AccountNotFound()
            draft.account = account
            draft.advance(WorkflowStage.ACCOUNT_RESOLVED)

            draft.apply_totals(calculate_totals(draft.items, self.tax_rate))
            draft.advance(WorkflowStage.PRICED)

            payment = await self.payment_authorizer.authorize(account, draft.total_amount_tax)
            draft.record_payment(payment.status, self.clock())
            draft.advance(WorkflowStage.PAYMENT_DECIDED)

            order = await self.order_store.save(draft.to_order())
            draft.advance(WorkflowStage.PERSISTED)
            logger.info(
                f"[ORDER CREATE] Order {order.order_id} stored - "
                f"total: {order.total_amount_tax}, payment: {order.payment_status}"
            )

            if payment.status == PaymentStatus.DENIED:
                raise PaymentNotAccepted()

            # No compensation here: failures below leave the order and charge in place.
            await self.inventory_updater.decrement(draft.items)
            await self.shipment_notifier.publish(order.order_id, account)
            draft.advance(WorkflowStage.FULFILLED)

        except OrderServiceError as e:
            draft.reject()
            logger.warning(
                f"[ORDER CREATE] Rejected - account: {request.account_id}, "
                f"{type(e).__name__}: {e.message}"
            )
            raise
        except Exception as e:
            last_stage = draft.stage
            draft.reject()
            logger.error(
                f"[ORDER CREATE] Failed after stage {last_stage} - "
                f"account: {request.account_id}, Error: {type(e).__name__}: {str(e)}",
                exc_info=True,
            )
            raise

        logger.info(f"[ORDER CREATE] Order {order.order_id} fulfilled")
        return order

    async def get_order(self, order_id: str) -> Order:
        """Get an order by its order id or raise OrderNotFound."""
        order = await self.order_store.get_by_order_id(order_id)
        if order is None:
            raise OrderNotFound()
        return order

    async def list_orders(self) -> List[Order]:
        return await self.order_store.list_all()

    async def list_orders_by_account(self, account_id: str) -> List[Order]:
        return await self.order_store.list_by_account(account_id)
