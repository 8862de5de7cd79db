"""Payment service client."""
import logging
from decimal import Decimal

from order_service.services.collaborators.base import PaymentAuthorizer
from order_service.services.collaborators.http import HttpServiceClient
from order_service.services.ordering.models import Account, PaymentResult

logger = logging.getLogger(__name__)


class HttpPaymentAuthorizer(HttpServiceClient, PaymentAuthorizer):
    """Authorizes payments through the payment service REST API."""

    async def authorize(self, account: Account, amount: Decimal) -> PaymentResult:
        payload = {
            "accountId": account.id,
            "amount": str(amount),
            "paymentInstrument": (
                account.payment_instrument.model_dump(mode="json", by_alias=True)
                if account.payment_instrument
                else None
            ),
        }
        async with self._client() as client:
            response = await client.post("/api/v1/payments/authorize", json=payload)
            response.raise_for_status()
            result = PaymentResult.model_validate(response.json())

        logger.info(
            f"[PAYMENT] Authorization for account {account.id} amount {amount}: {result.status}"
        )
        return result
