"""Customer service client."""
import logging
from typing import Optional
from urllib.parse import quote

from order_service.services.collaborators.base import AccountResolver
from order_service.services.collaborators.http import HttpServiceClient
from order_service.services.ordering.models import Account

logger = logging.getLogger(__name__)


class HttpAccountResolver(HttpServiceClient, AccountResolver):
    """Resolves accounts through the customer service REST API."""

    async def find_account(self, account_id: str) -> Optional[Account]:
        """
        Fetch an account from the customer service.

        Args:
            account_id: Account identifier

        Returns:
            The account, or None when the customer service answers 404
        """
        async with self._client() as client:
            response = await client.get(f"/api/v1/accounts/{quote(account_id, safe='')}")
            if response.status_code == 404:
                logger.info(f"[CUSTOMER] Account {account_id} not found")
                return None
            response.raise_for_status()
            return Account.model_validate(response.json())
