"""Collaborator interfaces used by the order service."""
from abc import ABC, abstractmethod
from decimal import Decimal
from typing import List, Optional, Sequence

from order_service.services.ordering.models import (
    Account,
    LineItem,
    Order,
    PaymentResult,
)


class AccountResolver(ABC):
    """Looks up customer accounts."""

    @abstractmethod
    async def find_account(self, account_id: str) -> Optional[Account]:
        """Get an account by id, or None if it does not exist."""
        pass


class PaymentAuthorizer(ABC):
    """Authorizes charges against an account's payment instrument."""

    @abstractmethod
    async def authorize(self, account: Account, amount: Decimal) -> PaymentResult:
        """Authorize ``amount`` for ``account``."""
        pass


class OrderStore(ABC):
    """Persists and retrieves orders."""

    @abstractmethod
    async def save(self, order: Order) -> Order:
        """Persist an order and return it with generated identifiers."""
        pass

    @abstractmethod
    async def get_by_order_id(self, order_id: str) -> Optional[Order]:
        """Get an order by its public order id."""
        pass

    @abstractmethod
    async def list_all(self) -> List[Order]:
        """Get all orders, newest first."""
        pass

    @abstractmethod
    async def list_by_account(self, account_id: str) -> List[Order]:
        """Get the orders placed by an account, newest first."""
        pass


class InventoryUpdater(ABC):
    """Decrements stock for purchased items."""

    @abstractmethod
    async def decrement(self, items: Sequence[LineItem]) -> None:
        """Decrement stock for every line item."""
        pass


class ShipmentNotifier(ABC):
    """Publishes shipment requests for approved orders."""

    @abstractmethod
    async def publish(self, order_id: str, account: Account) -> None:
        """Publish a shipment request for ``order_id``."""
        pass
