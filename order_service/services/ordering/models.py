"""Order domain models."""
from datetime import datetime
from decimal import Decimal
from enum import Enum
from typing import List, Optional

from pydantic import BaseModel, ConfigDict, Field, model_validator
from pydantic.alias_generators import to_camel


class OrderStatus(str, Enum):
    """Order lifecycle status."""

    PENDING = "PENDING"  # Payment approved, awaiting shipment
    DENIED = "DENIED"  # Payment rejected, terminal

    def __str__(self) -> str:
        return self.value


class PaymentStatus(str, Enum):
    """Payment decision returned by the payment service."""

    APPROVED = "APPROVED"
    DENIED = "DENIED"

    def __str__(self) -> str:
        return self.value


class CamelModel(BaseModel):
    """Base model serialized with camelCase keys on the wire."""

    model_config = ConfigDict(
        alias_generator=to_camel,
        populate_by_name=True,
        from_attributes=True,
    )


# Money columns are NUMERIC(12, 2); the pre-tax cap leaves room for tax.
MAX_QUANTITY = 10_000
MAX_ORDER_AMOUNT = Decimal("1000000000.00")


class LineItem(CamelModel):
    """A requested line item."""

    sku: str
    quantity: int = Field(gt=0, le=MAX_QUANTITY)
    unit_price: Decimal = Field(ge=0, max_digits=12, decimal_places=2)


class OrderRequest(CamelModel):
    """Incoming order creation request."""

    account_id: str
    items: Optional[List[LineItem]] = None

    @model_validator(mode="after")
    def check_order_amount(self) -> "OrderRequest":
        """Reject orders whose pre-tax amount would not fit the money columns."""
        if self.items:
            amount = sum(
                (Decimal(item.quantity) * item.unit_price for item in self.items),
                Decimal("0"),
            )
            if amount > MAX_ORDER_AMOUNT:
                raise ValueError(f"order amount must not exceed {MAX_ORDER_AMOUNT}")
        return self


class Customer(CamelModel):
    """Customer contact data attached to an account."""

    first_name: str
    last_name: str
    email: str


class Address(CamelModel):
    """Shipping address."""

    street: str
    city: str
    state: Optional[str] = None
    country: str
    zip_code: str


class PaymentInstrument(CamelModel):
    """Credit card registered on the account."""

    name_on_card: str
    number: str
    expiration_month: str
    expiration_year: str
    ccv: str


class Account(CamelModel):
    """Account record owned by the customer service."""

    id: str
    customer: Customer
    shipping_address: Address
    payment_instrument: Optional[PaymentInstrument] = None
    status: Optional[str] = None


class PaymentResult(CamelModel):
    """Result of a payment authorization."""

    status: PaymentStatus
    account_id: Optional[str] = None
    transaction_id: Optional[str] = None


class OrderDetail(CamelModel):
    """Snapshot of a line item stored with the order."""

    sku: str
    quantity: int
    unit_price: Decimal


class Order(CamelModel):
    """Order as returned by the order store and to API callers."""

    id: Optional[int] = None
    order_id: Optional[str] = None
    account_id: str
    details: List[OrderDetail] = []
    total_amount: Decimal
    total_tax: Decimal
    total_amount_tax: Decimal
    status: Optional[OrderStatus] = None
    payment_status: Optional[PaymentStatus] = None
    transaction_date: Optional[datetime] = None
    created_at: Optional[datetime] = None


class ShipmentOrderRequest(CamelModel):
    """Event payload published for the shipping service."""

    order_id: str
    shipping_receiver_name: str
    receipt_email: str
    shipping_address: Address
