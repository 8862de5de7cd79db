"""Order workflow exceptions.

Raised by the order service when a request cannot be fulfilled. The API
layer translates each kind into its own HTTP response.
"""
from typing import Optional


class OrderServiceError(Exception):
    """Base class for typed order workflow failures."""

    code = "order_error"
    message = "order could not be processed"

    def __init__(self, message: Optional[str] = None):
        self.message = message or self.message
        super().__init__(self.message)


class IncorrectRequest(OrderServiceError):
    """The order request has no line items."""

    code = "incorrect_request"
    message = "empty item order not allowed"


class AccountNotFound(OrderServiceError):
    """The account referenced by the request does not exist."""

    code = "account_not_found"
    message = "account not found"


class PaymentNotAccepted(OrderServiceError):
    """Payment was denied. The order has already been stored as denied."""

    code = "payment_not_accepted"
    message = "the credit card added to your account was not accepted, please verify"


class OrderNotFound(OrderServiceError):
    """No order matches the requested order id."""

    code = "order_not_found"
    message = "order not found"
