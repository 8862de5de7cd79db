"""Order pricing."""
from decimal import Decimal, ROUND_HALF_UP
from typing import Iterable, NamedTuple, Optional

from order_service.core.config import settings
from order_service.services.ordering.models import LineItem

CENT = Decimal("0.01")


class OrderTotals(NamedTuple):
    """Computed order totals."""

    total_amount: Decimal
    total_tax: Decimal
    total_amount_tax: Decimal


def _to_cents(value: Decimal) -> Decimal:
    return value.quantize(CENT, rounding=ROUND_HALF_UP)


def calculate_totals(
    items: Iterable[LineItem], tax_rate: Optional[Decimal] = None
) -> OrderTotals:
    """
    Compute subtotal, tax and grand total for a list of line items.

    Items are assumed to be validated already (positive quantities,
    non-negative prices).

    Args:
        items: Line items to price
        tax_rate: Tax rate to apply, defaults to the configured rate

    Returns:
        OrderTotals with amounts rounded to cents
    """
    rate = settings.tax_rate if tax_rate is None else Decimal(str(tax_rate))

    subtotal = sum(
        (Decimal(item.quantity) * Decimal(str(item.unit_price)) for item in items),
        Decimal("0"),
    )
    total_amount = _to_cents(subtotal)
    total_tax = _to_cents(total_amount * rate)
    return OrderTotals(
        total_amount=total_amount,
        total_tax=total_tax,
        total_amount_tax=total_amount + total_tax,
    )
