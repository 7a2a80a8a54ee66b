"""Pricing engine shared by the server order flow and the client cart.

The server always recomputes pricing from line items at checkout; any totals
a client might send are ignored.
"""

from collections.abc import Iterable
from dataclasses import dataclass
from decimal import Decimal
from typing import Any

from restaurant_ordering_service.models.common import round_money, to_decimal

TAX_RATE = Decimal("0.10")


@dataclass(frozen=True)
class PricingSummary:
    """Computed prices for a list of line items.

    Attributes:
        subtotal: Sum of price * quantity, rounded to cents
        tax: Subtotal times the tax rate, rounded to cents
        total: Subtotal plus tax, rounded to cents
    """

    subtotal: Decimal
    tax: Decimal
    total: Decimal


def calculate_subtotal(items: Iterable[Any]) -> Decimal:
    """Sum ``price * quantity`` over line items. No rounding is applied.

    Args:
        items: Objects exposing ``price`` and ``quantity`` (OrderItem, CartItem)

    Returns:
        Unrounded subtotal, ``Decimal("0")`` for an empty list
    """
    return sum(
        (to_decimal(item.price) * item.quantity for item in items),
        Decimal("0"),
    )


def calculate_tax(subtotal: Decimal) -> Decimal:
    """Tax at ``TAX_RATE``, rounded half-up to cents."""
    return round_money(to_decimal(subtotal) * TAX_RATE)


def calculate_total(subtotal: Decimal, tax: Decimal) -> Decimal:
    """Subtotal plus tax, rounded half-up to cents."""
    return round_money(to_decimal(subtotal) + to_decimal(tax))


def price_items(items: Iterable[Any]) -> PricingSummary:
    """Compute subtotal, tax and total for a list of line items.

    Args:
        items: Line items exposing ``price`` and ``quantity``

    Returns:
        PricingSummary with all three amounts rounded to cents
    """
    subtotal = calculate_subtotal(items)
    tax = calculate_tax(subtotal)
    return PricingSummary(
        subtotal=round_money(subtotal),
        tax=tax,
        total=calculate_total(subtotal, tax),
    )
