"""Client-side checkout form checks.

These run before an order is submitted so the customer sees every problem
with the form at once. The server only checks that contact fields are
present; the email and phone formats are enforced here and nowhere else.
"""

import re
from typing import Any

from restaurant_ordering_service.models.order_models import OrderType

EMAIL_PATTERN = re.compile(r"^[^\s@]+@[^\s@]+\.[^\s@]+$")
PHONE_PATTERN = re.compile(r"^[\d\s\-().+]{7,}$")


def is_valid_email(email: str) -> bool:
    """Whether ``email`` looks like ``name@domain.tld``."""
    return EMAIL_PATTERN.match(email) is not None


def is_valid_phone(phone: str) -> bool:
    """Whether ``phone`` has at least 7 digits, spaces or ``-().+`` characters."""
    return PHONE_PATTERN.match(phone) is not None


def _text(payload: dict[str, Any], field: str) -> str:
    value = payload.get(field)
    return value.strip() if isinstance(value, str) else ""


def validate_checkout(payload: dict[str, Any]) -> dict[str, str]:
    """Check a checkout payload the way the checkout form does.

    Args:
        payload: Order body in wire format (camelCase keys)

    Returns:
        Field name to message for every failed check, empty when the form is valid
    """
    errors: dict[str, str] = {}

    if len(_text(payload, "customerName")) < 2:
        errors["customerName"] = "Name must be at least 2 characters"

    if not is_valid_email(_text(payload, "email")):
        errors["email"] = "Please enter a valid email address"

    if not is_valid_phone(_text(payload, "phone")):
        errors["phone"] = "Please enter a valid phone number"

    if payload.get("orderType") == OrderType.DELIVERY.value and not _text(payload, "address"):
        errors["address"] = "Delivery address is required"

    if not payload.get("items"):
        errors["items"] = "Your cart is empty"

    return errors
