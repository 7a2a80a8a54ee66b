"""Shared field types and helpers for the ordering models.

Money is held as Decimal and rounded half-up to cents. On the wire every
model uses camelCase field names (``menuItemId``, ``customerName``) while
Python code uses snake_case attributes.
"""

import math
from decimal import ROUND_HALF_UP, Decimal
from typing import Annotated, Any

from pydantic import (
    AfterValidator,
    BaseModel,
    BeforeValidator,
    ConfigDict,
    Field,
    PlainSerializer,
)
from pydantic import ValidationError as PydanticValidationError
from pydantic.alias_generators import to_camel
from pydantic_core import PydanticCustomError

CENTS = Decimal("0.01")

# Upper bounds keep every amount well inside the default decimal precision
MAX_PRICE = Decimal("10000")
MAX_QUANTITY = 1000


def round_money(value: Decimal) -> Decimal:
    """Round a money amount to 2 decimal places, half-up."""
    return value.quantize(CENTS, rounding=ROUND_HALF_UP)


def to_decimal(value: Any) -> Decimal:
    """Convert an int/float/Decimal to Decimal without binary float noise."""
    if isinstance(value, Decimal):
        return value
    return Decimal(str(value))


def _require_number(value: Any) -> Any:
    # JSON numbers only: strings and booleans are rejected even though
    # pydantic would coerce them.
    if isinstance(value, bool) or not isinstance(value, int | float | Decimal):
        raise PydanticCustomError("number_type", "must be a number")
    if isinstance(value, float) and not math.isfinite(value):
        raise PydanticCustomError("number_type", "must be a finite number")
    return to_decimal(value)


def _require_cents(value: Decimal) -> Decimal:
    rounded = round_money(value)
    if rounded <= 0:
        raise PydanticCustomError("price_too_small", "must be at least 0.01")
    return rounded


Money = Annotated[Decimal, PlainSerializer(float, return_type=float, when_used="json")]

Price = Annotated[
    Decimal,
    BeforeValidator(_require_number),
    Field(gt=0, le=MAX_PRICE),
    AfterValidator(_require_cents),
    PlainSerializer(float, return_type=float, when_used="json"),
]


class CamelModel(BaseModel):
    """Base model with camelCase aliases and whitespace-trimmed strings."""

    model_config = ConfigDict(
        alias_generator=to_camel,
        populate_by_name=True,
        str_strip_whitespace=True,
    )


def _format_location(location: tuple[int | str, ...]) -> str:
    path = ""
    for part in location:
        if isinstance(part, int):
            path += f"[{part}]"
        elif path:
            path += f".{part}"
        else:
            path = part
    return path


def collect_error_messages(exc: PydanticValidationError) -> list[str]:
    """Flatten a pydantic ValidationError into one message per violation.

    Args:
        exc: The pydantic error raised while validating a payload

    Returns:
        Messages such as ``"items[0].price: Input should be greater than 0"``
    """
    messages = []
    for error in exc.errors():
        location = _format_location(error["loc"])
        messages.append(f"{location}: {error['msg']}" if location else error["msg"])
    return messages
