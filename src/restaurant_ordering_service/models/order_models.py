"""Order data models.

These models represent customer orders, their line items, and the payloads
accepted at checkout and on admin status updates.
"""

from datetime import datetime
from enum import Enum

from pydantic import Field, ValidationInfo, field_validator
from pydantic_core import PydanticCustomError

from restaurant_ordering_service.models.common import MAX_QUANTITY, CamelModel, Money, Price


class OrderStatus(str, Enum):
    """Enumeration of order status values."""

    PENDING = "Pending"
    PREPARING = "Preparing"
    READY = "Ready"
    COMPLETED = "Completed"
    CANCELLED = "Cancelled"


class OrderType(str, Enum):
    """Order fulfillment mode."""

    PICKUP = "Pickup"
    DELIVERY = "Delivery"


class OrderItem(CamelModel):
    """Line item embedded in an order.

    Name and price are snapshots taken at checkout, so later menu edits never
    change a placed order.
    """

    menu_item_id: str = Field(..., min_length=1, description="Referenced menu item")
    name: str = Field(..., min_length=1, description="Item name at order time")
    price: Price = Field(..., description="Unit price at order time")
    quantity: int = Field(
        ..., gt=0, le=MAX_QUANTITY, strict=True, description="Number of units ordered"
    )


class OrderCreate(CamelModel):
    """Checkout payload. Pricing and status are never taken from the client."""

    customer_name: str = Field(..., min_length=2)
    email: str = Field(..., min_length=1)
    phone: str = Field(..., min_length=1)
    order_type: OrderType
    address: str | None = Field(None, validate_default=True)
    items: list[OrderItem] = Field(..., min_length=1)
    special_instructions: str | None = None

    @field_validator("address")
    @classmethod
    def require_address_for_delivery(cls, v: str | None, info: ValidationInfo) -> str | None:
        """Require a non-blank address when the order is for delivery."""
        if info.data.get("order_type") == OrderType.DELIVERY and not v:
            raise PydanticCustomError(
                "address_required", "address is required for delivery orders"
            )
        return v or None

    @field_validator("special_instructions")
    @classmethod
    def drop_blank_instructions(cls, v: str | None) -> str | None:
        """Treat blank instructions as absent."""
        return v or None


class Order(CamelModel):
    """A placed customer order.

    Subtotal, tax and total are computed once at creation and never change.
    Only ``status`` is mutated afterwards, through the order workflow.
    """

    id: str = Field(..., description="Sequential order identifier (ORD-nnn)")
    customer_name: str
    email: str
    phone: str
    order_type: OrderType
    address: str | None = None
    items: list[OrderItem]
    subtotal: Money
    tax: Money
    total: Money
    status: OrderStatus = Field(default=OrderStatus.PENDING)
    special_instructions: str | None = None
    created_at: datetime = Field(..., description="Order creation timestamp")


class OrderStatusUpdate(CamelModel):
    """Admin payload requesting a status change."""

    status: OrderStatus
