"""Client-side cart state.

The cart mirrors what the customer has selected before checkout and previews
pricing with the same engine the server uses. The server recomputes pricing
on submission, so cart totals are for display only.
"""

import logging
from decimal import Decimal

from pydantic import TypeAdapter
from pydantic import ValidationError as PydanticValidationError

from restaurant_ordering_service.models.cart_models import CartItem
from restaurant_ordering_service.models.common import round_money
from restaurant_ordering_service.models.menu_models import MenuItem
from restaurant_ordering_service.models.order_models import OrderItem
from restaurant_ordering_service.services.pricing import (
    PricingSummary,
    calculate_subtotal,
    price_items,
)

logger = logging.getLogger(__name__)

_cart_items_adapter = TypeAdapter(list[CartItem])


class Cart:
    """Selected menu items with quantities, keyed by menu item id."""

    def __init__(self, items: list[CartItem] | None = None) -> None:
        self._items: dict[str, CartItem] = {}
        for item in items or []:
            self._items[item.id] = item

    @property
    def items(self) -> list[CartItem]:
        """Cart items in the order they were first added."""
        return list(self._items.values())

    def add_item(self, menu_item: MenuItem, quantity: int = 1) -> None:
        """Add ``quantity`` units, merging with an existing line. Quantities below 1 are ignored."""
        if quantity < 1:
            return

        existing = self._items.get(menu_item.id)
        if existing is not None:
            existing.quantity += quantity
        else:
            self._items[menu_item.id] = CartItem.model_validate(
                {**menu_item.model_dump(exclude={"quantity"}), "quantity": quantity}
            )

    def remove_item(self, item_id: str) -> None:
        self._items.pop(item_id, None)

    def update_quantity(self, item_id: str, quantity: int) -> None:
        """Set the quantity of a line; anything below 1 removes it."""
        if quantity < 1:
            self.remove_item(item_id)
            return

        if item_id in self._items:
            self._items[item_id].quantity = quantity

    def increment_item(self, item_id: str) -> None:
        if item_id in self._items:
            self._items[item_id].quantity += 1

    def decrement_item(self, item_id: str) -> None:
        item = self._items.get(item_id)
        if item is None:
            return

        if item.quantity <= 1:
            self.remove_item(item_id)
        else:
            item.quantity -= 1

    def clear(self) -> None:
        self._items.clear()

    def get_item_quantity(self, menu_item_id: str) -> int:
        item = self._items.get(menu_item_id)
        return item.quantity if item else 0

    def is_in_cart(self, menu_item_id: str) -> bool:
        return menu_item_id in self._items

    @property
    def total_items(self) -> int:
        """Total number of units across all lines."""
        return sum(item.quantity for item in self._items.values())

    @property
    def total_price(self) -> Decimal:
        """Cart subtotal rounded to cents (before tax)."""
        return round_money(calculate_subtotal(self._items.values()))

    def pricing(self) -> PricingSummary:
        """Preview subtotal, tax and total exactly as the server will compute them."""
        return price_items(self._items.values())

    def to_order_items(self) -> list[OrderItem]:
        """Snapshot the cart as checkout line items."""
        return [
            OrderItem(
                menu_item_id=item.id,
                name=item.name,
                price=item.price,
                quantity=item.quantity,
            )
            for item in self._items.values()
        ]

    def to_json(self) -> str:
        """Serialize the cart for client-side storage."""
        return _cart_items_adapter.dump_json(self.items).decode()

    @classmethod
    def from_json(cls, raw: str | None) -> "Cart":
        """Restore a cart from client-side storage.

        Missing or malformed data yields an empty cart rather than an error.
        """
        if not raw:
            return cls()

        try:
            return cls(_cart_items_adapter.validate_json(raw))
        except PydanticValidationError as e:
            logger.warning(f"Discarding unreadable stored cart: {e}")
            return cls()
