"""Client-side cart models."""

from pydantic import Field

from restaurant_ordering_service.models.common import MAX_QUANTITY
from restaurant_ordering_service.models.menu_models import MenuItem


class CartItem(MenuItem):
    """A menu item selected into the cart, with a quantity."""

    quantity: int = Field(
        default=1, ge=1, le=MAX_QUANTITY, description="Number of units in the cart"
    )
