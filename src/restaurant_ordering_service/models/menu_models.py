"""Menu data models.

``MenuItem`` is the stored entity; ``MenuItemCreate`` and ``MenuItemUpdate``
validate admin payloads before they reach the catalog repository.
"""

from enum import Enum
from typing import Any

from pydantic import Field, field_validator
from pydantic_core import PydanticCustomError

from restaurant_ordering_service.models.common import CamelModel, Price


class MenuCategory(str, Enum):
    """Enumeration of menu categories."""

    APPETIZERS = "Appetizers"
    MAINS = "Mains"
    DESSERTS = "Desserts"
    DRINKS = "Drinks"


class MenuItem(CamelModel):
    """Menu item model."""

    id: str = Field(..., description="Unique identifier for the menu item")
    name: str = Field(..., description="Item name")
    description: str = Field(..., description="Item description")
    price: Price = Field(..., description="Item price")
    category: MenuCategory = Field(..., description="Menu category")
    image: str = Field(..., description="URL to item image")
    available: bool = Field(default=True, description="Whether item is currently available")


class MenuItemCreate(CamelModel):
    """Payload for creating a menu item. All violations are reported together."""

    name: str = Field(..., min_length=2)
    description: str = Field(..., min_length=5)
    price: Price
    category: MenuCategory
    image: str = Field(..., min_length=1)
    available: bool = True


class MenuItemUpdate(CamelModel):
    """Partial update payload for a menu item.

    Omitted fields are left untouched; supplied fields follow the same rules as
    on create. An explicit null is rejected rather than treated as omitted.
    """

    name: str | None = Field(None, min_length=2)
    description: str | None = Field(None, min_length=5)
    price: Price | None = None
    category: MenuCategory | None = None
    image: str | None = Field(None, min_length=1)
    available: bool | None = None

    @field_validator("*", mode="before")
    @classmethod
    def reject_null(cls, v: Any) -> Any:
        """Reject explicit nulls for supplied fields."""
        if v is None:
            raise PydanticCustomError("null_value", "must not be null")
        return v

    def changes(self) -> dict[str, Any]:
        """Return only the fields supplied by the caller."""
        return self.model_dump(exclude_unset=True)
