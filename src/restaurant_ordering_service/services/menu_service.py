"""Menu service for catalog browsing and admin menu management."""

import logging
from typing import Any

from pydantic import ValidationError as PydanticValidationError

from restaurant_ordering_service.exceptions import NotFoundError, ValidationError
from restaurant_ordering_service.models.common import collect_error_messages
from restaurant_ordering_service.models.menu_models import (
    MenuItem,
    MenuItemCreate,
    MenuItemUpdate,
)
from restaurant_ordering_service.observability import traced
from restaurant_ordering_service.observability.metrics import record_menu_change
from restaurant_ordering_service.repositories.ordering_repositories import MenuItemRepository

logger = logging.getLogger(__name__)


class MenuService:
    """Service for reading and managing the menu catalog.

    Validates admin payloads, reporting every violation at once, and turns
    repository misses into NotFoundError.
    """

    def __init__(self, menu_repository: MenuItemRepository) -> None:
        """Initialize the MenuService.

        Args:
            menu_repository: Repository holding the menu items
        """
        self.menu_repository = menu_repository

    def list_items(
        self, category: str | None = None, available: bool | None = None
    ) -> list[MenuItem]:
        """List menu items, optionally filtered.

        Args:
            category: Optional category name (case-insensitive)
            available: Optional availability flag

        Returns:
            Matching menu items, empty list if none match
        """
        return self.menu_repository.list_items(category=category, available=available)

    def get_item(self, item_id: str) -> MenuItem:
        """Get a menu item by id.

        Raises:
            NotFoundError: If no item has this id
        """
        item = self.menu_repository.get_item(item_id)
        if item is None:
            raise NotFoundError("Menu item", item_id)
        return item

    @traced("menu.create_item")
    def create_item(self, payload: Any) -> MenuItem:
        """Validate and store a new menu item.

        Args:
            payload: Raw request body (name, description, price, category, image, available)

        Returns:
            The created MenuItem with its generated id

        Raises:
            ValidationError: Listing every violated field
        """
        try:
            data = MenuItemCreate.model_validate(payload)
        except PydanticValidationError as e:
            raise ValidationError(collect_error_messages(e)) from e

        item = self.menu_repository.add_item(data.model_dump())
        record_menu_change("create")
        logger.info(f"Created menu item {item.id} ({item.name})")
        return item

    @traced("menu.update_item")
    def update_item(self, item_id: str, payload: Any) -> MenuItem:
        """Apply a partial update to a menu item.

        Args:
            item_id: The item to update
            payload: Raw request body with any subset of the item fields

        Returns:
            The updated MenuItem

        Raises:
            NotFoundError: If no item has this id
            ValidationError: Listing every violated field
        """
        if self.menu_repository.get_item(item_id) is None:
            raise NotFoundError("Menu item", item_id)

        try:
            changes = MenuItemUpdate.model_validate(payload).changes()
        except PydanticValidationError as e:
            raise ValidationError(collect_error_messages(e)) from e

        item = self.menu_repository.update_item(item_id, changes)
        if item is None:
            # Deleted between the existence check and the update
            raise NotFoundError("Menu item", item_id)

        record_menu_change("update")
        logger.info(f"Updated menu item {item_id}: {', '.join(sorted(changes)) or 'no changes'}")
        return item

    @traced("menu.delete_item")
    def delete_item(self, item_id: str) -> bool:
        """Permanently delete a menu item.

        Returns:
            True once the item has been removed

        Raises:
            NotFoundError: If no item has this id, including one already deleted
        """
        if not self.menu_repository.delete_item(item_id):
            raise NotFoundError("Menu item", item_id)

        record_menu_change("delete")
        logger.info(f"Deleted menu item {item_id}")
        return True
