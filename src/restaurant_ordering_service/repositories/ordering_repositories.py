"""In-memory repository classes for the menu catalog and orders.

Each repository owns its collection and its id counter, so independent
instances never share state. A lock serializes every read-modify-write because
FastAPI runs sync handlers on a thread pool.

Following the store convention, expected misses return None/False rather than
raising; the service layer decides how to report them. Callers always receive
copies, so mutating a returned model never changes the store.
"""

import logging
import re
import threading
from collections.abc import Iterable
from typing import Any

from restaurant_ordering_service.models.menu_models import MenuItem
from restaurant_ordering_service.models.order_models import Order, OrderStatus
from restaurant_ordering_service.services.order_workflow import apply_transition

logger = logging.getLogger(__name__)

_TRAILING_NUMBER = re.compile(r"(\d+)$")


def _id_number(entity_id: str) -> int:
    match = _TRAILING_NUMBER.search(entity_id)
    return int(match.group(1)) if match else 0


class MenuItemRepository:
    """Repository for menu item CRUD operations.

    Ids have the form ``menu-<n>``; the counter starts above the highest
    id found in the initial items.
    """

    ID_PREFIX = "menu-"

    def __init__(self, items: Iterable[MenuItem] = ()) -> None:
        """Initialize repository.

        Args:
            items: Initial menu items (usually the seed data)
        """
        self._items: dict[str, MenuItem] = {}
        self._lock = threading.Lock()
        self._counter = 0

        for item in items:
            self._items[item.id] = item.model_copy(deep=True)
            self._counter = max(self._counter, _id_number(item.id))

    def _next_id(self) -> str:
        self._counter += 1
        return f"{self.ID_PREFIX}{self._counter}"

    def list_items(
        self, category: str | None = None, available: bool | None = None
    ) -> list[MenuItem]:
        """List menu items in insertion order.

        Args:
            category: Optional category filter (case-insensitive)
            available: Optional availability filter

        Returns:
            list: Matching MenuItem copies (empty list if none match)
        """
        with self._lock:
            items = list(self._items.values())

        if category:
            items = [item for item in items if item.category.value.lower() == category.lower()]

        if available is not None:
            items = [item for item in items if item.available is available]

        return [item.model_copy(deep=True) for item in items]

    def get_item(self, item_id: str) -> MenuItem | None:
        """Retrieve a menu item by id.

        Args:
            item_id: Menu item identifier

        Returns:
            MenuItem if found, None otherwise
        """
        with self._lock:
            item = self._items.get(item_id)
            return item.model_copy(deep=True) if item else None

    def add_item(self, fields: dict[str, Any]) -> MenuItem:
        """Store a new menu item under a freshly generated id.

        Args:
            fields: Validated menu item fields, without ``id``

        Returns:
            MenuItem: The stored item
        """
        with self._lock:
            item = MenuItem(id=self._next_id(), **fields)
            self._items[item.id] = item
            logger.debug(f"Added menu item {item.id}")
            return item.model_copy(deep=True)

    def update_item(self, item_id: str, changes: dict[str, Any]) -> MenuItem | None:
        """Apply a partial update to a menu item.

        Args:
            item_id: Menu item identifier
            changes: Validated fields to overwrite

        Returns:
            The updated MenuItem, or None if the id is unknown
        """
        with self._lock:
            existing = self._items.get(item_id)
            if existing is None:
                return None

            updated = existing.model_copy(update=changes)
            self._items[item_id] = updated
            return updated.model_copy(deep=True)

    def delete_item(self, item_id: str) -> bool:
        """Permanently delete a menu item.

        Args:
            item_id: Menu item identifier

        Returns:
            bool: True if the item existed and was removed, False otherwise
        """
        with self._lock:
            return self._items.pop(item_id, None) is not None


class OrderRepository:
    """Repository for order operations.

    Ids have the form ``ORD-<nnn>``. Orders are never deleted; after creation
    only their status changes, and only through the order workflow.
    """

    ID_PREFIX = "ORD-"

    def __init__(self, orders: Iterable[Order] = ()) -> None:
        """Initialize repository.

        Args:
            orders: Initial orders (usually the seed data)
        """
        self._orders: dict[str, Order] = {}
        self._lock = threading.Lock()
        self._counter = 0

        for order in orders:
            self._orders[order.id] = order.model_copy(deep=True)
            self._counter = max(self._counter, _id_number(order.id))

    def _next_id(self) -> str:
        self._counter += 1
        return f"{self.ID_PREFIX}{self._counter:03d}"

    def list_orders(self, status: str | None = None) -> list[Order]:
        """List orders, newest first.

        Args:
            status: Optional status filter (case-insensitive)

        Returns:
            list: Matching Order copies (empty list if none match)
        """
        with self._lock:
            orders = list(self._orders.values())

        if status:
            orders = [order for order in orders if order.status.value.lower() == status.lower()]

        orders.sort(key=lambda order: order.created_at, reverse=True)
        return [order.model_copy(deep=True) for order in orders]

    def get_order(self, order_id: str) -> Order | None:
        """Retrieve an order by id.

        Args:
            order_id: Order identifier

        Returns:
            Order if found, None otherwise
        """
        with self._lock:
            order = self._orders.get(order_id)
            return order.model_copy(deep=True) if order else None

    def add_order(self, fields: dict[str, Any]) -> Order:
        """Store a new order under a freshly generated id.

        Args:
            fields: Validated order fields including computed pricing, without ``id``

        Returns:
            Order: The stored order
        """
        with self._lock:
            order = Order(id=self._next_id(), **fields)
            self._orders[order.id] = order
            logger.debug(f"Added order {order.id}")
            return order.model_copy(deep=True)

    def update_status(self, order_id: str, status: OrderStatus) -> Order | None:
        """Transition an order's status through the workflow.

        The check and the write happen under the same lock.

        Args:
            order_id: Order identifier
            status: Requested status

        Returns:
            The updated Order, or None if the id is unknown

        Raises:
            InvalidTransitionError: If the workflow does not allow the change
        """
        with self._lock:
            order = self._orders.get(order_id)
            if order is None:
                return None

            apply_transition(order, status)
            return order.model_copy(deep=True)
