"""Shared pytest fixtures and configuration for all tests."""

import os
from datetime import UTC, datetime
from typing import Any

import pytest

# Keep src/main.py from building the real application at import time
os.environ.setdefault("ENVIRONMENT", "test")

from restaurant_ordering_service.repositories.ordering_repositories import (  # noqa: E402
    MenuItemRepository,
    OrderRepository,
)
from restaurant_ordering_service.repositories.seed_data import (  # noqa: E402
    load_seed_menu_items,
    load_seed_orders,
)

FIXED_NOW = datetime(2026, 10, 19, 18, 30, tzinfo=UTC)


@pytest.fixture
def fixed_now() -> datetime:
    """Fixture providing a fixed reference time for seed data and new orders."""
    return FIXED_NOW


@pytest.fixture
def menu_repository() -> MenuItemRepository:
    """Fixture providing a menu repository loaded with the seed menu."""
    return MenuItemRepository(load_seed_menu_items())


@pytest.fixture
def order_repository(fixed_now: datetime) -> OrderRepository:
    """Fixture providing an order repository loaded with the seed orders."""
    return OrderRepository(load_seed_orders(now=fixed_now))


@pytest.fixture
def menu_item_payload() -> dict[str, Any]:
    """Fixture providing a valid menu item creation payload."""
    return {
        "name": "Lasagna",
        "description": "Layered pasta with beef ragu and bechamel",
        "price": 15.5,
        "category": "Mains",
        "image": "https://example.com/lasagna.jpg",
    }


@pytest.fixture
def pickup_order_payload() -> dict[str, Any]:
    """Fixture providing a valid pickup checkout payload."""
    return {
        "customerName": "Jane Doe",
        "email": "jane@example.com",
        "phone": "555-0199",
        "orderType": "Pickup",
        "items": [
            {
                "menuItemId": "menu-5",
                "name": "Margherita Pizza",
                "price": 14.99,
                "quantity": 1,
            }
        ],
    }


@pytest.fixture
def delivery_order_payload() -> dict[str, Any]:
    """Fixture providing a valid delivery checkout payload."""
    return {
        "customerName": "  Sam Rivera  ",
        "email": "sam@example.com",
        "phone": "555-0142",
        "orderType": "Delivery",
        "address": "12 Harbor Lane",
        "items": [
            {"menuItemId": "menu-5", "name": "Margherita Pizza", "price": 14.99, "quantity": 2},
            {"menuItemId": "menu-13", "name": "Fresh Lemonade", "price": 4.99, "quantity": 1},
        ],
        "specialInstructions": "Leave at the door",
    }
