"""Seed data loaded into the in-memory stores on every process start.

16 menu items across the four categories and 8 orders covering every status.
Order timestamps are relative to the load time so they always look recent.
"""

from datetime import UTC, datetime, timedelta
from typing import Any

from restaurant_ordering_service.models.menu_models import MenuItem
from restaurant_ordering_service.models.order_models import Order, OrderItem
from restaurant_ordering_service.services.pricing import price_items

_IMAGE_BASE = "https://images.unsplash.com"

SEED_MENU_ITEMS: list[dict[str, Any]] = [
    # Appetizers
    {
        "id": "menu-1",
        "name": "Classic Bruschetta",
        "description": "Toasted bread with fresh tomatoes, basil & balsamic glaze",
        "price": 8.99,
        "category": "Appetizers",
        "image": f"{_IMAGE_BASE}/photo-1572695157366-5e585ab2b69f?w=600",
    },
    {
        "id": "menu-2",
        "name": "Garlic Bread",
        "description": "Oven-baked with herb butter and parmesan",
        "price": 6.49,
        "category": "Appetizers",
        "image": f"{_IMAGE_BASE}/photo-1619535860434-ba1d8fa12536?w=600",
    },
    {
        "id": "menu-3",
        "name": "Soup of the Day",
        "description": "Chef's daily selection served with crusty bread",
        "price": 7.99,
        "category": "Appetizers",
        "image": f"{_IMAGE_BASE}/photo-1547592166-23ac45744acd?w=600",
    },
    {
        "id": "menu-4",
        "name": "Caprese Salad",
        "description": "Fresh mozzarella, tomatoes, basil with olive oil",
        "price": 10.99,
        "category": "Appetizers",
        "image": f"{_IMAGE_BASE}/photo-1608032077018-c9aad9565d29?w=600",
    },
    # Mains
    {
        "id": "menu-5",
        "name": "Margherita Pizza",
        "description": "San Marzano tomatoes, fresh mozzarella, basil",
        "price": 14.99,
        "category": "Mains",
        "image": f"{_IMAGE_BASE}/photo-1604068549290-dea0e4a305ca?w=600",
    },
    {
        "id": "menu-6",
        "name": "Grilled Salmon",
        "description": "Atlantic salmon with lemon butter, seasonal vegetables",
        "price": 22.99,
        "category": "Mains",
        "image": f"{_IMAGE_BASE}/photo-1467003909585-2f8a72700288?w=600",
    },
    {
        "id": "menu-7",
        "name": "Pasta Carbonara",
        "description": "Spaghetti with pancetta, egg, parmesan, black pepper",
        "price": 16.99,
        "category": "Mains",
        "image": f"{_IMAGE_BASE}/photo-1612874742237-6526221588e3?w=600",
    },
    {
        "id": "menu-8",
        "name": "Chicken Parmesan",
        "description": "Breaded chicken breast, marinara, melted mozzarella",
        "price": 18.99,
        "category": "Mains",
        "image": f"{_IMAGE_BASE}/photo-1632778149955-e80f8ceca2e8?w=600",
    },
    {
        "id": "menu-9",
        "name": "Mushroom Risotto",
        "description": "Arborio rice with wild mushrooms, parmesan, truffle oil",
        "price": 17.99,
        "category": "Mains",
        "image": f"{_IMAGE_BASE}/photo-1476124369491-e7addf5db371?w=600",
    },
    # Desserts
    {
        "id": "menu-10",
        "name": "Tiramisu",
        "description": "Classic Italian coffee-flavored layered dessert",
        "price": 9.99,
        "category": "Desserts",
        "image": f"{_IMAGE_BASE}/photo-1571877227200-a0d98ea607e9?w=600",
    },
    {
        "id": "menu-11",
        "name": "Chocolate Lava Cake",
        "description": "Warm molten center with vanilla gelato",
        "price": 10.99,
        "category": "Desserts",
        "image": f"{_IMAGE_BASE}/photo-1624353365286-3f8d62daad51?w=600",
    },
    {
        "id": "menu-12",
        "name": "Panna Cotta",
        "description": "Vanilla bean cream with berry compote",
        "price": 8.99,
        "category": "Desserts",
        "image": f"{_IMAGE_BASE}/photo-1488477181946-6428a0291777?w=600",
    },
    # Drinks
    {
        "id": "menu-13",
        "name": "Fresh Lemonade",
        "description": "House-made with mint",
        "price": 4.99,
        "category": "Drinks",
        "image": f"{_IMAGE_BASE}/photo-1621263764928-df1444c5e859?w=600",
    },
    {
        "id": "menu-14",
        "name": "Espresso",
        "description": "Double-shot Italian roast",
        "price": 3.99,
        "category": "Drinks",
        "image": f"{_IMAGE_BASE}/photo-1510707577719-ae7c14805e3a?w=600",
    },
    {
        "id": "menu-15",
        "name": "House Red Wine",
        "description": "Glass of Chianti Classico",
        "price": 12.99,
        "category": "Drinks",
        "image": f"{_IMAGE_BASE}/photo-1510812431401-41d2bd2722f3?w=600",
    },
    {
        "id": "menu-16",
        "name": "Sparkling Water",
        "description": "San Pellegrino 750ml",
        "price": 3.49,
        "category": "Drinks",
        "image": f"{_IMAGE_BASE}/photo-1523362628745-0c100150b504?w=600",
    },
]

# Pricing fields are derived from the items when the orders are loaded.
SEED_ORDERS: list[dict[str, Any]] = [
    {
        "id": "ORD-001",
        "customer_name": "Sarah Johnson",
        "email": "sarah@example.com",
        "phone": "555-0101",
        "order_type": "Delivery",
        "address": "123 Main St, Apt 4B",
        "items": [
            ("menu-5", "Margherita Pizza", 14.99, 2),
            ("menu-13", "Fresh Lemonade", 4.99, 1),
        ],
        "status": "Completed",
        "hours_ago": 4.5,
    },
    {
        "id": "ORD-002",
        "customer_name": "Mike Chen",
        "email": "mike@example.com",
        "phone": "555-0102",
        "order_type": "Pickup",
        "items": [
            ("menu-6", "Grilled Salmon", 22.99, 1),
            ("menu-14", "Espresso", 3.99, 1),
        ],
        "status": "Completed",
        "hours_ago": 3.75,
    },
    {
        "id": "ORD-003",
        "customer_name": "Emily Davis",
        "email": "emily@example.com",
        "phone": "555-0103",
        "order_type": "Delivery",
        "address": "456 Oak Ave",
        "items": [
            ("menu-7", "Pasta Carbonara", 16.99, 1),
            ("menu-10", "Tiramisu", 9.99, 1),
            ("menu-15", "House Red Wine", 12.99, 1),
        ],
        "status": "Ready",
        "special_instructions": "Please ring the doorbell twice",
        "hours_ago": 3.25,
    },
    {
        "id": "ORD-004",
        "customer_name": "James Wilson",
        "email": "james@example.com",
        "phone": "555-0104",
        "order_type": "Pickup",
        "items": [
            ("menu-1", "Classic Bruschetta", 8.99, 2),
            ("menu-8", "Chicken Parmesan", 18.99, 1),
        ],
        "status": "Preparing",
        "hours_ago": 3,
    },
    {
        "id": "ORD-005",
        "customer_name": "Lisa Anderson",
        "email": "lisa@example.com",
        "phone": "555-0105",
        "order_type": "Delivery",
        "address": "789 Pine Rd, Suite 2",
        "items": [
            ("menu-9", "Mushroom Risotto", 17.99, 1),
            ("menu-11", "Chocolate Lava Cake", 10.99, 1),
            ("menu-16", "Sparkling Water", 3.49, 2),
        ],
        "status": "Preparing",
        "special_instructions": "Nut allergy, no tree nuts please",
        "hours_ago": 2.67,
    },
    {
        "id": "ORD-006",
        "customer_name": "Tom Martinez",
        "email": "tom@example.com",
        "phone": "555-0106",
        "order_type": "Pickup",
        "items": [
            ("menu-4", "Caprese Salad", 10.99, 1),
            ("menu-5", "Margherita Pizza", 14.99, 1),
        ],
        "status": "Pending",
        "hours_ago": 2.42,
    },
    {
        "id": "ORD-007",
        "customer_name": "Amy Thompson",
        "email": "amy@example.com",
        "phone": "555-0107",
        "order_type": "Delivery",
        "address": "321 Elm Blvd",
        "items": [
            ("menu-2", "Garlic Bread", 6.49, 3),
            ("menu-7", "Pasta Carbonara", 16.99, 2),
        ],
        "status": "Pending",
        "special_instructions": "Extra parmesan on the carbonara",
        "hours_ago": 2.3,
    },
    {
        "id": "ORD-008",
        "customer_name": "David Lee",
        "email": "david@example.com",
        "phone": "555-0108",
        "order_type": "Pickup",
        "items": [
            ("menu-3", "Soup of the Day", 7.99, 1),
            ("menu-6", "Grilled Salmon", 22.99, 1),
        ],
        "status": "Cancelled",
        "hours_ago": 6,
    },
]


def load_seed_menu_items() -> list[MenuItem]:
    """Build the seed menu items.

    Returns:
        Fresh MenuItem instances, safe to hand to a repository
    """
    return [MenuItem.model_validate(data) for data in SEED_MENU_ITEMS]


def load_seed_orders(now: datetime | None = None) -> list[Order]:
    """Build the seed orders with timestamps relative to ``now``.

    Args:
        now: Reference time (defaults to the current UTC time)

    Returns:
        Fresh Order instances with pricing computed from their items
    """
    now = now or datetime.now(UTC)
    orders = []

    for data in SEED_ORDERS:
        fields = dict(data)
        hours_ago = fields.pop("hours_ago")
        items = [
            OrderItem(menu_item_id=menu_item_id, name=name, price=price, quantity=quantity)
            for menu_item_id, name, price, quantity in fields.pop("items")
        ]
        pricing = price_items(items)

        orders.append(
            Order(
                **fields,
                items=items,
                subtotal=pricing.subtotal,
                tax=pricing.tax,
                total=pricing.total,
                created_at=now - timedelta(hours=hours_ago),
            )
        )

    return orders
