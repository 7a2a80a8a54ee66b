"""Client for the ordering service HTTP API.

Used by customer-facing clients to browse the menu, submit orders and poll an
order until it reaches a terminal status.
"""

import asyncio
import logging
from typing import Any

import httpx

from restaurant_ordering_service.exceptions import ValidationError
from restaurant_ordering_service.models.menu_models import MenuItem
from restaurant_ordering_service.models.order_models import Order
from restaurant_ordering_service.services.checkout import validate_checkout
from restaurant_ordering_service.services.order_workflow import is_terminal

logger = logging.getLogger(__name__)


class OrderingApiClient:
    """HTTP client for the public ordering endpoints.

    Expected failures (network errors, non-2xx responses) are logged and
    returned as None; callers decide whether to retry.
    """

    def __init__(self, base_url: str, timeout_seconds: float = 10.0) -> None:
        """Initialize the ordering API client.

        Args:
            base_url: Base URL of the ordering service (e.g., "http://localhost:8000")
            timeout_seconds: Per-request timeout
        """
        self.base_url = base_url.rstrip("/")
        self.timeout_seconds = timeout_seconds

    async def get_menu(
        self, category: str | None = None, available: bool | None = None
    ) -> list[MenuItem] | None:
        """Fetch menu items, optionally filtered.

        Args:
            category: Optional category filter
            available: Optional availability filter

        Returns:
            List of MenuItem objects, or None on failure
        """
        params: dict[str, str] = {}
        if category:
            params["category"] = category
        if available is not None:
            params["available"] = "true" if available else "false"

        try:
            async with httpx.AsyncClient(timeout=self.timeout_seconds) as client:
                response = await client.get(f"{self.base_url}/api/menu", params=params)
                response.raise_for_status()
                return [MenuItem.model_validate(item) for item in response.json()]

        except (httpx.HTTPStatusError, httpx.RequestError) as e:
            logger.error(f"Failed to fetch menu: {e}")
            return None

    async def create_order(self, payload: dict[str, Any]) -> Order | None:
        """Check a checkout payload and submit it.

        Args:
            payload: Order body in wire format (camelCase keys)

        Returns:
            The created Order as priced by the server, or None on failure

        Raises:
            ValidationError: If the checkout form checks fail; nothing is sent
        """
        form_errors = validate_checkout(payload)
        if form_errors:
            raise ValidationError([f"{field}: {message}" for field, message in form_errors.items()])

        try:
            async with httpx.AsyncClient(timeout=self.timeout_seconds) as client:
                response = await client.post(f"{self.base_url}/api/orders", json=payload)
                response.raise_for_status()
                return Order.model_validate(response.json())

        except httpx.HTTPStatusError as e:
            logger.error(f"Order rejected ({e.response.status_code}): {e.response.text}")
            return None
        except httpx.RequestError as e:
            logger.error(f"Failed to submit order: {e}")
            return None

    async def get_order(self, order_id: str) -> Order | None:
        """Fetch a single order.

        Args:
            order_id: The order to fetch

        Returns:
            The Order, or None if it does not exist or the request failed
        """
        try:
            async with httpx.AsyncClient(timeout=self.timeout_seconds) as client:
                response = await client.get(f"{self.base_url}/api/orders/{order_id}")
                response.raise_for_status()
                return Order.model_validate(response.json())

        except (httpx.HTTPStatusError, httpx.RequestError) as e:
            logger.error(f"Failed to fetch order {order_id}: {e}")
            return None

    async def poll_order_status(
        self,
        order_id: str,
        interval_seconds: float = 10.0,
        max_polls: int = 60,
    ) -> Order | None:
        """Re-fetch an order until it reaches Completed or Cancelled.

        Polling stops at the first terminal status, when the order cannot be
        fetched, or after ``max_polls`` attempts.

        Args:
            order_id: The order to watch
            interval_seconds: Delay between fetches
            max_polls: Maximum number of fetches

        Returns:
            The last Order observed, or None if no fetch succeeded
        """
        order: Order | None = None

        for attempt in range(1, max_polls + 1):
            latest = await self.get_order(order_id)
            if latest is None:
                return order

            order = latest
            if is_terminal(order.status):
                logger.info(f"Order {order_id} reached {order.status.value} after {attempt} polls")
                return order

            if attempt < max_polls:
                await asyncio.sleep(interval_seconds)

        logger.info(f"Stopped polling order {order_id} in status {order.status.value if order else 'unknown'}")
        return order
