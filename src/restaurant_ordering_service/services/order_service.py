"""Order service for checkout and order status management."""

import logging
from collections.abc import Callable
from datetime import UTC, datetime
from typing import Any

from pydantic import ValidationError as PydanticValidationError

from restaurant_ordering_service.exceptions import (
    InvalidTransitionError,
    NotFoundError,
    ValidationError,
)
from restaurant_ordering_service.models.common import collect_error_messages
from restaurant_ordering_service.models.order_models import (
    Order,
    OrderCreate,
    OrderStatusUpdate,
)
from restaurant_ordering_service.observability import traced
from restaurant_ordering_service.observability.metrics import (
    record_order_created,
    record_rejected_transition,
    record_status_transition,
)
from restaurant_ordering_service.repositories.ordering_repositories import OrderRepository
from restaurant_ordering_service.services.order_workflow import INITIAL_STATUS
from restaurant_ordering_service.services.pricing import price_items

logger = logging.getLogger(__name__)


def _utc_now() -> datetime:
    return datetime.now(UTC)


class OrderService:
    """Service for placing orders and moving them through the status workflow.

    Checkout is the only place pricing is computed. Subtotal, tax and total are
    derived from the line items and never accepted from the client.
    """

    def __init__(
        self,
        order_repository: OrderRepository,
        clock: Callable[[], datetime] = _utc_now,
    ) -> None:
        """Initialize the OrderService.

        Args:
            order_repository: Repository holding the orders
            clock: Source of creation timestamps
        """
        self.order_repository = order_repository
        self.clock = clock

    def list_orders(self, status: str | None = None) -> list[Order]:
        """List orders newest first, optionally filtered by status.

        Args:
            status: Optional status name (case-insensitive)

        Returns:
            Matching orders, empty list if none match
        """
        return self.order_repository.list_orders(status=status)

    def get_order(self, order_id: str) -> Order:
        """Get an order by id.

        Raises:
            NotFoundError: If no order has this id
        """
        order = self.order_repository.get_order(order_id)
        if order is None:
            raise NotFoundError("Order", order_id)
        return order

    @traced("order.create_order")
    def create_order(self, payload: Any) -> Order:
        """Validate a checkout payload, price it and store the order as Pending.

        Args:
            payload: Raw request body (customer details, order type, items)

        Returns:
            The created Order with generated id, pricing and timestamp

        Raises:
            ValidationError: Listing every violated field
        """
        try:
            data = OrderCreate.model_validate(payload)
        except PydanticValidationError as e:
            raise ValidationError(collect_error_messages(e)) from e

        pricing = price_items(data.items)

        order = self.order_repository.add_order(
            {
                **data.model_dump(exclude={"items"}),
                "items": data.items,
                "subtotal": pricing.subtotal,
                "tax": pricing.tax,
                "total": pricing.total,
                "status": INITIAL_STATUS,
                "created_at": self.clock(),
            }
        )

        record_order_created(order.order_type.value, order.total)
        logger.info(
            f"Created order {order.id} ({order.order_type.value}, "
            f"{len(order.items)} items, total {order.total})"
        )
        return order

    @traced("order.update_status")
    def update_status(self, order_id: str, payload: Any) -> Order:
        """Move an order to a new status through the workflow.

        Args:
            order_id: The order to update
            payload: Raw request body, ``{"status": "<OrderStatus>"}``

        Returns:
            The updated Order

        Raises:
            NotFoundError: If no order has this id
            ValidationError: If the requested status is missing or unknown
            InvalidTransitionError: If the workflow does not allow the change
        """
        current = self.order_repository.get_order(order_id)
        if current is None:
            raise NotFoundError("Order", order_id)

        try:
            requested = OrderStatusUpdate.model_validate(payload).status
        except PydanticValidationError as e:
            raise ValidationError(collect_error_messages(e)) from e

        try:
            order = self.order_repository.update_status(order_id, requested)
        except InvalidTransitionError as e:
            record_rejected_transition(e.current, e.requested)
            logger.warning(f"Rejected status change for order {order_id}: {e}")
            raise

        if order is None:
            raise NotFoundError("Order", order_id)

        record_status_transition(current.status.value, order.status.value)
        logger.info(f"Order {order_id} moved from {current.status.value} to {order.status.value}")
        return order

    def set_status(self, order_id: str, status: str) -> Order:
        """Convenience wrapper for ``update_status`` taking a bare status name."""
        return self.update_status(order_id, {"status": status})
