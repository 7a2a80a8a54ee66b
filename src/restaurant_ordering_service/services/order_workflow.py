"""Order status workflow.

Orders move Pending -> Preparing -> Ready -> Completed, and may be Cancelled
from any non-terminal state. Completed and Cancelled are terminal. There are
no self transitions and no backward edges.
"""

from restaurant_ordering_service.exceptions import InvalidTransitionError
from restaurant_ordering_service.models.order_models import Order, OrderStatus

INITIAL_STATUS = OrderStatus.PENDING

ALLOWED_TRANSITIONS: dict[OrderStatus, frozenset[OrderStatus]] = {
    OrderStatus.PENDING: frozenset({OrderStatus.PREPARING, OrderStatus.CANCELLED}),
    OrderStatus.PREPARING: frozenset({OrderStatus.READY, OrderStatus.CANCELLED}),
    OrderStatus.READY: frozenset({OrderStatus.COMPLETED, OrderStatus.CANCELLED}),
    OrderStatus.COMPLETED: frozenset(),
    OrderStatus.CANCELLED: frozenset(),
}

TERMINAL_STATUSES = frozenset(
    status for status, targets in ALLOWED_TRANSITIONS.items() if not targets
)


def allowed_transitions(status: OrderStatus) -> frozenset[OrderStatus]:
    """Return the statuses reachable in one step from ``status``."""
    return ALLOWED_TRANSITIONS[status]


def is_terminal(status: OrderStatus) -> bool:
    """Whether no further transition is possible from ``status``."""
    return status in TERMINAL_STATUSES


def can_transition(current: OrderStatus, target: OrderStatus) -> bool:
    """Whether ``current -> target`` is an edge of the workflow."""
    return target in ALLOWED_TRANSITIONS[current]


def apply_transition(order: Order, target: OrderStatus) -> Order:
    """Move an order to ``target`` in place.

    Only the status field changes; the transition time is not recorded.

    Args:
        order: The order to update
        target: The requested status

    Returns:
        The same order instance, now in ``target``

    Raises:
        InvalidTransitionError: If ``target`` is not reachable from the
            order's current status, including ``target == current``
    """
    if not can_transition(order.status, target):
        raise InvalidTransitionError(current=order.status.value, requested=target.value)

    order.status = target
    return order
