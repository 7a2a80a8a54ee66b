"""Custom metrics for the restaurant ordering service."""

from decimal import Decimal

from opentelemetry import metrics

meter = metrics.get_meter("ordering-svc")

orders_created_counter = meter.create_counter(
    name="orders_created_total",
    description="Total number of orders placed by order type",
    unit="1",
)

order_value_histogram = meter.create_histogram(
    name="order_total_amount",
    description="Order totals including tax",
    unit="USD",
)

status_transition_counter = meter.create_counter(
    name="order_status_transitions_total",
    description="Accepted order status transitions by source and target status",
    unit="1",
)

rejected_transition_counter = meter.create_counter(
    name="order_status_transitions_rejected_total",
    description="Status transitions rejected by the order workflow",
    unit="1",
)

menu_change_counter = meter.create_counter(
    name="menu_item_changes_total",
    description="Menu catalog mutations by operation",
    unit="1",
)


def record_order_created(order_type: str, total: Decimal) -> None:
    """Record a newly placed order.

    Args:
        order_type: "Pickup" or "Delivery"
        total: Order total including tax
    """
    orders_created_counter.add(1, {"order_type": order_type})
    order_value_histogram.record(float(total), {"order_type": order_type})


def record_status_transition(from_status: str, to_status: str) -> None:
    """Record an accepted status transition."""
    status_transition_counter.add(1, {"from_status": from_status, "to_status": to_status})


def record_rejected_transition(from_status: str, to_status: str) -> None:
    """Record a status transition the workflow refused."""
    rejected_transition_counter.add(1, {"from_status": from_status, "to_status": to_status})


def record_menu_change(operation: str) -> None:
    """Record a menu catalog mutation.

    Args:
        operation: One of "create", "update", "delete"
    """
    menu_change_counter.add(1, {"operation": operation})
