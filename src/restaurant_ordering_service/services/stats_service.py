"""Dashboard statistics for the admin panel."""

from collections.abc import Callable
from datetime import UTC, datetime
from decimal import Decimal

from pydantic import Field

from restaurant_ordering_service.models.common import CamelModel, Money, round_money
from restaurant_ordering_service.models.order_models import Order, OrderStatus
from restaurant_ordering_service.repositories.ordering_repositories import (
    MenuItemRepository,
    OrderRepository,
)

ACTIVE_STATUSES = frozenset({OrderStatus.PENDING, OrderStatus.PREPARING})
RECENT_ORDER_LIMIT = 10
POPULAR_ITEM_LIMIT = 5


def _utc_now() -> datetime:
    return datetime.now(UTC)


class PopularItem(CamelModel):
    """Quantity sold and revenue for one menu item."""

    item_id: str
    name: str
    count: int
    revenue: Money


class DashboardStats(CamelModel):
    """Aggregated order and menu figures for the admin dashboard."""

    total_orders: int
    today_orders: int
    total_revenue: Money
    today_revenue: Money
    active_orders: int
    total_menu_items: int
    available_items: int
    recent_orders: list[Order] = Field(default_factory=list)
    popular_items: list[PopularItem] = Field(default_factory=list)


def _revenue(orders: list[Order]) -> Decimal:
    return round_money(sum((order.total for order in orders), Decimal("0")))


class StatsService:
    """Computes dashboard statistics from the current store contents.

    Revenue and popular items ignore cancelled orders. "Today" starts at
    midnight UTC.
    """

    def __init__(
        self,
        menu_repository: MenuItemRepository,
        order_repository: OrderRepository,
        clock: Callable[[], datetime] = _utc_now,
    ) -> None:
        self.menu_repository = menu_repository
        self.order_repository = order_repository
        self.clock = clock

    def get_dashboard_stats(self) -> DashboardStats:
        """Build the dashboard statistics snapshot."""
        orders = self.order_repository.list_orders()
        menu_items = self.menu_repository.list_items()

        start_of_day = self.clock().replace(hour=0, minute=0, second=0, microsecond=0)

        non_cancelled = [o for o in orders if o.status != OrderStatus.CANCELLED]
        today_orders = [o for o in orders if o.created_at >= start_of_day]
        today_non_cancelled = [o for o in today_orders if o.status != OrderStatus.CANCELLED]

        return DashboardStats(
            total_orders=len(orders),
            today_orders=len(today_orders),
            total_revenue=_revenue(non_cancelled),
            today_revenue=_revenue(today_non_cancelled),
            active_orders=sum(1 for o in orders if o.status in ACTIVE_STATUSES),
            total_menu_items=len(menu_items),
            available_items=sum(1 for item in menu_items if item.available),
            recent_orders=orders[:RECENT_ORDER_LIMIT],
            popular_items=self._popular_items(non_cancelled),
        )

    def _popular_items(self, orders: list[Order]) -> list[PopularItem]:
        totals: dict[str, PopularItem] = {}

        for order in orders:
            for item in order.items:
                entry = totals.setdefault(
                    item.menu_item_id,
                    PopularItem(item_id=item.menu_item_id, name=item.name, count=0, revenue=Decimal("0")),
                )
                entry.count += item.quantity
                entry.revenue += item.price * item.quantity

        # sorted() is stable, so ties keep first-seen order
        ranked = sorted(totals.values(), key=lambda entry: entry.count, reverse=True)
        return ranked[:POPULAR_ITEM_LIMIT]
