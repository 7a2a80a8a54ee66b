"""Unit tests for StatsService."""

from datetime import datetime, timedelta
from decimal import Decimal

import pytest

from restaurant_ordering_service.repositories.ordering_repositories import (
    MenuItemRepository,
    OrderRepository,
)
from restaurant_ordering_service.services.stats_service import StatsService


@pytest.fixture
def stats_service(
    menu_repository: MenuItemRepository,
    order_repository: OrderRepository,
    fixed_now: datetime,
) -> StatsService:
    """Fixture providing a StatsService over the seed data at a fixed time."""
    return StatsService(menu_repository, order_repository, clock=lambda: fixed_now)


@pytest.mark.unit
class TestDashboardStats:
    """Test suite for StatsService.get_dashboard_stats."""

    def test_counts_over_seed_data(self, stats_service: StatsService) -> None:
        """Test order and menu counts."""
        stats = stats_service.get_dashboard_stats()

        assert stats.total_orders == 8
        assert stats.today_orders == 8
        assert stats.active_orders == 4
        assert stats.total_menu_items == 16
        assert stats.available_items == 16

    def test_revenue_excludes_cancelled_orders(self, stats_service: StatsService) -> None:
        """Test that the cancelled seed order does not count toward revenue."""
        stats = stats_service.get_dashboard_stats()

        assert stats.total_revenue == Decimal("279.73")
        assert stats.today_revenue == Decimal("279.73")

    def test_today_starts_at_midnight(
        self,
        menu_repository: MenuItemRepository,
        order_repository: OrderRepository,
        fixed_now: datetime,
    ) -> None:
        """Test that orders from the previous day are not counted as today."""
        service = StatsService(
            menu_repository, order_repository, clock=lambda: fixed_now + timedelta(days=1)
        )

        stats = service.get_dashboard_stats()

        assert stats.total_orders == 8
        assert stats.today_orders == 0
        assert stats.today_revenue == Decimal("0")

    def test_recent_orders_newest_first(self, stats_service: StatsService) -> None:
        """Test the recent orders list."""
        stats = stats_service.get_dashboard_stats()

        assert len(stats.recent_orders) == 8
        assert stats.recent_orders[0].id == "ORD-007"

    def test_recent_orders_capped_at_ten(
        self,
        stats_service: StatsService,
        order_repository: OrderRepository,
        fixed_now: datetime,
    ) -> None:
        """Test that at most ten recent orders are returned."""
        template = order_repository.get_order("ORD-006").model_dump(exclude={"id"})
        for _ in range(4):
            order_repository.add_order({**template, "created_at": fixed_now})

        stats = stats_service.get_dashboard_stats()

        assert stats.total_orders == 12
        assert len(stats.recent_orders) == 10

    def test_popular_items_ranked_by_quantity(self, stats_service: StatsService) -> None:
        """Test the top five items, ties keeping first-seen order."""
        stats = stats_service.get_dashboard_stats()

        assert [item.item_id for item in stats.popular_items] == [
            "menu-2",
            "menu-7",
            "menu-5",
            "menu-16",
            "menu-1",
        ]
        pizza = stats.popular_items[2]
        assert pizza.name == "Margherita Pizza"
        assert pizza.count == 3
        assert pizza.revenue == Decimal("44.97")

    def test_stats_reflect_menu_changes(
        self, stats_service: StatsService, menu_repository: MenuItemRepository
    ) -> None:
        """Test that menu counts are computed at request time."""
        menu_repository.update_item("menu-1", {"available": False})
        menu_repository.delete_item("menu-2")

        stats = stats_service.get_dashboard_stats()

        assert stats.total_menu_items == 15
        assert stats.available_items == 14

    def test_empty_stores(self, fixed_now: datetime) -> None:
        """Test statistics with no data at all."""
        service = StatsService(MenuItemRepository(), OrderRepository(), clock=lambda: fixed_now)

        stats = service.get_dashboard_stats()

        assert stats.total_orders == 0
        assert stats.total_revenue == Decimal("0")
        assert stats.recent_orders == []
        assert stats.popular_items == []

    def test_json_shape(self, stats_service: StatsService) -> None:
        """Test that the stats serialize with camelCase keys."""
        data = stats_service.get_dashboard_stats().model_dump(mode="json", by_alias=True)

        assert data["totalRevenue"] == 279.73
        assert data["popularItems"][0]["itemId"] == "menu-2"
        assert data["recentOrders"][0]["customerName"] == "Amy Thompson"
