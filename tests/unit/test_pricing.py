"""Unit tests for the pricing engine."""

from decimal import Decimal

import pytest

from restaurant_ordering_service.models.order_models import OrderItem
from restaurant_ordering_service.repositories.seed_data import load_seed_orders
from restaurant_ordering_service.services.pricing import (
    TAX_RATE,
    PricingSummary,
    calculate_subtotal,
    calculate_tax,
    calculate_total,
    price_items,
)


def _item(price: float, quantity: int, menu_item_id: str = "menu-1") -> OrderItem:
    return OrderItem(menu_item_id=menu_item_id, name="Item", price=price, quantity=quantity)


@pytest.mark.unit
class TestPricingFunctions:
    """Test suite for the individual pricing functions."""

    def test_tax_rate_is_ten_percent(self) -> None:
        """Test the configured tax rate."""
        assert TAX_RATE == Decimal("0.10")

    def test_subtotal_sums_price_times_quantity(self) -> None:
        """Test subtotal across several lines."""
        items = [_item(14.99, 2), _item(4.99, 1)]

        assert calculate_subtotal(items) == Decimal("34.97")

    def test_subtotal_of_empty_list_is_zero(self) -> None:
        """Test that no items price to zero."""
        assert calculate_subtotal([]) == Decimal("0")

    def test_tax_rounds_half_up(self) -> None:
        """Test that 3.497 rounds to 3.50 and 1.499 to 1.50."""
        assert calculate_tax(Decimal("34.97")) == Decimal("3.50")
        assert calculate_tax(Decimal("14.99")) == Decimal("1.50")

    def test_tax_rounds_exact_half_cent_up(self) -> None:
        """Test that a tax of exactly x.xx5 rounds up."""
        assert calculate_tax(Decimal("53.45")) == Decimal("5.35")

    def test_total_adds_subtotal_and_tax(self) -> None:
        """Test total rounding."""
        assert calculate_total(Decimal("34.97"), Decimal("3.50")) == Decimal("38.47")

    def test_functions_accept_floats(self) -> None:
        """Test that float inputs do not leak binary noise into results."""
        assert calculate_tax(0.1 + 0.2) == Decimal("0.03")
        assert calculate_total(14.99, 1.5) == Decimal("16.49")


@pytest.mark.unit
class TestPriceItems:
    """Test suite for price_items."""

    def test_documented_example(self) -> None:
        """Test two pizzas and a lemonade."""
        summary = price_items([_item(14.99, 2), _item(4.99, 1)])

        assert summary == PricingSummary(
            subtotal=Decimal("34.97"), tax=Decimal("3.50"), total=Decimal("38.47")
        )

    def test_single_pizza(self) -> None:
        """Test one Margherita Pizza."""
        summary = price_items([_item(14.99, 1)])

        assert summary.subtotal == Decimal("14.99")
        assert summary.tax == Decimal("1.50")
        assert summary.total == Decimal("16.49")

    def test_empty_items(self) -> None:
        """Test that an empty list prices to zero everywhere."""
        summary = price_items([])

        assert summary.subtotal == 0
        assert summary.tax == 0
        assert summary.total == 0

    @pytest.mark.parametrize(
        "lines",
        [
            [(0.01, 1)],
            [(3.49, 2), (17.99, 1), (10.99, 1)],
            [(6.49, 3), (16.99, 2)],
            [(99.99, 7), (0.05, 13), (1.15, 3)],
            [(8.99, 2), (18.99, 1)],
        ],
    )
    def test_invariants_hold(self, lines: list[tuple[float, int]]) -> None:
        """Test tax and total invariants over a spread of carts."""
        items = [_item(price, qty, f"menu-{i}") for i, (price, qty) in enumerate(lines)]

        summary = price_items(items)

        expected_subtotal = sum(Decimal(str(p)) * q for p, q in lines)
        assert summary.subtotal == expected_subtotal
        assert summary.tax == (summary.subtotal * Decimal("0.10")).quantize(
            Decimal("0.01"), rounding="ROUND_HALF_UP"
        )
        assert summary.total == (summary.subtotal + summary.tax).quantize(Decimal("0.01"))

    def test_seed_orders_satisfy_invariants(self) -> None:
        """Test that every seed order matches its published totals."""
        expected = {
            "ORD-001": ("34.97", "3.50", "38.47"),
            "ORD-002": ("26.98", "2.70", "29.68"),
            "ORD-003": ("39.97", "4.00", "43.97"),
            "ORD-004": ("36.97", "3.70", "40.67"),
            "ORD-005": ("35.96", "3.60", "39.56"),
            "ORD-006": ("25.98", "2.60", "28.58"),
            "ORD-007": ("53.45", "5.35", "58.80"),
            "ORD-008": ("30.98", "3.10", "34.08"),
        }

        for order in load_seed_orders():
            subtotal, tax, total = expected[order.id]
            assert order.subtotal == Decimal(subtotal)
            assert order.tax == Decimal(tax)
            assert order.total == Decimal(total)
