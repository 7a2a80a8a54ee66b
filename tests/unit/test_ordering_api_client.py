"""Unit tests for OrderingApiClient."""

from decimal import Decimal
from typing import Any
from unittest.mock import AsyncMock, MagicMock, patch

import httpx
import pytest

from restaurant_ordering_service.exceptions import ValidationError
from restaurant_ordering_service.models.order_models import OrderStatus
from restaurant_ordering_service.services.ordering_api_client import OrderingApiClient

SLEEP_PATH = "restaurant_ordering_service.services.ordering_api_client.asyncio.sleep"


def _order_json(status: str = "Pending") -> dict[str, Any]:
    return {
        "id": "ORD-009",
        "customerName": "Jane Doe",
        "email": "jane@example.com",
        "phone": "555-0199",
        "orderType": "Pickup",
        "items": [
            {"menuItemId": "menu-5", "name": "Margherita Pizza", "price": 14.99, "quantity": 1}
        ],
        "subtotal": 14.99,
        "tax": 1.5,
        "total": 16.49,
        "status": status,
        "createdAt": "2026-10-19T18:30:00Z",
    }


def _response(payload: Any) -> MagicMock:
    mock_response = MagicMock()
    mock_response.status_code = 200
    mock_response.json.return_value = payload
    return mock_response


def _error_response(status_code: int) -> MagicMock:
    mock_response = MagicMock()
    mock_response.status_code = status_code
    mock_response.text = '{"error": "Order not found"}'
    mock_response.raise_for_status.side_effect = httpx.HTTPStatusError(
        "Request failed", request=MagicMock(), response=mock_response
    )
    return mock_response


@pytest.mark.unit
class TestOrderingApiClient:
    """Test suite for OrderingApiClient."""

    @pytest.fixture
    def client(self) -> OrderingApiClient:
        """Create an OrderingApiClient with test configuration."""
        return OrderingApiClient(base_url="https://orders.test.com/")

    def test_client_initialization(self, client: OrderingApiClient) -> None:
        """Test that the trailing slash is dropped from the base URL."""
        assert client.base_url == "https://orders.test.com"
        assert client.timeout_seconds == 10.0

    @pytest.mark.asyncio
    async def test_get_menu_success(self, client: OrderingApiClient) -> None:
        """Test fetching and parsing menu items."""
        mock_get = AsyncMock(
            return_value=_response(
                [
                    {
                        "id": "menu-14",
                        "name": "Espresso",
                        "description": "Double-shot Italian roast",
                        "price": 3.99,
                        "category": "Drinks",
                        "image": "https://example.com/espresso.jpg",
                        "available": True,
                    }
                ]
            )
        )

        with patch("httpx.AsyncClient.get", mock_get):
            items = await client.get_menu(category="Drinks", available=True)

        assert len(items) == 1
        assert items[0].price == Decimal("3.99")
        assert mock_get.call_args.args[0] == "https://orders.test.com/api/menu"
        assert mock_get.call_args.kwargs["params"] == {"category": "Drinks", "available": "true"}

    @pytest.mark.asyncio
    async def test_get_menu_without_filters(self, client: OrderingApiClient) -> None:
        """Test that no query parameters are sent without filters."""
        mock_get = AsyncMock(return_value=_response([]))

        with patch("httpx.AsyncClient.get", mock_get):
            items = await client.get_menu()

        assert items == []
        assert mock_get.call_args.kwargs["params"] == {}

    @pytest.mark.asyncio
    async def test_get_menu_network_error(self, client: OrderingApiClient) -> None:
        """Test that network errors return None."""
        with patch(
            "httpx.AsyncClient.get",
            new_callable=AsyncMock,
            side_effect=httpx.RequestError("Connection failed", request=MagicMock()),
        ):
            items = await client.get_menu()

        assert items is None

    @pytest.mark.asyncio
    async def test_create_order_success(
        self, client: OrderingApiClient, pickup_order_payload: dict[str, Any]
    ) -> None:
        """Test submitting an order and parsing the server-priced response."""
        mock_post = AsyncMock(return_value=_response(_order_json()))

        with patch("httpx.AsyncClient.post", mock_post):
            order = await client.create_order(pickup_order_payload)

        assert order.id == "ORD-009"
        assert order.total == Decimal("16.49")
        assert mock_post.call_args.kwargs["json"] == pickup_order_payload

    @pytest.mark.asyncio
    async def test_create_order_rejected(
        self, client: OrderingApiClient, pickup_order_payload: dict[str, Any]
    ) -> None:
        """Test that a 400 response returns None."""
        with patch(
            "httpx.AsyncClient.post", new_callable=AsyncMock, return_value=_error_response(400)
        ):
            order = await client.create_order(pickup_order_payload)

        assert order is None

    @pytest.mark.asyncio
    async def test_create_order_invalid_form_is_not_sent(
        self, client: OrderingApiClient, pickup_order_payload: dict[str, Any]
    ) -> None:
        """Test that checkout form errors are raised together before any request."""
        mock_post = AsyncMock(return_value=_response(_order_json()))
        payload = {**pickup_order_payload, "email": "jane.example.com", "phone": "55"}

        with patch("httpx.AsyncClient.post", mock_post):
            with pytest.raises(ValidationError) as exc_info:
                await client.create_order(payload)

        assert exc_info.value.errors == [
            "email: Please enter a valid email address",
            "phone: Please enter a valid phone number",
        ]
        mock_post.assert_not_called()

    @pytest.mark.asyncio
    async def test_get_order_not_found(self, client: OrderingApiClient) -> None:
        """Test that a 404 returns None."""
        with patch(
            "httpx.AsyncClient.get", new_callable=AsyncMock, return_value=_error_response(404)
        ):
            order = await client.get_order("ORD-404")

        assert order is None


@pytest.mark.unit
class TestPollOrderStatus:
    """Test suite for order status polling."""

    @pytest.fixture
    def client(self) -> OrderingApiClient:
        """Create an OrderingApiClient with test configuration."""
        return OrderingApiClient(base_url="https://orders.test.com")

    @pytest.mark.asyncio
    async def test_stops_at_terminal_status(self, client: OrderingApiClient) -> None:
        """Test that polling ends once the order is completed."""
        responses = [
            _response(_order_json("Pending")),
            _response(_order_json("Preparing")),
            _response(_order_json("Completed")),
        ]

        with (
            patch("httpx.AsyncClient.get", new_callable=AsyncMock, side_effect=responses) as mock_get,
            patch(SLEEP_PATH, new_callable=AsyncMock) as mock_sleep,
        ):
            order = await client.poll_order_status("ORD-009", interval_seconds=5)

        assert order.status == OrderStatus.COMPLETED
        assert mock_get.call_count == 3
        assert mock_sleep.await_count == 2
        mock_sleep.assert_awaited_with(5)

    @pytest.mark.asyncio
    async def test_cancelled_is_terminal(self, client: OrderingApiClient) -> None:
        """Test that a cancelled order is not polled again."""
        with (
            patch(
                "httpx.AsyncClient.get",
                new_callable=AsyncMock,
                return_value=_response(_order_json("Cancelled")),
            ) as mock_get,
            patch(SLEEP_PATH, new_callable=AsyncMock) as mock_sleep,
        ):
            order = await client.poll_order_status("ORD-009")

        assert order.status == OrderStatus.CANCELLED
        assert mock_get.call_count == 1
        mock_sleep.assert_not_awaited()

    @pytest.mark.asyncio
    async def test_gives_up_after_max_polls(self, client: OrderingApiClient) -> None:
        """Test the polling limit with the last observed order returned."""
        with (
            patch(
                "httpx.AsyncClient.get",
                new_callable=AsyncMock,
                return_value=_response(_order_json("Preparing")),
            ) as mock_get,
            patch(SLEEP_PATH, new_callable=AsyncMock) as mock_sleep,
        ):
            order = await client.poll_order_status("ORD-009", max_polls=3)

        assert order.status == OrderStatus.PREPARING
        assert mock_get.call_count == 3
        assert mock_sleep.await_count == 2

    @pytest.mark.asyncio
    async def test_fetch_failure_returns_last_seen(self, client: OrderingApiClient) -> None:
        """Test that a failed fetch ends polling with the previous result."""
        responses = [
            _response(_order_json("Ready")),
            httpx.RequestError("Connection failed", request=MagicMock()),
        ]

        with (
            patch("httpx.AsyncClient.get", new_callable=AsyncMock, side_effect=responses),
            patch(SLEEP_PATH, new_callable=AsyncMock),
        ):
            order = await client.poll_order_status("ORD-009")

        assert order.status == OrderStatus.READY

    @pytest.mark.asyncio
    async def test_unknown_order_returns_none(self, client: OrderingApiClient) -> None:
        """Test polling an order that does not exist."""
        with patch(
            "httpx.AsyncClient.get", new_callable=AsyncMock, return_value=_error_response(404)
        ):
            order = await client.poll_order_status("ORD-404")

        assert order is None
