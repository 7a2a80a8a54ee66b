"""FastAPI application for the public ordering and admin endpoints."""

import logging
from typing import Any

from fastapi import Body, Depends, FastAPI, Header, Request
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse
from pydantic import BaseModel
from starlette.exceptions import HTTPException as StarletteHTTPException

from restaurant_ordering_service.auth.api_dependencies import require_admin_key
from restaurant_ordering_service.auth.api_key_validator import AdminKeyValidator
from restaurant_ordering_service.exceptions import (
    InvalidTransitionError,
    NotFoundError,
    ValidationError,
)
from restaurant_ordering_service.models.menu_models import MenuItem
from restaurant_ordering_service.models.order_models import Order
from restaurant_ordering_service.services.menu_service import MenuService
from restaurant_ordering_service.services.order_service import OrderService
from restaurant_ordering_service.services.stats_service import DashboardStats, StatsService

logger = logging.getLogger(__name__)


class HealthResponse(BaseModel):
    """Health check response model."""

    status: str


class DeleteResponse(BaseModel):
    """Response model for deletions."""

    success: bool


def _error(status_code: int, message: str) -> JSONResponse:
    return JSONResponse(status_code=status_code, content={"error": message})


def register_exception_handlers(app: FastAPI) -> None:
    """Translate domain errors into HTTP responses.

    Every error body has the shape ``{"error": "<message>"}``, including the
    HTTP errors raised by dependencies and routing. Unexpected exceptions
    become a generic 500 without internal details.
    """

    @app.exception_handler(ValidationError)
    async def handle_validation_error(request: Request, exc: ValidationError) -> JSONResponse:
        logger.info(f"Validation failed for {request.method} {request.url.path}: {exc.message}")
        return _error(400, exc.message)

    @app.exception_handler(NotFoundError)
    async def handle_not_found(request: Request, exc: NotFoundError) -> JSONResponse:
        logger.info(f"{exc.entity} {exc.entity_id} not found")
        return _error(404, str(exc))

    @app.exception_handler(InvalidTransitionError)
    async def handle_invalid_transition(
        request: Request, exc: InvalidTransitionError
    ) -> JSONResponse:
        return _error(409, str(exc))

    @app.exception_handler(RequestValidationError)
    async def handle_bad_body(request: Request, exc: RequestValidationError) -> JSONResponse:
        logger.info(f"Unreadable request body for {request.method} {request.url.path}")
        return _error(400, "Invalid request body")

    @app.exception_handler(StarletteHTTPException)
    async def handle_http_error(request: Request, exc: StarletteHTTPException) -> JSONResponse:
        return JSONResponse(
            status_code=exc.status_code,
            content={"error": exc.detail},
            headers=getattr(exc, "headers", None),
        )

    @app.exception_handler(Exception)
    async def handle_unexpected(request: Request, exc: Exception) -> JSONResponse:
        logger.exception(f"Unhandled error in {request.method} {request.url.path}: {exc}")
        return _error(500, "Internal server error")


def create_app(
    menu_service: MenuService,
    order_service: OrderService,
    stats_service: StatsService,
    api_keys: list[str],
) -> FastAPI:
    """Create and configure the FastAPI application.

    Args:
        menu_service: Service for the menu catalog
        order_service: Service for checkout and order status
        stats_service: Service for admin dashboard statistics
        api_keys: Accepted admin keys for the admin endpoints

    Returns:
        Configured FastAPI application
    """
    app = FastAPI(
        title="Restaurant Ordering Service API",
        description="Menu, checkout and order management for a single restaurant",
        version="1.0.0",
    )

    # Store services in app state for access in route handlers
    app.state.menu_service = menu_service
    app.state.order_service = order_service
    app.state.stats_service = stats_service
    app.state.admin_key_validator = AdminKeyValidator(api_keys=api_keys)

    register_exception_handlers(app)

    def admin_key(x_api_key: str | None = Header(None)) -> str:
        """Dependency to validate the admin key."""
        return require_admin_key(x_api_key=x_api_key, validator=app.state.admin_key_validator)

    @app.get("/health", response_model=HealthResponse, tags=["Health"])
    def health_check() -> HealthResponse:
        """Health check endpoint."""
        return HealthResponse(status="healthy")

    # ---- Menu ----

    @app.get("/api/menu", response_model=list[MenuItem], tags=["Menu"])
    def list_menu_items(category: str | None = None, available: str | None = None) -> list[MenuItem]:
        """List menu items.

        Args:
            category: Optional category filter, e.g. ``Mains``
            available: Optional ``true``/``false`` availability filter
        """
        available_filter = None if available is None else available.lower() == "true"
        items: list[MenuItem] = app.state.menu_service.list_items(
            category=category, available=available_filter
        )
        return items

    @app.post("/api/menu", response_model=MenuItem, status_code=201, tags=["Menu Admin"])
    def create_menu_item(
        payload: Any = Body(...),
        _api_key: str = Depends(admin_key),
    ) -> MenuItem:
        """Create a menu item."""
        item: MenuItem = app.state.menu_service.create_item(payload)
        return item

    @app.get("/api/menu/{item_id}", response_model=MenuItem, tags=["Menu"])
    def get_menu_item(item_id: str) -> MenuItem:
        """Get a single menu item."""
        item: MenuItem = app.state.menu_service.get_item(item_id)
        return item

    @app.api_route(
        "/api/menu/{item_id}",
        methods=["PUT", "PATCH"],
        response_model=MenuItem,
        tags=["Menu Admin"],
    )
    def update_menu_item(
        item_id: str,
        payload: Any = Body(...),
        _api_key: str = Depends(admin_key),
    ) -> MenuItem:
        """Partially update a menu item. Only supplied fields change."""
        item: MenuItem = app.state.menu_service.update_item(item_id, payload)
        return item

    @app.delete("/api/menu/{item_id}", response_model=DeleteResponse, tags=["Menu Admin"])
    def delete_menu_item(
        item_id: str,
        _api_key: str = Depends(admin_key),
    ) -> DeleteResponse:
        """Permanently delete a menu item."""
        app.state.menu_service.delete_item(item_id)
        return DeleteResponse(success=True)

    # ---- Orders ----

    @app.get(
        "/api/orders",
        response_model=list[Order],
        response_model_exclude_none=True,
        tags=["Orders"],
    )
    def list_orders(status: str | None = None) -> list[Order]:
        """List orders newest first, optionally filtered by status."""
        orders: list[Order] = app.state.order_service.list_orders(status=status)
        return orders

    @app.post(
        "/api/orders",
        response_model=Order,
        response_model_exclude_none=True,
        status_code=201,
        tags=["Orders"],
    )
    def create_order(payload: Any = Body(...)) -> Order:
        """Place an order. Pricing is computed server-side and status starts at Pending."""
        order: Order = app.state.order_service.create_order(payload)
        return order

    @app.get(
        "/api/orders/{order_id}",
        response_model=Order,
        response_model_exclude_none=True,
        tags=["Orders"],
    )
    def get_order(order_id: str) -> Order:
        """Get a single order, used by clients polling for status."""
        order: Order = app.state.order_service.get_order(order_id)
        return order

    @app.patch(
        "/api/orders/{order_id}",
        response_model=Order,
        response_model_exclude_none=True,
        tags=["Orders Admin"],
    )
    def update_order_status(
        order_id: str,
        payload: Any = Body(...),
        _api_key: str = Depends(admin_key),
    ) -> Order:
        """Change an order's status. Body: ``{"status": "Preparing"}``."""
        order: Order = app.state.order_service.update_status(order_id, payload)
        return order

    # ---- Admin ----

    @app.get("/api/admin/stats", response_model=DashboardStats, tags=["Admin"])
    def get_dashboard_stats(_api_key: str = Depends(admin_key)) -> DashboardStats:
        """Dashboard figures for the admin panel."""
        stats: DashboardStats = app.state.stats_service.get_dashboard_stats()
        return stats

    return app
