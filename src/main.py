"""Main application entry point for the restaurant ordering service.

This module provides the FastAPI application factory and configuration
for running the service locally or in production.
"""

import logging
import os

from fastapi import FastAPI

from restaurant_ordering_service.handlers.api_handler import create_app
from restaurant_ordering_service.observability import configure_logging, setup_observability
from restaurant_ordering_service.repositories.ordering_repositories import (
    MenuItemRepository,
    OrderRepository,
)
from restaurant_ordering_service.repositories.seed_data import (
    load_seed_menu_items,
    load_seed_orders,
)
from restaurant_ordering_service.services.menu_service import MenuService
from restaurant_ordering_service.services.order_service import OrderService
from restaurant_ordering_service.services.stats_service import StatsService

logger = logging.getLogger(__name__)

DEVELOPMENT_ADMIN_KEY = "admin123"


def get_admin_api_keys() -> list[str]:
    """Read the accepted admin keys from ADMIN_API_KEY (comma separated).

    Returns:
        Configured keys, or the development key when none are set
    """
    api_keys_str = os.getenv("ADMIN_API_KEY", "")
    api_keys = [key.strip() for key in api_keys_str.split(",") if key.strip()]

    if not api_keys:
        logger.warning("No ADMIN_API_KEY configured - using development admin key")
        api_keys = [DEVELOPMENT_ADMIN_KEY]

    return api_keys


def create_repositories() -> tuple[MenuItemRepository, OrderRepository]:
    """Create the in-memory stores loaded with seed data.

    All state lives in process memory and is reset to the seed data on
    every start.

    Returns:
        Tuple of (menu repository, order repository)
    """
    menu_repository = MenuItemRepository(load_seed_menu_items())
    order_repository = OrderRepository(load_seed_orders())
    return menu_repository, order_repository


def create_application() -> FastAPI:
    """Create and configure the FastAPI application with all dependencies.

    This factory function:
    1. Configures logging
    2. Creates the seeded in-memory repositories
    3. Creates services
    4. Creates the FastAPI app with public and admin endpoints
    5. Sets up observability when OTEL_ENABLED is true

    Returns:
        Configured FastAPI application instance
    """
    log_level = os.getenv("LOG_LEVEL", "INFO")
    configure_logging(log_level)

    logger.info("Initializing restaurant ordering service...")

    menu_repository, order_repository = create_repositories()
    logger.info("In-memory stores loaded with seed data")

    menu_service = MenuService(menu_repository=menu_repository)
    order_service = OrderService(order_repository=order_repository)
    stats_service = StatsService(
        menu_repository=menu_repository, order_repository=order_repository
    )

    logger.info("Services initialized")

    app = create_app(
        menu_service=menu_service,
        order_service=order_service,
        stats_service=stats_service,
        api_keys=get_admin_api_keys(),
    )

    if os.getenv("OTEL_ENABLED", "false").lower() == "true":
        setup_observability(app)

    logger.info("Restaurant ordering service initialized successfully")

    return app


# Create the FastAPI application instance (only when not in test mode)
# This prevents the app from being created during test collection
if os.getenv("ENVIRONMENT") != "test":  # noqa: SIM108
    app = create_application()
else:
    # Create a placeholder app for test imports
    app = FastAPI()


if __name__ == "__main__":
    """Run the application with uvicorn when executed directly."""
    import uvicorn

    port = int(os.getenv("PORT", "8000"))
    host = os.getenv("HOST", "0.0.0.0")

    logger.info(f"Starting development server on {host}:{port}")
    logger.info(f"API documentation available at http://{host}:{port}/docs")

    uvicorn.run(
        "main:app",
        host=host,
        port=port,
        reload=True,
        log_level=os.getenv("LOG_LEVEL", "info").lower(),
    )
