"""Main application entry point for the food service.

This module provides the FastAPI application factory and configuration
for running the service locally or in production.
"""

import logging
import os

from fastapi import FastAPI

from food_service.handlers.api_handler import create_app
from food_service.loaders.menu_loader import get_food_data_file_path, load_food_menu
from food_service.observability import configure_logging, setup_observability
from food_service.services.food_service import FoodService

logger = logging.getLogger(__name__)


def create_application() -> FastAPI:
    """Create and configure the FastAPI application with all dependencies.

    This factory function:
    1. Configures logging
    2. Loads the food catalog once
    3. Creates the query service over the catalog
    4. Creates FastAPI app with the food endpoints
    5. Sets up observability when enabled

    Returns:
        Configured FastAPI application instance
    """
    log_level = os.getenv("LOG_LEVEL", "INFO")
    configure_logging(log_level)

    logger.info("Initializing food service...")

    food_menu = load_food_menu()
    food_service = FoodService(food_menu=food_menu)

    logger.info(f"Food service initialized with {food_menu.size} items")

    app = create_app(food_service=food_service)

    if os.getenv("ENABLE_OBSERVABILITY", "false").lower() == "true":
        setup_observability(app, catalog_source=get_food_data_file_path())

    logger.info("Food service initialized successfully")

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

    port = int(os.getenv("PORT", "8080"))
    host = os.getenv("HOST", "0.0.0.0")
    ssl_certfile = os.getenv("SSL_CERTFILE")
    ssl_keyfile = os.getenv("SSL_KEYFILE")
    scheme = "https" if ssl_certfile and ssl_keyfile else "http"

    logger.info(f"Starting development server on {host}:{port}")
    logger.info(f"API documentation available at {scheme}://{host}:{port}/docs")

    uvicorn.run(
        "main:app",
        host=host,
        port=port,
        reload=True,
        log_level=os.getenv("LOG_LEVEL", "info").lower(),
        ssl_certfile=ssl_certfile if scheme == "https" else None,
        ssl_keyfile=ssl_keyfile if scheme == "https" else None,
    )
