"""Shared dependency factory for the Lambda handler.

This module provides cached dependency initialization to optimize Lambda cold starts.
The catalog is loaded once per container and reused across invocations.
"""

import logging
import os

from fastapi import FastAPI

from food_service.handlers.api_handler import create_app
from food_service.loaders.menu_loader import load_food_menu
from food_service.models.food_models import FoodMenu
from food_service.observability import configure_logging
from food_service.services.food_service import FoodService

logger = logging.getLogger(__name__)

# Module-level caches for Lambda container reuse
_food_menu: FoodMenu | None = None
_food_service: FoodService | None = None
_fastapi_app: FastAPI | None = None


def get_food_menu() -> FoodMenu:
    """Load or retrieve the cached food catalog.

    Returns:
        The catalog loaded from FOOD_DATA_FILE_PATH
    """
    global _food_menu

    if _food_menu is not None:
        return _food_menu

    _food_menu = load_food_menu()

    logger.info(f"Food catalog loaded with {_food_menu.size} items")
    return _food_menu


def get_food_service() -> FoodService:
    """Create or retrieve cached food service.

    Returns:
        Configured FoodService instance
    """
    global _food_service

    if _food_service is not None:
        return _food_service

    _food_service = FoodService(food_menu=get_food_menu())

    logger.info("Food service initialized")
    return _food_service


def get_fastapi_app() -> FastAPI:
    """Create or retrieve cached FastAPI application.

    Returns:
        Configured FastAPI application instance
    """
    global _fastapi_app

    if _fastapi_app is not None:
        return _fastapi_app

    _fastapi_app = create_app(food_service=get_food_service())

    logger.info("FastAPI application initialized")
    return _fastapi_app


def initialize_lambda_environment() -> None:
    """Initialize Lambda environment with logging.

    Should be called once during Lambda cold start.
    """
    log_level = os.getenv("LOG_LEVEL", "INFO")
    configure_logging(log_level)

    logger.info("Lambda environment initialized")
