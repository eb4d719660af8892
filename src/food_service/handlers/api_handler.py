"""FastAPI application for the food API endpoints."""

import logging
from typing import Union

from fastapi import FastAPI, Request
from fastapi.responses import JSONResponse
from pydantic import BaseModel

from food_service.handlers.error_handlers import error_json_response, register_error_handlers
from food_service.models.error_models import ErrorResponse
from food_service.models.food_models import FoodItem
from food_service.services.food_service import FoodService

logger = logging.getLogger(__name__)


class HealthResponse(BaseModel):
    """Health check response model."""

    status: str


def create_app(food_service: FoodService) -> FastAPI:
    """Create and configure the FastAPI application.

    Args:
        food_service: Service answering queries over the loaded catalog

    Returns:
        Configured FastAPI application
    """
    app = FastAPI(
        title="Food Service API",
        description="Read-only API over a fixed menu of food items",
        version="1.0.0",
    )

    # Store the service in app state for access in route handlers
    app.state.food_service = food_service

    register_error_handlers(app)

    @app.get("/health", response_model=HealthResponse, tags=["Health"])
    async def health_check() -> HealthResponse:
        """Health check endpoint.

        Returns:
            Health status indicating service is running
        """
        return HealthResponse(status="healthy")

    @app.get("/api/foods", response_model=list[FoodItem], tags=["Foods"])
    async def get_all_food_items() -> list[FoodItem]:
        """Get every food item on the menu."""
        foods: list[FoodItem] = app.state.food_service.get_all_food_items()
        return foods

    # Registered before /{food_id} so "search" is never parsed as an id
    @app.get("/api/foods/search", response_model=list[FoodItem], tags=["Foods"])
    async def search_food_items_by_name(name: str | None = None) -> list[FoodItem]:
        """Search food items by name.

        Args:
            name: Case-insensitive text the item name must contain

        Returns:
            Matching food items, empty if name is missing or blank
        """
        foods: list[FoodItem] = app.state.food_service.search_food_items_by_name(name)
        return foods

    @app.get(
        "/api/foods/{food_id}",
        response_model=FoodItem,
        responses={404: {"model": ErrorResponse}},
        tags=["Foods"],
    )
    async def get_food_item_by_id(
        food_id: int, request: Request
    ) -> Union[FoodItem, JSONResponse]:
        """Get a single food item by id.

        Args:
            food_id: The food item id

        Returns:
            The food item, or a 404 error payload if no item has that id
        """
        result = app.state.food_service.get_food_item_by_id(food_id)

        if not result.found:
            logger.info(result.error_message)
            return error_json_response(404, result.error_message, request.url.path)

        return result.food

    return app
