"""Query service over the in-memory food catalog."""

import logging
from dataclasses import dataclass

from food_service.models.food_models import FoodItem, FoodMenu
from food_service.observability import traced
from food_service.observability.metrics import record_lookup, record_search

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class FoodLookupResult:
    """Result of looking up a food item by id.

    Attributes:
        food: The matching item, None if no item matched
        error_message: Not-found message if no item matched, None otherwise
    """

    food: FoodItem | None = None
    error_message: str | None = None

    @property
    def found(self) -> bool:
        """Whether a matching item was found."""
        return self.food is not None


class FoodService:
    """Read-only queries over a loaded food catalog.

    The catalog is injected once at construction and never modified, so a
    single instance can serve any number of concurrent requests.

    Expected misses are reported through return values rather than
    exceptions: an unknown id yields a FoodLookupResult carrying the
    not-found message, and blank searches yield an empty list.
    """

    def __init__(self, food_menu: FoodMenu) -> None:
        """Initialize the FoodService.

        Args:
            food_menu: The catalog produced by the menu loader
        """
        self._food_menu = food_menu

    @traced("get_all_food_items")
    def get_all_food_items(self) -> list[FoodItem]:
        """Get all food items.

        Returns:
            Every item in the catalog, in source order
        """
        return list(self._food_menu.food_list)

    @traced("get_food_item_by_id")
    def get_food_item_by_id(self, food_id: int) -> FoodLookupResult:
        """Get the first food item with the given id.

        Args:
            food_id: The id to look up

        Returns:
            FoodLookupResult holding the item, or the not-found message
        """
        for food in self._food_menu.food_list:
            if food.id == food_id:
                record_lookup(found=True)
                return FoodLookupResult(food=food)

        record_lookup(found=False)
        return FoodLookupResult(error_message=f"Food item not found with id: {food_id}")

    @traced("search_food_items_by_name")
    def search_food_items_by_name(self, name: str | None) -> list[FoodItem]:
        """Search food items by name (case-insensitive partial match).

        Args:
            name: Text to search for; None or blank returns no items

        Returns:
            Items whose name contains the search term, in source order
        """
        if name is None or not name.strip():
            record_search(0)
            return []

        search_term = name.strip().lower()
        matches = [
            food
            for food in self._food_menu.food_list
            if food.name is not None and search_term in food.name.lower()
        ]

        logger.debug(f"Search for '{search_term}' matched {len(matches)} items")
        record_search(len(matches))
        return matches
