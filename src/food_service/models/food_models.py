"""Food menu data models.

These models represent the food items served by the API and the in-memory
catalog they are loaded into. Both are frozen: once the catalog is built at
startup it is shared read-only across all requests.
"""

from pydantic import BaseModel, ConfigDict, Field


class FoodItem(BaseModel):
    """A single menu entry."""

    model_config = ConfigDict(frozen=True)

    id: int | None = Field(None, description="Identifier of the food item")
    name: str | None = Field(None, description="Item name")
    price: str | None = Field(None, description="Display price, e.g. '$5.95'")
    description: str | None = Field(None, description="Item description")
    calories: int | None = Field(None, description="Calories per serving")


class FoodMenu(BaseModel):
    """Immutable catalog of food items in source-document order."""

    model_config = ConfigDict(frozen=True)

    food_list: tuple[FoodItem, ...] = Field(
        default=(), description="Food items in the order they appear in the source"
    )

    @property
    def size(self) -> int:
        """Number of items in the catalog."""
        return len(self.food_list)

    @classmethod
    def empty(cls) -> "FoodMenu":
        """Create a catalog with no items.

        Returns:
            FoodMenu: Empty catalog
        """
        return cls(food_list=())
