"""Unit tests for food data models."""

import pytest
from pydantic import ValidationError

from food_service.models.food_models import FoodItem, FoodMenu


@pytest.mark.unit
class TestFoodItem:
    """Test suite for FoodItem model."""

    def test_create_food_item_with_all_fields(self, palak_paneer: FoodItem) -> None:
        """Test creating a food item with every field set."""
        assert palak_paneer.id == 1
        assert palak_paneer.name == "Palak paneer"
        assert palak_paneer.price == "$5.95"
        assert palak_paneer.calories == 650

    def test_optional_fields_default_to_none(self) -> None:
        """Test that omitted fields are None."""
        food = FoodItem(id=7)

        assert food.name is None
        assert food.price is None
        assert food.description is None
        assert food.calories is None

    def test_price_is_kept_as_text(self) -> None:
        """Test that price is a display string, not a number."""
        food = FoodItem(id=1, price="$5.95")

        assert food.price == "$5.95"

    def test_food_item_is_immutable(self, palak_paneer: FoodItem) -> None:
        """Test that a food item cannot be modified after creation."""
        with pytest.raises(ValidationError):
            palak_paneer.name = "Changed"  # type: ignore[misc]

    def test_serializes_to_expected_shape(self) -> None:
        """Test that serialization includes every field, null when absent."""
        food = FoodItem(id=3, name="Idli")

        assert food.model_dump() == {
            "id": 3,
            "name": "Idli",
            "price": None,
            "description": None,
            "calories": None,
        }

    def test_equal_items_compare_equal(self, palak_paneer: FoodItem) -> None:
        """Test value equality between items with the same fields."""
        copy = FoodItem(**palak_paneer.model_dump())

        assert copy == palak_paneer


@pytest.mark.unit
class TestFoodMenu:
    """Test suite for FoodMenu model."""

    def test_preserves_item_order(self, palak_paneer: FoodItem, biryani: FoodItem) -> None:
        """Test that items keep the order they were given in."""
        menu = FoodMenu(food_list=(biryani, palak_paneer))

        assert [food.id for food in menu.food_list] == [2, 1]

    def test_size(self, food_menu: FoodMenu) -> None:
        """Test that size counts the items."""
        assert food_menu.size == 2

    def test_empty(self) -> None:
        """Test creating an empty catalog."""
        menu = FoodMenu.empty()

        assert menu.food_list == ()
        assert menu.size == 0

    def test_list_input_is_stored_as_tuple(self, palak_paneer: FoodItem) -> None:
        """Test that a list of items is converted to an immutable tuple."""
        menu = FoodMenu(food_list=[palak_paneer])  # type: ignore[arg-type]

        assert isinstance(menu.food_list, tuple)

    def test_food_menu_is_immutable(self, food_menu: FoodMenu) -> None:
        """Test that the catalog cannot be replaced after creation."""
        with pytest.raises(ValidationError):
            food_menu.food_list = ()  # type: ignore[misc]
