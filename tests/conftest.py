"""Shared pytest fixtures and configuration for all tests."""

import os

# Must be set before test modules import src.main / src.lambda_handler
os.environ["ENVIRONMENT"] = "test"

import pytest  # noqa: E402

from food_service.models.food_models import FoodItem, FoodMenu  # noqa: E402
from food_service.services.food_service import FoodService  # noqa: E402


@pytest.fixture
def palak_paneer() -> FoodItem:
    """Fixture providing the Palak paneer menu item."""
    return FoodItem(
        id=1,
        name="Palak paneer",
        price="$5.95",
        description="Fresh spinach leaves (palak) cooked with cubes of Paneer cheese",
        calories=650,
    )


@pytest.fixture
def biryani() -> FoodItem:
    """Fixture providing the Biryani menu item."""
    return FoodItem(
        id=2,
        name="Biryani",
        price="$7.95",
        description="A fragrant and flavorful Indian rice dish",
        calories=900,
    )


@pytest.fixture
def food_menu(palak_paneer: FoodItem, biryani: FoodItem) -> FoodMenu:
    """Fixture providing a two-item catalog."""
    return FoodMenu(food_list=(palak_paneer, biryani))


@pytest.fixture
def food_service(food_menu: FoodMenu) -> FoodService:
    """Fixture providing a FoodService over the two-item catalog."""
    return FoodService(food_menu=food_menu)


@pytest.fixture
def menu_xml() -> bytes:
    """Fixture providing a well-formed two-item menu document."""
    return b"""<?xml version="1.0" encoding="UTF-8"?>
<breakfast_menu>
    <food>
        <id>1</id>
        <name>Palak paneer</name>
        <price>$5.95</price>
        <description>Fresh spinach leaves (palak) cooked with cubes of Paneer cheese</description>
        <calories>650</calories>
    </food>
    <food>
        <id>2</id>
        <name>Biryani</name>
        <price>$7.95</price>
        <description>A fragrant and flavorful Indian rice dish</description>
        <calories>900</calories>
    </food>
</breakfast_menu>
"""
