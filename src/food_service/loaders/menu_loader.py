"""Loader for the food catalog XML document.

The catalog source is either a file bundled with the application (a path with
the ``classpath:`` prefix, resolved inside the ``food_service.data`` package)
or a path on the local filesystem. Loading never raises: any failure is logged
and downgraded to an empty catalog, so the service still starts when the data
file is missing or broken.
"""

import logging
import os
import re
import xml.etree.ElementTree as ET
from importlib import resources
from importlib.resources.abc import Traversable
from pathlib import Path

from food_service.models.food_models import FoodItem, FoodMenu
from food_service.observability import traced
from food_service.observability.metrics import record_catalog_load_failure, record_catalog_loaded

logger = logging.getLogger(__name__)

CLASSPATH_PREFIX = "classpath:"
DEFAULT_RESOURCE_PACKAGE = "food_service.data"
DEFAULT_FOOD_DATA_FILE_PATH = "classpath:breakfast_menu.xml"

FOOD_ELEMENT = "food"
TEXT_FIELDS = ("name", "price", "description")
INT_FIELDS = ("id", "calories")
INTEGER_PATTERN = re.compile(r"[+-]?[0-9]+")


class MenuLoadError(Exception):
    """Raised when the catalog source cannot be read or parsed."""


def _parse_int(field: str, text: str | None) -> int | None:
    if text is None or not text.strip():
        return None
    # ASCII digits only; int() alone would also take "1_0" and non-ASCII digits
    value = text.strip()
    if not INTEGER_PATTERN.fullmatch(value):
        raise MenuLoadError(f"Invalid integer for '{field}': {text!r}")
    return int(value)


def parse_food_item(element: ET.Element) -> FoodItem:
    """Map a ``<food>`` element onto a FoodItem.

    Child elements map one-to-one onto fields by name. Missing children leave
    the field as None and unrecognized children are ignored.

    Args:
        element: The ``<food>`` element

    Returns:
        FoodItem: Parsed item

    Raises:
        MenuLoadError: If an integer field does not hold an integer
    """
    values: dict[str, str | int | None] = {}

    for field in TEXT_FIELDS:
        child = element.find(field)
        if child is not None:
            values[field] = child.text or ""

    for field in INT_FIELDS:
        child = element.find(field)
        if child is not None:
            values[field] = _parse_int(field, child.text)

    return FoodItem(**values)


def parse_food_menu(xml_bytes: bytes) -> FoodMenu:
    """Parse an XML document into a FoodMenu.

    The root element wraps zero or more ``<food>`` elements. Items keep
    their document order.

    Args:
        xml_bytes: Raw XML document

    Returns:
        FoodMenu: Catalog containing every item in the document

    Raises:
        MenuLoadError: If the document is not well-formed or an item is invalid
    """
    try:
        root = ET.fromstring(xml_bytes)
    except ET.ParseError as e:
        raise MenuLoadError(f"Malformed XML: {e}") from e

    items = tuple(parse_food_item(element) for element in root.findall(FOOD_ELEMENT))
    return FoodMenu(food_list=items)


class MenuLoader:
    """Builds the food catalog from a configured source location."""

    def __init__(self, resource_package: str = DEFAULT_RESOURCE_PACKAGE) -> None:
        """Initialize the loader.

        Args:
            resource_package: Package that ``classpath:`` locations resolve against
        """
        self.resource_package = resource_package

    def resolve(self, source_path: str) -> Traversable | Path:
        """Resolve a source location to a bundled resource or filesystem path.

        Args:
            source_path: ``classpath:<name>`` or a filesystem path

        Returns:
            The resource or path to read from
        """
        if source_path.startswith(CLASSPATH_PREFIX):
            location = source_path[len(CLASSPATH_PREFIX) :].lstrip("/")
            return resources.files(self.resource_package).joinpath(location)
        return Path(source_path)

    def read_source(self, source_path: str) -> bytes:
        """Read the raw bytes of a source document.

        Args:
            source_path: ``classpath:<name>`` or a filesystem path

        Returns:
            bytes: Document contents

        Raises:
            MenuLoadError: If the source does not exist or cannot be read
        """
        try:
            resource = self.resolve(source_path)
            if not resource.is_file():
                raise MenuLoadError(f"Resource not found: {source_path}")

            with resource.open("rb") as stream:
                return stream.read()
        except (OSError, ModuleNotFoundError) as e:
            raise MenuLoadError(f"Unable to read {source_path}: {e}") from e

    @traced("load_food_menu")
    def load(self, source_path: str) -> FoodMenu:
        """Load the food catalog from a source location.

        Args:
            source_path: ``classpath:<name>`` or a filesystem path

        Returns:
            FoodMenu: The loaded catalog, or an empty catalog if loading failed
        """
        try:
            food_menu = parse_food_menu(self.read_source(source_path))
        except MenuLoadError as e:
            logger.error(f"Error loading food data from XML: {e}", exc_info=True)
            record_catalog_load_failure(type(e.__cause__ or e).__name__)
            return FoodMenu.empty()

        logger.info(f"Food data loaded successfully from {source_path}")
        record_catalog_loaded(food_menu.size)
        return food_menu


def get_food_data_file_path() -> str:
    """Get the catalog source location from the environment.

    Returns:
        ``classpath:<name>`` for a bundled resource, or a filesystem path
    """
    return os.getenv("FOOD_DATA_FILE_PATH") or DEFAULT_FOOD_DATA_FILE_PATH


def load_food_menu() -> FoodMenu:
    """Load the food catalog from the configured source.

    Returns:
        The loaded catalog, empty if the source could not be loaded
    """
    source_path = get_food_data_file_path()
    food_menu = MenuLoader().load(source_path)

    if food_menu.size == 0:
        logger.warning(f"Food catalog is empty - source: {source_path}")

    return food_menu
