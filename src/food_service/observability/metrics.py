"""Custom metrics for the food service."""

from opentelemetry import metrics

meter = metrics.get_meter("food-svc")

catalog_items_counter = meter.create_up_down_counter(
    name="food_catalog_items",
    description="Number of food items held in the in-memory catalog",
    unit="1",
)

catalog_load_failure_counter = meter.create_counter(
    name="food_catalog_load_failure_total",
    description="Total number of failed catalog loads by error type",
    unit="1",
)

lookup_counter = meter.create_counter(
    name="food_lookup_total",
    description="Total number of food lookups by id, by result",
    unit="1",
)

search_counter = meter.create_counter(
    name="food_search_total",
    description="Total number of food name searches",
    unit="1",
)


def record_catalog_loaded(item_count: int) -> None:
    """Record a successful catalog load.

    Args:
        item_count: Number of food items loaded
    """
    catalog_items_counter.add(item_count)


def record_catalog_load_failure(error_type: str) -> None:
    """Record a failed catalog load.

    Args:
        error_type: Type of error that occurred
    """
    catalog_load_failure_counter.add(1, {"error_type": error_type})


def record_lookup(found: bool) -> None:
    """Record a lookup by id.

    Args:
        found: Whether a matching item was found
    """
    lookup_counter.add(1, {"result": "found" if found else "not_found"})


def record_search(match_count: int) -> None:
    """Record a name search.

    Args:
        match_count: Number of items the search returned
    """
    search_counter.add(1, {"matched": match_count > 0})
