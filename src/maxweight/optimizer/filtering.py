"""Catalog filtering to bound solver input size."""

from __future__ import annotations

from maxweight.optimizer.models import FoodVector


def filter_food_vector(
    source: FoodVector,
    min_weight: float,
    max_weight: float,
    total_size: int,
) -> FoodVector:
    """Return the first foods of source whose weight lies in a range.

    Used to drop foods irrelevant to the optimization (zero or negative
    weight) and to keep the exhaustive search input small.

    Args:
        source: Catalog to filter; not modified
        min_weight: Smallest weight to include (inclusive)
        max_weight: Largest weight to include (inclusive)
        total_size: Maximum number of foods to return

    Returns:
        New list with at most total_size foods, in source order
    """
    result: FoodVector = []
    if total_size <= 0:
        return result

    for food in source:
        if min_weight <= food.weight <= max_weight:
            result.append(food)
            if len(result) == total_size:
                break

    return result
