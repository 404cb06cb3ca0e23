"""Calorie and weight totals."""

from __future__ import annotations

from maxweight.optimizer.models import FoodVector


def sum_food_vector(foods: FoodVector) -> tuple[float, float]:
    """Compute total calories and total weight of a catalog or solution.

    Returns:
        Tuple of (total_calories, total_weight); (0.0, 0.0) when empty
    """
    total_calories = 0.0
    total_weight = 0.0
    for food in foods:
        total_calories += food.calories
        total_weight += food.weight
    return total_calories, total_weight
