"""Greedy weight-per-calorie selection."""

from __future__ import annotations

import logging

import numpy as np

from maxweight.optimizer.models import FoodVector

logger = logging.getLogger(__name__)


def greedy_max_weight(foods: FoodVector, total_calorie: float) -> FoodVector:
    """Select foods greedily by weight-per-calorie.

    Among the unselected foods that still fit within the remaining calories,
    choose the one whose weight-per-calorie is greatest; ties go to the food
    that comes first in the catalog. Repeat until no remaining food fits.

    The result is a heuristic: it never exceeds total_calorie but is not
    guaranteed to have the greatest achievable weight.

    Args:
        foods: Candidate foods
        total_calorie: Calorie budget; zero or negative yields an empty result

    Returns:
        Selected foods in the order they were chosen
    """
    result: FoodVector = []
    if not foods:
        return result

    calories = np.array([food.calories for food in foods], dtype=float)
    ratios = np.array([food.weight_per_calorie for food in foods], dtype=float)
    available = np.ones(len(foods), dtype=bool)
    used_calories = 0.0

    while available.any():
        fits = available & (used_calories + calories <= total_calorie)
        if not fits.any():
            break

        # argmax returns the first maximum, so earlier foods win ties
        index = int(np.argmax(np.where(fits, ratios, -np.inf)))
        result.append(foods[index])
        used_calories += foods[index].calories
        available[index] = False

    logger.debug(
        "Greedy selected %d of %d foods using %.2f of %.2f calories",
        len(result),
        len(foods),
        used_calories,
        total_calorie,
    )
    return result
