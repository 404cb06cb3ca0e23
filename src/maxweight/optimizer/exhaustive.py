"""Exhaustive subset search for the heaviest food bundle."""

from __future__ import annotations

import logging

import numpy as np

from maxweight.optimizer.models import (
    MAX_EXHAUSTIVE_ITEMS,
    CatalogTooLargeError,
    FoodVector,
)

logger = logging.getLogger(__name__)

# Number of subset masks evaluated per vectorized batch
CHUNK_SIZE = 1 << 16


def exhaustive_max_weight(foods: FoodVector, total_calorie: float) -> FoodVector:
    """Find the heaviest subset of foods within a calorie budget.

    Every subset is encoded as an integer mask in 0..2^n-1, where bit j
    selects foods[j]. Masks are visited in increasing order and a subset
    replaces the current best only when its weight is strictly greater, so
    the lowest mask wins among equally heavy subsets. The empty subset
    (weight 0) is the starting best.

    Masks are evaluated in batches with numpy. Within a mask, totals are
    accumulated in ascending food index, so the floating point sums are the
    same as those of a one-subset-at-a-time scan.

    Args:
        foods: Candidate foods, at most MAX_EXHAUSTIVE_ITEMS of them
        total_calorie: Calorie budget

    Returns:
        Foods of the best subset, in catalog order

    Raises:
        CatalogTooLargeError: If foods has more than MAX_EXHAUSTIVE_ITEMS items
    """
    n_foods = len(foods)
    if n_foods > MAX_EXHAUSTIVE_ITEMS:
        raise CatalogTooLargeError(n_foods)

    calories = [food.calories for food in foods]
    weights = [food.weight for food in foods]

    best_weight = 0.0
    best_mask = 0
    total_subsets = 1 << n_foods

    for start in range(0, total_subsets, CHUNK_SIZE):
        stop = min(start + CHUNK_SIZE, total_subsets)
        masks = np.arange(start, stop, dtype=np.int64)
        subset_calories = np.zeros(len(masks))
        subset_weights = np.zeros(len(masks))

        for j in range(n_foods):
            selected = ((masks >> j) & 1).astype(bool)
            subset_calories += np.where(selected, calories[j], 0.0)
            subset_weights += np.where(selected, weights[j], 0.0)

        feasible_weights = np.where(
            subset_calories <= total_calorie, subset_weights, -np.inf
        )
        index = int(np.argmax(feasible_weights))
        if feasible_weights[index] > best_weight:
            best_weight = float(feasible_weights[index])
            best_mask = int(masks[index])

    logger.debug(
        "Exhaustive search evaluated %d subsets of %d foods; best weight %.2f",
        total_subsets,
        n_foods,
        best_weight,
    )
    return [foods[j] for j in range(n_foods) if best_mask & (1 << j)]
