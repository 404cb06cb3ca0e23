"""Optimization engine for max-weight food selection."""

from maxweight.optimizer.exhaustive import exhaustive_max_weight
from maxweight.optimizer.filtering import filter_food_vector
from maxweight.optimizer.greedy import greedy_max_weight
from maxweight.optimizer.models import (
    MAX_EXHAUSTIVE_ITEMS,
    CatalogTooLargeError,
    DatabaseLoadError,
    FoodItem,
    FoodVector,
    InvalidFoodError,
    MaxWeightError,
    OptimizationRequest,
    OptimizationResult,
    Strategy,
)
from maxweight.optimizer.solver import compare_strategies, solve_max_weight
from maxweight.optimizer.totals import sum_food_vector

__all__ = [
    "MAX_EXHAUSTIVE_ITEMS",
    "FoodItem",
    "FoodVector",
    "Strategy",
    "OptimizationRequest",
    "OptimizationResult",
    "MaxWeightError",
    "InvalidFoodError",
    "CatalogTooLargeError",
    "DatabaseLoadError",
    "filter_food_vector",
    "greedy_max_weight",
    "exhaustive_max_weight",
    "sum_food_vector",
    "solve_max_weight",
    "compare_strategies",
]
