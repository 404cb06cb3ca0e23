"""Data models for food items, optimization requests and results."""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from typing import Optional

# Largest catalog the exhaustive search accepts. Subset masks are held in
# signed 64-bit integers.
MAX_EXHAUSTIVE_ITEMS = 62


@dataclass(frozen=True)
class FoodItem:
    """One food item available for purchase.

    Attributes:
        description: Human-readable description, e.g. "spicy chicken breast".
            Must be non-empty.
        calories: Calorie cost. Must be positive.
        weight: Weight in ounces. Expected to be non-negative, not enforced.
    """

    description: str
    calories: float
    weight: float

    def __post_init__(self) -> None:
        if not self.description:
            raise InvalidFoodError("FoodItem.description must be non-empty")
        if not self.calories > 0:
            raise InvalidFoodError(
                f"FoodItem[{self.description}] calories must be > 0, got {self.calories}"
            )

    @property
    def weight_per_calorie(self) -> float:
        """Ounces of food per calorie."""
        return self.weight / self.calories


# A catalog or a selected bundle. Items are shared, never copied.
FoodVector = list[FoodItem]


class Strategy(Enum):
    """Selection strategies."""

    GREEDY = "greedy"
    EXHAUSTIVE = "exhaustive"


@dataclass
class OptimizationRequest:
    """Input specification for the optimizer.

    The filter bounds are optional; when max_foods is None the catalog is
    passed to the solver as-is.
    """

    strategy: Strategy = Strategy.GREEDY
    calorie_budget: float = 2000.0
    min_weight: float = float("-inf")
    max_weight: float = float("inf")
    max_foods: Optional[int] = None


@dataclass
class OptimizationResult:
    """Complete output from the optimizer."""

    success: bool
    status: str  # 'optimal', 'heuristic', 'error'
    message: str
    strategy: Strategy
    foods: FoodVector
    total_calories: float
    total_weight: float
    solver_info: dict = field(default_factory=dict)  # elapsed time, counts


# Custom exceptions


class MaxWeightError(Exception):
    """Base exception for maxweight errors."""

    pass


class InvalidFoodError(MaxWeightError, ValueError):
    """Raised when a food item violates its field constraints."""

    pass


class CatalogTooLargeError(MaxWeightError):
    """Raised when a catalog is too large for exhaustive search."""

    def __init__(self, n_foods: int, limit: int = MAX_EXHAUSTIVE_ITEMS):
        super().__init__(
            f"Exhaustive search needs at most {limit} foods, got {n_foods}"
        )
        self.n_foods = n_foods
        self.limit = limit


class DatabaseLoadError(MaxWeightError):
    """Raised when the food database cannot be read."""

    def __init__(self, message: str, line_number: Optional[int] = None):
        super().__init__(message)
        self.line_number = line_number
