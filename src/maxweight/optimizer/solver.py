"""Strategy dispatch for the max-weight problem."""

from __future__ import annotations

import logging
import time

from maxweight.optimizer.exhaustive import exhaustive_max_weight
from maxweight.optimizer.filtering import filter_food_vector
from maxweight.optimizer.greedy import greedy_max_weight
from maxweight.optimizer.models import (
    CatalogTooLargeError,
    FoodVector,
    OptimizationRequest,
    OptimizationResult,
    Strategy,
)
from maxweight.optimizer.totals import sum_food_vector

logger = logging.getLogger(__name__)


def select_candidates(request: OptimizationRequest, foods: FoodVector) -> FoodVector:
    """Apply the request's filter bounds to a catalog.

    When request.max_foods is None only the weight range is applied.
    """
    total_size = len(foods) if request.max_foods is None else request.max_foods
    return filter_food_vector(
        foods, request.min_weight, request.max_weight, total_size
    )


def solve_max_weight(
    request: OptimizationRequest,
    foods: FoodVector,
) -> OptimizationResult:
    """Main entry point for solving the max-weight problem.

    Args:
        request: The optimization request specification
        foods: Full catalog; filtered with the request's bounds first

    Returns:
        OptimizationResult with solution or error info
    """
    candidates = select_candidates(request, foods)
    logger.debug(
        "Solving with %s over %d of %d foods, budget %.2f",
        request.strategy.value,
        len(candidates),
        len(foods),
        request.calorie_budget,
    )

    start_time = time.time()
    try:
        if request.strategy == Strategy.EXHAUSTIVE:
            selected = exhaustive_max_weight(candidates, request.calorie_budget)
            status = "optimal"
        else:
            selected = greedy_max_weight(candidates, request.calorie_budget)
            status = "heuristic"
    except CatalogTooLargeError as e:
        return OptimizationResult(
            success=False,
            status="error",
            message=f"{e}. Lower max_foods to bound the search.",
            strategy=request.strategy,
            foods=[],
            total_calories=0.0,
            total_weight=0.0,
            solver_info={"n_candidates": len(candidates)},
        )
    elapsed = time.time() - start_time

    total_calories, total_weight = sum_food_vector(selected)
    solver_info = {
        "n_candidates": len(candidates),
        "elapsed_seconds": elapsed,
    }
    if request.strategy == Strategy.EXHAUSTIVE:
        solver_info["subsets_evaluated"] = 1 << len(candidates)

    return OptimizationResult(
        success=True,
        status=status,
        message=f"Selected {len(selected)} of {len(candidates)} foods",
        strategy=request.strategy,
        foods=selected,
        total_calories=total_calories,
        total_weight=total_weight,
        solver_info=solver_info,
    )


def compare_strategies(
    request: OptimizationRequest,
    foods: FoodVector,
) -> dict[str, OptimizationResult]:
    """Run every strategy on the same request.

    The request's strategy field is ignored.

    Returns:
        Dict mapping strategy value ("greedy", "exhaustive") to its result
    """
    results = {}
    for strategy in Strategy:
        strategy_request = OptimizationRequest(
            strategy=strategy,
            calorie_budget=request.calorie_budget,
            min_weight=request.min_weight,
            max_weight=request.max_weight,
            max_foods=request.max_foods,
        )
        results[strategy.value] = solve_max_weight(strategy_request, foods)
    return results
