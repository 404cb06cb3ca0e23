"""Tests for the exhaustive solver."""

from __future__ import annotations

from itertools import combinations

import pytest

from maxweight.optimizer import exhaustive as exhaustive_module
from maxweight.optimizer.exhaustive import exhaustive_max_weight
from maxweight.optimizer.filtering import filter_food_vector
from maxweight.optimizer.greedy import greedy_max_weight
from maxweight.optimizer.models import (
    MAX_EXHAUSTIVE_ITEMS,
    CatalogTooLargeError,
    FoodItem,
)
from maxweight.optimizer.totals import sum_food_vector


def descriptions(foods):
    return [f.description for f in foods]


def best_weight_by_combinations(foods, budget):
    """Independent reference: best feasible weight over all index combinations."""
    best = 0.0
    for size in range(len(foods) + 1):
        for subset in combinations(foods, size):
            calories, weight = sum_food_vector(list(subset))
            if calories <= budget and weight > best:
                best = weight
    return best


class TestExhaustiveTrivialCases:
    """Corn/pasta scenarios."""

    def test_budget_too_small(self, trivial_foods):
        assert exhaustive_max_weight(trivial_foods, 3) == []

    def test_pasta_only(self, trivial_foods):
        assert descriptions(exhaustive_max_weight(trivial_foods, 99)) == ["test pasta"]

    def test_corn_only(self, trivial_foods):
        assert descriptions(exhaustive_max_weight(trivial_foods, 100)) == ["test whole corn"]

    def test_corn_and_pasta(self, trivial_foods):
        result = exhaustive_max_weight(trivial_foods, 150)
        assert descriptions(result) == ["test whole corn", "test pasta"]
        assert sum_food_vector(result)[1] == 25


class TestExhaustiveEdgeCases:
    """Degenerate inputs, ordering and tie-breaking."""

    def test_empty_catalog(self):
        assert exhaustive_max_weight([], 100) == []

    def test_negative_budget(self, trivial_foods):
        assert exhaustive_max_weight(trivial_foods, -1) == []

    def test_tie_goes_to_lowest_mask(self):
        """Mask 0b01 is reached before 0b10, so the first food wins."""
        foods = [FoodItem("first", 10, 5), FoodItem("second", 10, 5)]
        assert descriptions(exhaustive_max_weight(foods, 10)) == ["first"]

    def test_tie_between_subsets_of_different_size(self):
        # {big} is mask 0b001, {small_a, small_b} is mask 0b110
        foods = [
            FoodItem("big", 100, 10),
            FoodItem("small_a", 50, 5),
            FoodItem("small_b", 50, 5),
        ]
        assert descriptions(exhaustive_max_weight(foods, 100)) == ["big"]

    def test_zero_weight_subset_not_chosen(self):
        foods = [FoodItem("water", 1, 0.0)]
        assert exhaustive_max_weight(foods, 10) == []

    def test_result_in_catalog_order(self):
        foods = [FoodItem("light", 50, 1), FoodItem("dense", 50, 10)]
        assert descriptions(exhaustive_max_weight(foods, 100)) == ["light", "dense"]

    def test_beats_greedy(self):
        foods = [
            FoodItem("a", 60, 30),
            FoodItem("b", 50, 24),
            FoodItem("c", 50, 24),
        ]
        result = exhaustive_max_weight(foods, 100)
        assert descriptions(result) == ["b", "c"]
        assert sum_food_vector(result)[1] == 48

    def test_too_many_foods(self):
        foods = [FoodItem(f"f{i}", 1, 1) for i in range(MAX_EXHAUSTIVE_ITEMS + 1)]
        with pytest.raises(CatalogTooLargeError) as exc_info:
            exhaustive_max_weight(foods, 10)
        assert exc_info.value.n_foods == MAX_EXHAUSTIVE_ITEMS + 1

    def test_spans_multiple_chunks(self, synthetic_foods, monkeypatch):
        """Results do not depend on the batch size used for enumeration."""
        foods = filter_food_vector(synthetic_foods, 1, 2000, 10)
        expected = exhaustive_max_weight(foods, 1500)
        monkeypatch.setattr(exhaustive_module, "CHUNK_SIZE", 7)
        assert exhaustive_max_weight(foods, 1500) == expected


class TestExhaustiveCorrectness:
    """Optimality against an independent enumeration and against greedy."""

    @pytest.mark.parametrize("budget", [0, 250, 800, 1500, 2000, 4000])
    def test_matches_reference(self, synthetic_foods, budget):
        foods = filter_food_vector(synthetic_foods, 1, 2000, 10)
        result = exhaustive_max_weight(foods, budget)
        calories, weight = sum_food_vector(result)

        assert calories <= budget
        assert weight == pytest.approx(best_weight_by_combinations(foods, budget))

    @pytest.mark.parametrize("budget", [300, 1000, 2000, 3500])
    def test_at_least_greedy(self, synthetic_foods, budget):
        foods = filter_food_vector(synthetic_foods, 1, 2000, 12)
        _, exhaustive_weight = sum_food_vector(exhaustive_max_weight(foods, budget))
        _, greedy_weight = sum_food_vector(greedy_max_weight(foods, budget))
        assert exhaustive_weight >= greedy_weight

    def test_optimal_weight_grows_with_catalog(self, synthetic_foods):
        """Each filtered prefix contains the previous one, so the optimum never drops."""
        totals = []
        for n in range(1, 13):
            foods = filter_food_vector(synthetic_foods, 1, 2000, n)
            _, weight = sum_food_vector(exhaustive_max_weight(foods, 2000))
            totals.append(weight)

        assert totals == sorted(totals)
        assert totals[0] > 0
