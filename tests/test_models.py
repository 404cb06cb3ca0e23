"""Tests for food item validation and totals."""

from __future__ import annotations

import pytest

from maxweight.optimizer.models import (
    CatalogTooLargeError,
    FoodItem,
    InvalidFoodError,
    MaxWeightError,
)
from maxweight.optimizer.totals import sum_food_vector


class TestFoodItem:
    """Tests for FoodItem construction."""

    def test_valid_item(self):
        food = FoodItem("spicy chicken breast", 165.0, 4.0)
        assert food.description == "spicy chicken breast"
        assert food.calories == 165.0
        assert food.weight == 4.0

    def test_empty_description_rejected(self):
        with pytest.raises(InvalidFoodError):
            FoodItem("", 100.0, 1.0)

    @pytest.mark.parametrize("calories", [0.0, -5.0])
    def test_non_positive_calories_rejected(self, calories):
        with pytest.raises(InvalidFoodError):
            FoodItem("bread", calories, 1.0)

    def test_negative_weight_allowed(self):
        """Weight is not validated by the item itself."""
        assert FoodItem("odd", 10.0, -1.0).weight == -1.0

    def test_errors_share_a_base(self):
        assert issubclass(InvalidFoodError, MaxWeightError)
        assert issubclass(InvalidFoodError, ValueError)
        assert issubclass(CatalogTooLargeError, MaxWeightError)

    def test_immutable_and_value_equal(self):
        a = FoodItem("corn", 100.0, 20.0)
        b = FoodItem("corn", 100.0, 20.0)
        assert a == b
        assert hash(a) == hash(b)
        with pytest.raises(AttributeError):
            a.weight = 5.0

    def test_weight_per_calorie(self):
        assert FoodItem("corn", 100.0, 20.0).weight_per_calorie == pytest.approx(0.2)


class TestSumFoodVector:
    """Tests for calorie/weight totals."""

    def test_empty(self):
        assert sum_food_vector([]) == (0.0, 0.0)

    def test_totals(self, trivial_foods):
        assert sum_food_vector(trivial_foods) == (140.0, 25.0)
