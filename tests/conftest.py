"""Pytest fixtures for maxweight tests."""

from __future__ import annotations

import random
from pathlib import Path

import pytest

from maxweight.config import settings as settings_module
from maxweight.optimizer.models import FoodItem


@pytest.fixture(autouse=True)
def isolated_settings(tmp_path, monkeypatch):
    """Point the default config directory at a temp dir and drop cached settings."""
    monkeypatch.setattr(
        settings_module, "_default_config_dir", lambda: tmp_path / ".maxweight"
    )
    monkeypatch.setattr(settings_module, "_settings", None)


@pytest.fixture
def trivial_foods():
    """Two foods: corn is denser per calorie, pasta is cheaper."""
    return [
        FoodItem("test whole corn", 100.0, 20.0),
        FoodItem("test pasta", 40.0, 5.0),
    ]


@pytest.fixture
def synthetic_foods():
    """A deterministic catalog mixing in-range, zero and oversized weights."""
    rng = random.Random(2024)
    foods = []
    for i in range(40):
        calories = round(rng.uniform(50, 900), 2)
        if i % 9 == 4:
            weight = 0.0
        elif i % 13 == 7:
            weight = 3000.0
        else:
            weight = round(rng.uniform(1, 600), 2)
        foods.append(FoodItem(f"food {i}", calories, weight))
    return foods


@pytest.fixture
def write_food_db(tmp_path):
    """Return a helper that writes a '^'-delimited food database file."""

    def _write(lines: list[str], name: str = "food.txt") -> Path:
        path = tmp_path / name
        path.write_text("\n".join(lines) + "\n")
        return path

    return _write


@pytest.fixture
def sample_db_path(write_food_db):
    """A small valid food database."""
    return write_food_db(
        [
            "description^calories^weight_ounces",
            "test whole corn^100^20",
            "test pasta^40^5",
            "refried beans^250^16",
            "water^1^0",
            "rice^600^32",
        ]
    )
