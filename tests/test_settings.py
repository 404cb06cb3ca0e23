"""Tests for YAML settings."""

from __future__ import annotations

from pathlib import Path

from maxweight.config.settings import Settings, get_settings, reload_settings


class TestSettings:
    """Tests for Settings load/save."""

    def test_defaults_when_missing(self, tmp_path):
        settings = Settings.load(tmp_path / "missing.yaml")
        assert settings.filter.max_foods == 20
        assert settings.optimization.strategy == "greedy"
        assert settings.optimization.calorie_budget == 2000.0
        assert settings.data.food_database is None

    def test_partial_file(self, tmp_path):
        config_path = tmp_path / "config.yaml"
        config_path.write_text(
            "filter:\n"
            "  max_foods: 12\n"
            "optimization:\n"
            "  strategy: exhaustive\n"
            "data:\n"
            "  food_database: /tmp/food.csv\n"
        )
        settings = Settings.load(config_path)

        assert settings.filter.max_foods == 12
        assert settings.filter.min_weight == 1.0
        assert settings.optimization.strategy == "exhaustive"
        assert settings.data.food_database == Path("/tmp/food.csv")
        assert settings.defaults.output_format == "table"

    def test_save_and_load(self, tmp_path):
        config_path = tmp_path / "nested" / "config.yaml"
        settings = Settings()
        settings.optimization.calorie_budget = 1500.0
        settings.defaults.output_format = "json"
        settings.save(config_path)

        loaded = Settings.load(config_path)
        assert loaded == settings

    def test_global_settings_cached(self, tmp_path):
        first = get_settings()
        assert get_settings() is first

        config_path = tmp_path / "config.yaml"
        config_path.write_text("defaults:\n  output_format: markdown\n")
        reloaded = reload_settings(config_path)
        assert reloaded.defaults.output_format == "markdown"
        assert get_settings() is reloaded
