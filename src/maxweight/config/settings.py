"""Application settings and configuration management."""

from __future__ import annotations

from dataclasses import dataclass, field
from pathlib import Path
from typing import Optional

import yaml


def _default_config_dir() -> Path:
    """Return the default configuration directory."""
    return Path.home() / ".maxweight"


def default_config_path() -> Path:
    """Return the default config.yaml path."""
    return _default_config_dir() / "config.yaml"


@dataclass
class DataConfig:
    """Food database configuration."""

    food_database: Optional[Path] = None


@dataclass
class FilterConfig:
    """Catalog filter bounds applied before solving."""

    min_weight: float = 1.0
    max_weight: float = 2500.0
    max_foods: int = 20  # keeps exhaustive search tractable


@dataclass
class OptimizationConfig:
    """Solver configuration."""

    strategy: str = "greedy"  # "greedy" or "exhaustive"
    calorie_budget: float = 2000.0


@dataclass
class DefaultsConfig:
    """Default values for various operations."""

    output_format: str = "table"  # "table", "json", "markdown"


@dataclass
class Settings:
    """Main application settings."""

    data: DataConfig = field(default_factory=DataConfig)
    filter: FilterConfig = field(default_factory=FilterConfig)
    optimization: OptimizationConfig = field(default_factory=OptimizationConfig)
    defaults: DefaultsConfig = field(default_factory=DefaultsConfig)

    @classmethod
    def load(cls, config_path: Optional[Path] = None) -> "Settings":
        """Load settings from YAML file or return defaults.

        Args:
            config_path: Path to config.yaml. If None, uses ~/.maxweight/config.yaml

        Returns:
            Settings instance
        """
        if config_path is None:
            config_path = default_config_path()

        if not config_path.exists():
            return cls()

        with open(config_path) as f:
            data = yaml.safe_load(f) or {}

        settings = cls()

        if "data" in data:
            data_cfg = data["data"] or {}
            if data_cfg.get("food_database"):
                settings.data.food_database = Path(
                    data_cfg["food_database"]
                ).expanduser()

        if "filter" in data:
            filter_data = data["filter"] or {}
            if "min_weight" in filter_data:
                settings.filter.min_weight = float(filter_data["min_weight"])
            if "max_weight" in filter_data:
                settings.filter.max_weight = float(filter_data["max_weight"])
            if "max_foods" in filter_data:
                settings.filter.max_foods = int(filter_data["max_foods"])

        if "optimization" in data:
            opt_data = data["optimization"] or {}
            if "strategy" in opt_data:
                settings.optimization.strategy = opt_data["strategy"]
            if "calorie_budget" in opt_data:
                settings.optimization.calorie_budget = float(
                    opt_data["calorie_budget"]
                )

        if "defaults" in data:
            def_data = data["defaults"] or {}
            if "output_format" in def_data:
                settings.defaults.output_format = def_data["output_format"]

        return settings

    def to_dict(self) -> dict:
        """Convert to the YAML document layout."""
        return {
            "data": {
                "food_database": (
                    str(self.data.food_database) if self.data.food_database else None
                ),
            },
            "filter": {
                "min_weight": self.filter.min_weight,
                "max_weight": self.filter.max_weight,
                "max_foods": self.filter.max_foods,
            },
            "optimization": {
                "strategy": self.optimization.strategy,
                "calorie_budget": self.optimization.calorie_budget,
            },
            "defaults": {
                "output_format": self.defaults.output_format,
            },
        }

    def save(self, config_path: Optional[Path] = None) -> None:
        """Save current settings to YAML file.

        Args:
            config_path: Path to save config.yaml. If None, uses ~/.maxweight/config.yaml
        """
        if config_path is None:
            config_path = default_config_path()

        config_path.parent.mkdir(parents=True, exist_ok=True)

        with open(config_path, "w") as f:
            yaml.dump(self.to_dict(), f, default_flow_style=False, sort_keys=False)


# Global settings instance (lazy loaded)
_settings: Optional[Settings] = None


def get_settings() -> Settings:
    """Get the global settings instance, loading from disk if needed."""
    global _settings
    if _settings is None:
        _settings = Settings.load()
    return _settings


def reload_settings(config_path: Optional[Path] = None) -> Settings:
    """Force reload settings from disk."""
    global _settings
    _settings = Settings.load(config_path)
    return _settings
