"""Max-weight food selection within a calorie budget."""

__version__ = "0.1.0"
