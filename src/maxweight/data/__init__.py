"""Food database loading."""

from maxweight.data.loader import load_food_database

__all__ = ["load_food_database"]
