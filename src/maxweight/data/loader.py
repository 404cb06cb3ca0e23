"""Load the '^'-delimited food database into FoodItem records."""

from __future__ import annotations

import csv
import logging
from pathlib import Path

import pandas as pd

from maxweight.optimizer.models import (
    DatabaseLoadError,
    FoodItem,
    FoodVector,
    InvalidFoodError,
)

logger = logging.getLogger(__name__)

FIELD_SEPARATOR = "^"
FIELD_COUNT = 3  # description, calories, weight in ounces
COLUMNS = ["description", "calories", "weight"]

# Never present in a record, so each line is read as one column and split
# on FIELD_SEPARATOR afterwards.
LINE_DELIMITER = "\x1f"
HEADER_LINES = 1


def load_food_database(path: Path) -> FoodVector:
    """Load all the valid food items from a food database file.

    The first line is a header row. Every other line holds a description,
    a calorie count and a weight in ounces separated by '^'. Lines whose
    numbers cannot be parsed, or which describe an invalid food (empty
    description, non-positive calories), are skipped.

    Args:
        path: Path to a UTF-8 database file

    Returns:
        Foods in file order

    Raises:
        DatabaseLoadError: If the file cannot be opened or decoded, or a
            line does not have exactly three fields
    """
    path = Path(path)
    if not path.is_file():
        raise DatabaseLoadError(f"Cannot open food database: {path}")

    try:
        lines = pd.read_csv(
            path,
            sep=LINE_DELIMITER,
            header=None,
            names=["line"],
            skiprows=HEADER_LINES,
            dtype=str,
            keep_default_na=False,
            skip_blank_lines=False,
            quoting=csv.QUOTE_NONE,
            encoding="utf-8",
            engine="python",
        )["line"].fillna("")
    except pd.errors.EmptyDataError:
        lines = pd.Series([], dtype=str)
    except UnicodeDecodeError as e:
        raise DatabaseLoadError(f"Cannot decode {path}: {e}") from e
    except pd.errors.ParserError as e:
        raise DatabaseLoadError(f"Cannot parse {path}: {e}") from e

    if lines.empty:
        logger.warning("Food database %s has no records", path)
        return []

    fields = lines.str.split(FIELD_SEPARATOR, regex=False)
    counts = fields.str.len()
    bad_counts = counts[counts != FIELD_COUNT]
    if not bad_counts.empty:
        # Row i of the frame is line i + 2 of the file (1-based, after the header)
        line_number = int(bad_counts.index[0]) + HEADER_LINES + 1
        raise DatabaseLoadError(
            f"Invalid field count in {path} at line {line_number}: "
            f"want {FIELD_COUNT} but got {int(bad_counts.iloc[0])}",
            line_number=line_number,
        )

    df = pd.DataFrame(fields.tolist(), columns=COLUMNS)
    calories = pd.to_numeric(df["calories"].str.strip(), errors="coerce")
    weights = pd.to_numeric(df["weight"].str.strip(), errors="coerce")

    foods: FoodVector = []
    skipped = 0
    for description, calorie, weight in zip(df["description"], calories, weights):
        if pd.isna(calorie) or pd.isna(weight):
            skipped += 1
            continue
        try:
            foods.append(FoodItem(description, float(calorie), float(weight)))
        except InvalidFoodError:
            skipped += 1

    if skipped:
        logger.warning("Skipped %d invalid records in %s", skipped, path)
    logger.debug("Loaded %d foods from %s", len(foods), path)
    return foods
