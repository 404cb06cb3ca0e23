"""Output formatters."""

from maxweight.export.formatters import (
    JSONFormatter,
    MarkdownFormatter,
    TableFormatter,
    format_result,
    print_food_vector,
)

__all__ = [
    "TableFormatter",
    "JSONFormatter",
    "MarkdownFormatter",
    "format_result",
    "print_food_vector",
]
