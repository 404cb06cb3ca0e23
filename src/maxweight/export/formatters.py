"""Output formatters for food vectors and optimization results."""

from __future__ import annotations

import json
from datetime import datetime
from typing import Optional

from rich.console import Console
from rich.panel import Panel
from rich.table import Table

from maxweight.optimizer.models import FoodVector, OptimizationResult
from maxweight.optimizer.totals import sum_food_vector


def build_food_table(foods: FoodVector, title: str = "Foods") -> Table:
    """Build a Rich table listing each food followed by grand totals."""
    table = Table(title=title)
    table.add_column("#", justify="right", style="dim")
    table.add_column("Food", style="cyan", max_width=50)
    table.add_column("Calories", justify="right")
    table.add_column("Weight (oz)", justify="right", style="green")

    for i, food in enumerate(foods, start=1):
        table.add_row(
            str(i),
            food.description[:50],
            f"{food.calories:.2f}",
            f"{food.weight:.2f}",
        )

    total_calories, total_weight = sum_food_vector(foods)
    table.add_row(
        "",
        "[bold]TOTAL[/bold]",
        f"[bold]{total_calories:.2f}[/bold]",
        f"[bold]{total_weight:.2f}[/bold]",
        style="bold",
    )
    return table


def print_food_vector(
    foods: FoodVector,
    console: Optional[Console] = None,
    title: str = "Foods",
) -> None:
    """Print each food of a vector and its grand totals."""
    console = console or Console()
    if not foods:
        console.print("[empty food list]", style="yellow", markup=False)
        return
    console.print(build_food_table(foods, title))


class TableFormatter:
    """Format results as Rich tables for terminal display."""

    def __init__(self, console: Optional[Console] = None):
        """Initialize the formatter.

        Args:
            console: Rich console for output. If None, creates a new one.
        """
        self.console = console or Console()

    def format(self, result: OptimizationResult) -> None:
        """Print formatted tables to console.

        Args:
            result: Optimization result to format
        """
        status_color = "green" if result.success else "red"
        header_lines = [
            f"[bold]MAX WEIGHT RESULT[/bold] - {datetime.now().strftime('%Y-%m-%d %H:%M')}",
            f"Strategy: {result.strategy.value}",
            f"Status: [{status_color}]{result.status.upper()}[/{status_color}]",
        ]
        self.console.print(Panel("\n".join(header_lines), title="Food Selection"))

        if not result.success:
            self.console.print(f"[red]Error: {result.message}[/red]")
            return

        print_food_vector(result.foods, self.console, title="Selected Foods")

        if result.solver_info:
            info_parts = []
            if "n_candidates" in result.solver_info:
                info_parts.append(f"Candidates: {result.solver_info['n_candidates']}")
            if "subsets_evaluated" in result.solver_info:
                info_parts.append(f"Subsets: {result.solver_info['subsets_evaluated']}")
            if "elapsed_seconds" in result.solver_info:
                info_parts.append(f"Time: {result.solver_info['elapsed_seconds']:.3f}s")
            if info_parts:
                self.console.print(f"[dim]{' | '.join(info_parts)}[/dim]")


class JSONFormatter:
    """Format results as JSON for programmatic use."""

    def format(self, result: OptimizationResult) -> str:
        """Return JSON string."""
        data = {
            "timestamp": datetime.now().isoformat(),
            "strategy": result.strategy.value,
            "status": result.status,
            "success": result.success,
            "message": result.message,
            "solution": {
                "foods": [
                    {
                        "description": f.description,
                        "calories": f.calories,
                        "weight": f.weight,
                    }
                    for f in result.foods
                ],
                "total_calories": round(result.total_calories, 2),
                "total_weight": round(result.total_weight, 2),
            },
            "solver_info": result.solver_info,
        }
        return json.dumps(data, indent=2)


class MarkdownFormatter:
    """Format results as Markdown for documentation."""

    def format(self, result: OptimizationResult) -> str:
        """Return Markdown string."""
        lines = [
            "# Max Weight Food Selection",
            "",
            f"**Strategy:** {result.strategy.value}",
            f"**Status:** {result.status}",
        ]

        if not result.success:
            lines.extend(["", f"Error: {result.message}"])
            return "\n".join(lines)

        lines.append(f"**Calories:** {result.total_calories:.2f}")
        lines.append(f"**Weight:** {result.total_weight:.2f} oz")
        lines.extend(
            ["", "## Foods", "", "| Food | Calories | Weight (oz) |", "|------|----------|-------------|"]
        )

        for food in result.foods:
            lines.append(f"| {food.description} | {food.calories:.2f} | {food.weight:.2f} |")

        return "\n".join(lines)


def format_result(
    result: OptimizationResult,
    output_format: str = "table",
    console: Optional[Console] = None,
) -> Optional[str]:
    """Format optimization result in the specified format.

    Args:
        result: Optimization result to format
        output_format: One of 'table', 'json', 'markdown'
        console: Rich console (for table format)

    Returns:
        Formatted string for json/markdown, None for table (prints directly)
    """
    if output_format == "table":
        TableFormatter(console).format(result)
        return None
    elif output_format == "json":
        return JSONFormatter().format(result)
    elif output_format == "markdown":
        return MarkdownFormatter().format(result)
    else:
        raise ValueError(f"Unknown output format: {output_format}")
