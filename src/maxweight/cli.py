"""CLI interface using Typer."""

from __future__ import annotations

import logging
from pathlib import Path
from typing import Optional

import typer
from rich.console import Console
from rich.logging import RichHandler
from rich.table import Table

from maxweight.config import get_settings, reload_settings
from maxweight.config.settings import Settings, default_config_path
from maxweight.data import load_food_database
from maxweight.export import format_result, print_food_vector
from maxweight.optimizer import (
    FoodVector,
    MaxWeightError,
    OptimizationRequest,
    Strategy,
    compare_strategies,
    filter_food_vector,
    solve_max_weight,
)

app = typer.Typer(
    help="Select foods that maximize carried weight within a calorie budget",
    no_args_is_help=True,
)
console = Console()

config_app = typer.Typer(help="Show or create the configuration file")
app.add_typer(config_app, name="config")


@app.callback()
def main(
    config: Optional[Path] = typer.Option(
        None, "--config", "-c", help="Path to config.yaml (default ~/.maxweight/config.yaml)"
    ),
    verbose: bool = typer.Option(
        False, "--verbose", "-v", help="Show solver debug logging"
    ),
) -> None:
    """Configure logging and settings before any command."""
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.WARNING,
        format="%(message)s",
        handlers=[RichHandler(console=console, show_path=False)],
        force=True,
    )
    if config is not None:
        reload_settings(config)


# ============================================================================
# Helpers
# ============================================================================


def load_foods_or_exit(path: Optional[Path], settings: Settings) -> FoodVector:
    """Load the food database, exiting with a friendly message on failure."""
    path = path or settings.data.food_database
    if path is None:
        console.print("[red]No food database given.[/red]")
        console.print("Pass a path or set [cyan]data.food_database[/cyan] in config.yaml")
        raise typer.Exit(1)

    try:
        return load_food_database(path)
    except MaxWeightError as e:
        console.print(f"[red]{e}[/red]")
        raise typer.Exit(1)


def build_request(
    settings: Settings,
    strategy: Optional[str],
    calories: Optional[float],
    min_weight: Optional[float],
    max_weight: Optional[float],
    max_foods: Optional[int],
) -> OptimizationRequest:
    """Merge command line options over configured defaults."""
    strategy_name = strategy or settings.optimization.strategy
    try:
        chosen = Strategy(strategy_name)
    except ValueError:
        console.print(f"[red]Unknown strategy: {strategy_name}[/red]")
        console.print("Use one of: " + ", ".join(s.value for s in Strategy))
        raise typer.Exit(1)

    return OptimizationRequest(
        strategy=chosen,
        calorie_budget=calories if calories is not None else settings.optimization.calorie_budget,
        min_weight=min_weight if min_weight is not None else settings.filter.min_weight,
        max_weight=max_weight if max_weight is not None else settings.filter.max_weight,
        max_foods=max_foods if max_foods is not None else settings.filter.max_foods,
    )


# ============================================================================
# Commands
# ============================================================================


@app.command()
def solve(
    database: Optional[Path] = typer.Argument(
        None, help="Path to the '^'-delimited food database"
    ),
    calories: Optional[float] = typer.Option(
        None, "--calories", "-k", help="Calorie budget"
    ),
    strategy: Optional[str] = typer.Option(
        None, "--strategy", "-s", help="Strategy: greedy or exhaustive"
    ),
    min_weight: Optional[float] = typer.Option(
        None, "--min-weight", help="Smallest food weight to consider (oz)"
    ),
    max_weight: Optional[float] = typer.Option(
        None, "--max-weight", help="Largest food weight to consider (oz)"
    ),
    max_foods: Optional[int] = typer.Option(
        None, "--max-foods", "-n", help="Maximum foods to consider"
    ),
    output: Optional[str] = typer.Option(
        None, "--output", "-o", help="Output format: table, json, markdown"
    ),
) -> None:
    """Select the heaviest foods that fit within a calorie budget."""
    settings = get_settings()
    foods = load_foods_or_exit(database, settings)
    request = build_request(settings, strategy, calories, min_weight, max_weight, max_foods)

    result = solve_max_weight(request, foods)

    output_format = output or settings.defaults.output_format
    try:
        rendered = format_result(result, output_format, console=console)
    except ValueError as e:
        console.print(f"[red]{e}[/red]")
        raise typer.Exit(1)
    if rendered is not None:
        print(rendered)

    if not result.success:
        raise typer.Exit(1)


@app.command()
def compare(
    database: Optional[Path] = typer.Argument(
        None, help="Path to the '^'-delimited food database"
    ),
    calories: Optional[float] = typer.Option(
        None, "--calories", "-k", help="Calorie budget"
    ),
    min_weight: Optional[float] = typer.Option(
        None, "--min-weight", help="Smallest food weight to consider (oz)"
    ),
    max_weight: Optional[float] = typer.Option(
        None, "--max-weight", help="Largest food weight to consider (oz)"
    ),
    max_foods: Optional[int] = typer.Option(
        None, "--max-foods", "-n", help="Maximum foods to consider"
    ),
) -> None:
    """Run greedy and exhaustive search side by side."""
    settings = get_settings()
    foods = load_foods_or_exit(database, settings)
    request = build_request(settings, None, calories, min_weight, max_weight, max_foods)

    results = compare_strategies(request, foods)

    table = Table(title=f"Strategy Comparison (budget {request.calorie_budget:.0f} calories)")
    table.add_column("Strategy", style="cyan")
    table.add_column("Status")
    table.add_column("Foods", justify="right")
    table.add_column("Calories", justify="right")
    table.add_column("Weight (oz)", justify="right", style="green")
    table.add_column("Time", justify="right", style="dim")

    for name, result in results.items():
        if not result.success:
            table.add_row(name, f"[red]{result.status}[/red]", "-", "-", "-", "-")
            continue
        table.add_row(
            name,
            result.status,
            str(len(result.foods)),
            f"{result.total_calories:.2f}",
            f"{result.total_weight:.2f}",
            f"{result.solver_info['elapsed_seconds']:.3f}s",
        )

    console.print(table)

    greedy, exhaustive = results["greedy"], results["exhaustive"]
    if not exhaustive.success:
        console.print(f"[yellow]{exhaustive.message}[/yellow]")
    elif exhaustive.total_weight > 0:
        ratio = greedy.total_weight / exhaustive.total_weight
        console.print(f"Greedy reaches {ratio:.1%} of the optimal weight")


@app.command("filter")
def filter_command(
    database: Optional[Path] = typer.Argument(
        None, help="Path to the '^'-delimited food database"
    ),
    min_weight: Optional[float] = typer.Option(
        None, "--min-weight", help="Smallest food weight to keep (oz)"
    ),
    max_weight: Optional[float] = typer.Option(
        None, "--max-weight", help="Largest food weight to keep (oz)"
    ),
    max_foods: Optional[int] = typer.Option(
        None, "--max-foods", "-n", help="Maximum foods to keep"
    ),
) -> None:
    """Show the foods that pass the weight filter."""
    settings = get_settings()
    foods = load_foods_or_exit(database, settings)

    filtered = filter_food_vector(
        foods,
        min_weight if min_weight is not None else settings.filter.min_weight,
        max_weight if max_weight is not None else settings.filter.max_weight,
        max_foods if max_foods is not None else settings.filter.max_foods,
    )
    print_food_vector(filtered, console, title="Filtered Foods")
    console.print(f"[dim]Showing {len(filtered)} of {len(foods)} foods[/dim]")


@config_app.command("show")
def config_show() -> None:
    """Print the effective settings as YAML."""
    import yaml

    console.print(yaml.dump(get_settings().to_dict(), default_flow_style=False, sort_keys=False))


@config_app.command("init")
def config_init(
    path: Optional[Path] = typer.Option(
        None, "--path", help="Where to write config.yaml (default ~/.maxweight/config.yaml)"
    ),
    force: bool = typer.Option(False, "--force", help="Overwrite an existing file"),
) -> None:
    """Write a config.yaml holding the default settings."""
    target = path or default_config_path()
    if target.exists() and not force:
        console.print(f"[yellow]Config already exists: {target}[/yellow]")
        console.print("Use [cyan]--force[/cyan] to overwrite")
        raise typer.Exit(1)

    Settings().save(target)
    console.print(f"[green]Wrote default settings to {target}[/green]")


if __name__ == "__main__":
    app()
