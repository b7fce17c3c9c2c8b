"""Console output for recipes and status messages."""

from typing import Sequence

from rich.console import Console
from rich.markup import escape
from rich.panel import Panel
from rich.table import Table

from .formatting import format_number, format_recipe
from .models import Recipe

console = Console()


def display_recipe_list(recipes: Sequence[Recipe], title: str = "Recipes") -> None:
    """Show recipes in a table with ID, Name, Cooking Time and Servings columns."""
    if not recipes:
        console.print("[yellow]No recipes found[/yellow]")
        return

    table = Table(title=title, show_header=True)
    table.add_column("ID", style="cyan", no_wrap=True)
    table.add_column("Name", style="red")
    table.add_column("Cooking Time", style="green", justify="right")
    table.add_column("Servings", style="yellow", justify="right")

    for recipe in recipes:
        table.add_row(
            str(recipe.id),
            escape(recipe.name),
            f"{format_number(recipe.cooking_time)} min",
            str(recipe.servings),
        )

    console.print(table)


def display_recipe_details(recipe: Recipe) -> None:
    """Show every field of a recipe in a panel."""
    lines = [
        f"[bold]ID:[/bold] {recipe.id}",
        f"[bold]Cooking Time:[/bold] {format_number(recipe.cooking_time)} minutes",
        f"[bold]Servings:[/bold] {recipe.servings}",
        f"[bold]Date Created:[/bold] {escape(recipe.date_created)}",
        "",
        "[bold cyan]Ingredients:[/bold cyan]",
    ]

    if recipe.ingredients:
        for item in recipe.ingredients:
            lines.append(f"  • {format_number(item.amount)} {escape(item.unit)} {escape(item.name)}")
    else:
        lines.append("  [yellow]No ingredients added yet[/yellow]")

    lines.append("")
    lines.append("[bold cyan]Steps:[/bold cyan]")
    if recipe.steps:
        for number, step in enumerate(recipe.steps, start=1):
            lines.append(f"  {number}. {escape(step)}")
    else:
        lines.append("  [yellow]No steps added yet[/yellow]")

    console.print(Panel(
        "\n".join(lines),
        title=f"Recipe: {escape(recipe.name)}",
        border_style="cyan",
        padding=(1, 2),
    ))


def display_formatted_recipe(recipe: Recipe) -> None:
    """Print the plain-text block from format_recipe."""
    console.print()
    console.print(format_recipe(recipe), markup=False, highlight=False)
    console.print()


def display_steps(recipe: Recipe) -> None:
    """Print the numbered steps of a recipe."""
    console.print("[cyan]Current steps:[/cyan]")
    for number, step in enumerate(recipe.steps, start=1):
        console.print(f"{number}. {escape(step)}", highlight=False)


def display_success(message: str) -> None:
    console.print(f"[green]✓ {escape(message)}[/green]")


def display_error(message: str) -> None:
    console.print(f"[red]✗ {escape(message)}[/red]")


def display_warning(message: str) -> None:
    console.print(f"[yellow]⚠ {escape(message)}[/yellow]")


def display_info(message: str) -> None:
    console.print(f"[blue]ℹ {escape(message)}[/blue]")
