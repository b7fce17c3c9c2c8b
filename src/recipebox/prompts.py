"""Interactive prompts that collect recipe fields from the user."""

import math
from typing import Dict

from rich.prompt import Confirm, FloatPrompt, IntPrompt, Prompt

from .display import console
from .models import Number


def _ask_text(message: str, error: str) -> str:
    while True:
        value = Prompt.ask(message, console=console)
        if value and value.strip():
            return value.strip()
        console.print(f"[red]{error}[/red]")


def _ask_positive_number(message: str, error: str) -> Number:
    while True:
        value = FloatPrompt.ask(message, console=console)
        if math.isfinite(value) and value > 0:
            return int(value) if value.is_integer() else value
        console.print(f"[red]{error}[/red]")


def _ask_positive_int(message: str, error: str, default: int) -> int:
    while True:
        value = IntPrompt.ask(message, console=console, default=default)
        if value > 0:
            return value
        console.print(f"[red]{error}[/red]")


def prompt_for_recipe_info() -> Dict[str, Number]:
    """Ask for a recipe's name, cooking time and servings."""
    name = _ask_text("Enter recipe name", "Recipe name is required")
    cooking_time = _ask_positive_number("Enter cooking time (minutes)", "Cooking time must be a positive number")
    servings = _ask_positive_int("Enter number of servings", "Number of servings must be a positive number", default=4)

    return {"name": name, "cooking_time": cooking_time, "servings": servings}


def prompt_for_ingredient() -> Dict[str, Number]:
    """Ask for an ingredient's name, amount and unit."""
    name = _ask_text("Enter ingredient name", "Ingredient name is required")
    amount = _ask_positive_number("Enter amount", "Amount must be a positive number")
    unit = _ask_text("Enter unit", "Unit is required")

    return {"name": name, "amount": amount, "unit": unit}


def prompt_for_step() -> str:
    """Ask for the instruction text of the next step."""
    return _ask_text("Next step instructions", "Instructions are required")


def prompt_for_step_index(count: int) -> int:
    """Ask for a step number between 1 and count and return it zero-based."""
    while True:
        value = IntPrompt.ask(f"Enter step number to remove (1-{count})", console=console)
        if 1 <= value <= count:
            return value - 1
        console.print(f"[red]Please enter a number between 1 and {count}[/red]")


def prompt_for_confirmation(message: str) -> bool:
    """Ask a yes/no question, defaulting to no."""
    return Confirm.ask(message, console=console, default=False)
