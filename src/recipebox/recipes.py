"""Recipe creation and modification.

Every function here takes a :class:`Recipe` and returns an updated copy;
the recipe passed in is never modified.
"""

import math
import time
from datetime import date
from typing import Optional

from .errors import InvalidInputError
from .logger import get_logger
from .models import Ingredient, Number, Recipe

logger = get_logger("recipes")

_last_id = 0


def _next_id() -> int:
    """Millisecond timestamp, bumped so ids never repeat within a process."""
    global _last_id
    candidate = time.time_ns() // 1_000_000
    if candidate <= _last_id:
        candidate = _last_id + 1
    _last_id = candidate
    return candidate


def _date_label(today: Optional[date] = None) -> str:
    today = today or date.today()
    return f"{today.month}/{today.day}/{today.year}"


def _require_text(value: str, message: str) -> str:
    if value is None or not str(value).strip():
        raise InvalidInputError(message)
    return value


def _require_positive(value: Number, message: str) -> Number:
    if isinstance(value, bool) or not isinstance(value, (int, float)) or not math.isfinite(value) or value <= 0:
        raise InvalidInputError(message)
    return value


def create_recipe(name: str, cooking_time: Number, servings: int = 4) -> Recipe:
    """Create a new recipe with no ingredients or steps.

    Args:
        name: Name of the recipe
        cooking_time: Time to cook in minutes
        servings: Number of people served

    Returns:
        The new recipe, with a fresh id and today's date

    Raises:
        InvalidInputError: If name is blank or a number is not positive
    """
    _require_text(name, "Recipe name is required")
    _require_positive(cooking_time, "Cooking time must be a positive number")
    if isinstance(servings, bool) or not isinstance(servings, int) or servings <= 0:
        raise InvalidInputError("Servings must be a positive whole number")

    recipe = Recipe(
        id=_next_id(),
        name=name,
        cooking_time=cooking_time,
        servings=servings,
        date_created=_date_label(),
    )
    logger.debug(f"Created recipe {recipe.id}: {recipe.name}")
    return recipe


def add_ingredient(recipe: Recipe, name: str, amount: Number, unit: str) -> Recipe:
    """Return a copy of recipe with one more ingredient at the end."""
    _require_text(name, "Ingredient name is required")
    _require_positive(amount, "Amount must be a positive number")
    _require_text(unit, "Unit is required")

    updated = recipe.model_copy(deep=True)
    updated.ingredients.append(Ingredient(name=name, amount=amount, unit=unit))
    return updated


def add_step(recipe: Recipe, instruction: str) -> Recipe:
    """Return a copy of recipe with instruction appended to its steps."""
    _require_text(instruction, "Instructions are required")

    updated = recipe.model_copy(deep=True)
    updated.steps.append(instruction)
    return updated


def remove_step(recipe: Recipe, index: int) -> Recipe:
    """Return a copy of recipe without the step at zero-based index.

    Out-of-range indices are ignored and the copy keeps every step; callers
    that want an error must check the bounds themselves.
    """
    updated = recipe.model_copy(deep=True)
    if 0 <= index < len(updated.steps):
        del updated.steps[index]
    else:
        logger.debug(f"Ignoring step index {index} for recipe {recipe.id} with {len(recipe.steps)} steps")
    return updated


__all__ = [
    "create_recipe",
    "add_ingredient",
    "add_step",
    "remove_step",
]
