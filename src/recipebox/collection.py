"""In-memory helpers over a list of recipes."""

from typing import List, Optional, Sequence

from .models import Number, Recipe

DEFAULT_QUICK_TIME = 30


def get_quick_recipes(recipes: Sequence[Recipe], max_time: Number = DEFAULT_QUICK_TIME) -> List[Recipe]:
    """Recipes that cook in max_time minutes or less, in their original order."""
    return [recipe for recipe in recipes if recipe.cooking_time <= max_time]


def find_recipe(recipes: Sequence[Recipe], name: str) -> Optional[Recipe]:
    """First recipe whose name matches exactly, or None."""
    return next((recipe for recipe in recipes if recipe.name == name), None)


def add_recipe(recipes: Sequence[Recipe], recipe: Recipe) -> List[Recipe]:
    """Return a new list with recipe appended unless its id is already present."""
    if any(existing.id == recipe.id for existing in recipes):
        return list(recipes)
    return [*recipes, recipe]


__all__ = [
    "DEFAULT_QUICK_TIME",
    "get_quick_recipes",
    "find_recipe",
    "add_recipe",
]
