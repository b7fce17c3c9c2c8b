"""recipebox - a command-line recipe manager with JSON storage."""

from .collection import add_recipe, find_recipe, get_quick_recipes
from .errors import InvalidInputError, RecipeError, RecipeNotFoundError, StorageError
from .formatting import format_recipe, get_ingredients_list, get_steps_list, time_per_serving
from .models import Ingredient, Recipe
from .recipes import add_ingredient, add_step, create_recipe, remove_step
from .storage import RecipeStorage

__version__ = "0.1.0"

__all__ = [
    # Models
    "Recipe",
    "Ingredient",

    # Mutators
    "create_recipe",
    "add_ingredient",
    "add_step",
    "remove_step",

    # Formatting
    "time_per_serving",
    "get_steps_list",
    "get_ingredients_list",
    "format_recipe",

    # Collection
    "get_quick_recipes",
    "find_recipe",
    "add_recipe",

    # Storage and errors
    "RecipeStorage",
    "RecipeError",
    "RecipeNotFoundError",
    "InvalidInputError",
    "StorageError",
]
