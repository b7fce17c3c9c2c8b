"""Storage operations for the recipe collection.

The whole collection lives in one JSON array. Every operation loads the full
list, changes it in memory and writes the full list back.
"""

import json
from pathlib import Path
from typing import List, Optional, Sequence, Union

from pydantic import TypeAdapter, ValidationError

from .collection import add_recipe
from .errors import RecipeNotFoundError, StorageError
from .logger import get_logger
from .models import Recipe

logger = get_logger("storage")

_recipe_list = TypeAdapter(List[Recipe])


class RecipeStorage:
    """Handle recipe storage in a JSON file."""

    def __init__(self, path: Union[str, Path]):
        """Initialize storage for the given data file."""
        self.path = Path(path)

    def load(self) -> List[Recipe]:
        """Load every recipe. A missing file is an empty collection."""
        if not self.path.exists():
            logger.info(f"No recipe data file at {self.path}, starting empty")
            return []

        logger.debug(f"Loading recipes from {self.path}")
        try:
            data = json.loads(self.path.read_text(encoding="utf-8"))
            recipes = _recipe_list.validate_python(data)
        except (OSError, ValueError, ValidationError) as e:
            logger.error(f"Error loading recipes from {self.path}: {e}")
            raise StorageError("load", self.path, e) from e

        return recipes

    def save_all(self, recipes: Sequence[Recipe]) -> None:
        """Overwrite the data file with the given recipes."""
        logger.info(f"Saving {len(recipes)} recipes to {self.path}")
        try:
            content = json.dumps(
                [recipe.to_json_dict() for recipe in recipes],
                indent=2,
                ensure_ascii=False,
                allow_nan=False,
            )
            self.path.parent.mkdir(parents=True, exist_ok=True)
            self.path.write_text(content + "\n", encoding="utf-8")
        except (OSError, ValueError) as e:
            logger.error(f"Error saving recipes to {self.path}: {e}")
            raise StorageError("save", self.path, e) from e

    def find_by_id(self, recipe_id: int) -> Optional[Recipe]:
        """Load a single recipe by id, or None if there is no such recipe."""
        return next((recipe for recipe in self.load() if recipe.id == recipe_id), None)

    def insert(self, recipe: Recipe) -> None:
        """Append a recipe to the stored collection."""
        recipes = self.load()
        logger.info(f"Adding recipe: {recipe.name}")
        updated = add_recipe(recipes, recipe)
        if len(updated) == len(recipes):
            logger.warning(f"Recipe {recipe.id} is already stored, not adding it again")
            return
        self.save_all(updated)

    def replace(self, recipe: Recipe) -> None:
        """Store recipe in place of the stored recipe with the same id."""
        recipes = self.load()
        for index, existing in enumerate(recipes):
            if existing.id == recipe.id:
                logger.info(f"Updating recipe: {recipe.name}")
                recipes[index] = recipe
                self.save_all(recipes)
                return

        logger.warning(f"Recipe with ID {recipe.id} not found for update")
        raise RecipeNotFoundError(recipe.id)

    def delete_by_id(self, recipe_id: int) -> Recipe:
        """Remove a recipe and return it."""
        recipes = self.load()
        remaining = [recipe for recipe in recipes if recipe.id != recipe_id]

        if len(remaining) == len(recipes):
            logger.warning(f"Recipe with ID {recipe_id} not found for deletion")
            raise RecipeNotFoundError(recipe_id)

        removed = next(recipe for recipe in recipes if recipe.id == recipe_id)
        logger.info(f"Deleting recipe with ID: {recipe_id}")
        self.save_all(remaining)
        return removed

    def reset(self, recipes: Sequence[Recipe]) -> None:
        """Throw away the stored collection and store recipes instead."""
        logger.info(f"Resetting {self.path} to {len(recipes)} recipes")
        self.save_all(recipes)


__all__ = ["RecipeStorage"]
