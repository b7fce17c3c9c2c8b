"""CLI for recipe management using typer."""

from functools import wraps
from typing import Annotated, Optional

import typer
from dotenv import load_dotenv

from .collection import DEFAULT_QUICK_TIME, find_recipe, get_quick_recipes
from .defaults import default_recipes
from .display import (
    display_error,
    display_formatted_recipe,
    display_info,
    display_recipe_details,
    display_recipe_list,
    display_steps,
    display_success,
    display_warning,
)
from .errors import RecipeError, RecipeNotFoundError
from .formatting import format_number
from .logger import configure_logging, get_logger, set_command
from .models import Recipe
from .profile import Profile
from .prompts import (
    prompt_for_confirmation,
    prompt_for_ingredient,
    prompt_for_recipe_info,
    prompt_for_step,
    prompt_for_step_index,
)
from .recipes import add_ingredient, add_step, create_recipe, remove_step
from .storage import RecipeStorage

load_dotenv()

logger = get_logger()

app = typer.Typer(
    help="Simple recipe manager",
    epilog="Examples: recipebox list | recipebox view 1678972583949 | recipebox quick 20",
    context_settings={"help_option_names": ["-h", "--help"]},
    no_args_is_help=True,
)

RecipeId = Annotated[int, typer.Argument(help="Recipe ID", metavar="ID")]


def get_storage() -> RecipeStorage:
    """Storage for the active profile's data file."""
    return RecipeStorage(Profile.current().data_file)


def handle_errors(func):
    """Report recipebox errors on the console and exit with status 1."""
    @wraps(func)
    def wrapper(*args, **kwargs):
        try:
            return func(*args, **kwargs)
        except RecipeNotFoundError as e:
            display_warning(str(e))
            raise typer.Exit(1)
        except RecipeError as e:
            logger.error(f"{func.__name__} failed: {e}")
            display_error(str(e))
            raise typer.Exit(1)
    return wrapper


def _get_recipe(storage: RecipeStorage, recipe_id: int) -> Recipe:
    recipe = storage.find_by_id(recipe_id)
    if recipe is None:
        raise RecipeNotFoundError(recipe_id)
    return recipe


@app.callback()
def main_callback(ctx: typer.Context):
    """Command-line recipe manager."""
    configure_logging(Profile.current())
    set_command(ctx.invoked_subcommand)


@app.command("list")
@handle_errors
def list_recipes():
    """List all recipes."""
    recipes = get_storage().load()
    logger.info(f"Listing {len(recipes)} recipes")
    display_recipe_list(recipes)


@app.command()
@handle_errors
def view(recipe_id: RecipeId):
    """View recipe details."""
    recipe = _get_recipe(get_storage(), recipe_id)
    display_recipe_details(recipe)


@app.command("format")
@handle_errors
def format_command(recipe_id: RecipeId):
    """View formatted recipe."""
    recipe = _get_recipe(get_storage(), recipe_id)
    display_formatted_recipe(recipe)


@app.command()
@handle_errors
def find(name: Annotated[str, typer.Argument(help="Exact recipe name")]):
    """Find a recipe by name and show its details."""
    recipe = find_recipe(get_storage().load(), name)
    if recipe is None:
        display_warning(f'No recipe named "{name}"')
        raise typer.Exit(1)
    display_recipe_details(recipe)


@app.command()
@handle_errors
def create():
    """Create a new recipe."""
    storage = get_storage()
    info = prompt_for_recipe_info()
    recipe = create_recipe(info["name"], info["cooking_time"], info["servings"])

    storage.insert(recipe)
    logger.info(f"Created recipe {recipe.id}: {recipe.name}")
    display_success(f'Recipe "{recipe.name}" created with ID: {recipe.id}')


@app.command("add-ingredient")
@handle_errors
def add_ingredient_command(recipe_id: RecipeId):
    """Add ingredient to a recipe."""
    storage = get_storage()
    recipe = _get_recipe(storage, recipe_id)

    info = prompt_for_ingredient()
    updated = add_ingredient(recipe, info["name"], info["amount"], info["unit"])

    storage.replace(updated)
    logger.info(f"Added ingredient {info['name']} to recipe {recipe.id}")
    display_success(f'Added {info["name"]} to "{recipe.name}"')


@app.command("add-step")
@handle_errors
def add_step_command(recipe_id: RecipeId):
    """Add step to a recipe."""
    storage = get_storage()
    recipe = _get_recipe(storage, recipe_id)

    instruction = prompt_for_step()
    updated = add_step(recipe, instruction)

    storage.replace(updated)
    logger.info(f"Added step {len(updated.steps)} to recipe {recipe.id}")
    display_success(f'Added step {len(updated.steps)} to "{recipe.name}"')


@app.command("remove-step", context_settings={"ignore_unknown_options": True})
@handle_errors
def remove_step_command(
    recipe_id: RecipeId,
    step_index: Annotated[Optional[int], typer.Argument(help="Step number to remove (1-based)")] = None,
):
    """Remove a step from a recipe."""
    storage = get_storage()
    recipe = _get_recipe(storage, recipe_id)

    if not recipe.steps:
        display_warning("This recipe has no steps to remove")
        raise typer.Exit(1)

    if step_index is None:
        display_steps(recipe)
        index = prompt_for_step_index(len(recipe.steps))
    else:
        if not 1 <= step_index <= len(recipe.steps):
            display_warning(f"Invalid step index. Please use a number between 1 and {len(recipe.steps)}")
            raise typer.Exit(1)
        index = step_index - 1

    updated = remove_step(recipe, index)

    storage.replace(updated)
    logger.info(f"Removed step {index + 1} from recipe {recipe.id}")
    display_success(f'Removed step {index + 1} from "{recipe.name}"')


@app.command()
@handle_errors
def delete(recipe_id: RecipeId):
    """Delete a recipe."""
    storage = get_storage()
    recipe = _get_recipe(storage, recipe_id)

    if not prompt_for_confirmation(f'Are you sure you want to delete "{recipe.name}"?'):
        display_info("Delete cancelled")
        return

    storage.delete_by_id(recipe_id)
    logger.info(f"Deleted recipe {recipe_id}")
    display_success(f'Deleted recipe "{recipe.name}"')


@app.command()
@handle_errors
def quick(
    time: Annotated[float, typer.Argument(help="Maximum cooking time in minutes")] = DEFAULT_QUICK_TIME,
):
    """Find recipes that can be made quickly."""
    recipes = get_quick_recipes(get_storage().load(), time)
    logger.info(f"Found {len(recipes)} recipes ready within {time} minutes")
    display_recipe_list(recipes, title=f"Ready in {format_number(time)} minutes or less")


@app.command("reset-data")
@handle_errors
def reset_data():
    """Reset recipe data to the example recipes."""
    if not prompt_for_confirmation(
        "Are you sure you want to reset all recipe data to defaults? This cannot be undone."
    ):
        display_info("Reset cancelled")
        return

    storage = get_storage()
    recipes = default_recipes()
    storage.reset(recipes)
    display_success("Recipe data has been reset to defaults")
    display_info(f"Data file: {storage.path}")
    display_info(f"Recipes added: {len(recipes)}")


def main():
    """Entry point for the recipebox CLI."""
    app()


if __name__ == "__main__":
    main()
