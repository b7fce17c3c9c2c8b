"""Human-readable text for recipes."""

from .models import Number, Recipe


def format_number(value: Number) -> str:
    """Render 2.0 as "2" and 1.5 as "1.5"."""
    if isinstance(value, float) and value.is_integer():
        return str(int(value))
    return str(value)


def time_per_serving(recipe: Recipe) -> float:
    """Cooking time divided by servings, in minutes."""
    if not recipe.servings:
        return 0.0
    return recipe.cooking_time / recipe.servings


def get_steps_list(recipe: Recipe) -> str:
    """Numbered steps, one per line, or a placeholder when there are none."""
    if not recipe.steps:
        return "No steps added yet"

    return "".join(f"{number}. {step}\n" for number, step in enumerate(recipe.steps, start=1))


def get_ingredients_list(recipe: Recipe) -> str:
    """Bulleted ingredients, one per line, or a placeholder when there are none."""
    if not recipe.ingredients:
        return "No ingredients added yet"

    return "".join(
        f"- {format_number(item.amount)} {item.unit} of {item.name}\n"
        for item in recipe.ingredients
    )


def format_recipe(recipe: Recipe) -> str:
    """Compose the full text block shown by the ``format`` command."""
    return (
        f"{recipe.name} for {recipe.servings} people\n"
        f"Cooking time: {format_number(recipe.cooking_time)} minutes\n"
        f"Time per serving: {time_per_serving(recipe):.1f} minutes\n"
        f"\n"
        f"Ingredients:\n"
        f"{get_ingredients_list(recipe).rstrip()}\n"
        f"\n"
        f"Steps:\n"
        f"{get_steps_list(recipe).rstrip()}"
    )


__all__ = [
    "format_number",
    "time_per_serving",
    "get_steps_list",
    "get_ingredients_list",
    "format_recipe",
]
