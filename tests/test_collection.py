from recipebox.collection import add_recipe, find_recipe, get_quick_recipes
from recipebox.recipes import create_recipe


def test_get_quick_recipes_keeps_order() -> None:
    slow = create_recipe("Stew", 45)
    salad = create_recipe("Salad", 15)
    pancakes = create_recipe("Pancakes", 20)

    quick = get_quick_recipes([slow, salad, pancakes], 30)

    assert quick == [salad, pancakes]


def test_get_quick_recipes_default_is_thirty_minutes() -> None:
    exactly = create_recipe("Pasta", 30)
    over = create_recipe("Roast", 31)

    assert get_quick_recipes([exactly, over]) == [exactly]


def test_get_quick_recipes_does_not_mutate() -> None:
    recipes = [create_recipe("Stew", 45), create_recipe("Salad", 15)]
    get_quick_recipes(recipes, 10)
    assert len(recipes) == 2


def test_find_recipe() -> None:
    salad = create_recipe("Salad", 15)
    recipes = [create_recipe("Stew", 45), salad]

    assert find_recipe(recipes, "Salad") is salad
    assert find_recipe(recipes, "salad") is None


def test_add_recipe_skips_same_id() -> None:
    salad = create_recipe("Salad", 15)
    recipes = add_recipe([], salad)

    assert add_recipe(recipes, salad) == [salad]
    assert recipes == [salad]
