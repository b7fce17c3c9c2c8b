import json
import math

import pytest

from recipebox.defaults import default_recipes
from recipebox.errors import RecipeNotFoundError, StorageError
from recipebox.models import Recipe
from recipebox.recipes import add_ingredient, add_step, create_recipe
from recipebox.storage import RecipeStorage


def test_missing_file_loads_empty(storage) -> None:
    assert not storage.path.exists()
    assert storage.load() == []


def test_round_trip(storage) -> None:
    recipe = create_recipe("Pancakes", 20, 6)
    recipe = add_ingredient(recipe, "Milk", 1.5, "cups")
    recipe = add_step(recipe, "Mix")
    recipes = [*default_recipes(), recipe]

    storage.save_all(recipes)

    assert storage.load() == recipes


def test_saved_json_key_order(storage) -> None:
    storage.save_all([create_recipe("Toast", 5, 1)])

    data = json.loads(storage.path.read_text(encoding="utf-8"))

    assert list(data[0]) == ["id", "name", "cookingTime", "servings", "ingredients", "steps", "dateCreated"]


def test_saved_json_is_indented(storage) -> None:
    storage.save_all([create_recipe("Toast", 5, 1)])
    assert '\n  {\n    "id": ' in storage.path.read_text(encoding="utf-8")


def test_integers_stay_integers(seeded_storage) -> None:
    data = json.loads(seeded_storage.path.read_text(encoding="utf-8"))
    assert data[0]["cookingTime"] == 45
    assert isinstance(data[0]["cookingTime"], int)
    assert data[1]["ingredients"][2]["amount"] == 1.75


def test_save_creates_parent_directory(tmp_path) -> None:
    storage = RecipeStorage(tmp_path / "nested" / "dir" / "recipes.json")
    storage.save_all([])
    assert storage.load() == []


def test_invalid_json_raises_storage_error(storage) -> None:
    storage.path.parent.mkdir(parents=True, exist_ok=True)
    storage.path.write_text("{not json", encoding="utf-8")

    with pytest.raises(StorageError):
        storage.load()


def test_invalid_record_raises_storage_error(storage) -> None:
    storage.path.parent.mkdir(parents=True, exist_ok=True)
    storage.path.write_text(json.dumps([{"id": 1, "name": ""}]), encoding="utf-8")

    with pytest.raises(StorageError):
        storage.load()


def test_write_failure_raises_storage_error(tmp_path) -> None:
    blocker = tmp_path / "blocker"
    blocker.write_text("a file, not a directory", encoding="utf-8")
    storage = RecipeStorage(blocker / "recipes.json")

    with pytest.raises(StorageError):
        storage.save_all([])


def test_find_by_id(seeded_storage) -> None:
    assert seeded_storage.find_by_id(1678972583950).name == "Caesar Salad"
    assert seeded_storage.find_by_id(42) is None


def test_insert_appends(seeded_storage) -> None:
    recipe = create_recipe("Toast", 5, 1)

    seeded_storage.insert(recipe)

    recipes = seeded_storage.load()
    assert len(recipes) == 4
    assert recipes[-1] == recipe


def test_insert_into_missing_file(storage) -> None:
    recipe = create_recipe("Toast", 5, 1)
    storage.insert(recipe)
    assert storage.load() == [recipe]


def test_insert_same_id_twice(storage) -> None:
    recipe = create_recipe("Toast", 5, 1)
    storage.insert(recipe)
    storage.insert(recipe)
    assert len(storage.load()) == 1


def test_replace_keeps_position(seeded_storage) -> None:
    salad = seeded_storage.find_by_id(1678972583950)
    updated = add_step(salad, "Enjoy")

    seeded_storage.replace(updated)

    recipes = seeded_storage.load()
    assert recipes[1].steps[-1] == "Enjoy"
    assert [r.name for r in recipes] == ["Spaghetti Bolognese", "Caesar Salad", "Pancakes"]


def test_replace_unknown_recipe(seeded_storage) -> None:
    with pytest.raises(RecipeNotFoundError):
        seeded_storage.replace(create_recipe("Toast", 5, 1))


def test_delete_by_id(seeded_storage) -> None:
    removed = seeded_storage.delete_by_id(1678972583949)

    assert removed.name == "Spaghetti Bolognese"
    assert [r.id for r in seeded_storage.load()] == [1678972583950, 1678972583951]


def test_delete_unknown_recipe(seeded_storage) -> None:
    with pytest.raises(RecipeNotFoundError):
        seeded_storage.delete_by_id(42)
    assert len(seeded_storage.load()) == 3


def test_reset_overwrites(storage) -> None:
    storage.save_all([create_recipe("Toast", 5, 1)])

    storage.reset(default_recipes())

    assert [r.name for r in storage.load()] == ["Spaghetti Bolognese", "Caesar Salad", "Pancakes"]


def test_default_recipes_are_fresh_copies() -> None:
    first = default_recipes()
    first[0].steps.append("extra")
    assert "extra" not in default_recipes()[0].steps


def test_non_finite_number_is_never_written(storage) -> None:
    bad = Recipe.model_construct(
        id=1, name="Soup", cooking_time=math.inf, servings=4,
        ingredients=[], steps=[], date_created="1/1/2024",
    )

    with pytest.raises(StorageError):
        storage.save_all([bad])
    assert not storage.path.exists()
