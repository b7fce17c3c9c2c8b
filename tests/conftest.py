import pytest
from loguru import logger

from recipebox.defaults import default_recipes
from recipebox.profile import Profile
from recipebox.storage import RecipeStorage


@pytest.fixture(autouse=True)
def recipebox_home(tmp_path, monkeypatch):
    """Point every profile at a throwaway directory."""
    home = tmp_path / "home"
    monkeypatch.setenv("RECIPEBOX_HOME", str(home))
    monkeypatch.delenv("RECIPEBOX_PROFILE", raising=False)
    monkeypatch.delenv("RECIPEBOX_LOG_LEVEL", raising=False)
    yield home
    logger.remove()
    logger.disable("recipebox")


@pytest.fixture
def profile() -> Profile:
    return Profile.current()


@pytest.fixture
def storage(profile) -> RecipeStorage:
    return RecipeStorage(profile.data_file)


@pytest.fixture
def seeded_storage(storage) -> RecipeStorage:
    storage.reset(default_recipes())
    return storage
