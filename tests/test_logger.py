from loguru import logger

from recipebox.logger import configure_logging
from recipebox.recipes import create_recipe


def test_library_use_is_quiet() -> None:
    messages = []
    sink = logger.add(messages.append, level="DEBUG")
    try:
        create_recipe("Toast", 5, 1)
    finally:
        logger.remove(sink)

    assert messages == []


def test_configure_logging_enables_output(profile) -> None:
    configure_logging(profile)
    messages = []
    sink = logger.add(messages.append, level="DEBUG")
    try:
        create_recipe("Toast", 5, 1)
    finally:
        logger.remove(sink)

    assert any("Created recipe" in message for message in messages)
    assert profile.log_file.exists()
