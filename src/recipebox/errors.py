"""
Exception classes for recipebox
"""


class RecipeError(Exception):
    """Base exception for recipebox"""
    pass


class RecipeNotFoundError(RecipeError):
    """Raised when no recipe has the requested id"""
    def __init__(self, recipe_id: int):
        self.recipe_id = recipe_id
        super().__init__(f"Recipe with ID {recipe_id} not found")


class InvalidInputError(RecipeError):
    """Raised when a required field is empty or a number is not positive"""
    pass


class StorageError(RecipeError):
    """Raised when the recipe file cannot be read, parsed or written"""
    def __init__(self, action: str, path, error: Exception):
        self.action = action
        self.path = path
        self.error = error
        super().__init__(f"Failed to {action} recipes at {path}: {error}")
