from typing import Optional


class MfdsConfigError(Exception):
    """Raised when the recipe API key or base URL is missing."""


class MfdsApiError(Exception):
    def __init__(self, message: str, status_code: Optional[int] = None):
        super().__init__(message)
        self.status_code = status_code


class RecipeNotFoundError(Exception):
    def __init__(self, recipe_id: str):
        super().__init__(f"Recipe {recipe_id} was not found.")
        self.recipe_id = recipe_id
