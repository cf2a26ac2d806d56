"""Custom exceptions for the recipe engine data layer.

The scoring engine itself never raises for well-typed input; these are raised
only where catalog, inventory or constraints data is read from disk.
"""


class DataFileError(Exception):
    """Raised when a data file is missing fields or has the wrong shape."""

    def __init__(self, path: str, reason: str):
        """Initialize exception with the offending file and reason.

        Args:
            path: Path of the file being loaded
            reason: What was wrong with it
        """
        self.path = path
        self.reason = reason
        super().__init__(f"Invalid data file '{path}': {reason}")


class RecipeNotFoundError(Exception):
    """Raised when a recipe id is not present in the recipe catalog."""

    def __init__(self, recipe_id: str):
        self.recipe_id = recipe_id
        super().__init__(f"Recipe '{recipe_id}' not found")
