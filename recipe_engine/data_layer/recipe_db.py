"""Recipe catalog: loads scored-recipe records from a JSON file."""
import json
import logging
from pathlib import Path
from typing import List, Optional

from recipe_engine.data_layer.exceptions import DataFileError, RecipeNotFoundError
from recipe_engine.data_layer.models import (
    Ingredient,
    NutritionInfo,
    Recipe,
    StorageInfo,
    require_mapping,
)

logger = logging.getLogger(__name__)


class RecipeDB:
    """In-memory catalog of recipes, keyed by recipe id."""

    def __init__(self, json_path: str):
        """Load the catalog at ``json_path`` (top-level ``"recipes"`` list).

        Args:
            json_path: Catalog file path

        Raises:
            FileNotFoundError: If the JSON file doesn't exist
            DataFileError: If the file is not valid JSON or a recipe is malformed
        """
        self.json_path = Path(json_path)
        self._recipes: List[Recipe] = []
        self._load_recipes()

    def _load_recipes(self):
        """Read the catalog file and parse every entry, failing on the first bad one."""
        with open(self.json_path, "r") as f:
            try:
                data = json.load(f)
            except json.JSONDecodeError as exc:
                raise DataFileError(str(self.json_path), str(exc)) from exc

        recipes_data = data.get("recipes", []) if isinstance(data, dict) else None
        if not isinstance(recipes_data, list):
            raise DataFileError(str(self.json_path), "'recipes' must be a list")

        for recipe_data in recipes_data:
            try:
                recipe = self._parse_recipe(recipe_data)
            except (KeyError, TypeError, ValueError) as exc:
                raise DataFileError(
                    str(self.json_path), f"bad recipe entry: {exc!r}"
                ) from exc
            self._recipes.append(recipe)

        logger.info("Loaded %d recipes from %s", len(self._recipes), self.json_path)

    def _parse_recipe(self, recipe_data: dict) -> Recipe:
        """Build a Recipe from one catalog entry.

        Missing times default to 0, difficulty to 1 and servings to 1;
        ``id`` and ``name`` are required.
        """
        require_mapping(recipe_data, "recipe entry")
        ingredients = [
            self._parse_ingredient(ing_data)
            for ing_data in recipe_data.get("ingredients", [])
        ]

        nutrition_data = recipe_data.get("nutrition")
        storage_data = recipe_data.get("storage_info")

        return Recipe(
            id=str(recipe_data["id"]),
            name=recipe_data["name"],
            ingredients=ingredients,
            cooking_time=int(recipe_data.get("cooking_time", 0)),
            prep_time=int(recipe_data.get("prep_time", 0)),
            difficulty=int(recipe_data.get("difficulty", 1)),
            tags=[str(tag) for tag in recipe_data.get("tags", [])],
            nutrition=NutritionInfo.from_dict(nutrition_data) if nutrition_data else None,
            bulk_cooking_multiplier=float(recipe_data.get("bulk_cooking_multiplier", 1.0)),
            storage_info=StorageInfo.from_dict(storage_data) if storage_data else None,
            servings=int(recipe_data.get("servings", 1)),
            description=recipe_data.get("description"),
            instructions=list(recipe_data.get("instructions", [])),
        )

    def _parse_ingredient(self, ing_data: dict) -> Ingredient:
        """Parse a single ingredient from dictionary data."""
        require_mapping(ing_data, "ingredient")
        return Ingredient(
            name=ing_data["name"],
            quantity=float(ing_data.get("quantity", 0.0)),
            unit=ing_data.get("unit", ""),
            optional=bool(ing_data.get("optional", False)),
            substitutes=tuple(str(s) for s in ing_data.get("substitutes", [])),
        )

    def get_all_recipes(self) -> List[Recipe]:
        """Return a copy of the catalog, in file order."""
        return self._recipes.copy()

    def get_recipe_by_id(self, recipe_id: str) -> Optional[Recipe]:
        """Look up a recipe by id.

        Args:
            recipe_id: Catalog id, compared exactly

        Returns:
            The matching Recipe, or None
        """
        for recipe in self._recipes:
            if recipe.id == recipe_id:
                return recipe
        return None

    def require_recipe(self, recipe_id: str) -> Recipe:
        """Like get_recipe_by_id, but raises RecipeNotFoundError when absent."""
        recipe = self.get_recipe_by_id(recipe_id)
        if recipe is None:
            raise RecipeNotFoundError(recipe_id)
        return recipe
