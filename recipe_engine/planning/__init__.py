"""Planning module: feasibility, bulk cooking, pairings and variations."""

from .feasibility import find_makeable_recipes
from .bulk_cooking import suggest_bulk_cooking_recipes, find_complementary_recipes
from .variations import generate_recipe_variations, INGREDIENT_SUBSTITUTIONS

__all__ = [
    "find_makeable_recipes",
    "suggest_bulk_cooking_recipes",
    "find_complementary_recipes",
    "generate_recipe_variations",
    "INGREDIENT_SUBSTITUTIONS"
]
