"""RecipeEngine: one entry point for every recipe recommendation operation.

The engine is stateless. All data comes in through arguments and every call
runs to completion on the calling thread, so a single instance can be shared
freely. It performs no input validation: constraint values such as a negative
max_cooking_time are scored as given, and guarding against them is the
calling layer's responsibility.
"""

from typing import Iterable, List, Optional, Sequence

from recipe_engine.data_layer.models import (
    InventoryItem,
    NutritionInfo,
    Recipe,
    RecipeConstraints,
    RecipeScore,
)
from recipe_engine.planning.bulk_cooking import (
    DEFAULT_BULK_DAYS,
    find_complementary_recipes,
    suggest_bulk_cooking_recipes,
)
from recipe_engine.planning.feasibility import (
    DEFAULT_MAX_MISSING_INGREDIENTS,
    find_makeable_recipes,
)
from recipe_engine.planning.variations import generate_recipe_variations
from recipe_engine.scoring.criteria import ScoringWeights
from recipe_engine.scoring.recipe_scorer import RecipeScorer


class RecipeEngine:
    """Ranks, filters and varies recipes for a user's constraints."""

    def __init__(self, weights: Optional[ScoringWeights] = None):
        self.scorer = RecipeScorer(weights)

    def score_recipes(self,
                      recipes: Sequence[Recipe],
                      constraints: RecipeConstraints,
                      inventory: Iterable[InventoryItem] = ()) -> List[RecipeScore]:
        """Rank recipes by weighted fitness (see RecipeScorer)."""
        return self.scorer.score_recipes(recipes, constraints, inventory)

    def find_makeable_recipes(self,
                              recipes: Sequence[Recipe],
                              inventory: Iterable[InventoryItem],
                              max_missing_ingredients: int = DEFAULT_MAX_MISSING_INGREDIENTS
                              ) -> List[RecipeScore]:
        return find_makeable_recipes(recipes, inventory, max_missing_ingredients)

    def suggest_bulk_cooking_recipes(self,
                                     recipes: Sequence[Recipe],
                                     constraints: RecipeConstraints,
                                     days: int = DEFAULT_BULK_DAYS) -> List[RecipeScore]:
        return suggest_bulk_cooking_recipes(recipes, constraints, days, scorer=self.scorer)

    def find_complementary_recipes(self,
                                   base_recipe: Recipe,
                                   candidates: Sequence[Recipe],
                                   nutrition_targets: NutritionInfo) -> List[Recipe]:
        return find_complementary_recipes(base_recipe, candidates, nutrition_targets)

    def generate_recipe_variations(self,
                                   base_recipe: Recipe,
                                   available_ingredients: Sequence[str]) -> List[Recipe]:
        return generate_recipe_variations(base_recipe, available_ingredients)
