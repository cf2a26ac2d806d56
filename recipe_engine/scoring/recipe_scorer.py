"""Recipe scoring system: weighted multi-criteria ranking."""

import logging
from typing import Iterable, List, Optional, Sequence

from recipe_engine.data_layer.models import (
    InventoryItem,
    Recipe,
    RecipeConstraints,
    RecipeScore,
    ScoreBreakdown,
)
from recipe_engine.scoring.criteria import (
    ScoringWeights,
    difficulty_match,
    ingredient_match,
    is_available,
    normalize_names,
    nutrition_match,
    preference_match,
    required_ingredients,
    round_half_up,
    time_match,
)
from recipe_engine.scoring.pricing import estimate_recipe_cost

logger = logging.getLogger(__name__)


class RecipeScorer:
    """Scores recipes against ingredient availability, time, difficulty,
    nutrition targets and tag preferences.

    Holds no state besides its weights, so one instance can be shared
    between threads.
    """

    def __init__(self, weights: Optional[ScoringWeights] = None):
        """Initialize recipe scorer.

        Args:
            weights: Optional custom scoring weights
        """
        self.weights = weights or ScoringWeights()

    def score_recipes(self,
                      recipes: Sequence[Recipe],
                      constraints: RecipeConstraints,
                      inventory: Iterable[InventoryItem] = ()) -> List[RecipeScore]:
        """Score and rank recipes, best first.

        Args:
            recipes: Candidate recipes
            constraints: Query constraints
            inventory: Items the user has; their names count as available

        Returns:
            One RecipeScore per recipe, sorted by score descending. Equal
            scores keep their input order.
        """
        available = available_ingredient_names(constraints, inventory)
        scores = [self.score_recipe(recipe, constraints, available) for recipe in recipes]
        # list.sort is stable
        scores.sort(key=lambda s: s.score, reverse=True)
        logger.debug("Scored %d recipes against %d available ingredients",
                     len(scores), len(available))
        return scores

    def score_recipe(self,
                     recipe: Recipe,
                     constraints: RecipeConstraints,
                     available: List[str]) -> RecipeScore:
        """Score one recipe.

        Args:
            recipe: Recipe to score
            constraints: Query constraints
            available: Lower-cased available ingredient names

        Returns:
            RecipeScore with a total in [0, 100] and its breakdown
        """
        breakdown = ScoreBreakdown(
            ingredient_match=ingredient_match(recipe, available),
            time_match=time_match(recipe, constraints.max_cooking_time),
            difficulty_match=difficulty_match(recipe, constraints.max_difficulty),
            nutrition_match=nutrition_match(recipe, constraints.nutrition_targets),
            preference_match=preference_match(recipe, constraints.preferred_tags or []),
        )

        total_score = (
            breakdown.ingredient_match * self.weights.ingredient_weight +
            breakdown.time_match * self.weights.time_weight +
            breakdown.difficulty_match * self.weights.difficulty_weight +
            breakdown.nutrition_match * self.weights.nutrition_weight +
            breakdown.preference_match * self.weights.preference_weight
        )

        missing = find_missing_ingredients(recipe, available)
        return RecipeScore(
            recipe=recipe,
            score=round_half_up(total_score),
            breakdown=breakdown,
            missing_ingredients=missing,
            estimated_cost=estimate_recipe_cost(missing),
        )


def available_ingredient_names(constraints: RecipeConstraints,
                               inventory: Iterable[InventoryItem] = ()) -> List[str]:
    """Union of the constraint's ingredient list and inventory item names,
    lower-cased and de-duplicated."""
    names = list(constraints.available_ingredients or [])
    names.extend(item.item_name for item in inventory)
    return normalize_names(names)


def find_missing_ingredients(recipe: Recipe, available: List[str]) -> List[str]:
    """Names of required ingredients not covered by `available`.

    Uses the same substring test as ingredient_match; optional ingredients
    are never reported.
    """
    return [
        ing.name for ing in required_ingredients(recipe)
        if not is_available(ing.name, available)
    ]
