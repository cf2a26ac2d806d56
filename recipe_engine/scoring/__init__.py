"""Scoring module for recipe evaluation and ranking."""

from .criteria import ScoringWeights
from .recipe_scorer import RecipeScorer, find_missing_ingredients
from .pricing import estimate_recipe_cost

__all__ = [
    "RecipeScorer",
    "ScoringWeights",
    "find_missing_ingredients",
    "estimate_recipe_cost"
]
