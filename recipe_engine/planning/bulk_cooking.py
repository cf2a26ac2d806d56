"""Bulk-cooking and complementary-recipe selection."""

from __future__ import annotations

import dataclasses
import logging
from typing import List, Optional, Sequence

from recipe_engine.data_layer.models import (
    NutritionInfo,
    Recipe,
    RecipeConstraints,
    RecipeScore,
)
from recipe_engine.scoring.recipe_scorer import RecipeScorer

logger = logging.getLogger(__name__)

DEFAULT_BULK_DAYS = 4

# Added on top of the weighted score without re-clamping, so bulk
# suggestions may score above 100.
BULK_COOKING_BONUS = 20

MAX_COMPLEMENTARY_RECIPES = 5

# A candidate fills a gap when it carries more than this much of the macro
PROTEIN_THRESHOLD_G = 10
CARBS_THRESHOLD_G = 20
FAT_THRESHOLD_G = 5


def is_bulk_suitable(recipe: Recipe, days: int = DEFAULT_BULK_DAYS) -> bool:
    """Scales up (multiplier > 1) and keeps in the fridge for `days`."""
    if recipe.bulk_cooking_multiplier <= 1 or recipe.storage_info is None:
        return False
    return (recipe.storage_info.fridge_days or 0) >= days


def suggest_bulk_cooking_recipes(
    recipes: Sequence[Recipe],
    constraints: RecipeConstraints,
    days: int = DEFAULT_BULK_DAYS,
    scorer: Optional[RecipeScorer] = None,
) -> List[RecipeScore]:
    """Score bulk-suitable recipes and add the bulk-cooking bonus.

    Only the constraint's own available_ingredients are used for matching;
    no inventory is consulted.
    """
    scorer = scorer or RecipeScorer()
    suitable = [recipe for recipe in recipes if is_bulk_suitable(recipe, days)]
    logger.debug("%d of %d recipes suitable for %d-day bulk cooking",
                 len(suitable), len(recipes), days)

    boosted = [
        dataclasses.replace(score, score=score.score + BULK_COOKING_BONUS)
        for score in scorer.score_recipes(suitable, constraints)
    ]
    boosted.sort(key=lambda s: s.score, reverse=True)
    return boosted


def _fills_gap(candidate: NutritionInfo,
               protein_gap: float,
               carb_gap: float,
               fat_gap: float) -> bool:
    return (
        (protein_gap > 0 and (candidate.protein or 0) > PROTEIN_THRESHOLD_G) or
        (carb_gap > 0 and (candidate.carbs or 0) > CARBS_THRESHOLD_G) or
        (fat_gap > 0 and (candidate.fat or 0) > FAT_THRESHOLD_G)
    )


def find_complementary_recipes(
    base_recipe: Recipe,
    candidates: Sequence[Recipe],
    nutrition_targets: NutritionInfo,
) -> List[Recipe]:
    """Recipes that help close the macro gap the base recipe leaves.

    The gap for protein, carbs and fat is target minus the base recipe's
    amount. Returns the first few qualifying candidates in input order; a
    base recipe without nutrition data yields nothing.
    """
    base = base_recipe.nutrition
    if base is None:
        return []

    protein_gap = (nutrition_targets.protein or 0) - (base.protein or 0)
    carb_gap = (nutrition_targets.carbs or 0) - (base.carbs or 0)
    fat_gap = (nutrition_targets.fat or 0) - (base.fat or 0)

    complementary = [
        recipe for recipe in candidates
        if recipe.nutrition is not None
        and _fills_gap(recipe.nutrition, protein_gap, carb_gap, fat_gap)
    ]
    return complementary[:MAX_COMPLEMENTARY_RECIPES]
