"""Feasibility: which recipes can be cooked right now from the inventory.

Unlike RecipeScorer this is quantity-aware: an ingredient counts as missing
when the stocked quantity is below what the recipe needs. The score is a flat
100 minus 10 per missing ingredient and is not comparable with the weighted
score.
"""

from __future__ import annotations

import logging
from typing import Dict, Iterable, List, Sequence

from recipe_engine.data_layer.models import (
    InventoryItem,
    Recipe,
    RecipeScore,
    ScoreBreakdown,
)
from recipe_engine.scoring.pricing import estimate_recipe_cost

logger = logging.getLogger(__name__)

DEFAULT_MAX_MISSING_INGREDIENTS = 2
MISSING_INGREDIENT_PENALTY = 10


def inventory_quantities(inventory: Iterable[InventoryItem]) -> Dict[str, float]:
    """Map lower-cased item name -> quantity. A later row for the same name wins."""
    return {item.item_name.lower(): item.quantity for item in inventory}


def missing_by_quantity(recipe: Recipe, quantities: Dict[str, float]) -> List[str]:
    """Required ingredients whose stocked quantity is below the recipe's need."""
    missing = []
    for ingredient in recipe.ingredients:
        if ingredient.optional:
            continue
        if quantities.get(ingredient.name.lower(), 0) < ingredient.quantity:
            missing.append(ingredient.name)
    return missing


def find_makeable_recipes(
    recipes: Sequence[Recipe],
    inventory: Iterable[InventoryItem],
    max_missing_ingredients: int = DEFAULT_MAX_MISSING_INGREDIENTS,
) -> List[RecipeScore]:
    """Recipes missing at most `max_missing_ingredients` required ingredients.

    Returns:
        RecipeScores sorted by the simplified score, best first; ties keep
        input order.
    """
    quantities = inventory_quantities(inventory)
    results: List[RecipeScore] = []

    for recipe in recipes:
        missing = missing_by_quantity(recipe, quantities)
        if len(missing) > max_missing_ingredients:
            continue
        score = 100 - len(missing) * MISSING_INGREDIENT_PENALTY
        results.append(RecipeScore(
            recipe=recipe,
            score=score,
            breakdown=ScoreBreakdown(
                ingredient_match=float(score),
                time_match=100.0,
                difficulty_match=100.0,
                nutrition_match=100.0,
                preference_match=100.0,
            ),
            missing_ingredients=missing,
            estimated_cost=estimate_recipe_cost(missing),
        ))

    results.sort(key=lambda s: s.score, reverse=True)
    logger.debug("%d of %d recipes makeable with at most %d missing",
                 len(results), len(recipes), max_missing_ingredients)
    return results
