"""Criterion scorers: five independent 0-100 sub-scores per recipe.

Pure and deterministic. Missing optional data (nutrition, tags) gives the
neutral score rather than an error. Constraint values are used as given;
validating them is the caller's job.
"""

from __future__ import annotations

import math
from dataclasses import dataclass
from typing import Iterable, List, Optional

from recipe_engine.data_layer.models import Ingredient, NutritionInfo, Recipe

# Score used when there is nothing to compare against
NEUTRAL_SCORE = 50.0

# Time: 2 points per minute over, capped at 80 so time alone never drops below 20
TIME_PENALTY_PER_MINUTE = 2
TIME_MAX_PENALTY = 80
TIME_FLOOR = 20

# Difficulty: 25 points per level over the limit, may reach 0
DIFFICULTY_PENALTY_PER_LEVEL = 25

# Nutrition: calories are compared per 10 kcal, protein/carbs per 0.5 g
CALORIE_DIVISOR = 10
MACRO_MULTIPLIER = 2


@dataclass
class ScoringWeights:
    """Weights for combining the five criterion scores."""
    ingredient_weight: float = 0.35
    time_weight: float = 0.25
    difficulty_weight: float = 0.15
    nutrition_weight: float = 0.15
    preference_weight: float = 0.10

    def __post_init__(self):
        """Validate weights sum to 1.0 and are non-negative."""
        weights = [self.ingredient_weight, self.time_weight,
                   self.difficulty_weight, self.nutrition_weight,
                   self.preference_weight]
        if any(w < 0 for w in weights):
            raise ValueError("All scoring weights must be non-negative")

        total = sum(weights)
        if abs(total - 1.0) > 0.001:
            raise ValueError(f"Scoring weights must sum to 1.0, got {total}")


def round_half_up(x: float) -> int:
    """Round .5 away from zero for positive scores (0.5 -> 1, 57.5 -> 58)."""
    return int(math.floor(x + 0.5))


def _clamp_score(x: float) -> float:
    """Clamp to [0, 100]."""
    return float(max(0.0, min(100.0, x)))


def normalize_names(names: Iterable[str]) -> List[str]:
    """Lower-case and de-duplicate, keeping first-seen order."""
    seen = {}
    for name in names:
        seen.setdefault(name.lower(), None)
    return list(seen)


def is_available(ingredient_name: str, available: Iterable[str]) -> bool:
    """Bidirectional case-insensitive substring test.

    "tomato" matches "cherry tomatoes" and "oil" matches "olive oil", but
    "chicken breast" does not match "chicken thigh".
    """
    name = ingredient_name.lower()
    for avail in available:
        avail = avail.lower()
        if avail in name or name in avail:
            return True
    return False


def required_ingredients(recipe: Recipe) -> List[Ingredient]:
    return [ing for ing in recipe.ingredients if not ing.optional]


# --- Ingredient match ---


def ingredient_match(recipe: Recipe, available: List[str]) -> float:
    """Share of required ingredients covered by `available` (0-100).

    A recipe without required ingredients scores 100.
    """
    required = required_ingredients(recipe)
    if not required:
        return 100.0
    matched = sum(1 for ing in required if is_available(ing.name, available))
    return _clamp_score(round_half_up(matched / len(required) * 100))


# --- Time match ---


def time_match(recipe: Recipe, max_time: float) -> float:
    """100 within the limit, then a linear penalty with a floor of 20."""
    total_time = recipe.cooking_time + recipe.prep_time
    if total_time <= max_time:
        return 100.0
    over_time = total_time - max_time
    penalty = min(over_time * TIME_PENALTY_PER_MINUTE, TIME_MAX_PENALTY)
    return _clamp_score(max(TIME_FLOOR, 100 - penalty))


# --- Difficulty match ---


def difficulty_match(recipe: Recipe, max_difficulty: float) -> float:
    if recipe.difficulty <= max_difficulty:
        return 100.0
    gap = recipe.difficulty - max_difficulty
    return _clamp_score(100 - gap * DIFFICULTY_PENALTY_PER_LEVEL)


# --- Nutrition match ---


def nutrition_match(recipe: Recipe, targets: Optional[NutritionInfo]) -> float:
    """Closeness of calories, protein and carbs to the targets that are set.

    Only truthy targets count (a target of 0 means "not specified"). With no
    targets, or no nutrition on the recipe, the score is neutral.
    """
    nutrition = recipe.nutrition
    if targets is None or nutrition is None:
        return NEUTRAL_SCORE

    subscores = []
    if targets.calories:
        diff = abs((nutrition.calories or 0) - targets.calories)
        subscores.append(max(0.0, 100 - diff / CALORIE_DIVISOR))
    if targets.protein:
        diff = abs((nutrition.protein or 0) - targets.protein)
        subscores.append(max(0.0, 100 - diff * MACRO_MULTIPLIER))
    if targets.carbs:
        diff = abs((nutrition.carbs or 0) - targets.carbs)
        subscores.append(max(0.0, 100 - diff * MACRO_MULTIPLIER))

    if not subscores:
        return NEUTRAL_SCORE
    return _clamp_score(round_half_up(sum(subscores) / len(subscores)))


# --- Preference match ---


def preference_match(recipe: Recipe, preferred_tags: List[str]) -> float:
    """Share of preferred tags the recipe carries (exact, case-insensitive)."""
    if not preferred_tags:
        return NEUTRAL_SCORE
    preferred = {tag.lower() for tag in preferred_tags}
    matching = [tag for tag in recipe.tags if tag.lower() in preferred]
    return _clamp_score(round_half_up(len(matching) / len(preferred_tags) * 100))
