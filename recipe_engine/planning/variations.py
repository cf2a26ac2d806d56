"""Recipe variations by ingredient substitution."""

from __future__ import annotations

import dataclasses
from types import MappingProxyType
from typing import List, Sequence

from recipe_engine.data_layer.models import Recipe

MAX_VARIATIONS = 3

INGREDIENT_SUBSTITUTIONS = MappingProxyType({
    "chicken breast": ("chicken thigh", "turkey breast"),
    "beef mince": ("turkey mince", "lamb mince"),
    "cheddar cheese": ("mozzarella", "gouda", "swiss cheese"),
    "whole milk": ("semi-skimmed milk", "2% milk"),
    "butter": ("margarine", "olive oil"),
    "white rice": ("brown rice", "quinoa"),
    "pasta": ("noodles", "rice"),
    "white bread": ("brown bread", "wholemeal bread"),
    "tomato": ("cherry tomatoes", "canned tomatoes"),
    "fresh herbs": ("dried herbs",),
    "lemon": ("lime", "vinegar"),
    "garlic": ("garlic powder", "shallots"),
    "onion": ("shallots", "leeks"),
})


def substitutes_for(ingredient_name: str) -> Sequence[str]:
    """Substitutes listed in INGREDIENT_SUBSTITUTIONS, or () when there are none."""
    return INGREDIENT_SUBSTITUTIONS.get(ingredient_name.lower(), ())


def make_variation(base_recipe: Recipe, ingredient_name: str, substitute: str) -> Recipe:
    """Copy of base_recipe with `ingredient_name` renamed to `substitute`."""
    target = ingredient_name.lower()
    ingredients = [
        dataclasses.replace(ing, name=substitute) if ing.name.lower() == target else ing
        for ing in base_recipe.ingredients
    ]
    return dataclasses.replace(
        base_recipe,
        id=f"{base_recipe.id}-var-{substitute}",
        name=f"{base_recipe.name} (with {substitute})",
        ingredients=ingredients,
    )


def generate_recipe_variations(base_recipe: Recipe,
                               available_ingredients: Sequence[str]) -> List[Recipe]:
    """Variants of base_recipe using substitutes the user has.

    A substitute qualifies only if it appears (case-insensitively, whole
    name) in available_ingredients. At most MAX_VARIATIONS are returned
    across all ingredients, in ingredient order.
    """
    available = {name.lower() for name in available_ingredients}
    variations: List[Recipe] = []

    for ingredient in base_recipe.ingredients:
        for substitute in substitutes_for(ingredient.name):
            if substitute.lower() not in available:
                continue
            variations.append(make_variation(base_recipe, ingredient.name, substitute))
            if len(variations) == MAX_VARIATIONS:
                return variations

    return variations
