"""Heuristic cost estimate for ingredients the user still has to buy.

Prices are rough GBP figures per purchase, not live store data.
"""

from types import MappingProxyType
from typing import Iterable

# Checked in order; the first key that contains, or is contained by, the
# ingredient name sets its price.
INGREDIENT_COSTS = MappingProxyType({
    "chicken": 6.00,
    "beef": 8.00,
    "fish": 7.00,
    "cheese": 3.50,
    "milk": 1.20,
    "eggs": 2.50,
    "bread": 1.00,
    "rice": 2.00,
    "pasta": 1.50,
    "tomato": 2.00,
    "onion": 1.00,
    "garlic": 0.50,
    "oil": 2.00,
    "butter": 2.50,
})

DEFAULT_INGREDIENT_COST = 2.00


def ingredient_cost(ingredient_name: str) -> float:
    """Look up the heuristic price of a single ingredient."""
    name = ingredient_name.lower()
    for key, cost in INGREDIENT_COSTS.items():
        if key in name or name in key:
            return cost
    return DEFAULT_INGREDIENT_COST


def estimate_recipe_cost(missing_ingredients: Iterable[str]) -> float:
    """Sum the heuristic prices of the missing ingredients.

    Ingredients already available never reach this function, so they cost 0.
    """
    return round(sum(ingredient_cost(name) for name in missing_ingredients), 2)
