#!/usr/bin/env python3
"""Benchmark RecipeEngine.score_recipes and find_makeable_recipes on a synthetic catalog.

Run from repo root:
  python scripts/benchmark_recipe_scoring.py

Optional: catalog size and ingredients per recipe via env.
"""
from __future__ import annotations

import os
import sys
import time

# Allow importing recipe_engine when run from repo root without installing
sys.path.insert(0, os.path.join(os.path.dirname(__file__), ".."))

from recipe_engine.data_layer.models import (
    Ingredient,
    InventoryItem,
    NutritionInfo,
    Recipe,
    RecipeConstraints,
)
from recipe_engine.engine import RecipeEngine

PANTRY = ["chicken", "rice", "onion", "garlic", "tomato", "pasta", "cheese",
          "eggs", "milk", "butter", "beef", "oil", "bread", "lentils"]


def make_recipe(i: int, n_ingredients: int) -> Recipe:
    ingredients = [
        Ingredient(name=PANTRY[(i + k) % len(PANTRY)], quantity=100.0, unit="g",
                   optional=(k == n_ingredients - 1))
        for k in range(n_ingredients)
    ]
    return Recipe(
        id=f"r{i}",
        name=f"Recipe {i}",
        ingredients=ingredients,
        cooking_time=10 + i % 40,
        prep_time=5 + i % 15,
        difficulty=1 + i % 5,
        tags=["quick"] if i % 3 == 0 else ["batch"],
        nutrition=NutritionInfo(calories=300 + i % 500, protein=10 + i % 40, carbs=20 + i % 60),
    )


def main() -> None:
    n_recipes = int(os.environ.get("RECIPE_BENCH_RECIPES", "5000"))
    n_ingredients = int(os.environ.get("RECIPE_BENCH_INGREDIENTS", "8"))

    recipes = [make_recipe(i, n_ingredients) for i in range(n_recipes)]
    inventory = [InventoryItem(item_name=name, quantity=250.0) for name in PANTRY[::2]]
    constraints = RecipeConstraints(
        max_cooking_time=30,
        max_difficulty=3,
        available_ingredients=PANTRY[1::3],
        nutrition_targets=NutritionInfo(calories=500, protein=30),
        preferred_tags=["quick"],
    )
    engine = RecipeEngine()

    t0 = time.perf_counter()
    scores = engine.score_recipes(recipes, constraints, inventory)
    t1 = time.perf_counter()
    makeable = engine.find_makeable_recipes(recipes, inventory)
    t2 = time.perf_counter()

    print("--- Recipe scoring benchmark ---")
    print(f"Recipes: {n_recipes} x {n_ingredients} ingredients")
    print(f"score_recipes: {t1 - t0:.3f}s (top score {scores[0].score if scores else 'n/a'})")
    print(f"find_makeable_recipes: {t2 - t1:.3f}s ({len(makeable)} makeable)")


if __name__ == "__main__":
    main()
