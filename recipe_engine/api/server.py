"""FastAPI server exposing the recipe engine."""

import logging
import os
from pathlib import Path
from typing import Any, Dict, List, Optional

import uvicorn
from fastapi import FastAPI, HTTPException
from fastapi.middleware.cors import CORSMiddleware
from pydantic import BaseModel, Field

from recipe_engine.data_layer.constraints_loader import constraints_from_dict
from recipe_engine.data_layer.exceptions import DataFileError, RecipeNotFoundError
from recipe_engine.data_layer.inventory_db import InventoryDB
from recipe_engine.data_layer.models import InventoryItem, NutritionInfo, Recipe, RecipeConstraints
from recipe_engine.data_layer.recipe_db import RecipeDB
from recipe_engine.engine import RecipeEngine
from recipe_engine.output.formatters import format_recipes_json, format_scores_json

logger = logging.getLogger(__name__)

DEFAULT_RECIPES_PATH = "data/recipes.json"
DEFAULT_INVENTORY_PATH = "data/inventory.json"

app = FastAPI(title="Recipe Engine API")

app.add_middleware(
    CORSMiddleware,
    allow_origins=["*"],  # Local development
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

engine = RecipeEngine()


class NutritionTargets(BaseModel):
    calories: Optional[float] = None
    protein: Optional[float] = None
    carbs: Optional[float] = None
    fat: Optional[float] = None


class ConstraintsRequest(BaseModel):
    max_cooking_time: int = 30
    max_difficulty: int = 5
    available_ingredients: List[str] = Field(default_factory=list)
    dietary_restrictions: List[str] = Field(default_factory=list)
    preferred_tags: List[str] = Field(default_factory=list)
    nutrition_targets: Optional[NutritionTargets] = None
    servings: Optional[int] = None


class BulkCookingRequest(BaseModel):
    constraints: ConstraintsRequest
    days: int = 4


def _recipes_path() -> str:
    return os.environ.get("RECIPE_ENGINE_RECIPES_PATH", DEFAULT_RECIPES_PATH)


def _inventory_path() -> str:
    return os.environ.get("RECIPE_ENGINE_INVENTORY_PATH", DEFAULT_INVENTORY_PATH)


def _load_recipe_db() -> RecipeDB:
    return RecipeDB(_recipes_path())


def _load_inventory() -> List[InventoryItem]:
    """Inventory is optional: a missing file means an empty cupboard."""
    path = Path(_inventory_path())
    if not path.exists():
        logger.info("No inventory file at %s, using empty inventory", path)
        return []
    return InventoryDB(str(path)).get_all_items()


def _split_csv(value: Optional[str]) -> List[str]:
    if not value:
        return []
    return [part.strip() for part in value.split(",") if part.strip()]


def _build_constraints(request: ConstraintsRequest) -> RecipeConstraints:
    return constraints_from_dict(request.model_dump())


def filter_restricted(recipes: List[Recipe], restrictions: List[str]) -> List[Recipe]:
    """Keep recipes tagged with every dietary restriction (e.g. "vegetarian")."""
    wanted = {r.lower() for r in restrictions}
    return [
        recipe for recipe in recipes
        if wanted <= {tag.lower() for tag in recipe.tags}
    ]


def _internal_error(exc: Exception) -> HTTPException:
    logger.exception("Recipe engine request failed")
    return HTTPException(status_code=500, detail=str(exc))


@app.get("/api/recipes")
def list_recipes() -> List[Dict[str, str]]:
    try:
        recipe_db = _load_recipe_db()
        return [{"id": r.id, "name": r.name} for r in recipe_db.get_all_recipes()]
    except (DataFileError, OSError) as exc:
        raise _internal_error(exc) from exc


@app.get("/api/recipes/score")
def score_recipes(
    ingredients: Optional[str] = None,
    max_time: int = 30,
    max_difficulty: int = 5,
    dietary_restrictions: Optional[str] = None,
    tags: Optional[str] = None,
    exclude_restricted: bool = False,
) -> Dict[str, Any]:
    try:
        recipes = _load_recipe_db().get_all_recipes()
        inventory = _load_inventory()
    except (DataFileError, OSError) as exc:
        raise _internal_error(exc) from exc

    constraints = RecipeConstraints(
        max_cooking_time=max_time,
        max_difficulty=max_difficulty,
        available_ingredients=_split_csv(ingredients),
        dietary_restrictions=_split_csv(dietary_restrictions),
        preferred_tags=_split_csv(tags),
    )
    if exclude_restricted and constraints.dietary_restrictions:
        recipes = filter_restricted(recipes, constraints.dietary_restrictions)

    scores = engine.score_recipes(recipes, constraints, inventory)
    return {"scores": format_scores_json(scores)}


@app.get("/api/recipes/makeable")
def makeable_recipes(max_missing: int = 2) -> Dict[str, Any]:
    try:
        recipes = _load_recipe_db().get_all_recipes()
        inventory = _load_inventory()
    except (DataFileError, OSError) as exc:
        raise _internal_error(exc) from exc

    scores = engine.find_makeable_recipes(recipes, inventory, max_missing)
    return {"recipes": format_scores_json(scores)}


@app.post("/api/recipes/bulk-cooking")
def bulk_cooking_recipes(request: BulkCookingRequest) -> Dict[str, Any]:
    try:
        recipes = _load_recipe_db().get_all_recipes()
    except (DataFileError, OSError) as exc:
        raise _internal_error(exc) from exc

    constraints = _build_constraints(request.constraints)
    scores = engine.suggest_bulk_cooking_recipes(recipes, constraints, request.days)
    return {"bulk_recipes": format_scores_json(scores)}


@app.get("/api/recipes/{recipe_id}/variations")
def recipe_variations(recipe_id: str, ingredients: Optional[str] = None) -> Dict[str, Any]:
    try:
        base_recipe = _load_recipe_db().require_recipe(recipe_id)
    except RecipeNotFoundError as exc:
        raise HTTPException(status_code=404, detail=str(exc)) from exc
    except (DataFileError, OSError) as exc:
        raise _internal_error(exc) from exc

    variations = engine.generate_recipe_variations(base_recipe, _split_csv(ingredients))
    return {"variations": format_recipes_json(variations)}


@app.post("/api/recipes/{recipe_id}/complementary")
def complementary_recipes(recipe_id: str, targets: NutritionTargets) -> Dict[str, Any]:
    try:
        recipe_db = _load_recipe_db()
        base_recipe = recipe_db.require_recipe(recipe_id)
    except RecipeNotFoundError as exc:
        raise HTTPException(status_code=404, detail=str(exc)) from exc
    except (DataFileError, OSError) as exc:
        raise _internal_error(exc) from exc

    candidates = [r for r in recipe_db.get_all_recipes() if r.id != recipe_id]
    complementary = engine.find_complementary_recipes(
        base_recipe, candidates, NutritionInfo.from_dict(targets.model_dump())
    )
    return {"recipes": format_recipes_json(complementary)}


if __name__ == "__main__":
    uvicorn.run(app, host="0.0.0.0", port=8000)
