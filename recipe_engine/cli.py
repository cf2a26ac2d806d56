#!/usr/bin/env python3
"""Command-line interface for the recipe engine."""

import argparse
import logging
import sys
from pathlib import Path
from typing import List, Optional

from recipe_engine.data_layer.constraints_loader import ConstraintsLoader
from recipe_engine.data_layer.exceptions import DataFileError, RecipeNotFoundError
from recipe_engine.data_layer.inventory_db import InventoryDB
from recipe_engine.data_layer.models import InventoryItem, NutritionInfo, RecipeConstraints
from recipe_engine.data_layer.recipe_db import RecipeDB
from recipe_engine.engine import RecipeEngine
from recipe_engine.output.formatters import (
    format_recipes_json,
    format_recipes_markdown,
    format_scores_json,
    format_scores_markdown,
    to_json_string,
)

logger = logging.getLogger(__name__)


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        description="Rank, filter and vary recipes for what you have and how long you've got"
    )
    parser.add_argument(
        "--recipes",
        type=str,
        default="data/recipes.json",
        help="Path to recipes JSON file (default: data/recipes.json)"
    )
    parser.add_argument(
        "--inventory",
        type=str,
        help="Optional path to inventory JSON file"
    )
    parser.add_argument(
        "--format",
        choices=["markdown", "json"],
        default="markdown",
        help="Output format: markdown (default) or json"
    )
    parser.add_argument("-v", "--verbose", action="store_true", help="Enable debug logging")

    subparsers = parser.add_subparsers(dest="command", required=True)

    score = subparsers.add_parser("score", help="Rank recipes against constraints")
    score.add_argument("--constraints", required=True, help="Path to constraints YAML file")

    makeable = subparsers.add_parser("makeable", help="Recipes you can cook from your inventory")
    makeable.add_argument("--max-missing", type=int, default=2,
                          help="Most missing ingredients to allow (default: 2)")

    bulk = subparsers.add_parser("bulk", help="Recipes suited to batch cooking")
    bulk.add_argument("--constraints", required=True, help="Path to constraints YAML file")
    bulk.add_argument("--days", type=int, default=4,
                      help="Days the food must keep in the fridge (default: 4)")

    variations = subparsers.add_parser("variations", help="Substitute ingredients you have")
    variations.add_argument("recipe_id")
    variations.add_argument("--available", nargs="*", default=[],
                            help="Ingredients available for substitution")

    complementary = subparsers.add_parser("complementary",
                                          help="Recipes that fill a macro gap")
    complementary.add_argument("recipe_id")
    complementary.add_argument("--protein", type=float)
    complementary.add_argument("--carbs", type=float)
    complementary.add_argument("--fat", type=float)

    return parser


def _load_inventory(path: Optional[str]) -> List[InventoryItem]:
    if not path:
        return []
    return InventoryDB(path).get_all_items()


def _load_constraints(path: str) -> RecipeConstraints:
    return ConstraintsLoader(path).load()


def run(args: argparse.Namespace) -> str:
    """Execute the selected command and return the formatted output."""
    engine = RecipeEngine()
    recipe_db = RecipeDB(args.recipes)
    recipes = recipe_db.get_all_recipes()
    as_json = args.format == "json"
    logger.debug("Running %s over %d recipes", args.command, len(recipes))

    if args.command == "score":
        constraints = _load_constraints(args.constraints)
        scores = engine.score_recipes(recipes, constraints, _load_inventory(args.inventory))
        if as_json:
            return to_json_string(format_scores_json(scores))
        return format_scores_markdown(scores)

    if args.command == "makeable":
        scores = engine.find_makeable_recipes(
            recipes, _load_inventory(args.inventory), args.max_missing
        )
        if as_json:
            return to_json_string(format_scores_json(scores))
        return format_scores_markdown(scores, title="Makeable Recipes")

    if args.command == "bulk":
        constraints = _load_constraints(args.constraints)
        scores = engine.suggest_bulk_cooking_recipes(recipes, constraints, args.days)
        if as_json:
            return to_json_string(format_scores_json(scores))
        return format_scores_markdown(scores, title="Bulk Cooking Suggestions")

    base_recipe = recipe_db.require_recipe(args.recipe_id)

    if args.command == "variations":
        result = engine.generate_recipe_variations(base_recipe, args.available)
        title = f"Variations of {base_recipe.name}"
    else:
        targets = NutritionInfo(protein=args.protein, carbs=args.carbs, fat=args.fat)
        candidates = [r for r in recipes if r.id != base_recipe.id]
        result = engine.find_complementary_recipes(base_recipe, candidates, targets)
        title = f"Pairs well with {base_recipe.name}"

    if as_json:
        return to_json_string(format_recipes_json(result))
    return format_recipes_markdown(result, title=title)


def main(argv: Optional[List[str]] = None) -> int:
    """Main CLI entry point."""
    parser = build_parser()
    args = parser.parse_args(argv)

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format="%(levelname)s %(name)s: %(message)s",
    )

    recipes_path = Path(args.recipes)
    if not recipes_path.exists():
        print(f"Error: Recipes file not found: {recipes_path}", file=sys.stderr)
        return 1

    try:
        output = run(args)
    except (DataFileError, RecipeNotFoundError, OSError) as e:
        print(f"Error: {e}", file=sys.stderr)
        return 1

    print(output)
    return 0


if __name__ == "__main__":
    sys.exit(main())
