"""Output formatting for ranked recipes."""

from recipe_engine.output.formatters import (
    format_scores_json,
    format_scores_markdown,
    format_recipes_json,
    format_recipes_markdown,
    format_ingredient_string,
    format_nutrition_breakdown,
    to_json_string
)

__all__ = [
    "format_scores_json",
    "format_scores_markdown",
    "format_recipes_json",
    "format_recipes_markdown",
    "format_ingredient_string",
    "format_nutrition_breakdown",
    "to_json_string"
]
