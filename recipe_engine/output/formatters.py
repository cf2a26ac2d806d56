"""Formatters for ranked recipe output (JSON and Markdown)."""

import json
from typing import Any, Dict, List, Sequence

from recipe_engine.data_layer.models import (
    Ingredient,
    NutritionInfo,
    Recipe,
    RecipeScore,
)

CRITERION_LABELS = {
    "ingredient_match": "Ingredients",
    "time_match": "Time",
    "difficulty_match": "Difficulty",
    "nutrition_match": "Nutrition",
    "preference_match": "Preferences",
}


def format_ingredient_string(ingredient: Ingredient) -> str:
    """Format an ingredient as a string (e.g., "200 g chicken breast").

    Args:
        ingredient: Ingredient object

    Returns:
        Formatted string, with " (optional)" appended for optional ingredients
    """
    # Format quantity (remove .0 if whole number)
    if ingredient.quantity == int(ingredient.quantity):
        qty_str = str(int(ingredient.quantity))
    else:
        qty_str = f"{ingredient.quantity:.1f}".rstrip('0').rstrip('.')

    if ingredient.unit:
        text = f"{qty_str} {ingredient.unit} {ingredient.name}"
    else:
        text = f"{qty_str} {ingredient.name}"

    if ingredient.optional:
        text += " (optional)"
    return text


def format_nutrition_breakdown(nutrition: NutritionInfo, indent: str = "") -> str:
    """Format the known nutrition values as Markdown lines.

    Absent values are skipped; an empty profile gives "No nutrition data".
    """
    rows = [
        ("Calories", nutrition.calories, "{:.0f} kcal"),
        ("Protein", nutrition.protein, "{:.1f}g"),
        ("Carbs", nutrition.carbs, "{:.1f}g"),
        ("Fat", nutrition.fat, "{:.1f}g"),
    ]
    lines = [
        f"{indent}**{label}:** {fmt.format(value)}"
        for label, value, fmt in rows if value is not None
    ]
    if not lines:
        return f"{indent}No nutrition data"
    return "\n".join(lines)


def format_score_explanation(score: RecipeScore) -> str:
    """One-line summary of the criterion scores, e.g. "Ingredients 50, Time 100, ..."."""
    breakdown = score.breakdown.to_dict()
    return ", ".join(
        f"{CRITERION_LABELS[key]} {value:.0f}" for key, value in breakdown.items()
    )


def format_scores_markdown(scores: Sequence[RecipeScore], title: str = "Recipe Suggestions") -> str:
    """Format ranked recipe scores as Markdown.

    Args:
        scores: Ranked RecipeScores (already sorted)
        title: Heading for the document

    Returns:
        Formatted Markdown string
    """
    lines = [f"# {title}\n"]

    if not scores:
        lines.append("No matching recipes.")
        return "\n".join(lines)

    for rank, score in enumerate(scores, 1):
        recipe = score.recipe
        lines.append(f"## {rank}. {recipe.name} ({score.score})")
        lines.append(f"**Total Time:** {recipe.total_time} minutes")
        lines.append(f"**Difficulty:** {recipe.difficulty}")
        lines.append(f"**Why:** {format_score_explanation(score)}")

        if score.missing_ingredients:
            lines.append(f"**Missing:** {', '.join(score.missing_ingredients)}")
            lines.append(f"**Estimated Cost:** £{score.estimated_cost:.2f}")
        lines.append("")

        lines.append("### Ingredients")
        for ingredient in recipe.ingredients:
            lines.append(f"- {format_ingredient_string(ingredient)}")
        lines.append("")

        if recipe.nutrition is not None:
            lines.append("### Nutrition")
            lines.append(format_nutrition_breakdown(recipe.nutrition))
            lines.append("")

    return "\n".join(lines)


def format_recipes_markdown(recipes: Sequence[Recipe], title: str) -> str:
    """Format a plain recipe list (variations, pairings) as Markdown."""
    lines = [f"# {title}\n"]
    if not recipes:
        lines.append("No matching recipes.")
        return "\n".join(lines)

    for recipe in recipes:
        lines.append(f"## {recipe.name}")
        for ingredient in recipe.ingredients:
            lines.append(f"- {format_ingredient_string(ingredient)}")
        lines.append("")
    return "\n".join(lines)


def format_scores_json(scores: Sequence[RecipeScore]) -> List[Dict[str, Any]]:
    """Format ranked scores as JSON-ready dicts (for API usage)."""
    return [score.to_dict() for score in scores]


def format_recipes_json(recipes: Sequence[Recipe]) -> List[Dict[str, Any]]:
    return [recipe.to_dict() for recipe in recipes]


def to_json_string(payload: Any, indent: int = 2) -> str:
    """Serialize a formatted payload as a JSON string.

    Args:
        payload: Output of one of the format_*_json functions
        indent: JSON indentation (default: 2)
    """
    return json.dumps(payload, indent=indent)
