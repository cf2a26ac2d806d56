"""Recipe recommendation and scoring engine."""

from recipe_engine.engine import RecipeEngine

__all__ = ["RecipeEngine"]
