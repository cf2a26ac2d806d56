"""Constraints loader for reading recipe query constraints from YAML."""
import logging
from pathlib import Path
from typing import List

import yaml

from recipe_engine.data_layer.exceptions import DataFileError
from recipe_engine.data_layer.models import NutritionInfo, RecipeConstraints

logger = logging.getLogger(__name__)


class ConstraintsLoader:
    """Loader for recipe constraints from YAML."""

    def __init__(self, yaml_path: str):
        """Initialize constraints loader from YAML file.

        Args:
            yaml_path: Path to YAML file containing constraints
        """
        self.yaml_path = Path(yaml_path)

    def load(self) -> RecipeConstraints:
        """Load constraints from YAML file.

        Returns:
            RecipeConstraints object

        Raises:
            FileNotFoundError: If YAML file doesn't exist
            DataFileError: If required fields are missing or malformed
        """
        with open(self.yaml_path, "r") as f:
            try:
                data = yaml.safe_load(f)
            except yaml.YAMLError as exc:
                raise DataFileError(str(self.yaml_path), str(exc)) from exc

        if not isinstance(data, dict):
            raise DataFileError(str(self.yaml_path), "expected a mapping at top level")

        try:
            constraints = constraints_from_dict(data)
        except KeyError as exc:
            raise DataFileError(str(self.yaml_path), f"missing field {exc}") from exc
        except (TypeError, ValueError) as exc:
            raise DataFileError(str(self.yaml_path), str(exc)) from exc

        logger.info("Loaded recipe constraints from %s", self.yaml_path)
        return constraints


def _name_list(data: dict, key: str) -> List[str]:
    """A list-of-names field; a lone string counts as a one-item list."""
    value = data.get(key)
    if value is None:
        return []
    if isinstance(value, str):
        return [value]
    if not isinstance(value, (list, tuple)):
        raise TypeError(f"{key} must be a list, got {type(value).__name__}")
    return [str(item) for item in value]


def constraints_from_dict(data: dict) -> RecipeConstraints:
    """Build RecipeConstraints from a plain dict (YAML or request body).

    max_cooking_time and max_difficulty are required; everything else
    defaults to empty.
    """
    targets = data.get("nutrition_targets")
    servings = data.get("servings")

    return RecipeConstraints(
        max_cooking_time=int(data["max_cooking_time"]),
        max_difficulty=int(data["max_difficulty"]),
        available_ingredients=_name_list(data, "available_ingredients"),
        dietary_restrictions=_name_list(data, "dietary_restrictions"),
        nutrition_targets=NutritionInfo.from_dict(targets) if targets else None,
        preferred_tags=_name_list(data, "preferred_tags"),
        servings=int(servings) if servings is not None else None,
    )
