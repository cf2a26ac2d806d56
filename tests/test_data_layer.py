"""Tests for data layer components."""
import json
from pathlib import Path
from tempfile import NamedTemporaryFile

import pytest
import yaml

from recipe_engine.data_layer.constraints_loader import ConstraintsLoader, constraints_from_dict
from recipe_engine.data_layer.exceptions import DataFileError, RecipeNotFoundError
from recipe_engine.data_layer.inventory_db import InventoryDB
from recipe_engine.data_layer.models import Ingredient, Recipe
from recipe_engine.data_layer.recipe_db import RecipeDB
from recipe_engine.scoring.recipe_scorer import find_missing_ingredients


def _write_temp(content: str, suffix: str) -> str:
    with NamedTemporaryFile(mode="w", suffix=suffix, delete=False) as f:
        f.write(content)
        return f.name


RECIPE_DATA = {
    "recipes": [
        {
            "id": "r1",
            "name": "Chicken Stir Fry",
            "ingredients": [
                {"name": "chicken breast", "quantity": 200, "unit": "g", "optional": False},
                {"name": "soy sauce", "quantity": 2, "unit": "tbsp"},
                {"name": "garnish", "quantity": 1, "unit": "unit", "optional": True},
            ],
            "cooking_time": 15,
            "prep_time": 10,
            "difficulty": 2,
            "tags": ["quick", "asian"],
            "nutrition": {"calories": 450, "protein": 35, "carbs": 30, "fat": 12},
            "bulk_cooking_multiplier": 1,
            "storage_info": {"fridge_days": 2},
        },
        {
            "id": "r2",
            "name": "Toast",
            "ingredients": [{"name": "bread", "quantity": 2, "unit": "slice"}],
            "cooking_time": 3,
            "prep_time": 0,
            "difficulty": 1,
        },
    ]
}


class TestRecipeDB:
    """Tests for RecipeDB."""

    def test_load_recipes_from_json(self):
        temp_path = _write_temp(json.dumps(RECIPE_DATA), ".json")
        try:
            db = RecipeDB(temp_path)
            recipes = db.get_all_recipes()
            assert len(recipes) == 2
            stir_fry = recipes[0]
            assert stir_fry.id == "r1"
            assert stir_fry.total_time == 25
            assert stir_fry.ingredients[2].optional is True
            assert stir_fry.ingredients[1].optional is False
            assert stir_fry.nutrition.protein == 35.0
            assert stir_fry.storage_info.fridge_days == 2
            assert stir_fry.tags == ["quick", "asian"]
        finally:
            Path(temp_path).unlink()

    def test_optional_sections_default(self):
        temp_path = _write_temp(json.dumps(RECIPE_DATA), ".json")
        try:
            toast = RecipeDB(temp_path).get_recipe_by_id("r2")
            assert toast.nutrition is None
            assert toast.storage_info is None
            assert toast.tags == []
            assert toast.bulk_cooking_multiplier == 1.0
        finally:
            Path(temp_path).unlink()

    def test_get_recipe_by_id(self):
        temp_path = _write_temp(json.dumps(RECIPE_DATA), ".json")
        try:
            db = RecipeDB(temp_path)
            assert db.get_recipe_by_id("r1").name == "Chicken Stir Fry"
            assert db.get_recipe_by_id("missing") is None
            with pytest.raises(RecipeNotFoundError, match="missing"):
                db.require_recipe("missing")
        finally:
            Path(temp_path).unlink()

    def test_get_all_recipes_returns_copy(self):
        temp_path = _write_temp(json.dumps(RECIPE_DATA), ".json")
        try:
            db = RecipeDB(temp_path)
            db.get_all_recipes().clear()
            assert len(db.get_all_recipes()) == 2
        finally:
            Path(temp_path).unlink()

    def test_invalid_json(self):
        temp_path = _write_temp("{not json", ".json")
        try:
            with pytest.raises(DataFileError):
                RecipeDB(temp_path)
        finally:
            Path(temp_path).unlink()

    def test_recipe_missing_required_field(self):
        temp_path = _write_temp(json.dumps({"recipes": [{"name": "No id"}]}), ".json")
        try:
            with pytest.raises(DataFileError, match="bad recipe entry"):
                RecipeDB(temp_path)
        finally:
            Path(temp_path).unlink()

    @pytest.mark.parametrize("entry", [
        "oops",
        {"id": "r1", "name": "Toast", "ingredients": ["bread"]},
        {"id": "r1", "name": "Toast", "ingredients": [], "nutrition": [450]},
        {"id": "r1", "name": "Toast", "ingredients": [], "storage_info": [2]},
    ])
    def test_non_mapping_sections_are_data_errors(self, entry):
        temp_path = _write_temp(json.dumps({"recipes": [entry]}), ".json")
        try:
            with pytest.raises(DataFileError, match="must be a mapping"):
                RecipeDB(temp_path)
        finally:
            Path(temp_path).unlink()

    def test_missing_file(self):
        with pytest.raises(FileNotFoundError):
            RecipeDB("/nonexistent/recipes.json")


class TestInventoryDB:
    """Tests for InventoryDB."""

    def test_load_inventory(self):
        data = {
            "inventory": [
                {"item_name": "pasta", "quantity": 500, "unit": "g", "location": "pantry"},
                {"item_name": "milk", "quantity": 1, "unit": "l", "location": "fridge",
                 "expiry_date": "2026-10-25"},
            ]
        }
        temp_path = _write_temp(json.dumps(data), ".json")
        try:
            db = InventoryDB(temp_path)
            items = db.get_all_items()
            assert [i.item_name for i in items] == ["pasta", "milk"]
            assert items[0].quantity == 500.0
            assert [i.item_name for i in db.get_items_by_location("fridge")] == ["milk"]
            assert db.get_items_by_location("freezer") == []
        finally:
            Path(temp_path).unlink()

    def test_bad_entry(self):
        temp_path = _write_temp(json.dumps({"inventory": [{"quantity": 1}]}), ".json")
        try:
            with pytest.raises(DataFileError):
                InventoryDB(temp_path)
        finally:
            Path(temp_path).unlink()

    def test_non_mapping_entry(self):
        temp_path = _write_temp(json.dumps({"inventory": ["pasta"]}), ".json")
        try:
            with pytest.raises(DataFileError, match="inventory entry must be a mapping"):
                InventoryDB(temp_path)
        finally:
            Path(temp_path).unlink()

    def test_inventory_must_be_list(self):
        temp_path = _write_temp(json.dumps({"inventory": {"pasta": 1}}), ".json")
        try:
            with pytest.raises(DataFileError, match="must be a list"):
                InventoryDB(temp_path)
        finally:
            Path(temp_path).unlink()


class TestConstraintsLoader:
    """Tests for ConstraintsLoader."""

    def test_load_constraints_from_yaml(self):
        data = {
            "max_cooking_time": 30,
            "max_difficulty": 3,
            "available_ingredients": ["chicken thigh", "rice"],
            "preferred_tags": ["quick"],
            "nutrition_targets": {"calories": 500, "protein": 30},
            "servings": 2,
        }
        temp_path = _write_temp(yaml.dump(data), ".yaml")
        try:
            constraints = ConstraintsLoader(temp_path).load()
            assert constraints.max_cooking_time == 30
            assert constraints.max_difficulty == 3
            assert constraints.available_ingredients == ["chicken thigh", "rice"]
            assert constraints.dietary_restrictions == []
            assert constraints.preferred_tags == ["quick"]
            assert constraints.nutrition_targets.calories == 500.0
            assert constraints.nutrition_targets.carbs is None
            assert constraints.servings == 2
        finally:
            Path(temp_path).unlink()

    def test_missing_required_field(self):
        temp_path = _write_temp(yaml.dump({"max_difficulty": 3}), ".yaml")
        try:
            with pytest.raises(DataFileError, match="max_cooking_time"):
                ConstraintsLoader(temp_path).load()
        finally:
            Path(temp_path).unlink()

    def test_not_a_mapping(self):
        temp_path = _write_temp("- just\n- a list\n", ".yaml")
        try:
            with pytest.raises(DataFileError):
                ConstraintsLoader(temp_path).load()
        finally:
            Path(temp_path).unlink()

    def test_null_lists_become_empty(self):
        constraints = constraints_from_dict({
            "max_cooking_time": 20,
            "max_difficulty": 2,
            "available_ingredients": None,
            "nutrition_targets": None,
        })
        assert constraints.available_ingredients == []
        assert constraints.nutrition_targets is None

    def test_single_name_is_not_split_into_letters(self):
        temp_path = _write_temp(
            "max_cooking_time: 30\nmax_difficulty: 3\n"
            "available_ingredients: rice\ndietary_restrictions: vegan\npreferred_tags: quick\n",
            ".yaml",
        )
        try:
            constraints = ConstraintsLoader(temp_path).load()
            assert constraints.available_ingredients == ["rice"]
            assert constraints.dietary_restrictions == ["vegan"]
            assert constraints.preferred_tags == ["quick"]
            stir_fry = Recipe("r1", "Chicken Stir Fry", [
                Ingredient("chicken breast", 200, "g"), Ingredient("soy sauce", 2, "tbsp"),
            ], 15, 10, 2)
            assert find_missing_ingredients(
                stir_fry, constraints.available_ingredients
            ) == ["chicken breast", "soy sauce"]
        finally:
            Path(temp_path).unlink()

    @pytest.mark.parametrize("content,message", [
        ("max_cooking_time: 30\nmax_difficulty: 3\navailable_ingredients: 5\n",
         "available_ingredients must be a list"),
        ("max_cooking_time: 30\nmax_difficulty: 3\npreferred_tags: {quick: true}\n",
         "preferred_tags must be a list"),
        ("max_cooking_time: 30\nmax_difficulty: 3\nnutrition_targets: [500]\n",
         "nutrition must be a mapping"),
    ])
    def test_malformed_fields_are_data_errors(self, content, message):
        temp_path = _write_temp(content, ".yaml")
        try:
            with pytest.raises(DataFileError, match=message):
                ConstraintsLoader(temp_path).load()
        finally:
            Path(temp_path).unlink()
