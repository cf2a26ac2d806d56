"""End-to-end tests through the RecipeEngine facade."""

import pytest

from recipe_engine import RecipeEngine
from recipe_engine.data_layer.models import (
    Ingredient,
    InventoryItem,
    NutritionInfo,
    Recipe,
    RecipeConstraints,
    StorageInfo,
)
from recipe_engine.scoring.criteria import ScoringWeights


def _stir_fry() -> Recipe:
    return Recipe(
        id="r1",
        name="Chicken Stir Fry",
        ingredients=[
            Ingredient("chicken breast", 200, "g"),
            Ingredient("soy sauce", 2, "tbsp"),
            Ingredient("garnish", 1, "unit", optional=True),
        ],
        cooking_time=15,
        prep_time=10,
        difficulty=2,
        tags=["quick", "asian"],
        nutrition=NutritionInfo(calories=450, protein=35, carbs=30, fat=12),
        storage_info=StorageInfo(fridge_days=2),
    )


def _bolognese() -> Recipe:
    return Recipe(
        id="r2",
        name="Big Batch Bolognese",
        ingredients=[
            Ingredient("beef mince", 500, "g"),
            Ingredient("pasta", 400, "g"),
            Ingredient("tomato", 2, "tin"),
            Ingredient("fresh herbs", 1, "handful", optional=True),
        ],
        cooking_time=40,
        prep_time=10,
        difficulty=3,
        tags=["batch", "italian"],
        nutrition=NutritionInfo(calories=620, protein=32, carbs=70, fat=20),
        bulk_cooking_multiplier=3,
        storage_info=StorageInfo(fridge_days=4, freezer_days=90),
    )


@pytest.fixture
def engine():
    return RecipeEngine()


class TestRecipeEngine:
    def test_score_recipes(self, engine):
        constraints = RecipeConstraints(
            max_cooking_time=30,
            max_difficulty=3,
            available_ingredients=["chicken thigh", "rice"],
            preferred_tags=["quick"],
        )
        scores = engine.score_recipes([_bolognese(), _stir_fry()], constraints, [])
        assert [s.recipe.id for s in scores] == ["r1", "r2"]
        assert scores[0].score == 58

    def test_find_makeable_recipes(self, engine):
        inventory = [InventoryItem("pasta", 500), InventoryItem("tomato", 2)]
        result = engine.find_makeable_recipes([_stir_fry(), _bolognese()], inventory, 1)
        assert [s.recipe.id for s in result] == ["r2"]
        assert result[0].missing_ingredients == ["beef mince"]
        assert result[0].score == 90

    def test_suggest_bulk_cooking_recipes_uses_engine_weights(self):
        engine = RecipeEngine(ScoringWeights(
            ingredient_weight=0.0, time_weight=1.0, difficulty_weight=0.0,
            nutrition_weight=0.0, preference_weight=0.0,
        ))
        constraints = RecipeConstraints(max_cooking_time=60, max_difficulty=3)
        result = engine.suggest_bulk_cooking_recipes([_stir_fry(), _bolognese()], constraints)
        assert [s.recipe.id for s in result] == ["r2"]
        assert result[0].score == 120

    def test_find_complementary_recipes(self, engine):
        result = engine.find_complementary_recipes(
            _stir_fry(), [_bolognese()], NutritionInfo(protein=30, carbs=80, fat=10)
        )
        assert [r.id for r in result] == ["r2"]

    def test_generate_recipe_variations(self, engine):
        result = engine.generate_recipe_variations(_bolognese(), ["turkey mince", "noodles"])
        assert [r.name for r in result] == [
            "Big Batch Bolognese (with turkey mince)",
            "Big Batch Bolognese (with noodles)",
        ]

    def test_empty_inputs(self, engine):
        constraints = RecipeConstraints(max_cooking_time=30, max_difficulty=3)
        assert engine.score_recipes([], constraints) == []
        assert engine.find_makeable_recipes([], []) == []
        assert engine.suggest_bulk_cooking_recipes([], constraints) == []
        assert engine.find_complementary_recipes(_stir_fry(), [], NutritionInfo()) == []
        assert engine.generate_recipe_variations(_stir_fry(), []) == []

    def test_engine_is_reusable_and_pure(self, engine):
        constraints = RecipeConstraints(
            max_cooking_time=30, max_difficulty=3, available_ingredients=["soy sauce"]
        )
        recipes = [_stir_fry(), _bolognese()]
        first = [(s.recipe.id, s.score) for s in engine.score_recipes(recipes, constraints)]
        second = [(s.recipe.id, s.score) for s in engine.score_recipes(recipes, constraints)]
        assert first == second
        assert constraints.available_ingredients == ["soy sauce"]
        assert recipes[0].ingredients[0].name == "chicken breast"
