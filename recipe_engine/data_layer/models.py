"""Data models for the recipe engine."""
from dataclasses import dataclass, field, asdict
from typing import Any, Dict, List, Optional, Tuple


def require_mapping(data: Any, what: str) -> Dict[str, Any]:
    """Return data unchanged, or raise TypeError if it is not a dict."""
    if not isinstance(data, dict):
        raise TypeError(f"{what} must be a mapping, got {type(data).__name__}")
    return data


@dataclass(frozen=True)
class Ingredient:
    """Represents an ingredient in a recipe."""

    name: str  # e.g. "chicken breast"
    quantity: float  # Amount in `unit`
    unit: str  # e.g. "g", "tbsp", "unit"
    optional: bool = False  # Optional ingredients are never reported as missing
    substitutes: Tuple[str, ...] = ()  # Alternative names, carried with the record


@dataclass
class NutritionInfo:
    """Per-serving nutrition. Every field may be absent."""

    calories: Optional[float] = None
    protein: Optional[float] = None  # grams
    carbs: Optional[float] = None  # grams
    fat: Optional[float] = None  # grams
    fiber: Optional[float] = None  # grams
    sugar: Optional[float] = None  # grams
    sodium: Optional[float] = None  # mg

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "NutritionInfo":
        """Build from a dict, ignoring unknown keys. Numbers become floats."""
        require_mapping(data, "nutrition")
        values = {}
        for name in cls.__dataclass_fields__:
            value = data.get(name)
            values[name] = float(value) if value is not None else None
        return cls(**values)


@dataclass
class StorageInfo:
    """How long a cooked recipe keeps."""

    fridge_days: Optional[int] = None
    freezer_days: Optional[int] = None
    pantry_days: Optional[int] = None
    reheating_instructions: Optional[str] = None

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "StorageInfo":
        require_mapping(data, "storage_info")
        return cls(
            fridge_days=data.get("fridge_days"),
            freezer_days=data.get("freezer_days"),
            pantry_days=data.get("pantry_days"),
            reheating_instructions=data.get("reheating_instructions"),
        )


@dataclass
class Recipe:
    """Represents a recipe supplied by the recipe catalog."""

    id: str  # Unique identifier
    name: str  # Display name
    ingredients: List[Ingredient]
    cooking_time: int  # minutes
    prep_time: int  # minutes
    difficulty: int  # 1 (easy) .. 5 (hard)
    tags: List[str] = field(default_factory=list)
    nutrition: Optional[NutritionInfo] = None
    bulk_cooking_multiplier: float = 1.0
    storage_info: Optional[StorageInfo] = None
    servings: int = 1
    description: Optional[str] = None
    instructions: List[str] = field(default_factory=list)

    @property
    def total_time(self) -> int:
        """Prep plus cooking time in minutes."""
        return self.cooking_time + self.prep_time

    def to_dict(self) -> Dict[str, Any]:
        return asdict(self)


@dataclass
class InventoryItem:
    """Something the user currently has in stock."""

    item_name: str
    quantity: float
    unit: str = ""
    category: str = ""
    location: str = "pantry"  # "fridge", "pantry" or "freezer"
    expiry_date: Optional[str] = None  # ISO date


@dataclass
class RecipeConstraints:
    """Query-scoped constraints for a single scoring call.

    Values are taken as given: negative times or difficulties are not
    rejected here, the calling layer owns input validation.
    """

    max_cooking_time: int  # minutes, compared against prep + cooking time
    max_difficulty: int
    available_ingredients: List[str] = field(default_factory=list)
    dietary_restrictions: List[str] = field(default_factory=list)
    nutrition_targets: Optional[NutritionInfo] = None
    preferred_tags: List[str] = field(default_factory=list)
    servings: Optional[int] = None


@dataclass
class ScoreBreakdown:
    """The five criterion scores (0-100 each) behind a total score."""

    ingredient_match: float
    time_match: float
    difficulty_match: float
    nutrition_match: float
    preference_match: float

    def to_dict(self) -> Dict[str, float]:
        return asdict(self)


@dataclass
class RecipeScore:
    """A scored recipe with its explanation."""

    recipe: Recipe
    score: int
    breakdown: ScoreBreakdown
    missing_ingredients: List[str] = field(default_factory=list)
    estimated_cost: float = 0.0

    def to_dict(self) -> Dict[str, Any]:
        return {
            "recipe": self.recipe.to_dict(),
            "score": self.score,
            "breakdown": self.breakdown.to_dict(),
            "missing_ingredients": list(self.missing_ingredients),
            "estimated_cost": self.estimated_cost,
        }
