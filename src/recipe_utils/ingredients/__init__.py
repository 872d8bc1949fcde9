"""Ingredient matching, scaling and filtering utilities."""

from .filtering import filter_common_foods, is_common_food
from .matching import match_ingredient, match_recipe
from .models import (
    IngredientMatch,
    IngredientRef,
    MatchResult,
    RecipeIngredient,
    RecipeMatchResult,
    ingredient_name,
)
from .pantry import (
    DuplicateIngredientError,
    EmptyIngredientError,
    EmptyPantryError,
    PantryError,
    add_pantry_ingredient,
    normalize_pantry_entry,
    remove_pantry_ingredient,
)
from .scaling import (
    clamp_servings,
    format_ingredient_line,
    scale_all,
    scale_ingredient,
    scale_quantity,
    scale_recipe,
    step_servings,
)
from .similarity import levenshtein_distance, similarity_score

__all__ = [
    "similarity_score",
    "levenshtein_distance",
    "match_ingredient",
    "match_recipe",
    "scale_ingredient",
    "scale_all",
    "scale_quantity",
    "scale_recipe",
    "clamp_servings",
    "step_servings",
    "format_ingredient_line",
    "filter_common_foods",
    "is_common_food",
    "ingredient_name",
    "IngredientRef",
    "RecipeIngredient",
    "MatchResult",
    "IngredientMatch",
    "RecipeMatchResult",
    "normalize_pantry_entry",
    "add_pantry_ingredient",
    "remove_pantry_ingredient",
    "PantryError",
    "EmptyIngredientError",
    "DuplicateIngredientError",
    "EmptyPantryError",
]
