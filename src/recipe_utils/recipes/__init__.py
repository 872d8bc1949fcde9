"""Recipe records, loading and leftover scanning."""

from .loading import load_recipes, merge_recipes
from .models import Recipe, ingredient_from_dict, recipe_from_dict
from .scanner import LeftoverMatch, matches_to_dataframe, scan_leftovers

__all__ = [
    "Recipe",
    "recipe_from_dict",
    "ingredient_from_dict",
    "load_recipes",
    "merge_recipes",
    "LeftoverMatch",
    "scan_leftovers",
    "matches_to_dataframe",
]
