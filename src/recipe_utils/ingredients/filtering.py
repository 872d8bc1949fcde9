"""Filter staple foods out of ingredient lists."""

from typing import List, Optional, Sequence

from recipe_utils.ingredients.models import IngredientRef, RecipeIngredient


def _food_name(food) -> str:
    if isinstance(food, str):
        return food.lower()
    if isinstance(food, RecipeIngredient):
        return (food.name or "").lower()
    # Common-food records are mappings with a "name" key
    return (food.get("name") or "").lower()


def _common_food_names(common_foods: Sequence) -> List[str]:
    names = [_food_name(food) for food in common_foods]
    return [name for name in names if name]


def is_common_food(ingredient: Optional[IngredientRef], common_foods) -> bool:
    """Return True if any common food name occurs inside the ingredient name.

    Examples:
        >>> is_common_food("sea salt", ["salt", "water"])
        True
        >>> is_common_food("basil", ["salt", "water"])
        False
    """
    if not ingredient or not common_foods:
        return False

    ingredient_text = _food_name(ingredient)
    return any(food in ingredient_text for food in _common_food_names(common_foods))


def filter_common_foods(ingredients, common_foods) -> list:
    """Drop ingredients that are common foods, keeping the rest in order."""
    if not ingredients:
        return []
    if not common_foods:
        return list(ingredients)

    names = _common_food_names(common_foods)
    return [
        ingredient
        for ingredient in ingredients
        if not any(food in _food_name(ingredient) for food in names)
    ]
