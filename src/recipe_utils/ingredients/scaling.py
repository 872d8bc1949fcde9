"""Rescale ingredient quantities when the serving count changes."""

import dataclasses
from typing import List, Optional

from recipe_utils.ingredients.models import RecipeIngredient
from recipe_utils.ingredients.number_utils import (
    format_quantity,
    parse_decimal,
    parse_fraction,
    snap_to_fraction,
)
from recipe_utils.ingredients.policy import MAX_SERVINGS, MIN_SERVINGS


def _valid_servings(servings) -> bool:
    return bool(servings) and servings > 0


def scale_quantity(quantity: Optional[str], scale_factor: float) -> Optional[str]:
    """Multiply a textual quantity by ``scale_factor``.

    Plain decimals are rescaled and snapped to a common fraction where
    one is close. Fractions and mixed numbers are rescaled but written
    back as decimals. Anything else, such as "a pinch", is returned
    unchanged. The whole text must be the number, so a quantity with
    trailing words such as "2 large" is not scaled.
    """
    if not quantity:
        return quantity

    try:
        value = parse_decimal(quantity)
    except ValueError:
        pass
    else:
        return snap_to_fraction(format_quantity(value * scale_factor))

    try:
        total = parse_fraction(quantity)
    except (ValueError, ZeroDivisionError):
        return quantity
    return format_quantity(float(total) * scale_factor)


def scale_ingredient(
    ingredient: Optional[RecipeIngredient], original_servings, new_servings
) -> Optional[RecipeIngredient]:
    """Scale one ingredient from ``original_servings`` to ``new_servings``.

    Args:
        ingredient: The recipe line to scale.
        original_servings: Servings the recipe was written for.
        new_servings: Servings wanted.

    Returns:
        A new RecipeIngredient with only ``quantity`` changed, or the
        ingredient itself when it is missing or either serving count is
        zero or negative.

    Examples:
        >>> scale_ingredient(RecipeIngredient("sugar", "1", "cup"), 4, 6)
        RecipeIngredient(name='sugar', quantity='1 1/2', unit='cup')
    """
    if (
        ingredient is None
        or not _valid_servings(original_servings)
        or not _valid_servings(new_servings)
    ):
        return ingredient

    scale_factor = new_servings / original_servings
    return dataclasses.replace(
        ingredient, quantity=scale_quantity(ingredient.quantity, scale_factor)
    )


def scale_all(ingredients, original_servings, new_servings):
    """Scale every ingredient in order. Non-list input is returned as-is."""
    if not isinstance(ingredients, (list, tuple)):
        return ingredients
    return [
        scale_ingredient(ingredient, original_servings, new_servings)
        for ingredient in ingredients
    ]


def scale_recipe(recipe, new_servings) -> List[RecipeIngredient]:
    """Scale a recipe's ingredients, treating a missing serving count as 1."""
    return scale_all(recipe.ingredients, recipe.servings or 1, new_servings)


def clamp_servings(servings: int) -> int:
    """Keep a serving count within the range the serving control allows."""
    return max(MIN_SERVINGS, min(MAX_SERVINGS, servings))


def step_servings(current: int, delta: int) -> int:
    return clamp_servings(current + delta)


def format_ingredient_line(ingredient: RecipeIngredient) -> str:
    """Render an ingredient as "<quantity> <unit> <name>", skipping blanks.

    Examples:
        >>> format_ingredient_line(RecipeIngredient("flour", "2", "cups"))
        '2 cups flour'
        >>> format_ingredient_line(RecipeIngredient("salt", "a pinch"))
        'a pinch salt'
    """
    parts = [ingredient.quantity, ingredient.unit, ingredient.name]
    return " ".join(str(part).strip() for part in parts if part and str(part).strip())
