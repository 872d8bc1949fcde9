"""Recipe records as consumed by matching and scaling."""

import dataclasses
import logging
from typing import Any, List, Mapping, Optional

from recipe_utils.ingredients.models import RecipeIngredient

logger = logging.getLogger(__name__)


@dataclasses.dataclass
class Recipe:
    """Dataclass for holding the recipe fields the ingredient tools read."""

    name: str
    ingredients: List[RecipeIngredient]
    servings: int = 1
    id: Optional[str] = None


def _quantity_text(quantity: Any) -> str:
    if quantity is None:
        return ""
    return str(quantity)


def _servings(value: Any) -> int:
    """Read a stored serving count, falling back to 1 when unusable."""
    try:
        servings = int(value or 1)
    except (TypeError, ValueError):
        logger.warning(f"Invalid servings {value!r}, using 1")
        return 1
    return servings if servings > 0 else 1


def ingredient_from_dict(data: Any) -> Optional[RecipeIngredient]:
    """Build a RecipeIngredient from a stored record or a bare name.

    Returns None for anything that is neither a string nor a mapping.
    """
    if isinstance(data, str):
        return RecipeIngredient(name=data)
    if not isinstance(data, Mapping):
        return None
    return RecipeIngredient(
        name=data.get("name") or "",
        quantity=_quantity_text(data.get("quantity")),
        unit=data.get("unit") or None,
    )


def recipe_from_dict(data: Mapping[str, Any]) -> Recipe:
    """Build a Recipe from a loosely-typed stored record.

    Missing names become empty strings, numeric quantities become text
    and a missing, zero or unreadable serving count becomes 1.
    Ingredient entries that are neither strings nor mappings are
    skipped with a warning.

    Args:
        data: A mapping with ``ingredients`` and optionally ``id``,
            ``name``/``title`` and ``servings``.

    Returns:
        A Recipe.
    """
    raw_id = data.get("id")
    name = data.get("name") or data.get("title") or ""

    ingredients = []
    for entry in data.get("ingredients") or []:
        ingredient = ingredient_from_dict(entry)
        if ingredient is None:
            logger.warning(f"Skipping malformed ingredient {entry!r} in recipe {name!r}")
            continue
        ingredients.append(ingredient)

    return Recipe(
        id=str(raw_id) if raw_id is not None else None,
        name=name,
        ingredients=ingredients,
        servings=_servings(data.get("servings")),
    )
