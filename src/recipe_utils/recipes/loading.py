"""Load and combine recipe collections."""

import json
import logging
import pathlib
from typing import Iterable, List, Union

from recipe_utils.recipes.models import Recipe, recipe_from_dict

logger = logging.getLogger(__name__)


def load_recipes(path: Union[str, pathlib.Path]) -> List[Recipe]:
    """Load recipes from a JSON file holding an array of recipe records.

    Args:
        path: Path to the JSON file.

    Returns:
        Recipes in file order. Records that are not JSON objects are
        skipped with a warning.

    Raises:
        ValueError: If the file does not hold a JSON array.
    """
    with open(path, "r", encoding="utf-8") as f:
        records = json.load(f)

    if not isinstance(records, list):
        raise ValueError(f"Expected a JSON array of recipes in {path}")

    recipes = []
    for index, record in enumerate(records):
        if not isinstance(record, dict):
            logger.warning(f"Skipping malformed recipe record {index} in {path}")
            continue
        recipes.append(recipe_from_dict(record))
    logger.info(f"Loaded {len(recipes)} recipes from {path}")
    return recipes


def merge_recipes(public: Iterable[Recipe], own: Iterable[Recipe]) -> List[Recipe]:
    """Combine public recipes with a user's own, dropping repeated ids.

    Public recipes come first. A recipe of the user's that shares an id
    with one already seen is skipped. Recipes without an id are always kept.
    """
    merged = list(public)
    seen_ids = {recipe.id for recipe in merged if recipe.id is not None}

    skipped = 0
    for recipe in own:
        if recipe.id is not None and recipe.id in seen_ids:
            skipped += 1
            continue
        if recipe.id is not None:
            seen_ids.add(recipe.id)
        merged.append(recipe)

    if skipped:
        logger.debug(f"Skipped {skipped} duplicate recipes while merging")
    return merged
