"""Find recipes that can mostly be cooked from leftover ingredients."""

import dataclasses
import logging
from concurrent.futures import ThreadPoolExecutor
from typing import Iterable, List, Optional, Sequence

import pandas as pd
from tqdm import tqdm

from recipe_utils.ingredients.matching import match_recipe
from recipe_utils.ingredients.models import RecipeMatchResult, ingredient_name
from recipe_utils.ingredients.pantry import EmptyPantryError
from recipe_utils.ingredients.policy import LEFTOVER_MATCH_CUTOFF
from recipe_utils.recipes.models import Recipe

logger = logging.getLogger(__name__)


@dataclasses.dataclass
class LeftoverMatch:
    recipe: Recipe
    result: RecipeMatchResult

    @property
    def percentage(self) -> float:
        return self.result.percentage


def scan_leftovers(
    recipes: Iterable[Recipe],
    pantry: Sequence[str],
    cutoff: float = LEFTOVER_MATCH_CUTOFF,
    max_workers: Optional[int] = None,
    show_progress: bool = False,
) -> List[LeftoverMatch]:
    """Match every recipe against the pantry and keep the close ones.

    Recipes matching at least ``cutoff`` percent of their ingredients
    are returned best first. Recipes with equal percentages keep their
    input order.

    Args:
        recipes: Candidate recipes.
        pantry: Ingredient names the user has available.
        cutoff: Minimum match percentage, inclusive.
        max_workers: Match recipes on a thread pool of this size. None
            or 1 matches them one after another.
        show_progress: Show a tqdm progress bar.

    Returns:
        LeftoverMatch objects sorted by percentage, highest first.

    Raises:
        EmptyPantryError: If the pantry holds no ingredients.
    """
    if not pantry:
        raise EmptyPantryError("Please add at least one ingredient")

    recipes = list(recipes)
    pantry = list(pantry)
    logger.info(
        f"Scanning {len(recipes)} recipes against {len(pantry)} pantry ingredients"
    )

    def _match(recipe: Recipe) -> RecipeMatchResult:
        return match_recipe(recipe, pantry)

    results: List[RecipeMatchResult] = []
    with tqdm(
        total=len(recipes), desc="Scanning recipes", disable=not show_progress
    ) as pbar:
        if max_workers and max_workers > 1:
            with ThreadPoolExecutor(max_workers=max_workers) as executor:
                # map preserves input order
                for result in executor.map(_match, recipes):
                    results.append(result)
                    pbar.update(1)
        else:
            for recipe in recipes:
                results.append(_match(recipe))
                pbar.update(1)

    matches = [
        LeftoverMatch(recipe=recipe, result=result)
        for recipe, result in zip(recipes, results)
        if result.percentage >= cutoff
    ]
    matches.sort(key=lambda m: m.percentage, reverse=True)

    if matches:
        logger.info(f"Found {len(matches)} matching recipe(s)")
    else:
        logger.info(f"No recipes found with {cutoff}% or more matching ingredients")
    return matches


def matches_to_dataframe(matches: Sequence[LeftoverMatch]) -> pd.DataFrame:
    """Tabulate scan results, one row per recipe."""
    rows = [
        {
            "recipe_id": match.recipe.id,
            "recipe_name": match.recipe.name,
            "match_percentage": match.result.display_percentage,
            "matched_count": match.result.matched_count,
            "total_count": match.result.total_count,
            "missing_ingredients": ", ".join(
                ingredient_name(i) for i in match.result.missing
            ),
        }
        for match in matches
    ]
    columns = [
        "recipe_id",
        "recipe_name",
        "match_percentage",
        "matched_count",
        "total_count",
        "missing_ingredients",
    ]
    return pd.DataFrame(rows, columns=columns)
