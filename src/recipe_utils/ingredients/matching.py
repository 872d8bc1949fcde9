"""Match recipe ingredients against the ingredients a user has on hand."""

from typing import Iterable, List, Mapping, Optional, Sequence

from recipe_utils.ingredients.models import (
    NO_MATCH,
    IngredientMatch,
    IngredientRef,
    MatchResult,
    RecipeMatchResult,
    ingredient_name,
)
from recipe_utils.ingredients.policy import (
    EXACT_SCORE,
    FUZZY_MATCH_THRESHOLD,
    SUBSTRING_SCORE,
)
from recipe_utils.ingredients.similarity import similarity_score


def _is_pantry(pantry) -> bool:
    return pantry is not None and not isinstance(pantry, (str, bytes))


def _candidate_score(name: str, candidate: str) -> Optional[float]:
    """Score a non-exact pantry candidate, or None if it is not close enough."""
    if candidate in name or name in candidate:
        return SUBSTRING_SCORE

    score = similarity_score(name, candidate)
    if score >= FUZZY_MATCH_THRESHOLD:
        return score
    return None


def match_ingredient(
    ingredient: Optional[IngredientRef], pantry: Optional[Iterable[str]]
) -> MatchResult:
    """Find the pantry entry that best matches a recipe ingredient.

    Pantry entries are checked in order. The first exact match (after
    lowercasing and trimming) is returned at once. Otherwise the scan
    keeps the highest scoring substring or fuzzy candidate, where a
    later candidate only replaces an earlier one if it scores strictly
    higher.

    Args:
        ingredient: A bare ingredient name or a RecipeIngredient.
        pantry: Ingredient names the user has available.

    Returns:
        A MatchResult. ``matched_with`` is the pantry entry as given.

    Examples:
        >>> match_ingredient("chicken breast", ["chicken", "rice"])
        MatchResult(matched=True, score=0.9, matched_with='chicken')
    """
    name = ingredient_name(ingredient)
    if not name or not _is_pantry(pantry):
        return NO_MATCH

    best = NO_MATCH
    for available in pantry:
        if not isinstance(available, str):
            continue
        candidate = available.lower().strip()
        if not candidate:
            continue

        if candidate == name:
            return MatchResult(matched=True, score=EXACT_SCORE, matched_with=available)

        score = _candidate_score(name, candidate)
        if score is not None and score > best.score:
            best = MatchResult(matched=True, score=score, matched_with=available)

    return best


def match_recipe(recipe, pantry: Optional[Sequence[str]]) -> RecipeMatchResult:
    """Work out what share of a recipe's ingredients the pantry covers.

    Args:
        recipe: A Recipe, or a stored record mapping with an
            ``ingredients`` list.
        pantry: Ingredient names the user has available.

    Returns:
        A RecipeMatchResult with one IngredientMatch per recipe
        ingredient, in recipe order. ``percentage`` is not rounded.
    """
    if isinstance(recipe, Mapping):
        ingredients = recipe.get("ingredients")
    else:
        ingredients = getattr(recipe, "ingredients", None)
    ingredients = list(ingredients or [])
    if not ingredients:
        return RecipeMatchResult(percentage=0.0, matched_count=0, total_count=0)

    total_count = len(ingredients)
    if not _is_pantry(pantry):
        return RecipeMatchResult(percentage=0.0, matched_count=0, total_count=total_count)

    pantry = list(pantry)
    matches: List[IngredientMatch] = []
    for ingredient in ingredients:
        result = match_ingredient(ingredient, pantry)
        matches.append(
            IngredientMatch(
                ingredient=ingredient,
                matched=result.matched,
                score=result.score,
                matched_with=result.matched_with,
            )
        )

    matched_count = sum(1 for m in matches if m.matched)
    percentage = matched_count / total_count * 100
    return RecipeMatchResult(
        percentage=percentage,
        matched_count=matched_count,
        total_count=total_count,
        matches=matches,
    )
