"""String similarity scoring for ingredient names."""

from rapidfuzz.distance import Levenshtein

from recipe_utils.ingredients.policy import EXACT_SCORE, SUBSTRING_SCORE


def levenshtein_distance(first: str, second: str) -> int:
    """Minimum number of single-character edits turning one string into the other."""
    return Levenshtein.distance(first, second)


def similarity_score(first: str, second: str) -> float:
    """Score how alike two ingredient names are, from 0.0 to 1.0.

    Both names are lowercased and trimmed first. Identical names score
    1.0 and names where one contains the other score a flat 0.9, even
    when edit distance alone would give a different number. Anything
    else is scored as ``1 - distance / longest_length``.

    Args:
        first: An ingredient name.
        second: Another ingredient name.

    Returns:
        The similarity score.

    Examples:
        >>> similarity_score("Tomato", " tomato ")
        1.0
        >>> similarity_score("tomatoes", "tomato")
        0.9
        >>> similarity_score("basil", "basel")
        0.8
    """
    s1 = first.lower().strip()
    s2 = second.lower().strip()

    if s1 == s2:
        return EXACT_SCORE
    if s1 in s2 or s2 in s1:
        return SUBSTRING_SCORE

    max_length = max(len(s1), len(s2))
    if max_length == 0:
        return EXACT_SCORE

    return 1 - levenshtein_distance(s1, s2) / max_length
