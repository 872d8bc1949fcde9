"""Editing the list of ingredients a user has on hand."""

from typing import List, Sequence


class PantryError(ValueError):
    """Base class for rejected pantry edits."""


class EmptyIngredientError(PantryError):
    pass


class DuplicateIngredientError(PantryError):
    pass


class EmptyPantryError(PantryError):
    pass


def normalize_pantry_entry(text: str) -> str:
    return text.strip().lower()


def add_pantry_ingredient(pantry: Sequence[str], text: str) -> List[str]:
    """Return a new pantry with ``text`` appended in normalized form.

    Raises:
        EmptyIngredientError: If ``text`` is blank.
        DuplicateIngredientError: If the normalized entry is already present.
    """
    entry = normalize_pantry_entry(text or "")
    if not entry:
        raise EmptyIngredientError("Please enter an ingredient")
    if entry in pantry:
        raise DuplicateIngredientError(f"Ingredient already added: {entry}")
    return [*pantry, entry]


def remove_pantry_ingredient(pantry: Sequence[str], index: int) -> List[str]:
    """Return a new pantry without the entry at ``index``."""
    if not 0 <= index < len(pantry):
        raise IndexError(f"No pantry ingredient at position {index}")
    return [entry for i, entry in enumerate(pantry) if i != index]
