import pytest

from recipe_utils.ingredients.pantry import (
    DuplicateIngredientError,
    EmptyIngredientError,
    PantryError,
    add_pantry_ingredient,
    normalize_pantry_entry,
    remove_pantry_ingredient,
)


def test_normalize_pantry_entry():
    assert normalize_pantry_entry("  Chicken Breast ") == "chicken breast"


def test_add_pantry_ingredient_normalizes():
    pantry = ["rice"]
    updated = add_pantry_ingredient(pantry, " Tomatoes ")
    assert updated == ["rice", "tomatoes"]
    assert pantry == ["rice"]


@pytest.mark.parametrize("text", ["", "   ", None])
def test_add_pantry_ingredient_blank(text):
    with pytest.raises(EmptyIngredientError):
        add_pantry_ingredient([], text)


def test_add_pantry_ingredient_duplicate():
    with pytest.raises(DuplicateIngredientError):
        add_pantry_ingredient(["rice"], "RICE ")


def test_pantry_errors_are_value_errors():
    assert issubclass(PantryError, ValueError)
    assert issubclass(DuplicateIngredientError, PantryError)


def test_remove_pantry_ingredient():
    pantry = ["rice", "eggs", "milk"]
    assert remove_pantry_ingredient(pantry, 1) == ["rice", "milk"]
    assert pantry == ["rice", "eggs", "milk"]


@pytest.mark.parametrize("index", [-1, 3])
def test_remove_pantry_ingredient_out_of_range(index):
    with pytest.raises(IndexError):
        remove_pantry_ingredient(["rice", "eggs", "milk"], index)
