import pytest

from recipe_utils.ingredients.matching import match_ingredient, match_recipe
from recipe_utils.ingredients.models import MatchResult, RecipeIngredient
from recipe_utils.recipes.models import Recipe

NO_MATCH = MatchResult(matched=False, score=0.0, matched_with=None)


@pytest.mark.parametrize(
    "ingredient, pantry, expected",
    [
        # Substring
        ("chicken breast", ["chicken", "rice"], MatchResult(True, 0.9, "chicken")),
        # Exact match keeps the pantry entry as given
        ("tomato", ["tomatoes", "Tomato"], MatchResult(True, 1.0, "Tomato")),
        # First exact match wins
        ("egg", ["egg", "EGG"], MatchResult(True, 1.0, "egg")),
        # First substring match wins over an equal later one
        ("chicken breast", ["chicken", "breast"], MatchResult(True, 0.9, "chicken")),
        # A later exact match overrides an earlier substring match
        ("onion", ["red onion", "onion"], MatchResult(True, 1.0, "onion")),
        # A later substring match overrides an earlier weaker fuzzy match
        ("tomato", ["tomate", "cherry tomato"], MatchResult(True, 0.9, "cherry tomato")),
        # Fuzzy
        ("basil", ["rice", "basel"], MatchResult(True, pytest.approx(0.8), "basel")),
        # Exactly at the fuzzy threshold
        (
            "abcdefghij",
            ["abcdefgxyz"],
            MatchResult(True, pytest.approx(0.7), "abcdefgxyz"),
        ),
        # Below the fuzzy threshold
        ("lemon", ["melon"], NO_MATCH),
    ],
)
def test_match_ingredient(ingredient, pantry, expected):
    assert match_ingredient(ingredient, pantry) == expected


def test_match_ingredient_structured():
    ingredient = RecipeIngredient(name="  Milk ", quantity="1", unit="cup")
    assert match_ingredient(ingredient, ["milk"]) == MatchResult(True, 1.0, "milk")


@pytest.mark.parametrize(
    "ingredient, pantry",
    [
        ("flour", []),
        ("flour", None),
        ("flour", ["", "   "]),
        ("", ["flour"]),
        ("   ", ["flour"]),
        (None, ["flour"]),
        (RecipeIngredient(name=""), ["flour"]),
    ],
)
def test_match_ingredient_empty_input_never_matches(ingredient, pantry):
    assert match_ingredient(ingredient, pantry) == NO_MATCH


@pytest.fixture
def baking_recipe():
    return Recipe(
        name="Pancakes",
        ingredients=[
            RecipeIngredient(name="egg"),
            RecipeIngredient(name="milk"),
            RecipeIngredient(name="flour"),
        ],
    )


def test_match_recipe_partial(baking_recipe):
    result = match_recipe(baking_recipe, ["egg", "milk"])
    assert result.matched_count == 2
    assert result.total_count == 3
    assert result.percentage == pytest.approx(200 / 3)
    assert result.display_percentage == 67
    assert result.summary == "2 of 3 ingredients"
    assert result.missing == [baking_recipe.ingredients[2]]


def test_match_recipe_keeps_ingredient_order(baking_recipe):
    result = match_recipe(baking_recipe, ["flour"])
    assert [m.ingredient for m in result.matches] == baking_recipe.ingredients
    assert [m.matched for m in result.matches] == [False, False, True]
    assert result.matches[2].matched_with == "flour"


def test_match_recipe_end_to_end():
    recipe = Recipe(
        name="Tomato salad",
        ingredients=[
            RecipeIngredient(name="tomato", quantity="3"),
            RecipeIngredient(name="basil", quantity="1/2", unit="cup"),
        ],
    )
    result = match_recipe(recipe, ["tomatoes", "basil leaves"])
    assert result.percentage == 100
    assert result.matched_count == 2
    assert result.total_count == 2
    assert all(m.score == 0.9 for m in result.matches)


def test_match_recipe_bare_string_ingredients():
    recipe = Recipe(name="Omelette", ingredients=["Eggs", "butter"])
    result = match_recipe(recipe, ["egg"])
    assert result.matched_count == 1
    assert result.percentage == 50


def test_match_recipe_no_ingredients():
    result = match_recipe(Recipe(name="Water", ingredients=[]), ["water"])
    assert result.percentage == 0
    assert result.matched_count == 0
    assert result.total_count == 0
    assert result.matches == []


def test_match_recipe_missing_recipe():
    result = match_recipe(None, ["water"])
    assert result.total_count == 0


@pytest.mark.parametrize("pantry", [None, "egg"])
def test_match_recipe_invalid_pantry(baking_recipe, pantry):
    result = match_recipe(baking_recipe, pantry)
    assert result.percentage == 0
    assert result.matched_count == 0
    assert result.total_count == 3
    assert result.matches == []


def test_match_recipe_empty_pantry(baking_recipe):
    result = match_recipe(baking_recipe, [])
    assert result.percentage == 0
    assert result.total_count == 3
    assert len(result.matches) == 3


def test_match_recipe_stored_record():
    record = {
        "name": "Pancakes",
        "ingredients": [
            {"name": "Egg", "quantity": "2"},
            {"name": "milk", "quantity": "1", "unit": "cup"},
            {"quantity": "1"},
        ],
    }
    result = match_recipe(record, ["egg"])
    assert result.matched_count == 1
    assert result.total_count == 3
    assert result.matches[0].matched_with == "egg"
    assert result.missing == record["ingredients"][1:]
