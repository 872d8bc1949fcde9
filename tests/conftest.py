import pytest

from recipe_utils.ingredients.models import RecipeIngredient
from recipe_utils.recipes.models import Recipe


def make_recipe(recipe_id, name, ingredient_names, servings=4):
    return Recipe(
        id=recipe_id,
        name=name,
        ingredients=[RecipeIngredient(name=n, quantity="1") for n in ingredient_names],
        servings=servings,
    )


@pytest.fixture
def recipes():
    return [
        # 2 of 3 ingredients
        make_recipe("r1", "Pancakes", ["egg", "milk", "flour"]),
        # 4 of 5 ingredients, exactly at the cutoff
        make_recipe("r2", "Fried rice", ["rice", "egg", "onion", "soy sauce", "peas"]),
        # All ingredients
        make_recipe("r3", "Scrambled eggs", ["eggs", "butter"]),
        # All ingredients, after r3 in input order
        make_recipe("r4", "Boiled rice", ["rice"]),
        # No ingredients
        make_recipe("r5", "Ice", []),
    ]


@pytest.fixture
def pantry():
    return ["egg", "milk", "rice", "onion", "soy sauce", "butter"]
