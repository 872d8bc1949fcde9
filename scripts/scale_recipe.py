#!/usr/bin/env python3
"""Print a recipe's ingredient list scaled to a different number of servings."""

import argparse

from recipe_utils.ingredients import (
    clamp_servings,
    format_ingredient_line,
    scale_recipe,
)
from recipe_utils.recipes import load_recipes


def main():
    parser = argparse.ArgumentParser(
        description="Scale a recipe's ingredients to a new serving count"
    )
    parser.add_argument(
        "--recipes",
        type=str,
        required=True,
        help="JSON file with recipes",
    )
    parser.add_argument(
        "--name",
        type=str,
        required=True,
        help="Name or id of the recipe to scale",
    )
    parser.add_argument(
        "--servings",
        type=int,
        required=True,
        help="Number of servings wanted",
    )
    args = parser.parse_args()

    recipes = load_recipes(args.recipes)
    wanted = args.name.lower().strip()
    recipe = next(
        (r for r in recipes if r.name.lower().strip() == wanted or r.id == args.name),
        None,
    )
    if recipe is None:
        print(f"No recipe named {args.name!r} found. Exiting.")
        return

    servings = clamp_servings(args.servings)
    if servings != args.servings:
        print(f"Servings must be between 1 and 99, using {servings}.")

    print(f"{recipe.name} ({servings} servings, originally {recipe.servings}):")
    for ingredient in scale_recipe(recipe, servings):
        print(f"  {format_ingredient_line(ingredient)}")


if __name__ == "__main__":
    main()
