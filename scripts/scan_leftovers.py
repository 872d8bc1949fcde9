#!/usr/bin/env python3
"""
Find recipes that can be made from the ingredients on hand.
Matches each recipe's ingredients against a pantry list and reports the
recipes that reach the match cutoff, best first.
"""

import argparse
import dataclasses
import datetime
import logging
import pathlib

from recipe_utils.ingredients import (
    PantryError,
    add_pantry_ingredient,
    filter_common_foods,
)
from recipe_utils.ingredients.policy import LEFTOVER_MATCH_CUTOFF
from recipe_utils.recipes import (
    load_recipes,
    matches_to_dataframe,
    merge_recipes,
    scan_leftovers,
)

logging.basicConfig(
    level=logging.INFO, format="%(asctime)s - %(levelname)s - %(message)s"
)
logger = logging.getLogger(__name__)


def read_lines(path: str) -> list[str]:
    """Read non-empty, non-comment lines from a text file."""
    lines = []
    with open(path, "r", encoding="utf-8") as f:
        for line in f:
            line = line.strip()
            if line and not line.startswith("#"):
                lines.append(line)
    return lines


def build_pantry(ingredients: list[str]) -> list[str]:
    """Normalize pantry entries, skipping blanks and repeats."""
    pantry = []
    for text in ingredients:
        try:
            pantry = add_pantry_ingredient(pantry, text)
        except PantryError as e:
            logger.warning(f"Skipping pantry entry {text!r}: {e}")
    return pantry


def main():
    """Main function to scan recipes against a pantry."""
    parser = argparse.ArgumentParser(
        description="Find recipes that match the ingredients you have available"
    )
    parser.add_argument(
        "--recipes",
        type=str,
        required=True,
        help="JSON file with public recipes",
    )
    parser.add_argument(
        "--my-recipes",
        type=str,
        default=None,
        help="JSON file with your own recipes, merged after the public ones",
    )
    parser.add_argument(
        "-i",
        "--ingredient",
        action="append",
        default=[],
        help="An ingredient you have; repeat for more",
    )
    parser.add_argument(
        "--pantry-file",
        type=str,
        default=None,
        help="Text file with one available ingredient per line",
    )
    parser.add_argument(
        "--common-foods-file",
        type=str,
        default=None,
        help="Text file of staple foods (salt, water, ...) that recipes are not matched on",
    )
    parser.add_argument(
        "--cutoff",
        type=float,
        default=LEFTOVER_MATCH_CUTOFF,
        help="Minimum match percentage for a recipe to be listed",
    )
    parser.add_argument(
        "--max-workers",
        type=int,
        default=1,
        help="Number of threads used to match recipes",
    )
    parser.add_argument(
        "--output-dir",
        type=str,
        default=None,
        help="Write the results as CSV into this directory",
    )
    args = parser.parse_args()

    ingredients = list(args.ingredient)
    if args.pantry_file:
        ingredients.extend(read_lines(args.pantry_file))
    pantry = build_pantry(ingredients)

    recipes = load_recipes(args.recipes)
    if args.my_recipes:
        recipes = merge_recipes(recipes, load_recipes(args.my_recipes))

    if args.common_foods_file:
        common_foods = read_lines(args.common_foods_file)
        recipes = [
            dataclasses.replace(
                recipe, ingredients=filter_common_foods(recipe.ingredients, common_foods)
            )
            for recipe in recipes
        ]

    try:
        matches = scan_leftovers(
            recipes,
            pantry,
            cutoff=args.cutoff,
            max_workers=args.max_workers,
            show_progress=True,
        )
    except PantryError as e:
        print(f"{e}. Exiting.")
        return

    if not matches:
        print(f"No recipes found with {args.cutoff:g}% or more matching ingredients.")
        return

    print(f"Found {len(matches)} matching recipe(s):")
    for match in matches:
        print(
            f"  - {match.recipe.name}: {match.result.display_percentage}% "
            f"({match.result.summary})"
        )

    if args.output_dir:
        timestamp = datetime.datetime.now().strftime("%Y%m%d_%H%M%S")
        output_file = pathlib.Path(args.output_dir) / f"leftover_matches_{timestamp}.csv"
        matches_to_dataframe(matches).to_csv(output_file, index=False)
        print(f"Results written to {output_file}")


if __name__ == "__main__":
    main()
