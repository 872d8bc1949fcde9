"""Recipe Utils - Ingredient matching and serving scaling for recipe apps."""

__version__ = "0.1.0"

from . import ingredients, recipes

__all__ = ["ingredients", "recipes"]
