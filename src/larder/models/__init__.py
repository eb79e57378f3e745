"""Pydantic models defining the inventory records."""

from larder.models.items import GroceryItem, Ingredient, PantryItem, StockRecord
from larder.models.recipe import Recipe

__all__ = [
    "GroceryItem",
    "Ingredient",
    "PantryItem",
    "StockRecord",
    "Recipe",
]
