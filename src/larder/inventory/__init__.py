"""Ordered collections, manager facades, and their file persistence."""

from larder.inventory.loader import LoadReport, load_grocery_items, load_pantry_items
from larder.inventory.managers import GroceryListManager, ItemManager, PantryManager
from larder.inventory.ordered_list import ItemNotFoundError, OrderedList, PantryList

__all__ = [
    "GroceryListManager",
    "ItemManager",
    "ItemNotFoundError",
    "LoadReport",
    "OrderedList",
    "PantryList",
    "PantryManager",
    "load_grocery_items",
    "load_pantry_items",
]
