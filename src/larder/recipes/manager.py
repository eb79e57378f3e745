"""In-memory recipe collection."""

from __future__ import annotations

from typing import Callable, List, Optional

from larder.inventory.managers import PantryManager
from larder.models.recipe import Recipe
from larder.recipes.matching import RecipeMatch, RecipeMatcher


class RecipeManager:
    """Holds recipes in the order they were added."""

    def __init__(self) -> None:
        self._recipes: List[Recipe] = []

    def add_recipe(self, recipe: Recipe) -> None:
        self._recipes.append(recipe)

    def remove_recipe(self, recipe: Recipe) -> bool:
        try:
            self._recipes.remove(recipe)
        except ValueError:
            return False
        return True

    def find_recipe(self, predicate: Callable[[Recipe], bool]) -> Optional[Recipe]:
        return next((recipe for recipe in self._recipes if predicate(recipe)), None)

    def recipes(self) -> List[Recipe]:
        return list(self._recipes)

    def match_ingredients_with_pantry(self, pantry: PantryManager) -> List[RecipeMatch]:
        """Check every stored recipe against the pantry."""

        matcher = RecipeMatcher(pantry)
        return [matcher.match(recipe) for recipe in self._recipes]


__all__ = ["RecipeManager"]
