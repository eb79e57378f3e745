"""Recipe storage and pantry matching."""

from larder.recipes.manager import RecipeManager
from larder.recipes.matching import (
    IngredientCheck,
    IngredientStatus,
    RecipeBuilder,
    RecipeMatch,
    RecipeMatcher,
)

__all__ = [
    "IngredientCheck",
    "IngredientStatus",
    "RecipeBuilder",
    "RecipeManager",
    "RecipeMatch",
    "RecipeMatcher",
]
