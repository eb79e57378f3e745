"""Cross-reference recipe ingredients against pantry stock."""

from __future__ import annotations

import logging
from enum import Enum

from pydantic import BaseModel, ConfigDict, Field

from larder.inventory.managers import GroceryListManager, PantryManager
from larder.models.items import GroceryItem, Ingredient
from larder.models.recipe import Recipe

logger = logging.getLogger(__name__)

DEFAULT_GROCERY_CATEGORY = "Grocery"


class IngredientStatus(str, Enum):
    AVAILABLE = "available"
    INSUFFICIENT = "insufficient_stock"
    MISSING = "not_in_pantry"


class IngredientCheck(BaseModel):
    """Pantry coverage for a single recipe ingredient."""

    name: str
    unit: str = Field(default="")
    required: int
    on_hand: int = Field(default=0)
    shortfall: int = Field(default=0, ge=0)
    status: IngredientStatus

    model_config = ConfigDict(frozen=True)

    def describe(self) -> str:
        if self.status is IngredientStatus.AVAILABLE:
            return f"Available in pantry: {self.name} ({self.on_hand}/{self.required} {self.unit})"
        if self.status is IngredientStatus.INSUFFICIENT:
            return (
                f"Insufficient quantity in pantry for: {self.name} "
                f"(have {self.on_hand}, need {self.required}, short {self.shortfall} {self.unit})"
            )
        return f"Not in pantry: {self.name} (need {self.shortfall} {self.unit})"


class RecipeMatch(BaseModel):
    """Per-ingredient coverage of one recipe, in recipe order."""

    recipe_name: str
    checks: list[IngredientCheck] = Field(default_factory=list)

    model_config = ConfigDict(frozen=True)

    @property
    def can_prepare(self) -> bool:
        return all(check.status is IngredientStatus.AVAILABLE for check in self.checks)

    @property
    def shortfalls(self) -> list[IngredientCheck]:
        return [check for check in self.checks if check.status is not IngredientStatus.AVAILABLE]


class RecipeMatcher:
    """
    Classify recipe ingredients against a pantry manager.

    Lookups go through ``PantryManager.get_item`` so the first pantry record with the
    ingredient's name is the one compared. The pantry is only read.
    """

    def __init__(self, pantry: PantryManager) -> None:
        self._pantry = pantry

    def check(self, ingredient: Ingredient) -> IngredientCheck:
        pantry_item = self._pantry.get_item(ingredient.name)
        if pantry_item is None:
            logger.info(
                "RecipeMatcher missing ingredient name=%s requested=%d%s",
                ingredient.name,
                ingredient.quantity,
                ingredient.unit,
            )
            return IngredientCheck(
                name=ingredient.name,
                unit=ingredient.unit,
                required=ingredient.quantity,
                shortfall=ingredient.quantity,
                status=IngredientStatus.MISSING,
            )

        if pantry_item.quantity >= ingredient.quantity:
            return IngredientCheck(
                name=ingredient.name,
                unit=ingredient.unit,
                required=ingredient.quantity,
                on_hand=pantry_item.quantity,
                status=IngredientStatus.AVAILABLE,
            )

        logger.info(
            "RecipeMatcher insufficient ingredient name=%s requested=%d available=%d",
            ingredient.name,
            ingredient.quantity,
            pantry_item.quantity,
        )
        return IngredientCheck(
            name=ingredient.name,
            unit=ingredient.unit,
            required=ingredient.quantity,
            on_hand=pantry_item.quantity,
            shortfall=ingredient.quantity - pantry_item.quantity,
            status=IngredientStatus.INSUFFICIENT,
        )

    def match(self, recipe: Recipe) -> RecipeMatch:
        return RecipeMatch(
            recipe_name=recipe.name,
            checks=[self.check(ingredient) for ingredient in recipe.ingredients],
        )

    def report(self, recipe: Recipe) -> list[str]:
        """Human-readable coverage lines: a header then one line per ingredient."""

        result = self.match(recipe)
        lines = [f"Checking ingredients for: {result.recipe_name}"]
        lines.extend(check.describe() for check in result.checks)
        return lines


class RecipeBuilder:
    """
    Assemble a recipe while feeding its shortfall into the grocery list.

    Each ingredient is checked against the pantry as soon as it is added; an insufficient
    or missing one produces a new grocery item for the shortfall.
    """

    def __init__(
        self,
        name: str,
        pantry: PantryManager,
        grocery: GroceryListManager,
        *,
        grocery_category: str = DEFAULT_GROCERY_CATEGORY,
    ) -> None:
        self._recipe = Recipe(name=name)
        self._matcher = RecipeMatcher(pantry)
        self._grocery = grocery
        self._grocery_category = grocery_category

    def add_ingredient(self, ingredient: Ingredient) -> IngredientCheck:
        self._recipe.add_ingredient(ingredient)
        check = self._matcher.check(ingredient)
        if check.status is not IngredientStatus.AVAILABLE:
            self._grocery.add_item(
                GroceryItem(
                    name=ingredient.name,
                    category=self._grocery_category,
                    quantity_needed=check.shortfall,
                    unit=ingredient.unit,
                )
            )
            logger.info(
                "Added %s x%d to grocery list for recipe %s",
                ingredient.name,
                check.shortfall,
                self._recipe.name,
            )
        return check

    def build(self) -> Recipe:
        return self._recipe


__all__ = [
    "DEFAULT_GROCERY_CATEGORY",
    "IngredientCheck",
    "IngredientStatus",
    "RecipeBuilder",
    "RecipeMatch",
    "RecipeMatcher",
]
