"""Recipe aggregate."""

from __future__ import annotations

import logging

from pydantic import BaseModel, Field

from larder.models.items import Ingredient

logger = logging.getLogger(__name__)


class Recipe(BaseModel):
    """Named recipe with its ingredients in the order they were added."""

    name: str
    ingredients: list[Ingredient] = Field(default_factory=list)

    def add_ingredient(self, ingredient: Ingredient) -> None:
        self.ingredients.append(ingredient)

    def remove_ingredient(self, name: str) -> bool:
        """Ingredient removal is not supported; the recipe is left unchanged."""

        logger.warning(
            "Ingredient removal is not supported recipe=%s ingredient=%s", self.name, name
        )
        return False

    def __str__(self) -> str:
        lines = [f"Recipe: {self.name}", "Ingredients:"]
        lines.extend(f"  {ingredient}" for ingredient in self.ingredients)
        return "\n".join(lines)


__all__ = ["Recipe"]
