"""Stock record models held by the pantry and grocery managers."""

from __future__ import annotations

from datetime import date
from typing import Optional, Protocol, runtime_checkable

from pydantic import BaseModel, ConfigDict, Field


@runtime_checkable
class StockRecord(Protocol):
    """Shape every record stored in an ordered list must expose."""

    name: str
    category: str
    unit: str


class PantryItem(BaseModel):
    """Item currently held in household storage."""

    name: str
    quantity: int = Field(ge=0)
    unit: str = Field(default="")
    category: str = Field(default="")
    expiration_date: date

    model_config = ConfigDict(validate_assignment=True)

    def is_expired(self, today: Optional[date] = None) -> bool:
        """Return True once the expiration date has passed (same day is still good)."""

        return (today or date.today()) > self.expiration_date

    def __eq__(self, other: object) -> bool:
        # equality ignores quantity
        if not isinstance(other, PantryItem):
            return NotImplemented
        return (self.name, self.category, self.unit, self.expiration_date) == (
            other.name,
            other.category,
            other.unit,
            other.expiration_date,
        )

    def __lt__(self, other: "PantryItem") -> bool:
        return self.expiration_date < other.expiration_date

    def __str__(self) -> str:
        return (
            f"{self.name} - {self.quantity} {self.unit} ({self.category}) "
            f"- expires {self.expiration_date.isoformat()}"
        )


class GroceryItem(BaseModel):
    """Entry on the grocery list."""

    name: str
    category: str = Field(default="")
    quantity_needed: int = Field(ge=0)
    unit: str = Field(default="")

    model_config = ConfigDict(validate_assignment=True)

    def __lt__(self, other: "GroceryItem") -> bool:
        return self.quantity_needed < other.quantity_needed

    def __str__(self) -> str:
        return f"{self.name} - need {self.quantity_needed} {self.unit} ({self.category})"


class Ingredient(BaseModel):
    """Quantity of an item a recipe calls for."""

    name: str
    category: str = Field(default="")
    quantity: int = Field(ge=0)
    unit: str = Field(default="")

    model_config = ConfigDict(validate_assignment=True)

    def __lt__(self, other: "Ingredient") -> bool:
        return self.quantity < other.quantity

    def __str__(self) -> str:
        return f"{self.name} - {self.quantity} {self.unit} ({self.category})"


__all__ = ["StockRecord", "PantryItem", "GroceryItem", "Ingredient"]
