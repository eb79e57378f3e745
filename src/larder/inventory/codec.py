"""Comma-separated line format for pantry and grocery records.

Pantry lines are ``name,quantity,unit,category,expiration_date`` and grocery lines are
``name,category,quantity_needed,unit``. Fields are neither quoted nor escaped, so a name
containing a comma cannot round-trip.
"""

from __future__ import annotations

from datetime import date

from pydantic import ValidationError

from larder.models.items import GroceryItem, PantryItem

PANTRY_FIELD_COUNT = 5
GROCERY_FIELD_COUNT = 4


class MalformedLineError(ValueError):
    """Raised when a persisted line cannot be turned into a record."""


def format_pantry_line(item: PantryItem) -> str:
    return ",".join(
        [
            item.name,
            str(item.quantity),
            item.unit,
            item.category,
            item.expiration_date.isoformat(),
        ]
    )


def format_grocery_line(item: GroceryItem) -> str:
    return ",".join([item.name, item.category, str(item.quantity_needed), item.unit])


def _split(line: str, expected: int) -> list[str]:
    fields = [field.strip() for field in line.rstrip("\r\n").split(",")]
    if len(fields) != expected:
        raise MalformedLineError(f"expected {expected} fields, found {len(fields)}")
    return fields


def _parse_int(value: str, field: str) -> int:
    try:
        return int(value)
    except ValueError as exc:
        raise MalformedLineError(f"{field} is not an integer: {value!r}") from exc


def parse_pantry_line(line: str) -> PantryItem:
    name, quantity, unit, category, expires = _split(line, PANTRY_FIELD_COUNT)
    try:
        expiration_date = date.fromisoformat(expires)
    except ValueError as exc:
        raise MalformedLineError(f"expiration date is not YYYY-MM-DD: {expires!r}") from exc
    try:
        return PantryItem(
            name=name,
            quantity=_parse_int(quantity, "quantity"),
            unit=unit,
            category=category,
            expiration_date=expiration_date,
        )
    except ValidationError as exc:
        raise MalformedLineError(str(exc)) from exc


def parse_grocery_line(line: str) -> GroceryItem:
    name, category, quantity_needed, unit = _split(line, GROCERY_FIELD_COUNT)
    try:
        return GroceryItem(
            name=name,
            category=category,
            quantity_needed=_parse_int(quantity_needed, "quantity needed"),
            unit=unit,
        )
    except ValidationError as exc:
        raise MalformedLineError(str(exc)) from exc


__all__ = [
    "MalformedLineError",
    "format_pantry_line",
    "format_grocery_line",
    "parse_pantry_line",
    "parse_grocery_line",
]
