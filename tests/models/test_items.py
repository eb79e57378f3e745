"""Tests for the record models."""

from __future__ import annotations

from datetime import date, timedelta

import pytest
from pydantic import ValidationError

from larder.models import GroceryItem, Ingredient, PantryItem, Recipe, StockRecord


def test_pantry_item_is_not_expired_on_its_expiration_day(pantry_item):
    today = date(2026, 3, 14)
    item = pantry_item(expiration_date=today)

    assert item.is_expired(today) is False


def test_pantry_item_dated_yesterday_is_expired(pantry_item):
    item = pantry_item(expiration_date=date.today() - timedelta(days=1))

    assert item.is_expired() is True


def test_pantry_item_equality_ignores_quantity(pantry_item):
    expires = date(2026, 1, 1)

    assert pantry_item(quantity=2, expiration_date=expires) == pantry_item(
        quantity=9, expiration_date=expires
    )
    assert pantry_item(expiration_date=expires) != pantry_item(
        expiration_date=expires + timedelta(days=1)
    )
    assert pantry_item(unit="dozen") != pantry_item(unit="units")


def test_grocery_and_ingredient_equality_include_quantities(grocery_item, ingredient):
    assert grocery_item(quantity_needed=2) == grocery_item(quantity_needed=2)
    assert grocery_item(quantity_needed=2) != grocery_item(quantity_needed=3)
    assert ingredient(quantity=1) != ingredient(quantity=2)


def test_records_sort_by_their_ordering_key(pantry_item, grocery_item, ingredient):
    soon = pantry_item(name="Milk", expiration_date=date(2026, 1, 2))
    later = pantry_item(name="Rice", expiration_date=date(2027, 1, 2))
    assert sorted([later, soon]) == [soon, later]

    few = grocery_item(name="Lemons", quantity_needed=1)
    many = grocery_item(name="Apples", quantity_needed=12)
    assert [item.name for item in sorted([many, few])] == ["Lemons", "Apples"]

    assert [i.quantity for i in sorted([ingredient(quantity=5), ingredient(quantity=2)])] == [2, 5]


def test_records_satisfy_stock_record_shape(pantry_item, grocery_item, ingredient):
    for record in (pantry_item(), grocery_item(), ingredient()):
        assert isinstance(record, StockRecord)


def test_quantity_assignment_is_validated(pantry_item):
    item = pantry_item()
    item.quantity = 10
    assert item.quantity == 10

    with pytest.raises(ValidationError):
        item.quantity = "a dozen"
    with pytest.raises(ValidationError):
        item.quantity = -1


def test_recipe_keeps_ingredient_order_and_duplicates(ingredient):
    recipe = Recipe(name="Omelette")
    recipe.add_ingredient(ingredient(name="Eggs"))
    recipe.add_ingredient(ingredient(name="Cheese", quantity=1))
    recipe.add_ingredient(ingredient(name="Eggs", quantity=1))

    assert [i.name for i in recipe.ingredients] == ["Eggs", "Cheese", "Eggs"]


def test_recipe_ingredient_removal_leaves_recipe_unchanged(ingredient):
    recipe = Recipe(name="Omelette", ingredients=[ingredient()])

    assert recipe.remove_ingredient("Eggs") is False
    assert len(recipe.ingredients) == 1
    assert "Omelette" in str(recipe)
