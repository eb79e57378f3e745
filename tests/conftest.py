"""Shared pytest fixtures for the Larder test suite."""

from __future__ import annotations

import logging
from datetime import date, timedelta
from typing import Callable

import pytest

from larder.config import get_settings
from larder.models import GroceryItem, Ingredient, PantryItem


@pytest.fixture(autouse=True)
def isolated_settings(tmp_path, monkeypatch):
    """Point every test at its own pantry and grocery files."""

    monkeypatch.setenv("LARDER_PANTRY_PATH", str(tmp_path / "pantry.csv"))
    monkeypatch.setenv("LARDER_GROCERY_PATH", str(tmp_path / "groceryList.csv"))
    monkeypatch.chdir(tmp_path)
    get_settings.cache_clear()
    yield
    get_settings.cache_clear()


@pytest.fixture(autouse=True)
def restore_root_logging():
    """Undo handler and level changes made by configure_logging."""

    root = logging.getLogger()
    handlers, level = root.handlers[:], root.level
    yield
    root.handlers = handlers
    root.setLevel(level)


@pytest.fixture()
def pantry_item() -> Callable[..., PantryItem]:
    """Build pantry items with sensible defaults."""

    def _build(**kwargs) -> PantryItem:
        defaults = {
            "name": "Eggs",
            "quantity": 4,
            "unit": "units",
            "category": "Protein",
            "expiration_date": date.today() + timedelta(days=7),
        }
        defaults.update(kwargs)
        return PantryItem.model_validate(defaults)

    return _build


@pytest.fixture()
def grocery_item() -> Callable[..., GroceryItem]:
    def _build(**kwargs) -> GroceryItem:
        defaults = {"name": "Apples", "category": "Fruit", "quantity_needed": 10, "unit": "pieces"}
        defaults.update(kwargs)
        return GroceryItem.model_validate(defaults)

    return _build


@pytest.fixture()
def ingredient() -> Callable[..., Ingredient]:
    def _build(**kwargs) -> Ingredient:
        defaults = {"name": "Eggs", "category": "Protein", "quantity": 4, "unit": "units"}
        defaults.update(kwargs)
        return Ingredient.model_validate(defaults)

    return _build
