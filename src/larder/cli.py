"""Command-line interface for Larder."""

from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime
from pathlib import Path
from typing import List, NoReturn, Optional

import typer
from pydantic import ValidationError

from larder.config import get_settings
from larder.inventory import (
    GroceryListManager,
    ItemManager,
    PantryManager,
    load_grocery_items,
    load_pantry_items,
)
from larder.inventory.suggest import closest_name
from larder.logging_utils import configure_logging
from larder.models import GroceryItem, Ingredient, PantryItem, Recipe
from larder.recipes import IngredientStatus, RecipeBuilder, RecipeMatcher

DATE_FORMATS = ["%Y-%m-%d"]

app = typer.Typer(help="Larder household food inventory commands.")
pantry_app = typer.Typer(help="Manage pantry stock.")
grocery_app = typer.Typer(help="Manage the grocery list.")
recipe_app = typer.Typer(help="Check recipes against the pantry.")
app.add_typer(pantry_app, name="pantry")
app.add_typer(grocery_app, name="grocery")
app.add_typer(recipe_app, name="recipe")


@dataclass
class _Files:
    pantry: Path
    grocery: Path
    grocery_category: str


@app.callback()
def _configure(
    ctx: typer.Context,
    pantry_file: Optional[Path] = typer.Option(
        None, "--pantry-file", help="Pantry records file (defaults to LARDER_PANTRY_PATH)."
    ),
    grocery_file: Optional[Path] = typer.Option(
        None, "--grocery-file", help="Grocery list file (defaults to LARDER_GROCERY_PATH)."
    ),
) -> None:
    settings = get_settings()
    configure_logging(settings.log_level, settings.log_format)
    ctx.obj = _Files(
        pantry=pantry_file or settings.pantry_path,
        grocery=grocery_file or settings.grocery_path,
        grocery_category=settings.grocery_category,
    )


def _load_pantry(path: Path) -> PantryManager:
    manager = PantryManager()
    if path.exists():
        report = load_pantry_items(manager, path)
        _warn_on_load(path, report.ok, report.skipped)
    return manager


def _load_grocery(path: Path) -> GroceryListManager:
    manager = GroceryListManager()
    if path.exists():
        report = load_grocery_items(manager, path)
        _warn_on_load(path, report.ok, report.skipped)
    return manager


def _warn_on_load(path: Path, ok: bool, skipped: int) -> None:
    if not ok:
        typer.secho(f"Error loading records from {path}.", fg=typer.colors.RED, err=True)
        raise typer.Exit(code=1)
    if skipped:
        typer.secho(
            f"Skipped {skipped} malformed line(s) in {path}.", fg=typer.colors.YELLOW, err=True
        )


def _save(manager: ItemManager, path: Path) -> None:
    if not manager.export_records(path):
        typer.secho(f"Failed to save {manager.kind} records to {path}.", fg=typer.colors.RED, err=True)
        raise typer.Exit(code=1)


def _not_found(manager: ItemManager, name: str) -> NoReturn:
    message = f"Item not found: {name}"
    suggestion = closest_name(name, (item.name for item in manager.get_items()))
    if suggestion:
        message += f" (did you mean '{suggestion}'?)"
    typer.secho(message, fg=typer.colors.YELLOW, err=True)
    raise typer.Exit(code=1)


def _parse_ingredient(raw: str) -> Ingredient:
    parts = [part.strip() for part in raw.split(":")]
    if len(parts) not in (3, 4) or not parts[0]:
        raise typer.BadParameter(f"expected NAME:QTY:UNIT[:CATEGORY], got {raw!r}")
    try:
        quantity = int(parts[1])
    except ValueError as exc:
        raise typer.BadParameter(f"quantity must be an integer in {raw!r}") from exc
    category = parts[3] if len(parts) == 4 else ""
    try:
        return Ingredient(name=parts[0], category=category, quantity=quantity, unit=parts[2])
    except ValidationError as exc:
        reason = exc.errors()[0]["msg"]
        raise typer.BadParameter(f"invalid ingredient {raw!r}: {reason}") from exc


def _ingredient_option():
    return typer.Option(
        ...,
        "--ingredient",
        "-i",
        help="Ingredient as NAME:QTY:UNIT[:CATEGORY]; repeat for each ingredient.",
    )


@pantry_app.command("add")
def pantry_add(
    ctx: typer.Context,
    name: str,
    quantity: int = typer.Argument(..., min=0),
    unit: str = typer.Argument(...),
    category: str = typer.Argument(...),
    expires: datetime = typer.Argument(..., formats=DATE_FORMATS, help="Expiration date (YYYY-MM-DD)."),
) -> None:
    """Add an item to the pantry."""

    files: _Files = ctx.obj
    manager = _load_pantry(files.pantry)
    manager.add_item(
        PantryItem(
            name=name,
            quantity=quantity,
            unit=unit,
            category=category,
            expiration_date=expires.date(),
        )
    )
    _save(manager, files.pantry)
    typer.echo(f"{name} was added successfully to the pantry inventory.")


@pantry_app.command("remove")
def pantry_remove(ctx: typer.Context, name: str) -> None:
    """Remove the first pantry item with the given name."""

    files: _Files = ctx.obj
    manager = _load_pantry(files.pantry)
    if not manager.remove_item(name):
        _not_found(manager, name)
    _save(manager, files.pantry)
    typer.echo(f"Item removed successfully: {name}")


@pantry_app.command("update")
def pantry_update(
    ctx: typer.Context,
    name: str,
    new_name: Optional[str] = typer.Option(None, "--name", help="Rename the item."),
    quantity: Optional[int] = typer.Option(None, "--quantity", min=0, help="New quantity."),
    unit: Optional[str] = typer.Option(None, "--unit", help="New unit."),
    category: Optional[str] = typer.Option(None, "--category", help="New category."),
    expires: Optional[datetime] = typer.Option(
        None, "--expires", formats=DATE_FORMATS, help="New expiration date (YYYY-MM-DD)."
    ),
) -> None:
    """Update fields of an existing pantry item."""

    files: _Files = ctx.obj
    manager = _load_pantry(files.pantry)
    item = manager.get_item(name)
    if item is None:
        _not_found(manager, name)
    if new_name and new_name != name and manager.get_item(new_name) is not None:
        typer.secho(
            f"Warning: '{new_name}' is already in the pantry; its first record will be replaced.",
            fg=typer.colors.YELLOW,
            err=True,
        )

    changes = {
        "name": new_name or None,
        "quantity": quantity,
        "unit": unit or None,
        "category": category or None,
        "expiration_date": expires.date() if expires else None,
    }
    # the item is mutated in place so a rename keeps its position
    for field, value in changes.items():
        if value is not None:
            setattr(item, field, value)
    manager.update_item(item)
    _save(manager, files.pantry)
    typer.echo("Item updated successfully.")


@pantry_app.command("list")
def pantry_list(ctx: typer.Context) -> None:
    """Print every pantry item."""

    files: _Files = ctx.obj
    _load_pantry(files.pantry).print_all_items(typer.echo)


@pantry_app.command("expired")
def pantry_expired(ctx: typer.Context) -> None:
    """Print pantry items past their expiration date."""

    files: _Files = ctx.obj
    manager = _load_pantry(files.pantry)
    if manager.get_expired_items().size() == 0:
        typer.echo("No expired items.")
        return
    manager.print_expired_items(typer.echo)


@grocery_app.command("add")
def grocery_add(
    ctx: typer.Context,
    name: str,
    category: str,
    quantity: int = typer.Argument(..., min=0),
    unit: str = typer.Argument(...),
) -> None:
    """Add an item to the grocery list."""

    files: _Files = ctx.obj
    manager = _load_grocery(files.grocery)
    manager.add_item(GroceryItem(name=name, category=category, quantity_needed=quantity, unit=unit))
    _save(manager, files.grocery)
    typer.echo(f"{name} was added successfully to the grocery list.")


@grocery_app.command("remove")
def grocery_remove(ctx: typer.Context, name: str) -> None:
    """Remove the first grocery list item with the given name."""

    files: _Files = ctx.obj
    manager = _load_grocery(files.grocery)
    name = name.strip()
    if not manager.remove_item(name):
        _not_found(manager, name)
    _save(manager, files.grocery)
    typer.echo(f"{name} was successfully removed.")


@grocery_app.command("list")
def grocery_list(ctx: typer.Context) -> None:
    """Print every grocery list item."""

    files: _Files = ctx.obj
    _load_grocery(files.grocery).print_all_items(typer.echo)


@recipe_app.command("add")
def recipe_add(
    ctx: typer.Context,
    name: str,
    ingredients: List[str] = _ingredient_option(),
) -> None:
    """Build a recipe and add any pantry shortfall to the grocery list."""

    files: _Files = ctx.obj
    parsed = [_parse_ingredient(raw) for raw in ingredients]
    pantry = _load_pantry(files.pantry)
    grocery = _load_grocery(files.grocery)

    builder = RecipeBuilder(name, pantry, grocery, grocery_category=files.grocery_category)
    added = 0
    for ingredient in parsed:
        check = builder.add_ingredient(ingredient)
        typer.echo(check.describe())
        if check.status is not IngredientStatus.AVAILABLE:
            added += 1

    _save(grocery, files.grocery)
    recipe = builder.build()
    typer.echo(
        f"Recipe {recipe.name} added with {len(recipe.ingredients)} ingredient(s); "
        f"{added} added to the grocery list."
    )


@recipe_app.command("check")
def recipe_check(
    ctx: typer.Context,
    name: str,
    ingredients: List[str] = _ingredient_option(),
) -> None:
    """Report pantry coverage for a recipe without changing the grocery list."""

    files: _Files = ctx.obj
    recipe = Recipe(name=name)
    for raw in ingredients:
        recipe.add_ingredient(_parse_ingredient(raw))
    for line in RecipeMatcher(_load_pantry(files.pantry)).report(recipe):
        typer.echo(line)


def main(argv: Optional[list[str]] = None) -> None:
    """Entry point for the `larder` console script."""
    app(prog_name="larder", args=argv)


if __name__ == "__main__":
    main()
