"""Tests for the pantry and grocery manager facades."""

from __future__ import annotations

from datetime import date, timedelta

from larder.inventory.managers import EMPTY_LIST_NOTICE, GroceryListManager, PantryManager


def test_pantry_manager_end_to_end(pantry_item):
    manager = PantryManager()

    manager.add_item(pantry_item(name="Eggs", quantity=4, unit="units", category="Protein"))
    assert manager.get_item("Eggs").quantity == 4

    manager.update_item(pantry_item(name="Eggs", quantity=10, unit="units", category="Protein"))
    assert manager.get_item("Eggs").quantity == 10
    assert len(manager) == 1

    assert manager.remove_item("Eggs") is True
    assert manager.get_item("Eggs") is None


def test_add_item_allows_duplicate_names(grocery_item):
    manager = GroceryListManager()

    manager.add_item(grocery_item(name="Apples", quantity_needed=1))
    manager.add_item(grocery_item(name="Apples", quantity_needed=5))

    assert len(manager) == 2
    assert manager.get_item("Apples").quantity_needed == 1


def test_remove_missing_item_reports_false(grocery_item):
    manager = GroceryListManager()
    manager.add_item(grocery_item())

    assert manager.remove_item("Pears") is False
    assert len(manager) == 1


def test_update_item_inserts_when_missing(grocery_item):
    manager = GroceryListManager()

    manager.update_item(grocery_item(name="Lemons", quantity_needed=3))

    assert manager.get_item("Lemons").quantity_needed == 3


def test_get_items_with_and_without_predicate(grocery_item):
    manager = GroceryListManager()
    manager.add_item(grocery_item(name="Apples", quantity_needed=10))
    manager.add_item(grocery_item(name="Lemons", quantity_needed=2))

    assert [item.name for item in manager.get_items()] == ["Apples", "Lemons"]
    small = manager.get_items(lambda item: item.quantity_needed < 5)
    assert [item.name for item in small] == ["Lemons"]
    assert manager.get_items().size() == 2


def test_print_all_items_on_empty_manager_emits_notice():
    lines: list[str] = []

    PantryManager().print_all_items(lines.append)

    assert lines == [EMPTY_LIST_NOTICE]


def test_print_all_items_emits_one_line_per_item(grocery_item):
    manager = GroceryListManager()
    manager.add_item(grocery_item(name="Apples"))
    manager.add_item(grocery_item(name="Lemons"))
    lines: list[str] = []

    manager.print_all_items(lines.append)

    assert len(lines) == 2
    assert "Apples" in lines[0]


def test_print_expired_items_lists_only_expired(pantry_item):
    today = date(2026, 6, 1)
    manager = PantryManager()
    manager.add_item(pantry_item(name="Milk", expiration_date=today - timedelta(days=2)))
    manager.add_item(pantry_item(name="Rice", expiration_date=today + timedelta(days=200)))
    lines: list[str] = []

    manager.print_expired_items(lines.append, today=today)

    assert len(lines) == 1
    assert lines[0].startswith("Milk")
    assert [item.name for item in manager.get_expired_items(today)] == ["Milk"]


def test_pantry_export_writes_canonical_columns(tmp_path, pantry_item):
    manager = PantryManager()
    manager.add_item(
        pantry_item(
            name="Pasta", quantity=5, unit="Kg", category="Carbs", expiration_date=date(2027, 4, 1)
        )
    )
    manager.add_item(
        pantry_item(
            name="Eggs", quantity=4, unit="units", category="Protein", expiration_date=date(2026, 11, 2)
        )
    )
    destination = tmp_path / "pantry.csv"

    assert manager.export_records(destination) is True

    assert destination.read_text(encoding="utf-8").splitlines() == [
        "Pasta,5,Kg,Carbs,2027-04-01",
        "Eggs,4,units,Protein,2026-11-02",
    ]


def test_grocery_export_overwrites_destination(tmp_path, grocery_item):
    destination = tmp_path / "groceryList.csv"
    destination.write_text("stale,line,1,x\nmore,stale,2,y\n", encoding="utf-8")
    manager = GroceryListManager()
    manager.add_item(grocery_item(name="Apples", category="Fruit", quantity_needed=10, unit="Pieces"))

    assert manager.export_records(destination) is True

    assert destination.read_text(encoding="utf-8") == "Apples,Fruit,10,Pieces\n"


def test_export_failure_is_reported_not_raised(tmp_path, grocery_item, caplog):
    manager = GroceryListManager()
    manager.add_item(grocery_item())
    destination = tmp_path / "missing-dir" / "groceryList.csv"

    with caplog.at_level("ERROR", logger="larder.inventory.managers"):
        assert manager.export_records(destination) is False

    assert "Failed to save grocery records" in caplog.text
    assert not destination.exists()
