"""Manager facades owning one ordered list per record type."""

from __future__ import annotations

import logging
from abc import ABC, abstractmethod
from datetime import date
from pathlib import Path
from typing import Callable, Generic, Optional, TypeVar, Union

from larder.inventory.codec import format_grocery_line, format_pantry_line
from larder.inventory.ordered_list import ItemNotFoundError, OrderedList, PantryList
from larder.models.items import GroceryItem, PantryItem, StockRecord

logger = logging.getLogger(__name__)

T = TypeVar("T", bound=StockRecord)

EMPTY_LIST_NOTICE = "There are no items in the list."


class ItemManager(ABC, Generic[T]):
    """CRUD contract shared by the pantry and grocery managers."""

    kind: str = "item"

    def __init__(self) -> None:
        self._items: OrderedList[T] = self._new_list()

    def _new_list(self) -> OrderedList[T]:
        return OrderedList()

    @abstractmethod
    def format_record(self, item: T) -> str:
        """Render ``item`` as one persisted line."""

    def add_item(self, item: T) -> None:
        self._items.append(item)

    def remove_item(self, name: str) -> bool:
        removed = self._items.remove(name)
        if not removed:
            logger.debug("No %s named %s to remove", self.kind, name)
        return removed

    def get_item(self, name: str) -> Optional[T]:
        """Return the first item called ``name``, or None when there is none."""

        try:
            return self._items.get(name)
        except ItemNotFoundError:
            return None

    def get_items(self, predicate: Optional[Callable[[T], bool]] = None) -> OrderedList[T]:
        if predicate is None:
            return self._items
        return self._items.filter(predicate)

    def update_item(self, item: T) -> None:
        """Replace the first item sharing ``item.name``, adding it when absent."""

        self._items.upsert(item)

    def print_all_items(self, echo: Callable[[str], None] = print) -> None:
        if self._items.size() == 0:
            echo(EMPTY_LIST_NOTICE)
            return
        self._items.print_all(echo)

    def export_records(self, destination: Union[str, Path]) -> bool:
        """Overwrite ``destination`` with one line per item; report failure instead of raising."""

        path = Path(destination)
        try:
            with path.open("w", encoding="utf-8") as handle:
                for item in self._items:
                    handle.write(self.format_record(item) + "\n")
        except OSError as exc:
            logger.error("Failed to save %s records to %s: %s", self.kind, path, exc)
            return False
        logger.info("Saved %d %s record(s) to %s", self._items.size(), self.kind, path)
        return True

    def __len__(self) -> int:
        return self._items.size()


class PantryManager(ItemManager[PantryItem]):
    """Pantry stock with expiration tracking."""

    kind = "pantry"

    def _new_list(self) -> PantryList:
        return PantryList()

    def format_record(self, item: PantryItem) -> str:
        return format_pantry_line(item)

    def get_expired_items(self, today: Optional[date] = None) -> PantryList:
        items = self._items
        assert isinstance(items, PantryList)
        return items.expired_view(today)

    def print_expired_items(
        self, echo: Callable[[str], None] = print, today: Optional[date] = None
    ) -> None:
        self.get_expired_items(today).print_all(echo)


class GroceryListManager(ItemManager[GroceryItem]):
    """Items waiting to be bought."""

    kind = "grocery"

    def format_record(self, item: GroceryItem) -> str:
        return format_grocery_line(item)


__all__ = ["EMPTY_LIST_NOTICE", "ItemManager", "PantryManager", "GroceryListManager"]
