"""Insertion-ordered singly linked list addressable by position or by name."""

from __future__ import annotations

from dataclasses import dataclass
from datetime import date
from typing import Callable, Generic, Iterator, Optional, TypeVar, Union

from larder.models.items import PantryItem, StockRecord

T = TypeVar("T", bound=StockRecord)


class ItemNotFoundError(KeyError):
    """Raised when a name lookup finds no matching item."""


@dataclass
class _Node(Generic[T]):
    data: T
    next: Optional["_Node[T]"] = None


class OrderedList(Generic[T]):
    """
    Singly linked sequence of records kept in insertion order.

    Every keyed operation is a linear scan from the head and acts on the first item whose
    ``name`` equals the key, so later records sharing a name are never reached by name.
    """

    def __init__(self) -> None:
        self._head: Optional[_Node[T]] = None
        self._size = 0

    def append(self, item: T) -> None:
        node = _Node(item)
        if self._head is None:
            self._head = node
        else:
            current = self._head
            while current.next is not None:
                current = current.next
            current.next = node
        self._size += 1

    def size(self) -> int:
        return self._size

    def get(self, identifier: Union[int, str]) -> T:
        """Return the item at a zero-based position or the first item with a given name."""

        if isinstance(identifier, int):
            return self._get_by_index(identifier)
        return self._get_by_name(identifier)

    def _get_by_index(self, index: int) -> T:
        if index < 0 or index >= self._size:
            raise IndexError(f"Index: {index}, Size: {self._size}")
        current = self._head
        for _ in range(index):
            assert current is not None
            current = current.next
        assert current is not None
        return current.data

    def _get_by_name(self, name: str) -> T:
        current = self._head
        while current is not None:
            if current.data.name == name:
                return current.data
            current = current.next
        raise ItemNotFoundError(name)

    def remove(self, name: str) -> bool:
        """Unlink the first item named ``name``; return whether anything was removed."""

        if self._head is None:
            return False

        if self._head.data.name == name:
            self._head = self._head.next
            self._size -= 1
            return True

        current = self._head
        while current.next is not None:
            if current.next.data.name == name:
                current.next = current.next.next
                self._size -= 1
                return True
            current = current.next
        return False

    def filter(self, predicate: Callable[[T], bool]) -> "OrderedList[T]":
        """Return a new list of the items matching ``predicate``, leaving this one untouched."""

        filtered = type(self)()
        for item in self:
            if predicate(item):
                filtered.append(item)
        return filtered

    def upsert(self, item: T) -> None:
        """Replace the first item sharing ``item.name`` in place, or append at the tail."""

        previous: Optional[_Node[T]] = None
        current = self._head
        while current is not None:
            if current.data.name == item.name:
                current.data = item
                return
            previous = current
            current = current.next

        node = _Node(item)
        if previous is None:
            self._head = node
        else:
            previous.next = node
        self._size += 1

    def for_each(self, visitor: Callable[[T], None]) -> None:
        for item in self:
            visitor(item)

    def print_all(self, echo: Callable[[str], None] = print) -> None:
        self.for_each(lambda item: echo(str(item)))

    def __iter__(self) -> Iterator[T]:
        current = self._head
        while current is not None:
            yield current.data
            current = current.next

    def __len__(self) -> int:
        return self._size

    def __repr__(self) -> str:
        return f"{type(self).__name__}({list(self)!r})"


class PantryList(OrderedList[PantryItem]):
    """Ordered list of pantry items with an expiration view."""

    def expired_view(self, today: Optional[date] = None) -> "PantryList":
        expired = self.filter(lambda item: item.is_expired(today))
        assert isinstance(expired, PantryList)
        return expired


__all__ = ["ItemNotFoundError", "OrderedList", "PantryList"]
