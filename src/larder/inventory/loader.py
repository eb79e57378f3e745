"""Load persisted pantry and grocery files into managers."""

from __future__ import annotations

import logging
from dataclasses import dataclass
from pathlib import Path
from typing import Callable, TypeVar, Union

from larder.inventory.codec import MalformedLineError, parse_grocery_line, parse_pantry_line
from larder.inventory.managers import GroceryListManager, ItemManager, PantryManager
from larder.models.items import StockRecord

logger = logging.getLogger(__name__)

T = TypeVar("T", bound=StockRecord)


@dataclass
class LoadReport:
    loaded: int = 0
    skipped: int = 0
    ok: bool = True


def _decode_line(raw: bytes) -> str:
    try:
        return raw.decode("utf-8")
    except UnicodeDecodeError as exc:
        raise MalformedLineError(f"not valid UTF-8 at byte {exc.start}") from exc


def _load_lines(
    manager: ItemManager[T],
    path: Union[str, Path],
    parse: Callable[[str], T],
) -> LoadReport:
    source = Path(path)
    report = LoadReport()
    try:
        # a line that fails to decode is skipped like any other malformed line
        with source.open("rb") as handle:
            for line_number, raw in enumerate(handle, start=1):
                try:
                    line = _decode_line(raw)
                    if not line.strip():
                        continue
                    item = parse(line)
                except MalformedLineError as exc:
                    report.skipped += 1
                    logger.warning(
                        "Skipping malformed %s line %s:%d (%s): %r",
                        manager.kind,
                        source,
                        line_number,
                        exc,
                        raw.rstrip(b"\r\n").decode("utf-8", errors="replace"),
                    )
                    continue
                manager.add_item(item)
                report.loaded += 1
    except OSError as exc:
        logger.error("Error loading %s records from %s: %s", manager.kind, source, exc)
        report.ok = False
        return report

    logger.info(
        "Loaded %d %s record(s) from %s (skipped %d)",
        report.loaded,
        manager.kind,
        source,
        report.skipped,
    )
    return report


def load_pantry_items(manager: PantryManager, path: Union[str, Path]) -> LoadReport:
    """Append every well-formed pantry line in ``path`` to ``manager``."""

    return _load_lines(manager, path, parse_pantry_line)


def load_grocery_items(manager: GroceryListManager, path: Union[str, Path]) -> LoadReport:
    """Append every well-formed grocery line in ``path`` to ``manager``."""

    return _load_lines(manager, path, parse_grocery_line)


__all__ = ["LoadReport", "load_pantry_items", "load_grocery_items"]
