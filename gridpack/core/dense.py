"""List-backed grid with linear-scan lookups."""

from __future__ import annotations

from collections.abc import Iterable

from gridpack.core.grid import Grid
from gridpack.core.models import Loc, PlacedItem


class DenseGrid(Grid):
    """Grid storing records in an unordered list.

    Every lookup is a full scan, first match wins. Removal swaps the last
    record into the vacated slot, so iteration order is not preserved.
    """

    def __init__(self, rows: int, cols: int) -> None:
        super().__init__(rows, cols)
        self._items: list[PlacedItem] = []

    def _records(self) -> Iterable[PlacedItem]:
        return self._items

    def _find_at(self, loc: Loc) -> PlacedItem | None:
        for placed in self._items:
            if placed.contains(loc):
                return placed
        return None

    def _find_by_name(self, name: str) -> PlacedItem | None:
        for placed in self._items:
            if placed.name == name:
                return placed
        return None

    def _insert(self, placed: PlacedItem) -> None:
        self._items.append(placed)

    def _discard(self, placed: PlacedItem) -> None:
        for idx, existing in enumerate(self._items):
            if existing is placed:
                last = self._items.pop()
                if idx < len(self._items):
                    self._items[idx] = last
                return

    def __len__(self) -> int:
        return len(self._items)
