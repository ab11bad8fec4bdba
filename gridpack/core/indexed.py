"""Map-backed grid keyed by anchor location."""

from __future__ import annotations

from collections.abc import Iterable

from gridpack.core.grid import Grid
from gridpack.core.models import Loc, PlacedItem


class IndexedGrid(Grid):
    """Grid storing records in a dict keyed by anchor, plus a name index.

    Exact-anchor and name lookups are constant time. A cell inside an item's
    footprint that is not its anchor still needs a scan over the values.
    """

    def __init__(self, rows: int, cols: int) -> None:
        super().__init__(rows, cols)
        self._by_anchor: dict[Loc, PlacedItem] = {}
        self._anchor_by_name: dict[str, Loc] = {}

    def _records(self) -> Iterable[PlacedItem]:
        return self._by_anchor.values()

    def _find_at(self, loc: Loc) -> PlacedItem | None:
        placed = self._by_anchor.get(loc)
        if placed is not None:
            return placed
        return self.find_item(loc)

    def find_item(self, loc: Loc) -> PlacedItem | None:
        """Scan every record for one covering ``loc``."""
        for placed in self._by_anchor.values():
            if placed.contains(loc):
                return placed
        return None

    def _find_by_name(self, name: str) -> PlacedItem | None:
        anchor = self._anchor_by_name.get(name)
        if anchor is None:
            return None
        return self._by_anchor[anchor]

    def _insert(self, placed: PlacedItem) -> None:
        self._by_anchor[placed.anchor] = placed
        if placed.name is not None:
            self._anchor_by_name[placed.name] = placed.anchor

    def _discard(self, placed: PlacedItem) -> None:
        del self._by_anchor[placed.anchor]
        if placed.name is not None:
            del self._anchor_by_name[placed.name]

    def _reanchor(self, placed: PlacedItem, previous: Loc) -> None:
        # Record is validated at its new anchor before the key changes.
        del self._by_anchor[previous]
        self._by_anchor[placed.anchor] = placed
        if placed.name is not None:
            self._anchor_by_name[placed.name] = placed.anchor

    def items(self) -> list[PlacedItem]:
        return [self._by_anchor[anchor].copy() for anchor in sorted(self._by_anchor)]

    def __len__(self) -> int:
        return len(self._by_anchor)
