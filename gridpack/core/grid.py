"""Grid container contract shared by the storage backends."""

from __future__ import annotations

from abc import ABC, abstractmethod
from collections.abc import Iterable

import numpy as np

from gridpack.core.errors import (
    BoundsError,
    DuplicateNameError,
    InvalidMoveError,
    InvalidTransposeError,
    NotFoundError,
    OverlapError,
    PlacementError,
)
from gridpack.core.models import BLANK_SYMBOL, CELL_SEPARATOR, Item, Loc, PlacedItem, Selector


class Grid(ABC):
    """Fixed-extent grid of non-overlapping rectangular items.

    Backends only decide how records are stored and looked up. Validation,
    speculative transpose/move with rollback and rendering live here so both
    backends behave identically.

    A selector is either a ``Loc`` (any cell covered by the item) or an item name.
    Records are never handed out: queries return copies.
    """

    def __init__(self, rows: int, cols: int) -> None:
        self._rows = rows if rows >= 1 else 1
        self._cols = cols if cols >= 1 else 1

    @property
    def rows(self) -> int:
        return self._rows

    @property
    def cols(self) -> int:
        return self._cols

    # ------------------------------------------------------------ storage hooks
    @abstractmethod
    def _records(self) -> Iterable[PlacedItem]:
        """Iterate stored records."""

    @abstractmethod
    def _find_at(self, loc: Loc) -> PlacedItem | None:
        """Return the record covering a cell."""

    @abstractmethod
    def _find_by_name(self, name: str) -> PlacedItem | None:
        """Return the record with the given item name."""

    @abstractmethod
    def _insert(self, placed: PlacedItem) -> None:
        """Store a validated record."""

    @abstractmethod
    def _discard(self, placed: PlacedItem) -> None:
        """Drop a stored record."""

    def _reanchor(self, placed: PlacedItem, previous: Loc) -> None:
        """Hook run after a record's anchor changed from ``previous``."""
        return None

    # --------------------------------------------------------------- validation
    def _check_bounds(self, placed: PlacedItem) -> None:
        if (
            placed.row < 0
            or placed.col < 0
            or placed.row + placed.rows > self._rows
            or placed.col + placed.cols > self._cols
        ):
            raise BoundsError(placed.item, placed.anchor, self._rows, self._cols)

    def _check_overlap(self, placed: PlacedItem) -> None:
        for existing in self._records():
            if existing is placed:
                continue
            if placed.intersects(existing):
                raise OverlapError(placed.item, placed.anchor, existing.item, existing.anchor)

    def _check_name(self, placed: PlacedItem) -> None:
        if placed.name is None:
            return
        existing = self._find_by_name(placed.name)
        if existing is not None and existing is not placed:
            raise DuplicateNameError(placed.name)

    def _validate(self, placed: PlacedItem) -> None:
        self._check_bounds(placed)
        self._check_overlap(placed)

    def _find(self, selector: Selector) -> PlacedItem | None:
        if isinstance(selector, str):
            return self._find_by_name(selector)
        return self._find_at(selector)

    def _require(self, selector: Selector) -> PlacedItem:
        placed = self._find(selector)
        if placed is None:
            raise NotFoundError(selector)
        return placed

    # ---------------------------------------------------------------- mutations
    def add(self, item: Item, loc: Loc) -> Loc:
        """Place an item with its anchor at ``loc``.

        Raises ``BoundsError``, ``OverlapError`` or ``DuplicateNameError`` and
        leaves the grid untouched when the placement is invalid.
        """
        tentative = PlacedItem(anchor=loc, item=item)
        self._validate(tentative)
        self._check_name(tentative)
        self._insert(tentative)
        return loc

    def remove(self, selector: Selector) -> PlacedItem | None:
        """Remove and return the matching item, or ``None`` if nothing matches."""
        placed = self._find(selector)
        if placed is None:
            return None
        self._discard(placed)
        return placed

    def transpose(self, selector: Selector) -> Loc:
        """Swap the matching item's spans about its anchor and return the anchor."""
        placed = self._require(selector)
        placed.transpose()
        try:
            self._validate(placed)
        except PlacementError as exc:
            placed.transpose()
            raise InvalidTransposeError(placed.anchor, exc) from exc
        except BaseException:
            placed.transpose()
            raise
        return placed.anchor

    def move(self, selector: Selector, dst: Loc) -> Loc:
        """Move the matching item's anchor to ``dst`` and return the previous anchor."""
        placed = self._require(selector)
        src = placed.anchor
        placed.move_to(dst)
        try:
            self._validate(placed)
        except PlacementError as exc:
            placed.move_to(src)
            raise InvalidMoveError(src, dst, exc) from exc
        except BaseException:
            placed.move_to(src)
            raise
        self._reanchor(placed, src)
        return src

    # ------------------------------------------------------------------ queries
    def can_place(self, item: Item, loc: Loc) -> bool:
        """Return whether ``add(item, loc)`` would succeed."""
        tentative = PlacedItem(anchor=loc, item=item)
        try:
            self._validate(tentative)
            self._check_name(tentative)
        except PlacementError:
            return False
        return True

    def get(self, selector: Selector) -> PlacedItem | None:
        placed = self._find(selector)
        return placed.copy() if placed is not None else None

    def items(self) -> list[PlacedItem]:
        return [placed.copy() for placed in self._records()]

    def occupancy(self) -> np.ndarray:
        """Return a rows x cols matrix of 1-based ``items()`` ordinals, 0 when empty."""
        matrix = np.zeros((self._rows, self._cols), dtype=np.int16)
        for ordinal, placed in enumerate(self.items(), start=1):
            matrix[placed.row : placed.row + placed.rows, placed.col : placed.col + placed.cols] = ordinal
        return matrix

    def render(self) -> str:
        """Render one symbol per cell, row-major, ``|``-delimited."""
        lines: list[str] = []
        for row in range(self._rows):
            cells: list[str] = []
            for col in range(self._cols):
                placed = self._find_at(Loc(row, col))
                cells.append(placed.symbol if placed is not None else BLANK_SYMBOL)
            lines.append(CELL_SEPARATOR + CELL_SEPARATOR.join(cells) + CELL_SEPARATOR + "\n")
        return "".join(lines)

    def __len__(self) -> int:
        return sum(1 for _ in self._records())

    def __contains__(self, selector: object) -> bool:
        if not isinstance(selector, (Loc, str)):
            return False
        return self._find(selector) is not None

    def __str__(self) -> str:
        return self.render()

    def __repr__(self) -> str:
        return f"{type(self).__name__}(rows={self._rows}, cols={self._cols}, items={len(self)})"
