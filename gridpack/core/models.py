"""Core value types and rectangle geometry used by the grid backends."""

from __future__ import annotations

from dataclasses import dataclass, replace

BLANK_SYMBOL = " "
CELL_SEPARATOR = "|"


def _at_least_one(value: int) -> int:
    return value if value >= 1 else 1


@dataclass(frozen=True, slots=True, order=True)
class Loc:
    """Grid coordinate, ordered row-major."""

    row: int
    col: int

    def __str__(self) -> str:
        return f"({self.row}, {self.col})"


@dataclass(frozen=True, slots=True)
class Item:
    """Rectangular item waiting to be placed.

    Spans below one are coerced up to one so every item covers at least one cell.
    """

    rows: int
    cols: int
    symbol: str
    name: str | None = None

    def __post_init__(self) -> None:
        object.__setattr__(self, "rows", _at_least_one(self.rows))
        object.__setattr__(self, "cols", _at_least_one(self.cols))
        if len(self.symbol) != 1:
            raise ValueError(f"Item symbol must be a single character, got {self.symbol!r}.")

    def transposed(self) -> Item:
        """Return a copy with row and column spans swapped."""
        return replace(self, rows=self.cols, cols=self.rows)

    @property
    def label(self) -> str:
        return self.name if self.name is not None else repr(self.symbol)


@dataclass(slots=True)
class PlacedItem:
    """Item anchored at its top-left cell inside a grid."""

    anchor: Loc
    item: Item

    @property
    def row(self) -> int:
        return self.anchor.row

    @property
    def col(self) -> int:
        return self.anchor.col

    @property
    def rows(self) -> int:
        return self.item.rows

    @property
    def cols(self) -> int:
        return self.item.cols

    @property
    def name(self) -> str | None:
        return self.item.name

    @property
    def symbol(self) -> str:
        return self.item.symbol

    def intersects(self, other: PlacedItem) -> bool:
        """Return whether two footprints share at least one cell."""
        if (
            # entirely left of other
            self.col + self.cols <= other.col
            # entirely right of other
            or self.col >= other.col + other.cols
            # entirely above other
            or self.row + self.rows <= other.row
            # entirely below other
            or self.row >= other.row + other.rows
        ):
            return False
        return True

    def contains(self, loc: Loc) -> bool:
        """Return whether the footprint covers the given cell."""
        return self.row <= loc.row < self.row + self.rows and self.col <= loc.col < self.col + self.cols

    def cells(self) -> list[Loc]:
        """Compute occupied cells in row-major order."""
        return [
            Loc(self.row + dr, self.col + dc)
            for dr in range(self.rows)
            for dc in range(self.cols)
        ]

    def transpose(self) -> None:
        self.item = self.item.transposed()

    def move_to(self, dst: Loc) -> None:
        self.anchor = dst

    def copy(self) -> PlacedItem:
        return PlacedItem(anchor=self.anchor, item=self.item)


Selector = Loc | str
