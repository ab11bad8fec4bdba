"""Grid mutation errors.

Every error is recoverable by the caller and carries a message fit to show
to a user verbatim.
"""

from __future__ import annotations

from gridpack.core.models import Item, Loc, Selector


class GridError(ValueError):
    """Base class for rejected grid operations."""


class PlacementError(GridError):
    """A candidate footprint failed a validity check."""


class BoundsError(PlacementError):
    """Footprint is not fully inside the grid extent."""

    def __init__(self, item: Item, loc: Loc, rows: int, cols: int) -> None:
        super().__init__(
            f"Item {item.label} ({item.rows}x{item.cols}) at {loc} does not fit in a {rows}x{cols} grid."
        )
        self.item = item
        self.loc = loc


class OverlapError(PlacementError):
    """Footprint intersects an item already in the grid."""

    def __init__(self, item: Item, loc: Loc, blocker: Item, blocker_loc: Loc) -> None:
        super().__init__(
            f"Item {item.label} at {loc} intersects item {blocker.label} at {blocker_loc}."
        )
        self.item = item
        self.loc = loc
        self.blocker = blocker
        self.blocker_loc = blocker_loc


class DuplicateNameError(PlacementError):
    """Another item in the grid already uses this name."""

    def __init__(self, name: str) -> None:
        super().__init__(f"An item named '{name}' is already in the grid.")
        self.name = name


class InvalidTransposeError(GridError):
    """Transposed footprint would be out of bounds or overlapping."""

    def __init__(self, anchor: Loc, reason: PlacementError) -> None:
        super().__init__(f"Invalid transposition at {anchor}: {reason}")
        self.anchor = anchor
        self.reason = reason


class InvalidMoveError(GridError):
    """Moved footprint would be out of bounds or overlapping."""

    def __init__(self, src: Loc, dst: Loc, reason: PlacementError) -> None:
        super().__init__(f"Invalid move from {src} to {dst}: {reason}")
        self.src = src
        self.dst = dst
        self.reason = reason


class NotFoundError(GridError):
    """No item matches the selector."""

    def __init__(self, selector: Selector) -> None:
        what = f"named '{selector}'" if isinstance(selector, str) else f"at {selector}"
        super().__init__(f"No item {what}.")
        self.selector = selector


class TransferError(GridError):
    """Destination grid rejected a transferred item; the source was restored."""

    def __init__(self, item: Item, src: Loc, dst: Loc, reason: PlacementError) -> None:
        super().__init__(f"Cannot transfer item {item.label} to {dst}: {reason} It stays at {src}.")
        self.item = item
        self.src = src
        self.dst = dst
        self.reason = reason
