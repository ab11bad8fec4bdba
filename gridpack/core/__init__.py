"""Grid container core: value types, errors and storage backends."""

from gridpack.core.backends import GridBackend, create_grid
from gridpack.core.dense import DenseGrid
from gridpack.core.errors import (
    BoundsError,
    DuplicateNameError,
    GridError,
    InvalidMoveError,
    InvalidTransposeError,
    NotFoundError,
    OverlapError,
    PlacementError,
    TransferError,
)
from gridpack.core.grid import Grid
from gridpack.core.indexed import IndexedGrid
from gridpack.core.models import Item, Loc, PlacedItem, Selector
from gridpack.core.transfer import transfer

__all__ = [
    "BoundsError",
    "DenseGrid",
    "DuplicateNameError",
    "Grid",
    "GridBackend",
    "GridError",
    "IndexedGrid",
    "InvalidMoveError",
    "InvalidTransposeError",
    "Item",
    "Loc",
    "NotFoundError",
    "OverlapError",
    "PlacedItem",
    "PlacementError",
    "Selector",
    "TransferError",
    "create_grid",
    "transfer",
]
