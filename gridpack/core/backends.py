"""Backend selection for grid construction."""

from __future__ import annotations

from enum import StrEnum

from gridpack.core.dense import DenseGrid
from gridpack.core.grid import Grid
from gridpack.core.indexed import IndexedGrid


class GridBackend(StrEnum):
    """Storage strategy behind a grid."""

    DENSE = "dense"
    INDEXED = "indexed"


_BACKENDS: dict[GridBackend, type[Grid]] = {
    GridBackend.DENSE: DenseGrid,
    GridBackend.INDEXED: IndexedGrid,
}


def create_grid(rows: int, cols: int, backend: GridBackend | str = GridBackend.DENSE) -> Grid:
    """Create an empty grid using the requested backend."""
    try:
        kind = GridBackend(str(backend).strip().lower())
    except ValueError:
        raise ValueError(f"Unknown grid backend: {backend!r}.") from None
    return _BACKENDS[kind](rows, cols)
