"""Cross-grid item transfer."""

from __future__ import annotations

from gridpack.core.errors import NotFoundError, PlacementError, TransferError
from gridpack.core.grid import Grid
from gridpack.core.models import Loc, Selector


def transfer(source: Grid, destination: Grid, selector: Selector, dst: Loc) -> Loc:
    """Move one item from ``source`` into ``destination`` at ``dst``.

    If the destination rejects the item it is put back into the source at its
    original anchor and orientation, and ``TransferError`` is raised.
    """
    placed = source.remove(selector)
    if placed is None:
        raise NotFoundError(selector)
    try:
        destination.add(placed.item, dst)
    except PlacementError as exc:
        source.add(placed.item, placed.anchor)
        raise TransferError(placed.item, placed.anchor, dst, exc) from exc
    return dst
