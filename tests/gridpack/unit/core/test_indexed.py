import pytest

from gridpack.core.errors import InvalidMoveError
from gridpack.core.indexed import IndexedGrid
from gridpack.core.models import Item, Loc


def test_items_are_ordered_by_anchor() -> None:
    grid = IndexedGrid(3, 3)
    grid.add(Item(1, 1, "c"), Loc(2, 0))
    grid.add(Item(1, 1, "b"), Loc(0, 2))
    grid.add(Item(1, 1, "a"), Loc(0, 0))
    assert [placed.anchor for placed in grid.items()] == [Loc(0, 0), Loc(0, 2), Loc(2, 0)]


def test_find_item_scans_interior_points() -> None:
    grid = IndexedGrid(3, 3)
    grid.add(Item(2, 2, "#"), Loc(1, 1))
    found = grid.find_item(Loc(2, 2))
    assert found is not None and found.anchor == Loc(1, 1)
    assert grid.find_item(Loc(0, 0)) is None


def test_move_rekeys_anchor_and_name_index() -> None:
    grid = IndexedGrid(3, 3)
    grid.add(Item(1, 1, "@", name="stone"), Loc(0, 0))

    assert grid.move("stone", Loc(2, 1)) == Loc(0, 0)

    assert list(grid._by_anchor) == [Loc(2, 1)]
    assert grid._anchor_by_name == {"stone": Loc(2, 1)}
    removed = grid.remove("stone")
    assert removed is not None and removed.anchor == Loc(2, 1)
    assert grid._anchor_by_name == {}


def test_rejected_move_keeps_original_key() -> None:
    grid = IndexedGrid(2, 2)
    grid.add(Item(1, 1, "@", name="stone"), Loc(0, 0))
    grid.add(Item(1, 1, "#"), Loc(1, 1))
    with pytest.raises(InvalidMoveError):
        grid.move(Loc(0, 0), Loc(1, 1))
    assert set(grid._by_anchor) == {Loc(0, 0), Loc(1, 1)}
    assert grid._by_anchor[Loc(0, 0)].anchor == Loc(0, 0)
    assert grid._anchor_by_name == {"stone": Loc(0, 0)}


def test_move_to_same_anchor_is_a_noop() -> None:
    grid = IndexedGrid(2, 2)
    grid.add(Item(1, 2, "="), Loc(0, 0))
    assert grid.move(Loc(0, 1), Loc(0, 0)) == Loc(0, 0)
    assert list(grid._by_anchor) == [Loc(0, 0)]


def test_unnamed_items_do_not_touch_name_index() -> None:
    grid = IndexedGrid(2, 2)
    grid.add(Item(1, 1, "a"), Loc(0, 0))
    grid.add(Item(1, 1, "b"), Loc(1, 1))
    assert grid._anchor_by_name == {}
    assert len(grid) == 2
