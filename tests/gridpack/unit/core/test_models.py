import pytest

from gridpack.core.models import Item, Loc, PlacedItem


def test_item_coerces_degenerate_spans_to_one() -> None:
    item = Item(rows=0, cols=0, symbol="x")
    assert (item.rows, item.cols) == (1, 1)
    assert Item(rows=-3, cols=2, symbol="x").rows == 1


def test_item_rejects_multi_character_symbol() -> None:
    with pytest.raises(ValueError):
        Item(rows=1, cols=1, symbol="ab")
    with pytest.raises(ValueError):
        Item(rows=1, cols=1, symbol="")


def test_item_transposed_swaps_spans_and_keeps_identity_fields() -> None:
    item = Item(rows=1, cols=3, symbol="*", name="stick")
    flipped = item.transposed()
    assert (flipped.rows, flipped.cols) == (3, 1)
    assert flipped.symbol == "*"
    assert flipped.name == "stick"
    assert flipped.transposed() == item


def test_loc_orders_row_major_and_hashes() -> None:
    locs = [Loc(1, 0), Loc(0, 2), Loc(0, 1)]
    assert sorted(locs) == [Loc(0, 1), Loc(0, 2), Loc(1, 0)]
    assert {Loc(2, 3): "a"}[Loc(2, 3)] == "a"
    assert str(Loc(2, 3)) == "(2, 3)"


def test_intersects_uses_half_open_ranges() -> None:
    a = PlacedItem(Loc(0, 0), Item(2, 2, "a"))
    touching_right = PlacedItem(Loc(0, 2), Item(2, 2, "b"))
    touching_below = PlacedItem(Loc(2, 0), Item(2, 2, "c"))
    overlapping = PlacedItem(Loc(1, 1), Item(2, 2, "d"))
    assert not a.intersects(touching_right)
    assert not a.intersects(touching_below)
    assert a.intersects(overlapping)
    assert overlapping.intersects(a)


def test_intersects_detects_containment_and_crossing() -> None:
    big = PlacedItem(Loc(0, 0), Item(4, 4, "b"))
    inner = PlacedItem(Loc(1, 1), Item(1, 1, "i"))
    horizontal = PlacedItem(Loc(5, 0), Item(1, 5, "h"))
    vertical = PlacedItem(Loc(3, 2), Item(5, 1, "v"))
    assert big.intersects(inner)
    assert inner.intersects(big)
    assert horizontal.intersects(vertical)


def test_contains_covers_footprint_only() -> None:
    placed = PlacedItem(Loc(1, 2), Item(2, 3, "x"))
    assert placed.contains(Loc(1, 2))
    assert placed.contains(Loc(2, 4))
    assert not placed.contains(Loc(3, 2))
    assert not placed.contains(Loc(1, 5))
    assert not placed.contains(Loc(0, 2))


def test_cells_lists_footprint_row_major() -> None:
    placed = PlacedItem(Loc(1, 1), Item(2, 2, "x"))
    assert placed.cells() == [Loc(1, 1), Loc(1, 2), Loc(2, 1), Loc(2, 2)]


def test_placed_item_transpose_and_copy_are_independent() -> None:
    placed = PlacedItem(Loc(0, 0), Item(1, 3, "x"))
    clone = placed.copy()
    placed.transpose()
    placed.move_to(Loc(2, 2))
    assert (placed.rows, placed.cols) == (3, 1)
    assert placed.anchor == Loc(2, 2)
    assert (clone.rows, clone.cols) == (1, 3)
    assert clone.anchor == Loc(0, 0)
