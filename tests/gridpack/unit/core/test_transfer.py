import pytest

from gridpack.core.backends import GridBackend, create_grid
from gridpack.core.dense import DenseGrid
from gridpack.core.errors import BoundsError, NotFoundError, OverlapError, TransferError
from gridpack.core.indexed import IndexedGrid
from gridpack.core.models import Item, Loc
from gridpack.core.transfer import transfer


def test_transfer_moves_item_between_grids(make_grid) -> None:
    store = make_grid(3, 3)
    pack = make_grid(2, 2)
    store.add(Item(1, 2, "=", name="plank"), Loc(1, 1))

    assert transfer(store, pack, Loc(1, 2), Loc(1, 0)) == Loc(1, 0)

    assert len(store) == 0
    placed = pack.get("plank")
    assert placed is not None and placed.anchor == Loc(1, 0)


def test_transfer_keeps_transposed_orientation(make_grid) -> None:
    store = make_grid(3, 3)
    pack = make_grid(3, 1)
    store.add(Item(1, 3, "|", name="pole"), Loc(0, 0))
    store.transpose("pole")
    transfer(store, pack, "pole", Loc(0, 0))
    assert pack.render() == "|||\n|||\n|||\n"


def test_failed_transfer_restores_source(make_grid) -> None:
    store = make_grid(3, 3)
    pack = make_grid(1, 1)
    item = Item(1, 2, "=", name="plank")
    store.add(item, Loc(2, 1))
    before = store.render()

    with pytest.raises(TransferError) as excinfo:
        transfer(store, pack, "plank", Loc(0, 0))

    assert isinstance(excinfo.value.__cause__, BoundsError)
    assert store.render() == before
    placed = store.get("plank")
    assert placed is not None and placed.anchor == Loc(2, 1) and placed.item == item
    assert len(pack) == 0


def test_failed_transfer_on_overlap_restores_source(make_grid) -> None:
    store = make_grid(2, 2)
    pack = make_grid(2, 2)
    store.add(Item(1, 1, "a", name="a"), Loc(0, 0))
    pack.add(Item(2, 2, "b"), Loc(0, 0))
    with pytest.raises(TransferError) as excinfo:
        transfer(store, pack, Loc(0, 0), Loc(1, 1))
    assert isinstance(excinfo.value.reason, OverlapError)
    assert "a" in store


def test_transfer_missing_item_raises_not_found(make_grid) -> None:
    with pytest.raises(NotFoundError):
        transfer(make_grid(2, 2), make_grid(2, 2), Loc(0, 0), Loc(0, 0))


def test_transfer_between_different_backends() -> None:
    store = DenseGrid(2, 2)
    pack = IndexedGrid(2, 2)
    store.add(Item(1, 1, "o", name="orb"), Loc(1, 1))
    transfer(store, pack, "orb", Loc(0, 0))
    assert pack.render() == "|o| |\n| | |\n"


def test_create_grid_selects_backend() -> None:
    assert isinstance(create_grid(2, 2), DenseGrid)
    assert isinstance(create_grid(2, 2, GridBackend.INDEXED), IndexedGrid)
    assert isinstance(create_grid(2, 2, " Indexed "), IndexedGrid)
    with pytest.raises(ValueError, match="Unknown grid backend"):
        create_grid(2, 2, "btree")
