from __future__ import annotations

import random
from collections.abc import Callable

import pytest

from gridpack.core.backends import GridBackend, create_grid
from gridpack.core.grid import Grid
from gridpack.core.models import Item

GridFactory = Callable[[int, int], Grid]


@pytest.fixture(params=list(GridBackend), ids=lambda backend: backend.value)
def backend(request: pytest.FixtureRequest) -> GridBackend:
    return request.param


@pytest.fixture
def make_grid(backend: GridBackend) -> GridFactory:
    def _make(rows: int, cols: int) -> Grid:
        return create_grid(rows, cols, backend)

    return _make


@pytest.fixture
def stick() -> Item:
    return Item(rows=1, cols=3, symbol="*", name="stick")


@pytest.fixture
def stone() -> Item:
    return Item(rows=1, cols=1, symbol="@", name="stone")


@pytest.fixture
def seeded_rng() -> random.Random:
    return random.Random(1337)
