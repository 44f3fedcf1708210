"""Shared test fixtures for cave generation tests."""

from collections import deque
from typing import Callable

import numpy as np
import pytest

from cavegen.grid import CaveGrid
from cavegen.types import Cell

_SYMBOLS = {
    "#": Cell.WALL,
    ".": Cell.PATH,
    "S": Cell.START,
    "E": Cell.END,
}


class ScriptedRandom:
    """Deterministic random source that replays scripted draws.

    Records every call so tests can assert on draw order and count.
    """

    def __init__(
        self,
        floats: list[float] | None = None,
        ints: list[int] | None = None,
        default_float: float | None = None,
        default_int_low: bool = False,
    ):
        self._floats = deque(floats or [])
        self._ints = deque(ints or [])
        self._default_float = default_float
        self._default_int_low = default_int_low
        self.calls: list[tuple] = []

    def random(self) -> float:
        self.calls.append(("random",))
        if self._floats:
            return self._floats.popleft()
        if self._default_float is not None:
            return self._default_float
        raise AssertionError("Unexpected random() draw")

    def integers(self, low: int, high: int) -> int:
        self.calls.append(("integers", low, high))
        assert low < high, f"Empty range [{low}, {high})"
        if self._ints:
            value = self._ints.popleft()
            assert low <= value < high, f"{value} outside [{low}, {high})"
            return value
        if self._default_int_low:
            return low
        raise AssertionError(f"Unexpected integers({low}, {high}) draw")


def grid_from_rows(rows: list[str]) -> CaveGrid:
    """Build a grid from '#', '.', 'S', 'E' rows."""
    cells = np.array(
        [[_SYMBOLS[ch] for ch in row] for row in rows], dtype=np.uint8
    )
    return CaveGrid.from_array(cells)


@pytest.fixture
def make_grid() -> Callable[[list[str]], CaveGrid]:
    """Factory for grids drawn as text rows."""
    return grid_from_rows


@pytest.fixture
def open_grid() -> CaveGrid:
    """10x10 grid with an all-path interior."""
    return CaveGrid(10, 10, fill=Cell.PATH)


@pytest.fixture
def solid_grid() -> CaveGrid:
    """10x10 grid that is wall everywhere."""
    return CaveGrid(10, 10)


@pytest.fixture
def corridor_grid() -> CaveGrid:
    """42x3 grid with a single open row from x=1 to x=40."""
    return CaveGrid(42, 3, fill=Cell.PATH)


@pytest.fixture
def scripted_random() -> type[ScriptedRandom]:
    """The scripted random source class."""
    return ScriptedRandom
