"""Cave grid state: an owned cell array with a solid wall border."""

import numpy as np
from numpy.typing import NDArray

from .exceptions import BorderInvariantError, InvalidDimensionsError
from .types import Cell, Position

MIN_DIMENSION = 3


class CaveGrid:
    """Rectangular grid of cells, shape (height, width).

    The outermost ring is always wall. Interior algorithms rely on this so
    neighbor lookups from interior cells never leave the array.
    """

    def __init__(self, width: int, height: int, fill: Cell = Cell.WALL):
        if width < MIN_DIMENSION or height < MIN_DIMENSION:
            raise InvalidDimensionsError(
                f"Grid must be at least {MIN_DIMENSION}x{MIN_DIMENSION}, "
                f"got {width}x{height}"
            )
        self.width = width
        self.height = height
        self.cells: NDArray[np.uint8] = np.full(
            (height, width), int(fill), dtype=np.uint8
        )
        self.enforce_border()

    @classmethod
    def from_array(cls, cells: NDArray[np.integer]) -> "CaveGrid":
        """Wrap a copy of an existing cell array.

        Args:
            cells: 2D array of Cell values, shape (height, width).

        Returns:
            New CaveGrid owning a copy of the data.

        Raises:
            InvalidDimensionsError: If the array is not 2D or smaller than 3x3.
            BorderInvariantError: If any border cell is not a wall.
        """
        if cells.ndim != 2:
            raise InvalidDimensionsError(f"Expected a 2D array, got {cells.ndim}D")
        height, width = cells.shape
        grid = cls(width, height)
        grid.cells[:, :] = cells
        if not grid.border_is_wall():
            raise BorderInvariantError("Border cells must all be walls")
        return grid

    def copy(self) -> "CaveGrid":
        """Return an independent copy of this grid."""
        return CaveGrid.from_array(self.cells)

    def enforce_border(self) -> None:
        """Force the outer ring of cells to wall."""
        self.cells[0, :] = Cell.WALL
        self.cells[-1, :] = Cell.WALL
        self.cells[:, 0] = Cell.WALL
        self.cells[:, -1] = Cell.WALL

    def border_is_wall(self) -> bool:
        """Check the border invariant."""
        return bool(
            np.all(self.cells[0, :] == Cell.WALL)
            and np.all(self.cells[-1, :] == Cell.WALL)
            and np.all(self.cells[:, 0] == Cell.WALL)
            and np.all(self.cells[:, -1] == Cell.WALL)
        )

    def __getitem__(self, position: Position) -> Cell:
        return Cell(int(self.cells[position.y, position.x]))

    def __setitem__(self, position: Position, cell: Cell) -> None:
        self.cells[position.y, position.x] = cell

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, CaveGrid):
            return NotImplemented
        return np.array_equal(self.cells, other.cells)

    def in_bounds(self, x: int, y: int) -> bool:
        """Check if a coordinate lies within the grid."""
        return 0 <= x < self.width and 0 <= y < self.height

    def is_interior(self, x: int, y: int) -> bool:
        """Check if a coordinate lies strictly inside the border."""
        return 0 < x < self.width - 1 and 0 < y < self.height - 1

    def count(self, cell: Cell) -> int:
        """Number of cells in the given state."""
        return int(np.count_nonzero(self.cells == cell))

    def find(self, cell: Cell) -> list[Position]:
        """Positions holding the given state, in row-major order."""
        ys, xs = np.nonzero(self.cells == cell)
        return [Position(x=int(x), y=int(y)) for y, x in zip(ys, xs)]

    def __repr__(self) -> str:
        return f"CaveGrid(width={self.width}, height={self.height})"
