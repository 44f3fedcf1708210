"""Random wall fill and cellular automaton smoothing."""

import numpy as np
import structlog
from scipy import ndimage

from ..exceptions import InvalidParameterError
from ..grid import CaveGrid
from ..types import MOORE_OFFSETS, Cell, RandomSource

logger = structlog.get_logger()

# Moore neighborhood wall counts
WALL_THRESHOLD = 5
PATH_THRESHOLD = 3

# 3x3 kernel for counting neighbors, excluding center
_NEIGHBOR_KERNEL = np.array([[1, 1, 1], [1, 0, 1], [1, 1, 1]], dtype=np.int32)


def initialize_grid(
    width: int,
    height: int,
    fill_probability: float,
    rng: RandomSource,
) -> CaveGrid:
    """Create a grid with a wall border and a randomly filled interior.

    Draws exactly one float per interior cell, rows outer and columns inner,
    so a fixed stream always yields the same map.

    Args:
        width: Grid width in cells (>= 3).
        height: Grid height in cells (>= 3).
        fill_probability: Chance that an interior cell starts as wall.
        rng: Random source.

    Returns:
        Freshly initialized grid.

    Raises:
        InvalidDimensionsError: If either dimension is below 3.
        InvalidParameterError: If fill_probability is outside [0, 1].
    """
    if not 0.0 <= fill_probability <= 1.0:
        raise InvalidParameterError(
            f"fill_probability must be in [0, 1], got {fill_probability}"
        )

    grid = CaveGrid(width, height)

    for y in range(1, height - 1):
        for x in range(1, width - 1):
            grid.cells[y, x] = Cell.WALL if rng.random() < fill_probability else Cell.PATH

    return grid


def count_adjacent_walls(grid: CaveGrid, x: int, y: int) -> int:
    """Count walls among the 8 neighbors of an interior cell."""
    return sum(
        1 for dx, dy in MOORE_OFFSETS if grid.cells[y + dy, x + dx] == Cell.WALL
    )


def smooth_step(grid: CaveGrid) -> CaveGrid:
    """Apply one smoothing pass, returning a new grid.

    Interior cells with 5+ wall neighbors become wall, cells with 3 or fewer
    become path, and cells with exactly 4 keep their state. All counts are
    taken from the input grid.
    """
    walls = (grid.cells == Cell.WALL).astype(np.int32)
    wall_count = ndimage.convolve(walls, _NEIGHBOR_KERNEL, mode="constant", cval=1)

    result = grid.cells.copy()
    interior = (slice(1, -1), slice(1, -1))
    counts = wall_count[interior]
    cells = result[interior]
    cells[counts >= WALL_THRESHOLD] = Cell.WALL
    cells[counts <= PATH_THRESHOLD] = Cell.PATH

    smoothed = CaveGrid(grid.width, grid.height)
    smoothed.cells[interior] = cells
    return smoothed


def smooth_grid(grid: CaveGrid, iterations: int) -> CaveGrid:
    """Run the smoothing automaton for a number of iterations.

    Args:
        grid: Input grid (left untouched).
        iterations: Number of passes (>= 0).

    Returns:
        New grid after all passes.
    """
    if iterations < 0:
        raise InvalidParameterError(f"iterations must be >= 0, got {iterations}")

    result = grid.copy()
    for i in range(iterations):
        result = smooth_step(result)
        logger.debug(
            "smoothing_iteration_complete", iteration=i + 1, total=iterations
        )

    return result
