"""Connected component analysis: breadth-first flood fill and region scan."""

from collections import deque
from typing import Callable

import numpy as np
from numpy.typing import NDArray

from ..grid import CaveGrid
from ..types import CARDINAL_OFFSETS, Cell, Position, Region

Coord = tuple[int, int]


def new_visited(grid: CaveGrid) -> NDArray[np.bool_]:
    """Fresh visited map matching the grid shape."""
    return np.zeros((grid.height, grid.width), dtype=bool)


def flood_coords(
    rows: list[list[int]],
    start: Coord,
    visited: NDArray[np.bool_],
    inside: Callable[[int, int], bool],
    cell: Cell = Cell.PATH,
    offsets: tuple[tuple[int, int], ...] = CARDINAL_OFFSETS,
) -> list[Coord]:
    """Breadth-first flood over a plain-list snapshot of the cells.

    Coordinates are ``(x, y)`` tuples. Whole-grid scans pass one
    ``grid.cells.tolist()`` snapshot to every call; ``inside`` bounds the walk.
    """
    x0, y0 = start
    coords: list[Coord] = []
    queue: deque[Coord] = deque([start])
    visited[y0, x0] = True

    while queue:
        x, y = queue.popleft()
        coords.append((x, y))

        for dx, dy in offsets:
            nx, ny = x + dx, y + dy
            if inside(nx, ny) and not visited[ny, nx] and rows[ny][nx] == cell:
                visited[ny, nx] = True
                queue.append((nx, ny))

    return coords


def flood_fill(
    grid: CaveGrid,
    seed: Position,
    visited: NDArray[np.bool_],
    cell: Cell = Cell.PATH,
    offsets: tuple[tuple[int, int], ...] = CARDINAL_OFFSETS,
    interior_only: bool = False,
) -> list[Position]:
    """Collect every cell connected to the seed through cells of one state.

    Cells are marked in ``visited`` as they are queued, so later calls with
    the same map skip territory that has already been explored.

    Args:
        grid: Grid to traverse.
        seed: Starting position. It is included even if already visited.
        visited: Caller-owned boolean map, shape (height, width). Mutated.
        cell: Cell state that counts as connected.
        offsets: Neighborhood as (dx, dy) pairs; 4-connected by default.
        interior_only: Never step onto border cells.

    Returns:
        Connected positions in breadth-first visitation order.
    """
    inside = grid.is_interior if interior_only else grid.in_bounds
    coords = flood_coords(
        grid.cells.tolist(), (seed.x, seed.y), visited, inside, cell, offsets
    )
    return [Position(x=x, y=y) for x, y in coords]


def region_cells(grid: CaveGrid, seed: Position, interior_only: bool = False) -> list[Position]:
    """Flood-fill the open region around a seed with a fresh visited map."""
    return flood_fill(grid, seed, new_visited(grid), interior_only=interior_only)


def find_regions(grid: CaveGrid) -> list[Region]:
    """Find all separate open regions in scan order.

    Interior cells are scanned row by row; each unvisited path cell starts a
    4-connected flood fill. Diagonal contact does not join regions.

    Args:
        grid: Grid to analyze.

    Returns:
        Regions with their seed (first cell found) and size.
    """
    rows = grid.cells.tolist()
    visited = new_visited(grid)
    regions: list[Region] = []

    for y in range(1, grid.height - 1):
        row = rows[y]
        for x in range(1, grid.width - 1):
            if row[x] == Cell.PATH and not visited[y, x]:
                size = len(flood_coords(rows, (x, y), visited, grid.in_bounds))
                regions.append(Region(seed=Position(x=x, y=y), size=size))

    return regions


def largest_region(regions: list[Region]) -> Region | None:
    """Largest region by size; ties go to the one found first."""
    if not regions:
        return None
    return max(regions, key=lambda region: region.size)
