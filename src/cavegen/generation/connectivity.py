"""Connectivity repair: fill small rooms, join large ones, add corridors."""

from dataclasses import dataclass

import structlog

from ..grid import CaveGrid
from ..types import Cell, Position, RandomSource, Region
from .components import find_regions, region_cells

logger = structlog.get_logger()


@dataclass
class ConnectivityReport:
    """Counts describing one connectivity pass."""

    regions_found: int = 0
    largest_region_size: int = 0
    rooms_filled: int = 0
    rooms_connected: int = 0
    rooms_merged: int = 0
    corridors_added: int = 0


def fill_region(grid: CaveGrid, region: Region) -> bool:
    """Turn a region back into wall.

    A corridor carved earlier in the same pass can run through a small room
    and join it to the main region. Such a room is left open, since filling
    from its seed would then wipe out everything it is now attached to.

    Returns:
        True if the region was filled, False if it had been merged.
    """
    cells = region_cells(grid, region.seed)
    if len(cells) > region.size:
        return False

    for position in cells:
        grid[position] = Cell.WALL
    return True


def carve_corridor(grid: CaveGrid, main: Position, other: Position) -> None:
    """Carve an L-shaped corridor between two seeds.

    The horizontal run sits on the main seed's row and spans both seeds'
    columns; the vertical run sits on the other seed's column and spans both
    seeds' rows. Walls along the way are overwritten.
    """
    x_min, x_max = sorted((main.x, other.x))
    grid.cells[main.y, x_min : x_max + 1] = Cell.PATH

    y_min, y_max = sorted((main.y, other.y))
    grid.cells[y_min : y_max + 1, other.x] = Cell.PATH


def add_supplementary_corridors(
    grid: CaveGrid,
    count: int,
    rng: RandomSource,
    length_min: int = 5,
    length_max: int = 19,
) -> None:
    """Carve short straight corridors at random interior positions.

    Each corridor draws x, y, direction (0 = horizontal, 1 = vertical) and
    length in that order, then runs right or down until it reaches the
    border.
    """
    width, height = grid.width, grid.height

    for _ in range(count):
        x = int(rng.integers(1, width - 1))
        y = int(rng.integers(1, height - 1))
        direction = int(rng.integers(0, 2))
        length = int(rng.integers(length_min, length_max + 1))

        if direction == 0:
            end = min(x + length, width - 1)
            grid.cells[y, x:end] = Cell.PATH
        else:
            end = min(y + length, height - 1)
            grid.cells[y:end, x] = Cell.PATH


def resolve_connectivity(
    grid: CaveGrid,
    min_room_size: int,
    rng: RandomSource,
    corridor_cell_divisor: int = 5000,
    corridor_length_min: int = 5,
    corridor_length_max: int = 19,
) -> ConnectivityReport:
    """Reduce the open space to a single connected region.

    The largest region is kept as the main room. Every other region, largest
    first, is either filled (smaller than ``min_room_size``) or joined to the
    main room with an L-shaped corridor. Afterwards a handful of unverified
    random corridors are added for variety.

    Args:
        grid: Grid to repair in place.
        min_room_size: Secondary rooms below this size are filled.
        rng: Random source for supplementary corridors.
        corridor_cell_divisor: One supplementary corridor per this many cells.
        corridor_length_min: Shortest supplementary corridor.
        corridor_length_max: Longest supplementary corridor (inclusive).

    Returns:
        ConnectivityReport with counts for this pass.
    """
    report = ConnectivityReport()

    # sorted() is stable, so equal sizes keep scan order
    regions = sorted(find_regions(grid), key=lambda region: region.size, reverse=True)
    report.regions_found = len(regions)

    if regions:
        main = regions[0]
        report.largest_region_size = main.size

        for region in regions[1:]:
            if region.size < min_room_size:
                if fill_region(grid, region):
                    report.rooms_filled += 1
                else:
                    report.rooms_merged += 1
            else:
                carve_corridor(grid, main.seed, region.seed)
                report.rooms_connected += 1

    report.corridors_added = grid.width * grid.height // corridor_cell_divisor
    add_supplementary_corridors(
        grid,
        report.corridors_added,
        rng,
        length_min=corridor_length_min,
        length_max=corridor_length_max,
    )

    logger.info(
        "connectivity_resolved",
        regions=report.regions_found,
        largest=report.largest_region_size,
        filled=report.rooms_filled,
        connected=report.rooms_connected,
        merged=report.rooms_merged,
        corridors=report.corridors_added,
    )

    return report
