"""Start and end point placement inside the main open region."""

from dataclasses import dataclass

import structlog

from ..exceptions import InsufficientAccessibleCellsError, NoRoomsFoundError
from ..grid import CaveGrid
from ..types import Cell, Position, RandomSource
from .components import find_regions, largest_region, region_cells

logger = structlog.get_logger()

MIN_ENDPOINT_DISTANCE = 30.0
MAX_ENDPOINT_ATTEMPTS = 20


@dataclass
class EndpointPlacement:
    """Chosen start and end cells."""

    start: Position
    end: Position
    distance: float
    attempts: int
    separation_met: bool


def _draw_index(rng: RandomSource, low: int, high: int) -> int:
    # Empty range (fewer than 4 cells) still consumes one draw and yields low
    return int(rng.integers(low, max(high, low + 1)))


def choose_distant_pair(
    cells: list[Position],
    rng: RandomSource,
    min_distance: float = MIN_ENDPOINT_DISTANCE,
    max_attempts: int = MAX_ENDPOINT_ATTEMPTS,
) -> EndpointPlacement:
    """Pick two cells that are likely far apart.

    The first pair comes from the first and last quarters of ``cells`` (BFS
    order, so roughly near and far from the flood seed). While the pair is
    closer than ``min_distance``, both indices are redrawn over the whole
    list, up to ``max_attempts`` times. The farthest pair seen wins, so the
    result is best-effort and the two cells always differ.

    Args:
        cells: At least two accessible cells in BFS order.
        rng: Random source.
        min_distance: Target separation.
        max_attempts: Number of redraws allowed.

    Returns:
        EndpointPlacement for the best pair found.
    """
    n = len(cells)

    start = cells[_draw_index(rng, 0, n // 4)]
    end = cells[_draw_index(rng, 3 * n // 4, n)]
    best = (start, end, start.distance_to(end))

    attempts = 0
    distance = best[2]
    while distance < min_distance and attempts < max_attempts:
        start = cells[_draw_index(rng, 0, n)]
        end = cells[_draw_index(rng, 0, n)]
        distance = start.distance_to(end)
        attempts += 1
        if distance > best[2]:
            best = (start, end, distance)

    start, end, distance = best
    return EndpointPlacement(
        start=start,
        end=end,
        distance=distance,
        attempts=attempts,
        separation_met=distance >= min_distance,
    )


def place_endpoints(
    grid: CaveGrid,
    rng: RandomSource,
    min_distance: float = MIN_ENDPOINT_DISTANCE,
    max_attempts: int = MAX_ENDPOINT_ATTEMPTS,
) -> EndpointPlacement:
    """Mark a start and an end cell in the largest open region.

    Args:
        grid: Grid to mark in place.
        rng: Random source.
        min_distance: Target straight-line separation.
        max_attempts: Redraws allowed when the first pair is too close.

    Returns:
        EndpointPlacement describing the marked cells.

    Raises:
        NoRoomsFoundError: If the grid has no open cells.
        InsufficientAccessibleCellsError: If the main region has fewer than
            two cells. The grid is left unmarked in both cases.
    """
    main = largest_region(find_regions(grid))
    if main is None:
        raise NoRoomsFoundError("No open region to place start/end points in")

    accessible = region_cells(grid, main.seed, interior_only=True)
    if len(accessible) < 2:
        raise InsufficientAccessibleCellsError(
            f"Main region at {main.seed} has only {len(accessible)} accessible cell(s)"
        )

    placement = choose_distant_pair(accessible, rng, min_distance, max_attempts)
    grid[placement.start] = Cell.START
    grid[placement.end] = Cell.END

    logger.info(
        "endpoints_placed",
        start=str(placement.start),
        end=str(placement.end),
        distance=round(placement.distance, 1),
        attempts=placement.attempts,
        separation_met=placement.separation_met,
    )

    return placement
