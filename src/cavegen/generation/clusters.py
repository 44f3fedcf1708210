"""Removal of small isolated wall clusters."""

import structlog

from ..grid import CaveGrid
from ..types import MOORE_OFFSETS, Cell
from .components import flood_coords, new_visited

logger = structlog.get_logger()


def remove_wall_clusters(grid: CaveGrid, max_size: int) -> int:
    """Open up wall clusters with fewer than ``max_size`` cells.

    Clusters are 8-connected. Scans only start from interior cells, but the
    flood fill may run along the border, so anything touching the border is
    part of the border's cluster and survives.

    Args:
        grid: Grid to clean in place.
        max_size: Clusters strictly smaller than this become path.

    Returns:
        Number of clusters removed.
    """
    # Opened cells are already visited, so the snapshot never goes stale
    rows = grid.cells.tolist()
    visited = new_visited(grid)
    removed = 0

    for y in range(1, grid.height - 1):
        row = rows[y]
        for x in range(1, grid.width - 1):
            if row[x] != Cell.WALL or visited[y, x]:
                continue

            cluster = flood_coords(
                rows,
                (x, y),
                visited,
                grid.in_bounds,
                cell=Cell.WALL,
                offsets=MOORE_OFFSETS,
            )
            if 0 < len(cluster) < max_size:
                for cx, cy in cluster:
                    grid.cells[cy, cx] = Cell.PATH
                removed += 1

    logger.info("wall_clusters_removed", count=removed, max_size=max_size)
    return removed
