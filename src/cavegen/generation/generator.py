"""Main cave generation orchestration."""

import numpy as np
import structlog

from ..config import CaveConfig
from ..exceptions import EndpointPlacementError
from ..grid import CaveGrid
from ..types import Cell, RandomSource
from .automaton import initialize_grid, smooth_grid
from .clusters import remove_wall_clusters
from .connectivity import ConnectivityReport, resolve_connectivity
from .endpoints import EndpointPlacement, place_endpoints

logger = structlog.get_logger()


class GenerationResult:
    """Result of cave generation with per-stage reports."""

    def __init__(
        self,
        grid: CaveGrid,
        config: CaveConfig,
        seed: int | None,
        connectivity: ConnectivityReport,
        clusters_removed: int,
        endpoints: EndpointPlacement | None,
        placement_error: str | None = None,
    ):
        self.grid = grid
        self.config = config
        self.seed = seed
        self.connectivity = connectivity
        self.clusters_removed = clusters_removed
        self.endpoints = endpoints
        self.placement_error = placement_error

    @property
    def placed(self) -> bool:
        """Whether start and end points were marked."""
        return self.endpoints is not None


def make_rng(seed: int | None = None) -> np.random.Generator:
    """Create the random stream used by every generation stage."""
    return np.random.default_rng(seed)


def resolve_seed(config: CaveConfig) -> int:
    """Seed from config, or a fresh one from OS entropy."""
    if config.seed is not None:
        return config.seed
    return int(np.random.SeedSequence().entropy % 2**31)


def generate_cave(
    config: CaveConfig,
    rng: RandomSource | None = None,
) -> GenerationResult:
    """Generate a complete cave from configuration.

    Stages run in a fixed order since each one consumes the random stream:
    fill, smooth, connect, remove wall specks, place endpoints.

    Args:
        config: Cave generation configuration.
        rng: Random source. When omitted one is seeded from ``config.seed``
            (or fresh entropy); the seed used is recorded on the result.

    Returns:
        GenerationResult with the finished grid.
    """
    seed = None
    if rng is None:
        seed = resolve_seed(config)
        rng = make_rng(seed)

    width, height = config.width, config.height
    logger.info("cave_generation_started", width=width, height=height, seed=seed)

    grid = initialize_grid(width, height, config.automaton.fill_probability, rng)
    grid = smooth_grid(grid, config.automaton.smooth_iterations)

    connectivity = resolve_connectivity(
        grid,
        config.connectivity.min_room_size,
        rng,
        corridor_cell_divisor=config.connectivity.corridor_cell_divisor,
        corridor_length_min=config.connectivity.corridor_length_min,
        corridor_length_max=config.connectivity.corridor_length_max,
    )

    clusters_removed = remove_wall_clusters(grid, config.clusters.max_size)

    endpoints = None
    placement_error = None
    try:
        endpoints = place_endpoints(
            grid,
            rng,
            min_distance=config.endpoints.min_distance,
            max_attempts=config.endpoints.max_attempts,
        )
    except EndpointPlacementError as e:
        placement_error = str(e)
        logger.warning(
            "endpoint_placement_failed",
            reason=type(e).__name__,
            error=placement_error,
        )

    logger.info(
        "cave_generation_complete",
        open_cells=grid.count(Cell.PATH) + grid.count(Cell.START) + grid.count(Cell.END),
        wall_cells=grid.count(Cell.WALL),
        placed=endpoints is not None,
    )

    return GenerationResult(
        grid=grid,
        config=config,
        seed=seed,
        connectivity=connectivity,
        clusters_removed=clusters_removed,
        endpoints=endpoints,
        placement_error=placement_error,
    )
