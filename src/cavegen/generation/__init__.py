"""Procedural cave generation package.

This package implements cellular automaton cave generation, including
random fill, smoothing, connectivity repair, wall speck removal, and
start/end point placement.
"""

from .automaton import count_adjacent_walls, initialize_grid, smooth_grid, smooth_step
from .clusters import remove_wall_clusters
from .components import (
    find_regions,
    flood_coords,
    flood_fill,
    largest_region,
    region_cells,
)
from .connectivity import ConnectivityReport, carve_corridor, resolve_connectivity
from .endpoints import EndpointPlacement, choose_distant_pair, place_endpoints
from .generator import GenerationResult, generate_cave, make_rng
from .validation import ValidationResult, validate_cave

__all__ = [
    "ConnectivityReport",
    "EndpointPlacement",
    "GenerationResult",
    "ValidationResult",
    "carve_corridor",
    "choose_distant_pair",
    "count_adjacent_walls",
    "find_regions",
    "flood_coords",
    "flood_fill",
    "generate_cave",
    "initialize_grid",
    "largest_region",
    "make_rng",
    "place_endpoints",
    "region_cells",
    "remove_wall_clusters",
    "resolve_connectivity",
    "smooth_grid",
    "smooth_step",
    "validate_cave",
]
