"""Cellular automaton cave map generation."""

from .config import CaveConfig, load_config
from .exceptions import (
    BorderInvariantError,
    CaveGenError,
    EndpointPlacementError,
    InsufficientAccessibleCellsError,
    InvalidDimensionsError,
    InvalidParameterError,
    NoRoomsFoundError,
)
from .generation import GenerationResult, generate_cave, make_rng, validate_cave
from .grid import CaveGrid
from .types import CARDINAL_OFFSETS, MOORE_OFFSETS, Cell, Position, RandomSource, Region

__all__ = [
    # Types
    "Cell",
    "Position",
    "Region",
    "RandomSource",
    "CARDINAL_OFFSETS",
    "MOORE_OFFSETS",
    # Grid
    "CaveGrid",
    # Config
    "CaveConfig",
    "load_config",
    # Generation
    "GenerationResult",
    "generate_cave",
    "make_rng",
    "validate_cave",
    # Exceptions
    "CaveGenError",
    "InvalidDimensionsError",
    "InvalidParameterError",
    "BorderInvariantError",
    "EndpointPlacementError",
    "NoRoomsFoundError",
    "InsufficientAccessibleCellsError",
]
