"""Core types for cave generation."""

from dataclasses import dataclass
from enum import IntEnum
from typing import Protocol

from pydantic import BaseModel


class Cell(IntEnum):
    """Cell states stored in the grid array."""

    PATH = 0
    WALL = 1
    START = 2
    END = 3


# Neighborhood offsets as (dx, dy)
# Coordinate system: +X is East, +Y is South
CARDINAL_OFFSETS: tuple[tuple[int, int], ...] = (
    (-1, 0),
    (1, 0),
    (0, -1),
    (0, 1),
)

MOORE_OFFSETS: tuple[tuple[int, int], ...] = tuple(
    (dx, dy)
    for dy in (-1, 0, 1)
    for dx in (-1, 0, 1)
    if (dx, dy) != (0, 0)
)


class Position(BaseModel, frozen=True):
    """Immutable 2D cell coordinate (x = column, y = row)."""

    x: int
    y: int

    def distance_to(self, other: "Position") -> float:
        """Euclidean distance to another position."""
        return ((self.x - other.x) ** 2 + (self.y - other.y) ** 2) ** 0.5

    def __hash__(self) -> int:
        return hash((self.x, self.y))

    def __str__(self) -> str:
        return f"({self.x}, {self.y})"

    def __repr__(self) -> str:
        return f"Position(x={self.x}, y={self.y})"


@dataclass(frozen=True)
class Region:
    """A maximal 4-connected set of path cells, found by flood fill."""

    seed: Position
    size: int


class RandomSource(Protocol):
    """Random stream consumed by the generation stages.

    ``numpy.random.Generator`` satisfies this protocol.
    """

    def random(self) -> float:
        """Uniform float in [0, 1)."""
        ...

    def integers(self, low: int, high: int) -> int:
        """Uniform integer in [low, high)."""
        ...
