"""Post-generation validation of a finished cave."""

import numpy as np
import structlog
from scipy import ndimage

from ..config import CaveConfig
from ..grid import CaveGrid
from ..types import Cell

logger = structlog.get_logger()


class ValidationResult:
    """Result of cave validation."""

    def __init__(self) -> None:
        self.errors: list[str] = []
        self.warnings: list[str] = []
        self.passed = True

    def add_error(self, message: str) -> None:
        """Add validation error."""
        self.errors.append(message)
        self.passed = False

    def add_warning(self, message: str) -> None:
        """Add validation warning."""
        self.warnings.append(message)


def validate_cave(grid: CaveGrid, config: CaveConfig) -> ValidationResult:
    """Validate a generated cave against its structural guarantees.

    Args:
        grid: Finished grid.
        config: Generation configuration.

    Returns:
        ValidationResult with any errors/warnings.
    """
    result = ValidationResult()

    _check_border_wall(grid, result)
    _check_single_region(grid, result)
    _check_wall_clusters(grid, config.clusters.max_size, result)
    _check_endpoints(grid, config.endpoints.min_distance, result)

    if result.passed:
        logger.info("cave_validation_passed", warnings=len(result.warnings))
    else:
        logger.warning(
            "cave_validation_failed", errors=result.errors, warnings=result.warnings
        )

    return result


def _check_border_wall(grid: CaveGrid, result: ValidationResult) -> None:
    """Check that the outer ring is wall."""
    border = np.ones_like(grid.cells, dtype=bool)
    border[1:-1, 1:-1] = False
    non_wall = int(np.count_nonzero(border & (grid.cells != Cell.WALL)))

    if non_wall > 0:
        result.add_error(f"Border has {non_wall} non-wall cells")


def _check_single_region(grid: CaveGrid, result: ValidationResult) -> None:
    """Check that open cells form one 4-connected region."""
    open_mask = grid.cells != Cell.WALL

    structure = ndimage.generate_binary_structure(2, 1)  # 4-connected
    _, num_features = ndimage.label(open_mask, structure=structure)

    if num_features == 0:
        result.add_warning("No open cells")
    elif num_features > 1:
        result.add_warning(f"Open space is split into {num_features} regions")


def _check_wall_clusters(
    grid: CaveGrid,
    max_size: int,
    result: ValidationResult,
) -> None:
    """Check that no small wall cluster is left floating in open space."""
    wall_mask = grid.cells == Cell.WALL

    structure = ndimage.generate_binary_structure(2, 2)  # 8-connected
    labeled, num_features = ndimage.label(wall_mask, structure=structure)
    if num_features == 0:
        return

    border_labels = np.unique(
        np.concatenate(
            [labeled[0, :], labeled[-1, :], labeled[:, 0], labeled[:, -1]]
        )
    )
    sizes = np.bincount(labeled.ravel())

    small = 0
    for label in range(1, num_features + 1):
        if label in border_labels:
            continue
        if sizes[label] < max_size:
            small += 1

    if small > 0:
        result.add_error(f"{small} wall clusters smaller than {max_size} remain")


def _check_endpoints(
    grid: CaveGrid,
    min_distance: float,
    result: ValidationResult,
) -> None:
    """Check start/end markers."""
    starts = grid.find(Cell.START)
    ends = grid.find(Cell.END)

    if len(starts) != 1 or len(ends) != 1:
        result.add_warning(
            f"Expected one start and one end, found {len(starts)} and {len(ends)}"
        )
        return

    distance = starts[0].distance_to(ends[0])
    if distance < min_distance:
        result.add_warning(
            f"Endpoints are {distance:.1f} cells apart, target {min_distance:.1f}"
        )
