"""Custom exceptions for cave generation."""


class CaveGenError(Exception):
    """Base exception for cave generation errors."""

    pass


class InvalidDimensionsError(CaveGenError, ValueError):
    """Raised when a grid is smaller than 3x3."""

    pass


class InvalidParameterError(CaveGenError, ValueError):
    """Raised when a generation parameter is out of range."""

    pass


class BorderInvariantError(CaveGenError, ValueError):
    """Raised when a grid's outer ring is not entirely wall."""

    pass


class EndpointPlacementError(CaveGenError):
    """Raised when start/end points cannot be placed."""

    pass


class NoRoomsFoundError(EndpointPlacementError):
    """Raised when the grid has no open region at all."""

    pass


class InsufficientAccessibleCellsError(EndpointPlacementError):
    """Raised when the main region has fewer than two cells."""

    pass
