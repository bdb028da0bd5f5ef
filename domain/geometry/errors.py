"""Geometry Bounded Context - Error Hierarchy.

Custom exceptions for rasterization operations.

Every in-range input has a defined output (possibly empty), so these are only
raised for values of the wrong type.
"""

from __future__ import annotations

from typing import Any


class GeometryError(Exception):
    """Base error for geometry operations."""


class InvalidCoordinateError(GeometryError):
    """Coordinate is not an integer, or a vertex is not an (x, y) pair.

    Attributes:
        name: Which argument was rejected (e.g. "x0", "start")
        value: The offending value
    """

    def __init__(self, name: str, value: Any) -> None:
        self.name = name
        self.value = value
        super().__init__(
            f"{name} must be an integer coordinate, "
            f"got {type(value).__name__}: {value!r}"
        )


class InvalidTraceLengthError(GeometryError):
    """Trace length bound (max_length, size_x) is not an integer."""

    pass
