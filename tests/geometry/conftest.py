"""Pytest configuration for geometry domain tests.

Provides small reusable shapes. Everything here is constructed directly from
value objects; no fixture files are involved.
"""

import pytest

from domain.geometry.value_objects import Cell, Polygon


@pytest.fixture
def origin() -> Cell:
    return Cell(x=0, y=0)


@pytest.fixture
def square() -> Polygon:
    """4x4-cell square with corners (0, 0) and (3, 3), counter-clockwise."""
    return Polygon(vertices=[(0, 0), (3, 0), (3, 3), (0, 3)])


@pytest.fixture
def concave() -> Polygon:
    """Arrow-head shape with one reflex vertex at (3, 2)."""
    return Polygon(vertices=[(0, 0), (6, 0), (3, 2), (6, 5), (0, 5)])
