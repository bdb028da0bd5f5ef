"""Geometry Bounded Context - Domain Services.

Pure rasterization logic over integer grid coordinates.
NO I/O operations and no shared state - every function returns a new list
owned by the caller.

Line traces always include both endpoints. Polygon outlines treat the
closure as implicit: the starting cell appears once, at index 0.
"""

from __future__ import annotations

import logging
import sys
from collections.abc import Iterable, Iterator, Sequence
from itertools import islice
from numbers import Integral
from typing import Any

import numpy as np
from numpy.typing import NDArray

from domain.geometry.errors import InvalidTraceLengthError
from domain.geometry.value_objects import Cell, Polygon, as_cell, coerce_coordinate

logger = logging.getLogger(__name__)

# ---------------------------------------------------------------------------
# Constants
# ---------------------------------------------------------------------------
# Length bound used for polygon edges; larger than any trace that fits in memory
UNBOUNDED_TRACE_LENGTH = sys.maxsize


def _sign(value: int) -> int:
    return (value > 0) - (value < 0)


def _require_length(name: str, value: Any) -> int:
    if isinstance(value, bool) or not isinstance(value, Integral):
        raise InvalidTraceLengthError(
            f"{name} must be an integer, got {type(value).__name__}: {value!r}"
        )
    return int(value)


# ---------------------------------------------------------------------------
# Line Rasterizer
# ---------------------------------------------------------------------------
def iter_line_cells(x0: int, y0: int, x1: int, y1: int) -> Iterator[tuple[int, int]]:
    """Lazily yield the Bresenham cells from (x0, y0) to (x1, y1), inclusive.

    Octant-generalized integer Bresenham:
    - The dominant axis is x only when |dx| > |dy|; ties go to y.
    - The error accumulator starts at half the dominant delta. All error
      terms are doubled so the half stays exact in integer arithmetic.
    - The minor axis steps only when the accumulator goes strictly negative.

    Coordinates are Python ints, so delta computation cannot overflow.

    Raises:
        InvalidCoordinateError: If any coordinate is not an integer
    """
    x0 = coerce_coordinate("x0", x0)
    y0 = coerce_coordinate("y0", y0)
    x1 = coerce_coordinate("x1", x1)
    y1 = coerce_coordinate("y1", y1)
    return _walk(x0, y0, x1, y1)


def _walk(x0: int, y0: int, x1: int, y1: int) -> Iterator[tuple[int, int]]:
    end = (x1, y1)
    deltas = (x1 - x0, y1 - y0)
    changes = (abs(deltas[0]), abs(deltas[1]))
    steps = (_sign(deltas[0]), _sign(deltas[1]))

    # (dominant, minor) axis indices
    major, minor = (0, 1) if changes[0] > changes[1] else (1, 0)

    # Doubled error: 2 * (changes[major] / 2)
    err = changes[major]
    point = [x0, y0]
    while point[major] != end[major]:
        yield (point[0], point[1])
        err -= 2 * changes[minor]
        if err < 0:
            point[minor] += steps[minor]
            err += 2 * changes[major]
        point[major] += steps[major]

    yield end


def bresenham_pixels(x0: int, y0: int, x1: int, y1: int) -> list[tuple[int, int]]:
    """Discretize the segment between two integer points.

    Args:
        x0: X coordinate of starting point
        y0: Y coordinate of starting point
        x1: X coordinate of ending point
        y1: Y coordinate of ending point

    Returns:
        Pixel coordinates ``(x, y)`` from start to end, both inclusive

    Example:
        >>> bresenham_pixels(0, 0, 5, 3)
        [(0, 0), (1, 1), (2, 1), (3, 2), (4, 2), (5, 3)]
    """
    return list(iter_line_cells(x0, y0, x1, y1))


def bresenham_conversion(
    start: Cell | Iterable[Any], end: Cell | Iterable[Any]
) -> list[Cell]:
    """Discretize the segment between two cells.

    Args:
        start: The starting cell (Cell or ``(x, y)`` pair)
        end: The ending cell (Cell or ``(x, y)`` pair)

    Returns:
        Cells from start to end, both inclusive. A single cell when
        start == end.

    Raises:
        InvalidCoordinateError: If an endpoint is not an integer pair
    """
    a = as_cell(start, name="start")
    b = as_cell(end, name="end")
    return [Cell(x=x, y=y) for x, y in _walk(a.x, a.y, b.x, b.y)]


# ---------------------------------------------------------------------------
# Ray Tracer
# ---------------------------------------------------------------------------
def raytrace(
    start: Cell | Iterable[Any], end: Cell | Iterable[Any], max_length: int
) -> list[Cell]:
    """Trace from start toward end, keeping at most ``max_length`` cells.

    The line is generated lazily, so only the emitted cells are computed.

    Args:
        start: The starting cell of the ray
        end: The ending cell of the ray
        max_length: Maximum number of cells in the result. Values below 1
            give an empty trace (a zero-length request, not an error).

    Returns:
        The first ``min(len(full_trace), max_length)`` cells, in order

    Raises:
        InvalidCoordinateError: If an endpoint is not an integer pair
        InvalidTraceLengthError: If max_length is not an integer
    """
    max_length = _require_length("max_length", max_length)
    a = as_cell(start, name="start")
    b = as_cell(end, name="end")
    if max_length < 1:
        return []

    walk = islice(_walk(a.x, a.y, b.x, b.y), max_length)
    trace = [Cell(x=x, y=y) for x, y in walk]
    if len(trace) == max_length and trace[-1] != b:
        logger.debug(
            "Ray (%d, %d) -> (%d, %d) truncated to %d cells",
            a.x,
            a.y,
            b.x,
            b.y,
            max_length,
        )
    return trace


# ---------------------------------------------------------------------------
# Polygon Outline Tracer
# ---------------------------------------------------------------------------
def polygon_outline_cells(
    polygon: Polygon | Sequence[Cell | Iterable[Any]],
    size_x: int | None = None,
) -> list[Cell]:
    """Trace the boundary of a closed polygon.

    Each edge ``i -> (i + 1) % N`` is traced in full (never truncated). The
    first edge contributes its whole trace; every later edge drops its first
    cell, which repeats the previous edge's last cell. The closing edge also
    drops its last cell because it is ``polygon[0]`` again, so for
    ``polygon[-1] != polygon[0]``::

        len(outline) == sum(len(edge_trace)) - N

    A polygon whose outline collapses to a single cell (all vertices equal)
    keeps that cell.

    Args:
        polygon: Polygon, or a sequence of Cells / ``(x, y)`` pairs
        size_x: Grid width hint kept for callers that pass one. It does not
            bound edge length and has no effect on the result.

    Returns:
        Outline cells starting at polygon[0]. With 0 or 1 vertices the
        vertices are returned unchanged (as a new list); a vertex given as an
        ``(x, y)`` pair comes back as the equivalent Cell.

    Raises:
        InvalidCoordinateError: If a vertex is not an integer pair
        InvalidTraceLengthError: If size_x is given and is not an integer
    """
    if size_x is not None:
        _require_length("size_x", size_x)

    if not isinstance(polygon, Polygon):
        polygon = Polygon(vertices=polygon)

    if len(polygon) <= 1:
        return list(polygon.vertices)

    outline: list[Cell] = []
    for i, (a, b) in enumerate(polygon.edges()):
        trace = raytrace(a, b, UNBOUNDED_TRACE_LENGTH)
        outline.extend(trace if i == 0 else trace[1:])

    # Implicit closure: the closing edge ends on polygon[0]
    if len(outline) > 1:
        outline.pop()

    logger.debug("Outline traced: %d vertices -> %d cells", len(polygon), len(outline))
    return outline


# ---------------------------------------------------------------------------
# Array Export
# ---------------------------------------------------------------------------
def trace_to_array(cells: Iterable[Cell]) -> NDArray[np.int64]:
    """Stack a trace into an ``(n, 2)`` int64 array of ``(x, y)`` rows.

    Intended for indexing numpy occupancy grids, e.g.
    ``grid[arr[:, 1], arr[:, 0]] = 1``. Coordinates outside the int64 range
    raise OverflowError.
    """
    rows = [c.as_tuple() for c in cells]
    return np.array(rows, dtype=np.int64).reshape(-1, 2)
