"""Geometry Bounded Context - Value Objects.

Immutable data structures representing integer grid concepts.
All validation occurs at construction time via Pydantic.
"""

from __future__ import annotations

from collections.abc import Iterable
from numbers import Integral
from typing import Any

from pydantic import BaseModel, ConfigDict, Field, field_validator

from domain.geometry.errors import InvalidCoordinateError


def coerce_coordinate(name: str, value: Any) -> int:
    """Return ``value`` as a plain int, rejecting bools and non-integers.

    numpy integer scalars are accepted and converted, so traces can be fed
    straight from index arrays.
    """
    if isinstance(value, bool) or not isinstance(value, Integral):
        raise InvalidCoordinateError(name, value)
    return int(value)


# ---------------------------------------------------------------------------
# Cell
# ---------------------------------------------------------------------------
class Cell(BaseModel):
    """Integer grid coordinate (Value Object).

    The atomic unit of every trace. Equality and hashing are structural, so
    cells can be collected into sets or used as dict keys.

    Invariants:
        C-1: x and y are ints (strict - no bool, float or numeric strings)
    """

    x: int = Field(strict=True)
    y: int = Field(strict=True)

    model_config = ConfigDict(frozen=True)

    @classmethod
    def from_pair(cls, pair: Iterable[Any], name: str = "pair") -> "Cell":
        """Build a Cell from an ``(x, y)`` pair.

        Raises:
            InvalidCoordinateError: If ``pair`` does not unpack into exactly
                two integer coordinates
        """
        try:
            x, y = pair
        except (TypeError, ValueError) as exc:
            raise InvalidCoordinateError(name, pair) from exc
        return cls(
            x=coerce_coordinate(f"{name}.x", x), y=coerce_coordinate(f"{name}.y", y)
        )

    def as_tuple(self) -> tuple[int, int]:
        return (self.x, self.y)


def as_cell(value: Cell | Iterable[Any], name: str = "cell") -> Cell:
    """Return ``value`` unchanged if it is a Cell, otherwise parse it as a pair."""
    if isinstance(value, Cell):
        return value
    return Cell.from_pair(value, name=name)


# ---------------------------------------------------------------------------
# Polygon
# ---------------------------------------------------------------------------
class Polygon(BaseModel):
    """Ordered ring of vertices interpreted as a closed loop (Value Object).

    An implicit edge joins the last vertex back to the first. Vertices may be
    given as Cells or ``(x, y)`` pairs; pairs are converted on construction.

    ``len(polygon)`` is the vertex count, so an empty Polygon is falsy. Test
    ``polygon is None`` rather than ``not polygon`` when a Polygon is optional.

    Invariants:
        PG-1: len(edges()) == len(vertices) when len(vertices) >= 2
        PG-2: len(edges()) == 0 when len(vertices) <= 1
    """

    vertices: tuple[Cell, ...] = ()

    model_config = ConfigDict(frozen=True)

    @field_validator("vertices", mode="before")
    @classmethod
    def coerce_vertices(cls, value: Any) -> tuple[Cell, ...]:
        return tuple(as_cell(v, name=f"vertices[{i}]") for i, v in enumerate(value))

    def __len__(self) -> int:
        return len(self.vertices)

    def edges(self) -> list[tuple[Cell, Cell]]:
        """Return the N ``(start, end)`` edges, closing edge last."""
        if len(self.vertices) < 2:
            return []
        closing = self.vertices[1:] + self.vertices[:1]
        return list(zip(self.vertices, closing))
