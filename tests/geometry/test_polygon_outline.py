"""Tests for polygon_outline_cells.

Closure policy under test: the closure is implicit. The outline starts at
polygon[0], visits every boundary cell once per edge pass and stops one cell
short of polygon[0], so the starting cell never appears twice.
"""

from __future__ import annotations

import logging

import pytest

from domain.geometry.errors import InvalidCoordinateError, InvalidTraceLengthError
from domain.geometry.services import bresenham_conversion, polygon_outline_cells
from domain.geometry.value_objects import Cell, Polygon

SERVICES_LOGGER = "domain.geometry.services"


def edge_trace_total(polygon: Polygon) -> int:
    return sum(len(bresenham_conversion(a, b)) for a, b in polygon.edges())


# ===========================================================================
# Degenerate inputs
# ===========================================================================
class TestDegeneratePolygons:
    def test_empty(self):
        assert polygon_outline_cells([]) == []

    def test_single_vertex_returned_unchanged(self):
        vertex = Cell(x=4, y=-1)
        assert polygon_outline_cells([vertex]) == [vertex]

    def test_single_vertex_result_is_new_list(self):
        vertices = [Cell(x=4, y=-1)]
        result = polygon_outline_cells(vertices)
        assert result == vertices
        assert result is not vertices

    def test_single_pair_vertex_comes_back_as_cell(self):
        result = polygon_outline_cells([(3, 4)])
        assert result == [Cell(x=3, y=4)]
        assert isinstance(result[0], Cell)

    def test_single_vertex_polygon(self):
        assert polygon_outline_cells(Polygon(vertices=[(3, 4)])) == [Cell(x=3, y=4)]

    def test_all_vertices_equal_keeps_one_cell(self):
        assert polygon_outline_cells([(2, 2), (2, 2), (2, 2)]) == [Cell(x=2, y=2)]

    def test_two_vertices_trace_out_and_back(self):
        outline = polygon_outline_cells([(0, 0), (2, 0)])
        assert [c.as_tuple() for c in outline] == [(0, 0), (1, 0), (2, 0), (1, 0)]


# ===========================================================================
# Closing-edge policy
# ===========================================================================
class TestClosurePolicy:
    def test_starts_at_first_vertex(self, square):
        assert polygon_outline_cells(square)[0] == square.vertices[0]

    def test_start_cell_appears_once(self, square):
        outline = polygon_outline_cells(square)
        assert outline.count(square.vertices[0]) == 1

    def test_ends_adjacent_to_start(self, concave):
        outline = polygon_outline_cells(concave)
        first, last = outline[0], outline[-1]
        assert last != first
        assert abs(last.x - first.x) <= 1 and abs(last.y - first.y) <= 1

    def test_square_boundary(self, square):
        outline = polygon_outline_cells(square)
        assert len(outline) == 12
        assert len(set(outline)) == 12
        assert all(c.x in (0, 3) or c.y in (0, 3) for c in outline)

    def test_explicitly_closed_ring_matches_implicit(self, square):
        """Repeating vertex 0 at the end adds a zero-length closing edge only."""
        closed = list(square.vertices) + [square.vertices[0]]
        assert polygon_outline_cells(closed) == polygon_outline_cells(square)

    @pytest.mark.parametrize(
        "vertices",
        [
            [(0, 0), (3, 0), (3, 3), (0, 3)],
            [(0, 0), (4, 0), (0, 4)],
            [(0, 0), (6, 0), (3, 2), (6, 5), (0, 5)],
            [(-5, 1), (7, -2), (2, 9)],
            [(0, 0), (2, 0)],
        ],
    )
    def test_cell_count_is_edge_total_minus_vertex_count(self, vertices):
        polygon = Polygon(vertices=vertices)
        outline = polygon_outline_cells(polygon)
        assert len(outline) == edge_trace_total(polygon) - len(polygon)


# ===========================================================================
# Stitching
# ===========================================================================
class TestEdgeStitching:
    def test_eight_connected_around_the_loop(self, concave):
        outline = polygon_outline_cells(concave)
        ring = outline + outline[:1]
        for a, b in zip(ring, ring[1:]):
            assert a != b
            assert abs(a.x - b.x) <= 1 and abs(a.y - b.y) <= 1

    def test_every_vertex_is_on_outline(self, concave):
        outline = set(polygon_outline_cells(concave))
        assert set(concave.vertices) <= outline

    def test_each_edge_appears_in_order(self, concave):
        outline = polygon_outline_cells(concave)
        ring = outline + outline[:1]
        position = 0
        for a, b in concave.edges():
            trace = bresenham_conversion(a, b)
            assert ring[position : position + len(trace)] == trace
            position += len(trace) - 1

    def test_edges_are_not_truncated(self):
        """Edges longer than any plausible grid width are traced in full."""
        outline = polygon_outline_cells([(0, 0), (5000, 0), (0, 1)])
        assert Cell(x=5000, y=0) in outline


# ===========================================================================
# Inputs and logging
# ===========================================================================
class TestOutlineInputs:
    def test_polygon_and_sequence_agree(self, square):
        assert polygon_outline_cells(square) == polygon_outline_cells(
            list(square.vertices)
        )

    def test_accepts_pairs(self):
        outline = polygon_outline_cells([(0, 0), (1, 0), (1, 1)])
        assert outline[0] == Cell(x=0, y=0)

    @pytest.mark.parametrize("size_x", [None, 0, 1, 2, 10_000])
    def test_size_x_has_no_effect(self, concave, size_x):
        assert polygon_outline_cells(concave, size_x) == polygon_outline_cells(concave)

    def test_rejects_non_integer_size_x(self, square):
        with pytest.raises(InvalidTraceLengthError, match="size_x"):
            polygon_outline_cells(square, size_x=2.5)

    def test_rejects_bad_vertex(self):
        with pytest.raises(InvalidCoordinateError):
            polygon_outline_cells([(0, 0), (1.5, 2)])

    def test_debug_summary(self, square, caplog):
        caplog.set_level(logging.DEBUG, logger=SERVICES_LOGGER)
        polygon_outline_cells(square)
        assert "Outline traced: 4 vertices -> 12 cells" in caplog.text
