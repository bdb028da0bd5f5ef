"""Single source of truth for golden rasterization cases.

This module defines pinned input/expected-output pairs used by both:
- scripts/render_traces.py (visual check and verification)
- tests/geometry/test_golden_traces.py (regression lock)

Location: shared/ (not tests/) to avoid scripts->tests dependency.

The expectations pin the exact tie-breaking of the line rasterizer: the
dominant axis is y when |dx| == |dy|, and the minor axis steps only when the
error accumulator is strictly negative. A different but equally plausible
choice changes these traces.
"""

from __future__ import annotations

from typing import NamedTuple

Pair = tuple[int, int]


class LineCase(NamedTuple):
    name: str
    start: Pair
    end: Pair
    expected: list[Pair]


class OutlineCase(NamedTuple):
    name: str
    vertices: list[Pair]
    expected: list[Pair]


GOLDEN_LINES: list[LineCase] = [
    LineCase("single_point", (7, -2), (7, -2), [(7, -2)]),
    LineCase(
        "horizontal",
        (0, 0),
        (5, 0),
        [(0, 0), (1, 0), (2, 0), (3, 0), (4, 0), (5, 0)],
    ),
    LineCase(
        "vertical_descending",
        (2, 3),
        (2, -1),
        [(2, 3), (2, 2), (2, 1), (2, 0), (2, -1)],
    ),
    LineCase(
        "shallow",
        (0, 0),
        (5, 3),
        [(0, 0), (1, 1), (2, 1), (3, 2), (4, 2), (5, 3)],
    ),
    LineCase(
        "shallow_third_quadrant",
        (0, 0),
        (-5, -3),
        [(0, 0), (-1, -1), (-2, -1), (-3, -2), (-4, -2), (-5, -3)],
    ),
    LineCase(
        "steep_descending",
        (0, 0),
        (2, -3),
        [(0, 0), (1, -1), (1, -2), (2, -3)],
    ),
    LineCase(
        "diagonal",
        (0, 0),
        (-3, 3),
        [(0, 0), (-1, 1), (-2, 2), (-3, 3)],
    ),
    # Even dominant delta: the accumulator hits exactly zero mid-walk
    LineCase(
        "even_tie",
        (0, 0),
        (4, 1),
        [(0, 0), (1, 0), (2, 0), (3, 1), (4, 1)],
    ),
    LineCase(
        "even_tie_reversed",
        (4, 1),
        (0, 0),
        [(4, 1), (3, 1), (2, 1), (1, 0), (0, 0)],
    ),
]

# Outlines use implicit closure: polygon[0] appears once, at index 0.
GOLDEN_OUTLINES: list[OutlineCase] = [
    OutlineCase("empty", [], []),
    OutlineCase("single_vertex", [(3, 4)], [(3, 4)]),
    OutlineCase(
        "out_and_back",
        [(0, 0), (2, 0)],
        [(0, 0), (1, 0), (2, 0), (1, 0)],
    ),
    OutlineCase(
        "square",
        [(0, 0), (3, 0), (3, 3), (0, 3)],
        [
            (0, 0),
            (1, 0),
            (2, 0),
            (3, 0),
            (3, 1),
            (3, 2),
            (3, 3),
            (2, 3),
            (1, 3),
            (0, 3),
            (0, 2),
            (0, 1),
        ],
    ),
    OutlineCase(
        "right_triangle",
        [(0, 0), (4, 0), (0, 4)],
        [
            (0, 0),
            (1, 0),
            (2, 0),
            (3, 0),
            (4, 0),
            (3, 1),
            (2, 2),
            (1, 3),
            (0, 4),
            (0, 3),
            (0, 2),
            (0, 1),
        ],
    ),
    OutlineCase(
        "shallow_triangle",
        [(0, 0), (5, 3), (0, 3)],
        [
            (0, 0),
            (1, 1),
            (2, 1),
            (3, 2),
            (4, 2),
            (5, 3),
            (4, 3),
            (3, 3),
            (2, 3),
            (1, 3),
            (0, 3),
            (0, 2),
            (0, 1),
        ],
    ),
]

GOLDEN_CASE_COUNT: int = len(GOLDEN_LINES) + len(GOLDEN_OUTLINES)
