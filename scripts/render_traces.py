#!/usr/bin/env python3
"""Render and verify the golden rasterization cases.

Draws every case in shared/golden_traces.py as an ASCII grid and checks the
current rasterizer output against the pinned expectation. Run it after any
change to the line walk to see exactly which cells moved.

Usage:
    python scripts/render_traces.py

Requirements:
    pip install -e .

Output:
    ASCII grids on stdout; exit code 1 if any case diverges.

Dependencies:
    This script imports from shared/golden_traces.py (not tests/) to avoid
    circular dependencies between scripts and tests packages.
"""

from __future__ import annotations

from collections.abc import Sequence

import numpy as np

from domain.geometry.services import (
    bresenham_conversion,
    polygon_outline_cells,
    trace_to_array,
)
from domain.geometry.value_objects import Cell
from shared.golden_traces import GOLDEN_CASE_COUNT, GOLDEN_LINES, GOLDEN_OUTLINES


# =============================================================================
# Helper: render
# =============================================================================
def render(cells: Sequence[Cell], start: Cell | None = None) -> str:
    """Render cells as text, north (max y) on top.

    ``S`` marks the start cell, ``#`` every other traced cell, ``.`` empty.
    """
    if not cells:
        return "(empty)"

    arr = trace_to_array(cells)
    min_x, min_y = arr.min(axis=0)
    max_x, max_y = arr.max(axis=0)

    canvas = np.full((max_y - min_y + 1, max_x - min_x + 1), ".", dtype="<U1")
    canvas[arr[:, 1] - min_y, arr[:, 0] - min_x] = "#"
    if start is not None:
        canvas[start.y - min_y, start.x - min_x] = "S"

    return "\n".join("".join(row) for row in canvas[::-1])


def check(name: str, actual: list[Cell], expected: list[tuple[int, int]]) -> bool:
    got = [c.as_tuple() for c in actual]
    start = actual[0] if actual else None
    print(f"\n{name}: {len(got)} cells")
    print(render(actual, start))
    if got != expected:
        print(f"ERROR: {name} diverged")
        print(f"  expected: {expected}")
        print(f"  actual:   {got}")
        return False
    return True


def main() -> int:
    print("=" * 60)
    print("Golden line traces")
    print("=" * 60)

    failures = 0
    for case in GOLDEN_LINES:
        trace = bresenham_conversion(case.start, case.end)
        if not check(case.name, trace, case.expected):
            failures += 1

    print()
    print("=" * 60)
    print("Golden polygon outlines")
    print("=" * 60)

    for case in GOLDEN_OUTLINES:
        if not check(case.name, polygon_outline_cells(case.vertices), case.expected):
            failures += 1

    print()
    print("=" * 60)
    if failures:
        print(f"ERROR: {failures} of {GOLDEN_CASE_COUNT} golden cases diverged")
        print("\nUpdate shared/golden_traces.py only if the change is intended.")
        return 1

    print(f"All {GOLDEN_CASE_COUNT} golden cases verified successfully.")
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
