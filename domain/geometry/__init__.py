"""Geometry Bounded Context.

Responsible for discretizing segments and polygon boundaries onto an integer grid:
- Value Objects: Cell, Polygon
- Services: bresenham_conversion, raytrace, polygon_outline_cells
"""
