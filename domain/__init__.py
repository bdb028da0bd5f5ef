"""Grid Tracer Domain Layer.

This package contains the core logic organized by bounded contexts:
- geometry: Integer grid cells, line rasterization, ray tracing and
  polygon outlines
"""

from domain import geometry

__all__ = ["geometry"]
