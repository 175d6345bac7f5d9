"""
Geometry module - Planar primitives and tangent-continuous arcs.

This module contains:
- Point, Line: value types for coordinates and oriented implicit lines
- Line operations: intersection, perpendicular/parallel construction, side tests
- Arc, ArcBuilder: arcs tangent to an inbound line with chained continuation
"""

from conemap.geometry.primitives import (
    DegenerateLineError,
    GeometryError,
    Line,
    Point,
    Side,
    angle_from_axis,
    distance,
    flip_direction,
    intersect,
    line_through,
    midpoint,
    parallel_through,
    perpendicular_through,
    side_of_line,
    tangent_at,
)
from conemap.geometry.arc import (
    Arc,
    ArcBuilder,
    ArcDirection,
    ArcResult,
    NoSuchArcError,
    angular_span,
    build_arc,
    continuation_tangent,
)

__all__ = [
    "Point",
    "Line",
    "Side",
    "GeometryError",
    "DegenerateLineError",
    "NoSuchArcError",
    "distance",
    "midpoint",
    "line_through",
    "perpendicular_through",
    "parallel_through",
    "tangent_at",
    "intersect",
    "side_of_line",
    "flip_direction",
    "angle_from_axis",
    "Arc",
    "ArcBuilder",
    "ArcDirection",
    "ArcResult",
    "angular_span",
    "build_arc",
    "continuation_tangent",
]
