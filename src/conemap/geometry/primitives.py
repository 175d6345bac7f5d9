"""
Geometric primitives - Points, implicit lines and the operations on them.

Provides:
- Point value type
- Oriented lines in implicit form a*x + b*y = c
- Intersection, perpendicular and parallel construction
- Side-of-line classification
- Angle measurement around a circle center

Angles follow screen conventions: 0 is the positive x axis and angles grow
clockwise (y points down).
"""

from dataclasses import dataclass
from enum import Enum
from typing import Optional
import numpy as np


# Determinant magnitude below which two lines are treated as parallel
PARALLEL_EPSILON = 1e-12


class GeometryError(ValueError):
    """Base class for failed geometric constructions."""


class DegenerateLineError(GeometryError):
    """Raised when a line cannot be expressed in slope form."""


class Side(Enum):
    """Classification of a point relative to an oriented line."""
    ON = "on"
    LEFT = "left"
    RIGHT = "right"


@dataclass(frozen=True)
class Point:
    """A 2D coordinate in world units."""
    x: float
    y: float

    def distance_to(self, other: "Point") -> float:
        """Euclidean distance to another point."""
        return distance(self, other)

    def offset(self, dx: float, dy: float) -> "Point":
        """Get a copy of this point moved by (dx, dy)."""
        return Point(self.x + dx, self.y + dy)

    def as_tuple(self) -> tuple:
        return (self.x, self.y)


@dataclass(frozen=True)
class Line:
    """Oriented line a*x + b*y = c.

    The sign of the coefficient triple carries the orientation: negating all
    three leaves the set of points unchanged but swaps left and right.
    """
    a: float
    b: float
    c: float

    def value_at(self, point: Point) -> float:
        """Signed residual c - (a*x + b*y) for a point."""
        return self.c - (self.a * point.x + self.b * point.y)

    def contains(self, point: Point, tolerance: float = 1e-9) -> bool:
        return abs(self.value_at(point)) <= tolerance


def distance(p1: Point, p2: Point) -> float:
    return float(np.hypot(p1.x - p2.x, p1.y - p2.y))


def midpoint(p1: Point, p2: Point) -> Point:
    return Point(p1.x + (p2.x - p1.x) / 2, p1.y + (p2.y - p1.y) / 2)


def line_through(p1: Point, p2: Point) -> Line:
    """Line through two points in slope form (a = m, b = -1).

    Args:
        p1: First point
        p2: Second point

    Returns:
        Line passing through both points

    Raises:
        DegenerateLineError: If the points share an x coordinate
    """
    if p1.x == p2.x:
        raise DegenerateLineError(
            f"Vertical line through ({p1.x}, {p1.y}) and ({p2.x}, {p2.y}) has no slope form"
        )
    m = (p2.y - p1.y) / (p2.x - p1.x)
    return Line(m, -1.0, m * p1.x - p1.y)


def perpendicular_through(line: Line, point: Point) -> Line:
    """Line perpendicular to `line` passing through `point`."""
    return Line(line.b, -line.a, line.b * point.x - line.a * point.y)


def parallel_through(line: Line, point: Point) -> Line:
    """Line parallel to `line` (same orientation) passing through `point`."""
    return Line(line.a, line.b, line.a * point.x + line.b * point.y)


def tangent_at(center: Point, point: Point) -> Line:
    """Tangent of the circle around `center` at `point`.

    Built from the radius vector as the line normal, so vertical and
    horizontal tangents need no special casing.
    """
    a = point.x - center.x
    b = point.y - center.y
    return Line(a, b, a * point.x + b * point.y)


def intersect(line1: Line, line2: Line) -> Optional[Point]:
    """Intersection point of two lines.

    Args:
        line1: First line
        line2: Second line

    Returns:
        The unique intersection, or None if the lines are parallel
    """
    det = line1.a * line2.b - line2.a * line1.b
    if abs(det) < PARALLEL_EPSILON:
        return None
    x = (line2.b * line1.c - line1.b * line2.c) / det
    y = (line1.a * line2.c - line2.a * line1.c) / det
    return Point(x, y)


def side_of_line(line: Line, point: Point) -> Side:
    """Classify a point as on, left or right of an oriented line."""
    d = line.value_at(point)
    if d < 0:
        return Side.RIGHT
    if d > 0:
        return Side.LEFT
    return Side.ON


def flip_direction(line: Line) -> Line:
    """Same line with reversed orientation."""
    return Line(-line.a, -line.b, -line.c)


def angle_from_axis(center: Point, point: Point, radius: float) -> float:
    """Angle of `point` around `center`, resolved per quadrant.

    Args:
        center: Circle center
        point: Point on (or near) the circle
        radius: Circle radius used to normalize the vertical offset

    Returns:
        Angle in [0, 2*pi), 0 at the positive x axis, growing clockwise
    """
    if radius <= 0:
        return 0.0
    ratio = float(np.clip(abs(point.y - center.y) / radius, 0.0, 1.0))
    base = float(np.arcsin(ratio))

    if point.y >= center.y:
        if point.x >= center.x:
            angle = base
        else:
            angle = np.pi - base
    else:
        if point.x <= center.x:
            angle = np.pi + base
        else:
            angle = 2 * np.pi - base

    # 2*pi - 0 lands exactly on the upper bound
    if angle >= 2 * np.pi:
        angle -= 2 * np.pi
    return float(angle)
