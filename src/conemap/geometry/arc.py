"""
Arc construction - Circular arcs tangent to an inbound direction.

An arc starts at a given point, touches the inbound tangent line there and
passes through a requested end point. Its outgoing tangent is oriented so
that the next arc in a chain sees the same left/right semantics.
"""

from dataclasses import dataclass, replace
from enum import Enum
import numpy as np

from conemap.geometry.primitives import (
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
    perpendicular_through,
    side_of_line,
    tangent_at,
)


class NoSuchArcError(GeometryError):
    """Raised when no tangent-continuous arc reaches the requested point."""


class ArcDirection(Enum):
    """Sweep direction of an arc in screen coordinates."""
    CLOCKWISE = "clockwise"
    COUNTERCLOCKWISE = "counterclockwise"


def angular_span(start_angle: float, end_angle: float, direction: ArcDirection) -> float:
    """Angle swept from start to end in the given direction.

    Args:
        start_angle: Start angle in [0, 2*pi)
        end_angle: End angle in [0, 2*pi)
        direction: Sweep direction

    Returns:
        Swept angle in radians
    """
    diff = abs(start_angle - end_angle)
    if direction is ArcDirection.COUNTERCLOCKWISE:
        if end_angle > start_angle:
            return 2 * np.pi - diff
        return diff
    if end_angle > start_angle:
        return diff
    return 2 * np.pi - diff


@dataclass(frozen=True)
class Arc:
    """Circular arc around `center`.

    Angles are measured from the positive x axis, growing clockwise.
    """
    center: Point
    radius: float
    start_angle: float
    end_angle: float
    direction: ArcDirection
    valid: bool = True

    @property
    def counterclockwise(self) -> bool:
        return self.direction is ArcDirection.COUNTERCLOCKWISE

    @property
    def angular_span(self) -> float:
        """Swept angle in radians."""
        return float(angular_span(self.start_angle, self.end_angle, self.direction))

    @property
    def length(self) -> float:
        """Arc length (radius times swept angle)."""
        return self.radius * self.angular_span

    def point_at(self, angle: float) -> Point:
        """Point on the arc's circle at the given angle."""
        return Point(
            self.center.x + np.cos(angle) * self.radius,
            self.center.y + np.sin(angle) * self.radius,
        )

    @property
    def start_point(self) -> Point:
        return self.point_at(self.start_angle)

    @property
    def end_point(self) -> Point:
        return self.point_at(self.end_angle)

    def with_radius(self, radius: float) -> "Arc":
        """Concentric copy with a different radius."""
        return replace(self, radius=radius)

    def get_state(self) -> dict:
        """Get arc state as a plain dictionary."""
        return {
            "center": self.center.as_tuple(),
            "radius": self.radius,
            "start_angle": self.start_angle,
            "end_angle": self.end_angle,
            "direction": self.direction.value,
            "angular_span_deg": float(np.degrees(self.angular_span)),
            "length": self.length,
            "valid": self.valid,
        }


@dataclass(frozen=True)
class ArcResult:
    """Output of one arc construction."""
    arc: Arc
    end_point: Point              # End point actually used (after perturbation)
    continuation_tangent: Line    # Oriented tangent at end_point


class ArcBuilder:
    """Builds arcs tangent to an inbound line.

    The center lies on the perpendicular bisector of the chord from start to
    end and on the normal to the inbound tangent through the start point.

    Usage:
        builder = ArcBuilder(min_radius=155.0, min_arc_length=100.0)
        result = builder.build(start, end, tangent)
        next_tangent = result.continuation_tangent
    """

    def __init__(self, min_radius: float = 155.0, min_arc_length: float = 100.0):
        """Initialize builder with validity thresholds.

        Args:
            min_radius: Smallest radius of a valid arc
            min_arc_length: Shortest arc length of a valid arc
        """
        self.min_radius = min_radius
        self.min_arc_length = min_arc_length

    def is_valid(self, radius: float, span: float) -> bool:
        return radius >= self.min_radius and radius * span >= self.min_arc_length

    def build(self, start: Point, end: Point, inbound_tangent: Line) -> ArcResult:
        """Construct the arc from `start` to `end` tangent to `inbound_tangent`.

        Args:
            start: Arc start point (on the inbound tangent)
            end: Requested end point
            inbound_tangent: Oriented tangent line at the start point

        Returns:
            ArcResult with the arc, the end point used and the outgoing tangent

        Raises:
            NoSuchArcError: If start and end coincide or the end point lies
                straight ahead on the inbound tangent
        """
        if start == end:
            raise NoSuchArcError("Start and end point coincide")

        # Shared coordinates make the chord line vertical; nudge by one unit
        if start.x == end.x:
            end = end.offset(1.0, 0.0)
        if start.y == end.y:
            end = end.offset(0.0, 1.0)

        chord = line_through(start, end)
        bisector = perpendicular_through(chord, midpoint(start, end))
        normal = perpendicular_through(inbound_tangent, start)

        center = intersect(bisector, normal)
        if center is None:
            raise NoSuchArcError(
                f"End point ({end.x}, {end.y}) lies on the inbound tangent"
            )

        radius = distance(center, start)

        direction = ArcDirection.CLOCKWISE
        if side_of_line(inbound_tangent, end) is Side.LEFT:
            direction = ArcDirection.COUNTERCLOCKWISE

        start_angle = angle_from_axis(center, start, radius)
        end_angle = angle_from_axis(center, end, radius)
        span = angular_span(start_angle, end_angle, direction)

        arc = Arc(
            center=center,
            radius=radius,
            start_angle=start_angle,
            end_angle=end_angle,
            direction=direction,
            valid=self.is_valid(radius, span),
        )

        return ArcResult(
            arc=arc,
            end_point=end,
            continuation_tangent=continuation_tangent(inbound_tangent, center, end),
        )


def continuation_tangent(inbound_tangent: Line, center: Point, end: Point) -> Line:
    """Outgoing tangent at `end`, oriented like the inbound one.

    The arc center must classify the same way against both lines.
    """
    outgoing = tangent_at(center, end)
    if side_of_line(inbound_tangent, center) != side_of_line(outgoing, center):
        outgoing = flip_direction(outgoing)
    return outgoing


def build_arc(
    start: Point,
    end: Point,
    inbound_tangent: Line,
    min_radius: float = 155.0,
    min_arc_length: float = 100.0,
) -> Arc:
    """Convenience wrapper returning only the arc."""
    return ArcBuilder(min_radius, min_arc_length).build(start, end, inbound_tangent).arc
