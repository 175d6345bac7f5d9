"""
Track boundaries - Left and right corridor edges of a centerline arc.

Both boundaries are concentric with the centerline and offset radially by a
fixed distance. Yellow marks the right edge in the direction of travel and
blue the left edge.
"""

from dataclasses import dataclass

from conemap.geometry.arc import Arc
from conemap.track.cones import ConeColor


@dataclass(frozen=True)
class BoundaryArc:
    """A boundary arc with its marker color."""
    arc: Arc
    color: ConeColor

    def get_state(self) -> dict:
        state = self.arc.get_state()
        state["color"] = self.color.value
        return state


@dataclass(frozen=True)
class Boundaries:
    """Left and right boundary of one centerline arc."""
    left: BoundaryArc
    right: BoundaryArc


def boundary_color(center_arc: Arc, boundary: Arc) -> ConeColor:
    """Color of a boundary relative to its centerline.

    In a left turn the outer (larger) boundary is on the right, in a right
    turn the inner (smaller) one is.

    Args:
        center_arc: Centerline arc
        boundary: Concentric boundary arc

    Returns:
        YELLOW for the right-hand boundary, BLUE for the left-hand one
    """
    if center_arc.counterclockwise and boundary.radius > center_arc.radius:
        return ConeColor.YELLOW
    if not center_arc.counterclockwise and boundary.radius < center_arc.radius:
        return ConeColor.YELLOW
    return ConeColor.BLUE


class BoundaryCalculator:
    """Derives corridor boundaries from a centerline arc.

    Usage:
        calculator = BoundaryCalculator(offset=150.0)
        boundaries = calculator.boundaries(center_arc)
    """

    def __init__(self, offset: float = 150.0):
        """Initialize calculator.

        Args:
            offset: Radial distance from centerline to each boundary
        """
        self.offset = offset

    def boundaries(self, center_arc: Arc) -> Boundaries:
        """Compute left and right boundaries of a centerline arc.

        Args:
            center_arc: Centerline arc

        Returns:
            Boundaries sharing the arc's center, angles and direction
        """
        inner = center_arc.with_radius(center_arc.radius - self.offset)
        outer = center_arc.with_radius(center_arc.radius + self.offset)

        inner_boundary = BoundaryArc(inner, boundary_color(center_arc, inner))
        outer_boundary = BoundaryArc(outer, boundary_color(center_arc, outer))

        if inner_boundary.color is ConeColor.YELLOW:
            return Boundaries(left=outer_boundary, right=inner_boundary)
        return Boundaries(left=inner_boundary, right=outer_boundary)
