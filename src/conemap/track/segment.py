"""
Path segment - One committable piece of the drawn track.

Combines:
- Centerline arc tangent to the previous segment
- Left and right boundary arcs
- Cones along both boundaries
- Outgoing tangent for the next segment
"""

from dataclasses import dataclass, field
from typing import List, Optional

from conemap.geometry.arc import Arc, ArcBuilder
from conemap.geometry.primitives import Line, Point
from conemap.track.boundary import BoundaryArc, BoundaryCalculator
from conemap.track.config import TrackConfig
from conemap.track.cones import Cone
from conemap.track.placement import ConePlacer


@dataclass
class PathSegment:
    """A segment of the track.

    An empty segment has no centerline arc and no cones. Segments built
    from templates carry cones only.
    """
    center_arc: Optional[Arc] = None
    left_boundary: Optional[BoundaryArc] = None
    right_boundary: Optional[BoundaryArc] = None
    cones: List[Cone] = field(default_factory=list)
    continuation_tangent: Optional[Line] = None

    # Chaining
    start_point: Optional[Point] = None
    end_point: Optional[Point] = None     # Point the arc actually ends in
    target: Optional[Point] = None        # Point that was requested
    inbound_tangent: Optional[Line] = None
    is_finishing: bool = False

    @classmethod
    def from_cones(cls, cones: List[Cone]) -> "PathSegment":
        """Build a literal segment that only carries cones."""
        return cls(cones=list(cones))

    @property
    def is_empty(self) -> bool:
        return self.center_arc is None and not self.cones

    @property
    def is_valid(self) -> bool:
        """Whether the centerline meets the radius and length thresholds."""
        return self.center_arc is not None and self.center_arc.valid

    @property
    def length(self) -> float:
        """Centerline length (0 for literal segments)."""
        if self.center_arc is None:
            return 0.0
        return self.center_arc.length

    def update(
        self,
        start: Point,
        end: Point,
        inbound_tangent: Line,
        is_finishing: bool = False,
        config: TrackConfig | None = None,
    ) -> None:
        """Recompute the segment from its inputs.

        The result depends only on the arguments, so repeated calls with
        the same inputs reproduce the same segment.

        Args:
            start: Start point (end of the previous segment)
            end: Requested end point
            inbound_tangent: Oriented tangent at the start point
            is_finishing: Whether `end` is the track's end point
            config: Track constants. Uses defaults if None.

        Raises:
            NoSuchArcError: If no arc reaches `end`; the segment is left empty
        """
        config = config or TrackConfig()
        self.clear()

        builder = ArcBuilder(config.min_radius, config.min_arc_length)
        result = builder.build(start, end, inbound_tangent)

        boundaries = BoundaryCalculator(config.boundary_offset).boundaries(result.arc)
        placer = ConePlacer(config)

        self.center_arc = result.arc
        self.left_boundary = boundaries.left
        self.right_boundary = boundaries.right
        self.cones = (
            placer.place_cones(boundaries.right, is_finishing)
            + placer.place_cones(boundaries.left, is_finishing)
        )
        self.continuation_tangent = result.continuation_tangent
        self.start_point = start
        self.end_point = result.end_point
        self.target = end
        self.inbound_tangent = inbound_tangent
        self.is_finishing = is_finishing

    def clear(self) -> None:
        """Reset to an empty segment."""
        self.center_arc = None
        self.left_boundary = None
        self.right_boundary = None
        self.cones = []
        self.continuation_tangent = None
        self.start_point = None
        self.end_point = None
        self.target = None
        self.inbound_tangent = None
        self.is_finishing = False

    def get_state(self) -> dict:
        """Get segment state as a plain dictionary."""
        return {
            "center_arc": self.center_arc.get_state() if self.center_arc else None,
            "left_boundary": self.left_boundary.get_state() if self.left_boundary else None,
            "right_boundary": self.right_boundary.get_state() if self.right_boundary else None,
            "cones": [c.get_state() for c in self.cones],
            "start_point": self.start_point.as_tuple() if self.start_point else None,
            "end_point": self.end_point.as_tuple() if self.end_point else None,
            "is_finishing": self.is_finishing,
            "valid": self.is_valid,
        }
