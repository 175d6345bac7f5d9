"""
Scene descriptors - Everything a renderer needs to draw the track.

Descriptors are plain data: renderers draw them without touching the
geometry code.
"""

from dataclasses import dataclass, field
from typing import List, Optional

from conemap.geometry.arc import Arc
from conemap.geometry.primitives import Point, distance
from conemap.track.boundary import BoundaryArc
from conemap.track.cones import Cone, ConeColor, ConeSize
from conemap.track.segment import PathSegment
from conemap.track.track import Track


# Renderer palette (RGB hex)
CENTERLINE_VALID_COLOR = 0x08D10C
CENTERLINE_INVALID_COLOR = 0xDE2F2F
CONE_COLORS = {
    ConeColor.BLUE: 0x1A52FF,
    ConeColor.YELLOW: 0xE9E923,
    ConeColor.ORANGE: 0xFF9F21,
}

# Drawn cone radius per size
CONE_RADII = {
    ConeSize.SMALL: 10.0,
    ConeSize.LARGE: 20.0,
}


@dataclass(frozen=True)
class ArcDescriptor:
    """Arc ready for drawing."""
    center: Point
    radius: float
    start_angle: float
    end_angle: float
    counterclockwise: bool
    color: int

    @classmethod
    def from_arc(cls, arc: Arc, color: int) -> "ArcDescriptor":
        return cls(
            center=arc.center,
            radius=arc.radius,
            start_angle=arc.start_angle,
            end_angle=arc.end_angle,
            counterclockwise=arc.counterclockwise,
            color=color,
        )


@dataclass(frozen=True)
class ConeDescriptor:
    """Cone ready for drawing."""
    position: Point
    color: int
    radius: float

    @classmethod
    def from_cone(cls, cone: Cone) -> "ConeDescriptor":
        return cls(
            position=cone.display_position,
            color=CONE_COLORS[cone.color],
            radius=CONE_RADII[cone.size],
        )


@dataclass
class SegmentDescriptor:
    """Arcs and cones of one path segment."""
    arcs: List[ArcDescriptor] = field(default_factory=list)
    cones: List[ConeDescriptor] = field(default_factory=list)
    valid: bool = True


@dataclass
class SceneDescriptor:
    """Full drawable state of a track."""
    opening_cones: List[ConeDescriptor] = field(default_factory=list)
    segments: List[SegmentDescriptor] = field(default_factory=list)
    pending: Optional[SegmentDescriptor] = None
    end_point: Optional[Point] = None
    finish_prompt_visible: bool = False
    closed: bool = False

    @property
    def all_cones(self) -> List[ConeDescriptor]:
        cones = list(self.opening_cones)
        for segment in self.segments:
            cones.extend(segment.cones)
        if self.pending is not None:
            cones.extend(self.pending.cones)
        return cones


def _boundary_descriptor(boundary: BoundaryArc) -> ArcDescriptor:
    return ArcDescriptor.from_arc(boundary.arc, CONE_COLORS[boundary.color])


def describe_segment(segment: PathSegment) -> SegmentDescriptor:
    """Build the descriptor for one segment.

    The centerline is green when valid and red otherwise.
    """
    arcs = []
    if segment.center_arc is not None:
        color = CENTERLINE_VALID_COLOR if segment.is_valid else CENTERLINE_INVALID_COLOR
        arcs.append(ArcDescriptor.from_arc(segment.center_arc, color))
    for boundary in (segment.left_boundary, segment.right_boundary):
        if boundary is not None:
            arcs.append(_boundary_descriptor(boundary))

    return SegmentDescriptor(
        arcs=arcs,
        cones=[ConeDescriptor.from_cone(c) for c in segment.cones],
        valid=segment.center_arc is None or segment.is_valid,
    )


def describe_track(
    track: Track,
    pointer: Optional[Point] = None,
    finish_prompt_distance: float = 400.0,
) -> SceneDescriptor:
    """Build the scene descriptor for a track.

    Args:
        track: Track to describe
        pointer: Current pointer position in world coordinates
        finish_prompt_distance: Pointer distance to the end point below
            which the renderer should prompt to close the loop

    Returns:
        Scene descriptor
    """
    pending = None
    if not track.is_closed and not track.pending_segment.is_empty:
        pending = describe_segment(track.pending_segment)

    prompt = (
        not track.is_closed
        and pointer is not None
        and distance(pointer, track.end_point) < finish_prompt_distance
    )

    return SceneDescriptor(
        opening_cones=[ConeDescriptor.from_cone(c) for c in track.fixed_start_cones],
        segments=[describe_segment(s) for s in track.segments],
        pending=pending,
        end_point=track.end_point,
        finish_prompt_visible=prompt,
        closed=track.is_closed,
    )
