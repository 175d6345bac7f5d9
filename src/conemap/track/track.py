"""
Track - Cone map being drawn as a closed loop.

Contains:
- Fixed start/finish cone cluster
- Committed path segments (append/pop only)
- One pending segment recomputed from the pointer position
- Drawing/closed state and cone noise toggle
"""

from enum import Enum
from typing import List, Optional, Tuple
import logging

from conemap.geometry.arc import NoSuchArcError
from conemap.geometry.primitives import Line, Point
from conemap.track.config import TrackConfig
from conemap.track.cones import Cone, ConeColor, ConeNoise, ConeSize
from conemap.track.segment import PathSegment

logger = logging.getLogger(__name__)

# Orange cones sit this far along the start/finish straight from its middle
ORANGE_CONE_OFFSET = 30.0


class DrawingState(Enum):
    """Editing state of a track."""
    DRAWING = "drawing"
    CLOSED = "closed"


class TrackStateError(RuntimeError):
    """Raised when an operation is not available in the current state."""


def opening_cluster(config: TrackConfig) -> List[Cone]:
    """Cones around the start/finish straight.

    Small blue and yellow cones mark both ends of the straight, large
    orange cones flank the start/finish line.

    Args:
        config: Track configuration with start/end points and offset

    Returns:
        Eight cones: two blue, two yellow, four orange
    """
    w = config.boundary_offset
    start, end = config.start_point, config.end_point
    mid_x = (start.x + end.x) / 2
    mid_y = (start.y + end.y) / 2

    cones = [
        Cone(Point(start.x - w, start.y), ConeColor.BLUE, ConeSize.SMALL),
        Cone(Point(end.x - w, end.y), ConeColor.BLUE, ConeSize.SMALL),
        Cone(Point(start.x + w, start.y), ConeColor.YELLOW, ConeSize.SMALL),
        Cone(Point(end.x + w, end.y), ConeColor.YELLOW, ConeSize.SMALL),
    ]
    for dx in (-w, w):
        for dy in (-ORANGE_CONE_OFFSET, ORANGE_CONE_OFFSET):
            cones.append(Cone(Point(mid_x + dx, mid_y + dy), ConeColor.ORANGE, ConeSize.LARGE))
    return cones


class Track:
    """Interactively drawn cone track.

    The track starts at the fixed start point heading along the initial
    tangent. Each commit appends the pending segment; the loop closes when
    a segment ends exactly on the end point.

    Usage:
        track = Track()
        track.update_pending_segment(Point(-400.0, -600.0))
        track.commit()
        track.undo()
    """

    def __init__(self, config: TrackConfig | None = None):
        """Initialize track with optional configuration.

        Args:
            config: Track configuration. Uses defaults if None.
        """
        self.config = config or TrackConfig()

        self._segments: List[PathSegment] = []
        self._pending: PathSegment = PathSegment()
        self._state: DrawingState = DrawingState.DRAWING

        self._template_loaded: bool = False
        self._noise_enabled: bool = False
        self._noise = ConeNoise(self.config.noise_magnitude, self.config.noise_seed)

        self._fixed_start_cones: List[Cone] = opening_cluster(self.config)

    @property
    def start_point(self) -> Point:
        return self.config.start_point

    @property
    def end_point(self) -> Point:
        return self.config.end_point

    @property
    def initial_tangent(self) -> Line:
        return self.config.initial_tangent

    @property
    def segments(self) -> Tuple[PathSegment, ...]:
        """Committed segments in drawing order."""
        return tuple(self._segments)

    @property
    def num_segments(self) -> int:
        return len(self._segments)

    @property
    def pending_segment(self) -> PathSegment:
        return self._pending

    @property
    def state(self) -> DrawingState:
        return self._state

    @property
    def is_closed(self) -> bool:
        return self._state is DrawingState.CLOSED

    @property
    def noise_enabled(self) -> bool:
        return self._noise_enabled

    @property
    def fixed_start_cones(self) -> Tuple[Cone, ...]:
        return tuple(self._fixed_start_cones)

    @property
    def cones(self) -> List[Cone]:
        """All committed cones in drawing order (excluding the start cluster)."""
        return [cone for segment in self._segments for cone in segment.cones]

    @property
    def centerline_length(self) -> float:
        """Total centerline length of committed segments."""
        return sum(segment.length for segment in self._segments)

    def _anchor(self) -> Tuple[Point, Line]:
        """Start point and tangent for the next segment."""
        for segment in reversed(self._segments):
            if segment.continuation_tangent is not None:
                return segment.end_point, segment.continuation_tangent
        return self.start_point, self.initial_tangent

    def update_pending_segment(self, point: Point) -> PathSegment:
        """Recompute the pending segment towards a candidate point.

        Args:
            point: Candidate end point in world coordinates

        Returns:
            The pending segment (empty if no arc reaches the point)

        Raises:
            TrackStateError: If the track is closed
        """
        if self._state is not DrawingState.DRAWING:
            raise TrackStateError("Cannot update pending segment on a closed track")

        start, tangent = self._anchor()
        finishing = point == self.end_point

        try:
            self._pending.update(start, point, tangent, finishing, self.config)
        except NoSuchArcError as exc:
            logger.debug(f"No arc towards ({point.x}, {point.y}): {exc}")
            self._pending.clear()

        return self._pending

    def commit(self) -> bool:
        """Append the pending segment to the committed segments.

        Returns:
            True if a segment was committed, False if the pending one is empty

        Raises:
            TrackStateError: If the track is closed
        """
        if self._state is not DrawingState.DRAWING:
            raise TrackStateError("Cannot commit segments to a closed track")

        segment = self._pending
        if segment.is_empty:
            logger.debug("Nothing to commit: pending segment is empty")
            return False

        if self._noise_enabled:
            for cone in segment.cones:
                self._noise.apply(cone)

        self._segments.append(segment)
        self._pending = PathSegment()

        logger.info(
            f"Committed segment {len(self._segments)} "
            f"(radius={segment.center_arc.radius:.1f}, valid={segment.is_valid})"
        )

        if segment.target == self.end_point:
            self._state = DrawingState.CLOSED
            logger.info(f"Track closed with {len(self._segments)} segments")

        return True

    def undo(self) -> Optional[PathSegment]:
        """Remove the most recently committed segment.

        A loaded template is removed as a whole, leaving only the opening
        cluster.

        Returns:
            The removed segment (the template's last part for templates),
            or None if nothing was committed
        """
        removed = self._segments.pop() if self._segments else None
        if self._template_loaded:
            self._segments = []
            self._template_loaded = False

        if self._state is DrawingState.CLOSED:
            self._state = DrawingState.DRAWING
        self._pending.clear()

        if removed is not None:
            logger.info(f"Undid segment, {len(self._segments)} remaining")
        return removed

    def toggle_noise(self) -> bool:
        """Toggle noise on committed cone positions.

        Returns:
            Whether noise is now enabled
        """
        self._noise_enabled = not self._noise_enabled

        for cone in self.cones:
            if self._noise_enabled:
                self._noise.apply(cone)
            else:
                cone.remove_noise()

        logger.info(f"Cone noise {'enabled' if self._noise_enabled else 'disabled'}")
        return self._noise_enabled

    def clear(self) -> None:
        """Remove all committed segments and resume drawing."""
        self._segments = []
        self._pending = PathSegment()
        self._state = DrawingState.DRAWING
        self._template_loaded = False
        logger.info("Track cleared")

    def load_template(self, segments: List[PathSegment]) -> None:
        """Replace committed segments with a finished template.

        Args:
            segments: Literal segments forming a complete layout
        """
        self.clear()
        self._segments = list(segments)
        self._template_loaded = True
        if self._noise_enabled:
            for cone in self.cones:
                self._noise.apply(cone)
        self._state = DrawingState.CLOSED

    def get_state(self) -> dict:
        """Get complete track state as a plain dictionary."""
        return {
            "state": self._state.value,
            "start_point": self.start_point.as_tuple(),
            "end_point": self.end_point.as_tuple(),
            "num_segments": len(self._segments),
            "num_cones": len(self.cones),
            "centerline_length": self.centerline_length,
            "noise_enabled": self._noise_enabled,
            "segments": [s.get_state() for s in self._segments],
            "pending_segment": self._pending.get_state(),
            "fixed_start_cones": [c.get_state() for c in self._fixed_start_cones],
        }
