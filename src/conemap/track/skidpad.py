"""
Skidpad generator - Fixed figure-eight test layout.

Generates:
- Entry straight with evenly spaced boundary cones
- Two large orange timing cones on the control line
- A right and a left loop, each with an inner and an outer cone ring
- Exit straight

The layout is closed form; it does not go through arc chaining.
"""

from dataclasses import dataclass
from typing import List, Optional
import logging
import numpy as np

from conemap.geometry.primitives import Point, distance
from conemap.track.config import TrackConfig
from conemap.track.cones import Cone, ConeColor, ConeSize
from conemap.track.segment import PathSegment
from conemap.track.track import Track

logger = logging.getLogger(__name__)

# Outer-ring cones this close to the straight corridor edge are dropped
RING_TOLERANCE = 1e-6


@dataclass
class SkidpadConfig:
    """Skidpad template configuration."""
    track_half_width: float = 150.0     # Centerline to boundary
    cone_spacing: float = 500.0         # Maximum spacing along straights and rings
    timing_cone_offset: float = 20.0    # Timing cones sit outside the corridor


class SkidpadGenerator:
    """Skidpad layout generator.

    Travel starts at the track's start point heading along -y. The loops
    meet the straight at the control line, where the timing cones stand.

    Usage:
        generator = SkidpadGenerator()
        track = generator.generate(900.0, 900.0, 1500.0, 1500.0)
    """

    def __init__(self, config: SkidpadConfig | None = None):
        """Initialize generator with optional configuration.

        Args:
            config: Skidpad configuration. Uses defaults if None.
        """
        self.config = config or SkidpadConfig()

    def generate(
        self,
        left_radius: float,
        right_radius: float,
        start_straight_length: float,
        finish_straight_length: float,
        track: Track | None = None,
    ) -> Optional[Track]:
        """Generate a skidpad layout.

        Args:
            left_radius: Centerline radius of the left loop
            right_radius: Centerline radius of the right loop
            start_straight_length: Length of the entry straight
            finish_straight_length: Length of the exit straight
            track: Track to populate. A new track is created if None.

        Returns:
            The closed track, or None if any parameter is not positive
        """
        params = (left_radius, right_radius, start_straight_length, finish_straight_length)
        if any(p is None or p <= 0 for p in params):
            logger.warning(f"Ignoring skidpad request with non-positive parameters {params}")
            return None

        if track is None:
            track = Track(TrackConfig(boundary_offset=self.config.track_half_width))

        origin = track.start_point
        control_y = origin.y - start_straight_length

        segments = [
            PathSegment.from_cones(self._straight(origin.y, start_straight_length)),
            PathSegment.from_cones(self._timing_cones(control_y)),
            PathSegment.from_cones(self._loop(right_radius, left_radius, control_y, right_turn=True)),
            PathSegment.from_cones(self._loop(left_radius, right_radius, control_y, right_turn=False)),
            PathSegment.from_cones(self._straight(control_y, finish_straight_length)),
        ]
        track.load_template(segments)

        logger.info(
            f"Generated skidpad: radii {left_radius}/{right_radius}, "
            f"straights {start_straight_length}/{finish_straight_length}, "
            f"{len(track.cones)} cones"
        )
        return track

    def _straight(self, from_y: float, length: float) -> List[Cone]:
        """Boundary cones of a straight running towards -y.

        The cone at the straight's start is omitted; the previous part of
        the layout already marks it.
        """
        w = self.config.track_half_width
        count = int(np.ceil(length / self.config.cone_spacing))
        step = length / count

        cones = []
        for i in range(1, count + 1):
            y = from_y - i * step
            cones.append(Cone(Point(-w, y), ConeColor.BLUE, ConeSize.SMALL))
            cones.append(Cone(Point(w, y), ConeColor.YELLOW, ConeSize.SMALL))
        return cones

    def _timing_cones(self, control_y: float) -> List[Cone]:
        x = self.config.track_half_width + self.config.timing_cone_offset
        return [
            Cone(Point(-x, control_y), ConeColor.ORANGE, ConeSize.LARGE),
            Cone(Point(x, control_y), ConeColor.ORANGE, ConeSize.LARGE),
        ]

    def _loop(
        self,
        radius: float,
        other_radius: float,
        control_y: float,
        right_turn: bool,
    ) -> List[Cone]:
        """Inner and outer cone rings of one loop.

        Args:
            radius: Centerline radius of this loop
            other_radius: Centerline radius of the opposite loop
            control_y: y coordinate of the control line
            right_turn: True for the loop on the +x side

        Returns:
            Cones of the inner ring followed by the outer ring
        """
        w = self.config.track_half_width
        side = 1.0 if right_turn else -1.0
        center = Point(side * radius, control_y)
        other_center = Point(-side * other_radius, control_y)

        # Inner ring is on the right of travel in a right turn
        inner_color = ConeColor.YELLOW if right_turn else ConeColor.BLUE
        outer_color = ConeColor.BLUE if right_turn else ConeColor.YELLOW

        # Angle pointing from the loop center at the crossing point
        crossing_angle = np.pi if right_turn else 0.0

        cones = []
        for k, position in enumerate(self._ring(center, radius - w, crossing_angle)):
            if k == 0:
                continue
            cones.append(Cone(position, inner_color, ConeSize.SMALL))

        for position in self._ring(center, radius + w, crossing_angle):
            in_other_loop = abs(distance(position, other_center) - other_radius) < w
            in_straight = abs(position.x) < w + RING_TOLERANCE
            if in_other_loop or in_straight:
                continue
            cones.append(Cone(position, outer_color, ConeSize.SMALL))

        return cones

    def _ring(self, center: Point, radius: float, first_angle: float) -> List[Point]:
        """Evenly spaced points on a full circle, starting at `first_angle`."""
        if radius <= 0:
            return []
        count = int(np.ceil(2 * np.pi * radius / self.config.cone_spacing))
        step = 2 * np.pi / count
        return [
            Point(
                center.x + np.cos(first_angle + k * step) * radius,
                center.y + np.sin(first_angle + k * step) * radius,
            )
            for k in range(count)
        ]
