"""
Cone placement - Marker positions along a boundary arc.

The rules cap the distance between neighbouring cones at 500 units and ask
for denser markers in tight corners. Spacing is measured along the arc, not
as straight-line distance.
"""

from typing import List
import numpy as np

from conemap.track.boundary import BoundaryArc
from conemap.track.config import TrackConfig
from conemap.track.cones import Cone, ConeSize


class ConePlacer:
    """Places cones along boundary arcs.

    Usage:
        placer = ConePlacer()
        cones = placer.place_cones(boundary, is_finishing_segment=False)
    """

    def __init__(self, config: TrackConfig | None = None):
        """Initialize placer.

        Args:
            config: Track configuration with spacing tiers. Uses defaults if None.
        """
        self.config = config or TrackConfig()

    def spacing_for(self, length: float) -> float:
        """Maximum cone spacing for a boundary of the given length."""
        if length >= self.config.long_boundary_length:
            return self.config.max_cone_spacing
        if length >= self.config.short_boundary_length:
            return self.config.medium_cone_spacing
        return self.config.tight_cone_spacing

    def cone_count(self, length: float, span: float) -> int:
        """Number of cones for a boundary arc.

        Args:
            length: Boundary arc length
            span: Boundary angular span in radians

        Returns:
            Number of cones (at least one)
        """
        length = abs(length)
        count = int(np.ceil(length / self.spacing_for(length)))

        if self.config.tight_corner_override and span > self.config.tight_corner_angle:
            # Fixed counts for sharp corners up to 1000 units long
            if length < 75:
                count = 1
            elif length < 400:
                count = 2
            elif length <= 1000:
                count = 3

        return max(count, 1)

    def place_cones(self, boundary: BoundaryArc, is_finishing_segment: bool = False) -> List[Cone]:
        """Generate cones along a boundary arc.

        Cones are placed at equal angular steps, starting at the arc's end
        angle and moving back towards the start.

        Args:
            boundary: Boundary arc and its color
            is_finishing_segment: If True, skip the cone at the arc end,
                which the start/finish cluster already marks

        Returns:
            Ordered list of cones
        """
        arc = boundary.arc
        span = arc.angular_span
        count = self.cone_count(arc.length, span)

        step = span / count
        if not arc.counterclockwise:
            step = -step

        cones = []
        for i in range(count):
            if is_finishing_segment and i == 0:
                continue
            cones.append(Cone(
                reference_position=arc.point_at(arc.end_angle + step * i),
                color=boundary.color,
                size=ConeSize.SMALL,
            ))
        return cones
