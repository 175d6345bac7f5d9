"""
Track configuration - Named constants of the cone-map editor.

Distances are in world units (centimeters on the real track).
"""

from dataclasses import dataclass, field
import numpy as np

from conemap.geometry.primitives import Line, Point


@dataclass(frozen=True)
class TrackConfig:
    """Track geometry and cone placement configuration.

    Frozen: the start/end anchors and tangent are fixed for the lifetime of a Track.
    """
    # Corridor
    boundary_offset: float = 150.0      # Centerline to boundary distance

    # Arc validity
    min_radius: float = 155.0
    min_arc_length: float = 100.0

    # Cone spacing tiers, chosen by boundary length
    max_cone_spacing: float = 500.0       # Boundary length >= long_boundary_length
    medium_cone_spacing: float = 250.0
    tight_cone_spacing: float = 150.0     # Boundary length < short_boundary_length
    long_boundary_length: float = 1500.0
    short_boundary_length: float = 300.0

    # Sharp corners get a minimum cone count
    tight_corner_angle: float = np.pi / 4
    tight_corner_override: bool = True

    # Noise
    noise_magnitude: float = 20.0
    noise_seed: int | None = None

    # Opening configuration
    start_point: Point = field(default_factory=lambda: Point(0.0, -100.0))
    end_point: Point = field(default_factory=lambda: Point(0.0, 100.0))
    initial_tangent: Line = field(default_factory=lambda: Line(1.0, 0.0, 0.0))

    def __post_init__(self):
        """Validate spacing and offsets."""
        if self.boundary_offset <= 0:
            raise ValueError(f"boundary_offset must be positive, got {self.boundary_offset}")
        if self.noise_magnitude < 0:
            raise ValueError(f"noise_magnitude must be non-negative, got {self.noise_magnitude}")
        if not 0 < self.tight_cone_spacing <= self.medium_cone_spacing <= self.max_cone_spacing:
            raise ValueError(
                "Cone spacing tiers must satisfy 0 < tight <= medium <= max, got "
                f"{self.tight_cone_spacing}, {self.medium_cone_spacing}, {self.max_cone_spacing}"
            )
        if self.short_boundary_length > self.long_boundary_length:
            raise ValueError("short_boundary_length must not exceed long_boundary_length")
