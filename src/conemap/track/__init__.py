"""
Track module - Cone track data model and construction.

This module contains:
- Track: committed segments, pending preview, commit/undo and noise
- PathSegment: centerline arc, boundaries and cones of one segment
- BoundaryCalculator, ConePlacer: corridor edges and marker placement
- SkidpadGenerator: fixed figure-eight template
"""

from conemap.track.config import TrackConfig
from conemap.track.cones import Cone, ConeColor, ConeNoise, ConeSize
from conemap.track.boundary import BoundaryArc, Boundaries, BoundaryCalculator
from conemap.track.placement import ConePlacer
from conemap.track.segment import PathSegment
from conemap.track.track import DrawingState, Track, TrackStateError
from conemap.track.skidpad import SkidpadConfig, SkidpadGenerator

__all__ = [
    "TrackConfig",
    "Cone",
    "ConeColor",
    "ConeNoise",
    "ConeSize",
    "BoundaryArc",
    "Boundaries",
    "BoundaryCalculator",
    "ConePlacer",
    "PathSegment",
    "DrawingState",
    "Track",
    "TrackStateError",
    "SkidpadConfig",
    "SkidpadGenerator",
]
