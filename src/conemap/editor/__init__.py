"""
Editor module - Seam between the UI layer and the track model.

This module contains:
- EditorInput: per-tick pointer state and request flags
- EditorSession: applies input to a track and returns scene descriptors
- SceneDescriptor: drawable arcs and cones for the renderer
"""

from conemap.editor.input import EditorInput, PointerAction, SkidpadParameters
from conemap.editor.scene import (
    ArcDescriptor,
    ConeDescriptor,
    SceneDescriptor,
    SegmentDescriptor,
    describe_segment,
    describe_track,
)
from conemap.editor.session import EditorSession, SessionConfig

__all__ = [
    "EditorInput",
    "PointerAction",
    "SkidpadParameters",
    "ArcDescriptor",
    "ConeDescriptor",
    "SceneDescriptor",
    "SegmentDescriptor",
    "describe_segment",
    "describe_track",
    "EditorSession",
    "SessionConfig",
]
