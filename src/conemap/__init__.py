"""
ConeMap - Cone map editor core for autonomous-racing test tracks.

This package provides the geometry and data model behind an interactive
track editor:
- Tangent-continuous arc construction from clicked points
- Left/right boundary derivation and rule-based cone placement
- Track state with commit, undo, clear and cone noise
- Skidpad template generation
"""

__version__ = "0.1.0"

from conemap.track.track import Track
from conemap.track.segment import PathSegment
from conemap.track.skidpad import SkidpadGenerator
from conemap.editor.session import EditorSession

__all__ = ["Track", "PathSegment", "SkidpadGenerator", "EditorSession", "__version__"]
