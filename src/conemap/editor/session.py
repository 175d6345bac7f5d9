"""
Editor session - Applies per-tick UI input to a track.

Provides:
- Edge-triggered undo, clear, noise and skidpad requests
- Pointer snapping to the track end point
- Pending segment preview and commit on click
- Scene descriptors for the renderer
"""

from dataclasses import dataclass
from typing import Optional
import logging
import sys

from conemap.geometry.primitives import Point, distance
from conemap.editor.input import EditorInput, PointerAction, SkidpadParameters
from conemap.editor.scene import SceneDescriptor, describe_track
from conemap.track.skidpad import SkidpadGenerator
from conemap.track.track import Track

logger = logging.getLogger(__name__)


@dataclass
class SessionConfig:
    """Editor session configuration."""
    snap_distance: float = 40.0             # Pointer snaps to the end point inside this radius
    finish_prompt_distance: float = 400.0   # Prompt to close the loop inside this radius
    commit_invalid_segments: bool = True    # Allow committing arcs below the thresholds

    # Logging
    log_level: str = "INFO"


class EditorSession:
    """Single-user editing session around one track.

    Usage:
        session = EditorSession()
        scene = session.tick(EditorInput(pointer=Point(-300.0, -700.0)))
        scene = session.tick(EditorInput(pointer=Point(-300.0, -700.0),
                                         action=PointerAction.CLICKED))
    """

    def __init__(
        self,
        track: Track | None = None,
        config: SessionConfig | None = None,
        skidpad_generator: SkidpadGenerator | None = None,
    ):
        """Initialize session.

        Args:
            track: Track to edit. A default track is created if None.
            config: Session configuration. Uses defaults if None.
            skidpad_generator: Generator for skidpad requests
        """
        self.config = config or SessionConfig()
        self.track = track or Track()
        self.skidpad_generator = skidpad_generator or SkidpadGenerator()

        self._last_pointer: Optional[Point] = None

    def setup_logging(self) -> None:
        """Configure logging for interactive use."""
        logging.basicConfig(
            level=getattr(logging, self.config.log_level),
            format="%(asctime)s [%(levelname)s] %(message)s",
            handlers=[logging.StreamHandler(sys.stdout)],
        )

    def snap(self, point: Point) -> Point:
        """Snap a pointer position to the end point when close enough."""
        if distance(point, self.track.end_point) < self.config.snap_distance:
            return self.track.end_point
        return point

    def tick(self, editor_input: EditorInput) -> SceneDescriptor:
        """Process one tick of input.

        Args:
            editor_input: Pointer state and request flags for this tick

        Returns:
            Scene descriptor after applying the input
        """
        self._handle_requests(editor_input)

        pointer = editor_input.pointer
        self._last_pointer = pointer

        if not self.track.is_closed:
            self.track.update_pending_segment(self.snap(pointer))

            if editor_input.action is PointerAction.CLICKED:
                self._commit()

        return describe_track(self.track, pointer, self.config.finish_prompt_distance)

    def scene(self) -> SceneDescriptor:
        """Describe the track without applying input."""
        return describe_track(self.track, self._last_pointer, self.config.finish_prompt_distance)

    def _handle_requests(self, editor_input: EditorInput) -> None:
        if editor_input.clear_requested:
            self.track.clear()
        if editor_input.undo_requested:
            self.track.undo()
        if editor_input.noise_toggle_requested:
            self.track.toggle_noise()
        if editor_input.skidpad is not None:
            self.place_skidpad(editor_input.skidpad)

    def place_skidpad(self, params: SkidpadParameters) -> bool:
        """Replace the track contents with a skidpad layout.

        Returns:
            True if the layout was placed
        """
        if not params.is_complete:
            logger.warning(f"Ignoring incomplete skidpad request {params}")
            return False

        result = self.skidpad_generator.generate(
            params.left_radius,
            params.right_radius,
            params.start_straight_length,
            params.finish_straight_length,
            track=self.track,
        )
        return result is not None

    def _commit(self) -> bool:
        pending = self.track.pending_segment
        if not pending.is_empty and not pending.is_valid and not self.config.commit_invalid_segments:
            logger.warning("Refusing to commit segment below radius/length thresholds")
            return False
        return self.track.commit()
