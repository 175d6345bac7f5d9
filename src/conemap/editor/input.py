"""
Editor input - Per-tick input from the UI layer.

The UI decodes pointer and keyboard events, removes pan/zoom transforms and
hands the result to the session once per tick.
"""

from dataclasses import dataclass
from enum import Enum
from typing import Optional

from conemap.geometry.primitives import Point


class PointerAction(Enum):
    """What the pointer button did this tick."""
    NONE = "none"
    HELD = "held"          # Button held down (panning)
    CLICKED = "clicked"    # Pressed and released without moving


@dataclass
class SkidpadParameters:
    """Requested skidpad dimensions in world units."""
    left_radius: float = 0.0
    right_radius: float = 0.0
    start_straight_length: float = 0.0
    finish_straight_length: float = 0.0

    @property
    def is_complete(self) -> bool:
        """All four dimensions given and positive."""
        return all(
            value is not None and value > 0
            for value in (
                self.left_radius,
                self.right_radius,
                self.start_straight_length,
                self.finish_straight_length,
            )
        )


@dataclass
class EditorInput:
    """Input for one editor tick.

    Request flags are edge triggered: set only in the tick the user asked.
    """
    pointer: Point
    action: PointerAction = PointerAction.NONE
    undo_requested: bool = False
    noise_toggle_requested: bool = False
    clear_requested: bool = False
    skidpad: Optional[SkidpadParameters] = None
