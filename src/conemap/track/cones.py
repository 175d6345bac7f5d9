"""
Cones - Track markers and positional noise.

Defines:
- Cone colors and sizes
- Cone with a fixed reference position and a displayed position
- Discrete per-axis noise applied to displayed positions
"""

from dataclasses import dataclass, field
from enum import Enum
from typing import Tuple
import numpy as np

from conemap.geometry.primitives import Point


class ConeColor(Enum):
    """Cone colors by role."""
    BLUE = "blue"        # Left boundary in the direction of travel
    YELLOW = "yellow"    # Right boundary in the direction of travel
    ORANGE = "orange"    # Start/finish and timing markers


class ConeSize(Enum):
    """Physical cone sizes."""
    SMALL = "small"
    LARGE = "large"


@dataclass
class Cone:
    """A single track marker.

    The reference position is the exact geometric position and never
    changes. The display position is what renderers draw and may carry
    noise.
    """
    reference_position: Point
    color: ConeColor = ConeColor.BLUE
    size: ConeSize = ConeSize.SMALL
    display_position: Point | None = None

    def __post_init__(self):
        if self.display_position is None:
            self.display_position = self.reference_position

    @property
    def is_noisy(self) -> bool:
        return self.display_position != self.reference_position

    def apply_noise(self, dx: float, dy: float) -> None:
        """Move the displayed position to reference + (dx, dy)."""
        self.display_position = self.reference_position.offset(dx, dy)

    def remove_noise(self) -> None:
        """Restore the displayed position from the reference position."""
        self.display_position = self.reference_position

    def get_state(self) -> dict:
        return {
            "reference_position": self.reference_position.as_tuple(),
            "display_position": self.display_position.as_tuple(),
            "color": self.color.value,
            "size": self.size.value,
        }


@dataclass
class ConeNoise:
    """Discrete positional noise.

    Each axis is offset independently by one of -magnitude, 0 or +magnitude.
    """
    magnitude: float = 20.0
    seed: int | None = None
    _rng: np.random.Generator = field(init=False, repr=False)

    def __post_init__(self):
        self._rng = np.random.default_rng(self.seed)

    @property
    def choices(self) -> Tuple[float, float, float]:
        return (-self.magnitude, 0.0, self.magnitude)

    def sample(self) -> Tuple[float, float]:
        """Draw one (dx, dy) offset."""
        dx, dy = self._rng.choice(self.choices, size=2)
        return (float(dx), float(dy))

    def apply(self, cone: Cone) -> None:
        cone.apply_noise(*self.sample())
