"""
Animation types, enums, and dataclasses.

Defines the records owned by the frame animation scheduler.
"""
from enum import Enum
from dataclasses import dataclass
from typing import Any, Hashable

from core.geometry import Rect


class SchedulerState(Enum):
    """Tick source state. RUNNING exactly while the registry is non-empty."""
    IDLE = "idle"
    RUNNING = "running"


class EasingCurve(Enum):
    """
    Easing curve types for animations.

    Easing functions control the rate of change of the animated value over time.
    """
    LINEAR = "linear"

    QUAD_IN = "quad_in"
    QUAD_OUT = "quad_out"
    QUAD_IN_OUT = "quad_in_out"

    CUBIC_IN = "cubic_in"
    CUBIC_OUT = "cubic_out"
    CUBIC_IN_OUT = "cubic_in_out"

    SINE_IN_OUT = "sine_in_out"


@dataclass
class FrameAnimation:
    """A single in-flight frame tween, keyed by ``window_id`` in the registry."""
    window: Any                  # Backend window handle
    window_id: Hashable
    start_time: float            # Clock seconds
    duration: float              # Seconds, always > 0
    start_frame: Rect
    end_frame: Rect

    def progress(self, now: float) -> float:
        """Normalized elapsed time clamped to [0, 1]."""
        return max(0.0, min(1.0, (now - self.start_time) / self.duration))
