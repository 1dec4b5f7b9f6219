"""Window querying, targeting and placement on top of the core collaborators."""

from .directional_targeting import Direction, focus_first_valid, windows_in_direction
from .screen_mapper import screen_for, screen_in_direction
from .window import Window
from .window_manager import WindowManager

__all__ = [
    'Direction',
    'Window',
    'WindowManager',
    'focus_first_valid',
    'screen_for',
    'screen_in_direction',
    'windows_in_direction',
]
