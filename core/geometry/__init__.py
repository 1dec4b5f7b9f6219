"""Pure geometry helpers shared by the scheduler and the targeting engine."""

from .rect import (
    Point,
    Rect,
    Size,
    angle,
    clamp_to_bounds,
    hypot,
    intersection_rect,
    rect_midpoint,
    relocate_frame,
    rotate_ccw,
    unit_to_frame,
)

__all__ = [
    'Point',
    'Rect',
    'Size',
    'angle',
    'clamp_to_bounds',
    'hypot',
    'intersection_rect',
    'rect_midpoint',
    'relocate_frame',
    'rotate_ccw',
    'unit_to_frame',
]
