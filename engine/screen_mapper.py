"""
Screen assignment for window frames.

A window belongs to the display it overlaps most, measured against each
screen's full frame (menu bar and dock included) so a window tucked under
reserved chrome still maps to the display it sits on.
"""
from __future__ import annotations

import math
from typing import Optional, Sequence

from core.geometry import Rect, intersection_rect, rect_midpoint, rotate_ccw
from core.logging.logger import get_logger
from core.windows.backend import Screen

logger = get_logger(__name__)


def screen_for(frame: Rect, screens: Sequence[Screen]) -> Optional[Screen]:
    """
    Return the screen with the strictly largest overlap with ``frame``.

    Ties keep the earliest screen in ``screens``. Returns None when there are
    no screens or the frame overlaps none of them.
    """
    best_area = 0.0
    best: Optional[Screen] = None
    for screen in screens:
        area = intersection_rect(frame, screen.full_frame()).area
        if area > best_area:
            best_area = area
            best = screen
    if best is None:
        logger.debug("[SCREEN] No screen overlaps %s (%d screens)", frame, len(screens))
    return best


def screen_in_direction(screen: Screen, screens: Sequence[Screen],
                        rotations: int) -> Optional[Screen]:
    """
    Nearest other screen along a compass direction.

    ``rotations`` counts 90° counterclockwise turns from east (0 east,
    1 north, 2 west, 3 south). Screens are scored like windows in
    engine.directional_targeting: distance between full-frame midpoints
    divided by cos(angle/2).
    """
    p1 = rect_midpoint(screen.full_frame())
    best: Optional[Screen] = None
    best_score = math.inf
    for candidate in screens:
        if candidate is screen or candidate == screen:
            continue
        p2 = rotate_ccw(rect_midpoint(candidate.full_frame()), p1, rotations)
        dx, dy = p2.x - p1.x, p2.y - p1.y
        if dx <= 0:
            continue
        score = math.hypot(dx, dy) / math.cos(math.atan2(dy, dx) / 2)
        if score < best_score:
            best_score = score
            best = candidate
    return best
