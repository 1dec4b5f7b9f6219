"""
Directional window targeting.

Every direction is reduced to "look east": candidate midpoints are rotated
around the source midpoint by a number of 90° counterclockwise turns, then
only candidates with a positive rotated x offset survive. Each survivor is
scored as

    distance / cos(angle / 2) + z

where ``angle`` is the rotated offset's atan2 and ``z`` its position in the
front-to-back candidate list. The cosine term penalizes oblique windows more
than plain distance does, so a window straight ahead beats a nearer one off
to the side; ``z`` breaks near-ties in favour of windows closer to the front.

With ``frontmost`` two extra passes run:

* a pre-filter dropping candidates stacked behind the source that the source
  almost entirely covers, and
* an occlusion reorder after sorting, which promotes a farther candidate
  ahead of a nearer one when it is higher in the stack and overlaps it.

The two overlap in intent and run as separate passes.
"""
from __future__ import annotations

import math
from dataclasses import dataclass
from enum import IntEnum
from typing import Any, Iterable, List, Optional, Sequence

from core.geometry import Rect, intersection_rect, rect_midpoint, rotate_ccw
from core.logging.logger import get_logger
from core.windows.backend import WindowUnavailableError

logger = get_logger(__name__)

# Fraction of a candidate's area the source must cover for the candidate to
# count as hidden behind it.
FULLY_BEHIND_RATIO = 0.95
# Minimum overlap, in pixels on both axes, for one candidate to occlude another.
OCCLUSION_MIN_OVERLAP = 5


class Direction(IntEnum):
    """Compass direction, valued as counterclockwise quarter turns from east."""
    EAST = 0
    NORTH = 1
    WEST = 2
    SOUTH = 3


@dataclass
class _Candidate:
    window: Any
    frame: Rect
    z: int
    score: float


def is_fully_behind(front: Rect, back: Rect) -> bool:
    """True when ``front`` covers at least 95% of ``back``'s area."""
    return intersection_rect(front, back).area >= back.area * FULLY_BEHIND_RATIO


def _occludes(a: Rect, b: Rect) -> bool:
    overlap = intersection_rect(a, b)
    return overlap.w > OCCLUSION_MIN_OVERLAP and overlap.h > OCCLUSION_MIN_OVERLAP


def _index_of(items: Sequence[Any], target: Any) -> int:
    for index, item in enumerate(items):
        if item == target:
            return index
    return -1


def _prefer_unoccluded(ranked: List[_Candidate]) -> None:
    """Stabilize ``ranked`` in place so visible windows lead occluded ones.

    For position i, the first later entry that is higher in the stack
    (smaller z) and overlaps entry i is swapped into position i, and
    position i is examined again. Each swap strictly lowers the z held at
    position i, so the pass ends after at most O(n^2) comparisons per
    position.
    """
    i = 0
    while i < len(ranked):
        for j in range(i + 1, len(ranked)):
            if ranked[j].z < ranked[i].z and _occludes(ranked[i].frame, ranked[j].frame):
                ranked[i], ranked[j] = ranked[j], ranked[i]
                break
        else:
            i += 1


def windows_in_direction(source: Any, rotations: int, candidates: Sequence[Any],
                         frontmost: bool = False, strict: bool = False) -> List[Any]:
    """
    Rank ``candidates`` lying in a direction from ``source``, nearest first.

    Args:
        source: Window to look from; needs ``frame()``
        rotations: Counterclockwise quarter turns from east (see Direction)
        candidates: Front-to-back window list; entries need ``frame()`` and
            ``is_visible()``
        frontmost: Prefer windows not hidden behind others
        strict: Only keep windows within 45° of the direction's axis

    Returns:
        Windows ordered by ascending score; empty if ``source`` vanished
    """
    source_frame = source.frame()
    if source_frame is None:
        return []
    p1 = rect_midpoint(source_frame)

    z_source = _index_of(candidates, source)
    others: List[tuple[Any, Rect]] = []
    for index, candidate in enumerate(candidates):
        if candidate == source or not candidate.is_visible():
            continue
        frame = candidate.frame()
        if frame is None:
            continue
        if frontmost and index > z_source and is_fully_behind(source_frame, frame):
            continue
        others.append((candidate, frame))

    ranked: List[_Candidate] = []
    for z, (candidate, frame) in enumerate(others):
        p2 = rotate_ccw(rect_midpoint(frame), p1, rotations)
        dx, dy = p2.x - p1.x, p2.y - p1.y
        if dx > (abs(dy) if strict else 0):
            distance = math.hypot(dx, dy)
            score = distance / math.cos(math.atan2(dy, dx) / 2) + z
            ranked.append(_Candidate(candidate, frame, z, score))

    ranked.sort(key=lambda entry: entry.score)
    if frontmost:
        _prefer_unoccluded(ranked)

    logger.debug("[TARGET] %d/%d candidates in direction %d (frontmost=%s, strict=%s)",
                 len(ranked), len(candidates), rotations, frontmost, strict)
    return [entry.window for entry in ranked]


def focus_first_valid(windows: Iterable[Any]) -> bool:
    """Focus the first window that accepts focus; False when none does."""
    for window in windows:
        try:
            if window.focus():
                return True
        except WindowUnavailableError:
            logger.debug("[TARGET] Focus candidate vanished, trying next", exc_info=True)
    return False
