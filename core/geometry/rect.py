"""
Screen-space geometry primitives.

Rectangles use top-left origin with y growing downward, matching Qt and
every desktop window system the backends talk to. All values are floats so
that interpolated animation frames survive without rounding; conversion to
integer ``QRect`` happens only at the backend boundary.
"""
from __future__ import annotations

import math
from dataclasses import dataclass

from PySide6.QtCore import QPoint, QPointF, QRect, QRectF, QSize


@dataclass(frozen=True)
class Point:
    x: float
    y: float

    def __sub__(self, other: "Point") -> "Point":
        return Point(self.x - other.x, self.y - other.y)

    def __add__(self, other: "Point") -> "Point":
        return Point(self.x + other.x, self.y + other.y)

    def to_qpoint(self) -> QPoint:
        return QPoint(round(self.x), round(self.y))

    @classmethod
    def from_qpoint(cls, point: QPoint | QPointF) -> "Point":
        return cls(float(point.x()), float(point.y()))


@dataclass(frozen=True)
class Size:
    w: float
    h: float

    def to_qsize(self) -> QSize:
        return QSize(round(self.w), round(self.h))


@dataclass(frozen=True)
class Rect:
    """Immutable frame ``{x, y, w, h}``."""

    x: float
    y: float
    w: float
    h: float

    @property
    def x2(self) -> float:
        return self.x + self.w

    @property
    def y2(self) -> float:
        return self.y + self.h

    @property
    def area(self) -> float:
        return max(0.0, self.w) * max(0.0, self.h)

    @property
    def top_left(self) -> Point:
        return Point(self.x, self.y)

    @property
    def size(self) -> Size:
        return Size(self.w, self.h)

    def translated(self, dx: float, dy: float) -> "Rect":
        return Rect(self.x + dx, self.y + dy, self.w, self.h)

    def with_top_left(self, point: Point) -> "Rect":
        return Rect(point.x, point.y, self.w, self.h)

    def with_size(self, size: Size) -> "Rect":
        return Rect(self.x, self.y, size.w, size.h)

    def lerp(self, other: "Rect", t: float) -> "Rect":
        """Interpolate each field linearly; ``t`` is not clamped."""
        return Rect(
            self.x + (other.x - self.x) * t,
            self.y + (other.y - self.y) * t,
            self.w + (other.w - self.w) * t,
            self.h + (other.h - self.h) * t,
        )

    def to_qrect(self) -> QRect:
        return QRect(round(self.x), round(self.y), round(self.w), round(self.h))

    def to_qrectf(self) -> QRectF:
        return QRectF(self.x, self.y, self.w, self.h)

    @classmethod
    def from_qrect(cls, rect: QRect | QRectF) -> "Rect":
        return cls(float(rect.x()), float(rect.y()), float(rect.width()), float(rect.height()))


def intersection_rect(a: Rect, b: Rect) -> Rect:
    """Return the overlap of two rects; disjoint rects give zero width/height."""
    x1 = max(a.x, b.x)
    y1 = max(a.y, b.y)
    x2 = min(a.x2, b.x2)
    y2 = min(a.y2, b.y2)
    return Rect(x1, y1, max(0.0, x2 - x1), max(0.0, y2 - y1))


def rect_midpoint(rect: Rect) -> Point:
    return Point(rect.x + rect.w / 2, rect.y + rect.h / 2)


def rotate_ccw(point: Point, pivot: Point, times: int = 1) -> Point:
    """Rotate ``point`` by 90° counterclockwise around ``pivot``, ``times`` times.

    In y-down coordinates one step maps the offset ``(dx, dy)`` to
    ``(-dy, dx)``: something due north of the pivot ends up due east.
    """
    dx = point.x - pivot.x
    dy = point.y - pivot.y
    for _ in range(int(times) % 4):
        dx, dy = -dy, dx
    return Point(pivot.x + dx, pivot.y + dy)


def hypot(p1: Point, p2: Point) -> float:
    return math.hypot(p2.x - p1.x, p2.y - p1.y)


def angle(p1: Point, p2: Point) -> float:
    """Angle of the vector ``p1 -> p2`` in radians, via atan2."""
    return math.atan2(p2.y - p1.y, p2.x - p1.x)


def clamp_to_bounds(frame: Rect, bounds: Rect) -> Rect:
    """Move and shrink ``frame`` so it lies inside ``bounds``.

    Left/top edges are pulled in first, oversize dimensions are cut to the
    bounds, then the right/bottom edges are pushed back inside.
    """
    x, y, w, h = frame.x, frame.y, frame.w, frame.h
    if x < bounds.x:
        x = bounds.x
    if y < bounds.y:
        y = bounds.y
    if w > bounds.w:
        w = bounds.w
    if h > bounds.h:
        h = bounds.h
    if x + w > bounds.x2:
        x = bounds.x2 - w
    if y + h > bounds.y2:
        y = bounds.y2 - h
    return Rect(x, y, w, h)


def unit_to_frame(unit: Rect, bounds: Rect) -> Rect:
    """Map a unit rect (fractions 0.0-1.0) onto ``bounds``."""
    return Rect(
        bounds.x + unit.x * bounds.w,
        bounds.y + unit.y * bounds.h,
        unit.w * bounds.w,
        unit.h * bounds.h,
    )


def relocate_frame(frame: Rect, source: Rect, target: Rect) -> Rect:
    """Keep ``frame``'s position and size relative to ``source`` but inside ``target``."""
    return Rect(
        (frame.x - source.x) / source.w * target.w + target.x,
        (frame.y - source.y) / source.h * target.h + target.y,
        frame.w / source.w * target.w,
        frame.h / source.h * target.h,
    )
