"""Tests for the geometry helpers."""
import math

import pytest
from PySide6.QtCore import QRect, QRectF

from core.geometry import (
    Point,
    Rect,
    angle,
    clamp_to_bounds,
    hypot,
    intersection_rect,
    rect_midpoint,
    relocate_frame,
    rotate_ccw,
    unit_to_frame,
)


def test_intersection_of_overlapping_rects():
    r = intersection_rect(Rect(0, 0, 100, 100), Rect(50, 25, 100, 100))
    assert r == Rect(50, 25, 50, 75)
    assert r.area == 50 * 75


def test_intersection_of_disjoint_rects_has_zero_area():
    r = intersection_rect(Rect(0, 0, 10, 10), Rect(100, 100, 10, 10))
    assert r.w == 0
    assert r.h == 0
    assert r.area == 0


def test_area_ignores_negative_dimensions():
    assert Rect(0, 0, -5, 10).area == 0


def test_midpoint():
    assert rect_midpoint(Rect(10, 20, 100, 50)) == Point(60, 45)


@pytest.mark.parametrize(
    "times,expected",
    [
        pytest.param(0, Point(10, 0), id="none"),
        pytest.param(1, Point(0, 10), id="quarter"),
        pytest.param(2, Point(-10, 0), id="half"),
        pytest.param(3, Point(0, -10), id="three_quarters"),
        pytest.param(4, Point(10, 0), id="full_turn"),
    ],
)
def test_rotate_ccw_steps(times, expected):
    assert rotate_ccw(Point(10, 0), Point(0, 0), times) == expected


def test_rotate_ccw_maps_north_to_east():
    """A point above the pivot (smaller y) rotates to its right."""
    pivot = Point(100, 100)
    rotated = rotate_ccw(Point(100, 40), pivot, 1)
    assert rotated == Point(160, 100)


def test_distance_and_angle():
    assert hypot(Point(0, 0), Point(3, 4)) == 5
    assert angle(Point(0, 0), Point(1, 1)) == pytest.approx(math.pi / 4)
    assert angle(Point(0, 0), Point(-1, 0)) == pytest.approx(math.pi)


def test_lerp_interpolates_all_fields():
    a = Rect(0, 0, 100, 100)
    b = Rect(100, 50, 300, 200)
    assert a.lerp(b, 0.5) == Rect(50, 25, 200, 150)
    assert a.lerp(b, 0.0) == a
    assert a.lerp(b, 1.0) == b


def test_rect_is_immutable():
    r = Rect(0, 0, 1, 1)
    with pytest.raises(AttributeError):
        r.x = 5  # type: ignore[misc]


def test_qt_round_trip():
    r = Rect.from_qrect(QRect(-2560, 0, 2560, 1440))
    assert r == Rect(-2560, 0, 2560, 1440)
    assert r.to_qrect() == QRect(-2560, 0, 2560, 1440)
    assert Rect(0.5, 1.25, 10, 10).to_qrectf() == QRectF(0.5, 1.25, 10, 10)


def test_clamp_pulls_oversized_frame_inside():
    clamped = clamp_to_bounds(Rect(-50, 0, 2000, 500), Rect(0, 0, 1920, 1080))
    assert clamped == Rect(0, 0, 1920, 500)


def test_clamp_pushes_overhanging_frame_back():
    clamped = clamp_to_bounds(Rect(1800, 1000, 400, 300), Rect(0, 0, 1920, 1080))
    assert clamped == Rect(1520, 780, 400, 300)


def test_clamp_leaves_contained_frame_alone():
    frame = Rect(10, 10, 100, 100)
    assert clamp_to_bounds(frame, Rect(0, 0, 1920, 1080)) == frame


def test_unit_to_frame_top_left_quarter():
    bounds = Rect(0, 25, 1000, 975)
    assert unit_to_frame(Rect(0, 0, 0.5, 0.5), bounds) == Rect(0, 25, 500, 487.5)


def test_relocate_frame_keeps_relative_geometry():
    source = Rect(0, 0, 1000, 1000)
    target = Rect(1000, 0, 2000, 1000)
    moved = relocate_frame(Rect(100, 100, 500, 500), source, target)
    assert moved == Rect(1200, 100, 1000, 500)
