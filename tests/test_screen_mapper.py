"""Tests for screen assignment and neighbouring screen lookup."""
from core.geometry import Rect
from engine.screen_mapper import screen_for, screen_in_direction
from engine.directional_targeting import Direction
from tests._window_test_utils import FakeScreen


LEFT = FakeScreen(Rect(0, 0, 1000, 1000), name="left")
RIGHT = FakeScreen(Rect(1000, 0, 1000, 1000), name="right")


def test_window_inside_one_screen_maps_to_it():
    assert screen_for(Rect(100, 100, 300, 300), [LEFT, RIGHT]) is LEFT
    assert screen_for(Rect(1100, 100, 300, 300), [LEFT, RIGHT]) is RIGHT


def test_straddling_window_maps_to_larger_overlap():
    # 100x1000 on the left, 200x1000 on the right
    assert screen_for(Rect(900, 0, 300, 1000), [LEFT, RIGHT]) is RIGHT


def test_tie_keeps_first_screen():
    frame = Rect(900, 0, 200, 1000)
    assert screen_for(frame, [LEFT, RIGHT]) is LEFT
    assert screen_for(frame, [RIGHT, LEFT]) is RIGHT


def test_no_screens_yields_none():
    assert screen_for(Rect(0, 0, 10, 10), []) is None


def test_frame_off_every_screen_yields_none():
    assert screen_for(Rect(5000, 5000, 10, 10), [LEFT, RIGHT]) is None


def test_uses_full_frame_including_reserved_area():
    screen = FakeScreen(Rect(0, 0, 1000, 1000), Rect(0, 25, 1000, 975))
    # Sits entirely within the menu bar strip.
    assert screen_for(Rect(0, 0, 200, 20), [screen]) is screen


def test_screen_in_direction():
    top = FakeScreen(Rect(0, -800, 1000, 800), name="top")
    screens = [LEFT, RIGHT, top]
    assert screen_in_direction(LEFT, screens, Direction.EAST) is RIGHT
    assert screen_in_direction(RIGHT, screens, Direction.WEST) is LEFT
    assert screen_in_direction(LEFT, screens, Direction.NORTH) is top
    assert screen_in_direction(LEFT, screens, Direction.WEST) is None
    assert screen_in_direction(top, screens, Direction.SOUTH) is LEFT
