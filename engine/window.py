"""
Window facade.

Wraps one backend window handle together with the WindowManager that owns
the animation scheduler, so frame reads and writes always go through the
scheduler: reads see a tween's target rather than its transient frame, and
operations that cannot coexist with a tween stop it first.

Queries against a window the backend reports as gone return None, an empty
list or False instead of raising.
"""
from __future__ import annotations

from typing import TYPE_CHECKING, Any, Hashable, List, Optional, Sequence

from core.geometry import Point, Rect, Size, clamp_to_bounds, relocate_frame, unit_to_frame
from core.logging.logger import get_logger
from core.windows.backend import Screen, WindowUnavailableError
from engine.directional_targeting import Direction, focus_first_valid, windows_in_direction
from engine.screen_mapper import screen_for, screen_in_direction

if TYPE_CHECKING:  # pragma: no cover - imported for typing only
    from engine.window_manager import WindowManager

logger = get_logger(__name__)


class Window:
    def __init__(self, handle: Any, manager: "WindowManager") -> None:
        self._handle = handle
        self._manager = manager

    @property
    def handle(self) -> Any:
        return self._handle

    def __eq__(self, other: object) -> bool:
        return isinstance(other, Window) and other._handle == self._handle

    def __hash__(self) -> int:
        return hash(self._handle)

    def __repr__(self) -> str:
        return f"Window(id={self.id()!r})"

    @property
    def _backend(self):
        return self._manager.backend

    @property
    def _scheduler(self):
        return self._manager.scheduler

    # ------------------------------------------------------------------
    # Identity and state
    # ------------------------------------------------------------------

    def id(self) -> Optional[Hashable]:
        try:
            return self._backend.id(self._handle)
        except WindowUnavailableError:
            return None

    def is_minimized(self) -> bool:
        try:
            return bool(self._backend.is_minimized(self._handle))
        except WindowUnavailableError:
            return False

    def is_fullscreen(self) -> bool:
        try:
            return bool(self._backend.is_fullscreen(self._handle))
        except WindowUnavailableError:
            return False

    def is_visible(self) -> bool:
        """Not hidden and not minimized. Says nothing about being obscured."""
        try:
            return not self._backend.is_hidden(self._handle) and not self._backend.is_minimized(self._handle)
        except WindowUnavailableError:
            return False

    # ------------------------------------------------------------------
    # Frame
    # ------------------------------------------------------------------

    def frame(self) -> Optional[Rect]:
        """Intended frame (tween target while animating), None if the window is gone."""
        try:
            return self._scheduler.frame(self._handle)
        except WindowUnavailableError:
            logger.debug("frame() on vanished window", exc_info=True)
            return None

    def top_left(self) -> Optional[Point]:
        frame = self.frame()
        return frame.top_left if frame is not None else None

    def size(self) -> Optional[Size]:
        frame = self.frame()
        return frame.size if frame is not None else None

    def set_frame(self, frame: Rect, duration: Any = None) -> "Window":
        """
        Set the window frame, animated over ``duration`` seconds.

        Args:
            frame: Target frame in absolute coordinates
            duration: Seconds; None uses the manager's animation_duration
        """
        if duration is None:
            duration = self._manager.animation_duration
        try:
            self._scheduler.set_frame(self._handle, frame, duration)
        except WindowUnavailableError:
            logger.debug("set_frame() on vanished window", exc_info=True)
        return self

    def set_top_left(self, point: Point) -> "Window":
        return self._stop_then("set_top_left", False, point)

    def set_size(self, size: Size) -> "Window":
        return self._stop_then("set_size", False, size)

    def minimize(self) -> "Window":
        return self._stop_then("minimize", True)

    def unminimize(self) -> "Window":
        return self._stop_then("unminimize", False)

    def toggle_zoom(self) -> "Window":
        return self._stop_then("toggle_zoom", True)

    def set_fullscreen(self, fullscreen: bool) -> "Window":
        return self._stop_then("set_fullscreen", True, fullscreen)

    def toggle_fullscreen(self) -> "Window":
        return self.set_fullscreen(not self.is_fullscreen())

    def close(self) -> bool:
        try:
            self._scheduler.stop_animation(self._handle, snap=True)
            return bool(self._backend.close(self._handle))
        except WindowUnavailableError:
            logger.debug("close() on vanished window", exc_info=True)
            self._scheduler.stop_animation(self._handle, snap=False)
            return False

    def _stop_then(self, operation: str, snap: bool, *args: Any) -> "Window":
        try:
            self._scheduler.stop_animation(self._handle, snap=snap)
            getattr(self._backend, operation)(self._handle, *args)
        except WindowUnavailableError:
            logger.debug("%s() on vanished window", operation, exc_info=True)
            self._scheduler.stop_animation(self._handle, snap=False)
        return self

    def focus(self) -> bool:
        try:
            return bool(self._backend.focus(self._handle))
        except WindowUnavailableError:
            logger.debug("focus() on vanished window", exc_info=True)
            return False

    # ------------------------------------------------------------------
    # Screens and layout
    # ------------------------------------------------------------------

    def screen(self) -> Optional[Screen]:
        """Screen containing most of the window, by area."""
        frame = self.frame()
        if frame is None:
            return None
        return screen_for(frame, self._manager.all_screens())

    def maximize(self, duration: Any = None) -> "Window":
        """Fill the usable area of the window's screen."""
        screen = self.screen()
        if screen is not None:
            self.set_frame(screen.frame(), duration)
        return self

    def move_to_unit(self, unit: Rect, duration: Any = None) -> "Window":
        """Occupy a fraction of the screen, e.g. ``Rect(0, 0, 0.5, 0.5)`` for the top-left quarter."""
        screen = self.screen()
        if screen is not None:
            self.set_frame(unit_to_frame(unit, screen.frame()), duration)
        return self

    def move_to_screen(self, target: Screen, duration: Any = None) -> "Window":
        """Move to ``target`` keeping relative position and size."""
        frame = self.frame()
        screen = self.screen()
        if frame is None or screen is None or target is None:
            return self
        self.set_frame(relocate_frame(frame, screen.frame(), target.frame()), duration)
        return self

    def _move_one_screen(self, direction: Direction, duration: Any) -> "Window":
        screen = self.screen()
        if screen is None:
            return self
        target = screen_in_direction(screen, self._manager.all_screens(), direction)
        if target is not None:
            self.move_to_screen(target, duration)
        return self

    def move_one_screen_east(self, duration: Any = None) -> "Window":
        return self._move_one_screen(Direction.EAST, duration)

    def move_one_screen_north(self, duration: Any = None) -> "Window":
        return self._move_one_screen(Direction.NORTH, duration)

    def move_one_screen_west(self, duration: Any = None) -> "Window":
        return self._move_one_screen(Direction.WEST, duration)

    def move_one_screen_south(self, duration: Any = None) -> "Window":
        return self._move_one_screen(Direction.SOUTH, duration)

    def ensure_is_in_screen_bounds(self, duration: Any = None) -> "Window":
        """Move and shrink the window so it fits inside its screen's usable area."""
        frame = self.frame()
        screen = self.screen()
        if frame is None or screen is None:
            return self
        clamped = clamp_to_bounds(frame, screen.frame())
        if clamped != frame:
            self.set_frame(clamped, duration)
        return self

    # ------------------------------------------------------------------
    # Other windows
    # ------------------------------------------------------------------

    def other_windows_same_screen(self) -> List["Window"]:
        screen = self.screen()
        if screen is None:
            return []
        return [w for w in self._manager.visible_windows()
                if w != self and w.screen() == screen]

    def other_windows_all_screens(self) -> List["Window"]:
        return [w for w in self._manager.visible_windows() if w != self]

    def windows_in_direction(self, direction: Direction,
                             candidates: Optional[Sequence["Window"]] = None,
                             frontmost: bool = False, strict: bool = False) -> List["Window"]:
        """
        Windows lying in ``direction``, nearest first.

        Args:
            direction: Compass direction to look in
            candidates: Front-to-back windows to consider; defaults to every
                visible window in stacking order
            frontmost: Place unoccluded windows before occluded ones
            strict: Only consider windows within 45° of the direction's axis
        """
        if candidates is None:
            candidates = self._manager.ordered_windows()
        return windows_in_direction(self, int(direction), candidates, frontmost, strict)

    def windows_to_east(self, candidates=None, frontmost=False, strict=False) -> List["Window"]:
        return self.windows_in_direction(Direction.EAST, candidates, frontmost, strict)

    def windows_to_north(self, candidates=None, frontmost=False, strict=False) -> List["Window"]:
        return self.windows_in_direction(Direction.NORTH, candidates, frontmost, strict)

    def windows_to_west(self, candidates=None, frontmost=False, strict=False) -> List["Window"]:
        return self.windows_in_direction(Direction.WEST, candidates, frontmost, strict)

    def windows_to_south(self, candidates=None, frontmost=False, strict=False) -> List["Window"]:
        return self.windows_in_direction(Direction.SOUTH, candidates, frontmost, strict)

    def focus_window_in_direction(self, direction: Direction, candidates=None,
                                  frontmost: bool = False, strict: bool = False) -> bool:
        """Focus the nearest window in ``direction`` that accepts focus."""
        return focus_first_valid(self.windows_in_direction(direction, candidates, frontmost, strict))

    def focus_window_east(self, candidates=None, frontmost=False, strict=False) -> bool:
        return self.focus_window_in_direction(Direction.EAST, candidates, frontmost, strict)

    def focus_window_north(self, candidates=None, frontmost=False, strict=False) -> bool:
        return self.focus_window_in_direction(Direction.NORTH, candidates, frontmost, strict)

    def focus_window_west(self, candidates=None, frontmost=False, strict=False) -> bool:
        return self.focus_window_in_direction(Direction.WEST, candidates, frontmost, strict)

    def focus_window_south(self, candidates=None, frontmost=False, strict=False) -> bool:
        return self.focus_window_in_direction(Direction.SOUTH, candidates, frontmost, strict)
