"""
Window manager service.

Owns the FrameAnimationScheduler for one backend and exposes window
enumeration built from the collaborator interfaces. Construct it once at
startup and call shutdown() when done; there is no module-level state, so
tests can run several independent managers side by side.
"""
from __future__ import annotations

from typing import Any, Callable, Hashable, List, Optional

from PySide6.QtCore import QObject

from core.animation import EasingCurve, FrameAnimationScheduler, coerce_duration, easing_from_name
from core.geometry import Rect
from core.logging.logger import get_logger
from core.settings import DEFAULT_SETTINGS, SettingsManager
from core.windows.backend import (
    DisplayEnumerator,
    Screen,
    WindowBackend,
    WindowUnavailableError,
    ZOrderProvider,
)
from engine.screen_mapper import screen_for
from engine.window import Window

logger = get_logger(__name__)


class WindowManager(QObject):
    """
    Entry point for querying and moving windows.

    Animation defaults come from ``settings_manager`` when given (keys
    ``animation.duration``, ``animation.fps`` and ``animation.easing``) and
    follow later changes to those keys.
    """

    def __init__(
        self,
        backend: WindowBackend,
        displays: DisplayEnumerator,
        z_order: Optional[ZOrderProvider] = None,
        settings_manager: Optional[SettingsManager] = None,
        clock: Optional[Callable[[], float]] = None,
    ):
        """
        Args:
            backend: Window read/write primitives
            displays: Screen enumeration
            z_order: Front-to-back window ids; defaults to ``backend`` when it
                provides ordered_window_ids()
            settings_manager: Source of animation defaults
            clock: Monotonic clock handed to the scheduler
        """
        super().__init__()
        self.backend = backend
        self.displays = displays
        if z_order is None and hasattr(backend, "ordered_window_ids"):
            z_order = backend  # type: ignore[assignment]
        self.z_order = z_order
        self._settings = settings_manager

        self._animation_duration = float(DEFAULT_SETTINGS['animation.duration'])
        fps = int(DEFAULT_SETTINGS['animation.fps'])
        easing = EasingCurve.QUAD_OUT
        if settings_manager is not None:
            self._animation_duration = coerce_duration(
                settings_manager.get_float('animation.duration', self._animation_duration)
            )
            fps = settings_manager.get_int('animation.fps', fps)
            easing = easing_from_name(settings_manager.get('animation.easing', easing.value))
            settings_manager.on_changed('animation.duration', self._on_duration_changed)
            settings_manager.on_changed('animation.fps', self._on_fps_changed)
            settings_manager.on_changed('animation.easing', self._on_easing_changed)

        self.scheduler = FrameAnimationScheduler(backend, fps=fps, easing=easing, clock=clock)
        logger.info("WindowManager initialized (duration=%.3fs, fps=%d, easing=%s)",
                    self._animation_duration, self.scheduler.fps, easing.value)

    # ------------------------------------------------------------------
    # Configuration
    # ------------------------------------------------------------------

    @property
    def animation_duration(self) -> float:
        """Seconds used when a caller omits a duration; 0 disables animation."""
        return self._animation_duration

    @animation_duration.setter
    def animation_duration(self, value: Any) -> None:
        if self._settings is not None:
            self._settings.set('animation.duration', value)
        else:
            self._animation_duration = coerce_duration(value)

    def _on_duration_changed(self, new_value: Any, _old_value: Any) -> None:
        self._animation_duration = coerce_duration(SettingsManager.to_float(new_value, 0.0))
        logger.debug("Animation duration now %.3fs", self._animation_duration)

    def _on_fps_changed(self, new_value: Any, _old_value: Any) -> None:
        self.scheduler.set_target_fps(new_value)

    def _on_easing_changed(self, new_value: Any, _old_value: Any) -> None:
        self.scheduler.easing = easing_from_name(new_value, self.scheduler.easing)

    # ------------------------------------------------------------------
    # Enumeration
    # ------------------------------------------------------------------

    def wrap(self, handle: Any) -> Window:
        return Window(handle, self)

    def all_windows(self) -> List[Window]:
        return [self.wrap(handle) for handle in self.backend.all_windows()]

    def visible_windows(self) -> List[Window]:
        return [window for window in self.all_windows() if window.is_visible()]

    def ordered_windows(self) -> List[Window]:
        """Visible windows, front to back."""
        visible = self.visible_windows()
        if self.z_order is None:
            return visible
        by_id = {}
        for window in visible:
            window_id = window.id()
            if window_id is not None:
                by_id.setdefault(window_id, window)
        return [by_id[window_id] for window_id in self.z_order.ordered_window_ids()
                if window_id in by_id]

    def window_for_id(self, window_id: Hashable) -> Optional[Window]:
        for window in self.all_windows():
            if window.id() == window_id:
                return window
        return None

    def frontmost_window(self) -> Optional[Window]:
        """Focused window, else the first visible window in stacking order."""
        try:
            focused = self.backend.focused_window()
        except WindowUnavailableError:
            focused = None
        if focused is not None:
            return self.wrap(focused)
        ordered = self.ordered_windows()
        return ordered[0] if ordered else None

    def all_screens(self) -> List[Screen]:
        return list(self.displays.all_screens())

    def screen_for(self, frame: Rect) -> Optional[Screen]:
        return screen_for(frame, self.all_screens())

    # ------------------------------------------------------------------
    # Lifecycle
    # ------------------------------------------------------------------

    def shutdown(self) -> None:
        """Drop in-flight animations and stop the tick source."""
        self.scheduler.cleanup()
        logger.info("WindowManager shut down")
