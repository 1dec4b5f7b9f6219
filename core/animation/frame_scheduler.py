"""
Frame animation scheduler.

Owns the registry of in-flight window frame tweens and the single QTimer
that advances them. The timer runs only while the registry is non-empty:
it is started lazily by set_frame() and stopped by whichever path empties
the registry (natural completion, stop_animation(), a window that vanished
mid-tween, or cleanup()).

A new set_frame() on a window that is already animating replaces the old
tween. The replacement starts from the window's live backend frame, which
the previous ticks have already moved, so motion never jumps backward.

frame() reports the *target* of an in-flight tween rather than the
transient backend value so that layout code composed of several calls
(maximize, then move to a unit rect, ...) computes against intended
geometry.
"""
import math
import time
from typing import Any, Callable, Dict, Hashable, Optional

from PySide6.QtCore import QObject, QTimer, Signal, Qt

from core.animation.easing import ease
from core.animation.types import EasingCurve, FrameAnimation, SchedulerState
from core.geometry import Rect
from core.logging.logger import get_logger, is_perf_metrics_enabled, is_verbose_logging
from core.windows.backend import WindowBackend, WindowUnavailableError

logger = get_logger(__name__)


def coerce_duration(duration: Any) -> float:
    """Return ``duration`` as float seconds; anything non-numeric means instant."""
    if isinstance(duration, bool) or not isinstance(duration, (int, float)):
        return 0.0
    value = float(duration)
    if not math.isfinite(value):
        return 0.0
    return value


class FrameAnimationScheduler(QObject):
    """
    Animates window frames through a WindowBackend.

    Signals carry the animated window's id.
    """

    animation_started = Signal(object)
    animation_completed = Signal(object)
    animation_cancelled = Signal(object)
    state_changed = Signal(object)  # SchedulerState

    def __init__(self, backend: WindowBackend, fps: int = 60,
                 easing: EasingCurve = EasingCurve.QUAD_OUT,
                 clock: Optional[Callable[[], float]] = None):
        """
        Initialize the scheduler.

        Args:
            backend: Window backend used to read and write frames
            fps: Target tick rate
            easing: Curve applied to normalized elapsed time
            clock: Monotonic seconds source, defaults to time.monotonic
        """
        super().__init__()

        self._backend = backend
        self._clock = clock or time.monotonic
        self.easing = easing
        self.fps = max(10, min(240, int(fps)))
        self.frame_time = 1.0 / self.fps

        self._animations: Dict[Hashable, FrameAnimation] = {}
        self._state = SchedulerState.IDLE

        # `[PERF] [ANIM]` counters for the current RUNNING period.
        self._profile_start_ts: Optional[float] = None
        self._profile_frame_count: int = 0

        self._timer = QTimer()
        self._timer.setTimerType(Qt.TimerType.PreciseTimer)
        self._timer.setInterval(int(self.frame_time * 1000))
        self._timer.timeout.connect(self._update_all)

        logger.debug("FrameAnimationScheduler initialized (fps=%d, easing=%s)",
                     self.fps, self.easing.value)

    # ------------------------------------------------------------------
    # Public API
    # ------------------------------------------------------------------

    @property
    def state(self) -> SchedulerState:
        return self._state

    def is_ticking(self) -> bool:
        return self._state is SchedulerState.RUNNING

    def active_count(self) -> int:
        return len(self._animations)

    def has_animation(self, window: Any) -> bool:
        return self._window_id(window) in self._animations

    def animation_for(self, window: Any) -> Optional[FrameAnimation]:
        window_id = self._window_id(window)
        if window_id is None:
            return None
        return self._animations.get(window_id)

    def set_target_fps(self, fps: int) -> None:
        """Update target FPS and reconfigure the timer interval safely."""
        try:
            new_fps = max(10, min(240, int(fps)))
        except (TypeError, ValueError):
            new_fps = 60
        if new_fps == self.fps:
            return
        self.fps = new_fps
        self.frame_time = 1.0 / self.fps
        was_active = self._timer.isActive()
        if was_active:
            self._timer.stop()
        self._timer.setInterval(int(self.frame_time * 1000))
        if was_active:
            self._timer.start()
        logger.info("FrameAnimationScheduler target FPS set to %d", self.fps)

    def set_frame(self, window: Any, target: Rect, duration: Any) -> Any:
        """
        Set or override a window's intended frame.

        Args:
            window: Backend window handle
            target: Frame to end up at
            duration: Seconds; <= 0 or non-numeric applies ``target`` at once

        Returns:
            ``window``
        """
        duration = coerce_duration(duration)
        window_id = self._window_id(window)
        self._replace_animation(window_id)

        if duration <= 0 or window_id is None:
            if not self._animations:
                self._stop_ticking()
            self._backend.set_frame(window, target)
            return window

        start_frame = self._backend.get_frame(window)
        self._animations[window_id] = FrameAnimation(
            window=window,
            window_id=window_id,
            start_time=self._clock(),
            duration=duration,
            start_frame=start_frame,
            end_frame=target,
        )
        self.animation_started.emit(window_id)
        logger.debug("[ANIM] Frame animation started: id=%s %s -> %s (%.3fs)",
                     window_id, start_frame, target, duration)
        self._ensure_running()
        return window

    def animation_frame(self, window: Any) -> Optional[Rect]:
        """Target frame of ``window``'s in-flight tween, if any."""
        anim = self.animation_for(window)
        if anim is None:
            return None
        return anim.end_frame

    def frame(self, window: Any) -> Rect:
        """Intended frame: the tween target while animating, else the backend frame."""
        pending = self.animation_frame(window)
        if pending is not None:
            return pending
        return self._backend.get_frame(window)

    def stop_animation(self, window: Any, snap: bool = False) -> bool:
        """
        Remove ``window``'s tween.

        Args:
            window: Backend window handle
            snap: Write the tween's end frame to the backend before returning

        Returns:
            True if an animation was removed
        """
        window_id = self._window_id(window)
        if window_id is None:
            return False
        anim = self._animations.pop(window_id, None)
        if anim is None:
            return False
        self.animation_cancelled.emit(window_id)
        if not self._animations:
            self._stop_ticking()
        if snap:
            self._backend.set_frame(window, anim.end_frame)
        logger.debug("[ANIM] Frame animation stopped: id=%s snap=%s", window_id, snap)
        return True

    def _replace_animation(self, window_id: Optional[Hashable]) -> None:
        """Drop ``window_id``'s tween ahead of a new set_frame(), leaving the timer alone."""
        if window_id is None:
            return
        if self._animations.pop(window_id, None) is not None:
            self.animation_cancelled.emit(window_id)
            logger.debug("[ANIM] Frame animation replaced: id=%s", window_id)

    def cancel_all(self, snap: bool = False) -> None:
        """Stop every tween, optionally snapping each window to its target."""
        for anim in list(self._animations.values()):
            try:
                self.stop_animation(anim.window, snap=snap)
            except WindowUnavailableError:
                logger.debug("[ANIM] Snap skipped for vanished window %s",
                             anim.window_id, exc_info=True)
        self._animations.clear()
        self._stop_ticking()

    def cleanup(self) -> None:
        """Drop all tweens and release the timer."""
        logger.debug("Cleaning up FrameAnimationScheduler")
        self.cancel_all(snap=False)
        try:
            self._timer.timeout.disconnect(self._update_all)
        except (RuntimeError, TypeError):
            pass
        logger.info("FrameAnimationScheduler cleanup complete")

    # ------------------------------------------------------------------
    # Tick source
    # ------------------------------------------------------------------

    def _window_id(self, window: Any) -> Optional[Hashable]:
        try:
            return self._backend.id(window)
        except WindowUnavailableError:
            return None

    def _ensure_running(self) -> None:
        if self._state is SchedulerState.RUNNING:
            return
        self._state = SchedulerState.RUNNING
        self._profile_start_ts = self._clock()
        self._profile_frame_count = 0
        self._timer.start()
        self.state_changed.emit(self._state)
        logger.debug("FrameAnimationScheduler started")

    def _stop_ticking(self) -> None:
        if self._state is SchedulerState.IDLE:
            return
        self._state = SchedulerState.IDLE
        self._timer.stop()
        self._log_profile_summary()
        self.state_changed.emit(self._state)
        logger.debug("FrameAnimationScheduler stopped")

    def _update_all(self) -> None:
        """Advance every tween by one tick (called by the timer)."""
        now = self._clock()
        self._profile_frame_count += 1

        for window_id, anim in list(self._animations.items()):
            # Signal handlers may have stopped or replaced this entry.
            if self._animations.get(window_id) is not anim:
                continue
            t = anim.progress(now)
            try:
                if t >= 1.0:
                    self._animations.pop(window_id, None)
                    self._backend.set_frame(anim.window, anim.end_frame)
                    self.animation_completed.emit(window_id)
                    logger.debug("[ANIM] Frame animation completed: id=%s", window_id)
                    continue
                frame = anim.start_frame.lerp(anim.end_frame, ease(t, self.easing))
                self._backend.set_frame(anim.window, frame)
                if is_verbose_logging():
                    logger.debug("[ANIM] id=%s t=%.3f frame=%s", window_id, t, frame)
            except WindowUnavailableError:
                logger.debug("[ANIM] Window %s vanished mid-animation", window_id, exc_info=True)
                if self._animations.get(window_id) is anim:
                    del self._animations[window_id]
                    self.animation_cancelled.emit(window_id)

        if not self._animations:
            self._stop_ticking()

    def _log_profile_summary(self) -> None:
        """Emit a concise `[PERF] [ANIM]` summary for the last active run."""
        start = self._profile_start_ts
        frames = self._profile_frame_count
        self._profile_start_ts = None
        self._profile_frame_count = 0
        if start is None or frames <= 0 or not is_perf_metrics_enabled():
            return
        elapsed = self._clock() - start
        if elapsed <= 0.0:
            return
        logger.info(
            "[PERF] [ANIM] FrameAnimationScheduler metrics: duration=%.1fms, "
            "frames=%d, avg_fps=%.1f, fps_target=%d",
            elapsed * 1000.0,
            frames,
            frames / elapsed,
            self.fps,
        )
