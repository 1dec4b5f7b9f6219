"""
Qt implementations of the window-system collaborators.

QtWindowBackend drives the application's own top-level QWidgets, and
QtDisplayEnumerator exposes QGuiApplication.screens(). Qt offers no query
for the global stacking order, so the backend tracks it itself: windows
enter at the front when first seen (behind the window last raised through
focus()) and move to the front whenever they are focused or become the
active window.
"""
from __future__ import annotations

from typing import Hashable, List, Optional

from PySide6.QtCore import QObject
from PySide6.QtGui import QGuiApplication, QScreen
from PySide6.QtWidgets import QApplication, QWidget
from shiboken6 import Shiboken

from core.geometry import Point, Rect, Size
from core.logging.logger import get_logger
from core.windows.backend import WindowUnavailableError

logger = get_logger(__name__)


class QtScreen:
    """Screen adapter over a QScreen."""

    def __init__(self, screen: QScreen) -> None:
        self._screen = screen

    @property
    def qscreen(self) -> QScreen:
        return self._screen

    def name(self) -> str:
        return self._screen.name()

    def frame(self) -> Rect:
        return Rect.from_qrect(self._screen.availableGeometry())

    def full_frame(self) -> Rect:
        return Rect.from_qrect(self._screen.geometry())

    def __eq__(self, other: object) -> bool:
        return isinstance(other, QtScreen) and other._screen is self._screen

    def __hash__(self) -> int:
        return hash(id(self._screen))

    def __repr__(self) -> str:
        return f"QtScreen({self.name()!r}, {self.full_frame()})"


class QtDisplayEnumerator:
    def all_screens(self) -> List[QtScreen]:
        return [QtScreen(screen) for screen in QGuiApplication.screens()]


class QtWindowBackend(QObject):
    """WindowBackend and ZOrderProvider for top-level QWidgets."""

    def __init__(self) -> None:
        super().__init__()
        self._stack: List[Hashable] = []
        self._focused_id: Optional[Hashable] = None

    # ------------------------------------------------------------------
    # Enumeration and identity
    # ------------------------------------------------------------------

    def all_windows(self) -> List[QWidget]:
        return [w for w in QApplication.topLevelWidgets() if w.isWindow()]

    def focused_window(self) -> Optional[QWidget]:
        return QApplication.activeWindow()

    def id(self, window: QWidget) -> Optional[Hashable]:
        if window is None or not Shiboken.isValid(window):
            return None
        return Shiboken.getCppPointer(window)[0]

    def _checked(self, window: QWidget) -> QWidget:
        if window is None or not Shiboken.isValid(window):
            raise WindowUnavailableError("Qt window has been deleted")
        return window

    # ------------------------------------------------------------------
    # Geometry
    # ------------------------------------------------------------------

    def get_frame(self, window: QWidget) -> Rect:
        return Rect.from_qrect(self._checked(window).geometry())

    def set_frame(self, window: QWidget, frame: Rect) -> None:
        self._checked(window).setGeometry(frame.to_qrect())

    def set_top_left(self, window: QWidget, point: Point) -> None:
        self._checked(window).move(point.to_qpoint())

    def set_size(self, window: QWidget, size: Size) -> None:
        self._checked(window).resize(size.to_qsize())

    # ------------------------------------------------------------------
    # State
    # ------------------------------------------------------------------

    def minimize(self, window: QWidget) -> None:
        self._checked(window).showMinimized()

    def unminimize(self, window: QWidget) -> None:
        self._checked(window).showNormal()

    def close(self, window: QWidget) -> bool:
        widget = self._checked(window)
        window_id = self.id(widget)
        closed = bool(widget.close())
        if closed and window_id in self._stack:
            self._stack.remove(window_id)
        return closed

    def toggle_zoom(self, window: QWidget) -> None:
        widget = self._checked(window)
        if widget.isMaximized():
            widget.showNormal()
        else:
            widget.showMaximized()

    def set_fullscreen(self, window: QWidget, fullscreen: bool) -> None:
        widget = self._checked(window)
        if fullscreen:
            widget.showFullScreen()
        else:
            widget.showNormal()

    def is_minimized(self, window: QWidget) -> bool:
        return self._checked(window).isMinimized()

    def is_fullscreen(self, window: QWidget) -> bool:
        return self._checked(window).isFullScreen()

    def is_hidden(self, window: QWidget) -> bool:
        return not self._checked(window).isVisible()

    def focus(self, window: QWidget) -> bool:
        widget = self._checked(window)
        if not widget.isVisible():
            return False
        widget.raise_()
        widget.activateWindow()
        self._sync_stack()
        window_id = self.id(widget)
        self._bring_to_front(window_id)
        self._focused_id = window_id
        return True

    # ------------------------------------------------------------------
    # Stacking order
    # ------------------------------------------------------------------

    def _bring_to_front(self, window_id: Optional[Hashable]) -> None:
        if window_id is None:
            return
        if window_id in self._stack:
            self._stack.remove(window_id)
        self._stack.insert(0, window_id)

    def _sync_stack(self) -> None:
        """Drop dead ids and register windows not seen before.

        New windows enter at the front, except that they stay behind the
        window most recently focused through focus().
        """
        live = [self.id(w) for w in self.all_windows()]
        live_ids = {window_id for window_id in live if window_id is not None}
        self._stack = [window_id for window_id in self._stack if window_id in live_ids]
        if self._focused_id not in live_ids:
            self._focused_id = None
        insert_at = 0
        if self._focused_id is not None:
            insert_at = self._stack.index(self._focused_id) + 1
        for window_id in live:
            if window_id is not None and window_id not in self._stack:
                self._stack.insert(insert_at, window_id)

    def ordered_window_ids(self) -> List[Hashable]:
        self._sync_stack()
        active = self.focused_window()
        if active is not None:
            active_id = self.id(active)
            if active_id != self._focused_id:
                self._focused_id = None
            self._bring_to_front(active_id)
        return list(self._stack)
