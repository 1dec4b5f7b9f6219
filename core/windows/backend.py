"""
Collaborator interfaces consumed by the scheduler and the window engine.

Everything here is implemented elsewhere (native bindings, a compositor IPC
client, or :mod:`core.windows.qt_backend` for in-process Qt windows). The
engine only ever talks to these protocols.

Backends signal a window that disappeared between enumeration and use by
raising :class:`WindowUnavailableError`. The engine turns that into "no
result" rather than letting it reach callers.
"""
from __future__ import annotations

from typing import Any, Hashable, Optional, Protocol, Sequence

from core.geometry import Point, Rect, Size


class WindowUnavailableError(RuntimeError):
    """Raised by a backend when a window vanished or rejects the request."""


class WindowBackend(Protocol):
    def all_windows(self) -> list[Any]: ...

    def focused_window(self) -> Optional[Any]: ...

    def id(self, window: Any) -> Optional[Hashable]: ...

    def get_frame(self, window: Any) -> Rect: ...

    def set_frame(self, window: Any, frame: Rect) -> None: ...

    def set_top_left(self, window: Any, point: Point) -> None: ...

    def set_size(self, window: Any, size: Size) -> None: ...

    def minimize(self, window: Any) -> None: ...

    def unminimize(self, window: Any) -> None: ...

    def close(self, window: Any) -> bool: ...

    def toggle_zoom(self, window: Any) -> None: ...

    def set_fullscreen(self, window: Any, fullscreen: bool) -> None: ...

    def is_minimized(self, window: Any) -> bool: ...

    def is_fullscreen(self, window: Any) -> bool: ...

    def is_hidden(self, window: Any) -> bool: ...

    def focus(self, window: Any) -> bool: ...


class Screen(Protocol):
    def frame(self) -> Rect:
        """Usable area, excluding menu bars, docks and panels."""
        ...

    def full_frame(self) -> Rect:
        """Whole display area including reserved chrome."""
        ...


class DisplayEnumerator(Protocol):
    def all_screens(self) -> list[Screen]: ...


class ZOrderProvider(Protocol):
    def ordered_window_ids(self) -> Sequence[Hashable]:
        """Window ids front to back."""
        ...
