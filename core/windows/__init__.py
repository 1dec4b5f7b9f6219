"""
Window-system collaborators.

The protocol module is imported eagerly; the Qt implementation is loaded on
first attribute access so headless consumers that bring their own backend
never pull in QtWidgets.
"""

from importlib import import_module
from typing import Any

from .backend import (
    DisplayEnumerator,
    Screen,
    WindowBackend,
    WindowUnavailableError,
    ZOrderProvider,
)

__all__ = [
    "DisplayEnumerator",
    "Screen",
    "WindowBackend",
    "WindowUnavailableError",
    "ZOrderProvider",
    "qt_backend",
]


def __getattr__(name: str) -> Any:
    if name == "qt_backend":
        module = import_module(f"{__name__}.{name}")
        globals()[name] = module
        return module
    raise AttributeError(f"module {__name__!r} has no attribute {name!r}")
