"""
Shared pytest fixtures for windowmotion tests.
"""
import os
import sys

import pytest

os.environ.setdefault("QT_QPA_PLATFORM", "offscreen")

from PySide6.QtWidgets import QApplication  # noqa: E402

from tests._window_test_utils import FakeClock, FakeDisplays, FakeScreen, FakeWindowBackend  # noqa: E402
from core.geometry import Rect  # noqa: E402


@pytest.fixture(scope='session')
def qt_app():
    """Create QApplication instance for tests."""
    app = QApplication.instance()
    if app is None:
        app = QApplication(sys.argv)
    yield app
    # Don't quit - causes issues with pytest


@pytest.fixture
def settings_manager(qt_app):
    """Create SettingsManager instance for testing."""
    from core.settings import SettingsManager
    manager = SettingsManager(organization="Test", application="WindowMotionTest")
    manager.clear()
    manager.reset_to_defaults()
    yield manager
    manager.clear()


@pytest.fixture
def clock():
    return FakeClock()


@pytest.fixture
def backend():
    return FakeWindowBackend()


@pytest.fixture
def displays():
    """Two side-by-side 1000x1000 screens with a 25px menu bar."""
    return FakeDisplays([
        FakeScreen(Rect(0, 0, 1000, 1000), Rect(0, 25, 1000, 975), name="left"),
        FakeScreen(Rect(1000, 0, 1000, 1000), Rect(1000, 25, 1000, 975), name="right"),
    ])


@pytest.fixture
def scheduler(qt_app, backend, clock):
    from core.animation import FrameAnimationScheduler
    sched = FrameAnimationScheduler(backend, fps=60, clock=clock)
    yield sched
    sched.cleanup()


@pytest.fixture
def window_manager(qt_app, backend, displays, clock):
    from engine import WindowManager
    manager = WindowManager(backend, displays, clock=clock)
    yield manager
    manager.shutdown()
