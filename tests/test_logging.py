"""Tests for logging setup and console suppression."""
import io
import logging

import pytest

import core.logging.logger as logger_module
from core.logging.logger import (
    SuppressingStreamHandler,
    get_log_dir,
    get_logger,
    is_perf_metrics_enabled,
    is_verbose_logging,
    set_perf_metrics_enabled,
    setup_logging,
)


def _record(name, level, msg):
    return logging.LogRecord(name=name, level=level, pathname="", lineno=0,
                             msg=msg, args=None, exc_info=None)


@pytest.fixture
def handler():
    stream = io.StringIO()
    h = SuppressingStreamHandler(stream)
    h.setFormatter(logging.Formatter("%(name)s:%(message)s"))
    yield h, stream


def test_repeated_source_is_collapsed(handler):
    h, stream = handler
    for i in range(4):
        h.emit(_record("animation.scheduler", logging.DEBUG, f"tick {i}"))
    h.emit(_record("engine.manager", logging.INFO, "other"))

    lines = stream.getvalue().splitlines()
    assert lines == [
        "animation.scheduler:tick 0",
        "animation.scheduler:[3 Suppressed: CHECK LOG]",
        "engine.manager:other",
    ]


def test_warnings_are_never_suppressed(handler):
    h, stream = handler
    h.emit(_record("a", logging.INFO, "one"))
    h.emit(_record("a", logging.INFO, "two"))
    h.emit(_record("a", logging.WARNING, "careful"))
    h.emit(_record("a", logging.WARNING, "careful again"))

    lines = stream.getvalue().splitlines()
    assert lines == [
        "a:one",
        "a:[1 Suppressed: CHECK LOG]",
        "a:careful",
        "a:careful again",
    ]


def test_close_flushes_pending_summary(handler):
    h, stream = handler
    h.emit(_record("a", logging.DEBUG, "one"))
    h.emit(_record("a", logging.DEBUG, "two"))
    h.close()
    assert "[1 Suppressed: CHECK LOG]" in stream.getvalue()


@pytest.fixture
def isolated_root(monkeypatch):
    """Restore root logger handlers and module globals after setup_logging()."""
    root = logging.getLogger()
    handlers = list(root.handlers)
    level = root.level
    monkeypatch.setattr(logger_module, "_BASE_DIR", logger_module._BASE_DIR)
    monkeypatch.setattr(logger_module, "_VERBOSE", False)
    yield root
    for h in list(root.handlers):
        if h not in handlers:
            root.removeHandler(h)
            h.close()
    root.setLevel(level)


def test_setup_logging_writes_rotating_file(tmp_path, isolated_root):
    setup_logging(debug=False, base_dir=tmp_path)

    log_file = tmp_path / "logs" / "windowmotion.log"
    assert get_log_dir() == tmp_path / "logs"
    assert log_file.exists()
    assert isolated_root.level == logging.INFO

    get_logger("engine.window").info("hello from test")
    for h in isolated_root.handlers:
        h.flush()
    assert "hello from test" in log_file.read_text(encoding="utf-8")


def test_verbose_implies_debug(tmp_path, isolated_root):
    setup_logging(verbose=True, base_dir=tmp_path)
    assert is_verbose_logging()
    assert isolated_root.level == logging.DEBUG
    assert any(isinstance(h, SuppressingStreamHandler) for h in isolated_root.handlers)


def test_short_name_overrides():
    assert get_logger("core.animation.frame_scheduler").name == "animation.scheduler"
    assert get_logger("some.module").name == "some.module"


def test_perf_metrics_toggle():
    original = is_perf_metrics_enabled()
    try:
        set_perf_metrics_enabled(True)
        assert is_perf_metrics_enabled()
        set_perf_metrics_enabled(False)
        assert not is_perf_metrics_enabled()
    finally:
        set_perf_metrics_enabled(original)
