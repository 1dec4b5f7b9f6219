"""
Centralized logging configuration for windowmotion.

Uses rotating file handler with logs stored in logs/ directory.
Includes colored console output for debug mode.
"""
import logging
import os
import sys
from logging.handlers import RotatingFileHandler
from pathlib import Path


_VERBOSE: bool = False
_PERF_METRICS_ENABLED: bool = False
# Base directory for logs. Defaults to the project root; setup_logging()
# accepts an override so embedding applications can redirect it.
_BASE_DIR: Path = Path(__file__).parent.parent.parent

_env_perf = os.getenv("WINDOWMOTION_PERF_METRICS")
if _env_perf is not None:
    if str(_env_perf).strip().lower() in ("0", "false", "off", "no"):
        _PERF_METRICS_ENABLED = False
    elif str(_env_perf).strip().lower() in ("1", "true", "on", "yes"):
        _PERF_METRICS_ENABLED = True


class ColoredFormatter(logging.Formatter):
    """Formatter that adds colors to console output."""

    # ANSI color codes
    COLORS = {
        'DEBUG': '\033[36m',       # Cyan
        'INFO': '\033[32m',        # Green
        'WARNING': '\033[33m',     # Yellow
        'ERROR': '\033[31m',       # Red
        'CRITICAL': '\033[35m',    # Magenta
    }
    PERF_COLOR = '\033[38;5;135m'  # Purple for [PERF] telemetry
    RESET = '\033[0m'
    BOLD = '\033[1m'

    def format(self, record):
        original_levelname = record.levelname
        original_msg = record.msg

        color = None
        if '[PERF]' in str(record.msg):
            color = self.PERF_COLOR
        elif record.levelname in self.COLORS:
            color = self.COLORS[record.levelname]

        if color is None:
            return super().format(record)

        record.levelname = f"{self.BOLD}{color}{record.levelname}{self.RESET}"
        try:
            message = super().format(record)
        finally:
            record.levelname = original_levelname
            record.msg = original_msg
        return f"{color}{message}{self.RESET}"


class SuppressingStreamHandler(logging.StreamHandler):
    """Stream handler that suppresses consecutive duplicate sources.

    Repeated DEBUG/INFO lines from the same logger/level are collapsed into a
    single summary line like "[N Suppressed: CHECK LOG]" while file logs
    remain unaffected. Animation ticks are the main producer of such runs.
    """

    def __init__(self, *args, **kwargs):
        super().__init__(*args, **kwargs)
        self._last_name: str | None = None
        self._last_level: int | None = None
        self._suppress_count: int = 0
        self._last_record: logging.LogRecord | None = None

    def emit(self, record: logging.LogRecord) -> None:
        try:
            self._emit_with_suppression(record)
        except Exception:
            self.handleError(record)

    def _emit_with_suppression(self, record: logging.LogRecord) -> None:
        if record.levelno >= logging.WARNING:
            self._flush_summary()
            self._emit_record(record)
            self._reset_run()
            return

        if record.name == self._last_name and record.levelno == self._last_level:
            self._suppress_count += 1
            self._last_record = record
            return

        self._flush_summary()
        self._emit_record(record)
        self._last_name = record.name
        self._last_level = record.levelno
        self._suppress_count = 0
        self._last_record = record

    def _reset_run(self) -> None:
        self._last_name = None
        self._last_level = None
        self._suppress_count = 0
        self._last_record = None

    def _emit_record(self, record: logging.LogRecord) -> None:
        """Emit a single record with a Unicode-safe fallback for narrow consoles."""
        msg = self.format(record)
        stream = self.stream
        if stream is None:
            return
        text = msg + self.terminator
        try:
            stream.write(text)
        except UnicodeEncodeError:
            encoding = getattr(stream, "encoding", None) or "ascii"
            stream.write(
                text.encode(encoding, errors="replace").decode(encoding, errors="replace")
            )
        self.flush()

    def _flush_summary(self) -> None:
        if self._suppress_count <= 0 or self._last_record is None:
            self._suppress_count = 0
            return

        last = self._last_record
        summary = logging.LogRecord(
            last.name,
            last.levelno,
            last.pathname,
            last.lineno,
            f"[{self._suppress_count} Suppressed: CHECK LOG]",
            args=None,
            exc_info=None,
        )
        summary.created = last.created
        summary.msecs = last.msecs
        summary.relativeCreated = last.relativeCreated
        self._emit_record(summary)

        self._suppress_count = 0

    def close(self) -> None:
        try:
            self._flush_summary()
        finally:
            super().close()


def get_log_dir() -> Path:
    """Return the directory used for log files."""

    return _BASE_DIR / "logs"


def setup_logging(debug: bool = False, verbose: bool = False,
                  base_dir: Path | None = None) -> None:
    """
    Configure application logging with file rotation.

    Args:
        debug: If True, set log level to DEBUG and enable console output.
        verbose: When True, enables additional high-volume debug logs
            (per-tick animation frames, raw settings values). Verbose mode
            also implies debug-level logging.
        base_dir: Optional directory under which logs/ is created.
    """
    global _VERBOSE, _BASE_DIR

    debug_enabled = debug or verbose
    if base_dir is not None:
        _BASE_DIR = Path(base_dir)

    log_dir = get_log_dir()
    log_dir.mkdir(parents=True, exist_ok=True)

    log_file = log_dir / "windowmotion.log"

    level = logging.DEBUG if debug_enabled else logging.INFO

    # Aligned columns for logger name and level
    formatter = logging.Formatter(
        '%(asctime)s - %(name)-30s - %(levelname)-8s - %(message)s',
        datefmt='%Y-%m-%d %H:%M:%S'
    )

    # File handler with rotation (1MB max, keep 5 backups)
    file_handler = RotatingFileHandler(
        log_file,
        maxBytes=1 * 1024 * 1024,
        backupCount=5,
        encoding='utf-8'
    )
    file_handler.setFormatter(formatter)
    file_handler.setLevel(level)

    console_handler = SuppressingStreamHandler(sys.stdout)
    console_format = '%(asctime)s - %(name)-30s - %(levelname)-8s - %(message)s'
    if debug_enabled and sys.stdout.isatty():
        console_handler.setFormatter(ColoredFormatter(console_format, datefmt='%H:%M:%S'))
    else:
        console_handler.setFormatter(logging.Formatter(console_format, datefmt='%H:%M:%S'))
    console_handler.setLevel(level)

    root_logger = logging.getLogger()
    root_logger.setLevel(level)
    root_logger.addHandler(file_handler)

    if debug_enabled:
        root_logger.addHandler(console_handler)

    _VERBOSE = bool(verbose)

    root_logger.info("=" * 60)
    root_logger.info(
        "windowmotion logging initialized (debug=%s, verbose=%s)",
        debug_enabled,
        _VERBOSE,
    )
    root_logger.info("=" * 60)


_SHORT_NAME_OVERRIDES = {
    "core.animation.frame_scheduler": "animation.scheduler",
    "core.windows.qt_backend": "windows.qt",
    "engine.directional_targeting": "engine.targeting",
    "engine.window_manager": "engine.manager",
}


def get_logger(name: str) -> logging.Logger:
    """Get a logger instance with optional short-name overrides for noisy modules."""
    actual = _SHORT_NAME_OVERRIDES.get(name, name)
    return logging.getLogger(actual)


def is_verbose_logging() -> bool:
    """Return True when verbose debug logging is enabled globally."""

    return _VERBOSE


def set_perf_metrics_enabled(enabled: bool) -> None:
    """Toggle PERF metrics at runtime (tests and embedding applications)."""
    global _PERF_METRICS_ENABLED
    _PERF_METRICS_ENABLED = bool(enabled)


def is_perf_metrics_enabled() -> bool:
    """Return True when PERF metrics/telemetry are enabled globally."""

    return _PERF_METRICS_ENABLED
