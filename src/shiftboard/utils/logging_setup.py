"""
Shift Board: Logging Infrastructure
===================================
Console + rotating file logging under the ``shiftboard`` logger, plus two
helpers used by the core: call tracing and daily coverage checks.

Levels:
    TRACE (5): Store mutations, entry/exit with arguments
    DEBUG (10): Cell edits, lazy month materialization, satisfied days
    INFO (20): Load/save, roster changes
    WARNING (30): Understaffed days, rejected navigation, recovered records
    ERROR (40): Contract violations
"""
import functools
import logging
import sys
from logging.handlers import RotatingFileHandler
from pathlib import Path
from typing import Callable, Optional

TRACE = 5
logging.addLevelName(TRACE, "TRACE")

ROOT_LOGGER = "shiftboard"

CONSOLE_FORMAT = "[%(asctime)s] %(levelname)-7s %(name)s: %(message)s"
CONSOLE_DATEFMT = "%H:%M:%S"
FILE_FORMAT = "%(asctime)s | %(levelname)-8s | %(name)s:%(funcName)s:%(lineno)d | %(message)s"
FILE_DATEFMT = "%Y-%m-%d %H:%M:%S"


class ColoredFormatter(logging.Formatter):
    """Colours the whole line by level when the target stream is a terminal."""

    COLORS = {
        TRACE: "\033[90m",             # Gray
        logging.DEBUG: "\033[36m",     # Cyan
        logging.INFO: "\033[32m",      # Green
        logging.WARNING: "\033[33m",   # Yellow
        logging.ERROR: "\033[31m",     # Red
        logging.CRITICAL: "\033[35m",  # Magenta
    }
    RESET = "\033[0m"

    def __init__(self, fmt=None, datefmt=None, stream=None):
        super().__init__(fmt, datefmt)
        self.stream = stream

    def format(self, record):
        text = super().format(record)
        color = self.COLORS.get(record.levelno)
        isatty = getattr(self.stream, "isatty", None)
        if color and isatty is not None and isatty():
            return f"{color}{text}{self.RESET}"
        return text


def _parse_level(name: str) -> int:
    """Level name → number; accepts TRACE, unknown names give INFO."""
    level = logging.getLevelName(str(name).upper())
    return level if isinstance(level, int) else logging.INFO


def _console_handler(level: int) -> logging.Handler:
    handler = logging.StreamHandler(sys.stderr)
    handler.setLevel(level)
    handler.setFormatter(ColoredFormatter(CONSOLE_FORMAT, CONSOLE_DATEFMT, stream=sys.stderr))
    return handler


def _file_handler(path: Path, level: int, max_bytes: int, backup_count: int) -> logging.Handler:
    path.parent.mkdir(parents=True, exist_ok=True)
    handler = RotatingFileHandler(path, maxBytes=max_bytes, backupCount=backup_count, encoding="utf-8")
    handler.setLevel(level)
    handler.setFormatter(logging.Formatter(FILE_FORMAT, FILE_DATEFMT))
    return handler


def setup_logging(
    level: str = "INFO",
    log_file: Optional[str] = "logs/shiftboard.log",
    console_level: Optional[str] = None,
    max_bytes: int = 5 * 1024 * 1024,  # 5 MB
    backup_count: int = 3,
) -> logging.Logger:
    """
    Configure the ``shiftboard`` logger. Safe to call again: existing
    handlers are replaced.

    Args:
        level: Minimum level written to the log file
        log_file: Log file path (None = console only)
        console_level: Console level (defaults to ``level``)
        max_bytes: Size at which the file rotates
        backup_count: Rotated files to keep

    Returns:
        The ``shiftboard`` logger
    """
    logger = logging.getLogger(ROOT_LOGGER)
    logger.setLevel(TRACE)  # handlers filter
    for handler in list(logger.handlers):
        handler.close()
        logger.removeHandler(handler)

    file_level = _parse_level(level)
    cons_level = _parse_level(console_level or level)
    logger.addHandler(_console_handler(cons_level))
    if log_file:
        logger.addHandler(_file_handler(Path(log_file), file_level, max_bytes, backup_count))

    logger.info(
        f"Logging initialized: console={logging.getLevelName(cons_level)}, "
        f"file={logging.getLevelName(file_level) if log_file else 'disabled'}"
    )
    return logger


def get_logger(name: str) -> logging.Logger:
    """Module logger, e.g. ``get_logger("shiftboard.store")``."""
    return logging.getLogger(name)


def _short_repr(value, limit: int) -> str:
    text = repr(value)
    return text if len(text) <= limit else text[: limit - 1] + "…"


def log_function_call(func: Callable) -> Callable:
    """
    Trace entry and exit of ``func`` at TRACE level; exceptions are logged
    at ERROR and re-raised.

    Usage:
        @log_function_call
        def set_status(self, month, staff_id, day_index, status):
            ...
    """
    logger = logging.getLogger(func.__module__)

    @functools.wraps(func)
    def wrapper(*args, **kwargs):
        name = func.__name__
        if logger.isEnabledFor(TRACE):
            parts = [_short_repr(a, 50) for a in args[:5]]
            parts += [f"{k}={_short_repr(v, 30)}" for k, v in list(kwargs.items())[:3]]
            logger.log(TRACE, f"→ {name}({', '.join(parts)})")
        try:
            result = func(*args, **kwargs)
        except Exception as e:
            logger.error(f"✖ {name} raised: {type(e).__name__}: {e}")
            raise
        logger.log(TRACE, f"← {name} returned: {_short_repr(result, 100)}")
        return result

    return wrapper


def log_coverage_check(
    logger: logging.Logger,
    day: int,
    count: int,
    minimum: int,
    level: int = logging.DEBUG,
):
    """
    Log the headcount of one day (1-based). Understaffed days go to WARNING,
    satisfied days to ``level``.
    """
    if count >= minimum:
        logger.log(level, f"[✓] day {day}: {count} working (min {minimum})")
    else:
        logger.warning(f"[✗] day {day}: {count} working (min {minimum})")
