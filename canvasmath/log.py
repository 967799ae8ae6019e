"""
canvasmath.log - Logging module with proper Python exception handling.

Usage:
    from canvasmath import log

    log.debug("Rebasing object")
    log.warn("Matrix is singular")

    try:
        invert_transform(matrix)
    except ValueError as e:
        log.error(e, "Failed to rebase object")  # includes traceback

    log.set_level(log.Level.DEBUG)
    log.set_callback(lambda level, msg: print(level.name, msg))
"""

import logging
import traceback
from enum import IntEnum

_logger = logging.getLogger("canvasmath")
_logger.addHandler(logging.NullHandler())


class Level(IntEnum):
    """Log levels, ordered like the standard logging levels."""

    DEBUG = logging.DEBUG
    INFO = logging.INFO
    WARN = logging.WARNING
    ERROR = logging.ERROR


class _CallbackHandler(logging.Handler):
    """Forwards records to a user callback as (Level, message)."""

    def __init__(self, callback):
        super().__init__()
        self.callback = callback

    def emit(self, record: logging.LogRecord):
        try:
            level = Level(record.levelno)
        except ValueError:
            level = Level.ERROR if record.levelno > Level.ERROR else Level.DEBUG
        self.callback(level, record.getMessage())


_callback_handler = None


def debug(msg_or_exc, context: str = ""):
    """Log debug message or exception with context."""
    if isinstance(msg_or_exc, BaseException):
        _log_exception(_logger.debug, msg_or_exc, context)
    else:
        _logger.debug(str(msg_or_exc))


def info(msg_or_exc, context: str = ""):
    """Log info message or exception with context."""
    if isinstance(msg_or_exc, BaseException):
        _log_exception(_logger.info, msg_or_exc, context)
    else:
        _logger.info(str(msg_or_exc))


def warn(msg_or_exc, context: str = ""):
    """Log warning message or exception with context."""
    if isinstance(msg_or_exc, BaseException):
        _log_exception(_logger.warning, msg_or_exc, context)
    else:
        _logger.warning(str(msg_or_exc))


def warning(msg_or_exc, context: str = ""):
    """Alias for warn()."""
    warn(msg_or_exc, context)


def error(msg_or_exc, context: str = ""):
    """Log error message or exception with context."""
    if isinstance(msg_or_exc, BaseException):
        _log_exception(_logger.error, msg_or_exc, context)
    else:
        _logger.error(str(msg_or_exc))


def exception(msg: str = ""):
    """Log error with current exception traceback."""
    _logger.exception(msg)


def _log_exception(log_func, exc: BaseException, context: str):
    """Format and log exception with traceback."""
    exc_type = type(exc).__name__
    exc_msg = str(exc)

    tb = "".join(traceback.format_exception(type(exc), exc, exc.__traceback__))

    if context:
        full_msg = f"{context}: {exc_type}: {exc_msg}\n{tb}"
    else:
        full_msg = f"{exc_type}: {exc_msg}\n{tb}"

    log_func(full_msg)


def set_level(level: Level):
    """Set the minimum level that reaches handlers and the callback."""
    _logger.setLevel(int(level))


def set_callback(callback):
    """Route log records to callback(level, message). Pass None to detach."""
    global _callback_handler
    if _callback_handler is not None:
        _logger.removeHandler(_callback_handler)
        _callback_handler = None
    if callback is not None:
        _callback_handler = _CallbackHandler(callback)
        _logger.addHandler(_callback_handler)
