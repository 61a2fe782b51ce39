# envfallback/core/utils/logger.py

"""
Logging configuration and utilities for envfallback.

envfallback is a library, so importing it never configures output on its
own: until an application calls ``setup_logging`` the package logger only
carries a ``NullHandler`` and records propagate to whatever the host
application has configured.

Key Features:
- Package logger named ``envfallback`` with lazy initialization
- Console output and optional file output via ``setup_logging``
- Default level taken from ``ENVFALLBACK_LOG_LEVEL`` when not given
- Standardized ``[MODULE] message | Context: ...`` helpers
"""

import logging
import os
import sys

LOGGER_NAME = "envfallback"
LOG_LEVEL_ENV_VAR = "ENVFALLBACK_LOG_LEVEL"

# Global logger instance for singleton pattern
_logger: logging.Logger | None = None

DEFAULT_LOG_LEVEL = "WARNING"
DEFAULT_LOG_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"


def _level_from_name(level: str) -> int:
    resolved = logging.getLevelName(level.strip().upper())
    if not isinstance(resolved, int):
        raise ValueError(f"Unknown log level: {level!r}")
    return resolved


def setup_logging(
    level: str | None = None,
    log_file: str | None = None,
    format_string: str | None = None,
) -> logging.Logger:
    """
    Set up console (and optionally file) logging for envfallback.

    Args:
        level: Logging level name (DEBUG, INFO, WARNING, ERROR, CRITICAL).
            Falls back to ``ENVFALLBACK_LOG_LEVEL``, then ``WARNING``.
        log_file: Path to a log file (optional). If provided, records are
            written to both stdout and the file.
        format_string: Custom log format string (optional).

    Returns:
        The configured package logger. Repeated calls reconfigure and
        return the same instance.
    """
    global _logger

    if level is None:
        level = os.getenv(LOG_LEVEL_ENV_VAR) or DEFAULT_LOG_LEVEL
    numeric_level = _level_from_name(level)

    logger = logging.getLogger(LOGGER_NAME)
    logger.disabled = False
    for handler in list(logger.handlers):
        logger.removeHandler(handler)
    logger.setLevel(numeric_level)

    formatter = logging.Formatter(format_string or DEFAULT_LOG_FORMAT)

    console_handler = logging.StreamHandler(sys.stdout)
    console_handler.setLevel(numeric_level)
    console_handler.setFormatter(formatter)
    logger.addHandler(console_handler)

    if log_file:
        file_handler = logging.FileHandler(log_file)
        file_handler.setLevel(numeric_level)
        file_handler.setFormatter(formatter)
        logger.addHandler(file_handler)

    _logger = logger
    return logger


def get_logger() -> logging.Logger:
    """
    Get the package logger.

    If ``setup_logging`` has not been called, the logger is returned with a
    single ``NullHandler`` attached and no level of its own.
    """
    global _logger
    if _logger is None:
        logger = logging.getLogger(LOGGER_NAME)
        if not logger.handlers:
            logger.addHandler(logging.NullHandler())
        _logger = logger
    return _logger


def _format(module: str, message: str, context: str = "") -> str:
    formatted = f"[{module.upper()}] {message}"
    if context:
        formatted += f" | Context: {context}"
    return formatted


def log_error(
    module: str, error: str, context: str = "", exception: Exception | None = None
) -> None:
    """
    Log a standardized error message.

    If an exception is provided the stack trace is included.
    """
    logger = get_logger()
    message = _format(module, error, context)
    if exception:
        logger.error(message, exc_info=exception)
    else:
        logger.error(message)


def log_warning(module: str, warning: str, context: str = "") -> None:
    """Log a standardized warning message."""
    get_logger().warning(_format(module, warning, context))


def log_info(module: str, message: str, context: str = "") -> None:
    """Log a standardized info message."""
    get_logger().info(_format(module, message, context))


def log_debug(module: str, message: str, context: str = "") -> None:
    """Log a standardized debug message."""
    logger = get_logger()
    if logger.isEnabledFor(logging.DEBUG):
        logger.debug(_format(module, message, context))


def reset_logging() -> None:
    """
    Reset the package logger.

    Removes every handler so the next ``setup_logging`` or ``get_logger``
    call starts from scratch. Mostly useful in tests.
    """
    global _logger
    logger = logging.getLogger(LOGGER_NAME)
    for handler in list(logger.handlers):
        logger.removeHandler(handler)
        handler.close()
    logger.setLevel(logging.NOTSET)
    _logger = None
