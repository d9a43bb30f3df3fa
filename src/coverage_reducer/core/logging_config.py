"""
Coverage Reducer Logging Configuration

The package logs under the ``coverage_reducer`` logger tree, one child per
module (``coverage_reducer.processing.reduction``, ...). Nothing is printed
until an application calls :func:`setup_logging` or attaches its own
handlers. The default level comes from ``COVERAGE_REDUCER_LOG_LEVEL``.
"""

import logging
import sys
from contextlib import contextmanager
from pathlib import Path
from typing import IO, Iterator, Optional, Union

from .config import DEFAULT_LOG_FILE, DEFAULT_LOG_LEVEL, LOG_DATE_FORMAT, LOG_FORMAT
from .exceptions import ParameterError

PACKAGE_LOGGER = 'coverage_reducer'

LevelType = Union[int, str]


def _resolve_level(level: LevelType) -> int:
    """Turn a level name or number into a logging level number."""
    if isinstance(level, int):
        return level
    resolved = logging.getLevelName(str(level).upper())
    if not isinstance(resolved, int):
        raise ParameterError("level", str(level), "Unknown logging level")
    return resolved


def _package_logger() -> logging.Logger:
    return logging.getLogger(PACKAGE_LOGGER)


def _attach(logger: logging.Logger, handler: logging.Handler, level: int, formatter: logging.Formatter) -> None:
    handler.setLevel(level)
    handler.setFormatter(formatter)
    logger.addHandler(handler)


# ============================================================================
# Setup
# ============================================================================

def setup_logging(
    level: LevelType = logging.INFO,
    log_file: Optional[Union[str, Path]] = None,
    format_string: Optional[str] = None,
    date_format: Optional[str] = None,
    stream: Optional[IO[str]] = None,
) -> logging.Logger:
    """
    Send package log records to a stream and, optionally, a file.

    Calling it again replaces the handlers installed by the previous call.

    Args:
        level: Level name (case-insensitive) or logging constant
        log_file: Log file path (default: ``COVERAGE_REDUCER_LOG_FILE``)
        format_string: Record format (default: LOG_FORMAT)
        date_format: Timestamp format (default: LOG_DATE_FORMAT)
        stream: Console stream (default: sys.stdout)

    Returns:
        logging.Logger: The package logger

    Raises:
        ParameterError: If the level name is unknown

    Examples:
        >>> setup_logging('DEBUG')          # see which features were dropped
        >>> setup_logging(log_file='reduction.log')
    """
    level = _resolve_level(level)
    formatter = logging.Formatter(format_string or LOG_FORMAT, datefmt=date_format or LOG_DATE_FORMAT)

    logger = _package_logger()
    logger.setLevel(level)
    for handler in list(logger.handlers):
        logger.removeHandler(handler)
        handler.close()

    _attach(logger, logging.StreamHandler(stream or sys.stdout), level, formatter)

    log_file = log_file or DEFAULT_LOG_FILE
    if log_file:
        log_path = Path(log_file)
        log_path.parent.mkdir(parents=True, exist_ok=True)
        _attach(logger, logging.FileHandler(log_path), level, formatter)
        logger.info("Logging to file: %s", log_path)

    # Records stop here so applications with root handlers don't see them twice
    logger.propagate = False
    return logger


def get_logger(name: str) -> logging.Logger:
    """
    Logger for a package module.

    Accepts either a name relative to the package (``'processing.reduction'``)
    or a full module name such as ``__name__``.
    """
    if name == PACKAGE_LOGGER or name.startswith(PACKAGE_LOGGER + '.'):
        return logging.getLogger(name)
    return logging.getLogger(f'{PACKAGE_LOGGER}.{name}')


def set_log_level(level: LevelType) -> None:
    """
    Change the level of the package logger and all of its handlers.

    Examples:
        >>> set_log_level('ERROR')
    """
    level = _resolve_level(level)
    logger = _package_logger()
    logger.setLevel(level)
    for handler in logger.handlers:
        handler.setLevel(level)


@contextmanager
def log_level(level: LevelType) -> Iterator[logging.Logger]:
    """
    Temporarily change the package log level.

    Examples:
        >>> with log_level('DEBUG'):
        ...     points = dataset.extract_map_features(['temperature'], query)
    """
    logger = _package_logger()
    previous = logger.level
    previous_handlers = [(handler, handler.level) for handler in logger.handlers]
    set_log_level(level)
    try:
        yield logger
    finally:
        logger.setLevel(previous)
        for handler, handler_level in previous_handlers:
            handler.setLevel(handler_level)


# Silent until configured
_default_logger = _package_logger()
if not _default_logger.handlers:
    _default_logger.addHandler(logging.NullHandler())
try:
    _default_logger.setLevel(_resolve_level(DEFAULT_LOG_LEVEL))
except ParameterError:
    # Unknown names in the environment fall back to WARNING
    _default_logger.setLevel(logging.WARNING)
