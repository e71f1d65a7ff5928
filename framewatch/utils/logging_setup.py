"""Logging configuration and the logging-backed diagnostic sink.

Records are handed to a ``QueueHandler`` so that the frame tick handler
never waits on stream or file I/O; a ``QueueListener`` thread formats and
writes them.

Set environment variable FRAMEWATCH_DEBUG=1 to log at DEBUG level by default.
"""

import atexit
import logging
import os
import queue
from logging.handlers import QueueHandler, QueueListener, RotatingFileHandler
from pathlib import Path
from typing import Optional, Union

from ..constants import LogConstants

DEBUG_LOGGING = os.environ.get(LogConstants.DEBUG_ENV_VAR, "").lower() in (
    "1",
    "true",
    "yes",
)

_listener: Optional[QueueListener] = None
_queue_handler: Optional[QueueHandler] = None
_atexit_registered = False

log = logging.getLogger(__name__)


def ensure_logging() -> None:
    """Start queued logging with default settings unless already active.

    A level already set on the framewatch logger is kept.
    """
    if _listener is not None:
        return
    logger = logging.getLogger(LogConstants.ROOT_LOGGER)
    setup_logging(logger.level or None)


def default_level() -> int:
    return logging.DEBUG if DEBUG_LOGGING else logging.INFO


def setup_logging(
    level: Union[int, str, None] = None,
    log_file: Union[str, Path, None] = None,
) -> logging.Logger:
    """Route framewatch logging through a background queue listener.

    Calling this again while logging is active only updates the level; a
    different log_file is ignored until shutdown_logging() is called.

    Args:
        level: Logging level name or number (default INFO, or DEBUG if
            FRAMEWATCH_DEBUG is set)
        log_file: Optional path of a rotating log file

    Returns:
        The framewatch package logger
    """
    global _listener, _queue_handler, _atexit_registered

    logger = logging.getLogger(LogConstants.ROOT_LOGGER)
    if isinstance(level, str):
        level = logging.getLevelName(level.upper())
        if not isinstance(level, int):
            level = None
    logger.setLevel(level if level is not None else default_level())

    if _listener is not None:
        if log_file is not None:
            log.debug("Logging already active, ignoring log file %s", log_file)
        return logger

    fmt = logging.Formatter(LogConstants.FORMAT)
    handlers = []

    ch = logging.StreamHandler()
    ch.setFormatter(fmt)
    handlers.append(ch)

    if log_file is not None:
        path = Path(log_file)
        path.parent.mkdir(parents=True, exist_ok=True)
        fh = RotatingFileHandler(
            str(path),
            maxBytes=LogConstants.MAX_BYTES,
            backupCount=LogConstants.BACKUP_COUNT,
            encoding="utf-8",
        )
        fh.setFormatter(fmt)
        handlers.append(fh)

    log_queue: "queue.Queue[logging.LogRecord]" = queue.Queue()
    _queue_handler = QueueHandler(log_queue)
    _listener = QueueListener(log_queue, *handlers, respect_handler_level=True)
    _listener.start()

    logger.addHandler(_queue_handler)
    logger.propagate = False

    if not _atexit_registered:
        atexit.register(shutdown_logging)
        _atexit_registered = True

    return logger


def shutdown_logging() -> None:
    """Flush queued records and stop the listener thread."""
    global _listener, _queue_handler

    if _listener is None:
        return

    _listener.stop()
    for handler in _listener.handlers:
        handler.close()

    logger = logging.getLogger(LogConstants.ROOT_LOGGER)
    if _queue_handler is not None:
        logger.removeHandler(_queue_handler)
    logger.propagate = True

    _listener = None
    _queue_handler = None


class LoggingDiagnosticSink:
    """Diagnostic sink that writes to ``framewatch.<tag>`` loggers.

    Creating a sink starts queued logging if the host has not set it up,
    so records are written on the listener thread and never on the caller's.
    Logging errors are handled by the handlers themselves, so neither method
    raises into the caller.
    """

    def __init__(self, root: str = LogConstants.ROOT_LOGGER):
        ensure_logging()
        self.root = root
        self._loggers = {}

    def _logger(self, tag: str) -> logging.Logger:
        logger = self._loggers.get(tag)
        if logger is None:
            logger = logging.getLogger(f"{self.root}.{tag}")
            self._loggers[tag] = logger
        return logger

    def info(self, tag: str, message: str) -> None:
        self._logger(tag).info(message)

    def warn(self, tag: str, message: str) -> None:
        self._logger(tag).warning(message)
