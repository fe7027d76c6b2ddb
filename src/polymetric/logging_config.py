"""
Logging setup for polymetric.

Library modules only ask for loggers under the ``polymetric`` namespace; the
CLI calls ``setup_logging()`` once per command. Log records go to stderr so
JSON reports and stripped source on stdout stay machine-readable.
"""

import logging
from typing import Optional

from rich.console import Console
from rich.logging import RichHandler

LOGGER_NAME = "polymetric"

_FILE_FORMAT = "%(asctime)s %(levelname)-8s %(name)s [%(threadName)s] %(message)s"


def _level(verbose: bool, quiet: bool) -> int:
    if quiet:
        return logging.ERROR
    return logging.DEBUG if verbose else logging.WARNING


def setup_logging(
    verbose: bool = False, quiet: bool = False, log_file: Optional[str] = None
) -> logging.Logger:
    """
    Route polymetric logging to a rich stderr handler, plus an optional file.

    Args:
        verbose: DEBUG level, with timestamps and source locations
        quiet: ERROR level only; wins over ``verbose``
        log_file: Append plain-text records here as well

    Returns:
        The ``polymetric`` package logger
    """
    level = _level(verbose, quiet)

    handlers: list[logging.Handler] = [
        RichHandler(
            console=Console(stderr=True),
            level=level,
            rich_tracebacks=True,
            tracebacks_show_locals=verbose,
            # file paths in messages contain [brackets]
            markup=False,
            show_time=verbose,
            show_path=verbose,
        )
    ]
    if log_file:
        # the runner logs from worker threads, so keep the thread name
        file_handler = logging.FileHandler(log_file, mode="a", encoding="utf-8")
        file_handler.setFormatter(logging.Formatter(_FILE_FORMAT))
        handlers.append(file_handler)

    logging.basicConfig(level=level, format="%(message)s", handlers=handlers, force=True)

    logger = logging.getLogger(LOGGER_NAME)
    logger.setLevel(level)
    return logger


def get_logger(name: Optional[str] = None) -> logging.Logger:
    """Logger under the polymetric namespace; ``__name__`` is the usual argument."""
    if not name or name == LOGGER_NAME:
        return logging.getLogger(LOGGER_NAME)
    if not name.startswith(LOGGER_NAME + "."):
        name = f"{LOGGER_NAME}.{name}"
    return logging.getLogger(name)
