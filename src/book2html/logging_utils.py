#  Copyright (c) 2025 Tom Villani, Ph.D.
"""Logging setup for the book2html command line tool.

Only the ``book2html`` logger hierarchy is configured. The root logger, and
with it the logging of any application that embeds the renderer, is left
alone.
"""

from __future__ import annotations

import logging
import sys
from typing import Optional

PACKAGE_LOGGER_NAME = "book2html"

LOG_FORMAT = "%(levelname)s: %(message)s"
TRACE_FORMAT = "[%(asctime)s] [%(levelname)s] [%(name)s] %(message)s"
TRACE_DATE_FORMAT = "%Y-%m-%d %H:%M:%S"


def configure_logging(
    log_level: int | str,
    log_file: Optional[str] = None,
    trace_mode: bool = False,
) -> logging.Logger:
    """Send book2html log records to stderr and, optionally, a file.

    Calling it again replaces the handlers installed by the previous call.

    Parameters
    ----------
    log_level : int | str
        Numeric level or level name; unknown names mean ``INFO``
    log_file : str, optional
        File to append log output to. If it cannot be opened a warning is
        logged and only stderr is used.
    trace_mode : bool, default False
        Add timestamps and logger names to every line

    Returns
    -------
    logging.Logger
        The ``book2html`` package logger

    """
    if isinstance(log_level, int):
        level = log_level
    else:
        level = getattr(logging, log_level.upper(), logging.INFO)

    package_logger = logging.getLogger(PACKAGE_LOGGER_NAME)
    for old_handler in package_logger.handlers[:]:
        package_logger.removeHandler(old_handler)
        old_handler.close()
    package_logger.setLevel(level)
    package_logger.propagate = False

    handlers: list[logging.Handler] = [logging.StreamHandler(sys.stderr)]
    file_error: OSError | None = None
    if log_file:
        try:
            handlers.append(logging.FileHandler(log_file, encoding="utf-8"))
        except OSError as e:
            file_error = e

    if trace_mode:
        formatter = logging.Formatter(TRACE_FORMAT, datefmt=TRACE_DATE_FORMAT)
    else:
        formatter = logging.Formatter(LOG_FORMAT)
    for handler in handlers:
        handler.setFormatter(formatter)
        package_logger.addHandler(handler)

    if file_error is not None:
        package_logger.warning("Could not open log file %s: %s", log_file, file_error)
    return package_logger


def log_exception_chain(error: BaseException, logger: logging.Logger | None = None) -> None:
    """Log an error followed by every exception that caused it.

    Causes are taken from ``__cause__`` (explicit ``raise ... from``) or,
    failing that, ``__context__``, and logged one per line with a leading
    tab.

    Parameters
    ----------
    error : BaseException
        The error to report
    logger : logging.Logger, optional
        Logger to write to, defaults to the ``book2html`` logger

    """
    logger = logger or logging.getLogger(PACKAGE_LOGGER_NAME)
    logger.error("Error: %s", error)

    seen = {id(error)}
    cause = error.__cause__ or error.__context__
    while cause is not None and id(cause) not in seen:
        seen.add(id(cause))
        logger.error("\tCaused By: %s", cause)
        cause = cause.__cause__ or cause.__context__
