"""Logging for the lazyspf engine and command line.

Modules log through children of the ``lazyspf`` package logger, obtained
with :func:`get_logger`. The package logger carries one handler (stdout
unless another is given) and its level is the only switch: the search
engine writes its trace at DEBUG, so ``set_global_log_level(DEBUG)`` or
``lazyspf --verbose`` turns it on. Records also propagate to the Python
root logger, which lets pytest's ``caplog`` observe them.
"""

import logging
import sys
from typing import Optional

PACKAGE_LOGGER = "lazyspf"
DEFAULT_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"

_handler_installed = False


def setup_root_logger(
    level: int = logging.INFO,
    format_string: Optional[str] = None,
    handler: Optional[logging.Handler] = None,
) -> logging.Logger:
    """Install the package handler and return the ``lazyspf`` logger.

    Runs once per process (or per :func:`reset_logging`); later calls leave
    the handler and level alone and just return the logger.

    Args:
        level: Initial package level.
        format_string: Record format, ``DEFAULT_FORMAT`` when omitted.
        handler: Destination handler, a stdout ``StreamHandler`` when omitted.
    """
    global _handler_installed

    package_logger = logging.getLogger(PACKAGE_LOGGER)
    if _handler_installed:
        return package_logger

    if handler is None:
        handler = logging.StreamHandler(sys.stdout)
    handler.setFormatter(logging.Formatter(format_string or DEFAULT_FORMAT))

    package_logger.handlers[:] = [handler]
    package_logger.setLevel(level)
    package_logger.propagate = True

    _handler_installed = True
    return package_logger


def get_logger(name: str) -> logging.Logger:
    """Return the logger for ``name`` with its level left to the package logger."""
    setup_root_logger()
    logger = logging.getLogger(name)
    logger.setLevel(logging.NOTSET)
    return logger


def set_global_log_level(level: int) -> None:
    """Set the level of the package logger and of its handlers."""
    package_logger = setup_root_logger()
    package_logger.setLevel(level)
    for handler in package_logger.handlers:
        handler.setLevel(level)


def verbosity_level(verbose: bool = False, quiet: bool = False) -> int:
    """Map the command-line verbosity flags to a level.

    ``verbose`` shows the search trace (DEBUG), ``quiet`` leaves only
    warnings and errors, and ``verbose`` wins when both are set.
    """
    if verbose:
        return logging.DEBUG
    if quiet:
        return logging.WARNING
    return logging.INFO


def reset_logging() -> None:
    """Remove the package handler so the next setup starts from scratch."""
    global _handler_installed
    _handler_installed = False

    package_logger = logging.getLogger(PACKAGE_LOGGER)
    package_logger.handlers.clear()
    package_logger.setLevel(logging.NOTSET)


setup_root_logger()
