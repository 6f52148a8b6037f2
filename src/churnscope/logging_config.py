"""
Logging configuration for churnscope.

Records go to stderr through rich so stdout stays clean for tables and
``--json`` output. The CLI calls ``setup_logging`` once per command with the
verbosity and log file resolved from configuration; library code only asks
for named loggers via ``get_logger``.
"""

import logging
from typing import Optional

from rich.console import Console
from rich.logging import RichHandler

LOGGER_NAME = "churnscope"
FILE_LOG_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"


def setup_logging(
    verbose: bool = False, quiet: bool = False, log_file: Optional[str] = None
) -> logging.Logger:
    """
    Install the stderr handler (and optionally a file handler) on the root logger.

    Args:
        verbose: Log at DEBUG, with timestamps and source locations
        quiet: Log only errors; wins over ``verbose``
        log_file: Append records to this file as well

    Returns:
        The ``churnscope`` logger
    """
    if quiet:
        level = logging.ERROR
    elif verbose:
        level = logging.DEBUG
    else:
        level = logging.WARNING

    handlers: list[logging.Handler] = [
        RichHandler(
            console=Console(stderr=True),
            rich_tracebacks=True,
            tracebacks_show_locals=verbose,
            markup=False,
            show_time=verbose,
            show_path=verbose,
        )
    ]

    if log_file:
        file_handler = logging.FileHandler(log_file, mode="a", encoding="utf-8")
        file_handler.setFormatter(logging.Formatter(FILE_LOG_FORMAT, datefmt="%Y-%m-%d %H:%M:%S"))
        handlers.append(file_handler)

    # Each CLI invocation reconfigures; earlier handlers are closed and replaced
    logging.basicConfig(level=level, format="%(message)s", handlers=handlers, force=True)

    logger = logging.getLogger(LOGGER_NAME)
    logger.setLevel(level)
    return logger


def get_logger(name: Optional[str] = None) -> logging.Logger:
    """Return a logger under the ``churnscope`` namespace.

    ``get_logger("parsing.ownership")`` and
    ``get_logger("churnscope.parsing.ownership")`` name the same logger.
    """
    if name is None:
        return logging.getLogger(LOGGER_NAME)
    if not name.startswith(LOGGER_NAME):
        name = f"{LOGGER_NAME}.{name}"
    return logging.getLogger(name)
