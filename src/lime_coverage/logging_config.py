"""
Logging configuration for lime-coverage.

Records from the ``lime_coverage`` logger tree go to stderr through rich, so
they never mix with the report printed on stdout. The command line maps its
flags onto levels:

    --quiet     ERROR
    (default)   WARNING
    --verbose   DEBUG (also shows where each record came from)
"""

import logging
from typing import Optional

from rich.console import Console
from rich.logging import RichHandler

ROOT_LOGGER = "lime_coverage"

FILE_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"


def log_level(verbose: bool = False, quiet: bool = False) -> int:
    """Level for the CLI flags; --quiet wins over --verbose."""
    if quiet:
        return logging.ERROR
    if verbose:
        return logging.DEBUG
    return logging.WARNING


def setup_logging(
    verbose: bool = False, quiet: bool = False, log_file: Optional[str] = None
) -> logging.Logger:
    """
    Attach fresh handlers to the lime_coverage logger.

    Calling it again replaces the handlers of the previous call, so running
    several commands in one process does not duplicate output.

    Args:
        verbose: Log DEBUG records with their source location
        quiet: Only log errors
        log_file: Optional file that receives a plain-text copy of the records

    Returns:
        The configured lime_coverage logger
    """
    level = log_level(verbose, quiet)
    logger = logging.getLogger(ROOT_LOGGER)

    for handler in list(logger.handlers):
        logger.removeHandler(handler)
        handler.close()

    rich_handler = RichHandler(
        console=Console(stderr=True),
        rich_tracebacks=True,
        tracebacks_show_locals=verbose,
        markup=False,
        show_path=verbose,
    )
    rich_handler.setFormatter(logging.Formatter("%(message)s", datefmt="[%X]"))
    logger.addHandler(rich_handler)

    if log_file:
        file_handler = logging.FileHandler(log_file, mode="a", encoding="utf-8")
        file_handler.setFormatter(logging.Formatter(FILE_FORMAT, datefmt="%Y-%m-%d %H:%M:%S"))
        logger.addHandler(file_handler)

    logger.setLevel(level)
    logger.propagate = False
    return logger


def get_logger(name: Optional[str] = None) -> logging.Logger:
    """Logger for a module, always inside the lime_coverage tree."""
    if name is None:
        return logging.getLogger(ROOT_LOGGER)
    if not name.startswith(ROOT_LOGGER):
        name = f"{ROOT_LOGGER}.{name}"
    return logging.getLogger(name)
